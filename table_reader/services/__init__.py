from .supabase_client import SupabaseTableClient, SupabaseClientError, SupabaseRequestError

__all__ = [
    "SupabaseTableClient",
    "SupabaseClientError",
    "SupabaseRequestError",
]
