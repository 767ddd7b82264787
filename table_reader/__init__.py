from .models import FetchResult
from .services import SupabaseTableClient, SupabaseClientError, SupabaseRequestError

__all__ = [
    "FetchResult",
    "SupabaseTableClient",
    "SupabaseClientError",
    "SupabaseRequestError",
]
