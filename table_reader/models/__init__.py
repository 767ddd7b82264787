from .fetch_result import FetchResult

__all__ = [
    "FetchResult",
]
