"""
Result of a single Supabase table query.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FetchResult:
    """
    What came back from one GET against /rest/v1/<table>.

    The body is kept exactly as received; callers decide whether to print,
    parse, or discard it.
    """
    url: str
    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def error(self) -> str | None:
        """Error message for non-2xx results, None on success."""
        if self.ok:
            return None
        return f"Supabase error ({self.status_code}): {self.body}"
