"""
Supabase REST client for reading a whole table.
Sends one GET to /rest/v1/<table>?select=* and returns the raw body.
"""

import logging
import urllib.parse

import requests

from ..models.fetch_result import FetchResult

logger = logging.getLogger(__name__)

SELECT_ALL = "?select=*"


class SupabaseClientError(Exception):
    """Base exception for Supabase client errors."""
    pass


class SupabaseRequestError(SupabaseClientError):
    """The request never produced an HTTP response (DNS, connect, TLS, timeout)."""
    pass


class SupabaseTableClient:
    """Client for Supabase REST table queries."""

    def __init__(
        self,
        url: str,
        api_key: str,
        timeout: float | None = None,
        encode_table: bool = False,
    ):
        self.url = url
        self.api_key = api_key
        self.timeout = timeout
        self.encode_table = encode_table

    def build_url(self, table: str) -> str:
        """Return <url>/rest/v1/<table>?select=*.

        The table name goes in verbatim unless encode_table is set. requests
        still re-quotes characters that are illegal in a URL when it prepares
        the request, so a space reaches the wire as %20 either way; the flag
        only changes the outcome for reserved characters such as /, ? and #.
        """
        if self.encode_table:
            table = urllib.parse.quote(table, safe="")
        return self.url + "/rest/v1/" + table + SELECT_ALL

    def build_headers(self) -> dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def fetch_table(self, table: str) -> FetchResult:
        """
        Fetch every row of a table.

        Args:
            table: Table name as exposed by PostgREST

        Returns:
            FetchResult for any HTTP status, including 4xx and 5xx

        Raises:
            SupabaseRequestError: No HTTP response was received
        """
        url = self.build_url(table)
        logger.debug(f"GET {url}")

        with requests.Session() as session:
            try:
                response = session.get(url, headers=self.build_headers(), timeout=self.timeout)
            except requests.RequestException as e:
                raise SupabaseRequestError(f"Request to {url} failed: {e}") from e

        logger.info(f"Supabase responded {response.status_code} for table '{table}'")
        return FetchResult(url=url, status_code=response.status_code, body=response.text)
