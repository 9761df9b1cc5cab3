"""Blocking HTTP client for Google Books API."""
import requests
from typing import List, Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class GoogleBooksClient:
    """Synchronous client for hosts that cannot run an event loop."""

    BASE_URL = "https://www.googleapis.com/books/v1/volumes"
    MAX_RESULTS_LIMIT = 40

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize Google Books API client.

        Args:
            api_key: Optional API key (increases rate limits)
            timeout: Request timeout in seconds (None waits indefinitely)
        """
        self.api_key = api_key
        self.timeout = timeout

        # Create session for connection pooling
        self.session = requests.Session()

    def search(
        self,
        query: str,
        max_results: int = 10
    ) -> Optional[Dict[str, Any]]:
        """
        Search for books with a single request.

        Args:
            query: Search query string
            max_results: Maximum results to return (1-40)

        Returns:
            API response JSON, or None on request error, non-200 status
            or an undecodable body
        """
        params = {
            "q": query,
            "maxResults": min(max_results, self.MAX_RESULTS_LIMIT)  # API limit
        }

        if self.api_key:
            params["key"] = self.api_key

        try:
            logger.info(f"Request: {self.BASE_URL} q={query}")
            response = self.session.get(self.BASE_URL, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed for query {query!r}: {e}")
            return None

        if response.status_code != 200:
            logger.warning(f"Status {response.status_code} for query: {query}")
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON for query {query!r}: {e}")
            return None

    def search_multiple(
        self,
        queries: List[str],
        max_results: int = 10
    ) -> List[Optional[Dict[str, Any]]]:
        """Search each query in turn; failed queries are None, in query order."""
        return [self.search(query, max_results) for query in queries]

    def close(self):
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
