"""Async HTTP client for parallel requests."""
import asyncio
import httpx
from typing import List, Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class AsyncGoogleBooksClient:
    """Async client for parallel book searches."""

    BASE_URL = "https://www.googleapis.com/books/v1/volumes"
    MAX_RESULTS_LIMIT = 40

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        max_concurrent: int = 5,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize async client.

        Args:
            api_key: Optional API key
            timeout: Request timeout in seconds (None waits indefinitely)
            max_concurrent: Maximum concurrent requests
            transport: Alternative httpx transport, e.g. a mock in tests
        """
        self.api_key = api_key
        self.timeout = timeout
        self.semaphore = asyncio.Semaphore(max_concurrent)

        # Create async HTTP client
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def search(
        self,
        query: str,
        max_results: int = 10
    ) -> Optional[Dict[str, Any]]:
        """
        Search for books asynchronously.

        Args:
            query: Search query
            max_results: Max results

        Returns:
            API response, or None on transport error, non-200 status
            or an undecodable body
        """
        params = {
            "q": query,
            "maxResults": min(max_results, self.MAX_RESULTS_LIMIT)
        }

        if self.api_key:
            params["key"] = self.api_key

        # Use semaphore to limit concurrency
        async with self.semaphore:
            try:
                logger.info(f"Async request: {query} (maxResults={params['maxResults']})")
                response = await self.client.get(self.BASE_URL, params=params)
            except httpx.HTTPError as e:
                logger.error(f"Async request failed for query {query!r}: {e}")
                return None

        if response.status_code != 200:
            logger.warning(f"Status {response.status_code} for query: {query}")
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON for query {query!r}: {e}")
            return None

    async def search_multiple(
        self,
        queries: List[str],
        max_results: int = 10
    ) -> List[Optional[Dict[str, Any]]]:
        """
        Search multiple queries in parallel.

        Args:
            queries: List of search queries
            max_results: Max results per query

        Returns:
            One entry per query, in query order; failed queries are None
        """
        tasks = [
            self.search(query, max_results)
            for query in queries
        ]

        return list(await asyncio.gather(*tasks))

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
