"""Async HTTP client for the book collection endpoint."""
import httpx
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class BooksApiError(Exception):
    """A list or create request did not succeed."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class AsyncBooksClient:
    """Async client for listing and creating books."""

    BOOKS_PATH = "/api/books"

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize async client.

        Args:
            base_url: Backend address, e.g. http://localhost:8000
            timeout: Request timeout in seconds (None waits indefinitely)
            transport: Optional httpx transport, used by tests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport
        )

    async def list_books(self, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """
        Fetch the book list.

        Args:
            params: Query parameters; only non-empty filters should be passed

        Returns:
            Decoded JSON body

        Raises:
            BooksApiError: On transport failure, non-2xx status or invalid JSON
        """
        params = params or {}
        try:
            logger.info(f"GET {self.BOOKS_PATH} params={params}")
            response = await self.client.get(self.BOOKS_PATH, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"List request failed: {e}")
            raise BooksApiError(str(e)) from e

        if not response.is_success:
            logger.warning(f"List request returned {response.status_code}")
            raise BooksApiError(
                f"Unexpected status {response.status_code}",
                status_code=response.status_code,
                body=response.text
            )

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"List response is not JSON: {e}")
            raise BooksApiError("Invalid JSON in list response", response.status_code) from e

    async def create_book(self, payload: Dict[str, Any]) -> None:
        """
        Create a book. The response body of a successful create is ignored.

        Raises:
            BooksApiError: On transport failure or non-2xx status; ``body``
                holds the response text
        """
        try:
            logger.info(f"POST {self.BOOKS_PATH} title={payload.get('title')!r}")
            response = await self.client.post(self.BOOKS_PATH, json=payload)
        except httpx.HTTPError as e:
            logger.warning(f"Create request failed: {e}")
            raise BooksApiError(str(e)) from e

        if not response.is_success:
            logger.warning(f"Create request returned {response.status_code}: {response.text}")
            raise BooksApiError(
                f"Unexpected status {response.status_code}",
                status_code=response.status_code,
                body=response.text
            )

        logger.info(f"Created book: {response.status_code}")

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
