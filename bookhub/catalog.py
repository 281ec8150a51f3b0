"""Catalog list state: filters, loaded books and load status."""
from typing import List, Optional
import logging

from bookhub.async_client import AsyncBooksClient, BooksApiError
from bookhub.models import Book, ErrorBanner, FilterCriteria, RequestStatus
from bookhub.parse import parse_books_response

logger = logging.getLogger(__name__)

LOAD_FALLBACK_MESSAGE = "Failed to load books"


class CatalogController:
    """Owns the filter criteria and the book list shown to the user."""

    def __init__(self, client: AsyncBooksClient, banner: Optional[ErrorBanner] = None):
        self.client = client
        self.banner = banner if banner is not None else ErrorBanner()
        self.filters = FilterCriteria()
        self.books: List[Book] = []
        self.status = RequestStatus.idle()
        # Incremented per reload; only the newest reload may apply its result
        self._generation = 0

    @property
    def loading(self) -> bool:
        return self.status.is_loading

    @property
    def error(self) -> Optional[str]:
        return self.banner.message

    def set_filter(self, field: str, value: str):
        """
        Update one filter. Does not reload.

        Args:
            field: ``genre`` or ``query``
            value: Free text; empty clears the filter
        """
        if field not in FilterCriteria.PARAMS:
            raise ValueError(f"Unknown filter field: {field!r}")
        setattr(self.filters, field, value or "")

    async def reload(self) -> bool:
        """
        Fetch books matching the current filters.

        The book list is replaced on success and left as it was on failure.
        Errors are recorded in the banner, never raised.

        Returns:
            True if this reload's result was applied successfully
        """
        self._generation += 1
        generation = self._generation

        self.banner.clear()
        self.status = RequestStatus.loading()

        params = self.filters.to_params()
        try:
            body = await self.client.list_books(params)
            books = parse_books_response(body)
        except (BooksApiError, ValueError) as e:
            if generation != self._generation:
                logger.info(f"Discarding failure of superseded reload #{generation}")
                return False
            logger.warning(f"Reload failed: {e}")
            self.banner.show(LOAD_FALLBACK_MESSAGE)
            self.status = RequestStatus.failed(LOAD_FALLBACK_MESSAGE)
            return False

        if generation != self._generation:
            logger.info(f"Discarding result of superseded reload #{generation}")
            return False

        self.books = books
        self.status = RequestStatus.succeeded()
        logger.info(f"Loaded {len(books)} books")
        return True
