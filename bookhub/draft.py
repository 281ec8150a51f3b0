"""Create form state and submission."""
from typing import Awaitable, Callable, Optional
import logging

from bookhub.async_client import AsyncBooksClient, BooksApiError
from bookhub.models import DraftForm, ErrorBanner, RequestStatus

logger = logging.getLogger(__name__)

CREATE_FALLBACK_MESSAGE = "Failed to create book"


class DraftFormController:
    """Owns the draft of a new book and submits it."""

    def __init__(
        self,
        client: AsyncBooksClient,
        on_created: Optional[Callable[[], Awaitable[object]]] = None,
        banner: Optional[ErrorBanner] = None
    ):
        """
        Args:
            client: API client used for the create request
            on_created: Awaited after a successful create, typically the
                catalog's reload
            banner: Error slot shared with the catalog view
        """
        self.client = client
        self.on_created = on_created
        self.banner = banner if banner is not None else ErrorBanner()
        self.draft = DraftForm()
        self.status = RequestStatus.idle()

    def set_field(self, name: str, value: str):
        """Update one draft field. No validation happens here."""
        if name not in DraftForm.field_names():
            raise ValueError(f"Unknown draft field: {name!r}")
        setattr(self.draft, name, value or "")

    async def submit(self) -> bool:
        """
        Send the draft to the server.

        On failure the draft is kept and the server's message (or a
        fallback) goes to the banner. On success the draft is cleared and
        ``on_created`` runs.

        Returns:
            True if the book was created
        """
        self.banner.clear()
        self.status = RequestStatus.loading()

        payload = self.draft.to_payload()
        try:
            await self.client.create_book(payload)
        except BooksApiError as e:
            message = e.body or CREATE_FALLBACK_MESSAGE
            logger.warning(f"Create failed ({e.status_code}): {message}")
            self.banner.show(message)
            self.status = RequestStatus.failed(message)
            return False

        self.draft = DraftForm()
        self.status = RequestStatus.succeeded()

        if self.on_created is not None:
            await self.on_created()
        return True
