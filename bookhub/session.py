"""One browsing session: catalog list plus create form."""
from typing import Optional
import logging

from bookhub.async_client import AsyncBooksClient
from bookhub.catalog import CatalogController
from bookhub.config import Config
from bookhub.draft import DraftFormController
from bookhub.models import ErrorBanner

logger = logging.getLogger(__name__)


class CatalogSession:
    """Wires the catalog and the create form around a shared error banner."""

    def __init__(self, client: AsyncBooksClient):
        self.client = client
        self.banner = ErrorBanner()
        self.catalog = CatalogController(client, banner=self.banner)
        self.form = DraftFormController(
            client,
            on_created=self.catalog.reload,
            banner=self.banner
        )
        self._started = False

    @classmethod
    def from_config(cls, config: Config, transport=None) -> "CatalogSession":
        client = AsyncBooksClient(
            config.BACKEND_URL,
            timeout=config.DEFAULT_TIMEOUT,
            transport=transport
        )
        return cls(client)

    @property
    def backend_url(self) -> str:
        return self.client.base_url

    @property
    def error(self) -> Optional[str]:
        return self.banner.message

    async def start(self):
        """Initial load with empty filters. Runs once per session."""
        if self._started:
            return
        self._started = True
        logger.info(f"Session started against {self.backend_url}")
        await self.catalog.reload()

    async def apply(self) -> bool:
        """Reload with the filters currently set."""
        return await self.catalog.reload()

    async def close(self):
        await self.client.close()

    async def __aenter__(self):
        try:
            await self.start()
        except BaseException:
            await self.close()
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
