"""Synchronous backend health check."""
import time
import requests
from dataclasses import dataclass
from typing import Optional
import logging

logger = logging.getLogger(__name__)


@dataclass
class ProbeResult:
    """Outcome of a backend check."""
    url: str
    reachable: bool
    status_code: Optional[int] = None
    elapsed_ms: Optional[float] = None
    book_count: Optional[int] = None
    error: Optional[str] = None

    @property
    def healthy(self) -> bool:
        return (
            self.reachable
            and self.error is None
            and self.status_code is not None
            and 200 <= self.status_code < 300
        )


class BackendProbe:
    """Checks that the book API answers on its list endpoint."""

    def __init__(self, base_url: str, timeout: Optional[float] = 10):
        """
        Initialize probe.

        Args:
            base_url: Backend address
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        # Create session for connection pooling
        self.session = requests.Session()

    def check(self) -> ProbeResult:
        """
        Issue one GET against the list endpoint.

        Returns:
            ProbeResult; never raises for network errors
        """
        url = f"{self.base_url}/api/books"
        start = time.monotonic()
        try:
            logger.info(f"Checking backend: {url}")
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning(f"Backend unreachable: {e}")
            return ProbeResult(url=url, reachable=False, error=str(e))

        elapsed_ms = (time.monotonic() - start) * 1000
        result = ProbeResult(
            url=url,
            reachable=True,
            status_code=response.status_code,
            elapsed_ms=round(elapsed_ms, 1)
        )

        if response.ok:
            try:
                items = response.json().get("items") or []
                result.book_count = len(items)
            except (ValueError, AttributeError) as e:
                result.error = f"Unexpected response body: {e}"
        else:
            result.error = response.text or f"HTTP {response.status_code}"
            logger.warning(f"Backend returned {response.status_code}")

        return result

    def close(self):
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
