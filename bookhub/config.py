"""Configuration management."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _optional_float(value):
    return float(value) if value else None


class Config:
    """Application configuration."""

    # Backend
    BACKEND_URL = os.getenv("BOOKHUB_BACKEND_URL", "http://localhost:8000").rstrip("/")

    # No timeout unless one is configured
    DEFAULT_TIMEOUT = _optional_float(os.getenv("BOOKHUB_TIMEOUT"))

    LOG_LEVEL = os.getenv("BOOKHUB_LOG_LEVEL", "INFO").upper()
