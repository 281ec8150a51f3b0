"""Data models for the catalog client."""
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Optional, List, Dict, Any


@dataclass(frozen=True)
class Book:
    """Book record as returned by the server."""
    id: Any
    title: str
    author: str
    genre: str
    description: Optional[str] = None
    cover_url: Optional[str] = None
    content: Optional[str] = None
    audio_summary_url: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    @property
    def tags_str(self) -> str:
        """Format tags as hashtags."""
        return " ".join(f"#{tag}" for tag in self.tags) if self.tags else ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "genre": self.genre,
            "description": self.description,
            "cover_url": self.cover_url,
            "content": self.content,
            "audio_summary_url": self.audio_summary_url,
            "tags": self.tags,
        }


@dataclass
class FilterCriteria:
    """Filters applied to the list request."""
    genre: str = ""
    query: str = ""

    # Filter field -> query parameter name
    PARAMS = {"genre": "genre", "query": "q"}

    def to_params(self) -> Dict[str, str]:
        """Build query parameters, leaving out empty filters."""
        params = {}
        for name, param in self.PARAMS.items():
            value = getattr(self, name)
            if value:
                params[param] = value
        return params


@dataclass
class DraftForm:
    """Unsubmitted book. Every field is raw text, tags included."""
    title: str = ""
    author: str = ""
    genre: str = ""
    description: str = ""
    cover_url: str = ""
    content: str = ""
    audio_summary_url: str = ""
    tags: str = ""

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def is_empty(self) -> bool:
        return all(getattr(self, name) == "" for name in self.field_names())

    def to_payload(self) -> Dict[str, Any]:
        """
        Build the create payload.

        Tags are split on commas and trimmed; blank pieces are dropped.
        No remaining tags gives None rather than an empty list.

        Returns:
            JSON-ready dict for POST /api/books
        """
        payload: Dict[str, Any] = {
            name: getattr(self, name)
            for name in self.field_names()
            if name != "tags"
        }
        payload["tags"] = split_tags(self.tags)
        return payload


def split_tags(raw: str) -> Optional[List[str]]:
    """Split comma separated tags; None when nothing is left."""
    tags = [piece.strip() for piece in (raw or "").split(",")]
    tags = [tag for tag in tags if tag]
    return tags or None


class Phase(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class RequestStatus:
    """Lifecycle of one request slot."""
    phase: Phase = Phase.IDLE
    message: Optional[str] = None

    @classmethod
    def idle(cls) -> "RequestStatus":
        return cls(Phase.IDLE)

    @classmethod
    def loading(cls) -> "RequestStatus":
        return cls(Phase.LOADING)

    @classmethod
    def succeeded(cls) -> "RequestStatus":
        return cls(Phase.SUCCEEDED)

    @classmethod
    def failed(cls, message: str) -> "RequestStatus":
        return cls(Phase.FAILED, message)

    @property
    def is_loading(self) -> bool:
        return self.phase is Phase.LOADING

    @property
    def is_failed(self) -> bool:
        return self.phase is Phase.FAILED


class ErrorBanner:
    """Single user-visible error slot shared by list and create."""

    def __init__(self):
        self.message: Optional[str] = None

    def show(self, message: str):
        self.message = message

    def clear(self):
        self.message = None

    def __bool__(self) -> bool:
        return bool(self.message)
