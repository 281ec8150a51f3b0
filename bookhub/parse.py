"""Parse book list responses from the catalog API."""
from typing import Dict, Any, List
from bookhub.models import Book

REQUIRED_FIELDS = ("title", "author", "genre")
OPTIONAL_FIELDS = ("description", "cover_url", "content", "audio_summary_url")


def _text_or_empty(value):
    return "" if value is None else value


def parse_book(item: Dict[str, Any]) -> Book:
    """
    Parse a single book item.

    Values are kept as the server sent them. Missing or null required
    strings become "" and missing or null tags become [].

    Args:
        item: One entry of the response's ``items`` array

    Returns:
        Book object

    Raises:
        ValueError: If the item is not an object
    """
    if not isinstance(item, dict):
        raise ValueError(f"Book item must be an object, got {type(item).__name__}")

    tags = item.get("tags")
    if tags is None:
        tags = []

    return Book(
        id=item.get("id"),
        tags=tags,
        **{name: _text_or_empty(item.get(name)) for name in REQUIRED_FIELDS},
        **{name: item.get(name) for name in OPTIONAL_FIELDS}
    )


def parse_books_response(response_json: Any) -> List[Book]:
    """
    Parse a full list response.

    Order is preserved and nothing is deduplicated or dropped.

    Args:
        response_json: Decoded body of GET /api/books

    Returns:
        List of Book objects (empty if ``items`` is absent)

    Raises:
        ValueError: If the body is not an object or ``items`` is not an array
    """
    if not isinstance(response_json, dict):
        raise ValueError("Book list response must be a JSON object")

    items = response_json.get("items") or []
    if not isinstance(items, list):
        raise ValueError("Book list 'items' must be an array")

    return [parse_book(item) for item in items]
