"""Document identifier generation and blank-id checks"""

from uuid import uuid4


def is_blank(value: str | None) -> bool:
    """True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()


def new_id() -> str:
    """Return a random UUID4 string for a new document."""
    return str(uuid4())
