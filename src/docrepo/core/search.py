"""Search predicates: one per filter dimension, combined by AND"""

from datetime import datetime, timezone
from typing import Iterable

from docrepo.crud.models import Document, SearchRequest


def _utc(value: datetime) -> datetime:
    """Read naive timestamps as UTC so they compare with aware ones."""
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def match_title(doc: Document, prefixes: set[str] | None) -> bool:
    """Title starts with any prefix; no prefixes means no constraint."""
    if not prefixes:
        return True
    return doc.title is not None and any(doc.title.startswith(p) for p in prefixes)


def match_content(doc: Document, fragments: set[str] | None) -> bool:
    """Content contains any fragment; no fragments means no constraint."""
    if not fragments:
        return True
    return doc.content is not None and any(f in doc.content for f in fragments)


def match_author(doc: Document, author_ids: set[str] | None) -> bool:
    """Author id is in the set. A document without an author never matches an active filter."""
    if not author_ids:
        return True
    return doc.author is not None and doc.author.id in author_ids


def match_created_from(doc: Document, created_from: datetime | None) -> bool:
    if created_from is None:
        return True
    return doc.created is not None and _utc(doc.created) > _utc(created_from)


def match_created_to(doc: Document, created_to: datetime | None) -> bool:
    if created_to is None:
        return True
    return doc.created is not None and _utc(doc.created) < _utc(created_to)


def matches(doc: Document, request: SearchRequest) -> bool:
    """True if doc satisfies every active filter in request."""
    return (
        match_title(doc, request.title_prefixes)
        and match_content(doc, request.contains_contents)
        and match_author(doc, request.author_ids)
        and match_created_from(doc, request.created_from)
        and match_created_to(doc, request.created_to)
    )


def filter_documents(docs: Iterable[Document], request: SearchRequest) -> list[Document]:
    """Return docs matching request, preserving input order."""
    return [d for d in docs if matches(d, request)]
