"""Document, author and search request models"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Author(BaseModel):
    """Immutable author reference attached to a document"""
    model_config = ConfigDict(frozen=True)

    id:   Optional[str] = None
    name: Optional[str] = None


class Document(BaseModel):
    """The stored unit; `id` is assigned by the repository when missing"""
    id:      Optional[str] = None
    title:   Optional[str] = None
    content: Optional[str] = None
    author:  Optional[Author] = None
    created: Optional[datetime] = None     # caller-owned, never rewritten by the repo


class SearchRequest(BaseModel):
    """Independent optional filters; None or empty means no constraint."""
    title_prefixes:    Optional[set[str]] = None
    contains_contents: Optional[set[str]] = None
    author_ids:        Optional[set[str]] = None
    created_from:      Optional[datetime] = None     # exclusive
    created_to:        Optional[datetime] = None     # exclusive

    def active_filters(self) -> list[str]:
        """Names of the fields that constrain a search."""
        active = []
        for name in ("title_prefixes", "contains_contents", "author_ids"):
            if getattr(self, name):
                active.append(name)
        for name in ("created_from", "created_to"):
            if getattr(self, name) is not None:
                active.append(name)
        return active
