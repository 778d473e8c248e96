from __future__ import annotations
from abc import ABC, abstractmethod

from docrepo.crud.models import Document, SearchRequest


class InvalidArgumentError(ValueError):
    """Raised when a caller passes a malformed document id."""


class DocumentRepo(ABC):
    @abstractmethod
    def upsert(self, doc: Document) -> Document:
        """Store doc under its id, generating one on the doc itself when blank."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        """Return the stored doc or None; raise InvalidArgumentError on a blank id."""
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest) -> list[Document]:
        raise NotImplementedError

    @abstractmethod
    def all(self) -> list[Document]:
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError
