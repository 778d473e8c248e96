import logging
import threading
from dataclasses import dataclass, field

from docrepo.core.search import filter_documents
from docrepo.core.utils.ids import is_blank, new_id
from docrepo.crud.models import Document, SearchRequest
from docrepo.crud.repo import DocumentRepo, InvalidArgumentError


logger = logging.getLogger(__name__)


@dataclass
class MemoryRepo(DocumentRepo):
    _docs: dict[str, Document] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def upsert(self, doc: Document) -> Document:
        if is_blank(doc.id):
            doc.id = new_id()
            logger.debug("Generated id %s", doc.id)
        with self._lock:
            self._docs[doc.id] = doc
        return doc

    def find_by_id(self, doc_id: str) -> Document | None:
        if is_blank(doc_id):
            raise InvalidArgumentError("id is null or blank")
        with self._lock:
            return self._docs.get(doc_id)

    def search(self, request: SearchRequest) -> list[Document]:
        results = filter_documents(self.all(), request)
        logger.debug("Search on %s matched %d document(s)", request.active_filters() or "no filters", len(results))
        return results

    def all(self) -> list[Document]:
        with self._lock:
            return list(self._docs.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)
