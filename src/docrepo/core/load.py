"""Seed file loading: YAML/JSON document lists into a repository"""

from pathlib import Path
from typing import Any, Iterable

import yaml

from docrepo.crud.models import Document
from docrepo.crud.repo import DocumentRepo


def _read_entries(path: Path) -> list[dict[str, Any]]:
    """Return the raw document mappings from a seed file."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if data is None:
        return []
    if isinstance(data, dict):
        if "documents" not in data:
            raise ValueError(f"Invalid {path.name}: expected a list of document mappings")
        data = data["documents"] or []
    if not isinstance(data, list) or not all(isinstance(e, dict) for e in data):
        raise ValueError(f"Invalid {path.name}: expected a list of document mappings")
    return data


def load_documents(path: str | Path) -> list[Document]:
    """Parse and validate every document in a YAML or JSON seed file."""
    return [Document.model_validate(entry) for entry in _read_entries(Path(path))]


def seed_repo(repo: DocumentRepo, documents: Iterable[Document]) -> list[Document]:
    """Upsert documents in order and return them as stored."""
    return [repo.upsert(doc) for doc in documents]
