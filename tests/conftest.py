"""Root test fixtures: a fresh repository and the three-document sample set"""

from datetime import datetime

import pytest

from docrepo.crud.memory_repo import MemoryRepo
from docrepo.crud.models import Author, Document


T0 = datetime(2024, 1, 1, 9, 0)
T1 = datetime(2024, 2, 1, 9, 0)
T2 = datetime(2024, 3, 1, 9, 0)


@pytest.fixture(name="repo")
def repo_fixture():
    """Empty repository owned by the test."""
    return MemoryRepo()


@pytest.fixture(name="docs")
def docs_fixture(repo):
    """D1, D2, D3 upserted into repo, returned as a tuple."""
    d1 = Document(id="d1", title="Report A", content="budget figures", author=Author(id="a1", name="Ann"), created=T0)
    d2 = Document(id="d2", title="Report B", content="summary", author=Author(id="a2", name="Bo"), created=T1)
    d3 = Document(id="d3", title="Memo", content="budget notes", author=Author(id="a1", name="Ann"), created=T2)
    for d in (d1, d2, d3):
        repo.upsert(d)
    return d1, d2, d3
