from datetime import datetime, timezone

import pytest

from documents.application.services import DocumentStore
from documents.domain.entities import Author, Document
from documents.infrastructure.memory_repository import InMemoryDocumentRepository


def make_document(
    title: str = "Java Basics",
    content: str = "This is a basic Java document.",
    author: Author | None = None,
    created: datetime | None = None,
    id: str | None = None,
) -> Document:
    """Build an unsaved document with sensible defaults."""
    return Document(
        id=id,
        title=title,
        content=content,
        author=author or Author(id="author1", name="John Doe"),
        created=created or datetime.now(timezone.utc),
    )


@pytest.fixture
def author() -> Author:
    return Author(id="author1", name="John Doe")


@pytest.fixture
def other_author() -> Author:
    return Author(id="author2", name="Jane Smith")


@pytest.fixture
def repo() -> InMemoryDocumentRepository:
    return InMemoryDocumentRepository()


@pytest.fixture
def store(repo) -> DocumentStore:
    return DocumentStore(repo=repo)
