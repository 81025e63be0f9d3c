from datetime import datetime, timezone

from documents.domain.entities import Author, Document
from shared.exceptions import ValidationError


def _require_text(value, field: str) -> None:
    if not isinstance(value, str) or not value:
        raise ValidationError(field, f"{field} must not be empty")


def validate_author(author: Author | None) -> None:
    if author is None:
        raise ValidationError("Document author", "Document author must not be null")
    _require_text(author.id, "Author id")
    _require_text(author.name, "Author name")


def validate_document_update(document: Document) -> None:
    """Check the fields an update replaces: title, content and author."""
    _require_text(document.title, "Document title")
    _require_text(document.content, "Document content")
    validate_author(document.author)


def validate_new_document(document: Document) -> None:
    """Check every field required before a document is first stored."""
    validate_document_update(document)
    if not isinstance(document.created, datetime):
        raise ValidationError("Document created", "Document created must not be null")


def new_author(id: str, name: str) -> Author:
    author = Author(id=id, name=name)
    validate_author(author)
    return author


def new_document(
    title: str,
    content: str,
    author: Author,
    created: datetime | None = None,
    id: str | None = None,
) -> Document:
    """Build a validated document; ``created`` defaults to the current UTC time."""
    document = Document(
        id=id,
        title=title,
        content=content,
        author=author,
        created=created if created is not None else datetime.now(timezone.utc),
    )
    validate_new_document(document)
    return document
