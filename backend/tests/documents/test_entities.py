from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from documents.domain.entities import Author, Document, SearchRequest, as_utc
from documents.domain.validation import new_author, new_document
from shared.exceptions import ValidationError


def test_new_author():
    author = new_author("author1", "John Doe")
    assert author == Author(id="author1", name="John Doe")


@pytest.mark.parametrize("id, name", [("", "John Doe"), ("author1", ""), (None, "John Doe")])
def test_new_author_rejects_empty_fields(id, name):
    with pytest.raises(ValidationError):
        new_author(id, name)


def test_author_is_immutable():
    author = Author(id="author1", name="John Doe")
    with pytest.raises(FrozenInstanceError):
        author.name = "Jane"


def test_new_document_defaults_created_to_now():
    before = datetime.now(timezone.utc)
    doc = new_document("Title", "Body", Author(id="a", name="A"))
    assert doc.id is None
    assert before <= doc.created <= datetime.now(timezone.utc)


def test_new_document_rejects_missing_title():
    with pytest.raises(ValidationError, match="Document title must not be empty"):
        new_document("", "Body", Author(id="a", name="A"))


def test_new_document_rejects_missing_author():
    with pytest.raises(ValidationError, match="Document author must not be null"):
        new_document("Title", "Body", None)


def test_document_is_immutable():
    doc = new_document("Title", "Body", Author(id="a", name="A"))
    with pytest.raises(FrozenInstanceError):
        doc.title = "Other"


def test_document_created_is_normalised_to_utc():
    naive = Document(title="T", content="C", author=Author(id="a", name="A"), created=datetime(2024, 1, 1))
    assert naive.created == datetime(2024, 1, 1, tzinfo=timezone.utc)

    offset = timezone(timedelta(hours=2))
    shifted = Document(
        title="T",
        content="C",
        author=Author(id="a", name="A"),
        created=datetime(2024, 1, 1, 2, 0, tzinfo=offset),
    )
    assert shifted.created.tzinfo == timezone.utc
    assert shifted.created == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_as_utc_keeps_aware_utc_values():
    value = datetime(2024, 1, 1, 12, 30, 0, 123000, tzinfo=timezone.utc)
    assert as_utc(value) == value


def test_search_request_defaults_to_no_criteria():
    request = SearchRequest()
    assert request.title_prefixes is None
    assert request.contains_contents is None
    assert request.author_ids is None
    assert request.created_from is None
    assert request.created_to is None


def test_search_request_normalises_values_to_frozensets():
    request = SearchRequest(title_prefixes=["Java", "Java"], author_ids=("a1",), contains_contents="lambda")
    assert request.title_prefixes == frozenset({"Java"})
    assert request.author_ids == frozenset({"a1"})
    assert request.contains_contents == frozenset({"lambda"})


def test_search_request_is_hashable():
    assert hash(SearchRequest(author_ids=["a1"])) == hash(SearchRequest(author_ids={"a1"}))
