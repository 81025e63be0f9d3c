"""Demo script: saves a few documents into an in-memory store and queries them.

Usage:
    python scripts/demo.py             # log level from LOG_LEVEL (default INFO)
    python scripts/demo.py DEBUG       # custom log level
"""

import sys
from datetime import datetime, timezone

from documents.application.services import create_document_store
from documents.domain.entities import Document, SearchRequest
from documents.domain.validation import new_author, new_document
from shared.config import settings
from shared.logging_config import setup_logging

AUTHORS = [
    {"id": "author1", "name": "John Doe"},
    {"id": "author2", "name": "Jane Smith"},
]

DOCUMENTS = [
    {
        "title": "Java Basics",
        "content": "Learn Java basics and object-oriented programming.",
        "author": "author1",
    },
    {
        "title": "Advanced Java",
        "content": "Deep dive into advanced Java concepts like streams, lambdas, and concurrency.",
        "author": "author2",
    },
]


def print_document(doc: Document) -> None:
    print(f"  Title:   {doc.title}")
    print(f"  Content: {doc.content}")
    print(f"  Author:  {doc.author.name}")
    print(f"  Created: {doc.created.isoformat()}")
    print("  " + "-" * 35)


def main() -> None:
    setup_logging(sys.argv[1] if len(sys.argv) > 1 else settings.LOG_LEVEL, settings.LOG_FILE)
    store = create_document_store()

    authors = {a["id"]: new_author(a["id"], a["name"]) for a in AUTHORS}

    # 1. Save documents
    print("Saved:")
    saved = []
    for doc in DOCUMENTS:
        stored = store.save(
            new_document(
                title=doc["title"],
                content=doc["content"],
                author=authors[doc["author"]],
                created=datetime.now(timezone.utc),
            )
        )
        saved.append(stored)
        print(f"  {stored.title} ({stored.id})")

    # 2. Search by author
    print("\nDocuments by author1:")
    for doc in store.search(SearchRequest(author_ids={"author1"})):
        print_document(doc)

    # 3. Look up by id
    first_id = saved[0].id
    found = store.find_by_id(first_id)
    if found:
        print(f"\nFound document by id ({first_id}):")
        print_document(found)

    # 4. Search by title; matches anywhere in the title
    print("\nDocuments with 'Java' in the title:")
    for doc in store.search(SearchRequest(title_prefixes={"Java"})):
        print(f"  {doc.title}")

    print("\nDone!")


if __name__ == "__main__":
    main()
