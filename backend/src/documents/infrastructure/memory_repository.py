import threading
from collections.abc import Callable

from documents.domain.entities import Document


class InMemoryDocumentRepository:
    """Dict-backed repository guarded by a single lock.

    Every method holds the lock for its whole critical section, so a
    read-modify-write passed to ``upsert`` or ``add`` is atomic with respect
    to every other operation on the same repository.
    """

    def __init__(self):
        self._documents: dict[str, Document] = {}
        self._lock = threading.Lock()

    def get_by_id(self, document_id: str) -> Document | None:
        with self._lock:
            return self._documents.get(document_id)

    def list_all(self) -> list[Document]:
        with self._lock:
            return list(self._documents.values())

    def upsert(
        self, document_id: str, build: Callable[[Document | None], Document]
    ) -> Document:
        """Store ``build(existing)`` under ``document_id``; ``existing`` is None if absent."""
        with self._lock:
            document = build(self._documents.get(document_id))
            self._documents[document_id] = document
            return document

    def add(
        self,
        generate_id: Callable[[Callable[[str], bool]], str],
        build: Callable[[str], Document],
    ) -> Document:
        """Insert ``build(new_id)`` under an id produced by ``generate_id``."""
        with self._lock:
            document_id = generate_id(self._documents.__contains__)
            document = build(document_id)
            self._documents[document_id] = document
            return document

    def delete(self, document_id: str) -> bool:
        with self._lock:
            return self._documents.pop(document_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._documents)

    def clear(self) -> None:
        with self._lock:
            self._documents.clear()
