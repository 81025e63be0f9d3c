from collections.abc import Callable
from typing import Protocol

from documents.domain.entities import Document


class IdGenerator(Protocol):
    def __call__(self, is_taken: Callable[[str], bool]) -> str: ...


class DocumentRepository(Protocol):
    def get_by_id(self, document_id: str) -> Document | None: ...

    def list_all(self) -> list[Document]: ...

    def upsert(
        self, document_id: str, build: Callable[[Document | None], Document]
    ) -> Document: ...

    def add(
        self, generate_id: IdGenerator, build: Callable[[str], Document]
    ) -> Document: ...

    def delete(self, document_id: str) -> bool: ...

    def count(self) -> int: ...
