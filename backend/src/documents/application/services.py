import logging
from dataclasses import replace

from documents.domain.entities import Document, SearchRequest
from documents.domain.repository import DocumentRepository, IdGenerator
from documents.domain.search import filter_documents
from documents.domain.validation import validate_document_update, validate_new_document
from documents.infrastructure.id_generators import UuidIdGenerator, build_id_generator
from documents.infrastructure.memory_repository import InMemoryDocumentRepository
from shared.config import Settings
from shared.config import settings as default_settings
from shared.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class DocumentStore:
    """Upsert, lookup, delete and filter documents held in memory.

    Safe to share between threads: the repository serialises every
    operation, and a save's read of the existing entry happens under the
    same lock as its write.
    """

    def __init__(
        self,
        repo: DocumentRepository | None = None,
        id_generator: IdGenerator | None = None,
    ):
        self.repo = repo if repo is not None else InMemoryDocumentRepository()
        self.id_generator = id_generator if id_generator is not None else UuidIdGenerator()

    def save(self, document: Document) -> Document:
        """Insert or replace ``document`` and return the stored version.

        Without an id a fresh one is generated. With an id that is already
        stored, title, content and author are replaced and the stored
        ``created`` is kept. With an unknown id the document is inserted
        as given.
        """
        try:
            if not document.id:
                validate_new_document(document)
                saved = self.repo.add(
                    self.id_generator, lambda new_id: replace(document, id=new_id)
                )
                logger.debug("Inserted document %s", saved.id)
                return saved

            validate_document_update(document)
            return self.repo.upsert(document.id, lambda existing: self._merge(document, existing))
        except ValidationError as exc:
            logger.info("Rejected document %s: %s", document.id or "<new>", exc.message)
            raise

    @staticmethod
    def _merge(document: Document, existing: Document | None) -> Document:
        if existing is None:
            validate_new_document(document)
            logger.debug("Inserted document %s with supplied id", document.id)
            return document

        logger.debug("Replaced document %s", document.id)
        return Document(
            id=existing.id,
            title=document.title,
            content=document.content,
            author=document.author,
            created=existing.created,
        )

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        """Return stored documents matching every criterion set on ``request``."""
        return filter_documents(self.repo.list_all(), request)

    def find_by_id(self, document_id: str) -> Document | None:
        return self.repo.get_by_id(document_id)

    def get(self, document_id: str) -> Document:
        document = self.repo.get_by_id(document_id)
        if document is None:
            raise NotFoundError("Document", document_id)
        return document

    def delete(self, document_id: str) -> bool:
        removed = self.repo.delete(document_id)
        if removed:
            logger.debug("Deleted document %s", document_id)
        return removed

    def count(self) -> int:
        return self.repo.count()

    def __len__(self) -> int:
        return self.repo.count()

    def __contains__(self, document_id: object) -> bool:
        return isinstance(document_id, str) and self.repo.get_by_id(document_id) is not None


def create_document_store(settings: Settings | None = None) -> DocumentStore:
    return DocumentStore(
        repo=InMemoryDocumentRepository(),
        id_generator=build_id_generator(settings or default_settings),
    )
