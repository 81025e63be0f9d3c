import itertools
import threading
import uuid
from collections.abc import Callable

from documents.domain.repository import IdGenerator
from shared.config import Settings


class UuidIdGenerator:
    def __call__(self, is_taken: Callable[[str], bool]) -> str:
        while True:
            candidate = str(uuid.uuid4())
            if not is_taken(candidate):
                return candidate


class SequentialIdGenerator:
    """Produces ``<prefix>1``, ``<prefix>2``, ... for one store instance.

    Values already taken by caller-supplied ids are skipped.
    """

    def __init__(self, prefix: str = "doc-", start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self, is_taken: Callable[[str], bool]) -> str:
        with self._lock:
            while True:
                candidate = f"{self.prefix}{next(self._counter)}"
                if not is_taken(candidate):
                    return candidate


def build_id_generator(settings: Settings) -> IdGenerator:
    if settings.DOCUMENT_ID_STRATEGY == "sequence":
        return SequentialIdGenerator(prefix=settings.DOCUMENT_ID_PREFIX)
    return UuidIdGenerator()
