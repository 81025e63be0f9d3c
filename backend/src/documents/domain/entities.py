from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class Author:
    id: str
    name: str


@dataclass(frozen=True)
class Document:
    title: str | None
    content: str | None
    author: Author | None
    created: datetime | None = field(default=None)
    id: str | None = field(default=None)

    def __post_init__(self):
        if isinstance(self.created, datetime):
            object.__setattr__(self, "created", as_utc(self.created))


@dataclass(frozen=True)
class SearchRequest:
    """Conjunctive filter; each set field matches if any of its values matches.

    ``title_prefixes`` is matched as a substring of the title, not an
    anchored prefix.
    """

    title_prefixes: frozenset[str] | None = None
    contains_contents: frozenset[str] | None = None
    author_ids: frozenset[str] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    def __post_init__(self):
        for name in ("title_prefixes", "contains_contents", "author_ids"):
            values = getattr(self, name)
            if values is not None:
                object.__setattr__(self, name, _to_frozenset(values))
        for name in ("created_from", "created_to"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, as_utc(value))


def _to_frozenset(values: Iterable[str]) -> frozenset[str]:
    # a bare string would otherwise be split into characters
    if isinstance(values, str):
        return frozenset((values,))
    return frozenset(values)

