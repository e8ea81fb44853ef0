from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any


@dataclass(frozen=True)
class Document:
    doc_id: str
    name: str
    doc_type: str
    size: str
    date_created: date
    date_modified: date
    version: str = '1.0'
    tags: tuple[str, ...] = ()
    description: str = ''
    # Raw upload handle; lives for the session only and is never persisted.
    file_ref: Any = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'tags', tuple(self.tags))


@dataclass(frozen=True)
class RawFile:
    name: str
    size_bytes: int
    content: Any = None


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    level: str = 'info'


@dataclass(frozen=True)
class CatalogStats:
    total: int
    by_type: dict[str, int] = field(default_factory=dict)

    def count(self, doc_type: str) -> int:
        return self.by_type.get(doc_type, 0)
