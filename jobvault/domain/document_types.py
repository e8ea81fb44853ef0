from __future__ import annotations

from dataclasses import dataclass
from typing import Any


TYPE_FILTER_ALL = 'all'
DEFAULT_DOCUMENT_TYPE = 'other'


@dataclass(frozen=True)
class TypeDescriptor:
    label: str
    color: str


DOCUMENT_TYPES: dict[str, TypeDescriptor] = {
    'resume': TypeDescriptor(label='Resume', color='blue'),
    'cover-letter': TypeDescriptor(label='Cover Letter', color='green'),
    'certificate': TypeDescriptor(label='Certificate', color='purple'),
    'transcript': TypeDescriptor(label='Transcript', color='orange'),
    'portfolio': TypeDescriptor(label='Portfolio', color='pink'),
    'other': TypeDescriptor(label='Other', color='gray'),
}

UNKNOWN_TYPE_DESCRIPTOR = TypeDescriptor(label='Unknown', color='gray')


def is_known_type(value: Any) -> bool:
    return isinstance(value, str) and value in DOCUMENT_TYPES


def describe(doc_type: Any) -> TypeDescriptor:
    """Total lookup: anything outside the fixed table renders as Unknown."""
    if not is_known_type(doc_type):
        return UNKNOWN_TYPE_DESCRIPTOR
    return DOCUMENT_TYPES[doc_type]
