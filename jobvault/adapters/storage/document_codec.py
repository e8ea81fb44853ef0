from __future__ import annotations

from datetime import date, datetime
from typing import Any

from jobvault.domain.document_types import DEFAULT_DOCUMENT_TYPE
from jobvault.domain.models import Document


def encode_document(document: Document) -> dict[str, Any]:
    return {
        'id': document.doc_id,
        'name': document.name,
        'type': document.doc_type,
        'size': document.size,
        'dateCreated': document.date_created.isoformat(),
        'dateModified': document.date_modified.isoformat(),
        'version': document.version,
        'tags': list(document.tags),
        'description': document.description,
    }


def encode_documents(documents: list[Document]) -> list[dict[str, Any]]:
    return [encode_document(doc) for doc in documents]


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # Older payloads carried full ISO timestamps.
    return date.fromisoformat(str(value).strip()[:10])


def decode_document(row: dict[str, Any]) -> Document:
    """Build a Document from a stored record; raises ValueError if unusable."""
    if not isinstance(row, dict):
        raise ValueError('Each document record must be a mapping')

    raw_id = row.get('id')
    if raw_id is None or str(raw_id).strip() == '':
        raise ValueError('Document record is missing `id`')

    name = str(row.get('name') or '').strip()
    if not name:
        raise ValueError(f'Document record {raw_id} is missing `name`')

    raw_tags = row.get('tags') or []
    if not isinstance(raw_tags, list):
        raise ValueError(f'`tags` must be a list in document record {raw_id}')

    date_created = _parse_date(row.get('dateCreated'))
    date_modified = _parse_date(row.get('dateModified') or date_created)

    raw_type = row.get('type')
    return Document(
        doc_id=str(raw_id),
        name=name,
        # Unrecognized values are kept as stored; display falls back separately.
        doc_type=str(raw_type) if raw_type is not None else DEFAULT_DOCUMENT_TYPE,
        size=str(row.get('size') or ''),
        date_created=date_created,
        date_modified=max(date_modified, date_created),
        version=str(row.get('version') or '1.0'),
        tags=tuple(str(tag) for tag in raw_tags),
        description=str(row.get('description') or ''),
    )


def decode_documents(rows: Any) -> list[Document]:
    """Decode a stored sequence, dropping malformed or duplicate-id records."""
    if not isinstance(rows, list):
        return []

    documents: list[Document] = []
    seen_ids: set[str] = set()
    for row in rows:
        try:
            doc = decode_document(row)
        except (TypeError, ValueError):
            continue
        if doc.doc_id in seen_ids:
            continue
        seen_ids.add(doc.doc_id)
        documents.append(doc)
    return documents
