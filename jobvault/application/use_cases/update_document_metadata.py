from __future__ import annotations

from dataclasses import dataclass, replace

from jobvault.application.use_cases.persist_catalog import persist_catalog
from jobvault.domain.document_types import DOCUMENT_TYPES, is_known_type
from jobvault.domain.models import Document, Notification
from jobvault.ports.clock_port import ClockPort
from jobvault.ports.document_store_port import DocumentStorePort
from jobvault.ports.notification_port import NotificationPort


@dataclass(frozen=True)
class UpdateDocumentMetadataInput:
    doc_id: str
    name: str | None = None
    doc_type: str | None = None
    version: str | None = None
    tags: list[str] | None = None
    description: str | None = None


@dataclass(frozen=True)
class UpdateDocumentMetadataOutput:
    catalog: list[Document]
    updated: Document | None = None
    persisted: bool = False


def normalize_tags(tags: list[str]) -> tuple[str, ...]:
    """Strip tags, drop empty ones and keep the first of any duplicates."""
    out: list[str] = []
    for tag in tags:
        value = str(tag).strip()
        if value and value not in out:
            out.append(value)
    return tuple(out)


def _validate(input_data: UpdateDocumentMetadataInput) -> None:
    if input_data.name is not None and not input_data.name.strip():
        raise ValueError('document name must not be empty')
    if input_data.doc_type is not None and not is_known_type(input_data.doc_type):
        allowed = ', '.join(DOCUMENT_TYPES)
        raise ValueError(f'Unsupported document type: {input_data.doc_type} (expected one of {allowed})')


def _apply(document: Document, input_data: UpdateDocumentMetadataInput, clock: ClockPort) -> Document:
    changes: dict[str, object] = {}
    if input_data.name is not None:
        changes['name'] = input_data.name.strip()
    if input_data.doc_type is not None:
        changes['doc_type'] = input_data.doc_type
    if input_data.version is not None:
        changes['version'] = input_data.version.strip() or document.version
    if input_data.tags is not None:
        changes['tags'] = normalize_tags(input_data.tags)
    if input_data.description is not None:
        changes['description'] = input_data.description

    changes['date_modified'] = max(clock.today(), document.date_created)
    return replace(document, **changes)


def update_document_metadata_use_case(
    input_data: UpdateDocumentMetadataInput,
    *,
    catalog: list[Document],
    store: DocumentStorePort,
    clock: ClockPort,
    notifier: NotificationPort,
) -> UpdateDocumentMetadataOutput:
    _validate(input_data)

    index = next((i for i, doc in enumerate(catalog) if doc.doc_id == input_data.doc_id), None)
    if index is None:
        return UpdateDocumentMetadataOutput(catalog=list(catalog))

    updated_doc = _apply(catalog[index], input_data, clock)
    updated = list(catalog)
    updated[index] = updated_doc

    if not persist_catalog(updated, store=store, notifier=notifier):
        return UpdateDocumentMetadataOutput(catalog=list(catalog))

    notifier.notify(
        Notification(
            title='Document Updated',
            description=f'{updated_doc.name} has been updated.',
        )
    )
    return UpdateDocumentMetadataOutput(catalog=updated, updated=updated_doc, persisted=True)
