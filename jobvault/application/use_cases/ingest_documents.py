from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Callable

from jobvault.application.use_cases.persist_catalog import persist_catalog
from jobvault.domain.document_types import DEFAULT_DOCUMENT_TYPE
from jobvault.domain.models import Document, Notification, RawFile
from jobvault.domain.size_formatter import format_size
from jobvault.ports.clock_port import ClockPort
from jobvault.ports.document_store_port import DocumentStorePort
from jobvault.ports.notification_port import NotificationPort


@dataclass(frozen=True)
class IngestDocumentsInput:
    raw_files: list[RawFile]


@dataclass(frozen=True)
class IngestDocumentsOutput:
    catalog: list[Document]
    ingested: list[Document] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    persisted: bool = False


def _new_document_id() -> str:
    return uuid.uuid4().hex


def _build_document(
    raw_file: RawFile,
    *,
    doc_id: str,
    clock: ClockPort,
) -> Document:
    name = (raw_file.name or '').strip()
    if not name:
        raise ValueError('raw file has no name')

    today = clock.today()
    return Document(
        doc_id=doc_id,
        name=name,
        doc_type=DEFAULT_DOCUMENT_TYPE,
        size=format_size(raw_file.size_bytes),
        date_created=today,
        date_modified=today,
        version='1.0',
        tags=(),
        description='',
        file_ref=raw_file.content,
    )


def _summary(ingested: int, skipped: int) -> Notification:
    if ingested == 0:
        return Notification(
            title='No Files Added',
            description=f'None of the {skipped} file(s) could be added to your vault.',
            level='warning',
        )
    description = f'{ingested} file(s) have been added to your vault.'
    if skipped:
        description += f' {skipped} file(s) were skipped.'
    return Notification(title='Files Uploaded', description=description)


def ingest_documents_use_case(
    input_data: IngestDocumentsInput,
    *,
    catalog: list[Document],
    store: DocumentStorePort,
    clock: ClockPort,
    notifier: NotificationPort,
    id_factory: Callable[[], str] | None = None,
) -> IngestDocumentsOutput:
    if not input_data.raw_files:
        return IngestDocumentsOutput(catalog=list(catalog))

    new_id = id_factory or _new_document_id
    taken_ids = {doc.doc_id for doc in catalog}
    ingested: list[Document] = []
    skipped: list[str] = []

    for raw_file in input_data.raw_files:
        doc_id = new_id()
        if doc_id in taken_ids:
            skipped.append(raw_file.name)
            continue
        try:
            document = _build_document(raw_file, doc_id=doc_id, clock=clock)
        except (TypeError, ValueError):
            skipped.append(raw_file.name)
            continue
        taken_ids.add(doc_id)
        ingested.append(document)

    if not ingested:
        notifier.notify(_summary(0, len(skipped)))
        return IngestDocumentsOutput(catalog=list(catalog), skipped=skipped)

    updated = [*catalog, *ingested]
    if not persist_catalog(updated, store=store, notifier=notifier):
        return IngestDocumentsOutput(catalog=list(catalog), skipped=skipped)

    notifier.notify(_summary(len(ingested), len(skipped)))
    return IngestDocumentsOutput(
        catalog=updated,
        ingested=ingested,
        skipped=skipped,
        persisted=True,
    )
