from __future__ import annotations

from dataclasses import dataclass

from jobvault.application.use_cases.persist_catalog import persist_catalog
from jobvault.domain.models import Document, Notification
from jobvault.ports.document_store_port import DocumentStorePort
from jobvault.ports.notification_port import NotificationPort


@dataclass(frozen=True)
class DeleteDocumentInput:
    doc_id: str


@dataclass(frozen=True)
class DeleteDocumentOutput:
    catalog: list[Document]
    removed: Document | None = None
    persisted: bool = False


DOCUMENT_DELETED = Notification(
    title='Document Deleted',
    description='Document has been removed from your vault.',
)


def delete_document_use_case(
    input_data: DeleteDocumentInput,
    *,
    catalog: list[Document],
    store: DocumentStorePort,
    notifier: NotificationPort,
) -> DeleteDocumentOutput:
    removed = next((doc for doc in catalog if doc.doc_id == input_data.doc_id), None)
    if removed is None:
        return DeleteDocumentOutput(catalog=list(catalog))

    updated = [doc for doc in catalog if doc.doc_id != input_data.doc_id]
    if not persist_catalog(updated, store=store, notifier=notifier):
        return DeleteDocumentOutput(catalog=list(catalog))

    notifier.notify(DOCUMENT_DELETED)
    return DeleteDocumentOutput(catalog=updated, removed=removed, persisted=True)
