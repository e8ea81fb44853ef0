from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from jobvault.domain.models import Document, Notification
from jobvault.ports.notification_port import NotificationPort


@dataclass(frozen=True)
class DownloadDocumentOutput:
    document: Document
    content: Any = None


def download_document_use_case(
    doc_id: str,
    *,
    catalog: list[Document],
    notifier: NotificationPort,
) -> DownloadDocumentOutput | None:
    # Content is session-only; documents reloaded from the store carry no file_ref.
    document = next((doc for doc in catalog if doc.doc_id == doc_id), None)
    if document is None:
        return None

    notifier.notify(
        Notification(title='Download Started', description=f'Downloading {document.name}...')
    )
    return DownloadDocumentOutput(document=document, content=document.file_ref)
