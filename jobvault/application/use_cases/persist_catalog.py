from __future__ import annotations

from jobvault.domain.models import Document, Notification
from jobvault.ports.document_store_port import DocumentStoreError, DocumentStorePort
from jobvault.ports.notification_port import NotificationPort


SAVE_FAILED = Notification(
    title='Save Failed',
    description='Your vault could not be saved. No changes were made.',
    level='error',
)


def persist_catalog(
    documents: list[Document],
    *,
    store: DocumentStorePort,
    notifier: NotificationPort,
) -> bool:
    """Write the full catalog; on failure notify and report False."""
    try:
        store.save(list(documents))
    except DocumentStoreError:
        notifier.notify(SAVE_FAILED)
        return False
    return True
