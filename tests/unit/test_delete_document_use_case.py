from __future__ import annotations

from datetime import date

from jobvault.adapters.notifications.in_memory_notification_sink import InMemoryNotificationSink
from jobvault.adapters.storage.in_memory_document_store_adapter import InMemoryDocumentStoreAdapter
from jobvault.application.use_cases.delete_document import (
    DeleteDocumentInput,
    delete_document_use_case,
)
from jobvault.domain.models import Document
from jobvault.ports.document_store_port import DocumentStoreError


class ReadOnlyStore(InMemoryDocumentStoreAdapter):
    def save(self, documents: list[Document]) -> None:
        raise DocumentStoreError('read-only')


def _catalog() -> list[Document]:
    return [
        Document(
            doc_id=doc_id,
            name=f'{doc_id}.pdf',
            doc_type='resume',
            size='1 KB',
            date_created=date(2024, 1, 1),
            date_modified=date(2024, 1, 1),
        )
        for doc_id in ('a', 'b', 'c')
    ]


def test_delete_removes_document_and_persists() -> None:
    store = InMemoryDocumentStoreAdapter()
    sink = InMemoryNotificationSink()

    out = delete_document_use_case(
        DeleteDocumentInput(doc_id='b'), catalog=_catalog(), store=store, notifier=sink
    )

    assert [d.doc_id for d in out.catalog] == ['a', 'c']
    assert out.removed is not None and out.removed.doc_id == 'b'
    assert store.load() == out.catalog
    assert sink.titles == ['Document Deleted']


def test_delete_is_idempotent() -> None:
    store = InMemoryDocumentStoreAdapter()
    sink = InMemoryNotificationSink()

    once = delete_document_use_case(
        DeleteDocumentInput(doc_id='a'), catalog=_catalog(), store=store, notifier=sink
    )
    twice = delete_document_use_case(
        DeleteDocumentInput(doc_id='a'), catalog=once.catalog, store=store, notifier=sink
    )

    assert twice.catalog == once.catalog
    assert twice.removed is None
    assert not twice.persisted
    assert sink.titles == ['Document Deleted']


def test_delete_failure_keeps_catalog() -> None:
    sink = InMemoryNotificationSink()
    catalog = _catalog()

    out = delete_document_use_case(
        DeleteDocumentInput(doc_id='a'), catalog=catalog, store=ReadOnlyStore(), notifier=sink
    )

    assert out.catalog == catalog
    assert out.removed is None
    assert sink.titles == ['Save Failed']
