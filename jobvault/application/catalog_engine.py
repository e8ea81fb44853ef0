from __future__ import annotations

from typing import Callable

from jobvault.application.use_cases.delete_document import (
    DeleteDocumentInput,
    delete_document_use_case,
)
from jobvault.application.use_cases.download_document import (
    DownloadDocumentOutput,
    download_document_use_case,
)
from jobvault.application.use_cases.ingest_documents import (
    IngestDocumentsInput,
    IngestDocumentsOutput,
    ingest_documents_use_case,
)
from jobvault.application.use_cases.update_document_metadata import (
    UpdateDocumentMetadataInput,
    update_document_metadata_use_case,
)
from jobvault.domain.catalog_query import query_documents, summarize_catalog
from jobvault.domain.document_types import TYPE_FILTER_ALL
from jobvault.domain.models import CatalogStats, Document, RawFile
from jobvault.ports.clock_port import ClockPort
from jobvault.ports.document_store_port import DocumentStorePort
from jobvault.ports.notification_port import NotificationPort


class DocumentCatalogEngine:
    """Owns the in-memory catalog and keeps it reconciled with the store.

    Mutations go through the use cases, which write the full list first; the
    engine only swaps in the new list once that write succeeded.
    """

    def __init__(
        self,
        *,
        store: DocumentStorePort,
        clock: ClockPort,
        notifier: NotificationPort,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._store = store
        self._clock = clock
        self._notifier = notifier
        self._id_factory = id_factory
        self._catalog: list[Document] = store.load()
        self._search_term = ''
        self._type_filter = TYPE_FILTER_ALL

    @property
    def documents(self) -> list[Document]:
        return list(self._catalog)

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def type_filter(self) -> str:
        return self._type_filter

    def reload(self) -> list[Document]:
        self._catalog = self._store.load()
        return self.documents

    def get(self, doc_id: str) -> Document | None:
        for doc in self._catalog:
            if doc.doc_id == doc_id:
                return doc
        return None

    def set_search_term(self, search_term: str | None) -> None:
        self._search_term = search_term or ''

    def set_type_filter(self, type_filter: str | None) -> None:
        self._type_filter = type_filter or TYPE_FILTER_ALL

    def ingest(self, raw_files: list[RawFile]) -> IngestDocumentsOutput:
        output = ingest_documents_use_case(
            IngestDocumentsInput(raw_files=list(raw_files)),
            catalog=self._catalog,
            store=self._store,
            clock=self._clock,
            notifier=self._notifier,
            id_factory=self._id_factory,
        )
        if output.persisted:
            self._catalog = list(output.catalog)
        return output

    def delete(self, doc_id: str) -> Document | None:
        output = delete_document_use_case(
            DeleteDocumentInput(doc_id=doc_id),
            catalog=self._catalog,
            store=self._store,
            notifier=self._notifier,
        )
        if output.persisted:
            self._catalog = list(output.catalog)
        return output.removed

    def update_metadata(
        self,
        doc_id: str,
        *,
        name: str | None = None,
        doc_type: str | None = None,
        version: str | None = None,
        tags: list[str] | None = None,
        description: str | None = None,
    ) -> Document | None:
        output = update_document_metadata_use_case(
            UpdateDocumentMetadataInput(
                doc_id=doc_id,
                name=name,
                doc_type=doc_type,
                version=version,
                tags=tags,
                description=description,
            ),
            catalog=self._catalog,
            store=self._store,
            clock=self._clock,
            notifier=self._notifier,
        )
        if output.persisted:
            self._catalog = list(output.catalog)
        return output.updated

    def download(self, doc_id: str) -> DownloadDocumentOutput | None:
        return download_document_use_case(doc_id, catalog=self._catalog, notifier=self._notifier)

    def visible_documents(self) -> list[Document]:
        return query_documents(self._catalog, self._search_term, self._type_filter)

    def stats(self) -> CatalogStats:
        return summarize_catalog(self._catalog)
