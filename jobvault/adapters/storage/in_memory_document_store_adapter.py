from __future__ import annotations

import json

from jobvault.adapters.storage.document_codec import decode_documents, encode_documents
from jobvault.domain.models import Document
from jobvault.ports.document_store_port import DocumentStorePort


class InMemoryDocumentStoreAdapter(DocumentStorePort):
    """Keeps serialized JSON text per key, like browser local storage."""

    def __init__(self, key: str = 'openJobDocuments') -> None:
        self._key = key
        self.items: dict[str, str] = {}

    def load(self) -> list[Document]:
        text = self.items.get(self._key)
        if text is None:
            return []
        try:
            rows = json.loads(text)
        except (ValueError, RecursionError):
            return []
        return decode_documents(rows)

    def save(self, documents: list[Document]) -> None:
        self.items[self._key] = json.dumps(encode_documents(documents), ensure_ascii=True)
