from __future__ import annotations

from pathlib import Path

from jobvault.adapters.storage.filesystem_document_store_adapter import (
    JsonFileDocumentStoreAdapter,
    YamlFileDocumentStoreAdapter,
)
from jobvault.adapters.storage.in_memory_document_store_adapter import InMemoryDocumentStoreAdapter
from jobvault.ports.document_store_port import DocumentStorePort


def create_document_store(*, fmt: str, path: str, key: str) -> DocumentStorePort:
    normalized = fmt.strip().lower()
    if normalized == 'json':
        return JsonFileDocumentStoreAdapter(Path(path), key=key)
    if normalized in {'yaml', 'yml'}:
        return YamlFileDocumentStoreAdapter(Path(path), key=key)
    if normalized == 'memory':
        return InMemoryDocumentStoreAdapter(key=key)
    raise ValueError(f'Unsupported document store format: {fmt}')
