from __future__ import annotations

import json
import os
import tempfile
from abc import abstractmethod
from pathlib import Path
from typing import Any

import yaml

from jobvault.adapters.storage.document_codec import decode_documents, encode_documents
from jobvault.domain.models import Document
from jobvault.ports.document_store_port import DocumentStoreError, DocumentStorePort


DEFAULT_STORAGE_KEY = 'openJobDocuments'


class FilesystemDocumentStoreAdapter(DocumentStorePort):
    """Key-value text file holding the whole catalog under a single key.

    Other keys found in the same file are carried over on save.
    """

    def __init__(self, path: Path, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._path = path
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    @abstractmethod
    def _parse(self, text: str) -> Any:
        raise NotImplementedError

    @abstractmethod
    def _dump(self, payload: dict[str, Any]) -> str:
        raise NotImplementedError

    def _read_mapping(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            text = self._path.read_text(encoding='utf-8')
            data = self._parse(text) if text.strip() else {}
        except (OSError, UnicodeDecodeError, ValueError, RecursionError, yaml.YAMLError):
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> list[Document]:
        return decode_documents(self._read_mapping().get(self._key))

    def save(self, documents: list[Document]) -> None:
        payload = self._read_mapping()
        payload[self._key] = encode_documents(documents)

        try:
            text = self._dump(payload)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f'.{self._path.name}.', suffix='.tmp', dir=self._path.parent
            )
        except (OSError, ValueError, yaml.YAMLError) as exc:
            raise DocumentStoreError(f'Unable to write document store {self._path}: {exc}') from exc

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as fh:
                fh.write(text)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, self._path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise DocumentStoreError(f'Unable to write document store {self._path}: {exc}') from exc


class JsonFileDocumentStoreAdapter(FilesystemDocumentStoreAdapter):
    def _parse(self, text: str) -> Any:
        return json.loads(text)

    def _dump(self, payload: dict[str, Any]) -> str:
        return json.dumps(payload, ensure_ascii=True, indent=2)


class YamlFileDocumentStoreAdapter(FilesystemDocumentStoreAdapter):
    def _parse(self, text: str) -> Any:
        return yaml.safe_load(text)

    def _dump(self, payload: dict[str, Any]) -> str:
        return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)
