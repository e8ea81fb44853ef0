from __future__ import annotations

from abc import ABC, abstractmethod

from jobvault.domain.models import Document


class DocumentStoreError(RuntimeError):
    """Raised when the catalog payload could not be written."""


class DocumentStorePort(ABC):
    @abstractmethod
    def load(self) -> list[Document]:
        """Return the saved catalog, or an empty list if none is readable."""
        raise NotImplementedError

    @abstractmethod
    def save(self, documents: list[Document]) -> None:
        """Replace the whole saved catalog or raise DocumentStoreError."""
        raise NotImplementedError
