from __future__ import annotations

from jobvault.domain.document_types import DOCUMENT_TYPES, TYPE_FILTER_ALL
from jobvault.domain.models import CatalogStats, Document


def matches_search(document: Document, search_term: str) -> bool:
    """Case-insensitive substring match over name, description and tags."""
    needle = search_term.lower()
    if needle in document.name.lower():
        return True
    if needle in document.description.lower():
        return True
    return any(needle in tag.lower() for tag in document.tags)


def matches_type(document: Document, type_filter: str) -> bool:
    return type_filter == TYPE_FILTER_ALL or document.doc_type == type_filter


def query_documents(
    catalog: list[Document],
    search_term: str = '',
    type_filter: str = TYPE_FILTER_ALL,
) -> list[Document]:
    filtered = list(catalog)

    if search_term:
        filtered = [doc for doc in filtered if matches_search(doc, search_term)]

    if type_filter != TYPE_FILTER_ALL:
        filtered = [doc for doc in filtered if matches_type(doc, type_filter)]

    return filtered


def count_by_type(catalog: list[Document]) -> dict[str, int]:
    counts: dict[str, int] = {doc_type: 0 for doc_type in DOCUMENT_TYPES}
    for doc in catalog:
        counts[doc.doc_type] = counts.get(doc.doc_type, 0) + 1
    return counts


def summarize_catalog(catalog: list[Document]) -> CatalogStats:
    return CatalogStats(total=len(catalog), by_type=count_by_type(catalog))
