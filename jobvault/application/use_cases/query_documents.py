from __future__ import annotations

from dataclasses import dataclass, field

from jobvault.domain.catalog_query import query_documents, summarize_catalog
from jobvault.domain.document_types import TYPE_FILTER_ALL
from jobvault.domain.models import CatalogStats, Document


@dataclass(frozen=True)
class QueryDocumentsInput:
    search_term: str = ''
    type_filter: str = TYPE_FILTER_ALL


@dataclass(frozen=True)
class QueryDocumentsOutput:
    visible: list[Document] = field(default_factory=list)
    stats: CatalogStats = field(default_factory=lambda: CatalogStats(total=0))


def query_documents_use_case(
    input_data: QueryDocumentsInput,
    *,
    catalog: list[Document],
) -> QueryDocumentsOutput:
    """Visible set for the active filters; stats always cover the whole catalog."""
    return QueryDocumentsOutput(
        visible=query_documents(catalog, input_data.search_term, input_data.type_filter),
        stats=summarize_catalog(catalog),
    )
