from __future__ import annotations

from datetime import date

import pytest

from jobvault.application.use_cases.query_documents import QueryDocumentsInput, query_documents_use_case
from jobvault.domain.catalog_query import count_by_type, query_documents, summarize_catalog
from jobvault.domain.document_types import DOCUMENT_TYPES
from jobvault.domain.models import Document


def _doc(doc_id: str, name: str, doc_type: str = 'other', *, tags=None, description: str = '') -> Document:
    return Document(
        doc_id=doc_id,
        name=name,
        doc_type=doc_type,
        size='1 KB',
        date_created=date(2024, 3, 1),
        date_modified=date(2024, 3, 1),
        tags=list(tags or []),
        description=description,
    )


def _sample_catalog() -> list[Document]:
    return [
        _doc('d1', 'Resume_Final.pdf', 'resume', tags=['Backend']),
        _doc('d2', 'cover.docx', 'cover-letter', description='For the ACME application'),
        _doc('d3', 'aws.png', 'certificate', tags=['cloud', 'AWS']),
        _doc('d4', 'resume_old.pdf', 'resume'),
        _doc('d5', 'notes.txt', 'mystery-type'),
    ]


@pytest.mark.parametrize('term', ['resume', 'RESUME', 'final', 'Final.pdf'])
def test_search_is_case_insensitive_substring(term: str) -> None:
    catalog = [_doc('d1', 'Resume_Final.pdf')]
    assert [d.doc_id for d in query_documents(catalog, term)] == ['d1']


def test_search_matches_description_and_tags() -> None:
    catalog = _sample_catalog()

    assert [d.doc_id for d in query_documents(catalog, 'acme')] == ['d2']
    assert [d.doc_id for d in query_documents(catalog, 'aws')] == ['d3']
    assert [d.doc_id for d in query_documents(catalog, 'CLOU')] == ['d3']
    assert [d.doc_id for d in query_documents(catalog, 'backend')] == ['d1']


def test_empty_search_and_all_filter_return_full_catalog_in_order() -> None:
    catalog = _sample_catalog()
    result = query_documents(catalog, '', 'all')

    assert result == catalog
    assert result is not catalog


def test_type_filter_keeps_only_matching_type() -> None:
    catalog = _sample_catalog()

    assert [d.doc_id for d in query_documents(catalog, '', 'resume')] == ['d1', 'd4']
    assert query_documents(catalog, '', 'transcript') == []
    assert [d.doc_id for d in query_documents(catalog, '', 'mystery-type')] == ['d5']


def test_search_then_type_equals_type_then_search() -> None:
    catalog = _sample_catalog()
    for term in ['', 'resume', 'pdf', 'a', 'zzz']:
        for type_filter in ['all', *DOCUMENT_TYPES]:
            search_first = query_documents(query_documents(catalog, term, 'all'), '', type_filter)
            type_first = query_documents(query_documents(catalog, '', type_filter), term, 'all')
            combined = query_documents(catalog, term, type_filter)
            assert search_first == type_first == combined


def test_visible_set_is_subset_without_duplicates() -> None:
    catalog = _sample_catalog()
    result = query_documents(catalog, 'e', 'all')
    ids = [d.doc_id for d in result]

    assert len(ids) == len(set(ids))
    assert all(doc in catalog for doc in result)


def test_count_by_type_partitions_whole_catalog() -> None:
    counts = count_by_type(_sample_catalog())

    assert counts['resume'] == 2
    assert counts['certificate'] == 1
    assert counts['transcript'] == 0
    assert counts['mystery-type'] == 1
    assert sum(counts.values()) == 5


def test_summarize_catalog() -> None:
    stats = summarize_catalog(_sample_catalog())

    assert stats.total == 5
    assert stats.count('cover-letter') == 1
    assert stats.count('portfolio') == 0


def test_query_use_case_reports_whole_catalog_stats() -> None:
    out = query_documents_use_case(
        QueryDocumentsInput(search_term='no-such-thing', type_filter='resume'),
        catalog=_sample_catalog(),
    )

    assert out.visible == []
    assert out.stats.total == 5
    assert out.stats.count('resume') == 2
