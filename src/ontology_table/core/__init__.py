"""
Core ontology logic.

This package holds the metadata-extraction and table-projection pipeline:

- Namespace registry and CURIE shortening (namespaces)
- Literal/IRI preference resolution (literals)
- Ontology metadata extraction (metadata)
- Element table projection (table_builder)
- Filter and sort over table models (view)
- Compact identifiers and CSV export (naming, csv_export)
- Document and batch processing (services.pipeline)

Usage:
    from ontology_table.core import extract_ontology_metadata, build_element_table_model
    from ontology_table.core import filter_and_sort_rows, table_to_csv
"""

from .namespaces import COMMON_PREFIXES, iri_to_curie
from .literals import (
    get_preferred_iri,
    get_preferred_literal,
    pick_best_literal,
)
from .metadata import (
    extract_ontology_metadata,
    get_ontology_subject_iri,
)
from .table_builder import (
    ELEMENT_TYPES,
    PRIORITY_PREDICATES,
    build_element_table_model,
    order_predicates,
    should_include_element_subject,
)
from .view import filter_and_sort_rows, filter_rows
from .naming import to_identifier
from .csv_export import csv_filename, table_to_csv, write_table_csv
from .services import process_batch, process_document, read_documents

__all__ = [
    # Namespaces
    'COMMON_PREFIXES',
    'iri_to_curie',
    # Preference resolution
    'pick_best_literal',
    'get_preferred_literal',
    'get_preferred_iri',
    # Metadata
    'get_ontology_subject_iri',
    'extract_ontology_metadata',
    # Table
    'ELEMENT_TYPES',
    'PRIORITY_PREDICATES',
    'should_include_element_subject',
    'order_predicates',
    'build_element_table_model',
    # View
    'filter_rows',
    'filter_and_sort_rows',
    # Export
    'to_identifier',
    'table_to_csv',
    'csv_filename',
    'write_table_csv',
    # Pipeline
    'process_document',
    'process_batch',
    'read_documents',
]
