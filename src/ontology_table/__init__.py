"""
RDF Ontology Table viewer.

Parses small RDF ontology documents (Turtle, N-Triples, N-Quads, TriG),
extracts ontology-level metadata and projects the ontology elements into a
filterable, sortable, CSV-exportable table.

Usage:
    from ontology_table import process_document, filter_and_sort_rows, table_to_csv

    doc = process_document("pizza.ttl", text)
    print(doc.metadata.ontology_name)
    rows = filter_and_sort_rows(doc.table, "pizza", 0, "asc")
    csv_text = table_to_csv(doc.table, rows)
"""

__version__ = "0.1.0"

from .core import (
    build_element_table_model,
    extract_ontology_metadata,
    filter_and_sort_rows,
    iri_to_curie,
    pick_best_literal,
    process_batch,
    process_document,
    table_to_csv,
    to_identifier,
)
from .formats.rdf import (
    DatasetTripleStore,
    RDFParseError,
    TripleStore,
    detect_rdf_format,
    parse_rdf_text_to_store,
)
from .shared.models import (
    BatchResult,
    DocumentFailure,
    DocumentResult,
    OntologyMetadata,
    TableModel,
)

__all__ = [
    '__version__',
    # Parsing
    'detect_rdf_format',
    'parse_rdf_text_to_store',
    'RDFParseError',
    'TripleStore',
    'DatasetTripleStore',
    # Core
    'pick_best_literal',
    'iri_to_curie',
    'extract_ontology_metadata',
    'build_element_table_model',
    'filter_and_sort_rows',
    'to_identifier',
    'table_to_csv',
    'process_document',
    'process_batch',
    # Models
    'OntologyMetadata',
    'TableModel',
    'DocumentResult',
    'DocumentFailure',
    'BatchResult',
]
