"""
RDF package - parsing and store components.

Components:
- format_detector: filename to serialization hint
- rdf_parser: text parsing into a store via rdflib
- store: TripleStore protocol and the rdflib-backed implementation
"""

from .format_detector import (
    detect_rdf_format,
    is_rdf_filename,
    rdflib_parser_name,
)
from .rdf_parser import (
    RDFGraphParser,
    RDFParseError,
    parse_rdf_text_to_store,
)
from .store import (
    DatasetTripleStore,
    Quad,
    TripleStore,
    is_blank_node,
    is_iri,
    is_literal,
)

__all__ = [
    # Detection
    'detect_rdf_format',
    'is_rdf_filename',
    'rdflib_parser_name',
    # Parsing
    'RDFGraphParser',
    'RDFParseError',
    'parse_rdf_text_to_store',
    # Store
    'DatasetTripleStore',
    'Quad',
    'TripleStore',
    'is_blank_node',
    'is_iri',
    'is_literal',
]
