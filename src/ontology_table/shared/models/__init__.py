"""
Shared data models for the ontology table viewer.

Usage:
    from ontology_table.shared.models import OntologyMetadata, TableModel
    from ontology_table.shared.models import DocumentResult, BatchResult
"""

from .ontology_types import (
    OntologyMetadata,
    TableModel,
)
from .processing import (
    BatchResult,
    DocumentFailure,
    DocumentResult,
)

__all__ = [
    # Derived views
    "OntologyMetadata",
    "TableModel",
    # Processing results
    "DocumentResult",
    "DocumentFailure",
    "BatchResult",
]
