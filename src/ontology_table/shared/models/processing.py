"""
Document processing result models.

Usage:
    result = process_batch([("pizza.ttl", text)])
    for doc in result.documents:
        print(doc.display_name, doc.triple_count)
    print(result.get_summary())
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .ontology_types import OntologyMetadata, TableModel


@dataclass(frozen=True)
class DocumentResult:
    """
    Outcome of running the pipeline on one document.

    Attributes:
        filename: Name the document was submitted under.
        rdf_format: Serialization hint used to parse it.
        metadata: Ontology-level metadata.
        table: Element table model.
        triple_count: Number of quads in the parsed store.
    """
    filename: str
    rdf_format: str
    metadata: OntologyMetadata
    table: TableModel
    triple_count: int

    @property
    def display_name(self) -> str:
        """Ontology name when present, otherwise the filename."""
        return self.metadata.ontology_name or self.filename

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filename": self.filename,
            "format": self.rdf_format,
            "display_name": self.display_name,
            "triple_count": self.triple_count,
            "metadata": self.metadata.to_dict(),
            "table": self.table.to_dict(),
        }


@dataclass(frozen=True)
class DocumentFailure:
    """A document that could not be processed."""
    filename: str
    error: BaseException

    @property
    def error_type(self) -> str:
        return type(self.error).__name__

    @property
    def message(self) -> str:
        return str(self.error)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filename": self.filename,
            "error_type": self.error_type,
            "message": self.message,
        }


@dataclass
class BatchResult:
    """Successes and failures of a batch, each in submission order."""
    documents: List[DocumentResult] = field(default_factory=list)
    failures: List[DocumentFailure] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failures

    @property
    def total(self) -> int:
        return len(self.documents) + len(self.failures)

    def get_summary(self) -> str:
        """Generate a human-readable one-line summary."""
        summary = f"Processed {self.total} file(s): {len(self.documents)} succeeded"
        if self.failures:
            summary += f", {len(self.failures)} failed"
        return summary

    def to_dict(self) -> Dict[str, Any]:
        return {
            "documents": [doc.to_dict() for doc in self.documents],
            "failures": [failure.to_dict() for failure in self.failures],
        }
