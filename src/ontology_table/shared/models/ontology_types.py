"""
Ontology view data types.

This module defines the derived records produced for every processed
document: the ontology-level metadata card and the element table model.
Both are rebuilt from scratch for each document and never mutated after
construction.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ...constants import TableConfig


@dataclass(frozen=True)
class OntologyMetadata:
    """
    Ontology-level metadata resolved from the ``owl:Ontology`` subject.

    Attributes:
        ontology_iri: IRI of the ontology subject.
        ontology_name: Preferred title (rdfs:label, dcterms:title, dc:title).
        version_iri: owl:versionIRI or dcterms:hasVersion as an IRI.
        version_info: owl:versionInfo or dcterms:hasVersion as a literal.
        description: skos:definition, dcterms:description or dc:description.
        license: License or rights IRI.
        rights_holder: dcterms:rightsHolder literal.

    Example:
        >>> OntologyMetadata.empty().ontology_iri is None
        True
    """
    ontology_iri: Optional[str] = None
    ontology_name: Optional[str] = None
    version_iri: Optional[str] = None
    version_info: Optional[str] = None
    description: Optional[str] = None
    license: Optional[str] = None
    rights_holder: Optional[str] = None

    @classmethod
    def empty(cls) -> "OntologyMetadata":
        """Metadata record for a document without an ontology subject."""
        return cls()

    @property
    def has_ontology(self) -> bool:
        return self.ontology_iri is not None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


@dataclass(frozen=True)
class TableModel:
    """
    Column/row projection of the ontology elements of one document.

    ``headers`` and ``predicates`` are aligned: ``headers[0]`` is always
    ``"iri"`` with ``predicates[0]`` set to ``None``; every other header is the
    CURIE (or full IRI) of the predicate at the same index. Rows are keyed by
    ``"iri"`` and by predicate IRI.
    """
    headers: Tuple[str, ...] = (TableConfig.IRI_COLUMN,)
    predicates: Tuple[Optional[str], ...] = (None,)
    rows: Tuple[Mapping[str, str], ...] = field(default_factory=tuple)

    # Rows are mappings, so models compare by value but are not hashable
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if len(self.headers) != len(self.predicates):
            raise ValueError(
                f"headers ({len(self.headers)}) and predicates "
                f"({len(self.predicates)}) must be aligned"
            )

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def column_key(self, index: int) -> Optional[str]:
        """Return the row key for a header index, or None when out of range."""
        if index < 0 or index >= len(self.headers):
            return None
        if index == 0:
            return TableConfig.IRI_COLUMN
        return self.predicates[index]

    def row_values(self, row: Mapping[str, str]) -> List[str]:
        """Cell values of ``row`` in header order."""
        return [row.get(self.column_key(i) or "", "") for i in range(len(self.headers))]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "headers": list(self.headers),
            "predicates": list(self.predicates),
            "rows": [dict(row) for row in self.rows],
        }
