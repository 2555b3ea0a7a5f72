"""
Element Table Builder

Projects the ontology elements of a document (classes, properties and named
individuals) into a column/row table model.

Algorithm:
    1. Enumerate every statement, skipping blank-node subjects and objects
    2. Group object values per subject and predicate (ordered, de-duplicated)
    3. Keep subjects typed with one of the OWL element types
    4. Order columns: priority predicates first, then the rest by CURIE
    5. Emit one row per element, multi-values joined with "; "

Column order depends only on which predicates are used, never on store
enumeration order, so repeated builds of the same store are identical.
"""

import logging
from types import MappingProxyType
from typing import Dict, Final, List, Optional, Set, Tuple

from rdflib import URIRef
from rdflib.namespace import OWL, RDF, RDFS, SKOS
from rdflib.term import Node

from ..constants import TableConfig
from ..formats.rdf.store import TripleStore, is_blank_node, is_iri, is_literal
from ..shared.models import TableModel
from .namespaces import iri_to_curie

logger = logging.getLogger(__name__)

ELEMENT_TYPES: Final[frozenset] = frozenset({
    OWL.Class,
    OWL.NamedIndividual,
    OWL.ObjectProperty,
    OWL.DatatypeProperty,
    OWL.AnnotationProperty,
})

PRIORITY_PREDICATES: Final[Tuple[str, ...]] = (
    str(RDF.type),
    str(RDFS.label),
    str(SKOS.altLabel),
    str(SKOS.definition),
)

# subject IRI -> predicate IRI -> ordered set of display values
SubjectValues = Dict[str, Dict[str, Dict[str, None]]]


def should_include_element_subject(store: TripleStore, subject: Optional[Node]) -> bool:
    """
    Decide whether ``subject`` is an ontology element.

    Elements are IRI subjects with at least one ``rdf:type`` of owl:Class,
    owl:NamedIndividual, owl:ObjectProperty, owl:DatatypeProperty or
    owl:AnnotationProperty. Blank nodes never qualify.
    """
    if not is_iri(subject):
        return False

    return any(
        quad.object in ELEMENT_TYPES
        for quad in store.quads(subject, RDF.type, None, None)
    )


def _display_value(term: Node) -> Optional[str]:
    if is_literal(term) or is_iri(term):
        return str(term)
    return None


def _group_values(store: TripleStore) -> SubjectValues:
    """Group object display values by subject and predicate."""
    subject_map: SubjectValues = {}

    for quad in store.quads():
        if is_blank_node(quad.subject) or is_blank_node(quad.object):
            continue

        value = _display_value(quad.object)
        if value is None:
            continue

        predicate_map = subject_map.setdefault(str(quad.subject), {})
        predicate_map.setdefault(str(quad.predicate), {})[value] = None

    return subject_map


def order_predicates(used_predicates: Set[str]) -> List[str]:
    """
    Order table columns.

    Priority predicates come first in their fixed order (only those in use);
    every other predicate follows, sorted by its CURIE-or-IRI display form.
    """
    priority = [p for p in PRIORITY_PREDICATES if p in used_predicates]
    rest = sorted(
        (p for p in used_predicates if p not in PRIORITY_PREDICATES),
        key=lambda p: (iri_to_curie(p), p),
    )
    return priority + rest


def build_element_table_model(store: TripleStore) -> TableModel:
    """
    Build the element table model for a parsed document.

    Args:
        store: Parsed document

    Returns:
        TableModel whose first column is the element IRI, followed by one
        column per predicate used by at least one element
    """
    subject_map = _group_values(store)

    element_subjects = [
        iri for iri in subject_map
        if should_include_element_subject(store, URIRef(iri))
    ]

    used_predicates: Set[str] = set()
    for iri in element_subjects:
        used_predicates.update(subject_map[iri])

    ordered_predicates = order_predicates(used_predicates)

    headers = (TableConfig.IRI_COLUMN, *(iri_to_curie(p) for p in ordered_predicates))
    predicates: Tuple[Optional[str], ...] = (None, *ordered_predicates)

    rows = []
    for iri in element_subjects:
        predicate_map = subject_map[iri]
        row: Dict[str, str] = {TableConfig.IRI_COLUMN: iri}
        for predicate in ordered_predicates:
            row[predicate] = TableConfig.VALUE_SEPARATOR.join(predicate_map.get(predicate, ()))
        rows.append(MappingProxyType(row))

    logger.info(
        f"Built element table: {len(rows)} rows, {len(headers)} columns "
        f"({len(subject_map)} non-blank subjects scanned)"
    )

    return TableModel(headers=headers, predicates=predicates, rows=tuple(rows))
