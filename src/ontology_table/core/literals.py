"""
Literal and IRI preference resolution.

Metadata fields are read from a list of candidate predicates ordered by
preference. For each predicate the matching objects are collected and, for
literals, ranked by language: an ``en`` tag wins, then an untagged literal,
then whatever came first.
"""

import logging
from typing import List, Optional, Sequence

from rdflib import Literal, URIRef

from ..formats.rdf.store import TripleStore, is_iri, is_literal

logger = logging.getLogger(__name__)

PREFERRED_LANGUAGE = "en"


def pick_best_literal(literals: Optional[Sequence[Literal]]) -> Optional[Literal]:
    """
    Pick the preferred literal from ``literals``.

    Preference order:
    1. First literal tagged ``en`` (case-insensitive)
    2. First literal without a language tag
    3. First literal in input order

    Args:
        literals: Candidate literals in store order

    Returns:
        The chosen literal, or None when there are no candidates
    """
    if not literals:
        return None

    for literal in literals:
        if literal.language and literal.language.lower() == PREFERRED_LANGUAGE:
            return literal

    for literal in literals:
        if not literal.language:
            return literal

    return literals[0]


def get_preferred_literal(
    store: TripleStore,
    subject_iri: str,
    predicate_iris: Sequence[str],
) -> Optional[str]:
    """
    Resolve the preferred literal value across ordered predicates.

    The first predicate yielding at least one literal decides the result;
    later predicates are not consulted.

    Args:
        store: Store to query
        subject_iri: Subject IRI
        predicate_iris: Predicate IRIs, most preferred first

    Returns:
        Lexical value of the chosen literal, or None
    """
    subject = URIRef(subject_iri)

    for predicate_iri in predicate_iris:
        literals: List[Literal] = [
            quad.object
            for quad in store.quads(subject, URIRef(predicate_iri), None, None)
            if is_literal(quad.object)
        ]
        best = pick_best_literal(literals)
        if best is not None:
            logger.debug(f"{subject_iri}: literal from {predicate_iri}")
            return str(best)

    return None


def get_preferred_iri(
    store: TripleStore,
    subject_iri: str,
    predicate_iris: Sequence[str],
) -> Optional[str]:
    """
    Resolve the first IRI object across ordered predicates.

    Literals and blank nodes are ignored. Among several IRI objects of one
    predicate the first in store order is returned.
    """
    subject = URIRef(subject_iri)

    for predicate_iri in predicate_iris:
        for quad in store.quads(subject, URIRef(predicate_iri), None, None):
            if is_iri(quad.object):
                return str(quad.object)

    return None
