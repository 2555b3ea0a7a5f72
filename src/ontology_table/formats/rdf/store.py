"""
Triple store interface.

The metadata extractor and the table builder only need two capabilities from
a parsed document: pattern lookup over (subject, predicate, object, graph)
where any component may be a wildcard, and full enumeration. ``TripleStore``
captures exactly that; ``DatasetTripleStore`` provides it on top of an rdflib
``Dataset`` so triple and quad serializations share one code path.
"""

import logging
from typing import Iterable, Iterator, NamedTuple, Optional, Protocol, Tuple, runtime_checkable

from rdflib import BNode, Dataset, Literal, URIRef
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID
from rdflib.term import Node

logger = logging.getLogger(__name__)


class Quad(NamedTuple):
    """A single statement; ``graph`` is None for the default graph."""
    subject: Node
    predicate: Node
    object: Node
    graph: Optional[Node] = None


@runtime_checkable
class TripleStore(Protocol):
    """Queryable, enumerable collection of quads."""

    def quads(
        self,
        subject: Optional[Node] = None,
        predicate: Optional[Node] = None,
        obj: Optional[Node] = None,
        graph: Optional[Node] = None,
    ) -> Iterator[Quad]:
        """Yield every quad matching the pattern; None is a wildcard."""
        ...

    def __len__(self) -> int:
        """Number of quads in the store."""
        ...


def is_blank_node(term: Optional[Node]) -> bool:
    """True when ``term`` is a blank node."""
    return isinstance(term, BNode)


def is_iri(term: Optional[Node]) -> bool:
    """True when ``term`` is an IRI (named node)."""
    return isinstance(term, URIRef)


def is_literal(term: Optional[Node]) -> bool:
    """True when ``term`` is a literal."""
    return isinstance(term, Literal)


class DatasetTripleStore:
    """
    ``TripleStore`` backed by an rdflib ``Dataset``.

    Triples from triple-only serializations live in the default graph; quads
    from N-Quads/TriG keep their named graph. Enumeration order is the order
    rdflib's in-memory store returns, which is stable for a given document.
    """

    def __init__(self, dataset: Optional[Dataset] = None) -> None:
        self._dataset = dataset if dataset is not None else Dataset()

    @classmethod
    def from_triples(cls, triples: Iterable[Tuple[Node, Node, Node]]) -> "DatasetTripleStore":
        """Build a store holding ``triples`` in the default graph."""
        store = cls()
        for subject, predicate, obj in triples:
            store.add(subject, predicate, obj)
        return store

    @property
    def dataset(self) -> Dataset:
        """The underlying rdflib dataset."""
        return self._dataset

    def add(
        self,
        subject: Node,
        predicate: Node,
        obj: Node,
        graph: Optional[Node] = None,
    ) -> None:
        """Add one statement, to the default graph unless ``graph`` is given."""
        if graph is None:
            self._dataset.add((subject, predicate, obj))
        else:
            self._dataset.add((subject, predicate, obj, self._dataset.graph(graph)))

    def quads(
        self,
        subject: Optional[Node] = None,
        predicate: Optional[Node] = None,
        obj: Optional[Node] = None,
        graph: Optional[Node] = None,
    ) -> Iterator[Quad]:
        for s, p, o, g in self._dataset.quads((subject, predicate, obj, graph)):
            if g == DATASET_DEFAULT_GRAPH_ID:
                g = None
            yield Quad(s, p, o, g)

    def __iter__(self) -> Iterator[Quad]:
        return self.quads()

    def __len__(self) -> int:
        return sum(1 for _ in self.quads())

    def __repr__(self) -> str:
        return f"<DatasetTripleStore quads={len(self)}>"
