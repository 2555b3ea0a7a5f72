"""
Well-known namespaces and CURIE shortening.

The prefix registry is deliberately small: it only covers the vocabularies
the metadata extractor and the element table care about.
"""

from typing import Dict, Final

from rdflib.namespace import DC, DCTERMS, OWL, RDF, RDFS, SKOS

# namespace IRI -> prefix, checked in insertion order
COMMON_PREFIXES: Final[Dict[str, str]] = {
    str(RDF): "rdf",
    str(RDFS): "rdfs",
    str(OWL): "owl",
    str(DC): "dc",
    str(DCTERMS): "dcterms",
    str(SKOS): "skos",
}


def iri_to_curie(iri: str) -> str:
    """
    Shorten ``iri`` to ``prefix:local`` when it falls in a known namespace.

    Example:
        >>> iri_to_curie("http://www.w3.org/2000/01/rdf-schema#label")
        'rdfs:label'
        >>> iri_to_curie("http://example.org/Thing")
        'http://example.org/Thing'
    """
    for namespace, prefix in COMMON_PREFIXES.items():
        if iri.startswith(namespace):
            return f"{prefix}:{iri[len(namespace):]}"
    return iri
