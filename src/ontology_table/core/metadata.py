"""
Ontology metadata extraction.

Locates the ``owl:Ontology`` subject of a document and resolves the metadata
card fields from it using fixed predicate-preference lists.
"""

import logging
from typing import Final, Optional, Tuple

from rdflib.namespace import DC, DCTERMS, OWL, RDF, RDFS, SKOS

from ..formats.rdf.store import TripleStore
from ..shared.models import OntologyMetadata
from .literals import get_preferred_iri, get_preferred_literal

logger = logging.getLogger(__name__)

# Predicate preference lists, most preferred first
NAME_PREDICATES: Final[Tuple[str, ...]] = (str(RDFS.label), str(DCTERMS.title), str(DC.title))
VERSION_IRI_PREDICATES: Final[Tuple[str, ...]] = (str(OWL.versionIRI), str(DCTERMS.hasVersion))
VERSION_INFO_PREDICATES: Final[Tuple[str, ...]] = (str(OWL.versionInfo), str(DCTERMS.hasVersion))
DESCRIPTION_PREDICATES: Final[Tuple[str, ...]] = (
    str(SKOS.definition),
    str(DCTERMS.description),
    str(DC.description),
)
LICENSE_PREDICATES: Final[Tuple[str, ...]] = (
    str(DCTERMS.license),
    str(DCTERMS.rights),
    str(DC.rights),
    str(DCTERMS.accessRights),
)
RIGHTS_HOLDER_PREDICATES: Final[Tuple[str, ...]] = (str(DCTERMS.rightsHolder),)


def get_ontology_subject_iri(store: TripleStore) -> Optional[str]:
    """
    Return the subject of the first ``rdf:type owl:Ontology`` statement.

    Only one ontology subject is ever considered; when a document declares
    several, the first in store order wins.
    """
    for quad in store.quads(None, RDF.type, OWL.Ontology, None):
        iri = str(quad.subject)
        logger.debug(f"Ontology subject found: {iri}")
        return iri

    logger.debug("No ontology subject found")
    return None


def extract_ontology_metadata(store: TripleStore) -> OntologyMetadata:
    """
    Extract ontology-level metadata.

    Args:
        store: Parsed document

    Returns:
        OntologyMetadata; every field is None when the document has no
        ``owl:Ontology`` subject
    """
    ontology_iri = get_ontology_subject_iri(store)
    if ontology_iri is None:
        return OntologyMetadata.empty()

    metadata = OntologyMetadata(
        ontology_iri=ontology_iri,
        ontology_name=get_preferred_literal(store, ontology_iri, NAME_PREDICATES),
        version_iri=get_preferred_iri(store, ontology_iri, VERSION_IRI_PREDICATES),
        version_info=get_preferred_literal(store, ontology_iri, VERSION_INFO_PREDICATES),
        description=get_preferred_literal(store, ontology_iri, DESCRIPTION_PREDICATES),
        license=get_preferred_iri(store, ontology_iri, LICENSE_PREDICATES),
        rights_holder=get_preferred_literal(store, ontology_iri, RIGHTS_HOLDER_PREDICATES),
    )
    logger.info(f"Extracted metadata for {ontology_iri} (name: {metadata.ontology_name!r})")
    return metadata
