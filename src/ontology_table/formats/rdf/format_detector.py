"""
Serialization hint detection.

Maps a filename to the MIME-style hint handed to the RDF parser. Detection is
a case-insensitive suffix match and never fails: unknown or missing
extensions fall back to Turtle.
"""

import logging
from typing import Optional

from ...constants import RDFLIB_PARSER_NAMES, FileExtensions, RDFFormat

logger = logging.getLogger(__name__)


def detect_rdf_format(filename: Optional[str]) -> str:
    """
    Guess the RDF serialization hint from a filename extension.

    Args:
        filename: File name or path; may be empty or None.

    Returns:
        One of ``text/turtle``, ``application/n-triples``,
        ``application/n-quads`` or ``application/trig``.

    Example:
        >>> detect_rdf_format("people.NT")
        'application/n-triples'
        >>> detect_rdf_format(None)
        'text/turtle'
    """
    lower = (filename or "").lower()
    for extension, rdf_format in FileExtensions.EXTENSION_TO_FORMAT.items():
        if lower.endswith(extension):
            return rdf_format

    logger.debug(f"No known RDF extension on {filename!r}, defaulting to {RDFFormat.DEFAULT}")
    return RDFFormat.DEFAULT


def rdflib_parser_name(rdf_format: str) -> str:
    """
    Return the rdflib parser plugin name for a serialization hint.

    Raises:
        KeyError: If the hint is not one of the supported formats.
    """
    return RDFLIB_PARSER_NAMES[rdf_format]


def is_rdf_filename(filename: str) -> bool:
    """True when ``filename`` carries one of the recognised RDF extensions."""
    return filename.lower().endswith(FileExtensions.RDF_EXTENSIONS)
