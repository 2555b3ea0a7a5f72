"""
RDF Parser Module

This module turns raw RDF text plus a serialization hint into a
``TripleStore``. rdflib does the actual parsing; this layer selects the
parser plugin, normalises parser failures into ``RDFParseError`` and logs the
outcome.

Components:
- RDFParseError: Malformed text or unsupported serialization hint
- RDFGraphParser: Text/file parsing into a DatasetTripleStore
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from rdflib import Dataset

from .format_detector import detect_rdf_format, rdflib_parser_name
from .store import DatasetTripleStore

logger = logging.getLogger(__name__)


class RDFParseError(ValueError):
    """Raised when a document cannot be parsed as the requested RDF format."""

    def __init__(self, message: str, rdf_format: Optional[str] = None, source: Optional[str] = None):
        super().__init__(message)
        self.rdf_format = rdf_format
        self.source = source


class RDFGraphParser:
    """
    Handles RDF text parsing into a queryable store.

    Empty or whitespace-only text yields an empty store; anything the rdflib
    parser rejects raises ``RDFParseError`` with the original exception
    chained.
    """

    @staticmethod
    def infer_format_from_path(path: Union[str, Path]) -> str:
        """Serialization hint for a file path (Turtle when unknown)."""
        return detect_rdf_format(Path(path).name)

    @staticmethod
    def parse_text(
        text: str,
        rdf_format: str,
        source: Optional[str] = None,
    ) -> DatasetTripleStore:
        """
        Parse RDF text into a store.

        Args:
            text: The serialized RDF document
            rdf_format: One of the serialization hints from ``RDFFormat``
            source: Optional name used in log and error messages

        Returns:
            DatasetTripleStore holding every parsed statement

        Raises:
            RDFParseError: If the hint is unsupported or the text is malformed
        """
        label = source or "<text>"

        try:
            parser_name = rdflib_parser_name(rdf_format)
        except KeyError:
            raise RDFParseError(
                f"Unsupported RDF format hint: {rdf_format!r}",
                rdf_format=rdf_format,
                source=source,
            ) from None

        logger.info(f"Parsing {label} as {rdf_format}")
        dataset = Dataset()

        if not text or not text.strip():
            logger.warning(f"{label} is empty - no triples to parse")
            return DatasetTripleStore(dataset)

        try:
            dataset.parse(data=text, format=parser_name)
        except Exception as e:
            logger.error(f"Failed to parse {label}: {e}")
            raise RDFParseError(
                f"Invalid RDF syntax in {label} ({rdf_format}): {e}",
                rdf_format=rdf_format,
                source=source,
            ) from e

        store = DatasetTripleStore(dataset)
        logger.info(f"Successfully parsed {len(store)} triples from {label}")
        return store

    @classmethod
    def parse_file(
        cls,
        file_path: Union[str, Path],
        rdf_format: Optional[str] = None,
    ) -> Tuple[DatasetTripleStore, str]:
        """
        Read and parse an RDF file.

        Args:
            file_path: Path to the RDF file
            rdf_format: Serialization hint; inferred from the filename when None

        Returns:
            Tuple of (store, serialization hint used)

        Raises:
            FileNotFoundError: If file doesn't exist
            RDFParseError: If file has invalid syntax
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        hint = rdf_format or cls.infer_format_from_path(path)
        text = path.read_text(encoding="utf-8")
        return cls.parse_text(text, hint, source=str(path)), hint


def parse_rdf_text_to_store(text: str, rdf_format: str) -> DatasetTripleStore:
    """Parse RDF ``text`` using serialization hint ``rdf_format``."""
    return RDFGraphParser.parse_text(text, rdf_format)
