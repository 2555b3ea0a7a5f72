"""
Document processing pipeline.

Runs format detection, parsing, metadata extraction and table projection for
one document, and drives a batch of documents strictly in sequence.

Error policy:
    ``process_document`` never catches: parse errors and anything else
    propagate unchanged. ``process_batch`` is the single place where a
    per-document failure is caught, logged and recorded so the remaining
    documents still get processed.

Usage:
    from ontology_table.core.services import process_batch

    result = process_batch([("a.ttl", text_a), ("b.nt", text_b)])
    for doc in result.documents:
        print(doc.display_name, doc.triple_count)
    for failure in result.failures:
        print(failure.filename, failure.message)
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from tqdm import tqdm

from ...formats.rdf.format_detector import detect_rdf_format
from ...formats.rdf.rdf_parser import RDFGraphParser
from ...shared.models import BatchResult, DocumentFailure, DocumentResult
from ..metadata import extract_ontology_metadata
from ..table_builder import build_element_table_model

logger = logging.getLogger(__name__)

# (filename, raw text)
DocumentInput = Tuple[str, str]


def process_document(
    filename: str,
    text: str,
    rdf_format: Optional[str] = None,
) -> DocumentResult:
    """
    Run the full pipeline on one document.

    Args:
        filename: Name used for format detection and display
        text: Raw RDF text
        rdf_format: Serialization hint; detected from ``filename`` when None

    Returns:
        DocumentResult with metadata, table model and triple count

    Raises:
        RDFParseError: If the text cannot be parsed
    """
    hint = rdf_format or detect_rdf_format(filename)
    store = RDFGraphParser.parse_text(text, hint, source=filename)

    metadata = extract_ontology_metadata(store)
    table = build_element_table_model(store)

    return DocumentResult(
        filename=filename,
        rdf_format=hint,
        metadata=metadata,
        table=table,
        triple_count=len(store),
    )


def process_batch(
    documents: Sequence[DocumentInput],
    show_progress: bool = False,
) -> BatchResult:
    """
    Process documents one after another.

    A failing document is recorded in ``BatchResult.failures`` and does not
    affect documents before or after it.
    """
    result = BatchResult()

    for filename, text in tqdm(
        documents,
        desc="Processing ontologies",
        unit="file",
        disable=not show_progress or len(documents) < 2,
    ):
        try:
            result.documents.append(process_document(filename, text))
        except Exception as e:
            logger.error(f"Failed to process {filename}: {e}")
            result.failures.append(DocumentFailure(filename=filename, error=e))

    logger.info(result.get_summary())
    return result


def read_documents(paths: Iterable[Union[str, Path]]) -> List[DocumentInput]:
    """
    Read files as (filename, text) pairs, in the given order.

    Files that are not valid UTF-8 are still read: undecodable bytes become
    U+FFFD and a warning is logged, so one badly encoded file cannot stop
    the rest of the batch.

    Raises:
        FileNotFoundError: If a path does not exist
    """
    documents: List[DocumentInput] = []
    for path in paths:
        path = Path(path)
        raw = path.read_bytes()
        try:
            text = raw.decode('utf-8')
        except UnicodeDecodeError as e:
            logger.warning(f"{path.name} is not valid UTF-8 ({e.reason}); undecodable bytes replaced")
            text = raw.decode('utf-8', errors='replace')
        documents.append((path.name, text))
    return documents
