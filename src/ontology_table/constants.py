"""
Centralized configuration constants for the RDF Ontology Table viewer.

This module provides a single source of truth for the exit codes, default
values and limits used throughout the application.
"""

from enum import IntEnum
from typing import Dict, Final

# ============================================================================
# Exit Codes
# ============================================================================

class ExitCode(IntEnum):
    """Process exit codes of the CLI.

    Following Unix conventions:
    - 0: Success
    - 1: General error
    - 2: Parse error in at least one document
    - 3+: Configuration and filesystem problems
    """
    SUCCESS = 0
    ERROR = 1
    PARSE_ERROR = 2
    CONFIG_ERROR = 3
    FILE_NOT_FOUND = 5
    PERMISSION_DENIED = 6


# ============================================================================
# Serialization Hints
# ============================================================================

class RDFFormat:
    """Serialization hints (MIME types) understood by the parser."""

    TURTLE: Final[str] = "text/turtle"
    N_TRIPLES: Final[str] = "application/n-triples"
    N_QUADS: Final[str] = "application/n-quads"
    TRIG: Final[str] = "application/trig"

    DEFAULT: Final[str] = TURTLE
    """Hint used when the filename gives no usable extension."""

    ALL: Final[tuple] = (TURTLE, N_TRIPLES, N_QUADS, TRIG)


RDFLIB_PARSER_NAMES: Final[Dict[str, str]] = {
    RDFFormat.TURTLE: "turtle",
    RDFFormat.N_TRIPLES: "nt",
    RDFFormat.N_QUADS: "nquads",
    RDFFormat.TRIG: "trig",
}
"""rdflib parser plugin name for each serialization hint."""


# ============================================================================
# File Extensions
# ============================================================================

class FileExtensions:
    """Recognised file extensions."""

    EXTENSION_TO_FORMAT: Final[Dict[str, str]] = {
        ".ttl": RDFFormat.TURTLE,
        ".n3": RDFFormat.TURTLE,
        ".nt": RDFFormat.N_TRIPLES,
        ".nq": RDFFormat.N_QUADS,
        ".trig": RDFFormat.TRIG,
    }
    """Suffix to serialization hint, checked in insertion order."""

    RDF_EXTENSIONS: Final[tuple] = tuple(EXTENSION_TO_FORMAT)
    """Extensions picked up when expanding a directory."""

    CONFIG_EXTENSIONS: Final[tuple] = ('.json',)
    """Valid configuration file extensions."""

    CSV_EXTENSION: Final[str] = ".csv"


# ============================================================================
# Element Table
# ============================================================================

class TableConfig:
    """Element table layout constants."""

    IRI_COLUMN: Final[str] = "iri"
    """Header and row key of the first column."""

    VALUE_SEPARATOR: Final[str] = "; "
    """Joins multiple values of one predicate into a single cell."""

    DEFAULT_IDENTIFIER: Final[str] = "Ontology"
    """Fallback compact identifier for unnamed ontologies."""

    SORT_ASC: Final[str] = "asc"
    SORT_DESC: Final[str] = "desc"


# ============================================================================
# Display
# ============================================================================

class DisplayConfig:
    """Plain-text rendering defaults."""

    DEFAULT_MAX_ROWS: Final[int] = 50
    """Maximum table rows printed by the inspect command."""

    DEFAULT_MAX_CELL_WIDTH: Final[int] = 40
    """Cells longer than this are truncated with an ellipsis."""

    MISSING_VALUE: Final[str] = "—"
    """Placeholder for metadata fields without a value."""

    DEFAULT_PROGRESS: Final[bool] = True
    """Show a progress bar when processing more than one file."""

    CONSOLE_WIDTH: Final[int] = 60


# ============================================================================
# Logging
# ============================================================================

class LoggingConfig:
    """Logging configuration."""

    DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
    """Default logging level."""

    LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    """Text formatter pattern."""

    DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
    """strftime pattern for asctime in text logs."""

    DEFAULT_FORMAT_STYLE: Final[str] = "text"
    """Formatter used when the config does not name one."""

    JSON_DATE_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S.%fZ"
    """UTC timestamp pattern of JSON log lines."""

    SUPPORTED_FORMATS: Final[tuple[str, ...]] = ("text", "json")
    """Accepted values of logging.format."""

    MAX_LOG_FILE_MB: Final[int] = 10
    """Rotate the log file once it reaches this size (MB)."""

    LOG_BACKUP_COUNT: Final[int] = 5
    """Rotated files kept next to the active log."""

    ROTATION_ENABLED: Final[bool] = True
    """Rotate log files unless logging.rotation.enabled is false."""

    DEFAULT_LOG_FILENAME: Final[str] = "ontology_table.log"


# ============================================================================
# Configuration File
# ============================================================================

DEFAULT_CONFIG_FILENAME: Final[str] = "config.json"
