"""Compact identifiers for export filenames."""

import re
from typing import Optional

from ..constants import TableConfig

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]+")


def to_identifier(name: Optional[str]) -> str:
    """
    Convert free text to a compact PascalCase identifier.

    Example:
        >>> to_identifier("example ontology name")
        'ExampleOntologyName'
        >>> to_identifier(None)
        'Ontology'
    """
    if not name:
        return TableConfig.DEFAULT_IDENTIFIER

    parts = _NON_ALPHANUMERIC.sub(" ", str(name)).split()
    if not parts:
        return TableConfig.DEFAULT_IDENTIFIER

    return "".join(part[0].upper() + part[1:] for part in parts)
