"""
CSV export of element tables.

The first line holds the table headers; each following line holds one row's
cell values in header order. Quoting follows the ``csv`` module's minimal
policy: fields containing a comma, quote or newline are wrapped in quotes and
embedded quotes are doubled.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Iterable, Mapping, Optional, Set, Union

from ..constants import FileExtensions
from ..shared.models import TableModel
from .naming import to_identifier

logger = logging.getLogger(__name__)


def table_to_csv(
    model: TableModel,
    rows: Optional[Iterable[Mapping[str, str]]] = None,
) -> str:
    """
    Serialize a table model to CSV text.

    Args:
        model: Table model providing headers and column keys
        rows: Rows to write (e.g. a filtered/sorted view); all model rows
            when None

    Returns:
        CSV text with ``\\n`` line endings
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(model.headers)
    for row in (model.rows if rows is None else rows):
        writer.writerow(model.row_values(row))
    return buffer.getvalue()


def csv_filename(display_name: Optional[str], taken: Optional[Set[str]] = None) -> str:
    """
    Export filename for an ontology, e.g. ``PizzaOntology.csv``.

    When ``taken`` is given the name is made unique against it with a numeric
    suffix and added to the set.
    """
    base = to_identifier(display_name)
    candidate = f"{base}{FileExtensions.CSV_EXTENSION}"
    if taken is None:
        return candidate

    counter = 2
    while candidate in taken:
        candidate = f"{base}{counter}{FileExtensions.CSV_EXTENSION}"
        counter += 1
    taken.add(candidate)
    return candidate


def write_table_csv(
    model: TableModel,
    output_path: Union[str, Path],
    rows: Optional[Iterable[Mapping[str, str]]] = None,
) -> Path:
    """Write ``model`` as CSV to ``output_path``, creating parent directories."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(table_to_csv(model, rows))
    logger.info(f"Wrote element table CSV to {path}")
    return path
