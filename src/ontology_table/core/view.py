"""
In-memory filter and sort over a built table model.

Everything here is pure: the table model is never modified, so the same
model can be re-queried with different filter/sort parameters.
"""

import locale
import logging
from functools import cmp_to_key
from typing import List, Mapping, Optional

from ..constants import TableConfig
from ..shared.models import TableModel

logger = logging.getLogger(__name__)


def _row_matches(row: Mapping[str, str], needle: str) -> bool:
    return any(needle in str(value).lower() for value in row.values())


def filter_rows(model: TableModel, query: Optional[str]) -> List[Mapping[str, str]]:
    """Rows with at least one field containing ``query`` (case-insensitive)."""
    needle = (query or "").lower()
    if not needle:
        return list(model.rows)
    return [row for row in model.rows if _row_matches(row, needle)]


def filter_and_sort_rows(
    model: TableModel,
    query: Optional[str] = None,
    sort_index: Optional[int] = None,
    sort_direction: str = TableConfig.SORT_ASC,
) -> List[Mapping[str, str]]:
    """
    Filter and sort the rows of a table model.

    Args:
        model: Table model to read from
        query: Case-insensitive substring matched against every field;
            empty or None keeps all rows
        sort_index: Header index to sort by (0 is the IRI column); None or
            an out-of-range index leaves the filtered rows in model order
        sort_direction: ``"asc"`` or ``"desc"``

    Returns:
        A new list of rows
    """
    filtered = filter_rows(model, query)

    key = model.column_key(sort_index) if sort_index is not None else None
    if key is None:
        return filtered

    def compare(a: Mapping[str, str], b: Mapping[str, str]) -> int:
        result = locale.strcoll(str(a.get(key, "")), str(b.get(key, "")))
        return -result if sort_direction == TableConfig.SORT_DESC else result

    logger.debug(f"Sorting {len(filtered)} rows by {key} ({sort_direction})")
    return sorted(filtered, key=cmp_to_key(compare))
