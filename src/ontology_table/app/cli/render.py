"""
Plain-text rendering of processing results.

Renders the metadata card, the element table and the processed file list
as strings; printing is left to the commands.
"""

from typing import List, Mapping, Optional, Sequence

from ...constants import DisplayConfig
from ...shared.models import BatchResult, OntologyMetadata, TableModel

METADATA_LABELS = (
    ("Ontology IRI", "ontology_iri"),
    ("Name", "ontology_name"),
    ("Version IRI", "version_iri"),
    ("Version info", "version_info"),
    ("Description", "description"),
    ("License", "license"),
    ("Rights holder", "rights_holder"),
)


def truncate(value: str, width: int) -> str:
    """Collapse whitespace and shorten ``value`` to ``width`` characters."""
    value = " ".join(value.split())
    if width <= 0 or len(value) <= width:
        return value
    if width == 1:
        return "…"
    return value[:width - 1] + "…"


def render_metadata_card(metadata: OntologyMetadata, title: Optional[str] = None) -> str:
    label_width = max(len(label) for label, _ in METADATA_LABELS)
    lines = []
    if title:
        lines.append(title)
        lines.append("-" * len(title))
    if not metadata.has_ontology:
        lines.append("No owl:Ontology declaration found.")
        return "\n".join(lines)
    for label, attr in METADATA_LABELS:
        value = getattr(metadata, attr) or DisplayConfig.MISSING_VALUE
        lines.append(f"{label.ljust(label_width)} : {value}")
    return "\n".join(lines)


def render_table(
    model: TableModel,
    rows: Optional[Sequence[Mapping[str, str]]] = None,
    max_rows: int = DisplayConfig.DEFAULT_MAX_ROWS,
    max_cell_width: int = DisplayConfig.DEFAULT_MAX_CELL_WIDTH,
) -> str:
    """
    Render rows of ``model`` as a fixed-width grid.

    Args:
        model: Table model providing headers and column keys
        rows: Rows to show (defaults to all model rows)
        max_rows: Maximum number of rows printed; 0 or less prints all
        max_cell_width: Cell truncation width

    Returns:
        The grid followed by a "showing N of M rows" line
    """
    rows = list(model.rows if rows is None else rows)
    shown = rows if max_rows <= 0 else rows[:max_rows]

    grid: List[List[str]] = [[truncate(h, max_cell_width) for h in model.headers]]
    for row in shown:
        grid.append([truncate(v, max_cell_width) for v in model.row_values(row)])

    widths = [max(len(line[i]) for line in grid) for i in range(len(model.headers))]

    def format_line(cells: List[str]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    lines = [format_line(grid[0]), "-+-".join("-" * w for w in widths)]
    lines.extend(format_line(cells) for cells in grid[1:])
    lines.append(f"(showing {len(shown)} of {len(rows)} rows; {model.row_count} elements total)")
    return "\n".join(lines)


def render_file_list(result: BatchResult) -> str:
    """One line per processed document, then one per failure."""
    lines = []
    for doc in result.documents:
        lines.append(f"✓ {doc.display_name} ({doc.filename}): {doc.triple_count} triples")
    for failure in result.failures:
        lines.append(f"✗ {failure.filename}: {failure.message}")
    return "\n".join(lines)
