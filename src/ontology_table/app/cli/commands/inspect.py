"""
Inspect command: metadata cards, element tables and the file list.
"""

import argparse
import json
import logging

from ....constants import DisplayConfig, ExitCode
from ....core.view import filter_and_sort_rows
from ..helpers import ConfigError, print_footer, print_header
from ..render import render_file_list, render_metadata_card, render_table
from .base import BaseCommand

logger = logging.getLogger(__name__)


class InspectCommand(BaseCommand):
    """
    Print the metadata card and element table of each ontology.

    Usage:
        inspect <path>... [--query Q] [--sort-column N] [--sort-direction asc|desc]
    """

    def execute(self, args: argparse.Namespace) -> int:
        try:
            self.setup_logging_from_config(args)
            result = self.run_batch(args)
        except ConfigError as e:
            print(f"✗ Configuration error: {e}")
            return ExitCode.CONFIG_ERROR
        except FileNotFoundError as e:
            print(f"✗ {e}")
            return ExitCode.FILE_NOT_FOUND
        except PermissionError as e:
            print(f"✗ {e}")
            return ExitCode.PERMISSION_DENIED
        except (OSError, ValueError) as e:
            print(f"✗ Error reading input: {e}")
            return ExitCode.ERROR

        if args.json:
            payload = result.to_dict()
            for doc_payload, doc in zip(payload["documents"], result.documents):
                rows = filter_and_sort_rows(doc.table, args.query, args.sort_column, args.sort_direction)
                doc_payload["table"]["rows"] = [dict(row) for row in rows]
            print(json.dumps(payload, indent=2, ensure_ascii=False))
            return self.batch_exit_code(result)

        display = self.section('display')
        max_rows = args.max_rows if args.max_rows is not None else display.get(
            'max_rows', DisplayConfig.DEFAULT_MAX_ROWS)
        max_cell_width = args.max_cell_width if args.max_cell_width is not None else display.get(
            'max_cell_width', DisplayConfig.DEFAULT_MAX_CELL_WIDTH)

        for doc in result.documents:
            print_header(doc.display_name)
            print(render_metadata_card(doc.metadata))
            print()
            rows = filter_and_sort_rows(doc.table, args.query, args.sort_column, args.sort_direction)
            print(render_table(doc.table, rows, max_rows=int(max_rows), max_cell_width=int(max_cell_width)))

        print_header("Files")
        print(render_file_list(result))
        print(result.get_summary())
        print_footer()

        return self.batch_exit_code(result)
