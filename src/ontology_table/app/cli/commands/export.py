"""
Export command for writing element tables to CSV files.
"""

import argparse
import logging
from typing import Set

from ....constants import ExitCode
from ....core.csv_export import csv_filename, write_table_csv
from ....core.validators import InputValidator
from ....core.view import filter_and_sort_rows
from ..helpers import ConfigError
from ..render import render_file_list
from .base import BaseCommand

logger = logging.getLogger(__name__)


class ExportCommand(BaseCommand):
    """
    Export each ontology's element table as ``<OntologyName>.csv``.

    Usage:
        export <path>... [--output-dir DIR] [--query Q] [--sort-column N]
    """

    def execute(self, args: argparse.Namespace) -> int:
        try:
            self.setup_logging_from_config(args)
            output_dir = InputValidator.validate_output_directory(
                args.output_dir or self.section('export').get('output_dir', '.')
            )
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

        taken: Set[str] = set()
        for doc in result.documents:
            rows = filter_and_sort_rows(doc.table, args.query, args.sort_column, args.sort_direction)
            target = output_dir / csv_filename(doc.display_name, taken)
            try:
                write_table_csv(doc.table, target, rows)
            except OSError as e:
                print(f"✗ Failed to write {target}: {e}")
                return ExitCode.ERROR
            print(f"✓ Exported {len(rows)} rows from {doc.filename} to {target}")

        print(render_file_list(result))
        print(result.get_summary())
        return self.batch_exit_code(result)
