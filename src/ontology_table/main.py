#!/usr/bin/env python3
"""
RDF Ontology Table viewer

Main entry point for inspecting RDF ontologies from the command line.

Usage:
    ontology-table inspect <file_or_dir>... [--query Q] [--sort-column N] [--json]
    ontology-table export <file_or_dir>... [--output-dir DIR]
    ontology-table formats
"""

import locale
import logging
import sys
from typing import List, Optional

from .app.cli.commands import COMMANDS
from .app.cli.parsers import create_argument_parser
from .constants import ExitCode

logger = logging.getLogger(__name__)


def _apply_user_collation() -> None:
    """Sort table cells by the user's locale instead of the C default."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning(f"Could not apply the user collation locale: {e}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return ExitCode.ERROR

    _apply_user_collation()

    command = COMMANDS[args.command](config_path=getattr(args, 'config', None))
    try:
        return int(command.execute(args))
    except KeyboardInterrupt:
        print("\n✗ Interrupted")
        return ExitCode.ERROR
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"✗ Unexpected error: {e}")
        return ExitCode.ERROR


if __name__ == '__main__':
    sys.exit(main())
