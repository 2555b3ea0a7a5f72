"""
CLI argument parser configuration.

This module defines the argument parser structure for all CLI commands.

Command Structure:
    - inspect <path>...   print metadata card, element table and file list
    - export  <path>...   write one CSV per ontology
    - formats             list recognised extensions and serialization hints
"""

import argparse

from ... import __version__
from ...constants import TableConfig


# ============================================================================
# Shared Flag Group Builders
# ============================================================================

def add_input_flags(parser: argparse.ArgumentParser) -> None:
    """Add common input-related flags."""
    parser.add_argument(
        'paths',
        nargs='+',
        help='RDF files or directories to process (.ttl, .n3, .nt, .nq, .trig)'
    )
    parser.add_argument(
        '--recursive', '-r',
        action='store_true',
        help='Recursively search directories for RDF files'
    )


def add_view_flags(parser: argparse.ArgumentParser) -> None:
    """Add filter/sort flags applied to every element table."""
    parser.add_argument(
        '--query', '-q',
        default='',
        help='Keep only rows where any cell contains this text (case-insensitive)'
    )
    parser.add_argument(
        '--sort-column',
        type=int,
        default=None,
        metavar='INDEX',
        help='Column index to sort by (0 = iri); out-of-range keeps the original order'
    )
    parser.add_argument(
        '--sort-direction',
        choices=[TableConfig.SORT_ASC, TableConfig.SORT_DESC],
        default=TableConfig.SORT_ASC,
        help='Sort direction (default: asc)'
    )


def add_config_flags(parser: argparse.ArgumentParser) -> None:
    """Add configuration and logging flags."""
    parser.add_argument(
        '--config', '-c',
        help='Path to configuration file (default: ./config.json when present)'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Override the configured log level'
    )
    parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable the progress bar for multi-file batches'
    )


# ============================================================================
# Main Parser Factory
# ============================================================================

def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser with all subcommands.
    """
    parser = argparse.ArgumentParser(
        prog='ontology-table',
        description="Inspect RDF ontologies as metadata cards and element tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Show metadata and the element table
    %(prog)s inspect pizza.ttl
    %(prog)s inspect ontologies/ --recursive --query pizza --sort-column 2

    # Machine-readable output
    %(prog)s inspect pizza.ttl --json

    # Export element tables to CSV
    %(prog)s export pizza.ttl wine.nt --output-dir exports/

    # List recognised formats
    %(prog)s formats
        """,
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    _add_inspect_parser(subparsers)
    _add_export_parser(subparsers)
    _add_formats_parser(subparsers)

    return parser


def _add_inspect_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the inspect command parser."""
    parser = subparsers.add_parser(
        'inspect',
        help='Print ontology metadata and element tables'
    )
    add_input_flags(parser)
    add_view_flags(parser)
    add_config_flags(parser)
    parser.add_argument(
        '--max-rows',
        type=int,
        default=None,
        help='Maximum table rows to print per ontology (0 = all)'
    )
    parser.add_argument(
        '--max-cell-width',
        type=int,
        default=None,
        help='Truncate cells longer than this many characters'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print results as JSON instead of text'
    )


def _add_export_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the export command parser."""
    parser = subparsers.add_parser(
        'export',
        help='Export element tables as CSV files'
    )
    add_input_flags(parser)
    add_view_flags(parser)
    add_config_flags(parser)
    parser.add_argument(
        '--output-dir', '-o',
        default=None,
        help='Directory for CSV files (default: current directory)'
    )


def _add_formats_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the formats command parser."""
    subparsers.add_parser(
        'formats',
        help='List recognised file extensions and serialization hints'
    )
