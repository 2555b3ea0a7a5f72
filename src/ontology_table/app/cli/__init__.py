"""
Command-line interface.

- parsers: argparse configuration
- helpers: logging setup, configuration loading, console helpers
- render: plain-text metadata cards, tables and file lists
- commands: command implementations
"""
