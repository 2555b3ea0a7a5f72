"""
Formats command: list recognised extensions and serialization hints.
"""

import argparse

from ....constants import RDFLIB_PARSER_NAMES, ExitCode, FileExtensions, RDFFormat
from .base import BaseCommand


class FormatsCommand(BaseCommand):
    """Print the extension to serialization hint table."""

    def execute(self, args: argparse.Namespace) -> int:
        for extension, rdf_format in FileExtensions.EXTENSION_TO_FORMAT.items():
            print(f"  {extension:<6} {rdf_format:<24} (rdflib: {RDFLIB_PARSER_NAMES[rdf_format]})")
        print(f"  other  {RDFFormat.DEFAULT}")
        return ExitCode.SUCCESS
