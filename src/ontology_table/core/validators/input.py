"""
Input validation utilities for the ontology table viewer.

This module provides centralized validation of the paths handed to the CLI:
- Input file path validation (existence, type, readability)
- Directory expansion to RDF files
- Output directory validation

Explicitly named files are accepted whatever their extension (format
detection falls back to Turtle); directories only contribute files with a
recognised RDF extension.

Usage:
    from ontology_table.core.validators import InputValidator

    files = InputValidator.collect_input_files(["ontologies/"], recursive=True)
"""

import logging
import os
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence

from ...constants import FileExtensions
from ...formats.rdf.format_detector import is_rdf_filename

logger = logging.getLogger(__name__)


class InputValidator:
    """
    Centralized validation for CLI path arguments.

    Raises the built-in exception types so callers can map them to exit
    codes: ``FileNotFoundError``, ``PermissionError``, ``ValueError`` and
    ``TypeError``.
    """

    CONFIG_EXTENSIONS = list(FileExtensions.CONFIG_EXTENSIONS)

    @staticmethod
    def _check_symlink(path_obj: Path, strict: bool = False) -> None:
        """Warn about a symlink, or refuse it when ``strict``."""
        if not path_obj.is_symlink():
            return
        if strict:
            raise PermissionError(
                f"Symlink detected: {path_obj}. Pass the target file instead of a link."
            )
        logger.warning(f"Following symlink: {path_obj}")

    @staticmethod
    def _check_extension(path_obj: Path, allowed_extensions: Sequence[str]) -> None:
        allowed = [f".{ext.lower().lstrip('.')}" for ext in allowed_extensions]
        if path_obj.suffix.lower() not in allowed:
            raise ValueError(
                f"Invalid file extension: '{path_obj.suffix}' for {path_obj.name} "
                f"(expected {', '.join(allowed)})"
            )

    @classmethod
    def validate_file_path(
        cls,
        path: Any,
        allowed_extensions: Optional[Sequence[str]] = None,
        check_exists: bool = True,
        check_readable: bool = True,
        reject_symlinks: bool = False,
    ) -> Path:
        """
        Validate a file path given on the command line.

        Args:
            path: str or Path
            allowed_extensions: Accepted suffixes, with or without the dot
            check_exists: Require an existing regular file
            check_readable: Require read permission (only with check_exists)
            reject_symlinks: Raise on symlinks instead of warning

        Returns:
            The path as a Path object

        Raises:
            TypeError: If path is not a string or Path
            ValueError: If path is empty, not a file, or has an invalid extension
            FileNotFoundError: If the file is missing
            PermissionError: If the file is unreadable or a rejected symlink
        """
        if not isinstance(path, (str, Path)):
            raise TypeError(f"File path must be string or Path, got {type(path).__name__}")

        text = str(path).strip()
        if not text:
            raise ValueError("File path cannot be empty")
        path_obj = Path(text)

        cls._check_symlink(path_obj, strict=reject_symlinks)

        if check_exists and not path_obj.exists():
            raise FileNotFoundError(f"File not found: {path_obj}")
        if check_exists and not path_obj.is_file():
            raise ValueError(f"Path is not a file: {path_obj}")

        if allowed_extensions:
            cls._check_extension(path_obj, allowed_extensions)

        if check_exists and check_readable and not os.access(path_obj, os.R_OK):
            raise PermissionError(f"Permission denied reading {path_obj}")

        return path_obj

    @classmethod
    def validate_config_file_path(cls, path: Any) -> Path:
        """Validate a JSON configuration file path; symlinks are rejected."""
        return cls.validate_file_path(
            path,
            allowed_extensions=cls.CONFIG_EXTENSIONS,
            reject_symlinks=True,
        )

    @classmethod
    def collect_input_files(
        cls,
        paths: Iterable[Any],
        recursive: bool = False,
    ) -> List[Path]:
        """
        Expand CLI path arguments into the ordered list of files to process.

        Files are kept as given. Directories contribute their RDF files,
        sorted by name; with ``recursive`` subdirectories are searched too.
        Duplicates are dropped, keeping the first occurrence.

        Raises:
            FileNotFoundError: If a path does not exist
        """
        collected: List[Path] = []
        seen = set()

        for raw in paths:
            path_obj = Path(str(raw).strip())
            if not path_obj.exists():
                raise FileNotFoundError(f"Path not found: {path_obj}")

            if path_obj.is_dir():
                pattern = "**/*" if recursive else "*"
                candidates = sorted(
                    p for p in path_obj.glob(pattern)
                    if p.is_file() and is_rdf_filename(p.name)
                )
                if not candidates:
                    logger.warning(f"No RDF files found in {path_obj}")
            else:
                candidates = [cls.validate_file_path(path_obj)]

            for candidate in candidates:
                key = candidate.resolve()
                if key in seen:
                    continue
                seen.add(key)
                collected.append(candidate)

        return collected

    @staticmethod
    def validate_output_directory(path: Any) -> Path:
        """
        Validate (and create) an output directory.

        Raises:
            ValueError: If the path exists and is not a directory
        """
        path_obj = Path(str(path).strip() or ".")
        if path_obj.exists() and not path_obj.is_dir():
            raise ValueError(f"Output path is not a directory: {path_obj}")
        path_obj.mkdir(parents=True, exist_ok=True)
        return path_obj
