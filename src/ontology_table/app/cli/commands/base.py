"""
Base command class.

This module contains the base command class that the document-processing
CLI commands inherit from: configuration loading, logging setup, input
collection and the batch run shared by ``inspect`` and ``export``.
"""

import argparse
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from ....constants import DisplayConfig, ExitCode
from ....core.services import process_batch, read_documents
from ....core.validators import InputValidator
from ....shared.models import BatchResult
from ..helpers import get_default_config_path, load_config, setup_logging

logger = logging.getLogger(__name__)

BatchRunner = Callable[..., BatchResult]


class BaseCommand(ABC):
    """
    Base class for CLI commands.

    Provides common functionality like configuration loading and logging setup.
    Subclasses should implement the execute() method.
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        batch_runner: Optional[BatchRunner] = None,
    ):
        """
        Initialize the command.

        Args:
            config_path: Path to configuration file.
            batch_runner: Optional replacement for ``process_batch`` (for tests).
        """
        self.config_path = config_path
        self._batch_runner = batch_runner or process_batch
        self._config: Optional[Dict[str, Any]] = None

    @property
    def config(self) -> Dict[str, Any]:
        """
        Lazy-load configuration.

        An explicit ``--config`` path must exist; the default ``config.json``
        is optional.
        """
        if self._config is None:
            if self.config_path:
                self._config = load_config(self.config_path)
            else:
                default_path = get_default_config_path()
                self._config = load_config(default_path) if Path(default_path).exists() else {}
        return self._config

    def section(self, name: str) -> Dict[str, Any]:
        return self.config.get(name, {})

    def setup_logging_from_config(self, args: argparse.Namespace) -> None:
        setup_logging(
            level=getattr(args, 'log_level', None),
            config=self.section('logging'),
        )

    def show_progress(self, args: argparse.Namespace) -> bool:
        if getattr(args, 'no_progress', False):
            return False
        return bool(self.section('display').get('progress', DisplayConfig.DEFAULT_PROGRESS))

    def run_batch(self, args: argparse.Namespace) -> BatchResult:
        """
        Collect the input files and run the pipeline over them in order.

        Raises:
            FileNotFoundError: If an input path does not exist
        """
        files: List[Path] = InputValidator.collect_input_files(
            args.paths, recursive=getattr(args, 'recursive', False)
        )
        logger.info(f"Processing {len(files)} file(s)")
        return self._batch_runner(read_documents(files), show_progress=self.show_progress(args))

    @staticmethod
    def batch_exit_code(result: BatchResult) -> int:
        return ExitCode.SUCCESS if result.success else ExitCode.PARSE_ERROR

    @abstractmethod
    def execute(self, args: argparse.Namespace) -> int:
        """
        Execute the command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code (0 for success, non-zero for error).
        """
        pass
