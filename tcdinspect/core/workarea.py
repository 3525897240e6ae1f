#!/usr/bin/env python3
"""
Per-call temporary work area for the decode pipeline

Each decode call stages its input in a freshly created directory holding at
most three files: the staged database, the decoder's text output and its
optional XML output. The directory is removed on every exit path.

Copyright (C) 2025 tcdinspect contributors
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import shutil
import tempfile
from enum import Enum
from pathlib import Path

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..exceptions import WorkAreaError
from ..utils.logger import get_logger
from .constants import (
    PRIMARY_OUTPUT_EXTENSION,
    SECONDARY_OUTPUT_EXTENSION,
    STAGED_BASE_NAME,
    STAGED_EXTENSION,
    WORKAREA_PREFIX,
)

logger = get_logger(__name__)


class PipelineStage(Enum):
    """Progress of a single decode call"""

    START = "start"
    STAGED = "staged"
    INVOKED = "invoked"
    DECODED = "decoded"
    FAILED = "failed"
    TORN_DOWN = "torn_down"


class WorkArea:
    """
    Exclusively owned temporary directory for one decode call.

    Usable as a context manager: the directory is created on entry and torn
    down on exit, whether or not the body raised.

    Attributes:
        directory: Path of the created directory, None before creation
        stage: Current PipelineStage of the owning decode call
    """

    def __init__(
        self,
        base_name: str = STAGED_BASE_NAME,
        extension: str = STAGED_EXTENSION,
        prefix: str = WORKAREA_PREFIX,
        parent_dir: str | Path | None = None,
        file_system: FileSystemAdapter = default_file_system,
    ):
        self.base_name = base_name
        self.extension = extension
        self.prefix = prefix
        self.parent_dir = parent_dir
        self.file_system = file_system
        self.directory: Path | None = None
        self.stage = PipelineStage.START

    def __enter__(self) -> WorkArea:
        self.create()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.teardown()
        return False

    def create(self) -> Path:
        """Create the uniquely named directory (mode 0700)."""
        try:
            self.directory = Path(tempfile.mkdtemp(prefix=self.prefix, dir=self.parent_dir))
        except OSError as e:
            raise WorkAreaError(f"Could not create work area: {e}") from e
        logger.debug(f"Created work area {self.directory}")
        return self.directory

    def _require_directory(self) -> Path:
        if self.directory is None:
            raise WorkAreaError("Work area has not been created")
        return self.directory

    @property
    def input_path(self) -> Path:
        return self._require_directory() / f"{self.base_name}{self.extension}"

    @property
    def prefix_path(self) -> Path:
        """Output prefix handed to the decoder: directory plus base name."""
        return self._require_directory() / self.base_name

    @property
    def primary_output_path(self) -> Path:
        return self._require_directory() / f"{self.base_name}{PRIMARY_OUTPUT_EXTENSION}"

    @property
    def secondary_output_path(self) -> Path:
        return self._require_directory() / f"{self.base_name}{SECONDARY_OUTPUT_EXTENSION}"

    def advance(self, stage: PipelineStage) -> None:
        logger.debug(f"Work area {self.directory}: {self.stage.value} -> {stage.value}")
        self.stage = stage

    def stage_input(self, data: bytes) -> Path:
        """Write the raw database bytes verbatim into the work area."""
        path = self.input_path
        try:
            self.file_system.write_bytes(path, data)
        except OSError as e:
            raise WorkAreaError(f"Could not write staged input {path}: {e}") from e
        self.advance(PipelineStage.STAGED)
        return path

    def teardown(self) -> None:
        """Remove the three known files and the directory. Never raises."""
        if self.directory is None:
            self.advance(PipelineStage.TORN_DOWN)
            return

        for path in (self.input_path, self.primary_output_path, self.secondary_output_path):
            self.file_system.remove_quietly(path)

        try:
            self.directory.rmdir()
        except FileNotFoundError:
            pass
        except OSError as e:
            # The decoder left something else behind
            logger.debug(f"Work area {self.directory} not empty after cleanup: {e}")
            shutil.rmtree(self.directory, ignore_errors=True)

        self.advance(PipelineStage.TORN_DOWN)
