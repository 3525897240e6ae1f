#!/usr/bin/env python3
"""
External decoder invocation

Runs ``<decoder> <input-file> <output-prefix>`` synchronously inside the work
area, with stdin closed and stdout/stderr merged into one captured stream.

Copyright (C) 2025 tcdinspect contributors
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import os
import shutil
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path

from ..exceptions import DecoderNotFoundError, DecoderTimeoutError
from ..utils.logger import get_logger
from .constants import DECODER_ENV_VAR, DEFAULT_DECODER

logger = get_logger(__name__)


def default_decoder() -> str:
    """Decoder executable, honouring the TCDINSPECT_DECODER override."""
    return os.getenv(DECODER_ENV_VAR, "").strip() or DEFAULT_DECODER


@dataclass
class DecoderRun:
    """Outcome of one decoder process"""

    returncode: int
    output: bytes
    execution_time: float


class DecoderRunner:
    """
    Locate and run the external tide database decoder.

    Attributes:
        executable: Command name looked up on PATH, or a path to the program
        timeout: Seconds to wait before killing the decoder, None to wait forever
    """

    def __init__(self, executable: str | None = None, timeout: float | None = None):
        self.executable = executable or default_decoder()
        self.timeout = timeout

    def resolve_executable(self) -> str:
        """
        Resolve the decoder to an absolute path.

        The decoder runs with the work area as its working directory, so a
        relative path must be resolved before the call.

        Raises:
            DecoderNotFoundError: If nothing executable matches
        """
        found = shutil.which(self.executable)
        if found is None:
            raise DecoderNotFoundError(self.executable)
        return os.path.abspath(found)

    def is_available(self) -> bool:
        try:
            self.resolve_executable()
        except DecoderNotFoundError:
            return False
        return True

    def run(self, input_path: Path, output_prefix: Path, cwd: Path) -> DecoderRun:
        """
        Run the decoder and wait for it to exit.

        Args:
            input_path: Staged database file
            output_prefix: Path without extension for the .txt/.xml outputs
            cwd: Working directory of the decoder process

        Returns:
            DecoderRun with the exit status and merged output

        Raises:
            DecoderNotFoundError: If the decoder cannot be located or started
            DecoderTimeoutError: If the configured timeout expires
        """
        executable = self.resolve_executable()
        command = [executable, str(input_path), str(output_prefix)]
        logger.debug(f"Running decoder: {command} (cwd={cwd})")

        start_time = time.time()
        try:
            completed = subprocess.run(
                command,
                cwd=str(cwd),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise DecoderTimeoutError(executable, self.timeout) from e
        except OSError as e:
            raise DecoderNotFoundError(executable, str(e)) from e

        execution_time = time.time() - start_time
        logger.info(
            f"Decoder {Path(executable).name} exited with status {completed.returncode} "
            f"in {execution_time:.2f}s"
        )
        return DecoderRun(
            returncode=completed.returncode,
            output=completed.stdout or b"",
            execution_time=execution_time,
        )
