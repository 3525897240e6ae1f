#!/usr/bin/env python3
"""
tcdinspect Decode Pipeline

Turns the raw bytes of a tide constituent database into text by delegating
the format interpretation to an external decoder:

    START -> STAGED -> INVOKED -> DECODED | FAILED -> TORN_DOWN

Copyright (C) 2025 tcdinspect contributors

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..domain.results import DecodeFailure, DecodeResult, DecodeSuccess
from ..exceptions import DecoderOutputError
from ..utils.logger import get_logger
from .constants import (
    DIAGNOSTICS_ENCODING,
    PRIMARY_OUTPUT_ENCODING,
    STAGED_BASE_NAME,
    STAGED_EXTENSION,
    WORKAREA_PREFIX,
)
from .decoder_runner import DecoderRunner
from .workarea import PipelineStage, WorkArea
from .xml_encoding import decode_xml_bytes

logger = get_logger(__name__)


class DecodePipeline:
    """
    Stage, invoke, collect and tear down for one database at a time.

    The pipeline holds no per-call state, so one instance can serve
    concurrent decode calls: each call gets its own WorkArea.

    Attributes:
        runner: DecoderRunner used to start the external decoder
        primary_encoding: Encoding of the decoder's text output
    """

    def __init__(
        self,
        runner: DecoderRunner | None = None,
        primary_encoding: str = PRIMARY_OUTPUT_ENCODING,
        base_name: str = STAGED_BASE_NAME,
        extension: str = STAGED_EXTENSION,
        workarea_prefix: str = WORKAREA_PREFIX,
        parent_dir: str | Path | None = None,
        file_system: FileSystemAdapter = default_file_system,
    ):
        self.runner = runner or DecoderRunner()
        self.primary_encoding = primary_encoding
        self.base_name = base_name
        self.extension = extension
        self.workarea_prefix = workarea_prefix
        self.parent_dir = parent_dir
        self.file_system = file_system

    @classmethod
    def from_config(cls, config: Any, runner: DecoderRunner | None = None) -> DecodePipeline:
        """Build a pipeline from a Config instance."""
        if runner is None:
            runner = DecoderRunner(
                executable=config.get_decoder_executable(),
                timeout=config.get_decoder_timeout(),
            )
        return cls(
            runner=runner,
            primary_encoding=config.get("output", "primary_encoding", PRIMARY_OUTPUT_ENCODING),
            base_name=config.get("workarea", "base_name", STAGED_BASE_NAME),
            extension=config.get("workarea", "extension", STAGED_EXTENSION),
            workarea_prefix=config.get("workarea", "prefix", WORKAREA_PREFIX),
            parent_dir=config.get("workarea", "parent_dir"),
        )

    def new_work_area(self) -> WorkArea:
        return WorkArea(
            base_name=self.base_name,
            extension=self.extension,
            prefix=self.workarea_prefix,
            parent_dir=self.parent_dir,
            file_system=self.file_system,
        )

    def decode(self, data: bytes) -> DecodeResult:
        """
        Decode one database.

        Args:
            data: Raw bytes of the candidate .tcd file

        Returns:
            DecodeSuccess with the text, or DecodeFailure with the decoder's
            combined output when it exits non-zero

        Raises:
            TcdEnvironmentError: If the work area cannot be prepared, the
                decoder cannot be run, or it exits 0 without writing text
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected bytes, got {type(data).__name__}")
        data = bytes(data)

        with self.new_work_area() as work_area:
            work_area.stage_input(data)
            run = self.runner.run(
                work_area.input_path, work_area.prefix_path, cwd=work_area.directory
            )
            work_area.advance(PipelineStage.INVOKED)

            if run.returncode != 0:
                work_area.advance(PipelineStage.FAILED)
                return DecodeFailure(
                    returncode=run.returncode,
                    execution_time=run.execution_time,
                    diagnostics=run.output.decode(DIAGNOSTICS_ENCODING),
                )

            # Output written on the success path is dropped
            if run.output:
                logger.debug(f"Discarding {len(run.output)} bytes of decoder output")

            text, secondary_included = self._collect_output(work_area)
            work_area.advance(PipelineStage.DECODED)
            return DecodeSuccess(
                returncode=run.returncode,
                execution_time=run.execution_time,
                text=text,
                secondary_included=secondary_included,
            )

    def decode_file(self, path: str | Path) -> DecodeResult:
        return self.decode(self.file_system.read_bytes(path))

    def _collect_output(self, work_area: WorkArea) -> tuple[str, bool]:
        primary_path = work_area.primary_output_path
        if not primary_path.is_file():
            raise DecoderOutputError(
                f"Decoder reported success but wrote no text output ({primary_path.name})"
            )
        text = self.file_system.read_text(primary_path, encoding=self.primary_encoding)

        secondary_path = work_area.secondary_output_path
        if not secondary_path.is_file():
            return text, False

        logger.debug(f"Appending substation output {secondary_path.name}")
        return text + decode_xml_bytes(self.file_system.read_bytes(secondary_path)), True
