#!/usr/bin/env python3
"""
tcdinspect CLI Commands - Decode Command

Decodes one or more databases given on the command line and prints their
text, or writes it (or JSON) to the --output file or directory.

Copyright (C) 2025 tcdinspect contributors

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.
"""

from pathlib import Path
from typing import Any

from ...core.format_detector import is_tcd
from ...core.pipeline import DecodePipeline
from ...domain.results import DecodeFailure, DecodeResult, DecodeSuccess
from ...exceptions import TcdEnvironmentError
from ..analysis_runner import (
    output_names,
    output_path_for,
    render_json,
    result_payload,
    write_output,
)
from ..display import display_decode_failure
from .base import Command


class DecodeCommand(Command):
    """
    Command for decoding tide constituent databases to text.

    Environment errors (missing decoder, unusable temp directory) abort the
    whole command. A decoder failure on one file is reported with its
    diagnostics and the remaining files are still decoded.
    """

    def execute(self, args: dict[str, Any]) -> int:
        files = [Path(f) for f in args.get("files") or ()]
        output = args.get("output")
        output_json = bool(args.get("output_json"))
        per_file_output = bool(output) and len(files) > 1
        names = output_names(files) if per_file_output else [f.stem for f in files]

        config = self._get_config(args.get("config"))
        pipeline = self._build_pipeline(config, args.get("decoder"), args.get("timeout"))
        json_indent = config.get("output", "json_indent", 2)

        payloads = []
        exit_code = 0

        for file_path, name in zip(files, names):
            try:
                result = self._decode_one(pipeline, file_path)
            except TcdEnvironmentError as e:
                self.context.console.print(f"[red]Error: {e}[/red]")
                return 1

            if isinstance(result, DecodeFailure):
                exit_code = 1
                if not output_json:
                    display_decode_failure(file_path, result.diagnostics, result.returncode)

            if output_json:
                payloads.append(result_payload(file_path, result))
                if per_file_output:
                    target = output_path_for(name, output, output_json=True)
                    write_output(render_json(payloads[-1], json_indent), target)
            elif isinstance(result, DecodeSuccess):
                if per_file_output:
                    write_output(result.text, output_path_for(name, output, output_json=False))
                else:
                    write_output(result.text, output)

        if output_json and not per_file_output:
            document = payloads[0] if len(payloads) == 1 else payloads
            write_output(render_json(document, json_indent) + "\n", output)

        return exit_code

    def _decode_one(self, pipeline: DecodePipeline, file_path: Path) -> DecodeResult:
        data = file_path.read_bytes()
        if not is_tcd(data):
            self.context.logger.warning(
                f"{file_path} does not start with the libtcd signature, decoding anyway"
            )
        self.context.logger.info(f"Decoding {file_path}")
        return pipeline.decode(data)
