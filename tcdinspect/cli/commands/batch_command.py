#!/usr/bin/env python3
"""
tcdinspect CLI Commands - Batch Command

Decodes every matching database under a directory on a thread pool.

Copyright (C) 2025 tcdinspect contributors

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.
"""

import time
from pathlib import Path
from typing import Any

from ..batch_processing import (
    find_files_to_process,
    process_files_parallel,
    setup_batch_output_directory,
)
from ..display import display_batch_results, display_no_files_message, print_banner
from .base import Command


class BatchCommand(Command):
    """
    Command for batch decoding of a directory tree.

    Responsibilities:
    - Discover files by extension (recursive)
    - Decode them in parallel, each call in its own work area
    - Write one .txt (or .json) per input into the output directory
    - Summarise successes and failures
    """

    def execute(self, args: dict[str, Any]) -> int:
        batch_dir = args["batch"]
        config = self._get_config(args.get("config"))

        extensions = self._resolve_extensions(args.get("extensions"), config)
        threads = args.get("threads") or config.get("batch", "max_workers", 4)

        if not self.context.quiet:
            print_banner()

        files_to_process = find_files_to_process(batch_dir, extensions)
        if not files_to_process:
            display_no_files_message(batch_dir, extensions)
            return 0

        self.context.console.print(
            f"[bold green]Found {len(files_to_process)} files to decode[/bold green]"
        )

        pipeline = self._build_pipeline(config, args.get("decoder"), args.get("timeout"))
        output_path = setup_batch_output_directory(args.get("output"))

        start_time = time.time()
        results, failed_files = process_files_parallel(
            files_to_process,
            Path(batch_dir),
            pipeline,
            output_path,
            bool(args.get("output_json")),
            int(threads),
            json_indent=config.get("output", "json_indent", 2),
            show_progress=not self.context.quiet,
        )
        elapsed_time = time.time() - start_time

        display_batch_results(
            results,
            failed_files,
            elapsed_time,
            len(files_to_process),
            output_path,
            self.context.verbose,
        )
        return 1 if failed_files else 0

    @staticmethod
    def _resolve_extensions(extensions: str | None, config: Any) -> list[str]:
        if extensions:
            config.set("batch", "extensions", extensions)
        return config.get_batch_extensions()
