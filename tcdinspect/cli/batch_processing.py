#!/usr/bin/env python3
"""Batch decoding of every database under a directory."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn, TimeRemainingColumn

from ..core.pipeline import DecodePipeline
from ..domain.results import DecodeFailure, DecodeResult, DecodeSuccess
from ..exceptions import TcdInspectError
from ..utils.logger import get_logger
from .analysis_runner import render_json, result_payload

console = Console(stderr=True)
logger = get_logger(__name__)

DEFAULT_BATCH_OUTPUT = "tcdinspect_output"


def find_files_to_process(directory: str | Path, extensions: list[str]) -> list[Path]:
    """Recursively collect files whose suffix matches one of the extensions"""
    batch_path = Path(directory)
    wanted = {ext.lower() for ext in extensions}
    return sorted(
        path for path in batch_path.rglob("*") if path.is_file() and path.suffix.lower() in wanted
    )


def setup_batch_output_directory(output_dir: str | None) -> Path:
    """Setup the output directory for batch processing"""
    output_path = Path(output_dir) if output_dir else Path(DEFAULT_BATCH_OUTPUT)
    output_path.mkdir(parents=True, exist_ok=True)
    return output_path


def _output_name(file_path: Path, batch_path: Path) -> str:
    # Flatten the relative path so same-named files in subdirectories don't collide
    relative = file_path.relative_to(batch_path).with_suffix("")
    return "__".join(relative.parts)


def process_single_file(
    file_path: Path,
    batch_path: Path,
    pipeline: DecodePipeline,
    output_path: Path,
    output_json: bool,
    json_indent: int | None,
) -> tuple[Path, DecodeResult | None, str | None]:
    """Decode one file and write its text (or JSON) into the output directory."""
    try:
        result = pipeline.decode_file(file_path)
    except (TcdInspectError, OSError) as e:
        logger.debug(f"Decoding {file_path} failed: {e}")
        return file_path, None, str(e)

    suffix = ".json" if output_json else ".txt"
    target = output_path / f"{_output_name(file_path, batch_path)}{suffix}"
    try:
        if output_json:
            payload = result_payload(file_path.relative_to(batch_path), result)
            target.write_text(render_json(payload, json_indent), encoding="utf-8")
        elif isinstance(result, DecodeSuccess):
            target.write_text(result.text, encoding="utf-8")
    except OSError as e:
        return file_path, result, f"Could not write {target}: {e}"

    if isinstance(result, DecodeFailure):
        return file_path, result, result.diagnostics or f"Decoder exited with {result.returncode}"
    return file_path, result, None


def process_files_parallel(
    files_to_process: list[Path],
    batch_path: Path,
    pipeline: DecodePipeline,
    output_path: Path,
    output_json: bool,
    threads: int,
    json_indent: int | None = 2,
    show_progress: bool = True,
) -> tuple[dict[str, DecodeResult], list[tuple[str, str]]]:
    """Decode files in parallel with progress tracking."""
    all_results: dict[str, DecodeResult] = {}
    failed_files: list[tuple[str, str]] = []
    results_lock = threading.Lock()

    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=console,
        disable=not show_progress,
    ) as progress:
        task = progress.add_task("Decoding files...", total=len(files_to_process))

        with ThreadPoolExecutor(max_workers=threads) as executor:
            future_to_file = {
                executor.submit(
                    process_single_file,
                    file_path,
                    batch_path,
                    pipeline,
                    output_path,
                    output_json,
                    json_indent,
                ): file_path
                for file_path in files_to_process
            }

            for future in as_completed(future_to_file):
                file_path, result, error = future.result()
                relative = str(file_path.relative_to(batch_path))

                with results_lock:
                    if result is not None:
                        all_results[relative] = result
                    if error:
                        failed_files.append((relative, error))

                progress.update(task, advance=1)

    failed_files.sort()
    return all_results, failed_files
