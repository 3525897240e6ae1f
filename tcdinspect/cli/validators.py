#!/usr/bin/env python3
"""
tcdinspect CLI Validators Module

Provides input validation for the command-line interface.
"""

import sys
from pathlib import Path

from rich.console import Console

console = Console(stderr=True)

MAX_INPUT_SIZE = 1024 * 1024 * 1024  # 1GB


def validate_inputs(
    files: tuple[str, ...],
    batch: str | None,
    output: str | None,
    config: str | None,
    single_report: bool = False,
) -> list[str]:
    """
    Validate all user inputs.

    single_report is set when every input goes into one document (--check),
    so --output names a file even for several inputs.

    Returns:
        List of validation error messages (empty if all valid)
    """
    errors: list[str] = []

    for filename in files:
        errors.extend(validate_file_input(filename))
    errors.extend(validate_batch_input(batch))
    errors.extend(validate_output_input(output, len(files), single_report))
    errors.extend(validate_config_input(config))

    return errors


def validate_file_input(filename: str) -> list[str]:
    """Validate a database path given on the command line"""
    errors = []
    file_path = Path(filename)
    if not file_path.exists():
        errors.append(f"File does not exist: {filename}")
    elif not file_path.is_file():
        errors.append(f"Path is not a file: {filename}")
    elif file_path.stat().st_size == 0:
        errors.append(f"File is empty: {filename}")
    elif file_path.stat().st_size > MAX_INPUT_SIZE:
        errors.append(f"File too large (>1GB): {filename}")
    return errors


def validate_batch_input(batch: str | None) -> list[str]:
    errors = []
    if batch:
        batch_path = Path(batch)
        if not batch_path.exists():
            errors.append(f"Batch directory does not exist: {batch}")
        elif not batch_path.is_dir():
            errors.append(f"Batch path is not a directory: {batch}")
    return errors


def validate_output_input(
    output: str | None, file_count: int, single_report: bool = False
) -> list[str]:
    errors = []
    if output:
        output_path = Path(output)
        wants_file = file_count == 1 or single_report
        if wants_file and output_path.is_dir():
            errors.append(f"Output path is a directory: {output}")
        elif file_count > 1 and not single_report and output_path.exists():
            errors.append(f"Output must be a directory when decoding several files: {output}")
    return errors


def validate_config_input(config: str | None) -> list[str]:
    errors = []
    if config:
        config_path = Path(config)
        if config_path.exists() and not config_path.is_file():
            errors.append(f"Config path is not a file: {config}")
        elif config_path.suffix.lower() != ".json":
            errors.append(f"Config file must be JSON: {config}")
    return errors


def display_validation_errors(errors: list[str]) -> None:
    for error in errors:
        console.print(f"[red]Error: {error}[/red]")


def validate_input_mode(files: tuple[str, ...], batch: str | None) -> None:
    """Exactly one of FILES or --batch must be given"""
    if not files and not batch:
        console.print("[red]Error: Provide one or more .tcd files or --batch DIRECTORY[/red]")
        sys.exit(1)
    if files and batch:
        console.print("[red]Error: Cannot combine FILES with --batch[/red]")
        sys.exit(1)
