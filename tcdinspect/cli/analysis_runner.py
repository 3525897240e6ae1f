#!/usr/bin/env python3
"""
tcdinspect CLI output and error helpers
"""

import json
import os
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console

from ..domain.results import DecodeResult

console = Console(stderr=True)


def result_payload(file_path: str | Path, result: DecodeResult) -> dict[str, Any]:
    payload = {"file": str(file_path)}
    payload.update(result.to_dict())
    return payload


def render_json(payload: Any, indent: int | None = 2) -> str:
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def write_output(content: str, output_file: str | Path | None) -> None:
    """Write to a file (UTF-8) or to stdout when no file is given."""
    if output_file is None:
        click.echo(content, nl=False)
        return

    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    console.print(f"[green]Output saved to: {output_path}[/green]")


def output_names(file_paths: list[Path]) -> list[str]:
    """
    Output base names for several inputs written into one directory.

    Paths are flattened relative to their common parent directory, so
    files sharing a stem in different directories get distinct names.
    """
    absolute = [Path(os.path.abspath(p)) for p in file_paths]
    common = Path(os.path.commonpath([str(p.parent) for p in absolute]))
    return ["__".join(p.relative_to(common).with_suffix("").parts) for p in absolute]


def output_path_for(name: str, output_dir: str | Path, output_json: bool) -> Path:
    suffix = ".json" if output_json else ".txt"
    return Path(output_dir) / f"{name}{suffix}"


def handle_main_error(e: Exception, verbose: bool) -> None:
    """
    Handle errors in main function.

    Args:
        e: Exception that occurred
        verbose: Enable verbose error output
    """
    console.print(f"[red]Error: {str(e)}[/red]")
    if verbose:
        import traceback

        traceback.print_exc()
    sys.exit(1)
