#!/usr/bin/env python3
"""
tcdinspect CLI Display Module

Rich formatted output for decode failures, format checks and batch
summaries. Everything here goes to stderr so stdout only carries decoded
text or JSON.

Copyright (C) 2025 tcdinspect contributors

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.
"""

from pathlib import Path
from typing import Any

try:
    import pyfiglet
except Exception:  # pragma: no cover - optional dependency
    pyfiglet = None
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

console = Console(stderr=True)

STATUS_RECOGNIZED = "[green]✓ libtcd[/green]"
STATUS_UNRECOGNIZED = "[red]✗ Not a tide database[/red]"
NO_DIAGNOSTICS = "(decoder produced no output)"


def print_banner():
    """Print tcdinspect banner"""
    if pyfiglet is not None:
        try:
            banner = pyfiglet.figlet_format("tcdinspect", font="slant")
            console.print(f"[bold blue]{banner}[/bold blue]")
        except Exception:
            console.print("[bold blue]tcdinspect[/bold blue]")
    else:
        console.print("[bold blue]tcdinspect[/bold blue]")
    console.print("[dim]Read-only viewer for libtcd tide constituent databases[/dim]\n")


def display_decode_failure(file_path: str | Path, diagnostics: str, returncode: int) -> None:
    """Show the decoder's combined output for a failed decode."""
    body = Text(diagnostics.rstrip("\n") or NO_DIAGNOSTICS)
    console.print(
        Panel(
            body,
            title=(
                f"[bold red]Decoder failed on {Path(file_path).name} "
                f"(exit {returncode})[/bold red]"
            ),
            border_style="red",
            expand=True,
        )
    )


def display_check_results(reports: list[dict[str, Any]]) -> None:
    table = Table(title="Format Check", show_header=True, expand=True)
    table.add_column("File", style="cyan", overflow="fold")
    table.add_column("Status", no_wrap=True)
    table.add_column("Description", style="green", overflow="fold")

    for report in reports:
        status = STATUS_RECOGNIZED if report["recognized"] else STATUS_UNRECOGNIZED
        table.add_row(report["file"], status, report["description"])

    console.print(table)


def display_batch_results(
    results: dict[str, Any],
    failed_files: list[tuple[str, str]],
    elapsed_time: float,
    total_count: int,
    output_path: Path | None,
    verbose: bool,
) -> None:
    """Display final batch decode results"""
    success_count = sum(1 for result in results.values() if result.ok)

    console.print("\n[bold green]Batch Complete![/bold green]")
    console.print(f"[green]Decoded: {success_count}/{total_count} files[/green]")
    console.print(f"[blue]Time: {elapsed_time:.1f}s[/blue]")
    if output_path is not None:
        console.print(f"[cyan]Output: {output_path}[/cyan]")

    if not failed_files:
        return

    table = Table(title="Failed Files", show_header=True, expand=True)
    table.add_column("File", style="cyan", overflow="fold")
    table.add_column("Error", style="red", overflow="fold")
    for file_name, error in failed_files:
        message = error if verbose else (error.splitlines() or [""])[-1]
        table.add_row(file_name, message)
    console.print(table)


def display_no_files_message(directory: str, extensions: list[str]) -> None:
    console.print(
        f"[yellow]No files found in {directory} with extensions: {', '.join(extensions)}[/yellow]"
    )
    console.print("[dim]Tip: Use --extensions to match other file names[/dim]")
