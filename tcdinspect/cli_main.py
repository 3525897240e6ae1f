#!/usr/bin/env python3
"""
tcdinspect CLI - Command Line Interface

This module provides the Click-based CLI entry point for tcdinspect.
Command execution logic lives in the command classes under
tcdinspect.cli.commands.

Copyright (C) 2025 tcdinspect contributors

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

import sys
from dataclasses import dataclass
from typing import Any

import click

from .cli.analysis_runner import handle_main_error
from .cli.commands import (
    BatchCommand,
    CheckCommand,
    Command,
    CommandContext,
    DecodeCommand,
    VersionCommand,
)
from .cli.display import console
from .cli.validators import display_validation_errors, validate_input_mode, validate_inputs


@dataclass
class CLIArgs:
    files: tuple[str, ...]
    output: str | None
    output_json: bool
    check: bool
    batch: str | None
    extensions: str | None
    threads: int | None
    decoder: str | None
    timeout: float | None
    config: str | None
    verbose: bool
    quiet: bool
    version: bool


def main(**kwargs: Any):
    """
    tcdinspect - Read-only text view of libtcd tide constituent databases.
    """
    try:
        args = CLIArgs(**kwargs)
        run_cli(args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(1)

    except Exception as e:
        handle_main_error(e, bool(kwargs.get("verbose")))


@click.command()
@click.argument("files", nargs=-1, type=click.Path())
@click.option("-o", "--output", help="Output file, or directory for several files and batch mode")
@click.option("-j", "--json", "output_json", is_flag=True, help="Output decode results as JSON")
@click.option("--check", is_flag=True, help="Only check the libtcd signature of each file")
@click.option(
    "--batch",
    "--directory",
    type=click.Path(),
    help="Decode all matching files in directory (recursive)",
)
@click.option(
    "--extensions",
    help="File extensions to decode in batch mode (comma-separated). Default: .tcd",
)
@click.option(
    "--threads",
    type=click.IntRange(1, 32),
    help="Number of parallel decodes in batch mode (1-32, default from config)",
)
@click.option("--decoder", help="Decoder executable (default: restore_tide_db on PATH)")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    help="Kill the decoder after this many seconds",
)
@click.option("--config", help="Custom config file path")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--quiet", is_flag=True, help="Only report errors")
@click.option("--version", is_flag=True, help="Show version information and exit")
def cli(**kwargs: Any):
    """Decode libtcd tide constituent databases (.tcd) to text."""
    main(**kwargs)


def run_cli(args: CLIArgs) -> None:
    """Primary CLI workflow separated for clarity and testability."""
    if args.version:
        _execute_version(args)

    validation_errors = validate_inputs(
        args.files,
        args.batch,
        args.output,
        args.config,
        single_report=args.check and not args.batch,
    )
    if validation_errors:
        display_validation_errors(validation_errors)
        sys.exit(1)

    validate_input_mode(args.files, args.batch)

    context = CommandContext.create(verbose=args.verbose, quiet=args.quiet)
    sys.exit(_dispatch_command(context, args))


def _execute_version(args: CLIArgs) -> None:
    """Run the VersionCommand and exit."""
    version_cmd = VersionCommand()
    sys.exit(version_cmd.execute({"config": args.config, "decoder": args.decoder}))


def _dispatch_command(context: CommandContext, args: CLIArgs) -> int:
    """Dispatch to the appropriate command based on CLI arguments."""
    command: Command
    if args.batch:
        command = BatchCommand(context)
    elif args.check:
        command = CheckCommand(context)
    else:
        command = DecodeCommand(context)
    return command.execute(dict(args.__dict__))


if __name__ == "__main__":
    cli()
