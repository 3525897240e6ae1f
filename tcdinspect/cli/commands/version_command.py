#!/usr/bin/env python3
"""
tcdinspect CLI Commands - Version Command
"""

from typing import Any

from ...__version__ import __author__, __license__, __url__, __version__
from ...core.decoder_runner import DecoderRunner
from .base import Command


class VersionCommand(Command):
    """
    Command for displaying version information.

    Shows version, author, license, repository and which decoder
    executable would be used.
    """

    def execute(self, args: dict[str, Any]) -> int:
        config = self._get_config(args.get("config"))
        runner = DecoderRunner(executable=args.get("decoder") or config.get_decoder_executable())
        self._display_version_info(runner)
        return 0

    def _display_version_info(self, runner: DecoderRunner) -> None:
        console = self.context.console
        console.print(
            f"[bold cyan]tcdinspect[/bold cyan] version [bold green]{__version__}[/bold green]"
        )
        console.print(f"Author: {__author__}")
        console.print(f"License: {__license__}")
        console.print(f"Repository: {__url__}")

        if runner.is_available():
            console.print(f"Decoder: {runner.resolve_executable()}")
        else:
            console.print(f"Decoder: [red]{runner.executable} not found[/red]")
