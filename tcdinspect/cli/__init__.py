#!/usr/bin/env python3
"""
tcdinspect CLI package

Click entry point lives in tcdinspect.cli_main; this package holds the
command classes and the display, validation and batch helpers they use.
"""

from .commands import (
    BatchCommand,
    CheckCommand,
    Command,
    CommandContext,
    DecodeCommand,
    VersionCommand,
)

__all__ = [
    "Command",
    "CommandContext",
    "DecodeCommand",
    "BatchCommand",
    "CheckCommand",
    "VersionCommand",
]
