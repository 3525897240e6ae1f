#!/usr/bin/env python3
"""
tcdinspect CLI Commands

Copyright (C) 2025 tcdinspect contributors
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .base import Command, CommandContext
from .batch_command import BatchCommand
from .check_command import CheckCommand
from .decode_command import DecodeCommand
from .version_command import VersionCommand

__all__ = [
    "Command",
    "CommandContext",
    "DecodeCommand",
    "BatchCommand",
    "CheckCommand",
    "VersionCommand",
]
