#!/usr/bin/env python3
"""
Tide constituent database (.tcd) recognition by header signature
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..adapters.magic_adapter import MagicAdapter
from ..utils.logger import get_logger
from .constants import SIGNATURE_READ_SIZE, TCD_SIGNATURE

logger = get_logger(__name__)

FORMAT_NAME = "libtcd"
FORMAT_DESCRIPTION = "Tide Constituent Database (libtcd)"
UNKNOWN_DESCRIPTION = "unknown"
PROBE_SIZE = 2048


def is_tcd(data: bytes) -> bool:
    """True when the bytes begin with the libtcd version header."""
    return bytes(data[:SIGNATURE_READ_SIZE]) == TCD_SIGNATURE


class FormatDetector:
    """Recognise libtcd databases and describe anything else via libmagic"""

    def __init__(
        self,
        file_system: FileSystemAdapter = default_file_system,
        magic_adapter: MagicAdapter | None = None,
    ):
        self.file_system = file_system
        self._magic_adapter = magic_adapter

    @property
    def magic_adapter(self) -> MagicAdapter:
        if self._magic_adapter is None:
            self._magic_adapter = MagicAdapter()
        return self._magic_adapter

    def is_tcd_file(self, path: str | Path) -> bool:
        try:
            header = self.file_system.read_bytes(path, size=SIGNATURE_READ_SIZE)
        except OSError as e:
            logger.debug(f"Could not read header of {path}: {e}")
            return False
        return is_tcd(header)

    def describe(self, data: bytes) -> dict[str, Any]:
        """Return a small format report for a buffer."""
        if is_tcd(data):
            return {
                "format": FORMAT_NAME,
                "recognized": True,
                "description": FORMAT_DESCRIPTION,
            }

        probe = bytes(data[:PROBE_SIZE])
        description = self.magic_adapter.describe_buffer(probe)
        return {
            "format": UNKNOWN_DESCRIPTION,
            "recognized": False,
            "description": description or UNKNOWN_DESCRIPTION,
        }

    def describe_file(self, path: str | Path) -> dict[str, Any]:
        data = self.file_system.read_bytes(path, size=PROBE_SIZE)
        report = self.describe(data)
        report["file"] = str(path)
        return report
