#!/usr/bin/env python3
"""Filesystem adapter for controlled IO access."""

from __future__ import annotations

from pathlib import Path

from ..utils.logger import get_logger

logger = get_logger(__name__)


class FileSystemAdapter:
    """Provide a minimal filesystem access abstraction."""

    def read_bytes(self, path: str | Path, size: int | None = None, offset: int = 0) -> bytes:
        file_path = Path(path)
        with file_path.open("rb") as handle:
            if offset:
                handle.seek(offset)
            return handle.read() if size is None else handle.read(size)

    def read_text(
        self,
        path: str | Path,
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> str:
        # Decoded from raw bytes so line endings are kept verbatim
        return self.read_bytes(path).decode(encoding, errors=errors)

    def write_bytes(self, path: str | Path, data: bytes) -> None:
        file_path = Path(path)
        with file_path.open("wb") as handle:
            handle.write(data)

    def remove_quietly(self, path: str | Path) -> bool:
        """Remove a file, ignoring a missing file and logging other failures."""
        try:
            Path(path).unlink()
            return True
        except FileNotFoundError:
            return False
        except OSError as exc:
            logger.debug(f"Could not remove {path}: {exc}")
            return False


default_file_system = FileSystemAdapter()
