"""Adapters isolating filesystem and libmagic access."""

from .file_system import FileSystemAdapter, default_file_system
from .magic_adapter import MagicAdapter

__all__ = ["FileSystemAdapter", "MagicAdapter", "default_file_system"]
