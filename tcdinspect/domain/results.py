"""Typed result models for decode outputs."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class DecodeResult:
    """Base result model for a decode call."""

    returncode: int = 0
    execution_time: float = 0.0

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["ok"] = self.ok
        return data


@dataclass
class DecodeSuccess(DecodeResult):
    """Decoder exited 0: primary text followed by the optional XML output."""

    text: str = ""
    secondary_included: bool = False

    @property
    def ok(self) -> bool:
        return True


@dataclass
class DecodeFailure(DecodeResult):
    """Decoder exited non-zero: everything it wrote on stdout and stderr."""

    diagnostics: str = ""

    @property
    def diagnostics_bytes(self) -> bytes:
        return self.diagnostics.encode("latin-1")
