#!/usr/bin/env python3
"""
Library facade for reading tide constituent databases

    >>> from tcdinspect import decode
    >>> text = decode(open("harmonics.tcd", "rb").read())

``decode`` raises on any failure; ``decode_result`` returns the failure as
data so callers can present the decoder diagnostics themselves.

Copyright (C) 2025 tcdinspect contributors
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import cast

from .core.format_detector import is_tcd
from .core.pipeline import DecodePipeline
from .domain.results import DecodeFailure, DecodeResult, DecodeSuccess
from .exceptions import DecodeFailedError, EncodeUnsupportedError

_default_pipeline: DecodePipeline | None = None
_default_pipeline_lock = threading.Lock()


def get_default_pipeline() -> DecodePipeline:
    """Shared pipeline using the decoder found on PATH (or TCDINSPECT_DECODER)."""
    global _default_pipeline
    with _default_pipeline_lock:
        if _default_pipeline is None:
            _default_pipeline = DecodePipeline()
        return _default_pipeline


def decode_result(raw: bytes, pipeline: DecodePipeline | None = None) -> DecodeResult:
    """Decode raw database bytes without raising on a decoder failure."""
    return (pipeline or get_default_pipeline()).decode(raw)


def decode(raw: bytes, pipeline: DecodePipeline | None = None) -> str:
    """
    Decode raw database bytes to text.

    Raises:
        DecodeFailedError: If the decoder exits non-zero; carries its diagnostics
        TcdEnvironmentError: If the decoder cannot be run at all
    """
    result = decode_result(raw, pipeline)
    if isinstance(result, DecodeFailure):
        raise DecodeFailedError(result.diagnostics, result.returncode)
    return cast(DecodeSuccess, result).text


def decode_file(path: str | Path, pipeline: DecodePipeline | None = None) -> DecodeResult:
    """Read a database from disk and decode it."""
    return (pipeline or get_default_pipeline()).decode_file(path)


def encode(text: str) -> bytes:
    """Tide constituent databases are read-only: always raises."""
    raise EncodeUnsupportedError()


__all__ = [
    "decode",
    "decode_file",
    "decode_result",
    "encode",
    "get_default_pipeline",
    "is_tcd",
]
