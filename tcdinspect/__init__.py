#!/usr/bin/env python3
"""
tcdinspect - Read-only text view of libtcd tide constituent databases

The binary format is interpreted by an external decoder (restore_tide_db);
tcdinspect stages the database, runs the decoder and returns its text.

License: GPL-3.0
"""

from .__version__ import __author__, __author_email__, __license__, __url__, __version__

__description__ = "Read-only text view of libtcd tide constituent databases"

from .api import decode, decode_file, decode_result, encode, is_tcd
from .config import Config
from .core import DecodePipeline, FormatDetector
from .domain import DecodeFailure, DecodeResult, DecodeSuccess
from .exceptions import (
    DecodeFailedError,
    DecoderNotFoundError,
    DecoderOutputError,
    DecoderTimeoutError,
    EncodeUnsupportedError,
    TcdEnvironmentError,
    TcdInspectError,
    WorkAreaError,
)

__all__ = [
    "Config",
    "DecodeFailedError",
    "DecodeFailure",
    "DecodePipeline",
    "DecodeResult",
    "DecodeSuccess",
    "DecoderNotFoundError",
    "DecoderOutputError",
    "DecoderTimeoutError",
    "EncodeUnsupportedError",
    "FormatDetector",
    "TcdEnvironmentError",
    "TcdInspectError",
    "WorkAreaError",
    "decode",
    "decode_file",
    "decode_result",
    "encode",
    "is_tcd",
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__url__",
    "__description__",
]
