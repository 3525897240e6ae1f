"""Result models."""

from .results import DecodeFailure, DecodeResult, DecodeSuccess

__all__ = ["DecodeFailure", "DecodeResult", "DecodeSuccess"]
