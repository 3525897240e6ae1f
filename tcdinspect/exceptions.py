#!/usr/bin/env python3
"""
Exception hierarchy for tcdinspect

Environment errors (no work area, no decoder, broken decoder contract) are
fatal for a decode call. A decoder that runs and exits non-zero is a normal
outcome reported as a DecodeFailure result, and only becomes an exception
through the raising ``decode()`` facade.

Copyright (C) 2025 tcdinspect contributors

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.
"""


class TcdInspectError(Exception):
    """Base class for all tcdinspect errors"""


class TcdEnvironmentError(TcdInspectError, OSError):
    """The decode call could not run in the current environment"""


class WorkAreaError(TcdEnvironmentError):
    """The temporary work area could not be created or written"""


class DecoderNotFoundError(TcdEnvironmentError):
    """The external decoder could not be located or executed"""

    def __init__(self, executable: str, reason: str | None = None):
        self.executable = executable
        message = f"Decoder not found or not executable: {executable}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DecoderTimeoutError(TcdEnvironmentError):
    """The external decoder did not finish within the configured timeout"""

    def __init__(self, executable: str, timeout: float):
        self.executable = executable
        self.timeout = timeout
        super().__init__(f"Decoder {executable} timed out after {timeout}s")


class DecoderOutputError(TcdEnvironmentError):
    """The decoder reported success but did not produce its text output"""


class DecodeFailedError(TcdInspectError):
    """The external decoder ran and exited with a non-zero status"""

    def __init__(self, diagnostics: str, returncode: int):
        self.diagnostics = diagnostics
        self.returncode = returncode
        summary = diagnostics.strip().splitlines()[-1] if diagnostics.strip() else "no output"
        super().__init__(f"Decoder exited with status {returncode}: {summary}")


class EncodeUnsupportedError(TcdInspectError, NotImplementedError):
    """Tide constituent databases are read-only"""

    def __init__(self, message: str = "Writing .tcd files is not supported"):
        super().__init__(message)
