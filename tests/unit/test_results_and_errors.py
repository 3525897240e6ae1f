from __future__ import annotations

import pytest

from tcdinspect import encode
from tcdinspect.domain.results import DecodeFailure, DecodeSuccess
from tcdinspect.exceptions import (
    DecodeFailedError,
    DecoderNotFoundError,
    EncodeUnsupportedError,
    TcdInspectError,
)


def test_success_to_dict() -> None:
    result = DecodeSuccess(returncode=0, execution_time=0.25, text="abc", secondary_included=True)
    assert result.ok
    assert result.to_dict() == {
        "returncode": 0,
        "execution_time": 0.25,
        "text": "abc",
        "secondary_included": True,
        "ok": True,
    }


def test_failure_to_dict_and_bytes() -> None:
    result = DecodeFailure(returncode=2, diagnostics="bad \xff\n")
    assert not result.ok
    assert result.diagnostics_bytes == b"bad \xff\n"
    assert result.to_dict()["ok"] is False
    assert result.to_dict()["diagnostics"] == "bad \xff\n"


def test_decode_failed_error_summary() -> None:
    error = DecodeFailedError("line one\nfatal: corrupt table\n", 4)
    assert error.returncode == 4
    assert error.diagnostics.startswith("line one")
    assert "corrupt table" in str(error)
    assert "status 4" in str(error)
    assert "no output" in str(DecodeFailedError("", 1))


def test_decoder_not_found_message() -> None:
    error = DecoderNotFoundError("restore_tide_db", "Permission denied")
    assert error.executable == "restore_tide_db"
    assert str(error) == "Decoder not found or not executable: restore_tide_db (Permission denied)"
    assert isinstance(error, OSError)


@pytest.mark.parametrize("value", ["", "text", "[VERSION] = PFM Software - libtcd\n", None])
def test_encode_always_fails(value) -> None:
    with pytest.raises(EncodeUnsupportedError) as exc_info:
        encode(value)
    assert isinstance(exc_info.value, NotImplementedError)
    assert isinstance(exc_info.value, TcdInspectError)
    assert "not supported" in str(exc_info.value)
