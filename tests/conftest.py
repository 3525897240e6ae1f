"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import logging
import sys
import textwrap
from pathlib import Path
from types import SimpleNamespace
from typing import Callable

import pytest

from tcdinspect.core.decoder_runner import DecoderRunner
from tcdinspect.core.pipeline import DecodePipeline

TCD_HEADER = b"[VERSION] = PFM Software - libtcd v2.2.7 - 2021-05-01\n"
SAMPLE_TCD = TCD_HEADER + b"[LAST MODIFIED] = 2021-05-01 00:00 UTC\n\x00\x01\x02\xff" * 4

# Stub decoders follow the restore_tide_db contract:
#   argv[1] = staged .tcd file, argv[2] = output prefix (no extension)
STUB_PRELUDE = "import os\nimport sys\n\nsrc, prefix = sys.argv[1], sys.argv[2]\n"

SUCCESS_TEXT_BODY = """
with open(src, "rb") as handle:
    data = handle.read()
with open(prefix + ".txt", "wb") as out:
    out.write(b"# Tide database\\r\\n")
    out.write(b"station = Sainte-Anne-des-Monts \\xe9t\\xe9\\n")
    out.write(b"bytes = " + str(len(data)).encode("ascii") + b"\\n")
"""

SUBSTATION_BODY = SUCCESS_TEXT_BODY + """
with open(prefix + ".xml", "wb") as out:
    out.write(b'<?xml version="1.0" encoding="ISO-8859-1"?>\\n')
    out.write(b"<substation name=\\"Qu\\xe9bec\\"/>\\n")
"""

UTF8_SUBSTATION_BODY = SUCCESS_TEXT_BODY + """
with open(prefix + ".xml", "wb") as out:
    out.write(b'<?xml version="1.0" encoding="UTF-8"?>\\n')
    out.write(b"<substation name=\\"Qu\\xc3\\xa9bec \\xe2\\x80\\x93 L\\xc3\\xa9vis\\"/>\\n")
"""

FAILURE_BODY = """
os.write(1, b"restore_tide_db: reading header\\n")
os.write(2, b"restore_tide_db: corrupt constituent table \\xff\\n")
os.write(1, b"giving up\\n")
sys.exit(3)
"""
FAILURE_OUTPUT = (
    b"restore_tide_db: reading header\n"
    b"restore_tide_db: corrupt constituent table \xff\n"
    b"giving up\n"
)

CRASH_BODY = """
open(prefix + ".txt", "wb").write(b"partial")
open(prefix + ".xml", "wb").write(b"<partial")
raise RuntimeError("decoder crashed")
"""

NOISY_SUCCESS_BODY = SUCCESS_TEXT_BODY + """
os.write(1, b"warning: deprecated field\\n")
os.write(2, b"note: 12 stations\\n")
"""

MISSING_OUTPUT_BODY = """
sys.exit(0)
"""

ENVIRONMENT_BODY = """
with open(prefix + ".txt", "w", encoding="latin-1") as out:
    out.write(os.getcwd() + "\\n")
    out.write(repr(sys.stdin.read()) + "\\n")
"""

EXTRA_FILE_BODY = SUCCESS_TEXT_BODY + """
with open(prefix + ".log", "w") as out:
    out.write("scratch")
"""

SLOW_BODY = """
import time
time.sleep(30)
"""

ECHO_INPUT_BODY = """
with open(src, "rb") as handle:
    data = handle.read()
with open(prefix + ".txt", "wb") as out:
    out.write(data[data.index(b"\\n") + 1:].split(b"\\n")[0] + b"\\n")
"""


def write_stub_decoder(directory: Path, body: str, name: str = "stub_decoder") -> Path:
    """Write an executable Python script acting as the external decoder."""
    script = directory / name
    script.write_text(f"#!{sys.executable}\n" + STUB_PRELUDE + textwrap.dedent(body))
    script.chmod(0o755)
    return script


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory, monkeypatch):
    """Keep config and log files out of the real home directory."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("TCDINSPECT_DECODER", raising=False)

    yield home

    logger = logging.getLogger("tcdinspect")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def stub_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "bin"
    directory.mkdir()
    return directory


@pytest.fixture
def work_root(tmp_path: Path) -> Path:
    """Parent directory for work areas, so leftovers can be detected."""
    directory = tmp_path / "work"
    directory.mkdir()
    return directory


@pytest.fixture
def make_stub(stub_dir: Path) -> Callable[..., Path]:
    def _make(body: str, name: str = "stub_decoder") -> Path:
        return write_stub_decoder(stub_dir, body, name)

    return _make


@pytest.fixture
def make_pipeline(make_stub, work_root) -> Callable[..., DecodePipeline]:
    def _make(body: str, timeout: float | None = None) -> DecodePipeline:
        decoder = make_stub(body)
        return DecodePipeline(
            runner=DecoderRunner(str(decoder), timeout=timeout),
            parent_dir=work_root,
        )

    return _make


@pytest.fixture
def sample_tcd(tmp_path: Path) -> Path:
    path = tmp_path / "harmonics.tcd"
    path.write_bytes(SAMPLE_TCD)
    return path


def expected_primary_text(data: bytes) -> str:
    return (
        "# Tide database\r\n"
        "station = Sainte-Anne-des-Monts été\n"
        f"bytes = {len(data)}\n"
    )


EXPECTED_SUBSTATION_TEXT = (
    '<?xml version="1.0" encoding="ISO-8859-1"?>\n<substation name="Québec"/>\n'
)

EXPECTED_UTF8_SUBSTATION_TEXT = (
    '<?xml version="1.0" encoding="UTF-8"?>\n<substation name="Québec \u2013 Lévis"/>\n'
)


@pytest.fixture
def stubs() -> SimpleNamespace:
    """Stub decoder bodies and the output they are expected to produce."""
    return SimpleNamespace(
        header=TCD_HEADER,
        sample=SAMPLE_TCD,
        success=SUCCESS_TEXT_BODY,
        substation=SUBSTATION_BODY,
        utf8_substation=UTF8_SUBSTATION_BODY,
        failure=FAILURE_BODY,
        failure_output=FAILURE_OUTPUT,
        crash=CRASH_BODY,
        noisy_success=NOISY_SUCCESS_BODY,
        missing_output=MISSING_OUTPUT_BODY,
        environment=ENVIRONMENT_BODY,
        extra_file=EXTRA_FILE_BODY,
        slow=SLOW_BODY,
        echo_input=ECHO_INPUT_BODY,
        expected_primary=expected_primary_text,
        expected_substation=EXPECTED_SUBSTATION_TEXT,
        expected_utf8_substation=EXPECTED_UTF8_SUBSTATION_TEXT,
    )
