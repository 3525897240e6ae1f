from __future__ import annotations

import io
import json
import logging
from pathlib import Path

from rich.console import Console

from tcdinspect.cli import batch_processing
from tcdinspect.cli.analysis_runner import output_names, output_path_for
from tcdinspect.cli.commands.base import CommandContext
from tcdinspect.cli.commands.version_command import VersionCommand
from tcdinspect.cli.validators import validate_output_input


def _quiet_context() -> tuple[CommandContext, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, width=1000, color_system=None)
    return CommandContext(console=console, logger=logging.getLogger("tcdinspect")), buffer


def test_output_names_flatten_shared_stems(tmp_path: Path) -> None:
    files = [tmp_path / "a" / "x.tcd", tmp_path / "b" / "x.tcd", tmp_path / "a" / "y.tcd"]
    assert output_names(files) == ["a__x", "b__x", "a__y"]


def test_output_names_in_one_directory_are_stems(tmp_path: Path) -> None:
    files = [tmp_path / "harmonics.v2.tcd", tmp_path / "other.tcd"]
    assert output_names(files) == ["harmonics.v2", "other"]
    assert output_path_for("other", tmp_path, output_json=True) == tmp_path / "other.json"


def test_check_output_must_be_a_file(tmp_path: Path) -> None:
    assert validate_output_input(str(tmp_path), 2, single_report=True)
    assert validate_output_input(str(tmp_path), 2) == []

    report = tmp_path / "report.json"
    report.write_text("[]")
    assert validate_output_input(str(report), 2, single_report=True) == []
    assert validate_output_input(str(report), 2)


def test_version_reports_decoder_option(make_stub, stubs) -> None:
    decoder = make_stub(stubs.success, name="tide_decoder")
    context, buffer = _quiet_context()

    assert VersionCommand(context).execute({"decoder": str(decoder)}) == 0
    assert f"Decoder: {decoder}" in buffer.getvalue()


def test_version_reports_configured_decoder(make_stub, stubs, tmp_path: Path) -> None:
    decoder = make_stub(stubs.success, name="configured_decoder")
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"decoder": {"executable": str(decoder)}}))
    context, buffer = _quiet_context()

    assert VersionCommand(context).execute({"config": str(config_path)}) == 0
    assert f"Decoder: {decoder}" in buffer.getvalue()


def test_batch_pool_uses_requested_threads(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TCDINSPECT_MAX_THREADS", "1")
    seen = []

    class RecordingExecutor(batch_processing.ThreadPoolExecutor):
        def __init__(self, max_workers=None):
            seen.append(max_workers)
            super().__init__(max_workers=max_workers)

    monkeypatch.setattr(batch_processing, "ThreadPoolExecutor", RecordingExecutor)

    results, failed = batch_processing.process_files_parallel(
        [], tmp_path, None, tmp_path, output_json=False, threads=3, show_progress=False
    )

    assert seen == [3]
    assert results == {}
    assert failed == []
