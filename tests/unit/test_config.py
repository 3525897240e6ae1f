from __future__ import annotations

import json
from pathlib import Path

from tcdinspect.config import Config
from tcdinspect.config_store import ConfigStore
from tcdinspect.core.pipeline import DecodePipeline


def test_default_config_is_created(isolated_environment: Path) -> None:
    config = Config()
    default_path = isolated_environment / ".tcdinspect" / "config.json"
    assert config.config_path == str(default_path)
    assert default_path.exists()
    saved = json.loads(default_path.read_text())
    assert saved["output"]["primary_encoding"] == "latin-1"
    assert saved["workarea"]["base_name"] == "foo"


def test_user_config_is_merged_over_defaults(tmp_path: Path) -> None:
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"decoder": {"timeout": 12}, "extra": {"key": 1}}))

    config = Config(str(path))

    assert config.get("decoder", "timeout") == 12
    assert config.get_decoder_timeout() == 12.0
    assert config.get("workarea", "extension") == ".tcd"
    assert config.get("extra", "key") == 1
    assert "extra" in config


def test_defaults_are_not_shared_between_instances(tmp_path: Path) -> None:
    first = Config(str(tmp_path / "a.json"))
    first.set("workarea", "base_name", "changed")
    second = Config(str(tmp_path / "b.json"))
    assert second.get("workarea", "base_name") == "foo"


def test_invalid_config_file_keeps_defaults(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    config = Config(str(path))
    assert config.get("batch", "max_workers") == 4


def test_decoder_resolution_order(tmp_path: Path, monkeypatch) -> None:
    config = Config(str(tmp_path / "c.json"))
    assert config.get_decoder_executable() == "restore_tide_db"

    config.set("decoder", "executable", "/opt/tcd/restore_tide_db")
    assert config.get_decoder_executable() == "/opt/tcd/restore_tide_db"

    monkeypatch.setenv("TCDINSPECT_DECODER", "/usr/local/bin/other_decoder")
    assert config.get_decoder_executable() == "/usr/local/bin/other_decoder"


def test_apply_overrides_is_not_persisted(tmp_path: Path) -> None:
    path = tmp_path / "c.json"
    config = Config(str(path))
    config.apply_overrides({"batch": {"max_workers": 16}})
    assert config.get("batch", "max_workers") == 16
    assert json.loads(path.read_text())["batch"]["max_workers"] == 4


def test_batch_extensions_are_normalized(tmp_path: Path) -> None:
    config = Config(str(tmp_path / "c.json"))
    assert config.get_batch_extensions() == [".tcd"]
    config.set("batch", "extensions", "TCD, bin,")
    assert config.get_batch_extensions() == [".tcd", ".bin"]


def test_pipeline_from_config(tmp_path: Path) -> None:
    config = Config(str(tmp_path / "c.json"))
    config.apply_overrides(
        {
            "decoder": {"executable": "my_decoder", "timeout": 5},
            "workarea": {"base_name": "db", "parent_dir": str(tmp_path)},
        }
    )
    pipeline = DecodePipeline.from_config(config)
    assert pipeline.runner.executable == "my_decoder"
    assert pipeline.runner.timeout == 5.0
    assert pipeline.base_name == "db"
    assert pipeline.parent_dir == str(tmp_path)
    assert pipeline.primary_encoding == "latin-1"


def test_config_store_rejects_non_object(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]")
    assert ConfigStore.load(str(path)) is None
