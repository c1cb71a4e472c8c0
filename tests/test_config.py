from __future__ import annotations

import json
from pathlib import Path

from svcs.config.loader import ConfigLoader
from svcs.config.types import RepositoryLayout, SvcsConfig


def _write_global_config(tmp_home: Path, data: dict) -> None:
    cfg_dir = tmp_home / ".svcs"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    (cfg_dir / "config.json").write_text(json.dumps(data, indent=2), encoding="utf-8")


def _write_project_settings(layout: RepositoryLayout, data: dict) -> None:
    layout.store_dir.mkdir(parents=True, exist_ok=True)
    layout.settings_file.write_text(json.dumps(data), encoding="utf-8")


def test_defaults_without_files(tmp_path):
    cfg = ConfigLoader(RepositoryLayout(root=tmp_path / "proj")).load()

    assert cfg == SvcsConfig()
    assert cfg.hash_mode == "message"
    assert cfg.atomic_snapshots is True
    assert cfg.strict_exit_codes is False


def test_project_settings_override_global(tmp_path):
    layout = RepositoryLayout(root=tmp_path / "proj")
    _write_global_config(tmp_path, {"hashMode": "content", "strictExitCodes": True})
    _write_project_settings(layout, {"hashMode": "message"})

    cfg = ConfigLoader(layout).load()

    assert cfg.hash_mode == "message"
    assert cfg.strict_exit_codes is True


def test_invalid_values_fall_back_to_defaults(tmp_path):
    layout = RepositoryLayout(root=tmp_path / "proj")
    _write_project_settings(layout, {"hashMode": "sha1", "atomicSnapshots": "yes"})

    cfg = ConfigLoader(layout).load()

    assert cfg.hash_mode == "message"
    assert cfg.atomic_snapshots is True


def test_unreadable_json_is_ignored(tmp_path):
    layout = RepositoryLayout(root=tmp_path / "proj")
    layout.store_dir.mkdir(parents=True)
    layout.settings_file.write_text("{not json", encoding="utf-8")

    assert ConfigLoader(layout).load() == SvcsConfig()


def test_reload_picks_up_new_settings(tmp_path):
    layout = RepositoryLayout(root=tmp_path / "proj")
    loader = ConfigLoader(layout)
    assert loader.config.strict_exit_codes is False

    layout.store_dir.mkdir(parents=True)
    layout.settings_file.write_text(json.dumps({"strictExitCodes": True}), encoding="utf-8")

    assert loader.config.strict_exit_codes is False
    assert loader.reload().strict_exit_codes is True


def test_layout_paths(tmp_path):
    layout = RepositoryLayout(root=tmp_path)

    assert layout.config_file == tmp_path / "store" / "config"
    assert layout.index_file == tmp_path / "store" / "index"
    assert layout.log_file == tmp_path / "store" / "log"
    assert layout.commits_dir == tmp_path / "store" / "commits"
    assert layout.resolve("src/a.py") == tmp_path / "src" / "a.py"
