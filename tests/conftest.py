from __future__ import annotations

import pytest

from svcs.core.controller import SvcsController


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Prevent developer machine `~/.svcs/config.json` and SVCS_* vars from influencing tests."""

    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("SVCS_DEBUG", raising=False)
    monkeypatch.delenv("SVCS_PROJECT_ROOT", raising=False)


@pytest.fixture
def repo(tmp_path):
    """Create a temporary repository root with a couple of files."""
    root = tmp_path / "repo"
    root.mkdir()
    (root / "a.txt").write_text("hello")
    (root / "b.txt").write_text("bee")
    return root


@pytest.fixture
def controller(repo):
    """Create an initialized SvcsController for the repo."""
    ctl = SvcsController(project_root=repo)
    ctl.init()
    return ctl
