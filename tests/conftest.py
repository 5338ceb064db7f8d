from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Callable

import pytest

from mcp_toggle.claude_json import normalize_cwd


@pytest.fixture()
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user's home directory at an isolated temp directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    return home_dir


@pytest.fixture()
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from inside a fresh project directory."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture()
def project_key(project_dir: Path) -> str:
    return normalize_cwd(os.getcwd())


@pytest.fixture()
def write_claude_json(home: Path) -> Callable[[object], Path]:
    """Write a document to ~/.claude.json and return its path."""

    def _write(document: object) -> Path:
        path = home / ".claude.json"
        path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
        return path

    return _write
