"""Tests for config.py"""

from __future__ import annotations

from pathlib import Path

import pytest

from adoctagger.config import Settings


def test_defaults() -> None:
    s = Settings(_env_file=None)
    assert s.working_root is None
    assert s.note_extension == ".adoc"
    assert s.tags_extension == ".tags"
    assert s.tags_folder == "Tags"
    assert s.global_index == "_tag_index.adoc"
    assert s.default_template == "sidebar"


def test_working_root_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("WORKING_ROOT", str(tmp_path))
    assert Settings(_env_file=None).working_root == tmp_path.resolve()


def test_working_root_expands_user(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    assert Settings(_env_file=None, working_root="~/notes").working_root == (tmp_path / "notes").resolve()


def test_log_level_from_env() -> None:
    # Set by the autouse fixture in conftest.py
    assert Settings(_env_file=None).log_level == "DEBUG"
