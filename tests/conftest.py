"""Shared pytest fixtures."""
from __future__ import annotations

from pathlib import Path

import pytest

from adoctagger.services.filesystem import InMemoryFileSystem, LocalFileSystem
from adoctagger.services.paths import PathResolver
from adoctagger.services.xref_sync import CrossReferenceSync


@pytest.fixture(autouse=True)
def mock_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's shell or .env from leaking into Settings in tests."""
    monkeypatch.delenv("WORKING_ROOT", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")


@pytest.fixture()
def vault(tmp_path: Path) -> Path:
    """A notes folder on disk holding one untagged note, alpha.adoc."""
    notes = tmp_path / "notes"
    notes.mkdir()
    (notes / "alpha.adoc").write_text("= Alpha\n\nSome text.\n", encoding="utf-8")
    return notes


@pytest.fixture()
def disk_sync(vault: Path) -> CrossReferenceSync:
    return CrossReferenceSync(LocalFileSystem(), PathResolver(vault))


@pytest.fixture()
def memory_fs() -> InMemoryFileSystem:
    return InMemoryFileSystem({"/vault/notes/alpha.adoc": "= Alpha\n"})


@pytest.fixture()
def memory_sync(memory_fs: InMemoryFileSystem) -> CrossReferenceSync:
    return CrossReferenceSync(memory_fs, PathResolver("/vault"))
