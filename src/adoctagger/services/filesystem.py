"""
filesystem.py – File-access capability used by the sync engine.

The engine only talks to the ``FileAccess`` protocol, so the same code
runs against the real disk (``LocalFileSystem``) or a dict-backed double
(``InMemoryFileSystem``) in tests.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePath
from typing import Protocol

logger = logging.getLogger(__name__)


class FileAccess(Protocol):
    def exists(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str: ...

    def read_all_lines(self, path: Path) -> list[str]: ...

    def write_all_text(self, path: Path, text: str) -> None: ...

    def append_text(self, path: Path, text: str) -> None: ...

    def create_directory(self, path: Path) -> None: ...


class LocalFileSystem:
    """UTF-8 text files on disk."""

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def read_all_lines(self, path: Path) -> list[str]:
        return self.read_text(path).splitlines()

    def write_all_text(self, path: Path, text: str) -> None:
        path.write_text(text, encoding="utf-8")

    def append_text(self, path: Path, text: str) -> None:
        with path.open("a", encoding="utf-8") as fh:
            fh.write(text)

    def create_directory(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)


class InMemoryFileSystem:
    """
    Dict-backed stand-in for ``LocalFileSystem``.

    Writes fail with ``FileNotFoundError`` when the parent directory was
    never created, the same way they would on disk.
    """

    def __init__(self, files: dict[str | PurePath, str] | None = None) -> None:
        self.files: dict[str, str] = {}
        self.directories: set[str] = set()
        for path, text in (files or {}).items():
            self._add_dirs(PurePath(_key(path)).parent)
            self.files[_key(path)] = text

    # ── Read ─────────────────────────────────────────────────────────────────

    def exists(self, path: Path) -> bool:
        return _key(path) in self.files

    def read_text(self, path: Path) -> str:
        try:
            return self.files[_key(path)]
        except KeyError:
            raise FileNotFoundError(f"No such file: {path}") from None

    def read_all_lines(self, path: Path) -> list[str]:
        return self.read_text(path).splitlines()

    # ── Write ────────────────────────────────────────────────────────────────

    def write_all_text(self, path: Path, text: str) -> None:
        self._check_parent(path)
        self.files[_key(path)] = text

    def append_text(self, path: Path, text: str) -> None:
        self._check_parent(path)
        self.files[_key(path)] = self.files.get(_key(path), "") + text

    def create_directory(self, path: Path) -> None:
        self._add_dirs(PurePath(_key(path)))

    # ── Internal helpers ─────────────────────────────────────────────────────

    def _add_dirs(self, directory: PurePath) -> None:
        self.directories.add(str(directory))
        self.directories.update(str(p) for p in directory.parents)

    def _check_parent(self, path: Path) -> None:
        parent = str(PurePath(_key(path)).parent)
        if parent not in self.directories:
            raise FileNotFoundError(f"No such directory: {parent}")


def _key(path: str | PurePath) -> str:
    """``/vault/notes/../notes/alpha.adoc`` and ``/vault/notes/alpha.adoc`` are one file."""
    return os.path.normpath(str(path))
