"""
paths.py – Resolves note paths against a working root and computes the
relative link between two files.

The working root is passed in explicitly.  When none is given the
directory this package is installed in is used instead, which is only
meant as a last-resort default for scripted use.
"""

from __future__ import annotations

import os
from pathlib import Path

from adoctagger.errors import InvalidPathError

# src/adoctagger
_INSTALL_DIR = Path(__file__).resolve().parent.parent


class PathResolver:
    def __init__(self, working_root: str | Path | None = None) -> None:
        self.root = Path(working_root) if working_root else _INSTALL_DIR

    def resolve(self, path: str | Path) -> Path:
        """Return `path` unchanged if absolute, else joined onto the root."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self.root / p

    def relative_path(self, from_file: str | Path, to_file: str | Path) -> str:
        """
        Relative link from the directory of `from_file` to `to_file`.

        Neither file nor its directory has to exist.  The result always
        uses forward slashes, e.g. ``../Tags/best_life_hacks.adoc``.
        """
        src = self.resolve(_checked(from_file))
        dst = self.resolve(_checked(to_file))
        prefix = os.path.relpath(dst.parent, src.parent)
        if prefix == os.curdir:
            return dst.name
        return Path(prefix, dst.name).as_posix()


def _checked(path: str | Path) -> Path:
    raw = str(path)
    if not raw.strip():
        raise InvalidPathError("Path is empty")
    if raw.endswith(("/", "\\")):
        raise InvalidPathError(f"Path has no file name: {raw}")
    p = Path(raw)
    if p.name in ("", ".", ".."):
        raise InvalidPathError(f"Path has no file name: {raw}")
    return p
