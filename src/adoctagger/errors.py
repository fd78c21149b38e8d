"""
errors.py – Exception types raised by the tagging engine.

Read/write failures from the file-access layer are not wrapped; they
surface as the ``OSError`` the backend raised.
"""

from __future__ import annotations


class TaggerError(Exception):
    """Base class for every error the engine raises on its own."""


class InvalidArgumentError(TaggerError, ValueError):
    """A note path has the wrong extension or a required string is empty."""


class InvalidPathError(TaggerError, ValueError):
    """A path cannot be split into a directory and a file name."""


class NoteFileNotFoundError(TaggerError, FileNotFoundError):
    """An operation that needs an existing file was given a missing one."""
