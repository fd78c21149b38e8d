"""
xref_sync.py – Keeps the ``xref:`` lists in tags files and tag indexes in step.

Every managed file is treated as "a set of references plus optional
boilerplate".  A sync reads the set back out of the file, adds one
reference and rewrites the whole file in canonical order, so running the
same sync twice leaves the file byte-for-byte unchanged.

Any hand-written text in a managed file is dropped on the next rewrite.

File layout for a note ``notes/alpha.adoc`` tagged "Best Life Hacks":

    notes/alpha.adoc                    include::alpha.tags[]
    notes/alpha.tags                    * xref:Tags/best_life_hacks.adoc[Best Life Hacks]
    notes/Tags/best_life_hacks.adoc     * xref:../alpha.adoc[Alpha]
    <root>/_tag_index.adoc              * xref:.../Tags/best_life_hacks.adoc[Best Life Hacks]
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from adoctagger.config import Settings
from adoctagger.errors import InvalidArgumentError, NoteFileNotFoundError
from adoctagger.services.extractor import extract_references
from adoctagger.services.filesystem import FileAccess, LocalFileSystem
from adoctagger.services.paths import PathResolver
from adoctagger.services.reference import Reference
from adoctagger.services.serializer import render_references
from adoctagger.services.templates import TemplateKind, get_template

logger = logging.getLogger(__name__)

# Characters a tag name may not carry into its index file name
_FORBIDDEN_TAG_CHARS_RE = re.compile(r"[\[\]/\\]")


class CrossReferenceSync:
    """Reads, merges and rewrites reference lists through a `FileAccess`."""

    def __init__(
        self,
        fs: FileAccess,
        resolver: PathResolver,
        *,
        note_extension: str = ".adoc",
        tags_extension: str = ".tags",
        tags_folder: str = "Tags",
        global_index: str = "_tag_index.adoc",
    ) -> None:
        self.fs = fs
        self.resolver = resolver
        self.note_extension = note_extension
        self.tags_extension = tags_extension
        self.tags_folder = tags_folder
        self.global_index = global_index

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        fs: FileAccess | None = None,
        working_root: str | Path | None = None,
    ) -> CrossReferenceSync:
        return cls(
            fs or LocalFileSystem(),
            PathResolver(working_root or settings.working_root),
            note_extension=settings.note_extension,
            tags_extension=settings.tags_extension,
            tags_folder=settings.tags_folder,
            global_index=settings.global_index,
        )

    # ── Reading ──────────────────────────────────────────────────────────────

    def references_in_file(self, path: str | Path) -> set[Reference]:
        """References listed in `path`; a missing file has none."""
        abs_path = self.resolver.resolve(_required(str(path), "file to read"))
        if not self.fs.exists(abs_path):
            logger.debug("No file at %s yet – starting with no references", abs_path)
            return set()
        refs = extract_references(self.fs.read_all_lines(abs_path))
        logger.debug("Found %d reference(s) in %s", len(refs), abs_path)
        return refs

    def file_contains_line(self, path: str | Path, line: str) -> bool:
        abs_path = self.resolver.resolve(_required(str(path), "file to check"))
        if not self.fs.exists(abs_path):
            raise NoteFileNotFoundError(f"{abs_path} cannot be found")
        return line in self.fs.read_all_lines(abs_path)

    # ── Writing ──────────────────────────────────────────────────────────────

    def reference_between(self, from_file: str | Path, to_file: str | Path) -> Reference:
        return Reference(self.resolver.relative_path(from_file, to_file))

    def sync_reference(
        self,
        file_to_update: str | Path,
        file_to_reference: str | Path,
        template_kind: TemplateKind = TemplateKind.NONE,
    ) -> Path:
        """
        Make sure `file_to_update` lists a reference to `file_to_reference`.

        The file is rewritten in full from its reference set; returns the
        absolute path written.
        """
        abs_path = self.resolver.resolve(_required(str(file_to_update), "file to update"))
        refs = self.references_in_file(abs_path)
        new_ref = self.reference_between(abs_path, file_to_reference)
        refs.add(new_ref)

        text = render_references(refs, get_template(template_kind))
        self.fs.write_all_text(abs_path, text)
        logger.info("Updated %s (%d reference(s), added %s)", abs_path, len(refs), new_ref)
        return abs_path

    def ensure_included(self, note_file: str | Path, tags_file: str | Path) -> bool:
        """
        Append ``include::<tags file>[]`` to the note unless the exact line
        is already there.  Returns True when the line was appended.
        """
        abs_note = self.resolver.resolve(_required(str(note_file), "note file"))
        include_line = f"include::{self.resolver.relative_path(abs_note, tags_file)}[]"
        if self.file_contains_line(abs_note, include_line):
            logger.debug("%s already includes its tags file", abs_note)
            return False

        text = self.fs.read_text(abs_note)
        separator = "\n" if text and not text.endswith("\n") else ""
        self.fs.append_text(abs_note, f"{separator}{include_line}\n")
        logger.info("Added '%s' to %s", include_line, abs_note)
        return True

    # ── Tagging layout ───────────────────────────────────────────────────────

    def tags_file_for(self, note_file: str | Path) -> Path:
        """``notes/alpha.adoc`` -> ``notes/alpha.tags`` (absolute)."""
        abs_note = self.resolver.resolve(_required(str(note_file), "note file"))
        if abs_note.suffix != self.note_extension:
            raise InvalidArgumentError(
                f"The file name must end in '{self.note_extension}': {note_file}"
            )
        return abs_note.with_suffix(self.tags_extension)

    def tag_index_file_for(self, note_file: str | Path, tag_name: str) -> Path:
        """``notes/alpha.adoc`` + "Best Life Hacks" -> ``notes/Tags/best_life_hacks.adoc``."""
        abs_note = self.resolver.resolve(note_file)
        file_name = normalise_tag_name(tag_name) + self.note_extension
        return abs_note.parent / self.tags_folder / file_name

    def global_index_file(self) -> Path:
        return self.resolver.resolve(self.global_index)

    def tags_of_note(self, note_file: str | Path) -> list[Reference]:
        """Tags recorded for a note, in display order."""
        refs = self.references_in_file(self.tags_file_for(note_file))
        return sorted(refs, key=lambda ref: ref.sort_key)


# ── Module-level helpers ─────────────────────────────────────────────────────

def normalise_tag_name(tag_name: str) -> str:
    """
    Index file stem for a tag: "Best Life Hacks" -> "best_life_hacks".

    Brackets would end the xref target early and a path separator would
    put the index outside the tags folder, so both are rejected.
    """
    name = _required(tag_name, "tag name").strip()
    if _FORBIDDEN_TAG_CHARS_RE.search(name):
        raise InvalidArgumentError(
            f"The tag name must not contain brackets or path separators: {tag_name}"
        )
    return re.sub(r"\s+", "_", name.lower())


def _required(value: str, what: str) -> str:
    if not value or not value.strip():
        raise InvalidArgumentError(f"The {what} must not be empty")
    return value
