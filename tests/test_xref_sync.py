"""Tests for xref_sync.py"""

from __future__ import annotations

from pathlib import Path

import pytest

from adoctagger.config import Settings
from adoctagger.errors import InvalidArgumentError, NoteFileNotFoundError, TaggerError
from adoctagger.services.filesystem import InMemoryFileSystem, LocalFileSystem
from adoctagger.services.reference import Reference
from adoctagger.services.templates import TemplateKind
from adoctagger.services.xref_sync import CrossReferenceSync, normalise_tag_name

TAGS = "/vault/notes/alpha.tags"
TAG_INDEX = "/vault/notes/Tags/best_life_hacks.adoc"


def test_missing_file_has_no_references(memory_sync: CrossReferenceSync) -> None:
    assert memory_sync.references_in_file("notes/nothing_here.tags") == set()


def test_sync_creates_file(memory_sync: CrossReferenceSync, memory_fs: InMemoryFileSystem) -> None:
    written = memory_sync.sync_reference("notes/alpha.tags", TAG_INDEX, TemplateKind.SIDEBAR)

    assert written == Path(TAGS)
    assert memory_fs.files[TAGS] == (
        ".Tags\n[sidebar]\n****\n"
        "* xref:Tags/best_life_hacks.adoc[Best Life Hacks]\n"
        "****\n"
    )


def test_sync_twice_is_idempotent(memory_sync: CrossReferenceSync, memory_fs: InMemoryFileSystem) -> None:
    memory_sync.sync_reference(TAGS, TAG_INDEX, TemplateKind.SIDEBAR)
    first = dict(memory_fs.files)
    memory_sync.sync_reference(TAGS, TAG_INDEX, TemplateKind.SIDEBAR)
    assert memory_fs.files == first


def test_sync_merges_and_sorts(memory_sync: CrossReferenceSync, memory_fs: InMemoryFileSystem) -> None:
    memory_fs.create_directory(Path("/vault/notes/Tags"))
    memory_fs.files["/vault/notes/Tags/methodic.adoc"] = (
        "* xref:../zulu.adoc[Zulu]\n"
        "* xref:../bravo.adoc[Bravo]\n"
        "* xref:../zulu.adoc[Zulu]\n"
    )
    memory_sync.sync_reference("/vault/notes/Tags/methodic.adoc", "notes/alpha.adoc")

    assert memory_fs.files["/vault/notes/Tags/methodic.adoc"] == (
        "* xref:../alpha.adoc[Alpha]\n"
        "* xref:../bravo.adoc[Bravo]\n"
        "* xref:../zulu.adoc[Zulu]\n"
    )


def test_sync_drops_hand_written_text(memory_sync: CrossReferenceSync, memory_fs: InMemoryFileSystem) -> None:
    memory_fs.files[TAGS] = "My own notes about tags\n* xref:Tags/methodic.adoc[Methodic]\n"
    memory_sync.sync_reference(TAGS, TAG_INDEX)

    assert memory_fs.files[TAGS] == (
        "* xref:Tags/best_life_hacks.adoc[Best Life Hacks]\n"
        "* xref:Tags/methodic.adoc[Methodic]\n"
    )


def test_sync_write_failure_propagates(memory_sync: CrossReferenceSync) -> None:
    with pytest.raises(FileNotFoundError) as excinfo:
        memory_sync.sync_reference("/vault/missing_dir/index.adoc", TAG_INDEX)
    assert not isinstance(excinfo.value, TaggerError)


def test_ensure_included_appends_once(memory_sync: CrossReferenceSync, memory_fs: InMemoryFileSystem) -> None:
    assert memory_sync.ensure_included("notes/alpha.adoc", TAGS) is True
    assert memory_sync.ensure_included("notes/alpha.adoc", TAGS) is False
    assert memory_fs.files["/vault/notes/alpha.adoc"] == "= Alpha\ninclude::alpha.tags[]\n"


def test_ensure_included_adds_missing_newline(memory_sync: CrossReferenceSync, memory_fs: InMemoryFileSystem) -> None:
    memory_fs.files["/vault/notes/alpha.adoc"] = "= Alpha\n\nLast line"
    memory_sync.ensure_included("notes/alpha.adoc", TAGS)
    assert memory_fs.files["/vault/notes/alpha.adoc"] == "= Alpha\n\nLast line\ninclude::alpha.tags[]\n"


def test_ensure_included_matches_whole_lines_only(
    memory_sync: CrossReferenceSync, memory_fs: InMemoryFileSystem
) -> None:
    memory_fs.files["/vault/notes/alpha.adoc"] = "= Alpha\n// include::alpha.tags[]\n"
    assert memory_sync.ensure_included("notes/alpha.adoc", TAGS) is True


def test_ensure_included_requires_note(memory_sync: CrossReferenceSync) -> None:
    with pytest.raises(NoteFileNotFoundError):
        memory_sync.ensure_included("notes/ghost.adoc", "notes/ghost.tags")


def test_file_contains_line(memory_sync: CrossReferenceSync) -> None:
    assert memory_sync.file_contains_line("notes/alpha.adoc", "= Alpha")
    assert not memory_sync.file_contains_line("notes/alpha.adoc", "= Alph")


def test_tags_file_for(memory_sync: CrossReferenceSync) -> None:
    assert memory_sync.tags_file_for("notes/alpha.adoc") == Path(TAGS)


@pytest.mark.parametrize("bad", ["notes/alpha.md", "notes/alpha", "", "  "])
def test_tags_file_for_rejects_non_notes(memory_sync: CrossReferenceSync, bad: str) -> None:
    with pytest.raises(InvalidArgumentError):
        memory_sync.tags_file_for(bad)


def test_tag_index_file_for(memory_sync: CrossReferenceSync) -> None:
    assert memory_sync.tag_index_file_for("notes/alpha.adoc", "Best Life Hacks") == Path(TAG_INDEX)


def test_global_index_file(memory_sync: CrossReferenceSync) -> None:
    assert memory_sync.global_index_file() == Path("/vault/_tag_index.adoc")


def test_normalise_tag_name() -> None:
    assert normalise_tag_name("  Best  Life Hacks ") == "best_life_hacks"
    assert normalise_tag_name("DotNet CLI") == "dotnet_cli"
    with pytest.raises(InvalidArgumentError):
        normalise_tag_name("   ")


def test_tags_of_note(memory_sync: CrossReferenceSync, memory_fs: InMemoryFileSystem) -> None:
    memory_fs.files[TAGS] = "* xref:Tags/methodic.adoc[Methodic]\n* xref:Tags/best_life_hacks.adoc[x]\n"
    assert memory_sync.tags_of_note("notes/alpha.adoc") == [
        Reference("Tags/best_life_hacks.adoc"),
        Reference("Tags/methodic.adoc"),
    ]


def test_from_settings(tmp_path: Path) -> None:
    sync = CrossReferenceSync.from_settings(Settings(working_root=tmp_path, global_index="index.adoc"))
    assert isinstance(sync.fs, LocalFileSystem)
    assert sync.resolver.root == tmp_path.resolve()
    assert sync.global_index_file() == tmp_path.resolve() / "index.adoc"


def test_from_settings_explicit_root_wins(tmp_path: Path) -> None:
    sync = CrossReferenceSync.from_settings(Settings(working_root="/ignored"), working_root=tmp_path)
    assert sync.resolver.root == tmp_path


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_paths_rejected(
    memory_sync: CrossReferenceSync, memory_fs: InMemoryFileSystem, blank: str
) -> None:
    before = dict(memory_fs.files)
    with pytest.raises(InvalidArgumentError):
        memory_sync.sync_reference(blank, TAG_INDEX)
    with pytest.raises(InvalidArgumentError):
        memory_sync.references_in_file(blank)
    with pytest.raises(InvalidArgumentError):
        memory_sync.file_contains_line(blank, "= Alpha")
    with pytest.raises(InvalidArgumentError):
        memory_sync.ensure_included(blank, TAGS)
    assert memory_fs.files == before


@pytest.mark.parametrize("bad", ["Ops [beta]", "ops]", "dev/ops", "dev\\ops"])
def test_normalise_tag_name_rejects_brackets_and_separators(bad: str) -> None:
    with pytest.raises(InvalidArgumentError):
        normalise_tag_name(bad)


def test_normalise_tag_name_keeps_other_punctuation() -> None:
    assert normalise_tag_name("C++ & Rust (2024)") == "c++_&_rust_(2024)"


def test_sync_through_unnormalised_path(memory_sync: CrossReferenceSync, memory_fs: InMemoryFileSystem) -> None:
    memory_sync.sync_reference("notes/../notes/alpha.tags", TAG_INDEX)
    memory_sync.sync_reference(TAGS, TAG_INDEX)

    assert memory_fs.files[TAGS] == "* xref:Tags/best_life_hacks.adoc[Best Life Hacks]\n"
    assert "/vault/notes/../notes/alpha.tags" not in memory_fs.files
