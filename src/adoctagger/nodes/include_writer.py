"""
include_node – Makes the note pull in its tags file with an
``include::`` directive, appended once and never duplicated.
"""

from __future__ import annotations

from adoctagger.services.xref_sync import CrossReferenceSync
from adoctagger.state import TagState


def include_node(state: TagState, *, sync: CrossReferenceSync) -> TagState:
    """The note must already exist; a missing note is an error, not a new file."""
    appended = sync.ensure_included(state["note_path"], state["tags_path"])
    update: TagState = {"included": appended}
    if appended:
        update["written"] = [str(sync.resolver.resolve(state["note_path"]))]
    return update
