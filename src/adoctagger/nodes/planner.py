"""
plan_node – Validates the request and works out the four file paths the
tagging run will touch.  Creates the per-note ``Tags`` folder.
"""

from __future__ import annotations

import logging

from adoctagger.services.xref_sync import CrossReferenceSync
from adoctagger.state import TagState

logger = logging.getLogger(__name__)


def plan_node(state: TagState, *, sync: CrossReferenceSync) -> TagState:
    note_path = state.get("note_path", "")
    tag_name = state.get("tag_name", "")

    tags_path = sync.tags_file_for(note_path)
    tag_index_path = sync.tag_index_file_for(note_path, tag_name)
    global_index_path = sync.global_index_file()

    sync.fs.create_directory(tag_index_path.parent)

    logger.info("Tagging %s with '%s'", sync.resolver.resolve(note_path), tag_name)
    logger.debug(
        "tags file=%s  tag index=%s  global index=%s",
        tags_path, tag_index_path, global_index_path,
    )
    return {
        "tags_path": str(tags_path),
        "tag_index_path": str(tag_index_path),
        "global_index_path": str(global_index_path),
    }
