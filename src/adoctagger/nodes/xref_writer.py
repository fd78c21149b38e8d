"""
xref_writer nodes – The three reference-list updates of a tagging run:

  tags_file_node     note's .tags file      -> tag index   (templated)
  tag_index_node     tag index              -> note
  global_index_node  global tag index       -> tag index
"""

from __future__ import annotations

from adoctagger.services.templates import TemplateKind
from adoctagger.services.xref_sync import CrossReferenceSync
from adoctagger.state import TagState


def tags_file_node(state: TagState, *, sync: CrossReferenceSync) -> TagState:
    kind = TemplateKind.parse(state.get("template", TemplateKind.SIDEBAR.value))
    path = sync.sync_reference(state["tags_path"], state["tag_index_path"], kind)
    return {"written": [str(path)]}


def tag_index_node(state: TagState, *, sync: CrossReferenceSync) -> TagState:
    path = sync.sync_reference(state["tag_index_path"], state["note_path"])
    return {"written": [str(path)]}


def global_index_node(state: TagState, *, sync: CrossReferenceSync) -> TagState:
    path = sync.sync_reference(state["global_index_path"], state["tag_index_path"])
    return {"written": [str(path)]}
