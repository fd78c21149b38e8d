"""
graph.py – Compiles the tagging LangGraph.

Graph topology:
    START
      └─ plan
          └─ tags_file
              └─ include
                  └─ tag_index
                      └─ global_index
                          └─ END

Each step relies on the previous write, so the graph is strictly linear.
The first exception raised by a node ends the run; files already written
stay as they are and a re-run is safe because every step is idempotent.
"""

from __future__ import annotations

from functools import partial
from pathlib import Path

from langgraph.graph import END, START, StateGraph

from adoctagger.nodes.include_writer import include_node
from adoctagger.nodes.planner import plan_node
from adoctagger.nodes.xref_writer import global_index_node, tag_index_node, tags_file_node
from adoctagger.services.templates import TemplateKind
from adoctagger.services.xref_sync import CrossReferenceSync
from adoctagger.state import TagState


def compile_graph(sync: CrossReferenceSync):
    """Build and compile the tagging state machine around `sync`."""
    builder = StateGraph(TagState)

    # Register nodes
    builder.add_node("plan", partial(plan_node, sync=sync))
    builder.add_node("tags_file", partial(tags_file_node, sync=sync))
    builder.add_node("include", partial(include_node, sync=sync))
    builder.add_node("tag_index", partial(tag_index_node, sync=sync))
    builder.add_node("global_index", partial(global_index_node, sync=sync))

    # Linear pipeline
    builder.add_edge(START, "plan")
    builder.add_edge("plan", "tags_file")
    builder.add_edge("tags_file", "include")
    builder.add_edge("include", "tag_index")
    builder.add_edge("tag_index", "global_index")
    builder.add_edge("global_index", END)

    return builder.compile()


def tag_note(
    sync: CrossReferenceSync,
    note_file: str | Path,
    tag_name: str,
    template_kind: TemplateKind = TemplateKind.SIDEBAR,
) -> TagState:
    """Tag `note_file` with `tag_name` and update all four files.  Returns final state."""
    graph = compile_graph(sync)
    initial_state: TagState = {
        "note_path": str(note_file),
        "tag_name": tag_name,
        "template": template_kind.value,
        "included": False,
        "written": [],
    }
    return graph.invoke(initial_state)
