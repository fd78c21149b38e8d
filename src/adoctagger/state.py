"""
LangGraph state schema – shared across all tagging graph nodes.
"""

from __future__ import annotations

import operator
from typing import Annotated

from typing_extensions import TypedDict


class TagState(TypedDict, total=False):
    """State passed between every node in the tagging graph."""

    # ── Input ──────────────────────────────────────────────────────────────
    note_path: str                   # Note being tagged, as given by the caller
    tag_name: str                    # Human tag name, e.g. "Best Life Hacks"
    template: str                    # TemplateKind value for the tags file

    # ── Plan ───────────────────────────────────────────────────────────────
    tags_path: str                   # Absolute path of <note>.tags
    tag_index_path: str              # Absolute path of Tags/<tag>.adoc
    global_index_path: str           # Absolute path of the global tag index

    # ── Results ────────────────────────────────────────────────────────────
    included: bool                   # True if the include line was appended this run
    written: Annotated[list[str], operator.add]  # Files written, in order
