"""
reference.py – One ``xref:`` cross-reference between two AsciiDoc files.

A reference is identified by its link target alone.  The display name is
derived from the target's file name:

    Tags/tag_this_is_a_tag.adoc   ->  This Is A Tag
    ../data_mesh_event_streaming.adoc  ->  Data Mesh Event Streaming

A leading ``tag`` segment is dropped.  Targets that do not end in ``.adoc``
or ``.tags``, or whose stem is only ``tag``, keep the raw target as name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Stem of a target ending in .adoc or .tags, after any directory prefix
_STEM_RE = re.compile(r"^(?:.*/)?(?P<stem>[^/]+?)\.(?:adoc|tags)$")


@dataclass(frozen=True)
class Reference:
    """A link target; equality and hashing ignore the display name."""

    link_target: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "link_target", self.link_target.replace("\\", "/"))

    @property
    def canonical_name(self) -> str:
        match = _STEM_RE.match(self.link_target)
        if not match:
            return self.link_target
        return canonical_name_from_stem(match.group("stem")) or self.link_target

    @property
    def sort_key(self) -> tuple[str, str]:
        return self.canonical_name, self.link_target

    def __str__(self) -> str:
        return f"xref:{self.link_target}[{self.canonical_name}]"


def canonical_name_from_stem(stem: str) -> str:
    """
    Turn an underscore-separated file stem into display text.

    Returns "" when nothing is left after dropping a leading ``tag`` segment.
    """
    words = stem.split("_")
    if words and words[0].lower() == "tag":
        words = words[1:]
    return " ".join(w[0].upper() + w[1:] for w in words if w)
