"""
extractor.py – Pull ``xref:`` entries out of AsciiDoc text, line by line.

Recognised lines look like:

    * xref:Tags/tag_methodic.adoc[Methodic]
    *xref:../data_mesh_event_streaming.adoc[Data Mesh Event Streaming]
    xref:some_file.adoc[Name]

An xref must sit on one physical line; one wrapped over two lines is not
picked up.  Everything else in the file (titles, sidebar delimiters,
free text) is ignored.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from adoctagger.services.reference import Reference

logger = logging.getLogger(__name__)

# Optional bullet, optional space, then xref:<target>[<display>]
_XREF_RE = re.compile(r"^\*? ?xref:(?P<target>[^\[\]]+)\[(?P<display>[^\]]*)\]")


def extract_references(lines: Iterable[str]) -> set[Reference]:
    """Return every distinct reference found in `lines`."""
    refs: set[Reference] = set()
    for line in lines:
        match = _XREF_RE.match(line)
        if match:
            refs.add(Reference(match.group("target")))
    return refs
