"""
serializer.py – Render a set of references as a sorted bullet list,
optionally spliced into a template.

Ordering depends only on the set: by display name, then by link target.
"""

from __future__ import annotations

from collections.abc import Iterable

from jinja2 import Environment

from adoctagger.services.reference import Reference
from adoctagger.services.templates import Template

_env = Environment(
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["xref"] = str

_LIST_TEMPLATE = _env.from_string(
    "{% for ref in references %}\n"
    "* {{ ref | xref }}\n"
    "{% endfor %}"
)


def sort_references(references: Iterable[Reference]) -> list[Reference]:
    return sorted(references, key=lambda ref: ref.sort_key)


def render_references(references: Iterable[Reference], template: Template) -> str:
    """Return the full file text for `references` wrapped in `template`."""
    block = _LIST_TEMPLATE.render(references=sort_references(references)).rstrip("\n")
    if template.is_empty:
        return block + "\n" if block else ""
    return template.body.replace(template.placeholder, block, 1)
