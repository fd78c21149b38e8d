"""
templates.py – Boilerplate wrapped around a rendered list of references.

Each template carries the literal placeholder line that the rendered
list replaces.  An empty template means "write the list as-is".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from adoctagger.errors import InvalidArgumentError

SIDEBAR_PLACEHOLDER = "// xrefs"

_SIDEBAR_BODY = "\n".join([
    ".Tags",
    "[sidebar]",
    "****",
    SIDEBAR_PLACEHOLDER,
    "****",
]) + "\n"


class TemplateKind(str, Enum):
    NONE = "none"
    SIDEBAR = "sidebar"

    @classmethod
    def parse(cls, value: str) -> TemplateKind:
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(k.value for k in cls)
            raise InvalidArgumentError(
                f"Unknown template '{value}' (expected one of: {choices})"
            ) from None


@dataclass(frozen=True)
class Template:
    body: str = ""
    placeholder: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.body


_REGISTRY: dict[TemplateKind, Template] = {
    TemplateKind.SIDEBAR: Template(_SIDEBAR_BODY, SIDEBAR_PLACEHOLDER),
}


def get_template(kind: TemplateKind) -> Template:
    return _REGISTRY.get(kind, Template())
