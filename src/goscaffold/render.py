"""Placeholder substitution for template bodies."""

from __future__ import annotations

import re
from types import MappingProxyType

from goscaffold.config import ProjectConfig
from goscaffold.exceptions import TemplateParseError, UnknownPlaceholderError

PLACEHOLDER_FIELDS: MappingProxyType[str, str] = MappingProxyType(
    {
        "ProjectName": "project_name",
        "ModuleName": "module_name",
        "RuntimeVersion": "runtime_version",
    }
)

_TOKEN_RE = re.compile(r"\{\{(?P<name>[^{}]*)\}\}")
_OPEN = "{{"


def render(body: str, config: ProjectConfig, *, template_name: str = "<inline>") -> str:
    """Substitute every placeholder token in *body* with its *config* value.

    The body is scanned once left to right, so substituted values are never
    expanded again. Unknown tokens raise :class:`UnknownPlaceholderError`; an
    opening ``{{`` without a matching ``}}`` raises :class:`TemplateParseError`.
    """
    parts: list[str] = []
    pos = 0
    while True:
        start = body.find(_OPEN, pos)
        if start == -1:
            parts.append(body[pos:])
            break
        match = _TOKEN_RE.match(body, start)
        if match is None:
            line = body.count("\n", 0, start) + 1
            raise TemplateParseError(f"unterminated placeholder on line {line}", template=template_name)
        name = match.group("name").strip()
        field = PLACEHOLDER_FIELDS.get(name)
        if field is None:
            raise UnknownPlaceholderError(name, template=template_name)
        parts.append(body[pos:start])
        parts.append(getattr(config, field))
        pos = match.end()
    return "".join(parts)


def placeholders_in(body: str) -> set[str]:
    """Return the token names referenced by *body*."""
    return {m.group("name").strip() for m in _TOKEN_RE.finditer(body)}


__all__ = ["PLACEHOLDER_FIELDS", "placeholders_in", "render"]
