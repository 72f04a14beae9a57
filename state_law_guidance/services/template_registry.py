"""
Lookup of document template kinds, their fields and fixed layouts.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from string import Formatter

from state_law_guidance.document_templates import TEMPLATE_LAYOUTS, TEMPLATE_PLACEHOLDERS
from state_law_guidance.domain.errors import UnknownTemplateKind
from state_law_guidance.models.documents import DocumentTemplateKind, FieldSpec, TemplateLayout

logger = logging.getLogger(__name__)

_formatter = Formatter()


def field_names(line: str) -> list[str]:
    """Names of the ``{field}`` slots in a layout line, in order."""
    return [name for _, name, _, _ in _formatter.parse(line) if name]


class TemplateRegistry:
    """Read-only view over the static template table."""

    def __init__(
        self,
        layouts: Mapping[DocumentTemplateKind, TemplateLayout] | None = None,
        placeholders: Mapping[DocumentTemplateKind, Mapping[str, str]] | None = None,
    ):
        self._layouts = dict(layouts if layouts is not None else TEMPLATE_LAYOUTS)
        placeholders = placeholders if placeholders is not None else TEMPLATE_PLACEHOLDERS
        self._fields: dict[DocumentTemplateKind, tuple[FieldSpec, ...]] = {
            kind: self._collect_fields(layout, placeholders.get(kind, {}))
            for kind, layout in self._layouts.items()
        }

    @staticmethod
    def _collect_fields(
        layout: TemplateLayout, placeholders: Mapping[str, str]
    ) -> tuple[FieldSpec, ...]:
        seen: dict[str, FieldSpec] = {}
        for line in layout.lines:
            for name in field_names(line):
                if name not in seen:
                    seen[name] = FieldSpec(name=name, placeholder_text=placeholders.get(name, ""))
        return tuple(seen.values())

    def kinds(self) -> list[DocumentTemplateKind]:
        return [kind for kind in DocumentTemplateKind if kind in self._layouts]

    def layout_for(self, kind: DocumentTemplateKind) -> TemplateLayout:
        try:
            return self._layouts[kind]
        except KeyError:
            raise UnknownTemplateKind(f"No layout registered for {kind!r}") from None

    def fields_for(self, kind: DocumentTemplateKind) -> tuple[FieldSpec, ...]:
        """Field specs for a template, in order of first appearance in the layout."""
        self.layout_for(kind)
        return self._fields[kind]

    def placeholders_for(self, kind: DocumentTemplateKind) -> dict[str, str]:
        return {field.name: field.placeholder_text for field in self.fields_for(kind)}

    def resolve_kind(self, value: DocumentTemplateKind | str) -> DocumentTemplateKind:
        """Accept a kind, its member name, display title or camelCase identifier."""
        if isinstance(value, DocumentTemplateKind):
            return value
        text = value.strip()
        for kind in DocumentTemplateKind:
            if text in (kind.name, kind.value, kind.identifier):
                return kind
        lowered = text.lower()
        for kind in DocumentTemplateKind:
            if lowered in (kind.name.lower(), kind.value.lower(), kind.identifier.lower()):
                return kind
        raise UnknownTemplateKind(f"Unknown document template kind: {value!r}")

    def partition_field_values(
        self, kind: DocumentTemplateKind, values: Mapping[str, str]
    ) -> tuple[dict[str, str], dict[str, str]]:
        """Split form values into (fields of this template, everything else)."""
        known = {field.name for field in self.fields_for(kind)}
        accepted: dict[str, str] = {}
        ignored: dict[str, str] = {}
        for key, val in values.items():
            if key in known:
                accepted[key] = val
            else:
                ignored[key] = val
        if ignored:
            logger.debug(f"Ignoring unknown fields for {kind.name}: {sorted(ignored)}")
        return accepted, ignored
