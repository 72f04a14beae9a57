"""
Fills a document template with form values and lays it out into pages.

Rendering never fails on missing data: an absent or empty value shows the
field's placeholder text instead.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime

from state_law_guidance.constants import (
    BLANK_LINE_HEIGHT,
    DATE_LINE_ADVANCE,
    DOCUMENT_DISCLAIMER,
    DOCUMENT_FOOTER,
    JURISDICTION_LINE_ADVANCE,
    PAGE_BREAK_THRESHOLD,
    PAGE_TOP_MARGIN,
    TITLE_LINE_HEIGHT,
    TITLE_SPACING,
)
from state_law_guidance.models.documents import (
    BlockStyle,
    DocumentBlock,
    DocumentTemplateKind,
    RenderedDocument,
    TemplateLayout,
)
from state_law_guidance.services.template_registry import TemplateRegistry

logger = logging.getLogger(__name__)


def format_long_date(value: datetime) -> str:
    """E.g. 'October 18, 2026'."""
    return f"{value:%B} {value.day}, {value.year}"


def line_advances(layout: TemplateLayout) -> list[int]:
    """Layout units each body line consumes, in line order."""
    advances = [BLANK_LINE_HEIGHT if not raw else layout.line_height for raw in layout.lines]
    if advances and layout.lines[0] and layout.lead_line_height is not None:
        advances[0] = layout.lead_line_height
    return advances


class _PageCursor:
    """Running vertical offset that starts a new page past the break threshold."""

    def __init__(self):
        self.page = 1
        self.offset = PAGE_TOP_MARGIN

    def place(self, advance: int) -> int:
        if self.offset > PAGE_BREAK_THRESHOLD:
            self.page += 1
            self.offset = PAGE_TOP_MARGIN
        page = self.page
        self.offset += advance
        return page


class DocumentRenderer:
    def __init__(self, registry: TemplateRegistry):
        self.registry = registry

    def resolve_values(
        self, kind: DocumentTemplateKind, field_values: Mapping[str, str]
    ) -> dict[str, str]:
        """Value for every field of `kind`: the caller's if non-empty, else the placeholder."""
        accepted, _ = self.registry.partition_field_values(kind, field_values)
        return {
            name: accepted.get(name) or placeholder
            for name, placeholder in self.registry.placeholders_for(kind).items()
        }

    def render(
        self,
        kind: DocumentTemplateKind,
        field_values: Mapping[str, str],
        jurisdiction_name: str,
        generated_at: datetime,
    ) -> RenderedDocument:
        layout = self.registry.layout_for(kind)
        values = self.resolve_values(kind, field_values)
        date_text = format_long_date(generated_at)
        cursor = _PageCursor()
        blocks: list[DocumentBlock] = []

        def add(text: str, style: BlockStyle, advance: int) -> None:
            blocks.append(DocumentBlock(text=text, style=style, page=cursor.place(advance)))

        add(kind.value, BlockStyle.HEADING, TITLE_LINE_HEIGHT + TITLE_SPACING)
        add(f"Date: {date_text}", BlockStyle.NORMAL, DATE_LINE_ADVANCE)
        add(f"State: {jurisdiction_name}", BlockStyle.NORMAL, JURISDICTION_LINE_ADVANCE)

        for raw, advance in zip(layout.lines, line_advances(layout)):
            style = BlockStyle.HEADING if raw in layout.headings else BlockStyle.NORMAL
            add(raw.format_map(values), style, advance)

        # Footer sits at the bottom of whichever page the body ended on
        blocks.append(
            DocumentBlock(text=DOCUMENT_FOOTER.format(date=date_text), page=cursor.page)
        )
        blocks.append(DocumentBlock(text=DOCUMENT_DISCLAIMER, page=cursor.page))

        document = RenderedDocument(
            title=kind.value,
            template_kind=kind,
            jurisdiction_name=jurisdiction_name,
            created_at=generated_at,
            body_blocks=tuple(blocks),
        )
        logger.debug(
            f"Rendered {kind.name} for {jurisdiction_name}: "
            f"{len(blocks)} blocks on {document.page_count} page(s)"
        )
        return document
