"""
Signature renderer - emits HTML tables with fillable field placeholders.

Each empty (or ``...``) cell becomes an ``<input>`` named after its section,
signatory column and field label; the downstream form materializer turns
those inputs into interactive form fields.
"""

from __future__ import annotations

import logging
from html import escape
from typing import Iterator, List, Optional

from ..config import SignatureConfig
from ..models.signature import SignatureCell, SignatureRow, SignatureSection
from ..parser.signature_parser import parse_signature_block
from ..utils.field_ids import build_field_identifier, column_component, find_field_collisions

logger = logging.getLogger(__name__)

CELL_STYLE = "border: 1px solid #ccc; padding: 8px;"
HEADER_STYLE = "border: 1px solid #ccc; padding: 8px; background-color: #f0f0f0; text-align: left;"
INPUT_CELL_STYLE = "border: 1px solid #ccc; padding: 4px;"


class SignatureBlockRenderer:
    """Renders ``signatures`` directive text to HTML."""

    def __init__(self, config: Optional[SignatureConfig] = None) -> None:
        self.config = config or SignatureConfig()

    def render(self, text: str) -> str:
        """
        Render a signature block.

        Args:
            text: Content of a ``signatures`` fenced block

        Returns:
            ``""`` for blank input, otherwise a ``<div class="signature-block">``
            holding one table (or diagnostic) per section
        """
        if not text or not text.strip():
            return ""

        sections = parse_signature_block(text)
        self._warn_collisions(sections)

        parts = ['<div class="signature-block" style="margin: 20px 0; page-break-inside: avoid;">']
        for section in sections:
            if section.title is not None:
                parts.append(
                    f'<h3 style="margin-top: 20px; margin-bottom: 10px;">{escape(section.title)}</h3>'
                )
            if section.is_valid:
                parts.append(self.render_table(section))
            else:
                parts.append(self.config.invalid_table_message)
        parts.append("</div>")
        return "\n".join(parts) + "\n"

    def render_table(self, section: SignatureSection) -> str:
        """Render a parsed, valid section as an HTML table."""
        parts = ['<table style="width: 100%; border-collapse: collapse; margin-bottom: 20px;">', "<thead><tr>"]
        for header in section.headers:
            parts.append(f'<th style="{HEADER_STYLE}">{escape(header) if header else "&nbsp;"}</th>')
        parts.append("</tr></thead>")

        parts.append("<tbody>")
        for row in section.rows:
            parts.append("<tr>")
            parts.append(f'<td style="{CELL_STYLE}"><strong>{escape(row.label)}</strong></td>')
            for cell in self.cells(section, row):
                parts.append(self._render_cell(cell, row.label))
            parts.append("</tr>")
        parts.append("</tbody>")
        parts.append("</table>")
        return "\n".join(parts)

    def cells(self, section: SignatureSection, row: SignatureRow) -> Iterator[SignatureCell]:
        """Signatory cells of a row; values beyond the header width are ignored."""
        section_name = section.title or self.config.untitled_section
        for index, (column, value) in enumerate(zip(section.signatories, row.values), start=1):
            name = build_field_identifier(section_name, column_component(column, index), row.label)
            yield SignatureCell(column=column, value=value, field_name=name)

    def field_names(self, sections: List[SignatureSection]) -> List[str]:
        """Identifiers of every fillable cell, in document order."""
        return [
            cell.field_name
            for section in sections
            if section.is_valid
            for row in section.rows
            for cell in self.cells(section, row)
            if cell.is_fillable
        ]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _render_cell(self, cell: SignatureCell, label: str) -> str:
        if not cell.is_fillable:
            return f'<td style="{CELL_STYLE}" data-field="{escape(cell.field_name)}">{escape(cell.value)}</td>'

        if "signature" in label.lower():
            css_class, height = "signature-field", self.config.signature_field_height
        else:
            css_class, height = "text-field", self.config.field_height
        return (
            f'<td style="{INPUT_CELL_STYLE}"><input type="text" name="{escape(cell.field_name)}" '
            f'class="{css_class}" style="width: 95%; height: {height}px; border: none; '
            f'background: transparent; font-size: 10pt; padding: 2px;" /></td>'
        )

    def _warn_collisions(self, sections: List[SignatureSection]) -> None:
        for name in find_field_collisions(self.field_names(sections)):
            logger.warning("Duplicate signature field name %r; the last occurrence wins", name)


def render_signature_block(text: str, config: Optional[SignatureConfig] = None) -> str:
    """Render ``signatures`` directive text with a default renderer."""
    return SignatureBlockRenderer(config).render(text)


def collect_field_names(text: str, config: Optional[SignatureConfig] = None) -> List[str]:
    """Identifiers of the fillable fields a ``signatures`` block produces."""
    return SignatureBlockRenderer(config).field_names(parse_signature_block(text))
