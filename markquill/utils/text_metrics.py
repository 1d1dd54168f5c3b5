"""
Text width measurement for diagram labels.

Uses ReportLab's metrics for the standard PDF fonts, which need no font files.
"""

from __future__ import annotations

from reportlab.pdfbase import pdfmetrics

ELLIPSIS = "..."


def text_width(text: str, font_name: str = "Helvetica", font_size: float = 12.0) -> float:
    """Width of ``text`` in points for a standard PDF font."""
    return pdfmetrics.stringWidth(text, font_name, font_size)


def fit_text(text: str, max_width: float, font_name: str = "Helvetica", font_size: float = 12.0) -> str:
    """
    Shorten text so it fits in ``max_width``.

    Args:
        text: Label text (unescaped)
        max_width: Available width in points
        font_name: Standard PDF font name
        font_size: Font size in points

    Returns:
        The text unchanged when it fits, otherwise its longest prefix that fits
        together with a trailing ``...``
    """
    if text_width(text, font_name, font_size) <= max_width:
        return text

    suffix_width = text_width(ELLIPSIS, font_name, font_size)
    kept = text
    while kept and text_width(kept, font_name, font_size) + suffix_width > max_width:
        kept = kept[:-1]
    return kept.rstrip() + ELLIPSIS
