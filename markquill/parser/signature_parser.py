"""
Signature parser - reads the ``signatures`` directive.

A block holds one or more pipe tables separated by ``---`` lines, each
optionally preceded by a heading::

    ## Approval Signatures

    | Field         | Project Manager | Director |
    |---------------|-----------------|----------|
    | **Name**      | ...             | ...      |
    | **Signature** |                 |          |
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from ..exceptions import SignatureTableError
from ..models.signature import SignatureRow, SignatureSection

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = re.compile(r"^[ \t]*---[ \t]*$", re.MULTILINE)
SEPARATOR_DASHES = re.compile(r"-{2,}")
EMPHASIS = re.compile(r"(\*\*|__)(.+?)\1")
DELIMITER = "|"


def strip_emphasis(text: str) -> str:
    """Remove bold/italic markers from a field label."""
    text = EMPHASIS.sub(r"\2", text.strip())
    text = text.replace("**", "").replace("__", "")
    if len(text) > 1 and text[0] == text[-1] and text[0] in "*_":
        text = text[1:-1]
    return text.strip()


def split_row(line: str) -> List[str]:
    """
    Split a table line into trimmed cells.

    Empty cells produced by a leading or trailing delimiter are removed;
    interior empty cells are kept.
    """
    cells = [cell.strip() for cell in line.split(DELIMITER)]
    if cells and not cells[0]:
        cells.pop(0)
    if cells and not cells[-1]:
        cells.pop()
    return cells


def _find_header_and_separator(lines: List[str]) -> Tuple[int, int]:
    header_index = -1
    for index, line in enumerate(lines):
        if DELIMITER not in line:
            continue
        if header_index == -1:
            header_index = index
        elif SEPARATOR_DASHES.search(line):
            return header_index, index
    raise SignatureTableError("Signature table needs a header and a separator row")


def parse_table(lines: List[str]) -> Tuple[List[str], List[SignatureRow]]:
    """
    Parse the body of one signature section.

    Args:
        lines: Trimmed, non-blank lines following the section title

    Returns:
        (header cells, rows)

    Raises:
        SignatureTableError: If the header or separator is missing, or the
            header has fewer than two columns
    """
    header_index, separator_index = _find_header_and_separator(lines)

    headers = split_row(lines[header_index])
    if len(headers) < 2:
        raise SignatureTableError(
            "Signature table needs a field column and at least one signatory column",
            details=lines[header_index],
        )

    rows: List[SignatureRow] = []
    for line in lines[separator_index + 1:]:
        if DELIMITER not in line:
            continue
        cells = split_row(line)
        if len(cells) < 2:
            logger.debug("Dropping signature row with fewer than two cells: %r", line)
            continue
        rows.append(SignatureRow(label=strip_emphasis(cells[0]), values=cells[1:]))

    return headers, rows


def parse_section(text: str) -> Optional[SignatureSection]:
    """
    Parse one ``---``-delimited section.

    Returns:
        SignatureSection (with ``error`` set for a malformed table), or None
        for a section without content
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        return None

    title: Optional[str] = None
    body = lines
    for index, line in enumerate(lines):
        if line.startswith("#"):
            title = line.lstrip("#").strip()
            body = lines[index + 1:]
            break

    section = SignatureSection(title=title)
    try:
        section.headers, section.rows = parse_table(body)
    except SignatureTableError as exc:
        logger.warning("Invalid signature table in section %r: %s", title, exc)
        section.error = str(exc)
    return section


def parse_signature_block(text: str) -> List[SignatureSection]:
    """
    Parse a ``signatures`` block into its sections.

    Args:
        text: Content of the fenced block

    Returns:
        Sections in document order
    """
    if not text or not text.strip():
        return []

    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    sections = []
    for chunk in SECTION_SEPARATOR.split(normalized):
        section = parse_section(chunk)
        if section is not None:
            sections.append(section)
    return sections
