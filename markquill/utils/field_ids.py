"""
Field identifiers for signature tables.

Identifiers bind a fillable placeholder to the interactive form field created
downstream, so they must be a pure function of the cell's position.
"""

from collections import Counter
from typing import Iterable, List
import re


_WHITESPACE = re.compile(r"\s+")


def compact(value: str) -> str:
    """Remove all whitespace from a name component."""
    return _WHITESPACE.sub("", value or "")


def column_component(column_name: str, index: int) -> str:
    """
    Name component for a signatory column.

    Args:
        column_name: Header text of the column (may be blank)
        index: 1-based position of the column among the signatory columns

    Returns:
        Compacted column name, or ``Col{index}`` for a blank header
    """
    name = compact(column_name)
    return name if name else f"Col{index}"


def build_field_identifier(section: str, column: str, field_label: str) -> str:
    """
    Build the identifier of a signature table cell.

    Args:
        section: Section title
        column: Signatory column component (see ``column_component``)
        field_label: Field label with emphasis already stripped

    Returns:
        ``{Section}_{Column}_{FieldLabel}`` without whitespace; slashes are
        also removed from the field label
    """
    label = compact(field_label).replace("/", "")
    return f"{compact(section)}_{compact(column)}_{label}"


def find_field_collisions(identifiers: Iterable[str]) -> List[str]:
    """
    Return identifiers that occur more than once, in first-seen order.

    Colliding fields are not renamed; the last one wins in the generated form.
    """
    counts = Counter(identifiers)
    return [identifier for identifier, count in counts.items() if count > 1]
