"""Signature table models built by the signature parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class SignatureCell:
    """Signatory cell of a row, resolved against its column."""

    column: str
    value: str
    field_name: str

    @property
    def is_fillable(self) -> bool:
        """
        Whether the cell becomes an interactive field.

        Empty cells, ``...`` and runs of dots/whitespace are placeholders;
        anything else is pre-filled text.
        """
        value = self.value
        if not value.strip() or "..." in value:
            return True
        return all(char.isspace() or char == "." for char in value)


@dataclass
class SignatureRow:
    """Table row: a field label followed by one value per signatory."""

    label: str
    values: List[str] = field(default_factory=list)


@dataclass
class SignatureSection:
    """One signature table, optionally titled by a heading line."""

    title: Optional[str] = None
    headers: List[str] = field(default_factory=list)
    rows: List[SignatureRow] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def signatories(self) -> List[str]:
        """Column names after the field-label column."""
        return self.headers[1:]

    @property
    def is_valid(self) -> bool:
        return self.error is None
