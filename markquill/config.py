"""
Configuration for MarkQuill directive processing.

Every value has a default matching the stock rendering, so ``ProcessorConfig()``
is a complete configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class TimelineConfig:
    """
    Layout constants for the timeline SVG.

    Attributes:
        width: Canvas width in pixels.
        label_width: Width of the left label column.
        right_margin: Space kept free right of the timeline area.
        row_height: Height of one task or section row.
        header_height: Height reserved for the title and axis.
        min_body_height: Minimum height of the rows area.
        milestone_size: Half-diagonal of the milestone diamond.
        min_bar_width: Narrowest bar drawn for a non-milestone task.
        bar_height: Height of a task bar.
        label_font: ReportLab font used to measure labels.
        label_font_size: Label font size (matches the ``.label`` CSS class).
        truncate_labels: Shorten labels wider than the label column (off by default).
        ignored_directives: Lowercase keywords whose lines are skipped silently.
        empty_message: Sentinel returned when no task could be parsed.
    """

    width: int = 900
    label_width: int = 200
    right_margin: int = 20
    row_height: int = 28
    header_height: int = 40
    min_body_height: int = 200
    milestone_size: float = 8.0
    min_bar_width: float = 2.0
    bar_height: int = 12
    label_font: str = "Helvetica"
    label_font_size: float = 12.0
    truncate_labels: bool = False
    ignored_directives: Tuple[str, ...] = ("dateformat", "axisformat")
    empty_message: str = "<pre>No tasks parsed in timeline</pre>"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.row_height <= 0 or self.header_height < 0:
            raise ConfigurationError("Timeline dimensions must be positive")
        if self.label_width + self.right_margin >= self.width:
            raise ConfigurationError(
                "Label column and right margin leave no room for the timeline",
                details=f"width={self.width}, label_width={self.label_width}, right_margin={self.right_margin}",
            )

    @property
    def timeline_width(self) -> int:
        """Width of the area the bars are drawn in."""
        return self.width - self.label_width - self.right_margin


@dataclass(frozen=True)
class SignatureConfig:
    """Rendering options for signature tables."""

    untitled_section: str = "Unknown"
    invalid_table_message: str = "<p>Invalid signature table format</p>"
    field_height: int = 16
    signature_field_height: int = 28


@dataclass(frozen=True)
class ProcessorConfig:
    """
    Options for the directive processor.

    Attributes:
        date_placeholder: Token replaced by the current date.
        date_format: ``strftime`` format of the substituted date (``%x`` is the
            locale's short date).
        page_break_marker: Markup that replaces horizontal rules.
        signature_failure: Placeholder for a signature block that raised.
        timeline_failure: Placeholder for a timeline block that raised.
        restore_platform_newlines: Convert ``\\n`` back to ``os.linesep``.
    """

    date_placeholder: str = "[Date]"
    date_format: str = "%x"
    page_break_marker: str = '<div style="page-break-after: always;"></div>\n'
    signature_failure: str = "<pre>Failed to render signature block</pre>"
    timeline_failure: str = "<pre>Failed to render timeline</pre>"
    restore_platform_newlines: bool = True
    timeline: TimelineConfig = field(default_factory=TimelineConfig)
    signatures: SignatureConfig = field(default_factory=SignatureConfig)
