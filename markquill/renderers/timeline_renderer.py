"""
Timeline renderer - lays out a TimelineDocument as inline SVG.

Geometry is computed in pixels from the earliest task start: each day gets
``day_width`` pixels of the timeline area, each section heading and task gets
one row.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from html import escape
from typing import List, Optional

from ..config import TimelineConfig
from ..models.timeline import TimelineDocument, TimelineTask
from ..parser.timeline_parser import TimelineParser
from ..utils.text_metrics import fit_text

logger = logging.getLogger(__name__)

SVG_STYLE = (
    "<style> .label { font: 12px sans-serif; fill: #222; } "
    ".section { font: bold 13px sans-serif; fill: #111; } "
    ".task { fill: #4285f4; } .milestone { fill: #d93025; } "
    ".axis { font: 11px sans-serif; fill: #333; } </style>"
)


MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def fmt(value: float) -> str:
    """Invariant number formatting with at most three decimals."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def axis_label(moment: datetime) -> str:
    """Locale-independent ``Mon d`` tick label."""
    return f"{MONTH_ABBREVIATIONS[moment.month - 1]} {moment.day}"


@dataclass(frozen=True)
class TimelineLayout:
    """Scale of a rendered timeline."""

    min_start: datetime
    max_end: datetime
    total_days: float
    day_width: float
    height: int

    def offset(self, moment: datetime) -> float:
        """Horizontal offset of ``moment`` inside the timeline area."""
        return (moment - self.min_start).total_seconds() / 86400.0 * self.day_width


class TimelineRenderer:
    """Renders ``timeline`` directive text to SVG markup."""

    def __init__(self, config: Optional[TimelineConfig] = None) -> None:
        self.config = config or TimelineConfig()
        self.parser = TimelineParser(self.config)

    def render(self, text: str) -> str:
        """
        Render timeline text.

        Args:
            text: Content of a ``timeline`` fenced block

        Returns:
            ``""`` for blank input, the empty-timeline sentinel when no task
            was parsed, otherwise an ``<svg>`` element
        """
        if not text or not text.strip():
            return ""

        document = self.parser.parse(text)
        if document.task_count == 0:
            logger.warning("Timeline block contains no parsable tasks")
            return self.config.empty_message

        return self.render_document(document)

    def compute_layout(self, document: TimelineDocument) -> TimelineLayout:
        """Scale and canvas height for a document with at least one task."""
        cfg = self.config
        tasks = document.tasks
        min_start = min(task.start for task in tasks)
        max_end = max(task.end for task in tasks)
        total_days = max(1.0, (max_end - min_start).total_seconds() / 86400.0)
        day_width = max(1.0, cfg.timeline_width / total_days)
        height = cfg.header_height + max(cfg.min_body_height, document.row_count * cfg.row_height + 40)
        return TimelineLayout(min_start, max_end, total_days, day_width, height)

    def render_document(self, document: TimelineDocument) -> str:
        """Render a parsed document that has at least one task."""
        cfg = self.config
        layout = self.compute_layout(document)

        parts: List[str] = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{cfg.width}" height="{layout.height}" '
            f'viewBox="0 0 {cfg.width} {layout.height}">',
            SVG_STYLE,
        ]

        if document.title:
            parts.append(f'<text x="{cfg.label_width}" y="20" class="section">{escape(document.title)}</text>')

        parts.extend(self._render_axis(layout))

        current_y = float(cfg.header_height + 10)
        for section in document.sections:
            parts.append(f'<text x="10" y="{fmt(current_y + 12)}" class="section">{escape(section.name)}</text>')
            current_y += cfg.row_height

            for task in section.tasks:
                parts.extend(self._render_task(task, layout, current_y))
                current_y += cfg.row_height

        parts.append("</svg>")
        logger.debug(
            "Rendered timeline: %d sections, %d tasks, %.2f days",
            len(document.sections), document.task_count, layout.total_days,
        )
        return "\n".join(parts) + "\n"

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _render_axis(self, layout: TimelineLayout) -> List[str]:
        cfg = self.config
        parts = [f'<g transform="translate({cfg.label_width}, {cfg.header_height - 8})">']

        day_count = int(math.ceil(layout.total_days))
        step = 1 if layout.total_days <= 31 else max(1, int(math.ceil(day_count / 10.0)))
        for day in range(0, day_count + 1, step):
            try:
                tick = layout.min_start + timedelta(days=day)
            except OverflowError:
                break
            x = day * layout.day_width
            parts.append(f'<line x1="{fmt(x)}" y1="0" x2="{fmt(x)}" y2="8" stroke="#ccc" />')
            parts.append(f'<text x="{fmt(x + 2)}" y="20" class="axis">{axis_label(tick)}</text>')

        parts.append("</g>")
        return parts

    def _render_task(self, task: TimelineTask, layout: TimelineLayout, row_y: float) -> List[str]:
        cfg = self.config
        x = cfg.label_width + layout.offset(task.start)
        y = row_y - cfg.row_height / 2.0

        label = task.label
        if cfg.truncate_labels:
            label = fit_text(label, cfg.label_width - 20, cfg.label_font, cfg.label_font_size)
        parts = [f'<text x="10" y="{fmt(y + 12)}" class="label">{escape(label)}</text>']

        if task.is_milestone:
            size = cfg.milestone_size
            cx = x + cfg.min_bar_width / 2.0
            cy = y + 8
            points = " ".join(
                f"{fmt(px)},{fmt(py)}"
                for px, py in ((cx, cy - size), (cx + size, cy), (cx, cy + size), (cx - size, cy))
            )
            parts.append(f'<polygon points="{points}" class="milestone" />')
        else:
            width = max(cfg.min_bar_width, task.effective_days * layout.day_width)
            parts.append(
                f'<rect x="{fmt(x)}" y="{fmt(y)}" width="{fmt(width)}" height="{cfg.bar_height}" rx="3" class="task" />'
            )
            parts.append(
                f'<text x="{fmt(x + 4)}" y="{fmt(y + 10)}" font-size="10px" fill="#fff">'
                f'{escape(task.start.strftime("%Y-%m-%d"))}</text>'
            )

        return parts


def render_timeline(text: str, config: Optional[TimelineConfig] = None) -> str:
    """Render ``timeline`` directive text to SVG with a default renderer."""
    return TimelineRenderer(config).render(text)
