"""
Timeline parser - turns the ``timeline`` directive into a TimelineDocument.

The notation is a small Gantt dialect::

    title Project Timeline
    dateFormat YYYY-MM-DD
    section Planning
        Kick-off     :m1, 2025-01-01, milestone
        Requirements :req, 2025-01-02, 5d

Lines are classified by an ordered list of discriminators; lines that do not
yield a usable task are skipped, never reported as errors.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from ..config import TimelineConfig
from ..exceptions import TimelineParseError
from ..models.timeline import TimelineDocument, TimelineSection, TimelineTask

logger = logging.getLogger(__name__)

DEFAULT_DURATION = "1d"

MILESTONE_TOKEN = re.compile(r"^(m|milestone)$", re.IGNORECASE)
MILESTONE_ID = re.compile(r"^(m|milestone)\d*$", re.IGNORECASE)
NUMBER = re.compile(r"([0-9]*\.?[0-9]+)")

# (shape, strptime format); tried in order, first success wins
DATE_PATTERNS: Tuple[Tuple[re.Pattern, str], ...] = (
    (re.compile(r"^\d{4}-\d{2}-\d{2}$"), "%Y-%m-%d"),
    (re.compile(r"^\d{4}-\d{1,2}-\d{1,2}$"), "%Y-%m-%d"),
    (re.compile(r"^\d{4}/\d{1,2}/\d{1,2}$"), "%Y/%m/%d"),
    (re.compile(r"^\d{2}/\d{2}/\d{4}$"), "%m/%d/%Y"),
    (re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$"), "%m/%d/%Y"),
)

GENERAL_DATE_FORMATS: Tuple[str, ...] = (
    "%d %b %Y",
    "%d %B %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d-%b-%Y",
    "%d.%m.%Y",
    "%Y.%m.%d",
)


class LineKind(Enum):
    """Kinds of timeline lines."""

    TITLE = "title"
    IGNORED = "ignored"
    SECTION = "section"
    TASK = "task"


@dataclass(frozen=True)
class ClassifiedLine:
    """Result of a line discriminator."""

    kind: LineKind
    value: str = ""
    parts: Tuple[str, ...] = field(default_factory=tuple)


LineClassifier = Callable[[str], Optional[ClassifiedLine]]


def _keyword_argument(line: str, keyword: str) -> Optional[str]:
    """Text after ``keyword `` (case-insensitive), or None."""
    prefix = keyword + " "
    if line[:len(prefix)].lower() == prefix:
        return line[len(prefix):].strip()
    return None


def parse_date(token: str) -> datetime:
    """
    Parse a task start date.

    Args:
        token: Date token, e.g. ``2025-01-01``, ``2025/1/5``, ``01/15/2025``

    Returns:
        Naive datetime

    Raises:
        TimelineParseError: If no supported format matches
    """
    token = token.strip()

    for shape, fmt in DATE_PATTERNS:
        if shape.match(token):
            try:
                return datetime.strptime(token, fmt)
            except ValueError:
                continue

    try:
        return datetime.fromisoformat(token).replace(tzinfo=None)
    except ValueError:
        pass

    for fmt in GENERAL_DATE_FORMATS:
        try:
            return datetime.strptime(token, fmt)
        except ValueError:
            continue

    raise TimelineParseError("Unrecognized date", details=token)


def parse_duration(duration_token: str, task_id: str = "") -> Tuple[float, bool]:
    """
    Interpret a duration token.

    Args:
        duration_token: ``5d``, ``1.5d``, ``6h``, ``m`` or ``milestone``
        task_id: Task identifier; ``m1``/``milestone2`` also mark a milestone

    Returns:
        (days, is_milestone); milestones take 0 days
    """
    token = duration_token.strip().lower()
    if MILESTONE_TOKEN.match(token) or MILESTONE_ID.match(task_id.strip()):
        return 0.0, True

    match = NUMBER.search(token)
    if match:
        value = float(match.group(1))
        return (value / 24.0 if token.endswith("h") else value), False

    if token.endswith("h"):
        return 1.0 / 24.0, False
    return 1.0, False


class TimelineParser:
    """Parses timeline directive text into a TimelineDocument."""

    def __init__(self, config: Optional[TimelineConfig] = None) -> None:
        self.config = config or TimelineConfig()
        self.classifiers: List[LineClassifier] = [
            self._match_title,
            self._match_ignored,
            self._match_section,
            self._match_task,
        ]

    def classify(self, line: str) -> Optional[ClassifiedLine]:
        """Run the discriminators in order; None for unrecognized lines."""
        for classifier in self.classifiers:
            result = classifier(line)
            if result is not None:
                return result
        return None

    def parse(self, text: str) -> TimelineDocument:
        """
        Parse timeline text.

        Args:
            text: Content of a ``timeline`` fenced block

        Returns:
            TimelineDocument (possibly without tasks)
        """
        title: Optional[str] = None
        sections: List[Tuple[str, List[TimelineTask]]] = []

        for line in self._lines(text or ""):
            classified = self.classify(line)
            if classified is None:
                logger.debug("Skipping unrecognized timeline line: %r", line)
                continue

            if classified.kind is LineKind.TITLE:
                title = classified.value
            elif classified.kind is LineKind.SECTION:
                sections.append((classified.value, []))
            elif classified.kind is LineKind.TASK:
                if not sections:
                    logger.debug("Skipping task outside of a section: %r", line)
                    continue
                task = self._build_task(classified)
                if task is not None:
                    sections[-1][1].append(task)

        return TimelineDocument(
            title=title,
            sections=tuple(TimelineSection(name, tuple(tasks)) for name, tasks in sections),
        )

    # ------------------------------------------------------------------
    # Discriminators
    # ------------------------------------------------------------------
    def _match_title(self, line: str) -> Optional[ClassifiedLine]:
        value = _keyword_argument(line, "title")
        return ClassifiedLine(LineKind.TITLE, value) if value is not None else None

    def _match_ignored(self, line: str) -> Optional[ClassifiedLine]:
        lowered = line.lower()
        for directive in self.config.ignored_directives:
            if lowered.startswith(directive.lower()):
                return ClassifiedLine(LineKind.IGNORED, directive)
        return None

    def _match_section(self, line: str) -> Optional[ClassifiedLine]:
        value = _keyword_argument(line, "section")
        return ClassifiedLine(LineKind.SECTION, value) if value is not None else None

    def _match_task(self, line: str) -> Optional[ClassifiedLine]:
        if ":" not in line:
            return None
        label, rest = line.split(":", 1)
        parts = tuple(part.strip() for part in rest.split(",") if part.strip())
        return ClassifiedLine(LineKind.TASK, label.strip(), parts)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _lines(text: str) -> List[str]:
        return [line.strip() for line in text.splitlines() if line.strip()]

    @staticmethod
    def _build_task(classified: ClassifiedLine) -> Optional[TimelineTask]:
        parts: Sequence[str] = classified.parts
        if len(parts) < 2:
            logger.debug("Skipping task %r: expected id and date", classified.value)
            return None

        task_id, date_token = parts[0], parts[1]
        duration_token = parts[2] if len(parts) >= 3 else DEFAULT_DURATION

        try:
            start = parse_date(date_token)
        except TimelineParseError as exc:
            logger.debug("Skipping task %r: %s", classified.value, exc)
            return None

        days, is_milestone = parse_duration(duration_token, task_id)
        task = TimelineTask(
            label=classified.value,
            start=start,
            duration_days=days,
            is_milestone=is_milestone,
        )
        try:
            task.end
        except OverflowError:
            logger.debug("Skipping task %r: end date out of range", classified.value)
            return None
        return task


def parse_timeline(text: str, config: Optional[TimelineConfig] = None) -> TimelineDocument:
    """Parse timeline directive text with a default parser."""
    return TimelineParser(config).parse(text)
