"""Timeline models built by the timeline parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional, Tuple


@dataclass(frozen=True)
class TimelineTask:
    """Single bar or milestone of a timeline."""

    label: str
    start: datetime
    duration_days: float = 1.0
    is_milestone: bool = False

    @property
    def effective_days(self) -> float:
        """Duration used for layout; milestones take no time."""
        return 0.0 if self.is_milestone else self.duration_days

    @property
    def end(self) -> datetime:
        return self.start + timedelta(days=self.effective_days)


@dataclass(frozen=True)
class TimelineSection:
    """Named group of tasks opened by a ``section`` line."""

    name: str
    tasks: Tuple[TimelineTask, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TimelineDocument:
    """Parsed ``timeline`` directive."""

    title: Optional[str] = None
    sections: Tuple[TimelineSection, ...] = field(default_factory=tuple)

    @property
    def tasks(self) -> Tuple[TimelineTask, ...]:
        return tuple(task for section in self.sections for task in section.tasks)

    @property
    def task_count(self) -> int:
        return sum(len(section.tasks) for section in self.sections)

    @property
    def row_count(self) -> int:
        """Rows drawn: one per section heading plus one per task."""
        return len(self.sections) + self.task_count
