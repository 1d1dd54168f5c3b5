"""Parsers for the ``timeline`` and ``signatures`` directives."""

from .timeline_parser import TimelineParser, parse_timeline, parse_date, parse_duration
from .signature_parser import parse_signature_block, parse_section, split_row, strip_emphasis

__all__ = [
    "TimelineParser",
    "parse_timeline",
    "parse_date",
    "parse_duration",
    "parse_signature_block",
    "parse_section",
    "split_row",
    "strip_emphasis",
]
