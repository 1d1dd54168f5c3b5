"""Typed models for the timeline and signature directives."""

from .timeline import TimelineDocument, TimelineSection, TimelineTask
from .signature import SignatureCell, SignatureRow, SignatureSection

__all__ = [
    "TimelineDocument",
    "TimelineSection",
    "TimelineTask",
    "SignatureCell",
    "SignatureRow",
    "SignatureSection",
]
