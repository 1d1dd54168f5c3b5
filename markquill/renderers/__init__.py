"""Markup renderers for the directive models."""

from .timeline_renderer import TimelineRenderer, render_timeline
from .signature_renderer import SignatureBlockRenderer, render_signature_block, collect_field_names

__all__ = [
    "TimelineRenderer",
    "render_timeline",
    "SignatureBlockRenderer",
    "render_signature_block",
    "collect_field_names",
]
