"""
MarkQuill - Markdown directive pre-processor for PDF generation.

Expands the ``timeline`` (Gantt-style SVG) and ``signatures`` (approval table
with fillable fields) fenced blocks, resolves ``[Date]``, sanitizes characters
the PDF renderer cannot draw and turns horizontal rules into page breaks.

Quick Start:
    from markquill import process_markdown

    html_ready = process_markdown(open("report.md").read())
"""

from .version import __version__, __version_info__

from .exceptions import (
    MarkQuillError,
    DirectiveError,
    TimelineParseError,
    SignatureTableError,
    ConfigurationError,
)
from .config import ProcessorConfig, TimelineConfig, SignatureConfig
from .engine.directive_processor import DirectiveProcessor, has_signature_blocks, process_markdown
from .renderers.timeline_renderer import TimelineRenderer, render_timeline
from .renderers.signature_renderer import SignatureBlockRenderer, render_signature_block, collect_field_names
from .utils.sanitizer import sanitize_text
from .utils.field_ids import build_field_identifier

__author__ = "AddNap"

__all__ = [
    # Version
    "__version__",
    "__version_info__",

    # Processing
    "DirectiveProcessor",
    "process_markdown",
    "has_signature_blocks",

    # Engines
    "TimelineRenderer",
    "render_timeline",
    "SignatureBlockRenderer",
    "render_signature_block",
    "collect_field_names",
    "sanitize_text",
    "build_field_identifier",

    # Configuration
    "ProcessorConfig",
    "TimelineConfig",
    "SignatureConfig",

    # Exceptions
    "MarkQuillError",
    "DirectiveError",
    "TimelineParseError",
    "SignatureTableError",
    "ConfigurationError",
]


def main():
    """CLI entry point."""
    from .cli import main as cli_main
    return cli_main()
