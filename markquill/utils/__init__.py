"""
Utils module for MarkQuill.

Text sanitizing, field identifiers, text metrics and logging helpers.
"""

from .sanitizer import sanitize_text, UNICODE_REPLACEMENTS
from .field_ids import build_field_identifier, column_component, find_field_collisions
from .text_metrics import fit_text, text_width
from .logger import get_logger, configure_logging, set_log_level
from .rich_logger import setup_logging

__all__ = [
    "sanitize_text",
    "UNICODE_REPLACEMENTS",
    "build_field_identifier",
    "column_component",
    "find_field_collisions",
    "fit_text",
    "text_width",
    "get_logger",
    "configure_logging",
    "set_log_level",
    "setup_logging",
]
