"""Document-level directive processing."""

from .directive_processor import DirectiveProcessor, has_signature_blocks, process_markdown

__all__ = ["DirectiveProcessor", "has_signature_blocks", "process_markdown"]
