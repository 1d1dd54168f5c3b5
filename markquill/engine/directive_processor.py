"""
Directive processor - prepares Markdown for the HTML/PDF renderer.

Resolves the date placeholder, sanitizes the text, expands ``signatures``
and ``timeline`` fenced blocks and turns horizontal rules into page breaks.
The steps run in a fixed order; later steps rely on the newline
normalization done earlier.
"""

from __future__ import annotations

import logging
import os
import re
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Pattern, Union

from ..config import ProcessorConfig
from ..renderers.signature_renderer import SignatureBlockRenderer, collect_field_names
from ..renderers.timeline_renderer import TimelineRenderer
from ..utils.sanitizer import sanitize_text

logger = logging.getLogger(__name__)

SIGNATURES_BLOCK = re.compile(r"```signatures\s*(.*?)```", re.DOTALL)
TIMELINE_BLOCK = re.compile(r"```timeline\s*(.*?)```", re.DOTALL)
HORIZONTAL_RULE = re.compile(r"^[ \t]*-{4,}[ \t]*(?:\n|$)", re.MULTILINE)
SIGNATURES_FENCE = re.compile(r"```signatures", re.IGNORECASE)


def has_signature_blocks(text: str) -> bool:
    """Whether the document needs interactive form fields."""
    return bool(text) and SIGNATURES_FENCE.search(text) is not None


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


class DirectiveProcessor:
    """
    Expands MarkQuill directives in Markdown text.

    Args:
        config: Processor configuration
        current_date: Date substituted for the placeholder (now by default)
    """

    def __init__(self, config: Optional[ProcessorConfig] = None,
                 current_date: Optional[datetime] = None) -> None:
        self.config = config or ProcessorConfig()
        self.current_date = current_date
        self.timeline_renderer = TimelineRenderer(self.config.timeline)
        self.signature_renderer = SignatureBlockRenderer(self.config.signatures)

    def process(self, markdown: str) -> str:
        """
        Process a Markdown document.

        Args:
            markdown: Raw document text

        Returns:
            Text ready for the Markdown renderer
        """
        if not markdown:
            return markdown

        cfg = self.config
        result = markdown.replace(cfg.date_placeholder, self.format_date())
        result = sanitize_text(result)
        result = normalize_newlines(result)

        result = self._replace_blocks(
            result, SIGNATURES_BLOCK, self.signature_renderer.render, cfg.signature_failure, "signature"
        )
        result = self._replace_blocks(
            result, TIMELINE_BLOCK, self.timeline_renderer.render, cfg.timeline_failure, "timeline"
        )

        result = HORIZONTAL_RULE.sub(lambda _match: cfg.page_break_marker, result)

        if cfg.restore_platform_newlines and os.linesep != "\n":
            result = result.replace("\n", os.linesep)

        return result

    def process_file(self, path: Union[str, Path],
                     output_path: Optional[Union[str, Path]] = None) -> str:
        """
        Process a UTF-8 Markdown file.

        Args:
            path: Input file
            output_path: Where to write the result (not written when None)

        Returns:
            Processed text
        """
        path = Path(path)
        result = self.process(path.read_text(encoding="utf-8"))

        if output_path is not None:
            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(result, encoding="utf-8", newline="")
            logger.info("Processed %s -> %s", path, output_path)

        return result

    def collect_field_names(self, markdown: str) -> List[str]:
        """Identifiers of every fillable field the document's signature blocks produce."""
        text = normalize_newlines(sanitize_text(markdown or "") or "")
        names: List[str] = []
        for match in SIGNATURES_BLOCK.finditer(text):
            names.extend(collect_field_names(match.group(1), self.config.signatures))
        return names

    def format_date(self) -> str:
        current = self.current_date or datetime.now()
        return current.strftime(self.config.date_format)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _replace_blocks(text: str, pattern: Pattern[str], render: Callable[[str], str],
                        failure: str, kind: str) -> str:
        def replace(match: "re.Match[str]") -> str:
            try:
                return render(match.group(1))
            except Exception:
                logger.exception("Failed to render %s block", kind)
                return failure

        return pattern.sub(replace, text)


def process_markdown(markdown: str, config: Optional[ProcessorConfig] = None,
                     current_date: Optional[datetime] = None) -> str:
    """Process Markdown text with a default processor."""
    return DirectiveProcessor(config, current_date).process(markdown)
