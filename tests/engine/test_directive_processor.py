"""
Tests for the directive processor.
"""

import logging
import os
from unittest import mock

import pytest

from markquill.config import ProcessorConfig
from markquill.engine.directive_processor import (
    DirectiveProcessor,
    has_signature_blocks,
    normalize_newlines,
    process_markdown,
)

PAGE_BREAK = '<div style="page-break-after: always;"></div>'


@pytest.fixture(autouse=True)
def posix_newlines(monkeypatch):
    monkeypatch.setattr(os, "linesep", "\n")


@pytest.fixture
def processor(fixed_date):
    return DirectiveProcessor(ProcessorConfig(date_format="%Y-%m-%d"), current_date=fixed_date)


@pytest.fixture
def report(basic_timeline, approval_signatures):
    """Document using every directive."""
    return (
        "# Status Report\n\n"
        "Prepared on [Date] → review\n\n"
        f"```timeline\n{basic_timeline}```\n\n"
        "----\n\n"
        f"```signatures\n{approval_signatures}```\n"
    )


class TestDatePlaceholder:

    def test_placeholder_replaced(self, processor):
        assert processor.process("Signed on [Date].") == "Signed on 2025-01-15."

    def test_every_occurrence_replaced(self, processor):
        assert processor.process("[Date] / [Date]") == "2025-01-15 / 2025-01-15"

    def test_default_format_is_locale_short_date(self, fixed_date):
        processor = DirectiveProcessor(current_date=fixed_date)
        assert processor.process("[Date]") == fixed_date.strftime("%x")

    def test_custom_placeholder(self, fixed_date):
        config = ProcessorConfig(date_placeholder="{{today}}", date_format="%d.%m.%Y")
        assert process_markdown("{{today}}", config, fixed_date) == "15.01.2025"


class TestSanitizing:

    def test_symbols_replaced_outside_blocks(self, processor):
        assert processor.process("Cost → 5 €") == "Cost -> 5 &euro;"

    def test_text_inside_blocks_is_sanitized_first(self, processor):
        result = processor.process("```signatures\n| Field | A |\n|---|---|\n| Name | Zoë ✓ |\n```")
        assert "✓" not in result
        assert 'data-field="Unknown_A_Name"' in result


class TestBlockExpansion:

    def test_full_report(self, processor, report):
        result = processor.process(report)

        assert "```" not in result
        assert result.count("<svg") == 1
        assert result.count('<div class="signature-block"') == 1
        assert result.count('<input type="text" name="') == 10
        assert "Prepared on 2025-01-15 -> review" in result
        assert PAGE_BREAK in result

    def test_multiple_timeline_blocks(self, processor, basic_timeline):
        block = f"```timeline\n{basic_timeline}```\n"
        result = processor.process(block + "\nbetween\n\n" + block)
        assert result.count("<svg") == 2
        assert "between" in result

    def test_empty_timeline_block(self, processor):
        assert processor.process("before\n```timeline\n```\nafter") == "before\n\nafter"

    def test_timeline_without_tasks(self, processor):
        result = processor.process("```timeline\ntitle Nothing\n```")
        assert result == "<pre>No tasks parsed in timeline</pre>"

    def test_unclosed_fence_left_alone(self, processor):
        text = "```timeline\nsection S\nT :t, 2025-01-01, 1d\n"
        assert processor.process(text) == text

    def test_other_fences_untouched(self, processor):
        text = "```python\nprint('x')\n```"
        assert processor.process(text) == text

    def test_invalid_signature_table_rendered_inline(self, processor):
        result = processor.process("```signatures\n## Broken\nno table\n```")
        assert "<p>Invalid signature table format</p>" in result


class TestRenderFailures:

    def test_timeline_failure_placeholder(self, processor, report, caplog):
        with mock.patch.object(processor.timeline_renderer, "render", side_effect=RuntimeError("boom")):
            with caplog.at_level(logging.ERROR):
                result = processor.process(report)

        assert "<pre>Failed to render timeline</pre>" in result
        assert '<div class="signature-block"' in result
        assert "Failed to render timeline block" in caplog.text

    def test_signature_failure_placeholder(self, processor, report, caplog):
        with mock.patch.object(processor.signature_renderer, "render", side_effect=ValueError("bad")):
            with caplog.at_level(logging.ERROR):
                result = processor.process(report)

        assert "<pre>Failed to render signature block</pre>" in result
        assert "<svg" in result
        assert "Failed to render signature block" in caplog.text

    def test_failure_limited_to_one_block(self, processor, basic_timeline):
        block = f"```timeline\n{basic_timeline}```"
        render = processor.timeline_renderer.render
        with mock.patch.object(
            processor.timeline_renderer, "render", side_effect=[RuntimeError("boom"), render(basic_timeline)]
        ):
            result = processor.process(block + "\n" + block)

        assert result.count("<pre>Failed to render timeline</pre>") == 1
        assert result.count("<svg") == 1


class TestPageBreaks:

    @pytest.mark.parametrize("rule", ["----", "-----", "  ------  "])
    def test_rules_become_page_breaks(self, processor, rule):
        result = processor.process(f"Page one\n\n{rule}\n\nPage two")
        assert result == f"Page one\n\n{PAGE_BREAK}\n\nPage two"

    def test_rule_at_end_of_document(self, processor):
        assert processor.process("Last page\n----") == f"Last page\n{PAGE_BREAK}\n"

    def test_short_rules_untouched(self, processor):
        text = "Title\n---\nText\n- item"
        assert processor.process(text) == text

    def test_dashes_inside_text_untouched(self, processor):
        text = "a ---- b"
        assert processor.process(text) == text


class TestNewlines:

    def test_normalize_newlines(self):
        assert normalize_newlines("a\r\nb\rc\n") == "a\nb\nc\n"

    def test_crlf_input_on_posix(self, processor):
        assert processor.process("a\r\n----\r\nb") == f"a\n{PAGE_BREAK}\nb"

    def test_platform_newlines_restored(self, processor, monkeypatch):
        monkeypatch.setattr(os, "linesep", "\r\n")
        assert processor.process("one\ntwo") == "one\r\ntwo"

    def test_platform_newlines_can_be_kept_as_lf(self, fixed_date, monkeypatch):
        monkeypatch.setattr(os, "linesep", "\r\n")
        processor = DirectiveProcessor(ProcessorConfig(restore_platform_newlines=False), fixed_date)
        assert processor.process("one\r\ntwo") == "one\ntwo"


class TestProcessing:

    def test_empty_input(self, processor):
        assert processor.process("") == ""

    def test_plain_markdown_unchanged(self, processor):
        text = "# Heading\n\nSome *text* with a [link](http://example.com).\n"
        assert processor.process(text) == text

    def test_idempotent(self, processor, report):
        once = processor.process(report)
        assert processor.process(once) == once

    def test_process_file(self, processor, report, tmp_path):
        source = tmp_path / "report.md"
        source.write_text(report, encoding="utf-8")
        target = tmp_path / "out" / "report.processed.md"

        result = processor.process_file(source, target)

        assert target.read_text(encoding="utf-8") == result
        assert "<svg" in result

    def test_process_file_without_output(self, processor, tmp_path):
        source = tmp_path / "note.md"
        source.write_text("Dated [Date]", encoding="utf-8")

        assert processor.process_file(str(source)) == "Dated 2025-01-15"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["note.md"]


class TestFieldDiscovery:

    @pytest.mark.parametrize("text, expected", [
        ("```signatures\n```", True),
        ("```Signatures\n```", True),
        ("text only", False),
        ("", False),
        ("```timeline\n```", False),
    ])
    def test_has_signature_blocks(self, text, expected):
        assert has_signature_blocks(text) is expected

    def test_collect_field_names(self, processor, report):
        names = processor.collect_field_names(report)
        assert len(names) == 10
        assert names[0] == "ApprovalSignatures_ProjectManager_Name"

    def test_collect_field_names_without_blocks(self, processor):
        assert processor.collect_field_names("# Nothing") == []
        assert processor.collect_field_names("") == []
