"""
Tests for configuration dataclasses and exceptions.
"""

import dataclasses

import pytest

from markquill.config import ProcessorConfig, SignatureConfig, TimelineConfig
from markquill.exceptions import (
    ConfigurationError,
    DirectiveError,
    MarkQuillError,
    SignatureTableError,
    TimelineParseError,
)


class TestTimelineConfig:
    """Timeline layout configuration."""

    def test_defaults(self):
        config = TimelineConfig()
        assert config.width == 900
        assert config.label_width == 200
        assert config.timeline_width == 680
        assert config.ignored_directives == ("dateformat", "axisformat")
        assert config.truncate_labels is False

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            TimelineConfig().width = 100

    def test_no_room_for_timeline(self):
        with pytest.raises(ConfigurationError) as exc_info:
            TimelineConfig(width=300, label_width=290, right_margin=20)
        assert "label_width=290" in str(exc_info.value)

    def test_non_positive_dimensions(self):
        with pytest.raises(ConfigurationError):
            TimelineConfig(row_height=0)


class TestProcessorConfig:
    """Processor configuration."""

    def test_defaults(self):
        config = ProcessorConfig()
        assert config.date_placeholder == "[Date]"
        assert config.date_format == "%x"
        assert config.page_break_marker == '<div style="page-break-after: always;"></div>\n'
        assert isinstance(config.timeline, TimelineConfig)
        assert isinstance(config.signatures, SignatureConfig)
        assert config.signatures.untitled_section == "Unknown"

    def test_nested_configs_are_independent(self):
        assert ProcessorConfig().timeline is not ProcessorConfig().timeline


class TestExceptions:
    """Exception hierarchy."""

    def test_hierarchy(self):
        assert issubclass(TimelineParseError, DirectiveError)
        assert issubclass(SignatureTableError, DirectiveError)
        assert issubclass(DirectiveError, MarkQuillError)
        assert issubclass(ConfigurationError, MarkQuillError)

    def test_str_with_details(self):
        error = TimelineParseError("Unrecognized date", details="someday")
        assert str(error) == "Unrecognized date: someday"
        assert error.message == "Unrecognized date"

    def test_str_without_details(self):
        assert str(SignatureTableError("bad table")) == "bad table"
