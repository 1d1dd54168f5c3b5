"""Custom exceptions for MarkQuill."""

from typing import Optional


class MarkQuillError(Exception):
    """Base exception for MarkQuill errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class DirectiveError(MarkQuillError):
    """Exception raised while expanding a fenced directive block."""

    pass


class TimelineParseError(DirectiveError):
    """Exception raised for a timeline token that cannot be interpreted."""

    pass


class SignatureTableError(DirectiveError):
    """Exception raised for a malformed signature table."""

    pass


class ConfigurationError(MarkQuillError):
    """Exception raised for invalid configuration values."""

    pass
