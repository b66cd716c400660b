"""
Exceptions raised by the classifier and the manifest parsers.

Every failure maps to exactly one FailureKind so callers can render it
without inspecting the underlying decoder error.
"""

from typing import Optional

from .models import FailureKind, ParseFailure


class ManifestError(Exception):
    """Base exception for manifest classification and parse errors."""

    kind: FailureKind = FailureKind.MALFORMED_SYNTAX

    def __init__(self, message: str, source: str = ""):
        self.message = message
        self.source = source
        super().__init__(f"[{source}] {message}" if source else message)

    def with_source(self, source: str) -> "ManifestError":
        """Attach the input name if the error was raised without one."""
        if not self.source:
            self.source = source
            self.args = (f"[{source}] {self.message}",)
        return self

    def to_failure(self, source: Optional[str] = None) -> ParseFailure:
        return ParseFailure(
            kind=self.kind,
            message=self.message,
            source=source if source is not None else self.source,
        )


class UnrecognizedFileTypeError(ManifestError):
    """File name matches none of the supported manifest names."""
    kind = FailureKind.UNRECOGNIZED_FILE_TYPE


class MalformedSyntaxError(ManifestError):
    """Content could not be decoded as YAML, text or a property list."""
    kind = FailureKind.MALFORMED_SYNTAX


class MissingExpectedSectionError(ManifestError):
    """Content decoded but a required key is absent or has the wrong type."""
    kind = FailureKind.MISSING_EXPECTED_SECTION
