"""
Base class for manifestscan parsers.

Every parser turns the raw content of one manifest into a NormalizedResult
and reports problems by raising one of the ManifestError subclasses:
- MalformedSyntaxError: the base format (YAML, text, plist) did not decode
- MissingExpectedSectionError: decoded, but a required key/shape is missing

Parsers hold no state, so one instance may be reused or discarded freely.
"""

from abc import ABC, abstractmethod
from typing import Dict, Union
import logging

from ..errors import ManifestError, MalformedSyntaxError
from ..models import FormatKind, NormalizedResult, ParseOutcome

logger = logging.getLogger(__name__)

Content = Union[str, bytes]


class BaseParser(ABC):
    """
    Abstract base class for all manifest parsers.

    All parsers must implement:
    - name: Unique identifier for the parser
    - format_kind: The FormatKind this parser produces
    - parse: Content -> NormalizedResult
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this parser."""
        pass

    @property
    @abstractmethod
    def format_kind(self) -> FormatKind:
        """Format of the manifests this parser reads."""
        pass

    @abstractmethod
    def parse(self, content: Content) -> NormalizedResult:
        """
        Parse a single manifest.

        Args:
            content: Raw manifest text or bytes

        Returns:
            NormalizedResult tagged with this parser's format

        Raises:
            MalformedSyntaxError: Content is not valid in the base format
            MissingExpectedSectionError: A required section is missing
        """
        pass

    def parse_outcome(self, content: Content, source: str = "") -> ParseOutcome:
        """
        Parse a manifest, returning a ParseFailure instead of raising.

        Only ManifestError is converted; anything else is a bug and propagates.
        """
        try:
            result = self.parse(content)
        except ManifestError as e:
            logger.debug(f"[{self.name}] {source or '<input>'}: {e.message}")
            return e.to_failure(source or e.source)
        result.source = source
        return result

    def _decode_text(self, content: Content) -> str:
        """Return content as text, decoding bytes as UTF-8."""
        if isinstance(content, str):
            return content
        try:
            return bytes(content).decode('utf-8')
        except UnicodeDecodeError as e:
            raise MalformedSyntaxError(f"Content is not valid UTF-8: {e}") from e

    def _result(self, entries: Dict[str, str]) -> NormalizedResult:
        return NormalizedResult(format=self.format_kind, entries=entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(format={self.format_kind.value})"
