"""
Parser Registry for manifestscan.

Maps each FormatKind to the parser class that reads it. Parsers register
themselves with a class decorator when their module is imported; lookups
return a fresh instance every time.
"""

from typing import Callable, Dict, List, Type
import logging

from ..models import FormatKind
from .base import BaseParser

logger = logging.getLogger(__name__)


class ParserRegistry:
    """
    Central registry for manifest parsers.

    Provides:
    - Decorator-based registration
    - FormatKind-based parser lookup
    """

    _parsers: Dict[FormatKind, Type[BaseParser]] = {}

    @classmethod
    def register(cls, kind: FormatKind) -> Callable:
        """
        Decorator to register a parser.

        Usage:
            @ParserRegistry.register(FormatKind.CARTHAGE)
            class CarthageParser(BaseParser):
                ...

        Args:
            kind: Format handled by the decorated parser

        Returns:
            Decorator function
        """
        def decorator(parser_class: Type[BaseParser]) -> Type[BaseParser]:
            cls._parsers[kind] = parser_class
            logger.debug(f"Registered parser: {parser_class.__name__} for {kind.value}")
            return parser_class
        return decorator

    @classmethod
    def get_parser(cls, kind: FormatKind) -> BaseParser:
        """
        Get a parser instance for the given format.

        Raises:
            KeyError: If no parser is registered for ``kind``
        """
        parser_class = cls._parsers.get(kind)
        if parser_class is None:
            raise KeyError(f"No parser registered for {kind.value}")
        return parser_class()

    @classmethod
    def get_supported_formats(cls) -> List[FormatKind]:
        """Formats with a registered parser, in declaration order."""
        return [kind for kind in FormatKind if kind in cls._parsers]

    @classmethod
    def stats(cls) -> Dict[str, str]:
        """Registered parser class name per format."""
        return {kind.value: parser.__name__ for kind, parser in cls._parsers.items()}


def get_parser(kind: FormatKind) -> BaseParser:
    """Get a parser for the given format."""
    return ParserRegistry.get_parser(kind)
