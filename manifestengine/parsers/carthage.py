"""
Carthage resolved-lockfile parser.

Each line of a Cartfile.resolved names one dependency:

    github "Alamofire/Alamofire" "4.7.3"
    binary "https://example.com/Framework.json" "1.2.0"
    git "https://example.com/repo.git" "0a1b2c3"

Lines that do not have at least three tokens are skipped.
"""

from typing import Dict
import logging

from ..models import FormatKind, NormalizedResult
from .base import BaseParser, Content
from .registry import ParserRegistry

logger = logging.getLogger(__name__)


@ParserRegistry.register(FormatKind.CARTHAGE)
class CarthageParser(BaseParser):
    """Extracts dependency -> version pairs from Cartfile.resolved"""

    @property
    def name(self) -> str:
        return "carthage_parser"

    @property
    def format_kind(self) -> FormatKind:
        return FormatKind.CARTHAGE

    def parse(self, content: Content) -> NormalizedResult:
        text = self._decode_text(content)

        entries: Dict[str, str] = {}
        for line in text.split("\n"):
            if not line:
                continue

            words = line.split(" ")
            if len(words) < 3:
                logger.debug(f"Skipping short line: {line!r}")
                continue

            dependency = self._clean(words[1])
            version = self._clean(words[2])
            if not dependency:
                continue
            entries[dependency] = version

        logger.debug(f"Parsed {len(entries)} Carthage dependencies")
        return self._result(entries)

    @staticmethod
    def _clean(token: str) -> str:
        return token.replace("\r", "").strip('"')
