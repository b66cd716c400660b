"""
CocoaPods lockfile parser.

Reads the PODS section of a Podfile.lock:

    PODS:
      - Alamofire (4.7.3)
      - Firebase/Core (5.0.0):
        - FirebaseAnalytics (= 5.0.0)
      - FirebaseAnalytics (5.0.0)

Each entry is either a plain descriptor string or a single-key mapping whose
key is the descriptor and whose value lists sub-dependencies. Only the
top-level descriptors are kept.
"""

from typing import Dict, Iterator, List, Optional, Tuple
import logging

import yaml

from ..errors import MalformedSyntaxError, MissingExpectedSectionError
from ..models import FormatKind, NormalizedResult
from ..values import Node, NodeKind
from .base import BaseParser, Content
from .registry import ParserRegistry

logger = logging.getLogger(__name__)


@ParserRegistry.register(FormatKind.COCOAPODS)
class CocoaPodsParser(BaseParser):
    """Extracts pod name -> version pairs from Podfile.lock"""

    SECTION_KEY = "PODS"

    @property
    def name(self) -> str:
        return "cocoapods_parser"

    @property
    def format_kind(self) -> FormatKind:
        return FormatKind.COCOAPODS

    def parse(self, content: Content) -> NormalizedResult:
        document = self._load_yaml(self._decode_text(content))

        pods = document.get(self.SECTION_KEY)
        if pods is None:
            raise MissingExpectedSectionError(f"'{self.SECTION_KEY}' section not found")
        items = pods.as_list()
        if items is None:
            raise MissingExpectedSectionError(
                f"'{self.SECTION_KEY}' must be a sequence, got {pods.kind.value}"
            )

        entries: Dict[str, str] = {}
        for descriptor in self._descriptors(items):
            pair = self.split_descriptor(descriptor)
            if pair is None:
                logger.debug(f"Skipping pod without version: {descriptor!r}")
                continue
            pod_name, version = pair
            entries[pod_name] = version

        logger.debug(f"Parsed {len(entries)} pods from {len(items)} entries")
        return self._result(entries)

    def _load_yaml(self, text: str) -> Node:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise MalformedSyntaxError(f"Invalid YAML: {e}") from e
        except RecursionError as e:
            raise MalformedSyntaxError("YAML document is nested too deeply") from e

        if data is None:
            raise MalformedSyntaxError("Empty YAML document")

        document = Node(data)
        if not document.is_kind(NodeKind.MAP):
            raise MissingExpectedSectionError(
                f"Lockfile root must be a mapping, got {document.kind.value}"
            )
        return document

    def _descriptors(self, items: List[Node]) -> Iterator[str]:
        """Yield the top-level descriptor string of each PODS element."""
        for item in items:
            if item.is_kind(NodeKind.STRING):
                yield item.as_string()
            elif item.is_kind(NodeKind.MAP):
                # {"Name (1.0)": [sub-dependencies]}
                for key, _ in item.items():
                    if isinstance(key, str):
                        yield key
                    break

    @staticmethod
    def split_descriptor(descriptor: str) -> Optional[Tuple[str, str]]:
        """
        Split 'Name (version)' into (name, version).

        Returns None when there is no version token to record.
        """
        pod_name, _, remainder = descriptor.partition(" ")
        if not pod_name or not remainder:
            return None

        version = remainder
        if version.startswith("("):
            version = version[1:]
        if version.endswith(")"):
            version = version[:-1]

        if not version:
            return None
        return pod_name, version
