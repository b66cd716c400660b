"""
Data models for manifestscan.

This module defines the core data structures passed between the classifier,
the parsers and the analyzer:

- FormatKind/FailureKind: Enums for manifest format and failure classification
- ManifestInput: A named manifest payload handed to the analyzer
- NormalizedResult: name -> value mapping produced by a parser
- ParseFailure: Per-input failure record used by lenient analysis
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Union


class FormatKind(Enum):
    COCOAPODS = "cocoapods"
    CARTHAGE = "carthage"
    XCODE_PROJECT = "xcproject"

    @property
    def label(self) -> str:
        labels = {
            FormatKind.COCOAPODS: "CocoaPods",
            FormatKind.CARTHAGE: "Carthage",
            FormatKind.XCODE_PROJECT: "Xcode project",
        }
        return labels[self]


class FailureKind(Enum):
    UNRECOGNIZED_FILE_TYPE = "unrecognized_file_type"
    MALFORMED_SYNTAX = "malformed_syntax"
    MISSING_EXPECTED_SECTION = "missing_expected_section"


@dataclass
class ManifestInput:
    """A manifest file name and its raw content"""
    name: str
    content: Union[str, bytes]


@dataclass
class NormalizedResult:
    """Normalized name -> value entries extracted from one manifest"""
    format: FormatKind
    entries: Dict[str, str] = field(default_factory=dict)
    source: str = ""

    def __len__(self) -> int:
        return len(self.entries)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary"""
        return {
            'file': self.source,
            'format': self.format.value,
            'entries': dict(self.entries),
        }


@dataclass
class ParseFailure:
    """A manifest that could not be classified or parsed"""
    kind: FailureKind
    message: str = ""
    source: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert failure to dictionary"""
        return {
            'file': self.source,
            'error': self.kind.value,
            'message': self.message,
        }


ParseOutcome = Union[NormalizedResult, ParseFailure]
