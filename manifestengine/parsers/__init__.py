"""
manifestscan Parsers Package

One parser per supported manifest format. Importing this package registers
every parser with the ParserRegistry.

Components:
- base: Abstract base class for all parsers
- registry: FormatKind -> parser dispatch
- cocoapods: Podfile.lock (YAML)
- carthage: Cartfile.resolved (line text)
- xcodeproj: project.pbxproj (property list)
- openstep: ASCII property-list decoder used by the Xcode parser
"""

from .base import BaseParser
from .registry import ParserRegistry, get_parser
from .cocoapods import CocoaPodsParser
from .carthage import CarthageParser
from .xcodeproj import XcodeProjectParser

__all__ = [
    'BaseParser',
    'ParserRegistry',
    'get_parser',
    'CocoaPodsParser',
    'CarthageParser',
    'XcodeProjectParser',
]
