"""
manifestscan - Dependency manifest normalization for iOS/macOS projects.

Reads the manifests written by three Apple-platform build tools and reduces
each to a flat name -> value mapping:

Supported Manifests:
    Podfile.lock        CocoaPods lockfile (YAML), pod -> version
    Cartfile.resolved   Carthage lockfile (text), repository -> version
    *.pbxproj           Xcode project (property list), swift_version

Quick Start:
    >>> from manifestengine import create_analyzer, ManifestInput
    >>> analyzer = create_analyzer()
    >>> results = analyzer.analyze([ManifestInput("Podfile.lock", text)])
    >>> print(results[0].entries)

Failures are reported as ManifestError subclasses, one per FailureKind.
"""

__version__ = "0.1.0"
__author__ = "manifestscan"

from .models import (
    FormatKind,
    FailureKind,
    ManifestInput,
    NormalizedResult,
    ParseFailure,
    ParseOutcome,
)
from .errors import (
    ManifestError,
    UnrecognizedFileTypeError,
    MalformedSyntaxError,
    MissingExpectedSectionError,
)
from .classifier import classify, is_supported
from .analyzer import ManifestAnalyzer, create_analyzer
from .parsers import (
    BaseParser,
    ParserRegistry,
    get_parser,
    CocoaPodsParser,
    CarthageParser,
    XcodeProjectParser,
)

__all__ = [
    # Core
    'ManifestAnalyzer',
    'create_analyzer',
    'classify',
    'is_supported',
    # Models
    'FormatKind',
    'FailureKind',
    'ManifestInput',
    'NormalizedResult',
    'ParseFailure',
    'ParseOutcome',
    # Errors
    'ManifestError',
    'UnrecognizedFileTypeError',
    'MalformedSyntaxError',
    'MissingExpectedSectionError',
    # Parsers
    'BaseParser',
    'ParserRegistry',
    'get_parser',
    'CocoaPodsParser',
    'CarthageParser',
    'XcodeProjectParser',
]
