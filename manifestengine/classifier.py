"""
File type classification - maps a manifest file name to its FormatKind
"""

import logging

from .errors import UnrecognizedFileTypeError
from .models import FormatKind

logger = logging.getLogger(__name__)

COCOAPODS_LOCKFILE = "Podfile.lock"
CARTHAGE_LOCKFILE = "Cartfile.resolved"
XCODE_PROJECT_SUFFIX = ".pbxproj"

# Exact file names, checked before the extension rule
SUPPORTED_NAMES = {
    COCOAPODS_LOCKFILE: FormatKind.COCOAPODS,
    CARTHAGE_LOCKFILE: FormatKind.CARTHAGE,
}


def classify(name: str) -> FormatKind:
    """
    Classify a manifest by file name.

    Args:
        name: File name such as 'Podfile.lock' or 'project.pbxproj'

    Returns:
        The FormatKind for the name

    Raises:
        UnrecognizedFileTypeError: If the name matches no supported manifest
    """
    kind = SUPPORTED_NAMES.get(name)
    if kind is not None:
        return kind

    if name.endswith(XCODE_PROJECT_SUFFIX):
        return FormatKind.XCODE_PROJECT

    logger.debug(f"Unrecognized manifest name: {name!r}")
    raise UnrecognizedFileTypeError(f"Unrecognized file type: {name!r}", source=name)


def is_supported(name: str) -> bool:
    """Check if a file name would classify successfully."""
    return name in SUPPORTED_NAMES or name.endswith(XCODE_PROJECT_SUFFIX)
