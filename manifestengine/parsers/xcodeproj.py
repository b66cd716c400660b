"""
Xcode project parser.

Decodes a project.pbxproj property list and follows the object graph from
the root project to its last build configuration, which by Xcode's
convention is Release:

    rootObject -> objects[rootObject].buildConfigurationList
               -> objects[list].buildConfigurations[-1]
               -> objects[config].buildSettings.SWIFT_VERSION

The last-entry rule is positional, not a match on the configuration name.
"""

from typing import Any
from xml.parsers.expat import ExpatError
import io
import logging
import plistlib

from ..errors import MalformedSyntaxError, MissingExpectedSectionError
from ..models import FormatKind, NormalizedResult
from ..values import Node, NodeKind
from .base import BaseParser, Content
from .openstep import OpenStepDecodeError, looks_like_openstep, loads as loads_openstep
from .registry import ParserRegistry

logger = logging.getLogger(__name__)


@ParserRegistry.register(FormatKind.XCODE_PROJECT)
class XcodeProjectParser(BaseParser):
    """Extracts the release Swift version from an Xcode project file"""

    SETTING_KEY = "SWIFT_VERSION"
    ENTRY_KEY = "swift_version"

    @property
    def name(self) -> str:
        return "xcodeproj_parser"

    @property
    def format_kind(self) -> FormatKind:
        return FormatKind.XCODE_PROJECT

    def parse(self, content: Content) -> NormalizedResult:
        data = content.encode('utf-8') if isinstance(content, str) else bytes(content)
        project = Node(self._load_plist(data))

        if not project.is_kind(NodeKind.MAP):
            raise MissingExpectedSectionError(
                f"Project root must be a dictionary, got {project.kind.value}"
            )

        root_id = self._require_string(project, "rootObject", "project root")
        objects = project.get("objects")
        if objects is None or not objects.is_kind(NodeKind.MAP):
            raise MissingExpectedSectionError("'objects' dictionary not found")

        root = self._lookup(objects, root_id, "root project object")
        list_id = self._require_string(root, "buildConfigurationList", "root project object")
        logger.debug(f"Root object {root_id} uses configuration list {list_id}")

        configuration_list = self._lookup(objects, list_id, "build configuration list")
        configurations = configuration_list.get("buildConfigurations")
        ids = configurations.as_list() if configurations is not None else None
        if ids is None:
            raise MissingExpectedSectionError(
                "'buildConfigurations' array not found in build configuration list"
            )
        if not ids:
            raise MissingExpectedSectionError("'buildConfigurations' is empty")

        release_id = ids[-1].as_string()
        if release_id is None:
            raise MissingExpectedSectionError(
                "Build configuration identifier must be a string"
            )
        logger.debug(f"Using last build configuration {release_id}")

        configuration = self._lookup(objects, release_id, "build configuration")
        settings = configuration.get("buildSettings")
        if settings is None or not settings.is_kind(NodeKind.MAP):
            raise MissingExpectedSectionError(
                f"'buildSettings' dictionary not found in configuration {release_id}"
            )

        version = self._require_string(settings, self.SETTING_KEY, "build settings")
        return self._result({self.ENTRY_KEY: version})

    def _load_plist(self, data: bytes) -> Any:
        """Decode XML, binary or ASCII property list bytes."""
        with io.BytesIO(data) as buffer:
            try:
                return plistlib.load(buffer)
            except (plistlib.InvalidFileException, ExpatError, ValueError,
                    OverflowError, AttributeError, TypeError, RecursionError) as e:
                plist_error: Exception = e

        try:
            text = data.decode('utf-8')
        except UnicodeDecodeError:
            raise MalformedSyntaxError(
                f"Invalid property list: {plist_error}"
            ) from plist_error

        if not looks_like_openstep(text):
            raise MalformedSyntaxError(
                f"Invalid property list: {plist_error}"
            ) from plist_error

        try:
            return loads_openstep(text)
        except OpenStepDecodeError as e:
            raise MalformedSyntaxError(f"Invalid ASCII property list: {e}") from e
        except RecursionError as e:
            raise MalformedSyntaxError("ASCII property list is nested too deeply") from e

    @staticmethod
    def _lookup(objects: Node, object_id: str, what: str) -> Node:
        node = objects.get(object_id)
        if node is None or not node.is_kind(NodeKind.MAP):
            raise MissingExpectedSectionError(f"{what} {object_id!r} not found in objects")
        return node

    @staticmethod
    def _require_string(node: Node, key: str, where: str) -> str:
        child = node.get(key)
        value = child.as_string() if child is not None else None
        if value is None:
            raise MissingExpectedSectionError(f"'{key}' string not found in {where}")
        return value
