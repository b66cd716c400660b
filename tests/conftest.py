"""Shared test fixtures for manifestscan test suite."""

import sys
import plistlib
import pytest
from pathlib import Path

# Ensure manifestengine is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from manifestengine.models import ManifestInput

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def build_project(swift_versions=("4.0",), root_object="PROJECT", **overrides):
    """Build a minimal pbxproj-shaped dictionary.

    One XCBuildConfiguration is created per entry in ``swift_versions``, in
    order; ``None`` leaves SWIFT_VERSION out of that configuration.
    """
    objects = {}
    config_ids = []
    for index, version in enumerate(swift_versions):
        config_id = f"CONFIG{index}"
        settings = {"PRODUCT_NAME": "Sample"}
        if version is not None:
            settings["SWIFT_VERSION"] = version
        objects[config_id] = {
            "isa": "XCBuildConfiguration",
            "buildSettings": settings,
            "name": f"Config{index}",
        }
        config_ids.append(config_id)

    objects["CONFIGLIST"] = {
        "isa": "XCConfigurationList",
        "buildConfigurations": config_ids,
    }
    objects["PROJECT"] = {
        "isa": "PBXProject",
        "buildConfigurationList": "CONFIGLIST",
    }

    project = {
        "archiveVersion": "1",
        "objectVersion": "50",
        "objects": objects,
        "rootObject": root_object,
    }
    project.update(overrides)
    return project


@pytest.fixture
def fixtures_dir():
    """Path to test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def podfile_lock_text():
    """A realistic Podfile.lock with nested sub-dependencies."""
    return (FIXTURES_DIR / "Podfile.lock").read_text(encoding="utf-8")


@pytest.fixture
def cartfile_resolved_text():
    """A Cartfile.resolved with CRLF line endings."""
    return (FIXTURES_DIR / "Cartfile.resolved").read_bytes().decode("utf-8")


@pytest.fixture
def pbxproj_text():
    """An ASCII (OpenStep) project.pbxproj as written by Xcode."""
    return (FIXTURES_DIR / "project.pbxproj").read_text(encoding="utf-8")


@pytest.fixture
def xml_project_bytes():
    """An XML plist project whose only configuration has SWIFT_VERSION 4.0."""
    return plistlib.dumps(build_project(("4.0",)), fmt=plistlib.FMT_XML)


@pytest.fixture
def binary_project_bytes():
    """A binary plist project with Debug (3.0) and Release (4.2) configurations."""
    return plistlib.dumps(build_project(("3.0", "4.2")), fmt=plistlib.FMT_BINARY)


@pytest.fixture
def valid_inputs(podfile_lock_text, cartfile_resolved_text, xml_project_bytes):
    """One valid input per supported format."""
    return [
        ManifestInput(name="Podfile.lock", content=podfile_lock_text),
        ManifestInput(name="Cartfile.resolved", content=cartfile_resolved_text),
        ManifestInput(name="project.pbxproj", content=xml_project_bytes),
    ]
