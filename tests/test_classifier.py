"""Tests for manifestengine.classifier"""

import pytest
from manifestengine.classifier import classify, is_supported
from manifestengine.errors import UnrecognizedFileTypeError
from manifestengine.models import FailureKind, FormatKind


class TestClassify:
    def test_podfile_lock(self):
        assert classify("Podfile.lock") == FormatKind.COCOAPODS

    def test_cartfile_resolved(self):
        assert classify("Cartfile.resolved") == FormatKind.CARTHAGE

    @pytest.mark.parametrize("name", [
        "project.pbxproj",
        "Sample.pbxproj",
        "App.xcodeproj/project.pbxproj",
        ".pbxproj",
    ])
    def test_pbxproj_extension(self, name):
        assert classify(name) == FormatKind.XCODE_PROJECT

    @pytest.mark.parametrize("name", [
        "Podfile",
        "Cartfile",
        "podfile.lock",
        "Podfile.lock.bak",
        "Pods/Podfile.lock",
        "cartfile.resolved",
        "project.PBXPROJ",
        "project.pbxproj.orig",
        "pbxproj",
        "Package.resolved",
        "",
    ])
    def test_unrecognized(self, name):
        with pytest.raises(UnrecognizedFileTypeError) as excinfo:
            classify(name)
        assert excinfo.value.kind == FailureKind.UNRECOGNIZED_FILE_TYPE
        assert excinfo.value.source == name


class TestIsSupported:
    def test_matches_classify(self):
        for name in ("Podfile.lock", "Cartfile.resolved", "a.pbxproj"):
            assert is_supported(name)
        for name in ("Podfile", "a.xcodeproj", "README.md"):
            assert not is_supported(name)
