"""Tests for the CocoaPods lockfile parser."""

import pytest
from manifestengine.parsers.cocoapods import CocoaPodsParser
from manifestengine.errors import MalformedSyntaxError, MissingExpectedSectionError
from manifestengine.models import FormatKind


@pytest.fixture
def parser():
    return CocoaPodsParser()


class TestCocoaPodsParserProperties:
    def test_name(self, parser):
        assert parser.name == "cocoapods_parser"

    def test_format_kind(self, parser):
        assert parser.format_kind == FormatKind.COCOAPODS


class TestCocoaPodsParse:
    def test_plain_entries(self, parser):
        result = parser.parse("PODS:\n  - Alamofire (4.7.3)\n  - SwiftyJSON (4.0.0)\n")
        assert result.format == FormatKind.COCOAPODS
        assert result.entries == {"Alamofire": "4.7.3", "SwiftyJSON": "4.0.0"}

    def test_fixture_lockfile(self, parser, podfile_lock_text):
        result = parser.parse(podfile_lock_text)
        assert result.entries == {
            "Alamofire": "4.7.3",
            "Firebase/Core": "5.0.0",
            "FirebaseAnalytics": "5.0.0",
            "FirebaseCore": "5.0.0",
            "SwiftyJSON": "4.0.0",
        }

    def test_document_order_preserved(self, parser, podfile_lock_text):
        result = parser.parse(podfile_lock_text)
        assert list(result.entries)[0] == "Alamofire"
        assert list(result.entries)[-1] == "SwiftyJSON"

    def test_sub_dependencies_ignored(self, parser):
        text = (
            "PODS:\n"
            "  - Firebase/Core (5.0.0):\n"
            "    - FirebaseAnalytics (= 5.0.0)\n"
        )
        result = parser.parse(text)
        assert result.entries == {"Firebase/Core": "5.0.0"}

    def test_entry_without_version_dropped(self, parser):
        result = parser.parse("PODS:\n  - Alamofire\n  - SwiftyJSON (4.0.0)\n")
        assert result.entries == {"SwiftyJSON": "4.0.0"}

    def test_duplicate_last_wins(self, parser):
        result = parser.parse("PODS:\n  - Alamofire (4.7.0)\n  - Alamofire (4.7.3)\n")
        assert result.entries == {"Alamofire": "4.7.3"}

    def test_non_string_elements_skipped(self, parser):
        result = parser.parse("PODS:\n  - 42\n  - [a, b]\n  - Alamofire (4.7.3)\n")
        assert result.entries == {"Alamofire": "4.7.3"}

    def test_empty_pods_section(self, parser):
        result = parser.parse("PODS: []\n")
        assert result.entries == {}

    def test_bytes_content(self, parser):
        result = parser.parse(b"PODS:\n  - Alamofire (4.7.3)\n")
        assert result.entries == {"Alamofire": "4.7.3"}

    def test_idempotent(self, parser, podfile_lock_text):
        first = parser.parse(podfile_lock_text)
        second = parser.parse(podfile_lock_text)
        assert list(first.entries.items()) == list(second.entries.items())


class TestCocoaPodsErrors:
    def test_missing_pods_section(self, parser):
        with pytest.raises(MissingExpectedSectionError):
            parser.parse("DEPENDENCIES:\n  - Alamofire\n")

    def test_pods_not_a_sequence(self, parser):
        with pytest.raises(MissingExpectedSectionError):
            parser.parse("PODS:\n  Alamofire: 4.7.3\n")

    def test_pods_null(self, parser):
        with pytest.raises(MissingExpectedSectionError):
            parser.parse("PODS:\n")

    def test_root_not_mapping(self, parser):
        with pytest.raises(MissingExpectedSectionError):
            parser.parse("- Alamofire (4.7.3)\n")

    def test_invalid_yaml(self, parser):
        with pytest.raises(MalformedSyntaxError):
            parser.parse("PODS: [unclosed\n")

    def test_empty_document(self, parser):
        with pytest.raises(MalformedSyntaxError):
            parser.parse("")

    def test_invalid_utf8(self, parser):
        with pytest.raises(MalformedSyntaxError):
            parser.parse(b"PODS:\n  - \xff\xfe (1.0)\n")

    @pytest.mark.parametrize("content", [
        "PODS: " + "[" * 5000,
        "PODS: " + "[" * 5000 + "]" * 5000,
    ])
    def test_deeply_nested_yaml(self, parser, content):
        with pytest.raises(MalformedSyntaxError):
            parser.parse(content)


class TestSplitDescriptor:
    @pytest.mark.parametrize("descriptor,expected", [
        ("Alamofire (4.7.3)", ("Alamofire", "4.7.3")),
        ("Firebase/Core (5.0.0)", ("Firebase/Core", "5.0.0")),
        ("FirebaseCore (~> 5.0)", ("FirebaseCore", "~> 5.0")),
        ("Pod (1.0", ("Pod", "1.0")),
    ])
    def test_split(self, descriptor, expected):
        assert CocoaPodsParser.split_descriptor(descriptor) == expected

    @pytest.mark.parametrize("descriptor", ["Alamofire", "Pod ()", " (1.0)", ""])
    def test_no_version(self, descriptor):
        assert CocoaPodsParser.split_descriptor(descriptor) is None
