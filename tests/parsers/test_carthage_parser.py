"""Tests for the Carthage resolved-lockfile parser."""

import pytest
from manifestengine.parsers.carthage import CarthageParser
from manifestengine.errors import MalformedSyntaxError
from manifestengine.models import FormatKind


@pytest.fixture
def parser():
    return CarthageParser()


class TestCarthageParserProperties:
    def test_name(self, parser):
        assert parser.name == "carthage_parser"

    def test_format_kind(self, parser):
        assert parser.format_kind == FormatKind.CARTHAGE


class TestCarthageParse:
    def test_quotes_stripped(self, parser):
        text = 'github "Alamofire/Alamofire" "4.7.3"\ngithub "SwiftyJSON/SwiftyJSON" "4.0.0"\n'
        result = parser.parse(text)
        assert result.format == FormatKind.CARTHAGE
        assert result.entries == {
            "Alamofire/Alamofire": "4.7.3",
            "SwiftyJSON/SwiftyJSON": "4.0.0",
        }

    def test_fixture_with_crlf(self, parser, cartfile_resolved_text):
        result = parser.parse(cartfile_resolved_text)
        assert result.entries == {
            "https://dl.google.com/dl/firebase/ios/carthage/FirebaseAnalyticsBinary.json": "5.0.0",
            "Alamofire/Alamofire": "4.7.3",
            "SwiftyJSON/SwiftyJSON": "4.0.0",
            "https://example.com/Internal.git": "0a1b2c3d4e5f",
        }
        for key, value in result.entries.items():
            assert "\r" not in key and "\r" not in value

    def test_short_line_dropped(self, parser):
        result = parser.parse('github\ngithub "Alamofire/Alamofire" "4.7.3"\n')
        assert result.entries == {"Alamofire/Alamofire": "4.7.3"}

    def test_two_token_line_dropped(self, parser):
        result = parser.parse('github "Alamofire/Alamofire"\n')
        assert result.entries == {}

    def test_extra_tokens_ignored(self, parser):
        result = parser.parse('github "Alamofire/Alamofire" "4.7.3" # pinned\n')
        assert result.entries == {"Alamofire/Alamofire": "4.7.3"}

    def test_empty_input(self, parser):
        assert parser.parse("").entries == {}

    def test_blank_lines_only(self, parser):
        assert parser.parse("\n\n\r\n").entries == {}

    def test_duplicate_last_wins(self, parser):
        text = 'github "A/A" "1.0"\ngithub "A/A" "2.0"\n'
        assert parser.parse(text).entries == {"A/A": "2.0"}

    def test_no_trailing_newline(self, parser):
        assert parser.parse('github "A/A" "1.0"').entries == {"A/A": "1.0"}

    def test_bytes_content(self, parser):
        assert parser.parse(b'github "A/A" "1.0"\n').entries == {"A/A": "1.0"}

    def test_idempotent(self, parser, cartfile_resolved_text):
        first = parser.parse(cartfile_resolved_text)
        second = parser.parse(cartfile_resolved_text)
        assert list(first.entries.items()) == list(second.entries.items())


class TestCarthageErrors:
    def test_invalid_utf8(self, parser):
        with pytest.raises(MalformedSyntaxError):
            parser.parse(b'github "\xff" "1.0"\n')
