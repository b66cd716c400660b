"""
Decoder for ASCII (OpenStep-style) property lists.

Xcode writes project.pbxproj in this dialect rather than XML or binary:

    // !$*UTF8*$!
    {
        archiveVersion = 1;
        objects = {
            0A1B2C /* Release */ = {
                isa = XCBuildConfiguration;
                buildSettings = { SWIFT_VERSION = 4.0; };
            };
        };
        rootObject = 0F0E0D /* Project object */;
    }

plistlib only reads XML and binary plists, so this module covers the gap.
Dictionaries decode to dict, arrays to list, <hex> data to bytes and every
other scalar to str.
"""

from typing import Any, Dict, List

_UNQUOTED_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_$+/:.-"
)
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_OCTAL_DIGITS = frozenset("01234567")

_ESCAPES = {
    'a': '\a',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
    'v': '\v',
    '"': '"',
    "'": "'",
    '\\': '\\',
    '\n': '\n',
}


class OpenStepDecodeError(ValueError):
    """Raised when text is not a well-formed ASCII property list."""

    def __init__(self, message: str, text: str = "", pos: int = 0):
        line = text.count("\n", 0, pos) + 1
        self.pos = pos
        self.line = line
        super().__init__(f"{message} (line {line})")


class _Reader:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def error(self, message: str) -> OpenStepDecodeError:
        return OpenStepDecodeError(message, self.text, self.pos)

    def skip_ignorable(self) -> None:
        """Advance past whitespace and comments."""
        text = self.text
        length = len(text)
        while self.pos < length:
            char = text[self.pos]
            if char.isspace():
                self.pos += 1
            elif text.startswith("//", self.pos):
                end = text.find("\n", self.pos)
                self.pos = length if end == -1 else end + 1
            elif text.startswith("/*", self.pos):
                end = text.find("*/", self.pos + 2)
                if end == -1:
                    raise self.error("Unterminated comment")
                self.pos = end + 2
            else:
                return

    def peek(self) -> str:
        self.skip_ignorable()
        if self.pos >= len(self.text):
            raise self.error("Unexpected end of input")
        return self.text[self.pos]

    def expect(self, char: str) -> None:
        if self.peek() != char:
            raise self.error(f"Expected {char!r}, found {self.text[self.pos]!r}")
        self.pos += 1

    def read_value(self) -> Any:
        char = self.peek()
        if char == "{":
            return self.read_dict()
        if char == "(":
            return self.read_array()
        if char == "<":
            return self.read_data()
        return self.read_string()

    def read_dict(self) -> Dict[str, Any]:
        self.expect("{")
        result: Dict[str, Any] = {}
        while self.peek() != "}":
            key = self.read_string()
            self.expect("=")
            result[key] = self.read_value()
            self.expect(";")
        self.pos += 1
        return result

    def read_array(self) -> List[Any]:
        self.expect("(")
        result: List[Any] = []
        while self.peek() != ")":
            result.append(self.read_value())
            if self.peek() == ",":
                self.pos += 1
            elif self.peek() != ")":
                raise self.error("Expected ',' or ')' in array")
        self.pos += 1
        return result

    def read_data(self) -> bytes:
        self.expect("<")
        end = self.text.find(">", self.pos)
        if end == -1:
            raise self.error("Unterminated data block")
        digits = "".join(self.text[self.pos:end].split())
        if len(digits) % 2 or not set(digits) <= _HEX_DIGITS:
            raise self.error("Invalid hex data")
        self.pos = end + 1
        return bytes.fromhex(digits)

    def read_string(self) -> str:
        char = self.peek()
        if char in ('"', "'"):
            return self.read_quoted(char)

        start = self.pos
        text = self.text
        while self.pos < len(text) and text[self.pos] in _UNQUOTED_CHARS:
            self.pos += 1
        if self.pos == start:
            raise self.error(f"Unexpected character {char!r}")
        return text[start:self.pos]

    def read_quoted(self, quote: str) -> str:
        text = self.text
        self.pos += 1
        parts: List[str] = []
        while True:
            if self.pos >= len(text):
                raise self.error("Unterminated string")
            char = text[self.pos]
            if char == quote:
                self.pos += 1
                return "".join(parts)
            if char == "\\":
                parts.append(self.read_escape())
            else:
                parts.append(char)
                self.pos += 1

    def read_escape(self) -> str:
        text = self.text
        self.pos += 1
        if self.pos >= len(text):
            raise self.error("Unterminated escape sequence")
        char = text[self.pos]

        if char == "U":
            digits = text[self.pos + 1:self.pos + 5]
            if len(digits) != 4 or not set(digits) <= _HEX_DIGITS:
                raise self.error("Invalid \\U escape")
            self.pos += 5
            return chr(int(digits, 16))

        if char in _OCTAL_DIGITS:
            end = self.pos
            while end < len(text) and end - self.pos < 3 and text[end] in _OCTAL_DIGITS:
                end += 1
            value = int(text[self.pos:end], 8)
            self.pos = end
            return chr(value)

        self.pos += 1
        return _ESCAPES.get(char, char)


def loads(text: str) -> Any:
    """
    Decode an ASCII property list.

    Args:
        text: Property list source, e.g. the contents of project.pbxproj

    Returns:
        The decoded root value

    Raises:
        OpenStepDecodeError: On any syntax error or trailing content
    """
    reader = _Reader(text)
    value = reader.read_value()
    reader.skip_ignorable()
    if reader.pos != len(text):
        raise reader.error("Unexpected content after root value")
    return value


def looks_like_openstep(text: str) -> bool:
    """Check if text starts, after comments, with a dictionary."""
    reader = _Reader(text)
    try:
        return reader.peek() == "{"
    except OpenStepDecodeError:
        return False
