"""
Lexer/Tokenizer for CTO model files.

Converts raw model text into a list of tokens with source location tracking.
Whitespace and comments are insignificant and never produce tokens.
"""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import ErrorKind, make_parse_error


class TokenType(Enum):
    """Token types in the CTO grammar."""

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"
    DATETIME = "DATETIME"
    REGEX_LITERAL = "REGEX_LITERAL"
    VERSION = "VERSION"

    # Keywords
    NAMESPACE = "namespace"
    CONCEPT = "concept"
    PROPERTY = "o"
    OPTIONAL = "optional"
    DEFAULT = "default"
    REGEX = "regex"
    LENGTH = "length"
    RANGE = "range"
    TRUE = "true"
    FALSE = "false"

    # Punctuation
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    COMMA = ","
    DOT = "."
    EQUALS = "="
    AT = "@"

    EOF = "EOF"


KEYWORDS = {
    "namespace",
    "concept",
    "o",
    "optional",
    "default",
    "regex",
    "length",
    "range",
    "true",
    "false",
}

PUNCTUATION = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "=": TokenType.EQUALS,
}

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")
SIGNED_INFINITY_RE = re.compile(r"[+-](?:infinity|inf)(?![A-Za-z0-9_])", re.IGNORECASE)
DATETIME_RE = re.compile(
    r"\d{4}-(?:0\d|1[0-2])-(?:0[1-9]|[12]\d|3[01])"
    r"(?:T(?:[01]\d|2[0-3]):[0-5]\d:[0-5]\d(?:\.\d{1,3})?"
    r"(?:Z|[+-](?:[01]\d|2[0-3]):[0-5]\d))?"
    r"(?![A-Za-z0-9_:.])"
)
VERSION_CHARS_RE = re.compile(r"[A-Za-z0-9.\-]*")
UNICODE_ESCAPE_RE = re.compile(r"u\{([0-9A-Fa-f]{1,6})\}")
REGEX_FLAGS = set("dgimsuvy")

SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "\\": "\\",
    "/": "/",
    '"': '"',
    "'": "'",
}


@dataclass(frozen=True)
class Token:
    """
    A single token in the model source.

    Attributes:
        type: Type of token
        value: Decoded value of the token (raw text for numbers and versions)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Character offset of the first character (0-indexed)
        end: Character offset just past the last character
    """

    type: TokenType
    value: str
    line: int
    column: int
    offset: int
    end: int

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.value!r}, {self.line}:{self.column})"


class Lexer:
    """
    Lexer for CTO model text.
    """

    def __init__(self, text: str, file: Path | None = None):
        """
        Initialize lexer.

        Args:
            text: Source text to tokenize
            file: Source file path (for error reporting)
        """
        self.text = text
        self.file = file
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self, count: int = 1) -> None:
        """Move forward ``count`` characters, updating line/column."""
        for _ in range(count):
            if self.pos >= len(self.text):
                return
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def error(self, message: str, kind: ErrorKind, offset: int | None = None):
        return make_parse_error(
            message,
            kind,
            self.text,
            self.pos if offset is None else offset,
            self.file,
        )

    def skip_whitespace_and_comments(self) -> None:
        """Skip whitespace, line comments and block comments."""
        while True:
            ch = self.current_char()
            if ch is not None and ch in " \t\r\n":
                self.advance()
            elif ch == "/" and self.peek_char() == "/":
                while self.current_char() not in (None, "\n"):
                    self.advance()
            elif ch == "/" and self.peek_char() == "*":
                start = self.pos
                self.advance(2)
                while not (self.current_char() == "*" and self.peek_char() == "/"):
                    if self.current_char() is None:
                        raise self.error(
                            "Unterminated block comment",
                            ErrorKind.UNEXPECTED_END_OF_INPUT,
                            start,
                        )
                    self.advance()
                self.advance(2)
            else:
                return

    def read_string(self) -> str:
        """Read a single- or double-quoted string, decoding escapes."""
        start = self.pos
        quote = self.current_char()
        self.advance()  # skip opening quote

        chars = []
        while True:
            current = self.current_char()
            if current is None:
                raise self.error(
                    "Unterminated string literal",
                    ErrorKind.UNEXPECTED_END_OF_INPUT,
                    start,
                )
            if current == quote:
                break

            if current == "\\":
                escape_start = self.pos
                self.advance()
                escape_char = self.current_char()
                if escape_char is None:
                    raise self.error(
                        "Unterminated string literal",
                        ErrorKind.UNEXPECTED_END_OF_INPUT,
                        start,
                    )
                if escape_char in SIMPLE_ESCAPES:
                    chars.append(SIMPLE_ESCAPES[escape_char])
                    self.advance()
                elif escape_char == "u":
                    chars.append(self.read_unicode_escape(escape_start))
                elif escape_char.isspace():
                    # Escaped whitespace is a line continuation
                    while (c := self.current_char()) is not None and c.isspace():
                        self.advance()
                else:
                    raise self.error(
                        f"Invalid escape sequence: \\{escape_char}",
                        ErrorKind.UNEXPECTED_TOKEN,
                        escape_start,
                    )
            else:
                chars.append(current)
                self.advance()

        self.advance()  # skip closing quote
        return "".join(chars)

    def read_unicode_escape(self, escape_start: int) -> str:
        """Read ``u{XXXX}`` after a backslash (1-6 hex digits)."""
        match = UNICODE_ESCAPE_RE.match(self.text, self.pos)
        if not match:
            raise self.error(
                "Invalid unicode escape, expected \\u{XXXX}",
                ErrorKind.UNEXPECTED_TOKEN,
                escape_start,
            )
        codepoint = int(match.group(1), 16)
        if codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
            raise self.error(
                f"Invalid unicode code point: {match.group(1)}",
                ErrorKind.UNEXPECTED_TOKEN,
                escape_start,
            )
        self.advance(match.end() - self.pos)
        return chr(codepoint)

    def read_regex(self) -> str:
        """
        Read a ``/pattern/flags`` literal.

        Returns:
            The literal text without the leading slash, i.e. ``pattern/flags``.
            Escapes inside the pattern are kept verbatim.
        """
        start = self.pos
        self.advance()  # skip opening slash

        chars = []
        while True:
            current = self.current_char()
            if current is None or current == "\n":
                raise self.error(
                    "Unterminated regular expression literal",
                    ErrorKind.UNEXPECTED_END_OF_INPUT
                    if current is None
                    else ErrorKind.UNEXPECTED_TOKEN,
                    start,
                )
            if current == "/":
                break
            if current == "\\" and self.peek_char() not in (None, "\n"):
                chars.append(current)
                self.advance()
                current = self.current_char()
            chars.append(current)
            self.advance()

        self.advance()  # skip closing slash
        flags = []
        while (c := self.current_char()) is not None and c in REGEX_FLAGS:
            flags.append(c)
            self.advance()
        if (c := self.current_char()) is not None and (c.isalnum() or c == "_"):
            raise self.error(
                f"Invalid regular expression flag: {c!r}",
                ErrorKind.UNEXPECTED_TOKEN,
            )
        return "".join(chars) + "/" + "".join(flags)

    def read_number(self) -> str:
        """Read a number literal (optionally signed, decimal or exponent form)."""
        match = SIGNED_INFINITY_RE.match(self.text, self.pos) or NUMBER_RE.match(
            self.text, self.pos
        )
        if not match:
            raise self.error(
                f"Unexpected character: {self.current_char()!r}",
                ErrorKind.UNEXPECTED_TOKEN,
            )
        value = match.group(0)
        self.advance(len(value))
        return value

    def read_datetime(self) -> str | None:
        """Read a date-time literal if one starts at the current position."""
        match = DATETIME_RE.match(self.text, self.pos)
        if not match:
            return None
        value = match.group(0)
        self.advance(len(value))
        return value

    def read_version(self) -> str:
        """Read the raw version text directly following '@'."""
        match = VERSION_CHARS_RE.match(self.text, self.pos)
        value = match.group(0) if match else ""
        self.advance(len(value))
        return value

    def read_identifier(self) -> str:
        """Read an identifier or keyword."""
        chars = []
        current = self.current_char()
        while current and (current.isalnum() or current == "_"):
            chars.append(current)
            self.advance()
            current = self.current_char()
        return "".join(chars)

    def is_number_start(self) -> bool:
        ch = self.current_char()
        nxt = self.peek_char()
        if ch is None:
            return False
        if ch.isdigit():
            return True
        if ch == "." and nxt is not None and nxt.isdigit():
            return True
        if ch in "+-":
            return bool(
                NUMBER_RE.match(self.text, self.pos)
                or SIGNED_INFINITY_RE.match(self.text, self.pos)
            )
        return False

    def add(self, token_type: TokenType, value: str, line: int, column: int, offset: int) -> None:
        self.tokens.append(Token(token_type, value, line, column, offset, self.pos))

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens ending with EOF

        Raises:
            ParseError: If a lexical error is encountered
        """
        while True:
            self.skip_whitespace_and_comments()

            ch = self.current_char()
            if ch is None:
                break

            # Save position for token
            token_line = self.line
            token_col = self.column
            token_offset = self.pos

            # Strings
            if ch in ('"', "'"):
                value = self.read_string()
                self.add(TokenType.STRING, value, token_line, token_col, token_offset)

            # Regular expressions
            elif ch == "/":
                value = self.read_regex()
                self.add(TokenType.REGEX_LITERAL, value, token_line, token_col, token_offset)

            # Date-times and numbers
            elif self.is_number_start():
                datetime_value = self.read_datetime() if ch.isdigit() else None
                if datetime_value is not None:
                    self.add(
                        TokenType.DATETIME, datetime_value, token_line, token_col, token_offset
                    )
                else:
                    value = self.read_number()
                    self.add(TokenType.NUMBER, value, token_line, token_col, token_offset)

            # Identifiers and keywords
            elif ch.isalpha() or ch == "_":
                value = self.read_identifier()
                if value in KEYWORDS:
                    token_type = TokenType(value)
                else:
                    token_type = TokenType.IDENTIFIER
                self.add(token_type, value, token_line, token_col, token_offset)

            # '@' is always followed by raw version text
            elif ch == "@":
                self.advance()
                self.add(TokenType.AT, "@", token_line, token_col, token_offset)
                version_line = self.line
                version_col = self.column
                version_offset = self.pos
                value = self.read_version()
                self.add(TokenType.VERSION, value, version_line, version_col, version_offset)

            elif ch in PUNCTUATION:
                self.advance()
                self.add(PUNCTUATION[ch], ch, token_line, token_col, token_offset)

            else:
                raise self.error(
                    f"Unexpected character: {ch!r}",
                    ErrorKind.UNEXPECTED_TOKEN,
                )

        self.add(TokenType.EOF, "", self.line, self.column, self.pos)
        return self.tokens


def tokenize(text: str, file: Path | None = None) -> list[Token]:
    """
    Convenience function to tokenize model text.

    Args:
        text: Source text
        file: Source file path

    Returns:
        List of tokens
    """
    lexer = Lexer(text, file)
    return lexer.tokenize()
