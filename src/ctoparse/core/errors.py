"""
Error types for CTO model parsing and project configuration.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class ErrorKind(str, Enum):
    """Kinds of grammar errors reported by the parser."""

    UNEXPECTED_TOKEN = "UnexpectedToken"
    UNEXPECTED_END_OF_INPUT = "UnexpectedEndOfInput"
    INVALID_VERSION_FORMAT = "InvalidVersionFormat"
    INVALID_DEFAULT_LITERAL = "InvalidDefaultLiteral"
    UNKNOWN_PROPERTY_TYPE = "UnknownPropertyType"


class CtoError(Exception):
    """Base exception for all ctoparse errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(CtoError):
    """
    Raised when model source text does not conform to the grammar.

    Examples:
    - Missing declaration name or closing brace
    - Malformed version after '@'
    - Default literal that does not match the property type
    - Validator clause not allowed for the property type
    """

    def __init__(self, message: str, kind: ErrorKind, context: "ErrorContext"):
        self.kind = kind
        super().__init__(message, context)

    @property
    def offset(self) -> int:
        """0-based character offset of the error."""
        return self.context.offset if self.context else 0

    @property
    def line(self) -> int:
        return self.context.line if self.context else 0

    @property
    def column(self) -> int:
        return self.context.column if self.context else 0


class ManifestError(CtoError):
    """
    Raised when a cto.toml project manifest cannot be loaded.

    Examples:
    - Invalid TOML syntax
    - Wrong value type for a known key
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file, or None for in-memory text
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Character offset into the source text (0-indexed)
        snippet: Optional code snippet showing the error location
    """

    file: Path | None
    line: int
    column: int
    offset: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "model.cto:10:5"
        """
        location = f"{self.file or '<string>'}:{self.line}:{self.column}"

        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format code snippet with line numbers and error marker."""
        if not self.snippet:
            return ""

        lines = self.snippet.split("\n")
        formatted = []

        # Snippet starts at most 2 lines before the error line
        start_line = max(1, self.line - 2)

        for i, line in enumerate(lines):
            line_num = start_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


def offset_to_linecol(text: str, offset: int) -> tuple[int, int]:
    """Convert a character offset into 1-indexed (line, column)."""
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def extract_snippet(text: str, line: int, context_lines: int = 2) -> str:
    """Return the source lines surrounding ``line`` (1-indexed)."""
    lines = text.split("\n")
    start = max(1, line - context_lines)
    end = min(len(lines), line + context_lines)
    return "\n".join(lines[start - 1 : end])


def make_parse_error(
    message: str,
    kind: ErrorKind,
    text: str,
    offset: int,
    file: Path | None = None,
) -> ParseError:
    """
    Helper to create a ParseError positioned at ``offset`` in ``text``.

    Args:
        message: Error description
        kind: Error kind
        text: Full source text being parsed
        offset: Character offset of the error
        file: Optional source file path

    Returns:
        ParseError with context attached
    """
    line, column = offset_to_linecol(text, offset)
    context = ErrorContext(
        file=file,
        line=line,
        column=column,
        offset=offset,
        snippet=extract_snippet(text, line),
    )
    return ParseError(message, kind, context)


def make_manifest_error(message: str, file: Path | None = None) -> ManifestError:
    """
    Helper to create a ManifestError, prefixed with the manifest path if known.

    Args:
        message: Error description
        file: Optional manifest path

    Returns:
        ManifestError
    """
    if file is not None:
        return ManifestError(f"{file}: {message}")
    return ManifestError(message)
