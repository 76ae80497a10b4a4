"""Tests for error types and error formatting."""

from pathlib import Path

import pytest

from ctoparse.core.cto_parser_impl import parse_model
from ctoparse.core.errors import (
    CtoError,
    ErrorContext,
    ErrorKind,
    ManifestError,
    ParseError,
    extract_snippet,
    make_parse_error,
    offset_to_linecol,
)


class TestErrorHierarchy:
    def test_parse_and_manifest_errors_share_base(self):
        assert issubclass(ParseError, CtoError)
        assert issubclass(ManifestError, CtoError)

    def test_error_kind_values(self):
        assert ErrorKind.UNEXPECTED_TOKEN.value == "UnexpectedToken"
        assert ErrorKind.UNEXPECTED_END_OF_INPUT.value == "UnexpectedEndOfInput"
        assert ErrorKind.INVALID_VERSION_FORMAT.value == "InvalidVersionFormat"
        assert ErrorKind.INVALID_DEFAULT_LITERAL.value == "InvalidDefaultLiteral"
        assert ErrorKind.UNKNOWN_PROPERTY_TYPE.value == "UnknownPropertyType"


class TestPositions:
    def test_offset_to_linecol(self):
        text = "ab\ncd\n\nef"
        assert offset_to_linecol(text, 0) == (1, 1)
        assert offset_to_linecol(text, 4) == (2, 2)
        assert offset_to_linecol(text, 6) == (3, 1)
        assert offset_to_linecol(text, len(text)) == (4, 3)

    def test_extract_snippet(self):
        text = "1\n2\n3\n4\n5\n6"
        assert extract_snippet(text, 4) == "2\n3\n4\n5\n6"
        assert extract_snippet(text, 1) == "1\n2\n3"


class TestErrorFormatting:
    def test_message_includes_location_and_snippet(self):
        with pytest.raises(ParseError) as exc_info:
            parse_model("namespace a\nconcept { }")
        error = exc_info.value
        assert (error.line, error.column, error.offset) == (2, 8, 19)

        rendered = str(error)
        assert rendered.startswith("<string>:2:8\n")
        assert "   2 | concept { }" in rendered
        assert " " * 14 + "^^^" in rendered
        assert "Expected declaration name" in rendered

    def test_file_path_in_location(self):
        error = make_parse_error(
            "boom", ErrorKind.UNEXPECTED_TOKEN, "x\ny", 2, Path("models/m.cto")
        )
        assert error.context.format().startswith("models/m.cto:2:1")
        assert error.kind == ErrorKind.UNEXPECTED_TOKEN

    def test_context_without_snippet(self):
        context = ErrorContext(file=None, line=3, column=4, offset=10)
        assert context.format() == "<string>:3:4"
        assert str(CtoError("plain")) == "plain"
