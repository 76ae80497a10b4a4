"""Tests for concept declaration parsing."""

import pytest

from ctoparse.core import ir
from ctoparse.core.cto_parser_impl import Parser, parse_model
from ctoparse.core.errors import ErrorKind, ParseError
from ctoparse.core.lexer import tokenize


def parse_declaration(text: str) -> ir.Declaration:
    """Parse text holding only a declaration."""
    return Parser(tokenize(text), text).parse_declaration()


class TestDeclaration:
    def test_empty_body(self):
        decl = parse_declaration("concept Empty {}")
        assert decl == ir.Declaration(name="Empty")
        assert decl.properties == ()

    def test_properties_in_source_order(self):
        decl = parse_declaration(
            """concept Person {
              o String name
              o Integer age optional
              o Address mainAddress
            }"""
        )
        assert [p.name for p in decl.properties] == ["name", "age", "mainAddress"]
        assert decl.get_property("age") == ir.IntegerProperty(name="age", is_optional=True)
        assert decl.get_property("missing") is None

    def test_single_line(self):
        decl = parse_declaration("concept P { o String a o String b }")
        assert len(decl.properties) == 2

    def test_keyword_as_name(self):
        assert parse_declaration("concept optional {}").name == "optional"

    def test_duplicate_property_names_are_kept(self):
        decl = parse_declaration("concept P { o String a o Integer a }")
        assert [p.kind for p in decl.properties] == ["String", "Integer"]


class TestDeclarationErrors:
    def test_missing_name_reports_offset_after_keyword(self):
        with pytest.raises(ParseError) as exc_info:
            parse_declaration("concept { o String name }")
        assert exc_info.value.kind == ErrorKind.UNEXPECTED_TOKEN
        assert exc_info.value.offset == 7

    def test_missing_name_in_document(self):
        text = "namespace a\nconcept { o String name }"
        with pytest.raises(ParseError) as exc_info:
            parse_model(text)
        assert exc_info.value.kind == ErrorKind.UNEXPECTED_TOKEN
        assert exc_info.value.offset == text.index("concept") + len("concept")

    def test_missing_open_brace(self):
        text = "concept Person o String name }"
        with pytest.raises(ParseError) as exc_info:
            parse_declaration(text)
        assert exc_info.value.kind == ErrorKind.UNEXPECTED_TOKEN
        assert exc_info.value.offset == len("concept Person")

    def test_missing_close_brace(self):
        with pytest.raises(ParseError) as exc_info:
            parse_declaration("concept Person {\n  o String name\n")
        assert exc_info.value.kind == ErrorKind.UNEXPECTED_END_OF_INPUT

    def test_unexpected_body_token(self):
        text = "concept Person { name }"
        with pytest.raises(ParseError) as exc_info:
            parse_declaration(text)
        assert exc_info.value.kind == ErrorKind.UNEXPECTED_TOKEN
        assert exc_info.value.offset == text.index("{") + 1


class TestCursor:
    def test_lookahead_does_not_consume(self):
        text = "concept X {}"
        parser = Parser(tokenize(text), text)
        assert parser.peek_token().value == "X"
        assert parser.peek_token(10).type.value == "EOF"
        assert parser.current_token().value == "concept"
        assert parser.previous_token() is None

    def test_advance_stops_at_eof(self):
        text = "concept"
        parser = Parser(tokenize(text), text)
        parser.advance()
        eof = parser.advance()
        assert eof is parser.advance()
        assert parser.pos == 1
