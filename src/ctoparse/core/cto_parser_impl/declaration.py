"""
Declaration parsing for CTO models.
"""

from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import TokenType


class DeclarationParserMixin:
    """
    Mixin providing concept declaration parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        expect: Any
        advance: Any
        match: Any
        expect_identifier_or_keyword: Any
        parse_property: Any

    def parse_declaration(self) -> ir.Declaration:
        """
        Parse a concept declaration.

        Examples:
            concept Person {
              o String name
              o Integer age optional
            }
        """
        self.expect(TokenType.CONCEPT, "'concept'")
        name = self.expect_identifier_or_keyword("declaration name").value
        self.expect(TokenType.LBRACE, "'{'")

        properties: list[ir.Property] = []
        while not self.match(TokenType.RBRACE):
            if not self.match(TokenType.PROPERTY):
                self.expect(TokenType.RBRACE, "'o' or '}'")
            properties.append(self.parse_property())

        self.expect(TokenType.RBRACE, "'}'")
        return ir.Declaration(name=name, properties=tuple(properties))
