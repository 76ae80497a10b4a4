"""
Property parsing for CTO models.

Handles ``o TYPE[] NAME CLAUSE*`` lines inside a declaration body.
"""

from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import ErrorKind
from ..lexer import TokenType

# Clause keywords accepted per property kind (besides 'optional')
ALLOWED_CLAUSES: dict[str, set[TokenType]] = {
    "String": {TokenType.DEFAULT, TokenType.REGEX, TokenType.LENGTH},
    "Integer": {TokenType.DEFAULT, TokenType.RANGE},
    "Long": {TokenType.DEFAULT, TokenType.RANGE},
    "Double": {TokenType.DEFAULT, TokenType.RANGE},
    "Boolean": {TokenType.DEFAULT},
    "DateTime": {TokenType.DEFAULT},
    "ConceptReference": set(),
}

CLAUSE_TOKENS = {
    TokenType.OPTIONAL,
    TokenType.DEFAULT,
    TokenType.REGEX,
    TokenType.LENGTH,
    TokenType.RANGE,
}


class PropertyParserMixin:
    """
    Mixin providing property parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        expect: Any
        advance: Any
        match: Any
        current_token: Any
        expect_identifier_or_keyword: Any
        error_at: Any
        parse_property_type: Any
        parse_default_literal: Any
        parse_regex_validator: Any
        parse_length_validator: Any
        parse_range_validator: Any

    def parse_property(self) -> ir.Property:
        """
        Parse a single property.

        Examples:
            o String name
            o Integer age optional range=[0,]
            o String[] tags default="none"
            o Address mainAddress
        """
        self.expect(TokenType.PROPERTY, "'o'")
        type_name, is_array = self.parse_property_type()
        name = self.expect_identifier_or_keyword("property name").value

        try:
            kind = ir.PrimitiveType(type_name).value
        except ValueError:
            kind = "ConceptReference"

        fields: dict[str, Any] = {"name": name, "is_array": is_array}
        if kind == "ConceptReference":
            fields["class_name"] = type_name

        # Clauses may appear in any order; a repeated clause replaces the earlier one
        while self.match(*CLAUSE_TOKENS):
            token = self.current_token()

            if token.type == TokenType.OPTIONAL:
                self.advance()
                fields["is_optional"] = True
                continue

            if token.type not in ALLOWED_CLAUSES[kind]:
                raise self.error_at(
                    token,
                    f"'{token.value}' is not allowed on a {kind} property",
                    ErrorKind.UNEXPECTED_TOKEN,
                )

            if token.type == TokenType.DEFAULT:
                self.advance()
                self.expect(TokenType.EQUALS, "'='")
                fields["default_value"] = self.parse_default_literal(kind)
            elif token.type == TokenType.REGEX:
                fields["regex_validator"] = self.parse_regex_validator()
            elif token.type == TokenType.LENGTH:
                fields["length_validator"] = self.parse_length_validator()
            else:
                fields["domain_validator"] = self.parse_range_validator(kind)

        if kind == "ConceptReference":
            return ir.ConceptReferenceProperty(**fields)
        return ir.PRIMITIVE_PROPERTY_TYPES[ir.PrimitiveType(kind)](**fields)
