"""
Type parsing for CTO models.

Handles property types, default literals and validator clauses.
"""

import math
import re
from typing import TYPE_CHECKING, Any, Callable

from .. import ir
from ..errors import ErrorKind
from ..lexer import Token, TokenType
from .base import KEYWORD_AS_IDENTIFIER_TYPES

INTEGRAL_RE = re.compile(r"[+-]?\d+", re.ASCII)
DOUBLE_WORDS = {"inf", "infinity"}
# Recognized as literals but never accepted as values
REJECTED_DOUBLE_WORDS = {"nan"}

# Integral bounds per integer-valued property kind
INTEGRAL_LIMITS: dict[str, tuple[int, int]] = {
    "Integer": (ir.INTEGER_MIN, ir.INTEGER_MAX),
    "Long": (ir.LONG_MIN, ir.LONG_MAX),
}


class TypeParserMixin:
    """
    Mixin providing property type, literal and validator parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        expect: Any
        advance: Any
        match: Any
        current_token: Any
        error_at: Any
        error_missing: Any

    def parse_property_type(self) -> tuple[str, bool]:
        """
        Parse a property type with optional array suffix.

        Examples:
            String       -> ("String", False)
            Address[]    -> ("Address", True)

        Returns:
            Tuple of (type name, is_array)
        """
        token = self.current_token()
        if token.type == TokenType.EOF:
            raise self.error_missing("Expected property type")
        if token.type != TokenType.IDENTIFIER and token.type not in KEYWORD_AS_IDENTIFIER_TYPES:
            raise self.error_at(
                token,
                f"Unknown property type {token.value!r}",
                ErrorKind.UNKNOWN_PROPERTY_TYPE,
            )
        self.advance()

        is_array = False
        if self.match(TokenType.LBRACKET):
            self.advance()
            self.expect(TokenType.RBRACKET, "']'")
            is_array = True

        return token.value, is_array

    # =========================================================================
    # Literals
    # =========================================================================

    def parse_default_literal(self, kind: str) -> Any:
        """
        Parse the literal after ``default =`` for a property of ``kind``.

        Raises:
            ParseError: InvalidDefaultLiteral if the literal does not fit the kind
        """
        token = self.current_token()
        if token.type == TokenType.EOF:
            raise self.error_missing("Expected default value")

        if kind == "String":
            value: Any = self._string_literal(token)
        elif kind in INTEGRAL_LIMITS:
            value = self._integral_literal(token, kind)
        elif kind == "Double":
            value = self._double_literal(token)
        elif kind == "Boolean":
            value = self._boolean_literal(token)
        else:
            value = self._datetime_literal(token)

        if value is None:
            if not self._is_literal(token):
                raise self.error_at(
                    token,
                    f"Expected default value, got {token.value!r}",
                    ErrorKind.UNEXPECTED_TOKEN,
                )
            raise self.error_at(
                token,
                f"Invalid default value {token.value!r} for {kind} property",
                ErrorKind.INVALID_DEFAULT_LITERAL,
            )

        self.advance()
        return value

    def _is_literal(self, token: Token) -> bool:
        if token.type in (
            TokenType.STRING,
            TokenType.NUMBER,
            TokenType.DATETIME,
            TokenType.TRUE,
            TokenType.FALSE,
            TokenType.REGEX_LITERAL,
        ):
            return True
        return token.type == TokenType.IDENTIFIER and token.value.lower() in (
            DOUBLE_WORDS | REJECTED_DOUBLE_WORDS
        )

    def _string_literal(self, token: Token) -> str | None:
        if token.type != TokenType.STRING:
            return None
        return token.value

    def _integral_literal(self, token: Token, kind: str) -> int | None:
        if token.type != TokenType.NUMBER or not INTEGRAL_RE.fullmatch(token.value):
            return None
        value = int(token.value)
        lower, upper = INTEGRAL_LIMITS[kind]
        if not lower <= value <= upper:
            return None
        return value

    def _double_literal(self, token: Token) -> float | None:
        if token.type == TokenType.NUMBER:
            value = float(token.value)
            # Overflowing literals such as 1e999 are not representable
            if math.isinf(value) and "inf" not in token.value.lower():
                return None
            return value
        if token.type == TokenType.IDENTIFIER and token.value.lower() in DOUBLE_WORDS:
            return float(token.value)
        return None

    def _boolean_literal(self, token: Token) -> bool | None:
        if token.type == TokenType.TRUE:
            return True
        if token.type == TokenType.FALSE:
            return False
        return None

    def _datetime_literal(self, token: Token) -> str | None:
        if token.type != TokenType.DATETIME:
            return None
        return token.value

    # =========================================================================
    # Validators
    # =========================================================================

    def parse_regex_validator(self) -> ir.StringRegexValidator:
        """
        Parse ``regex = /pattern/flags``.

        Examples:
            regex=/^[A-Z]+$/
            regex = /abc.*/gi
        """
        self.expect(TokenType.REGEX)
        self.expect(TokenType.EQUALS, "'='")
        token = self.expect(TokenType.REGEX_LITERAL, "regular expression")
        pattern, _, flags = token.value.rpartition("/")
        return ir.StringRegexValidator(pattern=pattern, flags=flags)

    def parse_length_validator(self) -> ir.StringLengthValidator:
        """
        Parse ``length = [min, max]`` with either bound optional.

        Examples:
            length=[1, 100]
            length=[, 100]
            length=[1,]
        """
        self.expect(TokenType.LENGTH)
        lower, upper = self._parse_bounds(self._length_bound)
        return ir.StringLengthValidator(min_length=lower, max_length=upper)

    def parse_range_validator(
        self, kind: str
    ) -> ir.IntegerDomainValidator | ir.DoubleDomainValidator:
        """
        Parse ``range = [lower, upper]`` with either bound optional.

        Bounds are literals of the property's own kind.

        Examples:
            range=[0, 150]
            range=[-1.5,]
        """
        self.expect(TokenType.RANGE)
        if kind == "Double":
            lower, upper = self._parse_bounds(self._double_literal)
            return ir.DoubleDomainValidator(lower=lower, upper=upper)

        lower, upper = self._parse_bounds(lambda token: self._integral_literal(token, kind))
        return ir.IntegerDomainValidator(lower=lower, upper=upper)

    def _length_bound(self, token: Token) -> int | None:
        value = self._integral_literal(token, "Integer")
        if value is None or value < 0:
            return None
        return value

    def _parse_bounds(self, convert: Callable[[Token], Any]) -> tuple[Any, Any]:
        """Parse ``= [lower?, upper?]``; at least one bound must be given."""
        self.expect(TokenType.EQUALS, "'='")
        self.expect(TokenType.LBRACKET, "'['")

        lower = None
        if not self.match(TokenType.COMMA):
            lower = self._parse_bound(convert)

        self.expect(TokenType.COMMA, "','")

        upper = None
        if not self.match(TokenType.RBRACKET):
            upper = self._parse_bound(convert)
        elif lower is None:
            raise self.error_missing("Expected at least one bound")

        self.expect(TokenType.RBRACKET, "']'")
        return lower, upper

    def _parse_bound(self, convert: Callable[[Token], Any]) -> Any:
        token = self.current_token()
        if token.type == TokenType.EOF:
            raise self.error_missing("Expected bound")
        value = convert(token)
        if value is None:
            raise self.error_at(
                token,
                f"Invalid bound {token.value!r}",
                ErrorKind.UNEXPECTED_TOKEN,
            )
        self.advance()
        return value
