"""
Base parser class for CTO models.

Provides common token manipulation and utility methods used by all parser mixins.
"""

from pathlib import Path

from ..errors import ErrorKind, ParseError, make_parse_error
from ..lexer import Token, TokenType

# Keywords that may appear wherever a name is expected
KEYWORD_AS_IDENTIFIER_TYPES = {
    TokenType.NAMESPACE,
    TokenType.CONCEPT,
    TokenType.PROPERTY,
    TokenType.OPTIONAL,
    TokenType.DEFAULT,
    TokenType.REGEX,
    TokenType.LENGTH,
    TokenType.RANGE,
    TokenType.TRUE,
    TokenType.FALSE,
}


class BaseParser:
    """
    Base parser class with token manipulation utilities.

    The cursor is an index into an immutable token list. Alternatives are
    chosen by looking at the current token before consuming anything, so a
    branch that is not taken never moves the cursor.
    """

    def __init__(self, tokens: list[Token], text: str, file: Path | None = None):
        """
        Initialize parser.

        Args:
            tokens: List of tokens from lexer
            text: Source text the tokens were produced from
            file: Source file path (for error reporting)
        """
        self.tokens = tokens
        self.text = text
        self.file = file
        self.pos = 0

    def current_token(self) -> Token:
        """Get current token."""
        if self.pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[self.pos]

    def peek_token(self, offset: int = 1) -> Token:
        """Peek ahead at token."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[pos]

    def previous_token(self) -> Token | None:
        """Last consumed token, or None at the start of input."""
        if self.pos == 0:
            return None
        return self.tokens[self.pos - 1]

    def advance(self) -> Token:
        """Consume and return current token."""
        token = self.current_token()
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current_token().type in token_types

    def is_adjacent(self) -> bool:
        """True if the current token directly follows the last consumed one."""
        previous = self.previous_token()
        return previous is not None and previous.end == self.current_token().offset

    def error_at(self, token: Token, message: str, kind: ErrorKind) -> ParseError:
        """Build an error positioned at the start of ``token``."""
        return make_parse_error(message, kind, self.text, token.offset, self.file)

    def error_missing(self, message: str) -> ParseError:
        """
        Build an error for a required token that is not present.

        The error is positioned immediately after the last consumed token
        (or at the current token when nothing has been consumed yet).
        """
        token = self.current_token()
        previous = self.previous_token()
        offset = previous.end if previous is not None else token.offset

        if token.type == TokenType.EOF:
            kind = ErrorKind.UNEXPECTED_END_OF_INPUT
            message = f"{message}, got end of input"
        else:
            kind = ErrorKind.UNEXPECTED_TOKEN
            message = f"{message}, got {token.value!r}"
        return make_parse_error(message, kind, self.text, offset, self.file)

    def expect(self, token_type: TokenType, what: str | None = None) -> Token:
        """
        Expect a specific token type and consume it.

        Raises:
            ParseError: If token doesn't match
        """
        if not self.match(token_type):
            raise self.error_missing(f"Expected {what or repr(token_type.value)}")
        return self.advance()

    def expect_identifier_or_keyword(self, what: str = "identifier") -> Token:
        """
        Expect an identifier or accept a keyword as an identifier.

        Keywords are reserved only in keyword positions; anywhere a name is
        expected they are plain names.
        """
        token = self.current_token()
        if token.type == TokenType.IDENTIFIER or token.type in KEYWORD_AS_IDENTIFIER_TYPES:
            return self.advance()
        raise self.error_missing(f"Expected {what}")
