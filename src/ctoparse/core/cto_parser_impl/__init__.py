"""
CTO Model Parser Package.

This package provides a recursive descent parser for CTO model text.
The parser is built using mixins to separate parsing logic by construct type.

The main exports are:
- Parser: The complete parser class
- parse_model: Convenience function to parse model text

Usage:
    from ctoparse.core.cto_parser_impl import parse_model

    model = parse_model(text, file)
"""

import logging
from pathlib import Path

from .. import ir
from ..lexer import TokenType, tokenize
from .base import BaseParser
from .declaration import DeclarationParserMixin
from .namespace import NamespaceParserMixin
from .property import PropertyParserMixin
from .types import TypeParserMixin

logger = logging.getLogger(__name__)


class Parser(
    BaseParser,
    NamespaceParserMixin,
    TypeParserMixin,
    PropertyParserMixin,
    DeclarationParserMixin,
):
    """
    Complete CTO model parser.

    This class composes all parser mixins:

    - NamespaceParserMixin: Namespace clause, FQNs and versions
    - TypeParserMixin: Property types, default literals and validators
    - PropertyParserMixin: Property lines and their clauses
    - DeclarationParserMixin: Concept declarations
    """

    def parse(self) -> ir.Model:
        """
        Parse a complete model document.

        Returns:
            Model with the namespace and all declarations in source order

        Raises:
            ParseError: On the first grammar violation
        """
        namespace = self.parse_namespace()

        declarations: list[ir.Declaration] = []
        while not self.match(TokenType.EOF):
            if not self.match(TokenType.CONCEPT):
                self.expect(TokenType.EOF, "'concept' or end of input")
            declarations.append(self.parse_declaration())

        return ir.Model(namespace=namespace, declarations=tuple(declarations))


def parse_model(text: str, file: Path | None = None) -> ir.Model:
    """
    Parse CTO model text into a Model.

    Args:
        text: Model source text
        file: Source file path (for error reporting)

    Returns:
        Parsed Model

    Raises:
        ParseError: If the text does not conform to the grammar
    """
    tokens = tokenize(text, file)
    logger.debug("Tokenized %s: %d tokens", file or "<string>", len(tokens))

    model = Parser(tokens, text, file).parse()
    logger.debug(
        "Parsed namespace %s with %d declarations",
        model.namespace.name,
        len(model.declarations),
    )
    return model


__all__ = [
    "Parser",
    "parse_model",
]
