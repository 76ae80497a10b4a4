"""
Namespace parsing for CTO models.

Handles fully-qualified names, semantic versions and the namespace clause.
"""

import re
from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import ErrorKind
from ..lexer import TokenType

VERSION_RE = re.compile(r"(\d+)\.(\d+)\.(\d+)(?:-(.*))?", re.ASCII)
RELEASE_SEGMENT_RE = re.compile(r"[0-9A-Za-z-]+", re.ASCII)


def is_valid_release(release: str) -> bool:
    """
    Check a release tag such as ``pre``, ``alpha.1`` or ``x-y-z.--``.

    Segments are separated by dots and must be non-empty; an all-digit
    segment may not have a leading zero.
    """
    for segment in release.split("."):
        if not RELEASE_SEGMENT_RE.fullmatch(segment):
            return False
        if segment.isdigit() and len(segment) > 1 and segment.startswith("0"):
            return False
    return True


class NamespaceParserMixin:
    """
    Mixin providing namespace, FQN and version parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        expect: Any
        advance: Any
        match: Any
        current_token: Any
        expect_identifier_or_keyword: Any
        is_adjacent: Any
        error_at: Any
        error_missing: Any

    def parse_namespace(self) -> ir.Namespace:
        """
        Parse the namespace clause.

        Examples:
            namespace com.example.foo
            namespace com.example.foo@1.3.5-pre
        """
        self.expect(TokenType.NAMESPACE, "'namespace'")
        name = self.parse_fqn()

        if self.match(TokenType.AT) and self.is_adjacent():
            self.advance()
            return ir.Namespace(name=name, version=self.parse_version())

        return ir.Namespace(name=name)

    def parse_fqn(self) -> str:
        """
        Parse a dotted fully-qualified name.

        Segments and dots must not be separated by whitespace; a dot that is
        not followed by a segment is an error.
        """
        segments = [self.expect_identifier_or_keyword("namespace segment").value]

        while self.match(TokenType.DOT) and self.is_adjacent():
            self.advance()
            if not self.is_adjacent():
                raise self.error_missing("Expected namespace segment after '.'")
            segments.append(self.expect_identifier_or_keyword("namespace segment").value)

        return ".".join(segments)

    def parse_version(self) -> ir.Version:
        """
        Parse the version text following '@'.

        Examples:
            1.3.5        -> PlainVersion(1, 3, 5)
            1.3.5-pre    -> ReleaseVersion(PlainVersion(1, 3, 5), "pre")
        """
        token = self.current_token()
        if token.type != TokenType.VERSION:
            raise self.error_missing("Expected version after '@'")
        self.advance()

        match = VERSION_RE.fullmatch(token.value)
        if not match:
            raise self.error_at(
                token,
                f"Invalid version {token.value!r}, expected MAJOR.MINOR.PATCH[-RELEASE]",
                ErrorKind.INVALID_VERSION_FORMAT,
            )

        major, minor, patch, release = match.groups()
        plain = ir.PlainVersion(major=int(major), minor=int(minor), patch=int(patch))

        if release is None:
            return plain

        if not is_valid_release(release):
            raise self.error_at(
                token,
                f"Invalid release tag {release!r} in version {token.value!r}",
                ErrorKind.INVALID_VERSION_FORMAT,
            )
        return ir.ReleaseVersion(version=plain, release=release)
