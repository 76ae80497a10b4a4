"""
ctoparse - parser for CTO domain models.

Parses namespaced concept declarations with typed properties into an
immutable, pydantic-backed syntax tree.
"""

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.cto_parser_impl import parse_model
from .core.emitter import emit_model
from .core.errors import CtoError, ErrorKind, ManifestError, ParseError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "parse_model",
    "emit_model",
    "CtoError",
    "ErrorKind",
    "ManifestError",
    "ParseError",
]
