"""Core ctoparse functionality: IR, lexer, parser, emitter, project manifest."""

from . import ir
from .cto_parser_impl import Parser, parse_model
from .emitter import emit_model
from .errors import (
    CtoError,
    ErrorContext,
    ErrorKind,
    ManifestError,
    ParseError,
)
from .fileset import discover_cto_files
from .manifest import ProjectManifest, load_manifest
from .parser import parse_file, parse_files

__all__ = [
    "ir",
    "Parser",
    "parse_model",
    "emit_model",
    "CtoError",
    "ErrorContext",
    "ErrorKind",
    "ManifestError",
    "ParseError",
    "discover_cto_files",
    "ProjectManifest",
    "load_manifest",
    "parse_file",
    "parse_files",
]
