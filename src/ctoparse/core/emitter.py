"""
Model emitter: renders a Model back to canonical CTO source text.

Output uses two-space indentation, one property per line and a fixed clause
order (default, regex, length, range, optional). Parsing the emitted text
yields a Model equal to the input.
"""

from __future__ import annotations

import logging

from . import ir

logger = logging.getLogger(__name__)

STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}

INDENT = "  "


def emit_string(value: str) -> str:
    """Render a double-quoted string literal."""
    chars = []
    for ch in value:
        if ch in STRING_ESCAPES:
            chars.append(STRING_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            chars.append(f"\\u{{{ord(ch):x}}}")
        else:
            chars.append(ch)
    return '"' + "".join(chars) + '"'


def emit_number(value: int | float) -> str:
    """Render a number literal; floats keep full precision."""
    if isinstance(value, float):
        return repr(value)
    return str(value)


def _emit_bounds(lower: int | float | None, upper: int | float | None) -> str:
    left = "" if lower is None else emit_number(lower)
    right = "" if upper is None else emit_number(upper)
    return f"[{left}, {right}]" if left and right else f"[{left},{right}]"


def _emit_default(prop: ir.PropertyBase) -> str | None:
    value = getattr(prop, "default_value", None)
    if value is None:
        return None
    if isinstance(prop, ir.StringProperty):
        return emit_string(value)
    if isinstance(prop, ir.BooleanProperty):
        return "true" if value else "false"
    if isinstance(prop, ir.DateTimeProperty):
        return value
    return emit_number(value)


def emit_property(prop: ir.PropertyBase) -> str:
    """
    Render one property line (without indentation).

    Examples:
        o String name default="x" optional
        o Address[] addresses
    """
    type_name = prop.class_name if isinstance(prop, ir.ConceptReferenceProperty) else prop.kind
    parts = ["o", type_name + ("[]" if prop.is_array else ""), prop.name]

    default = _emit_default(prop)
    if default is not None:
        parts.append(f"default={default}")

    if isinstance(prop, ir.StringProperty):
        if prop.regex_validator is not None:
            regex = prop.regex_validator
            parts.append(f"regex=/{regex.pattern}/{regex.flags}")
        if prop.length_validator is not None:
            length = prop.length_validator
            parts.append(f"length={_emit_bounds(length.min_length, length.max_length)}")

    domain = getattr(prop, "domain_validator", None)
    if domain is not None:
        parts.append(f"range={_emit_bounds(domain.lower, domain.upper)}")

    if prop.is_optional:
        parts.append("optional")

    return " ".join(parts)


def emit_declaration(decl: ir.Declaration) -> str:
    lines = [f"concept {decl.name} {{"]
    for prop in decl.properties:
        lines.append(INDENT + emit_property(prop))
    lines.append("}")
    return "\n".join(lines)


def emit_namespace(namespace: ir.Namespace) -> str:
    return f"namespace {namespace}"


def emit_model(model: ir.Model) -> str:
    """
    Render a Model as CTO source text.

    Args:
        model: Model to render

    Returns:
        Source text ending with a newline
    """
    sections = [emit_namespace(model.namespace)]
    sections.extend(emit_declaration(decl) for decl in model.declarations)
    logger.debug("Emitted %d declarations for %s", len(model.declarations), model.namespace)
    return "\n\n".join(sections) + "\n"
