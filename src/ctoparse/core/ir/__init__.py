"""
ctoparse Intermediate Representation (IR) types.

The IR is the immutable tree produced by the parser. Types are organized
into submodules and re-exported from this package.
"""

# Document
from .model import (
    Declaration,
    Model,
    Namespace,
)

# Properties
from .properties import (
    INTEGER_MAX,
    INTEGER_MIN,
    LONG_MAX,
    LONG_MIN,
    PRIMITIVE_PROPERTY_TYPES,
    BooleanProperty,
    ConceptReferenceProperty,
    DateTimeProperty,
    DoubleDomainValidator,
    DoubleProperty,
    IntegerDomainValidator,
    IntegerProperty,
    LongProperty,
    PrimitiveType,
    Property,
    PropertyBase,
    StringLengthValidator,
    StringProperty,
    StringRegexValidator,
)

# Versions
from .version import (
    PlainVersion,
    ReleaseVersion,
    Unversioned,
    Version,
)

__all__ = [
    # Document
    "Declaration",
    "Model",
    "Namespace",
    # Properties
    "INTEGER_MAX",
    "INTEGER_MIN",
    "LONG_MAX",
    "LONG_MIN",
    "PRIMITIVE_PROPERTY_TYPES",
    "BooleanProperty",
    "ConceptReferenceProperty",
    "DateTimeProperty",
    "DoubleDomainValidator",
    "DoubleProperty",
    "IntegerDomainValidator",
    "IntegerProperty",
    "LongProperty",
    "PrimitiveType",
    "Property",
    "PropertyBase",
    "StringLengthValidator",
    "StringProperty",
    "StringRegexValidator",
    # Versions
    "PlainVersion",
    "ReleaseVersion",
    "Unversioned",
    "Version",
]
