"""
Property types for ctoparse IR.

Properties form a closed set of variants discriminated by ``kind``. Every
variant carries ``name``, ``is_optional`` and ``is_array``; the remaining
fields depend on the property type.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

INTEGER_MIN = -(2**31)
INTEGER_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1


class PrimitiveType(str, Enum):
    """Primitive property type keywords."""

    STRING = "String"
    INTEGER = "Integer"
    LONG = "Long"
    DOUBLE = "Double"
    BOOLEAN = "Boolean"
    DATETIME = "DateTime"


# =============================================================================
# Validators
# =============================================================================


class _Bounded(BaseModel):
    """At least one of the two bounds must be given."""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_has_bound(self):
        values = list(self.model_dump().values())
        if all(value is None for value in values):
            raise ValueError("at least one bound must be set")
        return self


class StringRegexValidator(BaseModel):
    """
    Pattern constraint on a String property.

    Examples:
        - regex=/abc.*/i: StringRegexValidator(pattern="abc.*", flags="i")
    """

    pattern: str
    flags: str = ""

    model_config = ConfigDict(frozen=True)


class StringLengthValidator(_Bounded):
    """
    Length constraint on a String property.

    Examples:
        - length=[0, 10]: StringLengthValidator(min_length=0, max_length=10)
        - length=[,100]: StringLengthValidator(max_length=100)
    """

    min_length: int | None = Field(default=None, ge=0, le=INTEGER_MAX)
    max_length: int | None = Field(default=None, ge=0, le=INTEGER_MAX)


class IntegerDomainValidator(_Bounded):
    """Range constraint on an Integer or Long property."""

    lower: int | None = None
    upper: int | None = None


class DoubleDomainValidator(_Bounded):
    """Range constraint on a Double property."""

    lower: float | None = None
    upper: float | None = None


# =============================================================================
# Property variants
# =============================================================================


class PropertyBase(BaseModel):
    """
    Fields shared by every property variant.

    Attributes:
        name: Property identifier
        is_optional: True when declared with the ``optional`` modifier
        is_array: True when the type is suffixed with ``[]``
    """

    name: str
    is_optional: bool = False
    is_array: bool = False

    model_config = ConfigDict(frozen=True)


class StringProperty(PropertyBase):
    kind: Literal["String"] = "String"
    default_value: str | None = None
    regex_validator: StringRegexValidator | None = None
    length_validator: StringLengthValidator | None = None


class IntegerProperty(PropertyBase):
    kind: Literal["Integer"] = "Integer"
    default_value: int | None = Field(default=None, ge=INTEGER_MIN, le=INTEGER_MAX)
    domain_validator: IntegerDomainValidator | None = None


class LongProperty(PropertyBase):
    kind: Literal["Long"] = "Long"
    default_value: int | None = Field(default=None, ge=LONG_MIN, le=LONG_MAX)
    domain_validator: IntegerDomainValidator | None = None


class DoubleProperty(PropertyBase):
    kind: Literal["Double"] = "Double"
    default_value: float | None = None
    domain_validator: DoubleDomainValidator | None = None


class BooleanProperty(PropertyBase):
    kind: Literal["Boolean"] = "Boolean"
    default_value: bool | None = None


class DateTimeProperty(PropertyBase):
    """DateTime property; the default keeps the ISO-8601 text as written."""

    kind: Literal["DateTime"] = "DateTime"
    default_value: str | None = None


class ConceptReferenceProperty(PropertyBase):
    """
    Property typed by another declaration.

    Examples:
        - o Address mainAddress: ConceptReferenceProperty(name="mainAddress", class_name="Address")
    """

    kind: Literal["ConceptReference"] = "ConceptReference"
    class_name: str


Property = Annotated[
    Union[
        StringProperty,
        IntegerProperty,
        LongProperty,
        DoubleProperty,
        BooleanProperty,
        DateTimeProperty,
        ConceptReferenceProperty,
    ],
    Field(discriminator="kind"),
]

# Property variant per primitive type keyword
PRIMITIVE_PROPERTY_TYPES: dict[PrimitiveType, type[PropertyBase]] = {
    PrimitiveType.STRING: StringProperty,
    PrimitiveType.INTEGER: IntegerProperty,
    PrimitiveType.LONG: LongProperty,
    PrimitiveType.DOUBLE: DoubleProperty,
    PrimitiveType.BOOLEAN: BooleanProperty,
    PrimitiveType.DATETIME: DateTimeProperty,
}
