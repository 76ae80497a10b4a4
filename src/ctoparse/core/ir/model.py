"""
Document-level types for ctoparse IR.

A Model is one parsed source document: a namespace followed by its
declarations, in source order.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .properties import Property
from .version import Unversioned, Version


class Namespace(BaseModel):
    """
    Namespace clause of a model document.

    Attributes:
        name: Dotted fully-qualified name (e.g. "com.example.foo")
        version: Optional semantic version following '@'

    Examples:
        - namespace com.example.foo
        - namespace com.example.foo@1.3.5-pre
    """

    name: str
    version: Version = Field(default_factory=Unversioned)

    model_config = ConfigDict(frozen=True)

    @property
    def segments(self) -> list[str]:
        return self.name.split(".")

    def __str__(self) -> str:
        version = str(self.version)
        return f"{self.name}@{version}" if version else self.name


class Declaration(BaseModel):
    """
    A named concept declaration with its properties.

    Examples:
        concept Person {
          o String name
          o Integer age optional
        }
    """

    name: str
    properties: tuple[Property, ...] = ()

    model_config = ConfigDict(frozen=True)

    def get_property(self, name: str) -> Property | None:
        """Get property by name."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


class Model(BaseModel):
    """
    Root artifact produced by parsing one model document.

    Attributes:
        namespace: The document's namespace clause
        declarations: Declarations in source order
    """

    namespace: Namespace
    declarations: tuple[Declaration, ...] = ()

    model_config = ConfigDict(frozen=True)

    def get_declaration(self, name: str) -> Declaration | None:
        """Get declaration by name."""
        for decl in self.declarations:
            if decl.name == name:
                return decl
        return None
