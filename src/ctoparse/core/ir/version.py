"""
Version types for ctoparse IR.

A namespace is either unversioned or carries a semantic version
(major.minor.patch) with an optional release tag.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Unversioned(BaseModel):
    """A namespace declared without '@version'."""

    kind: Literal["unversioned"] = "unversioned"

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return ""


class PlainVersion(BaseModel):
    """
    A complete numeric version triple.

    Examples:
        - 1.3.5: PlainVersion(major=1, minor=3, patch=5)
    """

    kind: Literal["plain"] = "plain"
    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    patch: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


class ReleaseVersion(BaseModel):
    """
    A numeric version triple with a release tag.

    Examples:
        - 1.3.5-pre: ReleaseVersion(version=PlainVersion(1, 3, 5), release="pre")
        - 1.0.0-alpha.1: ReleaseVersion(version=PlainVersion(1, 0, 0), release="alpha.1")
    """

    kind: Literal["release"] = "release"
    version: PlainVersion
    release: str = Field(min_length=1)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.version}-{self.release}"


Version = Annotated[
    Union[Unversioned, PlainVersion, ReleaseVersion],
    Field(discriminator="kind"),
]
