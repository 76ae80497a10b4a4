"""Shared pytest fixtures for ctoparse tests."""

from pathlib import Path

import pytest

from ctoparse.core import ir


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def cto_fixtures_dir(fixtures_dir: Path) -> Path:
    """Return path to CTO model fixtures directory."""
    return fixtures_dir / "cto"


@pytest.fixture
def person_source(cto_fixtures_dir: Path) -> str:
    """Return the Person/Address example model text."""
    return (cto_fixtures_dir / "person.cto").read_text(encoding="utf-8")


@pytest.fixture
def person_model() -> ir.Model:
    """Return the Model expected from person.cto."""
    return ir.Model(
        namespace=ir.Namespace(
            name="com.example.foo",
            version=ir.ReleaseVersion(
                version=ir.PlainVersion(major=1, minor=3, patch=5),
                release="pre",
            ),
        ),
        declarations=[
            ir.Declaration(
                name="Person",
                properties=[
                    ir.StringProperty(name="name"),
                    ir.IntegerProperty(name="age", is_optional=True),
                    ir.ConceptReferenceProperty(name="mainAddress", class_name="Address"),
                ],
            ),
            ir.Declaration(
                name="Address",
                properties=[
                    ir.StringProperty(name="street"),
                    ir.IntegerProperty(name="number", is_optional=True),
                    ir.StringProperty(name="city", default_value="Dublin"),
                ],
            ),
        ],
    )


@pytest.fixture
def cto_project(tmp_path: Path, person_source: str) -> Path:
    """Create a temporary cto.toml project with two model files."""
    models_dir = tmp_path / "models"
    (models_dir / "nested").mkdir(parents=True)
    (models_dir / "person.cto").write_text(person_source)
    (models_dir / "nested" / "order.cto").write_text(
        """namespace com.example.orders

concept Order {
  o String id
  o Double total range=[0.0,]
}
"""
    )
    (tmp_path / "cto.toml").write_text(
        """[project]
name = "shop"
version = "0.1.0"

[models]
paths = ["models"]
"""
    )
    return tmp_path
