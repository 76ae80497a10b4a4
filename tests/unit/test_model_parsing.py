"""Tests for whole-document parsing."""

from pathlib import Path

import pytest

from ctoparse.core import ir
from ctoparse.core.cto_parser_impl import parse_model
from ctoparse.core.errors import ErrorKind, ParseError
from ctoparse.core.parser import parse_file, parse_files


class TestParseModel:
    def test_person_example(self, person_source: str, person_model: ir.Model):
        assert parse_model(person_source) == person_model

    def test_get_declaration(self, person_source: str):
        model = parse_model(person_source)
        address = model.get_declaration("Address")
        assert address is not None
        assert address.get_property("city").default_value == "Dublin"
        assert model.get_declaration("Nope") is None

    def test_namespace_only(self):
        model = parse_model("namespace just.a.namespace")
        assert model.declarations == ()

    def test_layout_is_insignificant(self, person_model: ir.Model):
        text = (
            "namespace com.example.foo@1.3.5-pre concept Person{o String name "
            "o Integer age optional o Address mainAddress}/* c */concept Address{"
            'o String street o Integer number optional o String city default="Dublin"}'
        )
        assert parse_model(text) == person_model

    def test_trailing_garbage(self):
        text = "namespace a\nconcept X {}\n}"
        with pytest.raises(ParseError) as exc_info:
            parse_model(text)
        assert exc_info.value.kind == ErrorKind.UNEXPECTED_TOKEN
        assert exc_info.value.offset == text.index("{}") + 2

    def test_all_property_kinds(self, cto_fixtures_dir: Path):
        model = parse_file(cto_fixtures_dir / "all_types.cto")
        assert model.namespace.version == ir.ReleaseVersion(
            version=ir.PlainVersion(major=2, minor=0, patch=0),
            release="rc.1",
        )
        item = model.get_declaration("Item")
        assert [p.kind for p in item.properties] == [
            "String",
            "String",
            "String",
            "Integer",
            "Long",
            "Double",
            "Double",
            "Boolean",
            "DateTime",
            "ConceptReference",
        ]
        assert item.get_property("note").default_value == "tab\there \U0001f600"
        assert item.get_property("serial").domain_validator == ir.IntegerDomainValidator(
            upper=ir.LONG_MAX
        )
        assert item.get_property("locations") == ir.ConceptReferenceProperty(
            name="locations", class_name="Warehouse", is_optional=True, is_array=True
        )
        assert model.get_declaration("Empty").properties == ()

    def test_parse_is_repeatable(self, person_source: str):
        assert parse_model(person_source) == parse_model(person_source)


class TestModelSerialization:
    def test_json_round_trip(self, person_model: ir.Model):
        restored = ir.Model.model_validate_json(person_model.model_dump_json())
        assert restored == person_model

    def test_kind_discriminators(self, person_model: ir.Model):
        data = person_model.model_dump()
        assert data["namespace"]["version"]["kind"] == "release"
        kinds = [p["kind"] for p in data["declarations"][0]["properties"]]
        assert kinds == ["String", "Integer", "ConceptReference"]

    def test_exclude_none_view(self, person_model: ir.Model):
        data = person_model.model_dump(exclude_none=True)
        name = data["declarations"][0]["properties"][0]
        assert name == {"name": "name", "is_optional": False, "is_array": False, "kind": "String"}

    def test_models_are_frozen(self, person_model: ir.Model):
        with pytest.raises(Exception):
            person_model.namespace.name = "changed"

    def test_sequences_are_immutable(self, person_model: ir.Model):
        assert isinstance(person_model.declarations, tuple)
        assert isinstance(person_model.declarations[0].properties, tuple)
        with pytest.raises(AttributeError):
            person_model.declarations.append(person_model.declarations[0])
        with pytest.raises(TypeError):
            person_model.declarations[0].properties[0] = None

    def test_list_input_is_stored_as_tuple(self):
        decl = ir.Declaration(name="P", properties=[ir.StringProperty(name="a")])
        assert decl.properties == (ir.StringProperty(name="a"),)


class TestParseFiles:
    def test_parse_files(self, cto_fixtures_dir: Path, person_model: ir.Model):
        models = parse_files([cto_fixtures_dir / "person.cto", cto_fixtures_dir / "all_types.cto"])
        assert models[0] == person_model
        assert models[1].namespace.name == "org.acme.inventory"

    def test_error_names_the_file(self, cto_fixtures_dir: Path):
        path = cto_fixtures_dir / "broken.cto"
        with pytest.raises(ParseError) as exc_info:
            parse_files([path])
        assert exc_info.value.context.file == path
        assert str(path) in str(exc_info.value)
        assert exc_info.value.line == 3
        assert exc_info.value.column == 8
