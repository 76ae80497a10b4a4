"""Tests for rendering Models back to CTO source."""

from pathlib import Path

import pytest

from ctoparse.core import ir
from ctoparse.core.cto_parser_impl import parse_model
from ctoparse.core.emitter import emit_model, emit_property, emit_string

PERSON_CANONICAL = """namespace com.example.foo@1.3.5-pre

concept Person {
  o String name
  o Integer age optional
  o Address mainAddress
}

concept Address {
  o String street
  o Integer number optional
  o String city default="Dublin"
}
"""


class TestEmitModel:
    def test_person_example(self, person_model: ir.Model):
        assert emit_model(person_model) == PERSON_CANONICAL

    def test_unversioned_namespace_only(self):
        model = ir.Model(namespace=ir.Namespace(name="a.b"))
        assert emit_model(model) == "namespace a.b\n"

    def test_empty_declaration(self):
        model = ir.Model(
            namespace=ir.Namespace(name="a"),
            declarations=[ir.Declaration(name="Empty")],
        )
        assert emit_model(model) == "namespace a\n\nconcept Empty {\n}\n"


class TestEmitProperty:
    def test_clause_order(self):
        prop = ir.StringProperty(
            name="code",
            is_optional=True,
            is_array=True,
            default_value="A",
            regex_validator=ir.StringRegexValidator(pattern="[A-Z]", flags="g"),
            length_validator=ir.StringLengthValidator(min_length=1, max_length=3),
        )
        assert emit_property(prop) == (
            'o String[] code default="A" regex=/[A-Z]/g length=[1, 3] optional'
        )

    def test_open_bounds(self):
        prop = ir.IntegerProperty(
            name="n", domain_validator=ir.IntegerDomainValidator(upper=10)
        )
        assert emit_property(prop) == "o Integer n range=[,10]"

    def test_double_keeps_precision(self):
        prop = ir.DoubleProperty(
            name="d",
            default_value=0.1,
            domain_validator=ir.DoubleDomainValidator(lower=-1e-07),
        )
        assert emit_property(prop) == "o Double d default=0.1 range=[-1e-07,]"

    def test_boolean_and_datetime(self):
        assert emit_property(ir.BooleanProperty(name="b", default_value=False)) == (
            "o Boolean b default=false"
        )
        assert emit_property(
            ir.DateTimeProperty(name="t", default_value="2024-01-31T10:20:30Z")
        ) == "o DateTime t default=2024-01-31T10:20:30Z"

    def test_concept_reference(self):
        prop = ir.ConceptReferenceProperty(name="home", class_name="Address", is_array=True)
        assert emit_property(prop) == "o Address[] home"


class TestEmitString:
    def test_plain(self):
        assert emit_string("Dublin") == '"Dublin"'

    def test_escapes(self):
        assert emit_string('say "hi"\\\n') == r'"say \"hi\"\\\n"'

    def test_control_characters(self):
        assert emit_string("\x01") == r'"\u{1}"'


class TestRoundTrip:
    @pytest.mark.parametrize("name", ["person.cto", "all_types.cto"])
    def test_fixture_round_trip(self, cto_fixtures_dir: Path, name: str):
        model = parse_model((cto_fixtures_dir / name).read_text(encoding="utf-8"))
        assert parse_model(emit_model(model)) == model

    def test_emitted_text_is_stable(self, person_source: str):
        once = emit_model(parse_model(person_source))
        assert emit_model(parse_model(once)) == once

    def test_special_values_round_trip(self):
        model = ir.Model(
            namespace=ir.Namespace(name="x"),
            declarations=[
                ir.Declaration(
                    name="Special",
                    properties=[
                        ir.StringProperty(name="s", default_value="tab\t \x07 é '\""),
                        ir.DoubleProperty(name="neg_inf", default_value=float("-inf")),
                        ir.DoubleProperty(
                            name="big",
                            domain_validator=ir.DoubleDomainValidator(upper=float("inf")),
                        ),
                        ir.LongProperty(name="min", default_value=ir.LONG_MIN),
                        ir.StringProperty(
                            name="r",
                            regex_validator=ir.StringRegexValidator(pattern=r"a\/b", flags=""),
                        ),
                    ],
                )
            ],
        )
        assert parse_model(emit_model(model)) == model
