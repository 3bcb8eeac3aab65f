"""
Tests for the schema variant model: own properties, parent reference
and inline schema detection.
"""

import dataclasses
from unittest import TestCase

import pytest

from swagger_codegen_kit.analyzer import ReferenceLedger, ReferenceResolver
from swagger_codegen_kit.model import (
    AllOfSchema,
    ArraySchema,
    Metadata,
    ObjectSchema,
    Property,
    Reference,
    ReferenceSchema,
    Schema,
    SimpleSchema,
    SimpleType,
    SpecParser,
)


def string_schema(**metadata):
    return Schema(type=SimpleSchema(SimpleType.STRING), metadata=Metadata(**metadata))


def object_schema(required=(), optional=(), additional_properties=True):
    properties = [Property(name=n, required=True, schema=string_schema()) for n in required]
    properties += [Property(name=n, required=False, schema=string_schema()) for n in optional]
    return Schema(type=ObjectSchema(properties=properties, additional_properties=additional_properties))


class TestOwnProperties(TestCase):
    def test_object_properties_required_first(self):
        schema = Schema(
            type=ObjectSchema(
                properties=[
                    Property(name="nickname", required=False, schema=string_schema()),
                    Property(name="id", required=True, schema=string_schema()),
                ]
            )
        )
        self.assertEqual([p.name for p in schema.required_properties], ["id"])
        self.assertEqual([p.name for p in schema.optional_properties], ["nickname"])
        self.assertEqual([p.name for p in schema.properties], ["id", "nickname"])

    def test_allof_delegates_to_first_object_subschema(self):
        schema = Schema(
            type=AllOfSchema(
                [
                    Schema(type=ReferenceSchema(Reference("#/definitions/Base"))),
                    object_schema(required=["a"], optional=["b"]),
                    object_schema(required=["ignored"]),
                ]
            )
        )
        self.assertEqual([p.name for p in schema.properties], ["a", "b"])

    def test_allof_without_object_has_no_properties(self):
        schema = Schema(type=AllOfSchema([Schema(type=ReferenceSchema(Reference("#/definitions/Base")))]))
        self.assertEqual(schema.properties, [])

    def test_other_variants_have_no_properties(self):
        for schema in (
            string_schema(),
            Schema(type=ArraySchema(object_schema(required=["x"]))),
            Schema(type=ReferenceSchema(Reference("#/definitions/Base"))),
        ):
            self.assertEqual(schema.properties, [])
            self.assertEqual(schema.required_properties, [])
            self.assertEqual(schema.optional_properties, [])


class TestParentReference(TestCase):
    def test_first_reference_of_allof(self):
        schema = Schema(
            type=AllOfSchema(
                [
                    object_schema(optional=["x"]),
                    Schema(type=ReferenceSchema(Reference("#/definitions/First"))),
                    Schema(type=ReferenceSchema(Reference("#/definitions/Second"))),
                ]
            )
        )
        self.assertEqual(schema.parent_reference, Reference("#/definitions/First"))
        self.assertEqual(schema.parent_reference.name, "First")
        self.assertEqual(schema.parent_reference.component, "definitions")

    def test_non_allof_has_no_parent(self):
        self.assertIsNone(object_schema(optional=["x"]).parent_reference)
        self.assertIsNone(Schema(type=ReferenceSchema(Reference("#/definitions/X"))).parent_reference)

    def test_reference_name_is_unescaped(self):
        self.assertEqual(Reference("#/definitions/a~1b~0c").name, "a/b~c")


class TestGenerateInlineSchema(TestCase):
    def test_closed_object_with_properties(self):
        self.assertTrue(object_schema(optional=["x"], additional_properties=False).generate_inline_schema)

    def test_open_object(self):
        self.assertFalse(object_schema(optional=["x"]).generate_inline_schema)

    def test_closed_object_without_properties(self):
        self.assertFalse(object_schema(additional_properties=False).generate_inline_schema)

    def test_additional_properties_schema(self):
        schema = object_schema(additional_properties=string_schema(enum_values=["x", "y"]))
        self.assertFalse(schema.generate_inline_schema)

    def test_allof_is_never_inline(self):
        schema = Schema(type=AllOfSchema([object_schema(optional=["x"], additional_properties=False)]))
        self.assertFalse(schema.generate_inline_schema)


def test_simple_type_enum_eligibility():
    assert SimpleType.STRING.can_be_enum
    assert SimpleType.INTEGER.can_be_enum
    assert SimpleType.NUMBER.can_be_enum
    assert not SimpleType.BOOLEAN.can_be_enum
    assert not SimpleType.FILE.can_be_enum


def test_parsed_schema_is_frozen():
    spec = SpecParser().parse({"definitions": {"A": {"type": "object", "properties": {"x": {"type": "string"}}}}})
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.definitions["A"].metadata = Metadata(title="changed")


class TestIsUnresolved:
    def test_broken_document(self, broken_spec):
        ledger = ReferenceLedger()
        resolver = ReferenceResolver(broken_spec, ledger)

        assert broken_spec.definitions["Orphan"].is_unresolved(resolver)
        # Cyclic but every reference has a target
        assert not broken_spec.definitions["A"].is_unresolved(resolver)
        assert not broken_spec.definitions["Standalone"].is_unresolved(resolver)

        path = broken_spec.paths[0]
        operation = path.operations[0]
        assert operation.responses[0].is_unresolved(resolver)
        assert operation.parameters[0].is_unresolved(resolver, "parameters")
        assert operation.is_unresolved(resolver)
        assert path.is_unresolved(resolver)
        # Queries never record anything
        assert not ledger

    def test_petstore_is_fully_resolved(self, petstore_spec):
        resolver = ReferenceResolver(petstore_spec, ReferenceLedger())

        assert not any(path.is_unresolved(resolver) for path in petstore_spec.paths)
        assert not any(schema.is_unresolved(resolver) for schema in petstore_spec.definitions.values())

    def test_nested_properties(self):
        spec = SpecParser().parse(
            {
                "definitions": {
                    "S": {
                        "type": "object",
                        "properties": {
                            "ok": {"type": "string"},
                            "gone": {"type": "array", "items": {"$ref": "#/definitions/Gone"}},
                            "external": {"$ref": "other.json#/definitions/S"},
                            "map": {"type": "object", "additionalProperties": {"$ref": "#/definitions/Gone"}},
                        },
                    }
                }
            }
        )
        resolver = ReferenceResolver(spec, ReferenceLedger())
        ok, gone, external, mapping = spec.definitions["S"].properties

        assert not ok.is_unresolved(resolver)
        assert gone.is_unresolved(resolver)
        assert external.is_unresolved(resolver)
        assert mapping.is_unresolved(resolver)
        assert spec.definitions["S"].is_unresolved(resolver)

    def test_path_parameter_reference(self):
        spec = SpecParser().parse({"paths": {"/things": {"parameters": [{"$ref": "#/parameters/nope"}]}}})
        resolver = ReferenceResolver(spec, ReferenceLedger())

        assert spec.paths[0].operations == []
        assert spec.paths[0].is_unresolved(resolver)
