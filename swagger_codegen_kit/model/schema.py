"""
Schema node definitions for a decoded Swagger document.

A Schema is a Metadata block plus exactly one variant payload
(simple, object, array, allOf, reference). Nodes are frozen: nothing
is mutated once the document has been parsed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from ..analyzer.reference_resolver import ReferenceResolver


class SimpleType(str, Enum):
    """Primitive Swagger types."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    FILE = "file"

    @property
    def can_be_enum(self) -> bool:
        """Whether values of this type can form an enum (boolean and file never do)."""
        return self in (SimpleType.STRING, SimpleType.INTEGER, SimpleType.NUMBER)


@dataclass(frozen=True)
class Metadata:
    """Descriptive keywords shared by schemas and items."""

    title: str | None = None
    description: str | None = None
    enum_values: list[Any] | None = None
    enum_names: list[str] | None = None
    default: Any = None
    example: Any = None
    nullable: bool = False

    # Raw x-* extensions
    extensions: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Reference:
    """A weak, named pointer into one of the document tables."""

    path: str = ""  # e.g. "#/definitions/Animal"

    @property
    def component(self) -> str:
        """Table the reference points into ("definitions", "parameters", "responses")."""
        parts = self.path.lstrip("#").strip("/").split("/")
        return parts[0] if len(parts) > 1 else ""

    @property
    def name(self) -> str:
        """Target name, JSON-pointer unescaped."""
        return self.path.rsplit("/", 1)[-1].replace("~1", "/").replace("~0", "~")

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class SimpleSchema:
    kind: SimpleType = SimpleType.STRING


@dataclass(frozen=True)
class Property:
    """A named property, owned by a single object schema."""

    name: str = ""
    required: bool = False
    schema: Schema | None = None

    def is_unresolved(self, resolver: ReferenceResolver) -> bool:
        return self.schema is not None and self.schema.is_unresolved(resolver)


@dataclass(frozen=True)
class ObjectSchema:
    """An object with properties and an additionalProperties flag or schema."""

    properties: list[Property] = field(default_factory=list)
    additional_properties: bool | Schema = True

    @property
    def required_properties(self) -> list[Property]:
        return [p for p in self.properties if p.required]

    @property
    def optional_properties(self) -> list[Property]:
        return [p for p in self.properties if not p.required]


@dataclass(frozen=True)
class ArraySchema:
    # A single item schema, or a list for tuple-style arrays
    items: Schema | list[Schema] | None = None


@dataclass(frozen=True)
class AllOfSchema:
    subschemas: list[Schema] = field(default_factory=list)


@dataclass(frozen=True)
class ReferenceSchema:
    reference: Reference = field(default_factory=Reference)


SchemaType = Union[SimpleSchema, ObjectSchema, ArraySchema, AllOfSchema, ReferenceSchema]


@dataclass(frozen=True)
class Schema:
    """A node in the type-description graph."""

    type: SchemaType = field(default_factory=ObjectSchema)
    metadata: Metadata = field(default_factory=Metadata)

    def _object_payload(self) -> ObjectSchema | None:
        """The object payload holding this schema's own properties, if any."""
        if isinstance(self.type, ObjectSchema):
            return self.type
        if isinstance(self.type, AllOfSchema):
            for subschema in self.type.subschemas:
                if isinstance(subschema.type, ObjectSchema):
                    return subschema.type
        return None

    @property
    def required_properties(self) -> list[Property]:
        payload = self._object_payload()
        return payload.required_properties if payload else []

    @property
    def optional_properties(self) -> list[Property]:
        payload = self._object_payload()
        return payload.optional_properties if payload else []

    @property
    def properties(self) -> list[Property]:
        """Own properties, required first. Inherited ones are not included."""
        return self.required_properties + self.optional_properties

    @property
    def parent_reference(self) -> Reference | None:
        """Reference to the parent schema of an allOf composition."""
        if isinstance(self.type, AllOfSchema):
            for subschema in self.type.subschemas:
                if isinstance(subschema.type, ReferenceSchema):
                    return subschema.type.reference
        return None

    @property
    def generate_inline_schema(self) -> bool:
        """Closed object with at least one property: deserves its own generated type."""
        return (
            isinstance(self.type, ObjectSchema)
            and self.type.additional_properties is False
            and len(self.type.properties) > 0
        )

    def is_unresolved(self, resolver: ReferenceResolver) -> bool:
        """
        Whether this schema, or an inline schema nested in it, holds a
        reference with no target in the document.

        Referenced definitions are not entered; only the reference itself
        is checked. Nothing is recorded in the ledger.
        """
        if isinstance(self.type, ReferenceSchema):
            return not resolver.is_resolvable(self.type.reference, "definitions")
        if isinstance(self.type, ObjectSchema):
            additional = self.type.additional_properties
            if isinstance(additional, Schema) and additional.is_unresolved(resolver):
                return True
            return any(prop.is_unresolved(resolver) for prop in self.type.properties)
        if isinstance(self.type, ArraySchema):
            items = self.type.items
            if isinstance(items, Schema):
                return items.is_unresolved(resolver)
            return any(item.is_unresolved(resolver) for item in items or [])
        if isinstance(self.type, AllOfSchema):
            return any(subschema.is_unresolved(resolver) for subschema in self.type.subschemas)
        return False


@dataclass(frozen=True)
class ComponentObject:
    """A resolved entry of a document table, keeping its name."""

    name: str = ""
    value: Any = None
