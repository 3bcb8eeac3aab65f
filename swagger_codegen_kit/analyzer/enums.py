"""
Enum derivation.

Finds the enumerable value sets declared anywhere in a document:
simple schemas and items with enum values, reached through object
properties, additionalProperties maps, array items, parameters and
responses, into inline object schemas and through $ref values.
No deduplication happens here: the same enum reached via two paths
is reported twice, and consumers deduplicate by name.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from typing import Any, Union

from ..config import AnalyzerConfig
from ..errors import MalformedEnumMetadataWarning
from ..model.schema import (
    ArraySchema,
    ComponentObject,
    Metadata,
    ObjectSchema,
    Property,
    ReferenceSchema,
    Schema,
    SimpleSchema,
)
from ..model.spec import (
    ArrayItem,
    BodyParameter,
    Item,
    Operation,
    OperationResponse,
    OtherParameter,
    Parameter,
    PossibleReference,
    Response,
    SimpleItem,
    SwaggerSpec,
)
from .inheritance import INLINE_OWNER, InheritanceResolver
from .ledger import ReferenceLedger
from .reference_resolver import ReferenceResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaEnumType:
    """Enum declared by a full schema node."""

    schema: Schema


@dataclass(frozen=True)
class ItemEnumType:
    """Enum declared by a non-body parameter item."""

    item: Item


EnumType = Union[SchemaEnumType, ItemEnumType]


@dataclass(frozen=True)
class Enum:
    """An enumerable value set found in the document."""

    name: str
    cases: list[Any]
    type: EnumType
    description: str | None = None
    metadata: Metadata = field(default_factory=Metadata)
    names: list[str] | None = None

    # MalformedEnumMetadata messages
    warnings: list[str] = field(default_factory=list)


def build_enum(metadata: Metadata, name: str, enum_type: EnumType, description: str | None) -> Enum | None:
    """
    Build an Enum from metadata, if it declares enum values.

    Null values are dropped from the cases; no Enum is built when no
    case remains.
    """
    if not metadata.enum_values:
        return None
    cases = [value for value in metadata.enum_values if value is not None]
    if not cases:
        return None

    problems = []
    names = metadata.enum_names
    if names is not None and len(names) != len(metadata.enum_values):
        message = f"Enum {name!r} has {len(metadata.enum_values)} values but {len(names)} names"
        logger.warning(message)
        warnings.warn(message, MalformedEnumMetadataWarning, stacklevel=2)
        problems.append(message)

    return Enum(
        name=name,
        cases=cases,
        type=enum_type,
        description=description if description is not None else metadata.description,
        metadata=metadata,
        names=list(names) if names is not None else None,
        warnings=problems,
    )


def schema_enum(schema: Schema, name: str, description: str | None) -> Enum | None:
    if isinstance(schema.type, SimpleSchema):
        if schema.type.kind.can_be_enum:
            return build_enum(schema.metadata, name, SchemaEnumType(schema), description)
        return None
    if isinstance(schema.type, ObjectSchema):
        # A map of enum values yields the value type's enum
        if isinstance(schema.type.additional_properties, Schema):
            return schema_enum(schema.type.additional_properties, name, description)
        return None
    if isinstance(schema.type, ArraySchema):
        if isinstance(schema.type.items, Schema):
            return schema_enum(schema.type.items, name, description)
        return None
    # allOf and references are resolved by callers
    return None


def item_enum(item: Item, name: str, description: str | None) -> Enum | None:
    if isinstance(item.type, SimpleItem):
        if item.type.kind.can_be_enum:
            return build_enum(item.metadata, name, ItemEnumType(item), description)
        return None
    if isinstance(item.type, ArrayItem):
        inner = item.type.items
        if inner is not None and isinstance(inner.type, SimpleItem) and inner.type.kind.can_be_enum:
            return build_enum(inner.metadata, name, ItemEnumType(item), description)
    return None


def parameter_enum(parameter: Parameter, name: str, description: str | None) -> Enum | None:
    if isinstance(parameter.type, BodyParameter):
        return schema_enum(parameter.type.schema, name, description)
    if isinstance(parameter.type, OtherParameter):
        return item_enum(parameter.type.item, name, description)
    return None


def derive_enum(context: Schema | Parameter | Item, name: str, description: str | None = None) -> Enum | None:
    """
    Derive the enum described by a schema, parameter or item.

    Args:
        context: Where to look for enum values
        name: Name of the produced enum
        description: Enum description; defaults to the metadata description

    Returns:
        The Enum, or None if the context is not enumerable
    """
    if isinstance(context, Schema):
        return schema_enum(context, name, description)
    if isinstance(context, Parameter):
        return parameter_enum(context, name, description)
    if isinstance(context, Item):
        return item_enum(context, name, description)
    raise TypeError(f"Cannot derive an enum from {type(context).__name__}")


class EnumDeriver:
    """
    Composes enum derivation over every site of a document.

    Unlike `derive_enum`, the deriver follows `$ref` values to their
    definitions and walks into inline object schemas. Unresolved
    references are recorded in the ledger under the owner identifier.
    """

    def __init__(
        self,
        spec: SwaggerSpec,
        ledger: ReferenceLedger,
        config: AnalyzerConfig | None = None,
        inheritance: InheritanceResolver | None = None,
    ):
        self.spec = spec
        self.ledger = ledger
        self.config = config or AnalyzerConfig()
        self.inheritance = inheritance or InheritanceResolver(spec, ledger)
        self.resolver: ReferenceResolver = self.inheritance.resolver

    def resolved_enum(self, schema: Schema, name: str, description: str | None, owner: str) -> Enum | None:
        """
        Like `schema_enum`, but a reference (also as array items or map
        values) is resolved and the enum derived on its target.

        Resolution is one level deep: the target is not walked further.
        """
        target = schema
        while True:
            if isinstance(target.type, ArraySchema) and isinstance(target.type.items, Schema):
                target = target.type.items
            elif isinstance(target.type, ObjectSchema) and isinstance(target.type.additional_properties, Schema):
                target = target.type.additional_properties
            else:
                break

        if not isinstance(target.type, ReferenceSchema):
            return schema_enum(schema, name, description)
        resolved = self.resolver.resolve_schema(target.type.reference, owner)
        if resolved is None:
            return None
        return schema_enum(resolved.value, name, description)

    def _value_enums(self, schema: Schema, name: str, description: str | None, owner: str) -> list[Enum]:
        # The value's own enum, or else the enums of the inline schema it is
        enum = self.resolved_enum(schema, name, description, owner)
        if enum is not None:
            return [enum]
        return self.schema_enums(schema, owner)

    def schema_enums(self, schema: Schema, owner: str | None = None) -> list[Enum]:
        """
        Enums of the schema's own properties, additionalProperties and
        array items, walking into inline object schemas.

        Referenced definitions are resolved to derive a property's enum
        but never walked into; they report their own enums.
        """
        owner = owner or INLINE_OWNER
        enums = []
        for prop in schema.properties:
            enums.extend(self._value_enums(prop.schema, prop.name, prop.schema.metadata.description, owner))

        if isinstance(schema.type, ObjectSchema) and isinstance(schema.type.additional_properties, Schema):
            additional = schema.type.additional_properties
            enums.extend(
                self._value_enums(
                    additional,
                    additional.metadata.title or self.config.unknown_enum_name,
                    additional.metadata.description,
                    owner,
                )
            )

        if isinstance(schema.type, ArraySchema) and isinstance(schema.type.items, Schema):
            enums.extend(self.schema_enums(schema.type.items, owner))

        return enums

    def definition_enums(self, name: str, schema: Schema) -> list[Enum]:
        """The enum a named definition is (named after it), then the enums nested in it."""
        enums = []
        # An object's map enum is reported by schema_enums under its title
        if not isinstance(schema.type, ObjectSchema):
            enum = self.resolved_enum(schema, name, None, name)
            if enum is not None:
                enums.append(enum)
        return enums + self.schema_enums(schema, name)

    def inherited_enums(
        self, schema: Schema, owner: str | None = None, lineage: list[ComponentObject] | None = None
    ) -> list[Enum]:
        """
        Ancestor enums (root-most first) followed by the schema's own.

        Raises:
            InheritanceCycleError: If the parent chain is cyclic
        """
        if lineage is None:
            lineage = self.inheritance.lineage(schema, owner)
        return [enum for entry in lineage for enum in self.schema_enums(entry.value, entry.name)]

    def _parameter_enum(self, parameter: Parameter, name: str, owner: str) -> Enum | None:
        if isinstance(parameter.type, BodyParameter):
            return self.resolved_enum(parameter.type.schema, name, parameter.description, owner)
        return parameter_enum(parameter, name, parameter.description)

    def _response_enum(self, operation_response: OperationResponse, response: Response | None, owner: str) -> Enum | None:
        if response is None or response.schema is None:
            return None
        return self.resolved_enum(response.schema, operation_response.name, response.description, owner)

    def enum_value(
        self, context: Property | Parameter | PossibleReference[Parameter] | OperationResponse, owner: str | None = None
    ) -> Enum | None:
        """
        The enum a property, parameter or operation response stands for.

        Args:
            context: Property, parameter (inline or referenced) or operation response
            owner: Ledger key for references that cannot be resolved

        Returns:
            The Enum, named after the property, the parameter or the
            response ("Status200"), or None
        """
        owner = owner or INLINE_OWNER
        if isinstance(context, Property):
            if context.schema is None:
                return None
            return self.resolved_enum(context.schema, context.name, context.schema.metadata.description, owner)
        if isinstance(context, PossibleReference):
            context = self.resolver.resolve_parameter(context, owner)
            if context is None:
                return None
        if isinstance(context, Parameter):
            return self._parameter_enum(context, context.name, owner)
        if isinstance(context, OperationResponse):
            response = self.resolver.resolve_response(context.response, owner)
            return self._response_enum(context, response, owner)
        raise TypeError(f"Cannot derive an enum from {type(context).__name__}")

    def is_enum(
        self, context: Property | Parameter | PossibleReference[Parameter] | OperationResponse, owner: str | None = None
    ) -> bool:
        return self.enum_value(context, owner) is not None

    def request_enums(self, operation: Operation) -> list[Enum]:
        owner = operation.generated_identifier
        enums = []
        for possible in operation.parameters:
            parameter = self.resolver.resolve_parameter(possible, owner)
            if parameter is None:
                continue
            enum = self._parameter_enum(parameter, parameter.name, owner)
            if enum is not None:
                enums.append(enum)
            elif isinstance(parameter.type, BodyParameter):
                enums.extend(self.schema_enums(parameter.type.schema, owner))
        return enums

    def response_enums(self, operation: Operation) -> list[Enum]:
        owner = operation.generated_identifier
        enums = []
        for operation_response in operation.responses:
            response = self.resolver.resolve_response(operation_response.response, owner)
            if response is None or response.schema is None:
                continue
            enum = self._response_enum(operation_response, response, owner)
            if enum is not None:
                enums.append(enum)
            else:
                enums.extend(self.schema_enums(response.schema, owner))
        return enums

    def operation_enums(self, operation: Operation) -> list[Enum]:
        return self.request_enums(operation) + self.response_enums(operation)

    def parameter_table_enums(self) -> list[Enum]:
        """One enum per enumerable entry of the document's parameters table, named by its key."""
        enums = []
        for name, parameter in self.spec.parameters.items():
            enum = self._parameter_enum(parameter, name, name)
            if enum is not None:
                enums.append(enum)
        return enums

    def all_enums(self) -> list[Enum]:
        """Every enum in the document: parameters table, definitions, then operations."""
        enums = self.parameter_table_enums()
        for name, schema in self.spec.definitions.items():
            enums.extend(self.definition_enums(name, schema))
        for operation in self.spec.operations:
            enums.extend(self.operation_enums(operation))
        logger.debug("Derived %d enums", len(enums))
        return enums
