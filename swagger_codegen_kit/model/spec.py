"""
Document-level node definitions: parameters, responses, operations,
paths and the Swagger specification root.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar, Union

from ..utils import snake_to_pascal_case
from .schema import Metadata, Reference, Schema, SimpleType

if TYPE_CHECKING:
    from ..analyzer.reference_resolver import ReferenceResolver

T = TypeVar("T")


class ParameterLocation(str, Enum):
    """Where a parameter is sent ("in")."""

    QUERY = "query"
    HEADER = "header"
    PATH = "path"
    FORM_DATA = "formData"
    BODY = "body"


class HttpMethod(str, Enum):
    """HTTP methods a path item can declare, in Swagger order."""

    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"


@dataclass(frozen=True)
class PossibleReference(Generic[T]):
    """Either an inline value or a reference to a document table entry."""

    value: T | None = None
    reference: Reference | None = None

    @property
    def is_reference(self) -> bool:
        return self.reference is not None

    def is_unresolved(self, resolver: ReferenceResolver, component: str) -> bool:
        """A reference with no target in `component`, or an inline value holding one."""
        if self.reference is not None:
            return not resolver.is_resolvable(self.reference, component)
        return self.value is not None and self.value.is_unresolved(resolver)


@dataclass(frozen=True)
class SimpleItem:
    kind: SimpleType = SimpleType.STRING


@dataclass(frozen=True)
class ArrayItem:
    items: Item | None = None


@dataclass(frozen=True)
class Item:
    """A non-body parameter value (or array element) description."""

    type: Union[SimpleItem, ArrayItem] = field(default_factory=SimpleItem)
    metadata: Metadata = field(default_factory=Metadata)
    format: str | None = None
    collection_format: str | None = None


@dataclass(frozen=True)
class BodyParameter:
    schema: Schema = field(default_factory=Schema)


@dataclass(frozen=True)
class OtherParameter:
    item: Item = field(default_factory=Item)


@dataclass(frozen=True)
class Parameter:
    name: str = ""
    location: ParameterLocation = ParameterLocation.QUERY
    description: str | None = None
    required: bool = False
    type: Union[BodyParameter, OtherParameter] = field(default_factory=OtherParameter)

    def is_unresolved(self, resolver: ReferenceResolver) -> bool:
        # Items cannot hold references
        return isinstance(self.type, BodyParameter) and self.type.schema.is_unresolved(resolver)


@dataclass(frozen=True)
class Response:
    description: str | None = None
    schema: Schema | None = None

    def is_unresolved(self, resolver: ReferenceResolver) -> bool:
        return self.schema is not None and self.schema.is_unresolved(resolver)


@dataclass(frozen=True)
class OperationResponse:
    """A response of an operation, keyed by status code (None for "default")."""

    status_code: int | None = None
    response: PossibleReference[Response] = field(default_factory=PossibleReference)

    @property
    def successful(self) -> bool:
        return self.status_code is not None and str(self.status_code).startswith("2")

    @property
    def name(self) -> str:
        if self.status_code is not None:
            return f"Status{self.status_code}"
        return "DefaultResponse"

    def is_unresolved(self, resolver: ReferenceResolver) -> bool:
        return self.response.is_unresolved(resolver, "responses")


@dataclass(frozen=True)
class Operation:
    path: str = ""
    method: HttpMethod = HttpMethod.GET
    tags: list[str] = field(default_factory=list)
    parameters: list[PossibleReference[Parameter]] = field(default_factory=list)
    responses: list[OperationResponse] = field(default_factory=list)
    operation_id: str | None = None
    summary: str | None = None
    description: str | None = None
    deprecated: bool = False

    @property
    def generated_identifier(self) -> str:
        """operationId, or method + PascalCase path segments ("getPetsByPetId")."""
        if self.operation_id:
            return self.operation_id
        parts = []
        for segment in self.path.split("/"):
            if not segment:
                continue
            if segment.startswith("{") and segment.endswith("}"):
                parts.append("By" + snake_to_pascal_case(segment[1:-1]))
            else:
                parts.append(snake_to_pascal_case(segment))
        return self.method.value + "".join(parts)

    def is_unresolved(self, resolver: ReferenceResolver) -> bool:
        """Whether any parameter or response references something missing."""
        return any(parameter.is_unresolved(resolver, "parameters") for parameter in self.parameters) or any(
            response.is_unresolved(resolver) for response in self.responses
        )


@dataclass(frozen=True)
class Path:
    path: str = ""
    operations: list[Operation] = field(default_factory=list)
    parameters: list[PossibleReference[Parameter]] = field(default_factory=list)

    def is_unresolved(self, resolver: ReferenceResolver) -> bool:
        return any(operation.is_unresolved(resolver) for operation in self.operations) or any(
            parameter.is_unresolved(resolver, "parameters") for parameter in self.parameters
        )


@dataclass(frozen=True)
class SwaggerSpec:
    """Root of a decoded Swagger 2 document."""

    info: dict[str, Any] = field(default_factory=dict)
    paths: list[Path] = field(default_factory=list)
    definitions: dict[str, Schema] = field(default_factory=dict)
    parameters: dict[str, Parameter] = field(default_factory=dict)
    responses: dict[str, Response] = field(default_factory=dict)

    # Names from the top-level "tags" list
    declared_tags: list[str] = field(default_factory=list)

    @property
    def operations(self) -> list[Operation]:
        return [operation for path in self.paths for operation in path.operations]

    @property
    def tags(self) -> list[str]:
        """Declared tags, then tags only used by operations, without duplicates."""
        tags = list(dict.fromkeys(self.declared_tags))
        seen = set(tags)
        for operation in self.operations:
            for tag in operation.tags:
                if tag not in seen:
                    seen.add(tag)
                    tags.append(tag)
        return tags
