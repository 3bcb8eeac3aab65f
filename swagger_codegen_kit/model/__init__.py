"""
Immutable model of a decoded Swagger 2 document.
"""

from __future__ import annotations

from .parser import SpecParser
from .schema import (
    AllOfSchema,
    ArraySchema,
    ComponentObject,
    Metadata,
    ObjectSchema,
    Property,
    Reference,
    ReferenceSchema,
    Schema,
    SchemaType,
    SimpleSchema,
    SimpleType,
)
from .spec import (
    ArrayItem,
    BodyParameter,
    HttpMethod,
    Item,
    Operation,
    OperationResponse,
    OtherParameter,
    Parameter,
    ParameterLocation,
    Path,
    PossibleReference,
    Response,
    SimpleItem,
    SwaggerSpec,
)

__all__ = [
    "AllOfSchema",
    "ArrayItem",
    "ArraySchema",
    "BodyParameter",
    "ComponentObject",
    "HttpMethod",
    "Item",
    "Metadata",
    "ObjectSchema",
    "Operation",
    "OperationResponse",
    "OtherParameter",
    "Parameter",
    "ParameterLocation",
    "Path",
    "PossibleReference",
    "Property",
    "Reference",
    "ReferenceSchema",
    "Response",
    "Schema",
    "SchemaType",
    "SimpleItem",
    "SimpleSchema",
    "SimpleType",
    "SpecParser",
    "SwaggerSpec",
]
