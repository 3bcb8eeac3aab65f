"""
Swagger 2 document parser that builds the model.

Maps an already-decoded document (the dict produced by json.load or a
YAML loader) onto the immutable model. References are kept as named
handles; nothing is dereferenced here.
"""

from __future__ import annotations

from typing import Any

from ..config import AnalyzerConfig
from ..errors import SpecParseError
from .schema import (
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

_SIMPLE_TYPES = {t.value: t for t in SimpleType}
_METHODS = {m.value: m for m in HttpMethod}
_LOCATIONS = {loc.value: loc for loc in ParameterLocation}


def _infer_enum_type(values: Any) -> str:
    """Simple type name shared by every non-null enum value, "string" otherwise."""
    present = [value for value in values if value is not None] if isinstance(values, list) else []
    if not present:
        return "string"
    if all(isinstance(value, bool) for value in present):
        return "boolean"
    numbers = [value for value in present if isinstance(value, (int, float)) and not isinstance(value, bool)]
    if len(numbers) == len(present):
        return "integer" if all(isinstance(value, int) for value in numbers) else "number"
    return "string"


class SpecParser:
    """Parses a decoded Swagger 2 document into a SwaggerSpec."""

    def __init__(self, config: AnalyzerConfig | None = None):
        self.config = config or AnalyzerConfig()

    def parse(self, document: dict[str, Any]) -> SwaggerSpec:
        """
        Parse a decoded Swagger document.

        Args:
            document: The decoded document dictionary

        Returns:
            SwaggerSpec with paths, component tables and declared tags

        Raises:
            SpecParseError: If a node does not have the expected shape
        """
        self._expect_mapping(document, "#")

        definitions = {
            name: self._parse_schema(value, f"#/definitions/{name}")
            for name, value in self._section(document, "definitions").items()
        }
        parameters = {
            name: self._parse_parameter(value, f"#/parameters/{name}")
            for name, value in self._section(document, "parameters").items()
        }
        responses = {
            name: self._parse_response(value, f"#/responses/{name}")
            for name, value in self._section(document, "responses").items()
        }
        paths = [
            self._parse_path(name, value, f"#/paths/{name}")
            for name, value in self._section(document, "paths").items()
            if not name.startswith("x-")
        ]

        return SwaggerSpec(
            info=dict(document.get("info") or {}),
            paths=paths,
            definitions=definitions,
            parameters=parameters,
            responses=responses,
            declared_tags=self._parse_tags(document.get("tags") or []),
        )

    def _section(self, document: dict[str, Any], key: str) -> dict[str, Any]:
        section = document.get(key)
        if section is None:
            return {}
        self._expect_mapping(section, f"#/{key}")
        return section

    def _expect_mapping(self, value: Any, path: str) -> None:
        if not isinstance(value, dict):
            raise SpecParseError(f"expected a mapping, got {type(value).__name__}", path)

    def _parse_tags(self, tags: list[Any]) -> list[str]:
        names = []
        for tag in tags:
            name = tag.get("name") if isinstance(tag, dict) else tag
            if isinstance(name, str) and name:
                names.append(name)
        return names

    # Schemas

    def _parse_metadata(self, schema: dict[str, Any]) -> Metadata:
        """Extract descriptive keywords and x-* extensions."""
        extensions = {k: v for k, v in schema.items() if k.startswith("x-")}

        enum_names = None
        for key in self.config.enum_names_extensions:
            if key in schema:
                enum_names = list(schema[key])
                break

        enum_values = schema.get("enum")
        return Metadata(
            title=schema.get("title"),
            description=schema.get("description"),
            enum_values=list(enum_values) if enum_values is not None else None,
            enum_names=enum_names,
            default=schema.get("default"),
            example=schema.get("example"),
            nullable=bool(schema.get("x-nullable", schema.get("nullable", False))),
            extensions=extensions,
        )

    def _parse_schema(self, schema: Any, path: str) -> Schema:
        """
        Parse a schema node recursively.

        Args:
            schema: The schema dictionary
            path: Current path in the document (for error messages)

        Returns:
            Schema wrapping the matching variant
        """
        self._expect_mapping(schema, path)
        metadata = self._parse_metadata(schema)

        if "$ref" in schema:
            return Schema(type=ReferenceSchema(Reference(schema["$ref"])), metadata=metadata)

        if "allOf" in schema:
            subschemas = [self._parse_schema(sub, f"{path}/allOf/{i}") for i, sub in enumerate(schema["allOf"])]
            return Schema(type=AllOfSchema(subschemas), metadata=metadata)

        type_value = schema.get("type")
        if isinstance(type_value, list):
            # ["string", "null"] style: keep the first non-null type
            non_null = [t for t in type_value if t != "null"]
            type_value = non_null[0] if non_null else None

        if type_value is None and "enum" in schema and "properties" not in schema and "additionalProperties" not in schema:
            # Untyped enum: the values decide
            type_value = _infer_enum_type(schema["enum"])

        if type_value == "array" or (type_value is None and "items" in schema):
            return Schema(type=self._parse_array(schema, path), metadata=metadata)

        if type_value == "object" or type_value is None:
            return Schema(type=self._parse_object(schema, path), metadata=metadata)

        if type_value in _SIMPLE_TYPES:
            return Schema(type=SimpleSchema(_SIMPLE_TYPES[type_value]), metadata=metadata)

        raise SpecParseError(f"unsupported schema type {type_value!r}", path)

    def _parse_array(self, schema: dict[str, Any], path: str) -> ArraySchema:
        items_schema = schema.get("items")
        if items_schema is None:
            return ArraySchema()
        if isinstance(items_schema, list):
            return ArraySchema([self._parse_schema(item, f"{path}/items/{i}") for i, item in enumerate(items_schema)])
        return ArraySchema(self._parse_schema(items_schema, f"{path}/items"))

    def _parse_object(self, schema: dict[str, Any], path: str) -> ObjectSchema:
        required_fields = schema.get("required") or []
        raw_properties = schema.get("properties") or {}
        self._expect_mapping(raw_properties, f"{path}/properties")

        properties = [
            Property(
                name=name,
                required=name in required_fields,
                schema=self._parse_schema(prop_schema, f"{path}/properties/{name}"),
            )
            for name, prop_schema in raw_properties.items()
        ]

        additional = schema.get("additionalProperties", True)
        if isinstance(additional, dict):
            additional = self._parse_schema(additional, f"{path}/additionalProperties")
        elif not isinstance(additional, bool):
            raise SpecParseError("additionalProperties must be a boolean or a schema", path)

        return ObjectSchema(properties=properties, additional_properties=additional)

    # Parameters and responses

    def _parse_item(self, item: Any, path: str) -> Item:
        self._expect_mapping(item, path)
        type_value = item.get("type", "string")
        if type_value == "array":
            items = item.get("items")
            item_type = ArrayItem(self._parse_item(items, f"{path}/items") if items is not None else None)
        elif type_value in _SIMPLE_TYPES:
            item_type = SimpleItem(_SIMPLE_TYPES[type_value])
        else:
            raise SpecParseError(f"unsupported item type {type_value!r}", path)

        return Item(
            type=item_type,
            metadata=self._parse_metadata(item),
            format=item.get("format"),
            collection_format=item.get("collectionFormat"),
        )

    def _parse_parameter(self, parameter: Any, path: str) -> Parameter:
        self._expect_mapping(parameter, path)
        location = _LOCATIONS.get(parameter.get("in"))
        if location is None:
            raise SpecParseError(f"unknown parameter location {parameter.get('in')!r}", path)

        if location is ParameterLocation.BODY:
            param_type = BodyParameter(self._parse_schema(parameter.get("schema") or {}, f"{path}/schema"))
        else:
            param_type = OtherParameter(self._parse_item(parameter, path))

        return Parameter(
            name=parameter.get("name", ""),
            location=location,
            description=parameter.get("description"),
            required=bool(parameter.get("required", location is ParameterLocation.PATH)),
            type=param_type,
        )

    def _parse_possible_parameter(self, parameter: Any, path: str) -> PossibleReference[Parameter]:
        if isinstance(parameter, dict) and "$ref" in parameter:
            return PossibleReference(reference=Reference(parameter["$ref"]))
        return PossibleReference(value=self._parse_parameter(parameter, path))

    def _parse_response(self, response: Any, path: str) -> Response:
        self._expect_mapping(response, path)
        schema = response.get("schema")
        return Response(
            description=response.get("description"),
            schema=self._parse_schema(schema, f"{path}/schema") if schema is not None else None,
        )

    def _parse_operation_response(self, key: str, response: Any, path: str) -> OperationResponse:
        if key == "default":
            status_code = None
        else:
            try:
                status_code = int(key)
            except ValueError:
                raise SpecParseError(f"invalid status code {key!r}", path) from None

        if isinstance(response, dict) and "$ref" in response:
            possible = PossibleReference(reference=Reference(response["$ref"]))
        else:
            possible = PossibleReference(value=self._parse_response(response, path))
        return OperationResponse(status_code=status_code, response=possible)

    # Paths and operations

    def _parse_path(self, name: str, path_item: Any, path: str) -> Path:
        self._expect_mapping(path_item, path)
        path_parameters = [
            self._parse_possible_parameter(p, f"{path}/parameters/{i}") for i, p in enumerate(path_item.get("parameters") or [])
        ]

        operations = []
        for key, value in path_item.items():
            method = _METHODS.get(key)
            if method is None or not isinstance(value, dict):
                continue
            operations.append(self._parse_operation(name, method, value, path_parameters, f"{path}/{key}"))

        return Path(path=name, operations=operations, parameters=path_parameters)

    def _parse_operation(
        self,
        path_name: str,
        method: HttpMethod,
        operation: dict[str, Any],
        path_parameters: list[PossibleReference[Parameter]],
        path: str,
    ) -> Operation:
        own_parameters = [
            self._parse_possible_parameter(p, f"{path}/parameters/{i}") for i, p in enumerate(operation.get("parameters") or [])
        ]

        # Path parameters are inherited unless the operation overrides them
        own_keys = {_parameter_key(p) for p in own_parameters}
        inherited = [p for p in path_parameters if _parameter_key(p) not in own_keys]

        raw_responses = operation.get("responses") or {}
        self._expect_mapping(raw_responses, f"{path}/responses")
        responses = [
            self._parse_operation_response(str(key), value, f"{path}/responses/{key}")
            for key, value in raw_responses.items()
            if not str(key).startswith("x-")
        ]

        return Operation(
            path=path_name,
            method=method,
            tags=list(operation.get("tags") or []),
            parameters=inherited + own_parameters,
            responses=responses,
            operation_id=operation.get("operationId"),
            summary=operation.get("summary"),
            description=operation.get("description"),
            deprecated=bool(operation.get("deprecated", False)),
        )


def _parameter_key(parameter: PossibleReference[Parameter]) -> tuple[str, str]:
    """Identity of a parameter for override purposes."""
    if parameter.reference is not None:
        return ("$ref", parameter.reference.path)
    return (parameter.value.name, parameter.value.location.value)
