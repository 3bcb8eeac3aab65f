"""
Operation grouping by tag.
"""

from __future__ import annotations

from ..model.spec import Operation, Parameter, ParameterLocation, SwaggerSpec
from .reference_resolver import ReferenceResolver

# Bucket for operations without tags
UNTAGGED = ""


def _sorted(operations: list[Operation]) -> list[Operation]:
    return sorted(operations, key=lambda operation: operation.generated_identifier)


def operations_by_tag(spec: SwaggerSpec, include_untagged: bool = True) -> dict[str, list[Operation]]:
    """
    Group operations by tag, each group sorted by generated identifier.

    Operations without tags go under "" (only when there are some). Every
    tag gets a group, possibly empty; an operation with several tags is
    listed in each of their groups.

    Args:
        spec: The parsed document
        include_untagged: Whether to produce the "" group

    Returns:
        Mapping from tag to operations
    """
    operations = spec.operations
    groups: dict[str, list[Operation]] = {}

    untagged = _sorted([operation for operation in operations if not operation.tags])
    if include_untagged and untagged:
        groups[UNTAGGED] = untagged

    for tag in spec.tags:
        groups[tag] = _sorted([operation for operation in operations if tag in operation.tags])

    return groups


def operation_parameters(operation: Operation, location: ParameterLocation, resolver: ReferenceResolver) -> list[Parameter]:
    """Resolved parameters of an operation sent at one location."""
    parameters = []
    for possible in operation.parameters:
        parameter = resolver.resolve_parameter(possible, operation.generated_identifier)
        if parameter is not None and parameter.location is location:
            parameters.append(parameter)
    return parameters
