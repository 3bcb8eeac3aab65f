"""
Reference resolver for $ref resolution.

Resolves named references against the document tables. Targets that
cannot be found are recorded in the ReferenceLedger and resolve to None.
"""

from __future__ import annotations

import logging
from typing import Any

from ..model.schema import ComponentObject, Reference
from ..model.spec import Parameter, PossibleReference, Response, SwaggerSpec
from .ledger import ReferenceLedger

logger = logging.getLogger(__name__)


class ReferenceResolver:
    """Resolves references to entries of a SwaggerSpec."""

    def __init__(self, spec: SwaggerSpec, ledger: ReferenceLedger):
        """
        Initialize the resolver.

        Args:
            spec: The parsed document
            ledger: Where unresolved references are recorded
        """
        self.spec = spec
        self.ledger = ledger
        self._tables: dict[str, dict[str, Any]] = {
            "definitions": spec.definitions,
            "parameters": spec.parameters,
            "responses": spec.responses,
        }

    def lookup(self, reference: Reference, component: str) -> ComponentObject | None:
        """Find the target of a reference without recording anything."""
        # External references are never part of this document
        if not reference.path.startswith("#") or reference.component != component:
            return None
        table = self._tables[component]
        if reference.name not in table:
            return None
        return ComponentObject(name=reference.name, value=table[reference.name])

    def resolve(self, reference: Reference, component: str, owner: str) -> ComponentObject | None:
        """
        Resolve a reference into one table.

        Args:
            reference: The reference to resolve
            component: Expected table ("definitions", "parameters" or "responses")
            owner: Identifier of the object holding the reference (ledger key)

        Returns:
            ComponentObject with the target name and value, or None when unresolved
        """
        resolved = self.lookup(reference, component)
        if resolved is None:
            logger.warning("Unresolved reference %s in %s", reference.path, owner)
            self.ledger.add(reference.path, owner)
        return resolved

    def resolve_schema(self, reference: Reference, owner: str) -> ComponentObject | None:
        return self.resolve(reference, "definitions", owner)

    def resolve_parameter(self, parameter: PossibleReference[Parameter], owner: str) -> Parameter | None:
        if parameter.reference is None:
            return parameter.value
        resolved = self.resolve(parameter.reference, "parameters", owner)
        return resolved.value if resolved else None

    def resolve_response(self, response: PossibleReference[Response], owner: str) -> Response | None:
        if response.reference is None:
            return response.value
        resolved = self.resolve(response.reference, "responses", owner)
        return resolved.value if resolved else None

    def is_resolvable(self, reference: Reference, component: str) -> bool:
        return self.lookup(reference, component) is not None
