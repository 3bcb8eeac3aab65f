"""
allOf inheritance resolution.

A schema's parent is the first $ref subschema of its allOf composition.
Inherited property lists put the whole ancestor chain (root-most first)
ahead of the schema's own properties.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..errors import InheritanceCycleError
from ..model.schema import ComponentObject, Property, Schema
from ..model.spec import SwaggerSpec
from .ledger import ReferenceLedger
from .reference_resolver import ReferenceResolver

logger = logging.getLogger(__name__)

# Ledger key for references held by schemas that have no name
INLINE_OWNER = "<inline>"


class InheritanceResolver:
    """Walks allOf parent chains with cycle detection."""

    def __init__(self, spec: SwaggerSpec, ledger: ReferenceLedger, resolver: ReferenceResolver | None = None):
        self.spec = spec
        self.ledger = ledger
        self.resolver = resolver or ReferenceResolver(spec, ledger)

    def parent(self, schema: Schema, owner: str | None = None) -> ComponentObject | None:
        """
        Resolve the parent of an allOf schema.

        Args:
            schema: The schema whose parent is wanted
            owner: Name of the schema (ledger key for an unresolved parent)

        Returns:
            The named parent schema, or None if there is none or it cannot be resolved
        """
        reference = schema.parent_reference
        if reference is None:
            return None
        return self.resolver.resolve_schema(reference, owner or INLINE_OWNER)

    def ancestors(self, schema: Schema, owner: str | None = None) -> list[ComponentObject]:
        """
        Collect the ancestor chain, nearest parent first.

        Raises:
            InheritanceCycleError: If the chain revisits a schema
        """
        visited = [owner] if owner else []
        chain: list[ComponentObject] = []

        current, current_owner = schema, owner
        while True:
            parent = self.parent(current, current_owner)
            if parent is None:
                break
            if parent.name in visited:
                cycle = visited[visited.index(parent.name) :]
                logger.debug("Inheritance cycle %s", cycle)
                raise InheritanceCycleError(cycle)
            visited.append(parent.name)
            chain.append(parent)
            current, current_owner = parent.value, parent.name

        return chain

    def lineage(self, schema: Schema, owner: str | None = None) -> list[ComponentObject]:
        """
        The ancestor chain, root-most first, ending with the schema itself.

        Walks the parent chain once; pass the result to the inherited_*
        methods to reuse it.

        Raises:
            InheritanceCycleError: If the chain revisits a schema
        """
        chain = list(reversed(self.ancestors(schema, owner)))
        return chain + [ComponentObject(name=owner or INLINE_OWNER, value=schema)]

    def _inherited(
        self,
        schema: Schema,
        owner: str | None,
        lineage: list[ComponentObject] | None,
        own: Callable[[Schema], list[Property]],
    ) -> list[Property]:
        if lineage is None:
            lineage = self.lineage(schema, owner)
        return [prop for entry in lineage for prop in own(entry.value)]

    def inherited_required_properties(
        self, schema: Schema, owner: str | None = None, lineage: list[ComponentObject] | None = None
    ) -> list[Property]:
        return self._inherited(schema, owner, lineage, lambda s: s.required_properties)

    def inherited_optional_properties(
        self, schema: Schema, owner: str | None = None, lineage: list[ComponentObject] | None = None
    ) -> list[Property]:
        return self._inherited(schema, owner, lineage, lambda s: s.optional_properties)

    def inherited_properties(
        self, schema: Schema, owner: str | None = None, lineage: list[ComponentObject] | None = None
    ) -> list[Property]:
        """All properties: inherited required, then inherited optional."""
        if lineage is None:
            lineage = self.lineage(schema, owner)
        return self.inherited_required_properties(schema, owner, lineage) + self.inherited_optional_properties(
            schema, owner, lineage
        )
