"""
Document analyzer that builds the derived metadata for code generation.

One `analyze()` call is one run: the reference ledger is reset, every
derived fact is computed, and the ledger snapshot is taken last.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..config import AnalyzerConfig
from ..errors import InheritanceCycleError, UnresolvedReferenceError
from ..model.schema import Property, Schema
from ..model.spec import Operation, SwaggerSpec
from .enums import Enum, EnumDeriver
from .inheritance import InheritanceResolver
from .ledger import ReferenceLedger
from .operations import operations_by_tag
from .reference_resolver import ReferenceResolver

logger = logging.getLogger(__name__)


@dataclass
class SchemaSummary:
    """Inheritance-resolved view of one named schema."""

    name: str = ""
    parent: str | None = None
    ancestors: list[str] = field(default_factory=list)  # nearest first
    properties: list[Property] = field(default_factory=list)
    required_properties: list[Property] = field(default_factory=list)
    optional_properties: list[Property] = field(default_factory=list)
    enums: list[Enum] = field(default_factory=list)
    generate_inline_schema: bool = False


@dataclass
class AnalysisResult:
    """Everything derived from one document."""

    operations_by_tag: dict[str, list[Operation]] = field(default_factory=dict)
    enums: list[Enum] = field(default_factory=list)
    schemas: list[SchemaSummary] = field(default_factory=list)
    cycle_errors: list[InheritanceCycleError] = field(default_factory=list)
    unresolved_references: dict[str, frozenset[str]] = field(default_factory=dict)

    @property
    def has_errors(self) -> bool:
        return bool(self.cycle_errors)

    @property
    def unresolved_count(self) -> int:
        return sum(len(targets) for targets in self.unresolved_references.values())

    def schema(self, name: str) -> SchemaSummary | None:
        for summary in self.schemas:
            if summary.name == name:
                return summary
        return None


class SpecAnalyzer:
    """Analyzes a SwaggerSpec and builds an AnalysisResult."""

    def __init__(self, spec: SwaggerSpec, config: AnalyzerConfig | None = None, ledger: ReferenceLedger | None = None):
        """
        Initialize the analyzer.

        Args:
            spec: The parsed document
            config: Analysis configuration
            ledger: Ledger to record unresolved references in (a new one by default)
        """
        self.spec = spec
        self.config = config or AnalyzerConfig()
        self.ledger = ledger if ledger is not None else ReferenceLedger()
        self.resolver = ReferenceResolver(spec, self.ledger)
        self.inheritance = InheritanceResolver(spec, self.ledger, self.resolver)
        self.enums = EnumDeriver(spec, self.ledger, self.config, self.inheritance)

    def operations_by_tag(self) -> dict[str, list[Operation]]:
        return operations_by_tag(self.spec, include_untagged=self.config.include_untagged)

    def all_enums(self) -> list[Enum]:
        return self.enums.all_enums()

    def summarize_schema(self, name: str, schema: Schema) -> SchemaSummary:
        """
        Build the inheritance-resolved summary of a named schema.

        Raises:
            InheritanceCycleError: If the schema's parent chain is cyclic
        """
        lineage = self.inheritance.lineage(schema, name)
        ancestors = [entry.name for entry in reversed(lineage[:-1])]
        required = self.inheritance.inherited_required_properties(schema, name, lineage)
        optional = self.inheritance.inherited_optional_properties(schema, name, lineage)
        return SchemaSummary(
            name=name,
            parent=ancestors[0] if ancestors else None,
            ancestors=ancestors,
            properties=required + optional,
            required_properties=required,
            optional_properties=optional,
            enums=self.enums.inherited_enums(schema, name, lineage),
            generate_inline_schema=schema.generate_inline_schema,
        )

    def analyze(self) -> AnalysisResult:
        """
        Run the whole analysis.

        Returns:
            AnalysisResult; schemas with a cyclic parent chain are left out
            and their errors collected in `cycle_errors`

        Raises:
            InheritanceCycleError: On the first cycle, if `fail_on_cycle` is set
            UnresolvedReferenceError: After the run, if `fail_on_unresolved`
                is set and references were left unresolved
        """
        self.ledger.reset()
        result = AnalysisResult(
            operations_by_tag=self.operations_by_tag(),
            enums=self.all_enums(),
        )

        for name, schema in self.spec.definitions.items():
            try:
                result.schemas.append(self.summarize_schema(name, schema))
            except InheritanceCycleError as e:
                if self.config.fail_on_cycle:
                    raise
                logger.error("Skipping schema %s: %s", name, e)
                result.cycle_errors.append(e)

        result.unresolved_references = self.ledger.snapshot()
        if result.unresolved_references:
            logger.warning("%d unresolved references found", result.unresolved_count)
            if self.config.fail_on_unresolved:
                raise UnresolvedReferenceError(result.unresolved_references)

        return result
