"""
Derived metadata for code generation: inheritance, enums and tag groups.
"""

from __future__ import annotations

from .analyzer import AnalysisResult, SchemaSummary, SpecAnalyzer
from .enums import Enum, EnumDeriver, EnumType, ItemEnumType, SchemaEnumType, derive_enum
from .inheritance import INLINE_OWNER, InheritanceResolver
from .ledger import ReferenceLedger
from .operations import UNTAGGED, operation_parameters, operations_by_tag
from .reference_resolver import ReferenceResolver

__all__ = [
    "AnalysisResult",
    "Enum",
    "EnumDeriver",
    "EnumType",
    "INLINE_OWNER",
    "InheritanceResolver",
    "ItemEnumType",
    "ReferenceLedger",
    "ReferenceResolver",
    "SchemaEnumType",
    "SchemaSummary",
    "SpecAnalyzer",
    "UNTAGGED",
    "derive_enum",
    "operation_parameters",
    "operations_by_tag",
]
