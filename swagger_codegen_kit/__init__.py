"""Swagger Codegen Kit

Derived metadata for code generators working from a Swagger 2 document:
allOf inheritance resolution, enum discovery, operation grouping by tag
and tracking of unresolved references.
"""

__version__ = "1.0.0"

from .analyzer import (
    AnalysisResult,
    Enum,
    EnumDeriver,
    InheritanceResolver,
    ReferenceLedger,
    SchemaSummary,
    SpecAnalyzer,
    derive_enum,
    operations_by_tag,
)
from .config import AnalyzerConfig
from .errors import (
    InheritanceCycleError,
    MalformedEnumMetadataWarning,
    SpecParseError,
    SwaggerCodegenError,
    UnresolvedReferenceError,
)
from .model import SpecParser, SwaggerSpec
from .report import render_report

__all__ = [
    "AnalysisResult",
    "AnalyzerConfig",
    "Enum",
    "EnumDeriver",
    "InheritanceCycleError",
    "InheritanceResolver",
    "MalformedEnumMetadataWarning",
    "ReferenceLedger",
    "SchemaSummary",
    "SpecAnalyzer",
    "SpecParseError",
    "SpecParser",
    "SwaggerCodegenError",
    "SwaggerSpec",
    "UnresolvedReferenceError",
    "derive_enum",
    "operations_by_tag",
    "render_report",
]
