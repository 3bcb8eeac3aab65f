"""
Configuration for document analysis.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class AnalyzerConfig:
    """Configuration options for the analyzer and the parser."""

    # Enum name used for an additionalProperties enum schema without a title
    unknown_enum_name: str = "UNKNOWN_ENUM"

    # Whether operations without tags are grouped under ""
    include_untagged: bool = True

    # Re-raise the first inheritance cycle instead of collecting it
    fail_on_cycle: bool = False

    # Raise UnresolvedReferenceError at the end of a run with ledger entries
    fail_on_unresolved: bool = False

    # Extensions read (first match wins) for human-readable enum case names
    enum_names_extensions: list[str] = field(default_factory=lambda: ["x-enum-varnames", "x-enum-names"])

    @staticmethod
    def from_dict(d: dict) -> AnalyzerConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        config = AnalyzerConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "unknown_enum_name": self.unknown_enum_name,
            "include_untagged": self.include_untagged,
            "fail_on_cycle": self.fail_on_cycle,
            "fail_on_unresolved": self.fail_on_unresolved,
            "enum_names_extensions": list(self.enum_names_extensions),
        }
