"""
Exceptions and warnings raised while parsing and analyzing a document.
"""

from __future__ import annotations


class SwaggerCodegenError(Exception):
    """Base class for all errors raised by this package."""

    pass


class SpecParseError(SwaggerCodegenError):
    """Raised when a decoded document cannot be mapped onto the model.

    This can happen when:
    - A section that must be a mapping (paths, definitions, a schema) is not
    - A response status code is neither an integer nor "default"
    - A parameter has an unknown "in" location
    """

    def __init__(self, message: str, source_path: str = ""):
        self.source_path = source_path
        super().__init__(f"{source_path}: {message}" if source_path else message)


class InheritanceCycleError(SwaggerCodegenError):
    """Raised when an allOf parent chain revisits a schema.

    Attributes:
        cycle: Schema identifiers from the first revisited one, in walk order
    """

    def __init__(self, cycle: list[str]):
        self.cycle = list(cycle)
        super().__init__("Inheritance cycle detected: " + " -> ".join(self.cycle + self.cycle[:1]))


class UnresolvedReferenceError(SwaggerCodegenError):
    """Raised by the analyzer when configured to fail on unresolved references.

    Attributes:
        references: Ledger snapshot, owner identifier -> unresolved targets
    """

    def __init__(self, references: dict[str, frozenset[str]]):
        self.references = references
        count = sum(len(targets) for targets in references.values())
        super().__init__(f"{count} unresolved reference(s) in {len(references)} object(s)")


class MalformedEnumMetadataWarning(UserWarning):
    """Issued when enum names are present but do not match the enum values in length.

    The enum is still built with the names as given.
    """

    pass
