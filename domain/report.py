"""Validation report: ordered findings plus the loaded registry state."""

from dataclasses import dataclass, field

from domain.schemas import AssetDescriptor, IconMetadata
from domain.taxonomy import Taxonomy


@dataclass
class ValidationReport:
    """
    Result of one validation run.

    errors/warnings keep discovery order (taxonomy, metadata documents, asset files);
    they are never re-sorted. A run has failed iff `errors` is non-empty.
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    metadata: dict[str, IconMetadata] = field(default_factory=dict)
    taxonomy: Taxonomy | None = None
    assets: list[AssetDescriptor] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_errors(self, messages: list[str]) -> None:
        self.errors.extend(messages)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def add_warnings(self, messages: list[str]) -> None:
        self.warnings.extend(messages)
