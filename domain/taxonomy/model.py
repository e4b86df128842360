"""Taxonomy snapshot: the closed vocabularies icons are checked against."""

import re
from functools import cached_property

from pydantic import BaseModel, ConfigDict, Field


class Taxonomy(BaseModel):
    """
    Immutable taxonomy snapshot, loaded once per run.

    Membership rules:
    - vendors: an empty list means "any vendor"
    - categories/tags/variants: membership is always required once a taxonomy is loaded
    - id_pattern/variant_pattern: None disables the check; matching uses re.search.
      Patterns are validated by parse_taxonomy_config before a snapshot is built.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    vendors: tuple[str, ...] = Field(default_factory=tuple)
    categories: tuple[str, ...] = Field(default_factory=tuple)
    tags: tuple[str, ...] = Field(default_factory=tuple)
    variants: tuple[str, ...] = Field(default_factory=tuple)
    id_pattern: str | None = Field(default=None, alias="idPattern")
    variant_pattern: str | None = Field(default=None, alias="variantPattern")

    @cached_property
    def id_regex(self) -> re.Pattern[str] | None:
        return re.compile(self.id_pattern) if self.id_pattern else None

    @cached_property
    def variant_regex(self) -> re.Pattern[str] | None:
        return re.compile(self.variant_pattern) if self.variant_pattern else None

    def id_matches(self, icon_id: str) -> bool:
        return self.id_regex is None or self.id_regex.search(icon_id) is not None

    def variant_matches(self, variant: str) -> bool:
        return self.variant_regex is None or self.variant_regex.search(variant) is not None

    def allows_vendor(self, vendor: object) -> bool:
        return not self.vendors or vendor in self.vendors

    def allows_category(self, category: object) -> bool:
        return category in self.categories

    def allows_tag(self, tag: object) -> bool:
        return tag in self.tags

    def allows_variant(self, variant: object) -> bool:
        return variant in self.variants

    def to_document(self) -> dict:
        """JSON-ready form using the on-disk key names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
