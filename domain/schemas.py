"""Pydantic models for icon metadata records and asset descriptors."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from domain.identifiers import make_icon_id


def _str_tuple(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(v for v in value if isinstance(v, str))


def _str_or_empty(value: Any) -> str:
    return value if isinstance(value, str) else ""


class IconSource(BaseModel):
    """Provenance of an icon's artwork."""

    model_config = ConfigDict(frozen=True)

    url: str = ""
    license: str = ""


class IconMetadata(BaseModel):
    """One icon, as declared by `<meta>/<id>.json`."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Globally unique `<vendor>.<slug>` key.")
    name: str = ""
    vendor: str = ""
    categories: tuple[str, ...] = Field(default_factory=tuple)
    tags: tuple[str, ...] = Field(default_factory=tuple)
    variants: tuple[str, ...] = Field(default_factory=tuple)
    default_variant: str | None = Field(default=None, alias="defaultVariant")
    aliases: tuple[str, ...] | None = None
    source: IconSource = Field(default_factory=IconSource)

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "IconMetadata":
        """
        Build a record from a raw metadata document.

        Structural problems are reported by domain.checks.metadata before this is
        called; here wrong-typed values simply become empty, so a record can
        still be handed downstream for cross-referencing.
        """
        source = doc.get("source")
        if not isinstance(source, dict):
            source = {}
        default_variant = doc.get("defaultVariant")
        aliases = doc.get("aliases")
        return cls(
            id=_str_or_empty(doc.get("id")),
            name=_str_or_empty(doc.get("name")),
            vendor=_str_or_empty(doc.get("vendor")),
            categories=_str_tuple(doc.get("categories")),
            tags=_str_tuple(doc.get("tags")),
            variants=_str_tuple(doc.get("variants")),
            default_variant=default_variant if isinstance(default_variant, str) and default_variant else None,
            aliases=_str_tuple(aliases) if isinstance(aliases, list) else None,
            source=IconSource(
                url=_str_or_empty(source.get("url")),
                license=_str_or_empty(source.get("license")),
            ),
        )

    def has_variant(self, variant: str) -> bool:
        return variant in self.variants


class AssetDescriptor(BaseModel):
    """One SVG file discovered under `<icons>/<vendor>/`."""

    model_config = ConfigDict(frozen=True)

    vendor: str = Field(..., description="Name of the containing vendor directory.")
    file: str
    path: Path
    slug: str | None = None
    variant: str | None = None

    @property
    def parsed(self) -> bool:
        return self.slug is not None and self.variant is not None

    @property
    def icon_id(self) -> str | None:
        if self.slug is None:
            return None
        return make_icon_id(self.vendor, self.slug)
