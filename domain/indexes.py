"""
Pure derivations of the lookup indexes written by the build step.

All functions take records sorted by id and return JSON-ready structures.
"""

from collections.abc import Sequence
from typing import Any

from domain.constants import MANIFEST_SCHEMA_VERSION
from domain.identifiers import parse_icon_id
from domain.schemas import IconMetadata


def sort_records(metadata: dict[str, IconMetadata]) -> list[IconMetadata]:
    return [metadata[icon_id] for icon_id in sorted(metadata)]


def compact_icon_entry(record: IconMetadata) -> dict[str, Any]:
    """
    Short-key entry for icons.min.json.

    Keys: id, n(ame), v(endor), s(lug), c(ategories), t(ags), vv (variants),
    a(liases, only when non-empty), dv (default variant, when set).
    """
    vendor, slug = parse_icon_id(record.id)
    entry: dict[str, Any] = {
        "id": record.id,
        "n": record.name,
        "v": vendor,
        "s": slug,
        "c": list(record.categories),
        "t": list(record.tags),
        "vv": list(record.variants),
    }
    if record.aliases:
        entry["a"] = list(record.aliases)
    if record.default_variant:
        entry["dv"] = record.default_variant
    return entry


def build_icon_list(records: Sequence[IconMetadata]) -> list[dict[str, Any]]:
    return [compact_icon_entry(record) for record in records]


def build_lookup(records: Sequence[IconMetadata], field: str) -> dict[str, list[str]]:
    """
    Map each value of a multi-valued field ("tags" or "categories") to the sorted ids carrying it.

    Keys are sorted as well so the serialized output is stable.
    """
    lookup: dict[str, list[str]] = {}
    for record in records:
        for value in getattr(record, field):
            lookup.setdefault(value, []).append(record.id)
    return {key: sorted(lookup[key]) for key in sorted(lookup)}


def build_manifest(
    records: Sequence[IconMetadata],
    *,
    variant_count: int,
    by_tag: dict[str, list[str]],
    by_category: dict[str, list[str]],
) -> dict[str, int]:
    return {
        "schemaVersion": MANIFEST_SCHEMA_VERSION,
        "iconCount": len(records),
        "variantCount": variant_count,
        "tagCount": len(by_tag),
        "categoryCount": len(by_category),
    }
