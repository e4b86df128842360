"""Structural and taxonomy checks for a single metadata document."""

from dataclasses import dataclass, field
from typing import Any

from domain.constants import METADATA_SUFFIX
from domain.identifiers import parse_icon_id
from domain.taxonomy import Taxonomy


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _as_list(value: Any) -> list[Any] | None:
    return value if isinstance(value, list) else None


@dataclass
class MetadataCheck:
    """Findings for one document plus the id parts needed for cross-referencing."""

    errors: list[str] = field(default_factory=list)
    icon_id: str | None = None
    vendor: str | None = None
    slug: str | None = None
    variants: list[Any] | None = None

    @property
    def parsed(self) -> bool:
        return self.icon_id is not None and self.vendor is not None and self.slug is not None


def check_metadata_document(
    doc: dict[str, Any],
    *,
    file_name: str,
    file_path: str,
    taxonomy: Taxonomy | None,
) -> MetadataCheck:
    """
    Run every per-document check and collect all failures.

    Checks never short-circuit: a missing id still lets name/vendor/category/...
    checks run (messages then name the file instead of the id). Taxonomy
    membership and pattern checks are skipped when `taxonomy` is None.

    Args:
        doc: Parsed JSON object
        file_name: Base name of the document (e.g. "aws.ec2.json")
        file_path: Full path, used in messages
        taxonomy: Loaded taxonomy snapshot, or None if it failed to load

    Returns:
        MetadataCheck with ordered errors and the parsed (vendor, slug)
    """
    result = MetadataCheck()
    errors = result.errors

    raw_id = doc.get("id")
    if is_non_empty_string(raw_id):
        result.icon_id = raw_id
        subject = raw_id
    else:
        errors.append(f"Missing id in metadata: {file_path}")
        subject = file_path

    icon_id = result.icon_id
    if icon_id is not None:
        file_id = file_name.removesuffix(METADATA_SUFFIX)
        if file_id != icon_id:
            errors.append(
                f"Metadata filename '{file_name}' does not match id '{icon_id}' (expected '{icon_id}.json')"
            )

        if taxonomy is not None and not taxonomy.id_matches(icon_id):
            errors.append(f"Invalid id format: {icon_id}")

        result.vendor, result.slug = parse_icon_id(icon_id)
        if result.vendor is None:
            errors.append(f"Unable to parse vendor/slug from id: {icon_id}")

    if not is_non_empty_string(doc.get("name")):
        errors.append(f"Missing name for id: {subject}")

    meta_vendor = doc.get("vendor")
    if not is_non_empty_string(meta_vendor):
        errors.append(f"Missing vendor for id: {subject}")
    elif result.vendor is not None and meta_vendor != result.vendor:
        errors.append(f"Vendor mismatch for id {subject}: {meta_vendor} != {result.vendor}")

    if meta_vendor and taxonomy is not None and not taxonomy.allows_vendor(meta_vendor):
        errors.append(f"Vendor not in taxonomy for id {subject}: {meta_vendor}")

    categories = _as_list(doc.get("categories"))
    if not categories:
        errors.append(f"Missing categories for id: {subject}")
    elif taxonomy is not None:
        for category in categories:
            if not taxonomy.allows_category(category):
                errors.append(f"Category not in taxonomy for id {subject}: {category}")

    tags = _as_list(doc.get("tags"))
    if tags is None:
        errors.append(f"Missing tags for id: {subject}")
    elif taxonomy is not None:
        for tag in tags:
            if not taxonomy.allows_tag(tag):
                errors.append(f"Tag not in taxonomy for id {subject}: {tag}")

    variants = _as_list(doc.get("variants"))
    result.variants = variants
    if not variants:
        errors.append(f"Missing variants for id: {subject}")
    elif taxonomy is not None:
        for variant in variants:
            if taxonomy.variant_regex is not None and not (
                isinstance(variant, str) and taxonomy.variant_matches(variant)
            ):
                errors.append(f"Variant does not match pattern for id {subject}: {variant}")
            if not taxonomy.allows_variant(variant):
                errors.append(f"Variant not in taxonomy for id {subject}: {variant}")

    default_variant = doc.get("defaultVariant")
    if not default_variant:
        errors.append(f"Missing defaultVariant for id: {subject}")
    elif not variants or default_variant not in variants:
        errors.append(f"defaultVariant not in variants for id {subject}: {default_variant}")

    source = doc.get("source")
    if (
        not isinstance(source, dict)
        or not is_non_empty_string(source.get("url"))
        or not is_non_empty_string(source.get("license"))
    ):
        errors.append(f"Missing source url/license for id: {subject}")

    return result
