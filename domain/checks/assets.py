"""Asset -> metadata cross-reference checks."""

from collections.abc import Mapping

from domain.schemas import AssetDescriptor, IconMetadata
from domain.taxonomy import Taxonomy


def check_asset_reference(
    asset: AssetDescriptor,
    metadata: Mapping[str, IconMetadata],
    taxonomy: Taxonomy | None,
) -> list[str]:
    """
    Check that an SVG file is declared by exactly one metadata record.

    - filename must parse into <slug>.<variant>
    - variant must match the taxonomy variantPattern (independently of the metadata-side check)
    - a record must exist for `<vendor>.<slug>` and list the variant
    """
    label = str(asset.path)
    if not asset.parsed:
        return [f"Invalid SVG filename (missing variant): {label}"]

    errors: list[str] = []
    variant = asset.variant
    if taxonomy is not None and not taxonomy.variant_matches(variant):
        errors.append(f"Variant does not match pattern for SVG {label}: {variant}")

    record = metadata.get(asset.icon_id)
    if record is None:
        errors.append(f"Missing metadata for SVG: {label}")
    elif not record.has_variant(variant):
        errors.append(f"Metadata variants missing for SVG: {label}")

    return errors
