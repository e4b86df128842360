"""Asset discovery: walk `<icons>/<vendor>/*.svg`."""

import logging
from pathlib import Path

from domain.constants import SVG_SUFFIX
from domain.identifiers import parse_svg_filename
from domain.report import ValidationReport
from domain.schemas import AssetDescriptor
from infrastructure.io import list_files, list_subdirs

logger = logging.getLogger(__name__)


def scan_assets(icons_dir: Path, report: ValidationReport) -> list[AssetDescriptor]:
    """
    Enumerate SVG files, one subdirectory per vendor.

    Vendor directories and files are visited in sorted order. Filenames that do
    not split into <slug>.<variant> still produce a descriptor (slug/variant None)
    so the cross-reference phase can report them.

    Errors recorded (non-fatal):
    - icons directory missing or unreadable
    - a vendor directory unreadable (that vendor is skipped)
    """
    try:
        vendors = list_subdirs(icons_dir)
    except OSError as e:
        logger.debug("Could not list %s: %s", icons_dir, e)
        report.add_error(f"Missing icons directory: {icons_dir}")
        return []

    assets: list[AssetDescriptor] = []
    for vendor in vendors:
        vendor_dir = icons_dir / vendor
        try:
            file_names = list_files(vendor_dir, SVG_SUFFIX)
        except OSError as e:
            logger.debug("Could not list %s: %s", vendor_dir, e)
            report.add_error(f"Failed to read icon directory: {vendor_dir}")
            continue

        for file_name in file_names:
            slug, variant = parse_svg_filename(file_name)
            assets.append(
                AssetDescriptor(
                    vendor=vendor,
                    file=file_name,
                    path=vendor_dir / file_name,
                    slug=slug,
                    variant=variant,
                )
            )

    logger.info("Discovered %d SVG files across %d vendor directories", len(assets), len(vendors))
    return assets
