"""Build workflow: optimized SVG copies and lookup indexes for a validated registry."""

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass, field

from application.constants import (
    BY_CATEGORY_FILENAME,
    BY_TAG_FILENAME,
    ICONS_INDEX_FILENAME,
    MANIFEST_FILENAME,
    TAXONOMY_COPY_FILENAME,
)
from domain.identifiers import parse_icon_id
from domain.indexes import build_icon_list, build_lookup, build_manifest, sort_records
from domain.report import ValidationReport
from infrastructure.config import RegistryConfig
from infrastructure.io import read_text, write_json
from infrastructure.observability import log_stage
from infrastructure.svg import optimize_svg

logger = logging.getLogger(__name__)


class RegistryBuildError(RuntimeError):
    """Raised when a build is requested for a registry that failed validation."""


@dataclass(frozen=True)
class BuildSummary:
    icon_count: int
    variant_count: int
    tag_count: int
    category_count: int
    total_svg_bytes: int
    over_budget: list[str] = field(default_factory=list)


def build_registry(
    cfg: RegistryConfig,
    report: ValidationReport,
    *,
    optimizer: Callable[[str], str] = optimize_svg,
) -> BuildSummary:
    """
    Write dist/svg and dist/index from a validated report.

    Layout:
        <dist>/svg/<vendor>/<slug>.<variant>.svg   optimized copies
        <dist>/index/icons.min.json               compact icon list
        <dist>/index/by-tag.json                  tag -> sorted ids
        <dist>/index/by-category.json             category -> sorted ids
        <dist>/index/taxonomy.json                taxonomy snapshot
        <dist>/index/manifest.json                counts

    Args:
        cfg: RegistryConfig with resolved paths
        report: Result of validate_registry
        optimizer: SVG text -> optimized SVG text

    Returns:
        BuildSummary with counts and byte totals

    Raises:
        RegistryBuildError: If the report has errors or no taxonomy
    """
    if not report.ok:
        raise RegistryBuildError(f"Refusing to build: validation reported {len(report.errors)} error(s)")
    if report.taxonomy is None:
        raise RegistryBuildError("Refusing to build: taxonomy was not loaded")

    with log_stage("build"):
        summary = _write_dist(cfg, report, optimizer)

    logger.info(
        "Build finished: %d icons, %d variants, %d bytes of SVG -> %s",
        summary.icon_count,
        summary.variant_count,
        summary.total_svg_bytes,
        cfg.resolved_dist_dir,
    )
    return summary


def _write_dist(cfg: RegistryConfig, report: ValidationReport, optimizer: Callable[[str], str]) -> BuildSummary:
    svg_root = cfg.dist_svg_dir
    index_dir = cfg.dist_index_dir
    for directory in (svg_root, index_dir):
        shutil.rmtree(directory, ignore_errors=True)
        directory.mkdir(parents=True, exist_ok=True)

    records = sort_records(report.metadata)

    variant_count = 0
    total_bytes = 0
    over_budget: list[str] = []

    for record in records:
        vendor, slug = parse_icon_id(record.id)
        vendor_dir = svg_root / vendor
        vendor_dir.mkdir(parents=True, exist_ok=True)

        for variant in record.variants:
            source_path = cfg.asset_path(vendor, slug, variant)
            target_path = vendor_dir / f"{slug}.{variant}.svg"
            optimized = optimizer(read_text(source_path, errors="replace")).encode("utf-8")
            target_path.write_bytes(optimized)

            variant_count += 1
            total_bytes += len(optimized)
            if cfg.svg_byte_budget is not None and len(optimized) > cfg.svg_byte_budget:
                logger.warning(
                    "SVG over byte budget (%d > %d): %s", len(optimized), cfg.svg_byte_budget, target_path
                )
                over_budget.append(str(target_path))

    by_tag = build_lookup(records, "tags")
    by_category = build_lookup(records, "categories")
    manifest = build_manifest(records, variant_count=variant_count, by_tag=by_tag, by_category=by_category)

    write_json(index_dir / ICONS_INDEX_FILENAME, build_icon_list(records), indent=None)
    write_json(index_dir / BY_TAG_FILENAME, by_tag)
    write_json(index_dir / BY_CATEGORY_FILENAME, by_category)
    write_json(index_dir / TAXONOMY_COPY_FILENAME, report.taxonomy.to_document())
    write_json(index_dir / MANIFEST_FILENAME, manifest)

    return BuildSummary(
        icon_count=len(records),
        variant_count=variant_count,
        tag_count=len(by_tag),
        category_count=len(by_category),
        total_svg_bytes=total_bytes,
        over_budget=over_budget,
    )
