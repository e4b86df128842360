"""Validation workflow: load everything, cross-reference, report."""

import logging
import sys
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import TextIO

from application.asset_scanner import scan_assets
from application.documents import read_text_files
from application.metadata_loader import load_metadata
from application.taxonomy_loader import load_taxonomy
from domain.checks import check_asset_reference, scan_svg_content
from domain.report import ValidationReport
from infrastructure.config import RegistryConfig
from infrastructure.observability import log_stage

logger = logging.getLogger(__name__)


def cross_reference_assets(report: ValidationReport, *, executor: Executor) -> None:
    """
    Check every discovered SVG against the metadata mapping and scan its content.

    Every discovered file is scanned, whether or not it matched a record or even
    parsed as <slug>.<variant>. Findings are appended in scan order.
    """
    contents = read_text_files((asset.path for asset in report.assets), executor)

    for asset, loaded in zip(report.assets, contents):
        report.add_errors(check_asset_reference(asset, report.metadata, report.taxonomy))

        label = str(asset.path)
        if not loaded.ok:
            logger.debug("Failed to read %s: %s", label, loaded.error)
            report.add_error(f"Failed to read SVG: {label}")
            continue

        findings = scan_svg_content(loaded.value, label)
        report.add_errors(findings.errors)
        report.add_warnings(findings.warnings)


def validate_registry(cfg: RegistryConfig) -> ValidationReport:
    """
    Run the full validation pass over a registry root.

    Order of findings: taxonomy, metadata documents (sorted by filename),
    asset files (sorted by vendor, then filename). Nothing here raises on bad
    data; every problem becomes a report error or warning.

    Args:
        cfg: RegistryConfig with resolved paths

    Returns:
        ValidationReport carrying errors, warnings, the metadata mapping and taxonomy
    """
    report = ValidationReport()
    logger.info("Validating registry at %s", cfg.root_dir)

    with ThreadPoolExecutor(max_workers=cfg.max_workers) as executor:
        with log_stage("taxonomy"):
            report.taxonomy = load_taxonomy(cfg, report)

        with log_stage("metadata"):
            report.metadata = load_metadata(cfg, report.taxonomy, report, executor=executor)

        with log_stage("assets"):
            report.assets = scan_assets(cfg.icons_dir, report)
            cross_reference_assets(report, executor=executor)

    logger.info(
        "Validation finished: %d errors, %d warnings (%d icons, %d SVG files)",
        len(report.errors),
        len(report.warnings),
        len(report.metadata),
        len(report.assets),
    )
    return report


def print_validation_results(
    report: ValidationReport,
    *,
    warn_stream: TextIO | None = None,
    error_stream: TextIO | None = None,
) -> None:
    """
    Print warnings, then errors, one "- <message>" line each.

    Both default to stderr.
    """
    warn_stream = warn_stream if warn_stream is not None else sys.stderr
    error_stream = error_stream if error_stream is not None else sys.stderr

    if report.warnings:
        print("Warnings:", file=warn_stream)
        for warning in report.warnings:
            print(f"- {warning}", file=warn_stream)

    if report.errors:
        print("Errors:", file=error_stream)
        for error in report.errors:
            print(f"- {error}", file=error_stream)
