"""Taxonomy loading: read, schema-check and parse the taxonomy document."""

import logging

from application.documents import load_json_document, load_schema
from domain.report import ValidationReport
from domain.taxonomy import Taxonomy, parse_taxonomy_config
from infrastructure.config import RegistryConfig

logger = logging.getLogger(__name__)


def load_taxonomy(cfg: RegistryConfig, report: ValidationReport) -> Taxonomy | None:
    """
    Load the taxonomy snapshot for this run.

    Failures never raise; they are recorded in `report` and None is returned so
    that downstream taxonomy checks are skipped:
    - missing/unparseable taxonomy schema: one error, taxonomy is still parsed unchecked
    - missing/unparseable taxonomy: one error
    - schema violations: one error per violation (pointer + message)
    - wrong-typed values or invalid regex patterns: one error

    Args:
        cfg: RegistryConfig with resolved paths
        report: Report to append errors to

    Returns:
        Taxonomy on success, otherwise None
    """
    schema = load_schema(cfg.taxonomy_schema_path, "taxonomy schema", report)

    loaded = load_json_document(cfg.taxonomy_path)
    if not loaded.ok:
        logger.debug("Could not read taxonomy at %s: %s", cfg.taxonomy_path, loaded.error)
        report.add_error(f"Failed to load taxonomy: {cfg.taxonomy_path}")
        return None

    if schema is not None:
        check = schema.validate(loaded.value)
        if not check.ok:
            for issue in check.issues:
                report.add_error(f"Taxonomy schema validation failed: {issue}")
            return None

    try:
        taxonomy = parse_taxonomy_config(loaded.value)
    except ValueError as e:
        report.add_error(f"Invalid taxonomy ({cfg.taxonomy_path}): {e}")
        return None

    logger.info(
        "Taxonomy loaded: %d vendors, %d categories, %d tags, %d variants",
        len(taxonomy.vendors),
        len(taxonomy.categories),
        len(taxonomy.tags),
        len(taxonomy.variants),
    )
    return taxonomy
