"""Metadata loading: one JSON document per icon, checked and collected into an id -> record mapping."""

import logging
from concurrent.futures import Executor

from application.documents import load_schema, read_json_documents
from domain.checks import check_metadata_document
from domain.constants import METADATA_SUFFIX
from domain.report import ValidationReport
from domain.schemas import IconMetadata
from domain.taxonomy import Taxonomy
from infrastructure.config import RegistryConfig
from infrastructure.io import list_files

logger = logging.getLogger(__name__)


def load_metadata(
    cfg: RegistryConfig,
    taxonomy: Taxonomy | None,
    report: ValidationReport,
    *,
    executor: Executor,
) -> dict[str, IconMetadata]:
    """
    Load and check every `<meta>/*.json` document.

    This is a batch validator: a broken document is reported and the remaining
    documents are still processed. Documents are handled in sorted filename
    order, so when two documents share an id the lexicographically first
    filename wins and the second gets a "Duplicate metadata id" error.

    Per document (all reported independently):
    - parse failure / non-object document (document skipped)
    - schema violations (one aggregated error)
    - id, filename, pattern, vendor, category, tag, variant, defaultVariant and
      source checks (see domain.checks.metadata)
    - duplicate id
    - one error per declared variant whose SVG file is missing on disk

    Args:
        cfg: RegistryConfig with resolved paths
        taxonomy: Taxonomy snapshot, or None to skip taxonomy checks
        report: Report to append errors to
        executor: Pool used to read documents concurrently

    Returns:
        Mapping from icon id to record (first-seen wins)
    """
    schema = load_schema(cfg.metadata_schema_path, "metadata schema", report)

    meta_dir = cfg.metadata_dir
    try:
        file_names = list_files(meta_dir, METADATA_SUFFIX)
    except OSError as e:
        logger.debug("Could not list %s: %s", meta_dir, e)
        report.add_error(f"Missing metadata directory: {meta_dir}")
        return {}

    logger.info("Reading %d metadata documents from %s", len(file_names), meta_dir)
    documents = read_json_documents((meta_dir / name for name in file_names), executor)

    metadata: dict[str, IconMetadata] = {}
    seen_ids: set[str] = set()

    for file_name, loaded in zip(file_names, documents):
        file_path = loaded.path
        if not loaded.ok:
            logger.debug("Failed to parse %s: %s", file_path, loaded.error)
            report.add_error(f"Failed to parse metadata JSON: {file_path}")
            continue

        doc = loaded.value
        if not isinstance(doc, dict):
            report.add_error(f"Metadata document is not a JSON object: {file_path}")
            continue

        if schema is not None:
            schema_check = schema.validate(doc)
            if not schema_check.ok:
                report.add_error(f"Metadata schema validation failed ({file_path}): {schema_check.summary()}")

        check = check_metadata_document(doc, file_name=file_name, file_path=str(file_path), taxonomy=taxonomy)
        report.add_errors(check.errors)

        icon_id = check.icon_id
        if icon_id is None:
            continue

        if icon_id in seen_ids:
            report.add_error(f"Duplicate metadata id: {icon_id}")
        else:
            seen_ids.add(icon_id)
            if check.parsed:
                metadata[icon_id] = IconMetadata.from_document(doc)

        if check.parsed and check.variants:
            for variant in check.variants:
                if not isinstance(variant, str) or not variant:
                    continue
                svg_path = cfg.asset_path(check.vendor, check.slug, variant)
                if not svg_path.is_file():
                    report.add_error(f"Missing SVG for id {icon_id} variant {variant}: {svg_path}")

    logger.info("Metadata loaded: %d records from %d documents", len(metadata), len(file_names))
    return metadata
