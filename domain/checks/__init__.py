"""
Pure validation checks (no file I/O).

- metadata: per-document structure, id/filename and taxonomy membership
- assets: SVG file -> metadata record cross-reference
- content: SVG content-safety scan
"""

from domain.checks.assets import check_asset_reference
from domain.checks.content import ContentFindings, scan_svg_content
from domain.checks.metadata import MetadataCheck, check_metadata_document, is_non_empty_string

__all__ = [
    "check_metadata_document",
    "MetadataCheck",
    "is_non_empty_string",
    "check_asset_reference",
    "scan_svg_content",
    "ContentFindings",
]
