"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for icon metadata and asset descriptors
- taxonomy: Taxonomy snapshot and parsing
- identifiers: icon id / SVG filename parsing
- checks: metadata, cross-reference and content-safety checks
- report: the validation report
"""

from domain.report import ValidationReport
from domain.schemas import AssetDescriptor, IconMetadata, IconSource

__all__ = [
    "IconMetadata",
    "IconSource",
    "AssetDescriptor",
    "ValidationReport",
]
