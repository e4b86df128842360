"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the validation and build workflows.
"""

from application.asset_scanner import scan_assets
from application.build import BuildSummary, RegistryBuildError, build_registry
from application.metadata_loader import load_metadata
from application.taxonomy_loader import load_taxonomy
from application.validation import cross_reference_assets, print_validation_results, validate_registry

__all__ = [
    # Main workflows
    "validate_registry",
    "build_registry",
    "print_validation_results",
    # Loaders
    "load_taxonomy",
    "load_metadata",
    "scan_assets",
    "cross_reference_assets",
    # Build results
    "BuildSummary",
    "RegistryBuildError",
]
