"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment)
- JSON-schema validation (jsonschema)
- SVG optimization (scour)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import RegistryConfig, load_registry_config
from infrastructure.observability import configure_logging
from infrastructure.schema import SchemaValidator
from infrastructure.svg import optimize_svg

__all__ = [
    # Configuration (most commonly used)
    "load_registry_config",
    "RegistryConfig",
    # Adapters
    "SchemaValidator",
    "optimize_svg",
    "configure_logging",
]
