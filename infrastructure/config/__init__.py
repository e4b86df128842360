"""
Configuration management: models and loading.

Handles:
- RegistryConfig: registry root, build output and worker settings
- Loading from configs/registry.yaml
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_registry_config
from infrastructure.config.models import RegistryConfig

__all__ = [
    "RegistryConfig",
    "load_registry_config",
]
