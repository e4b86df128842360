"""Configuration loading from YAML files and environment overrides."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import RegistryConfig
from infrastructure.constants import ENV_MAX_WORKERS, ENV_ROOT


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file is a valid "all defaults" config
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _apply_env_overrides(data: dict[str, Any], environ: Mapping[str, str]) -> dict[str, Any]:
    merged = dict(data)

    root = environ.get(ENV_ROOT)
    if root:
        merged["root_dir"] = root

    workers = environ.get(ENV_MAX_WORKERS)
    if workers:
        try:
            merged["max_workers"] = int(workers)
        except ValueError as e:
            raise ValueError(f"{ENV_MAX_WORKERS} must be an integer, got {workers!r}") from e

    return merged


def load_registry_config(
    config_path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> RegistryConfig:
    """
    Build a RegistryConfig from (in increasing precedence) defaults, registry.yaml,
    environment variables and explicit keyword overrides.

    Args:
        config_path: Optional path to registry.yaml; None means defaults only
        environ: Environment mapping (defaults to os.environ)
        **overrides: Explicit values (e.g. from CLI flags); None values are ignored

    Returns:
        Validated RegistryConfig

    Raises:
        FileNotFoundError: If config_path is given but missing
        ValueError: If the YAML is not a mapping or a value is invalid
    """
    data = _load_yaml(config_path) if config_path is not None else {}
    data = _apply_env_overrides(data, os.environ if environ is None else environ)
    data.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(data) - set(RegistryConfig.model_fields))
    if unknown:
        raise ValueError(f"Unknown registry config keys: {unknown}")

    return RegistryConfig(**data)
