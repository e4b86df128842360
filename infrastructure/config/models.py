"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from infrastructure.constants import (
    DIST_DIR,
    ICONS_DIRNAME,
    METADATA_DIRNAME,
    METADATA_SCHEMA_FILENAME,
    SCHEMA_DIRNAME,
    SRC_DIRNAME,
    TAXONOMY_FILENAME,
    TAXONOMY_SCHEMA_FILENAME,
)


class RegistryConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from registry.yaml (optional) and environment overrides
    - Paths are resolved relative to root_dir
    - Consumed by the loaders, the validator and the index builder
    """

    root_dir: Path = Field(
        default_factory=lambda: Path("."),
        description="Registry root; sources live under <root_dir>/src.",
    )
    dist_dir: Path | None = Field(
        default=None,
        description="Build output directory. Defaults to <root_dir>/dist.",
    )
    max_workers: int = Field(
        default=8,
        description="Thread count used to read metadata documents and SVG files in parallel.",
    )
    svg_byte_budget: int | None = Field(
        default=None,
        description="Optional per-asset size limit (bytes) for optimized SVGs; overruns are logged.",
    )
    log_dir: Path | None = Field(
        default=None,
        description="If set, a rotating log file is written here.",
    )

    @model_validator(mode="after")
    def _validate(self) -> "RegistryConfig":
        if self.max_workers < 1:
            raise ValueError("max_workers must be a positive integer")
        if self.svg_byte_budget is not None and self.svg_byte_budget <= 0:
            raise ValueError("svg_byte_budget must be positive when set")
        return self

    @property
    def src_dir(self) -> Path:
        return self.root_dir / SRC_DIRNAME

    @property
    def taxonomy_path(self) -> Path:
        return self.src_dir / TAXONOMY_FILENAME

    @property
    def schema_dir(self) -> Path:
        return self.src_dir / SCHEMA_DIRNAME

    @property
    def taxonomy_schema_path(self) -> Path:
        return self.schema_dir / TAXONOMY_SCHEMA_FILENAME

    @property
    def metadata_schema_path(self) -> Path:
        return self.schema_dir / METADATA_SCHEMA_FILENAME

    @property
    def metadata_dir(self) -> Path:
        return self.src_dir / METADATA_DIRNAME

    @property
    def icons_dir(self) -> Path:
        return self.src_dir / ICONS_DIRNAME

    @property
    def resolved_dist_dir(self) -> Path:
        if self.dist_dir is not None:
            return self.dist_dir
        return self.root_dir / DIST_DIR

    @property
    def dist_svg_dir(self) -> Path:
        return self.resolved_dist_dir / "svg"

    @property
    def dist_index_dir(self) -> Path:
        return self.resolved_dist_dir / "index"

    def asset_path(self, vendor: str, slug: str, variant: str) -> Path:
        """Expected location of one icon variant: <icons>/<vendor>/<slug>.<variant>.svg"""
        return self.icons_dir / vendor / f"{slug}.{variant}.svg"
