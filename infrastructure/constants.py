from pathlib import Path

# Repo-root conventional directories/files (overrideable via registry.yaml)
CONFIG_DIR = Path("configs")
REGISTRY_CONFIG_FILE = CONFIG_DIR / "registry.yaml"

# Registry source layout, relative to the registry root
SRC_DIRNAME = "src"
TAXONOMY_FILENAME = "taxonomy.json"
SCHEMA_DIRNAME = "schema"
TAXONOMY_SCHEMA_FILENAME = "taxonomy.schema.json"
METADATA_SCHEMA_FILENAME = "meta.schema.json"
METADATA_DIRNAME = "meta"
ICONS_DIRNAME = "icons"

DIST_DIR = Path("dist")

# Environment overrides
ENV_ROOT = "ICON_REGISTRY_ROOT"
ENV_MAX_WORKERS = "ICON_REGISTRY_MAX_WORKERS"
