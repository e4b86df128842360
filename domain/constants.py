"""Domain-level constants."""

SVG_SUFFIX = ".svg"
METADATA_SUFFIX = ".json"

# Manifest format version written by the build step
MANIFEST_SCHEMA_VERSION = 1
