"""Application-level constants."""

# Index artifacts written under <dist>/index
ICONS_INDEX_FILENAME = "icons.min.json"
BY_TAG_FILENAME = "by-tag.json"
BY_CATEGORY_FILENAME = "by-category.json"
TAXONOMY_COPY_FILENAME = "taxonomy.json"
MANIFEST_FILENAME = "manifest.json"

# Log file written under RegistryConfig.log_dir
LOG_FILENAME = "registry.log"
