"""
Taxonomy management: vocabularies and id/variant patterns.

All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.loader import parse_taxonomy_config
from domain.taxonomy.model import Taxonomy

__all__ = [
    "Taxonomy",
    "parse_taxonomy_config",
]
