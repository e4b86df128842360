"""Parse taxonomy configuration from a JSON dict."""

import re
from typing import Any

from domain.taxonomy.model import Taxonomy

_LIST_KEYS = ("vendors", "categories", "tags", "variants")
_PATTERN_KEYS = ("idPattern", "variantPattern")


def parse_taxonomy_config(data: dict[str, Any]) -> Taxonomy:
    """
    Parse a pre-loaded taxonomy document into a Taxonomy object.

    This is a pure function - it does NOT perform file I/O.
    The JSON loading happens in application.taxonomy_loader.

    Args:
        data: Dictionary from json.loads()

    Returns:
        Frozen Taxonomy snapshot

    Raises:
        ValueError: If keys have wrong types or a pattern is not a valid regex
    """
    if not isinstance(data, dict):
        raise ValueError("taxonomy must be a JSON object")

    kwargs: dict[str, Any] = {}
    for key in _LIST_KEYS:
        values = data.get(key, []) or []
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise ValueError(f"{key} must be a list of strings")
        kwargs[key] = tuple(values)

    for key in _PATTERN_KEYS:
        pattern = data.get(key)
        if pattern is not None and not isinstance(pattern, str):
            raise ValueError(f"{key} must be a string")
        # empty pattern is treated as "not configured"
        if pattern:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid {key} {pattern!r}: {e}") from e
        kwargs[key] = pattern or None

    return Taxonomy(**kwargs)
