"""SVG optimization via scour."""

import logging
from functools import lru_cache

from scour import scour

logger = logging.getLogger(__name__)

# viewBox is kept by scour unless --enable-viewboxing is passed; icons rely on it for scaling.
SCOUR_ARGS = [
    "--quiet",
    "--remove-descriptive-elements",
    "--enable-comment-stripping",
    "--strip-xml-prolog",
    "--indent=none",
    "--no-line-breaks",
]


@lru_cache(maxsize=1)
def _scour_options():
    return scour.parse_args(SCOUR_ARGS)


def optimize_svg(svg_text: str) -> str:
    """
    Return an optimized copy of an SVG document.

    Args:
        svg_text: Raw SVG markup

    Returns:
        Optimized SVG markup
    """
    optimized = scour.scourString(svg_text, _scour_options())
    logger.debug("Optimized SVG: %d -> %d chars", len(svg_text), len(optimized))
    return optimized
