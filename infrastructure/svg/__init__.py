"""SVG asset processing (optimizer collaborator used by the build step)."""

from infrastructure.svg.optimizer import optimize_svg

__all__ = ["optimize_svg"]
