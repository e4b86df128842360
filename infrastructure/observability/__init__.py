"""
Observability: run-tagged logging.

Provides:
- Log records tagged with run, registry and stage
- Console plus optional rotating file output
"""

from infrastructure.observability.logging import configure_logging, log_stage, make_run_tag, set_run_context

__all__ = [
    "configure_logging",
    "set_run_context",
    "log_stage",
    "make_run_tag",
]
