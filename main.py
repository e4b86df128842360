"""
CLI entrypoint for the icon registry.

Subcommands:
- validate: loads taxonomy, metadata and SVG assets, prints every error/warning,
  exits non-zero iff there are errors
- build: validates, then writes optimized SVGs and lookup indexes to dist/

Both load .env (if present) and configs/registry.yaml (if present) first.
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import build_registry, print_validation_results, validate_registry
from application.build import RegistryBuildError
from application.constants import LOG_FILENAME
from infrastructure.config import RegistryConfig, load_registry_config
from infrastructure.constants import REGISTRY_CONFIG_FILE
from infrastructure.observability import configure_logging, set_run_context

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Validate and build the icon registry")
    p.add_argument(
        "command",
        choices=["validate", "build"],
        help="validate: check sources only; build: validate, then write dist/",
    )
    p.add_argument(
        "--config",
        type=str,
        default=None,
        help=f"Path to registry.yaml (default: {REGISTRY_CONFIG_FILE} if it exists)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file, loaded if present (default: .env)",
    )
    p.add_argument("--root", type=str, default=None, help="Registry root directory (overrides config)")
    p.add_argument("--dist", type=str, default=None, help="Build output directory (overrides config)")
    p.add_argument(
        "--console-level",
        type=str,
        default="WARNING",
        choices=LOG_LEVELS,
        help="Console log level",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=LOG_LEVELS,
        help="File log level (only used when log_dir is configured)",
    )
    return p.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> RegistryConfig:
    if args.config is not None:
        config_path: Path | None = Path(args.config)
    elif REGISTRY_CONFIG_FILE.exists():
        config_path = REGISTRY_CONFIG_FILE
    else:
        config_path = None

    return load_registry_config(
        config_path,
        root_dir=Path(args.root) if args.root else None,
        dist_dir=Path(args.dist) if args.dist else None,
    )


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    cfg = _resolve_config(args)

    configure_logging(
        log_file=(cfg.log_dir / LOG_FILENAME) if cfg.log_dir is not None else None,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )

    run_id = f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_{args.command}"
    run_tag = set_run_context(run_id, root=cfg.root_dir)
    logger.info("Starting %s: run_id=%s (run_tag=%s)", args.command, run_id, run_tag)

    report = validate_registry(cfg)
    print_validation_results(report)
    if not report.ok:
        return 1

    if args.command == "validate":
        return 0

    try:
        summary = build_registry(cfg, report)
    except RegistryBuildError as e:
        logger.error("%s", e)
        return 1

    print(
        f"Built {summary.icon_count} icons ({summary.variant_count} variants, "
        f"{summary.total_svg_bytes} bytes) into {cfg.resolved_dist_dir}"
    )
    if summary.over_budget:
        print(f"{len(summary.over_budget)} SVG(s) over the {cfg.svg_byte_budget}-byte budget", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
