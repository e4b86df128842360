"""Scaffold metadata and placeholder SVGs for a new icon."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from domain.identifiers import parse_icon_id
from infrastructure.config import load_registry_config

STUB_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <!-- placeholder artwork for {icon_id} ({variant}) -->
  <rect width="24" height="24" fill="none"/>
</svg>
"""


def build_metadata_stub(icon_id: str, name: str, variants: list[str], license_: str, url: str) -> dict:
    vendor, _ = parse_icon_id(icon_id)
    return {
        "id": icon_id,
        "name": name,
        "vendor": vendor,
        "categories": [],
        "tags": [],
        "variants": variants,
        "defaultVariant": variants[0],
        "source": {"url": url, "license": license_},
    }


# write <meta>/<id>.json and <icons>/<vendor>/<slug>.<variant>.svg stubs
def scaffold_icon(
    root: Path,
    icon_id: str,
    name: str,
    variants: list[str],
    license_: str,
    url: str,
    force: bool,
) -> list[Path]:
    vendor, slug = parse_icon_id(icon_id)
    if vendor is None or slug is None:
        raise SystemExit(f"Icon id must look like <vendor>.<slug>: {icon_id!r}")

    cfg = load_registry_config(None, environ={}, root_dir=root)
    meta_path = cfg.metadata_dir / f"{icon_id}.json"
    if meta_path.exists() and not force:
        raise SystemExit(f"Metadata exists: {meta_path} (use --force to overwrite)")

    written: list[Path] = []
    meta_path.parent.mkdir(parents=True, exist_ok=True)
    meta = build_metadata_stub(icon_id, name, variants, license_, url)
    meta_path.write_text(json.dumps(meta, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    written.append(meta_path)

    for variant in variants:
        svg_path = cfg.asset_path(vendor, slug, variant)
        if svg_path.exists() and not force:
            continue
        svg_path.parent.mkdir(parents=True, exist_ok=True)
        svg_path.write_text(STUB_SVG.format(icon_id=icon_id, variant=variant), encoding="utf-8")
        written.append(svg_path)

    return written


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--id", dest="icon_id", required=True, help="Icon id, e.g. aws.lambda")
    ap.add_argument("--name", required=True, help="Display name, e.g. 'AWS Lambda'")
    ap.add_argument("--variant", dest="variants", action="append", default=None, help="Variant (repeatable)")
    ap.add_argument("--license", dest="license_", default="", help="Artwork license")
    ap.add_argument("--url", default="", help="Artwork source URL")
    ap.add_argument("--root", default=".", help="Registry root directory (default: .)")
    ap.add_argument("--force", action="store_true", help="Overwrite existing files")
    args = ap.parse_args()

    variants = args.variants or ["mono"]
    written = scaffold_icon(Path(args.root), args.icon_id, args.name, variants, args.license_, args.url, args.force)
    for path in written:
        print(f"Wrote {path}")
    print("Fill in categories, tags and source, then run: icon-registry validate")


if __name__ == "__main__":
    main()
