import json

import pytest

from application import validate_registry
from infrastructure.config import RegistryConfig
from tools.scaffold_icon import build_metadata_stub, scaffold_icon


def test_metadata_stub_defaults_to_first_variant() -> None:
    stub = build_metadata_stub("aws.ec2", "EC2", ["mono", "color"], "MIT", "https://x")

    assert stub["vendor"] == "aws"
    assert stub["defaultVariant"] == "mono"
    assert stub["source"] == {"url": "https://x", "license": "MIT"}


def test_scaffolded_icon_only_needs_taxonomy_values(registry_root) -> None:
    written = scaffold_icon(registry_root, "aws.ec2", "EC2", ["mono"], "MIT", "https://x", force=False)

    meta_path = registry_root / "src" / "meta" / "aws.ec2.json"
    assert written == [meta_path, registry_root / "src" / "icons" / "aws" / "ec2.mono.svg"]

    meta = json.loads(meta_path.read_text(encoding="utf-8"))
    meta.update(categories=["compute"], tags=["core"])
    meta_path.write_text(json.dumps(meta), encoding="utf-8")

    report = validate_registry(RegistryConfig(root_dir=registry_root, max_workers=1))
    assert report.errors == []
    assert report.warnings == []


def test_existing_metadata_requires_force(registry_root) -> None:
    scaffold_icon(registry_root, "aws.ec2", "EC2", ["mono"], "", "", force=False)

    with pytest.raises(SystemExit):
        scaffold_icon(registry_root, "aws.ec2", "EC2", ["mono"], "", "", force=False)

    assert scaffold_icon(registry_root, "aws.ec2", "EC2 v2", ["mono"], "", "", force=True)


def test_rejects_id_without_slug(registry_root) -> None:
    with pytest.raises(SystemExit):
        scaffold_icon(registry_root, "ec2", "EC2", ["mono"], "", "", force=False)
