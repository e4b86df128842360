import json
import shutil
from pathlib import Path

import pytest

from infrastructure.config import RegistryConfig

REPO_ROOT = Path(__file__).resolve().parents[2]
SCHEMA_DIR = REPO_ROOT / "src" / "schema"

TAXONOMY = {
    "vendors": ["aws"],
    "categories": ["compute"],
    "tags": ["core"],
    "variants": ["mono"],
}

EC2_META = {
    "id": "aws.ec2",
    "name": "EC2",
    "vendor": "aws",
    "categories": ["compute"],
    "tags": ["core"],
    "variants": ["mono"],
    "defaultVariant": "mono",
    "source": {"url": "https://x", "license": "MIT"},
}

VALID_SVG = '<svg viewBox="0 0 10 10"></svg>'


def _write_json(path: Path, payload) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def registry_root(tmp_path: Path) -> Path:
    """Minimal registry: repo schemas, a one-vendor taxonomy, empty meta/ and icons/."""
    root = tmp_path / "registry"
    shutil.copytree(SCHEMA_DIR, root / "src" / "schema")
    _write_json(root / "src" / "taxonomy.json", TAXONOMY)
    (root / "src" / "meta").mkdir(parents=True)
    (root / "src" / "icons").mkdir(parents=True)
    return root


@pytest.fixture
def cfg(registry_root: Path) -> RegistryConfig:
    return RegistryConfig(root_dir=registry_root, max_workers=2)


@pytest.fixture
def write_taxonomy(registry_root: Path):
    def _write(payload) -> Path:
        return _write_json(registry_root / "src" / "taxonomy.json", payload)

    return _write


@pytest.fixture
def write_meta(registry_root: Path):
    def _write(doc: dict, file_name: str | None = None) -> Path:
        name = file_name or f"{doc['id']}.json"
        return _write_json(registry_root / "src" / "meta" / name, doc)

    return _write


@pytest.fixture
def write_svg(registry_root: Path):
    def _write(vendor: str, file_name: str, content: str = VALID_SVG) -> Path:
        path = registry_root / "src" / "icons" / vendor / file_name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def ec2_meta() -> dict:
    """The aws.ec2 record from the end-to-end scenario (fresh copy per test)."""
    return json.loads(json.dumps(EC2_META))


@pytest.fixture
def taxonomy_doc() -> dict:
    return json.loads(json.dumps(TAXONOMY))
