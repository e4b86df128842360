import json

import pytest

from application import build_registry, validate_registry
from application.build import RegistryBuildError
from domain.report import ValidationReport
from infrastructure.config import RegistryConfig
from infrastructure.svg import optimize_svg


def _identity(svg: str) -> str:
    return svg


@pytest.fixture
def populated(cfg, write_meta, write_svg, ec2_meta):
    write_meta({**ec2_meta, "variants": ["mono"], "aliases": ["elastic"]})
    write_svg("aws", "ec2.mono.svg")
    write_meta(
        {
            **ec2_meta,
            "id": "aws.lambda",
            "name": "Lambda",
            "tags": [],
        }
    )
    write_svg("aws", "lambda.mono.svg", '<svg viewBox="0 0 24 24"><path d="M1 1"/></svg>')
    return cfg


def test_build_writes_svgs_and_indexes(populated: RegistryConfig) -> None:
    report = validate_registry(populated)
    assert report.errors == []

    summary = build_registry(populated, report, optimizer=_identity)

    dist = populated.resolved_dist_dir
    assert (dist / "svg" / "aws" / "ec2.mono.svg").read_text(encoding="utf-8") == '<svg viewBox="0 0 10 10"></svg>'
    assert (dist / "svg" / "aws" / "lambda.mono.svg").exists()

    icons = json.loads((dist / "index" / "icons.min.json").read_text(encoding="utf-8"))
    assert [entry["id"] for entry in icons] == ["aws.ec2", "aws.lambda"]
    assert icons[0] == {
        "id": "aws.ec2",
        "n": "EC2",
        "v": "aws",
        "s": "ec2",
        "c": ["compute"],
        "t": ["core"],
        "vv": ["mono"],
        "a": ["elastic"],
        "dv": "mono",
    }
    assert "a" not in icons[1]

    by_tag = json.loads((dist / "index" / "by-tag.json").read_text(encoding="utf-8"))
    by_category = json.loads((dist / "index" / "by-category.json").read_text(encoding="utf-8"))
    assert by_tag == {"core": ["aws.ec2"]}
    assert by_category == {"compute": ["aws.ec2", "aws.lambda"]}

    taxonomy = json.loads((dist / "index" / "taxonomy.json").read_text(encoding="utf-8"))
    assert taxonomy["vendors"] == ["aws"]

    manifest = json.loads((dist / "index" / "manifest.json").read_text(encoding="utf-8"))
    assert manifest == {"schemaVersion": 1, "iconCount": 2, "variantCount": 2, "tagCount": 1, "categoryCount": 1}

    assert summary.icon_count == 2
    assert summary.variant_count == 2
    assert summary.over_budget == []


def test_build_clears_stale_output(populated: RegistryConfig) -> None:
    stale = populated.dist_svg_dir / "old" / "gone.mono.svg"
    stale.parent.mkdir(parents=True)
    stale.write_text("<svg/>", encoding="utf-8")

    build_registry(populated, validate_registry(populated), optimizer=_identity)

    assert not stale.exists()


def test_build_refuses_report_with_errors(cfg) -> None:
    report = ValidationReport(errors=["boom"])

    with pytest.raises(RegistryBuildError, match="1 error"):
        build_registry(cfg, report, optimizer=_identity)

    assert not cfg.resolved_dist_dir.exists()


def test_build_refuses_without_taxonomy(cfg) -> None:
    with pytest.raises(RegistryBuildError, match="taxonomy"):
        build_registry(cfg, ValidationReport(), optimizer=_identity)


def test_byte_budget_overruns_are_reported(populated: RegistryConfig) -> None:
    cfg = populated.model_copy(update={"svg_byte_budget": 35})

    summary = build_registry(cfg, validate_registry(cfg), optimizer=_identity)

    assert summary.over_budget == [str(cfg.dist_svg_dir / "aws" / "lambda.mono.svg")]


def test_scour_optimizer_keeps_viewbox_and_drops_comments() -> None:
    source = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        "<!-- exported by an editor -->\n"
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">\n'
        "  <title>EC2</title>\n"
        '  <rect x="0" y="0" width="24" height="24" fill="#000000"/>\n'
        "</svg>\n"
    )

    optimized = optimize_svg(source)

    assert 'viewBox="0 0 24 24"' in optimized
    assert "exported by an editor" not in optimized
    assert "<title>" not in optimized
    assert len(optimized) < len(source)


def test_build_accepts_svg_in_declared_non_utf8_encoding(cfg, write_meta, write_svg, ec2_meta) -> None:
    write_meta(ec2_meta)
    source = write_svg("aws", "ec2.mono.svg")
    source.write_bytes('<svg viewBox="0 0 1 1"><title>café</title></svg>'.encode("latin-1"))

    summary = build_registry(cfg, validate_registry(cfg), optimizer=_identity)

    assert summary.variant_count == 1
    assert (cfg.dist_svg_dir / "aws" / "ec2.mono.svg").exists()
