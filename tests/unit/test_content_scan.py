import pytest

from domain.checks import scan_svg_content


def test_clean_svg_has_no_findings() -> None:
    findings = scan_svg_content('<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M0 0"/></svg>', "a.svg")

    assert findings.errors == []
    assert findings.warnings == []


@pytest.mark.parametrize(
    ("markup", "message"),
    [
        ('<svg viewBox="0 0 1 1"><script>alert(1)</script></svg>', "Disallowed <script> tag in SVG: a.svg"),
        ('<svg viewBox="0 0 1 1">< SCRIPT src="x"/></svg>', "Disallowed <script> tag in SVG: a.svg"),
        ('<svg viewBox="0 0 1 1"><foreignObject/></svg>', "Disallowed <foreignObject> tag in SVG: a.svg"),
        ('<svg viewBox="0 0 1 1" onload="x()"></svg>', "Disallowed on* handler attribute in SVG: a.svg"),
        ('<svg viewBox="0 0 1 1"><rect ONCLICK = "x()"/></svg>', "Disallowed on* handler attribute in SVG: a.svg"),
        ('<svg/onload=alert(1) viewBox="0 0 1 1">', "Disallowed on* handler attribute in SVG: a.svg"),
    ],
)
def test_active_content_is_an_error(markup: str, message: str) -> None:
    findings = scan_svg_content(markup, "a.svg")

    assert findings.errors == [message]
    assert findings.warnings == []


def test_attribute_names_containing_on_are_not_handlers() -> None:
    findings = scan_svg_content('<svg viewBox="0 0 1 1"><g data-icon="x"/></svg>', "a.svg")

    assert findings.errors == []


def test_missing_viewbox_is_only_a_warning() -> None:
    findings = scan_svg_content('<svg width="10" height="10"></svg>', "a.svg")

    assert findings.errors == []
    assert findings.warnings == ["SVG missing viewBox attribute: a.svg"]


def test_all_findings_are_reported_together() -> None:
    findings = scan_svg_content('<svg onload="x()"><script/><foreignObject/></svg>', "a.svg")

    assert len(findings.errors) == 3
    assert len(findings.warnings) == 1
