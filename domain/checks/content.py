"""SVG content-safety scan."""

import re
from dataclasses import dataclass, field

SCRIPT_TAG_RE = re.compile(r"<\s*script\b", re.IGNORECASE)
FOREIGN_OBJECT_RE = re.compile(r"<\s*foreignObject\b", re.IGNORECASE)
EVENT_HANDLER_RE = re.compile(r"[\s/]on[a-z]+\s*=", re.IGNORECASE)
VIEWBOX_RE = re.compile(r"viewBox\s*=\s*[\"']", re.IGNORECASE)


@dataclass
class ContentFindings:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def scan_svg_content(content: str, label: str) -> ContentFindings:
    """
    Scan raw SVG markup for active content.

    Errors: <script>, <foreignObject>, on*= event-handler attributes.
    Warning: no viewBox attribute.

    Args:
        content: SVG text
        label: How the asset is named in messages (usually its path)
    """
    findings = ContentFindings()
    if SCRIPT_TAG_RE.search(content):
        findings.errors.append(f"Disallowed <script> tag in SVG: {label}")
    if FOREIGN_OBJECT_RE.search(content):
        findings.errors.append(f"Disallowed <foreignObject> tag in SVG: {label}")
    if EVENT_HANDLER_RE.search(content):
        findings.errors.append(f"Disallowed on* handler attribute in SVG: {label}")
    if not VIEWBOX_RE.search(content):
        findings.warnings.append(f"SVG missing viewBox attribute: {label}")
    return findings
