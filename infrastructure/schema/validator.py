"""
JSON-schema validation adapter.

Wraps the `jsonschema` library so the rest of the code base only sees
(document, schema) -> SchemaCheck(ok, issues), where each issue carries a
JSON-pointer location and a message.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError, ValidationError


@dataclass(frozen=True)
class SchemaIssue:
    """A single schema violation."""

    location: str  # JSON pointer into the document, "/" for the root
    message: str

    def __str__(self) -> str:
        return f"{self.location} {self.message}".strip()


@dataclass(frozen=True)
class SchemaCheck:
    """Outcome of validating one document."""

    ok: bool
    issues: list[SchemaIssue] = field(default_factory=list)

    def summary(self) -> str:
        """All issues joined into a single line."""
        return "; ".join(str(issue) for issue in self.issues)


def _pointer(path: Iterable[Any]) -> str:
    parts = [str(p).replace("~", "~0").replace("/", "~1") for p in path]
    if not parts:
        return "/"
    return "/" + "/".join(parts)


class SchemaValidator:
    """Compiled validator for one JSON-schema document (draft 2020-12)."""

    def __init__(self, schema: dict[str, Any]):
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON schema: {e.message}") from e
        self._validator = Draft202012Validator(schema)

    def validate(self, document: Any) -> SchemaCheck:
        """
        Validate a document, collecting every violation (not fail-fast).

        Issues are sorted by (location, message) so repeated runs report them
        in the same order.
        """
        errors: list[ValidationError] = list(self._validator.iter_errors(document))
        issues = sorted(
            (SchemaIssue(location=_pointer(e.absolute_path), message=e.message) for e in errors),
            key=lambda issue: (issue.location, issue.message),
        )
        return SchemaCheck(ok=not issues, issues=issues)
