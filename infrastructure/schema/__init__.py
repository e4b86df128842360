"""Schema validation: JSON-schema documents in, structured issues out."""

from infrastructure.schema.validator import SchemaCheck, SchemaIssue, SchemaValidator

__all__ = [
    "SchemaValidator",
    "SchemaCheck",
    "SchemaIssue",
]
