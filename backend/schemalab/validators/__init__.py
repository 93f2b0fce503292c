"""Schema validator: checks JSON and TOML documents against a JSON schema subset.

Usage:
    from schemalab.validators import validate_json

    result = validate_json(document_bytes, schema_bytes)
    if not result.ok:
        for error in result.errors:
            print(error.display())
"""

from schemalab.validators.adapters import ParseError, parse_json_document, parse_schema, parse_toml_document
from schemalab.validators.engine import ValidationEngine, validate_json, validate_toml, validation_engine
from schemalab.validators.models import ErrorCollector, ErrorKind, ValidationError, ValidationResult
from schemalab.validators.schema import Schema
from schemalab.validators.values import Value, ValueKind

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "validate_json",
    "validate_toml",
    "ValidationResult",
    "ValidationError",
    "ErrorCollector",
    "ErrorKind",
    "ParseError",
    "parse_json_document",
    "parse_toml_document",
    "parse_schema",
    "Schema",
    "Value",
    "ValueKind",
]
