"""Shared helpers for validator tests."""

import json

from schemalab.validators.adapters import parse_json_document, parse_schema, parse_toml_document
from schemalab.validators.dialects import JSON_DIALECT, TOML_DIALECT
from schemalab.validators.schema_validator import SchemaValidator


def check_json(document, schema, **kwargs):
    """Validate a Python object as a JSON document against a schema dict."""
    return SchemaValidator(JSON_DIALECT, **kwargs).validate(
        parse_json_document(json.dumps(document)),
        parse_schema(json.dumps(schema)),
    )


def check_toml(document: str, schema, **kwargs):
    """Validate TOML text against a schema dict."""
    return SchemaValidator(TOML_DIALECT, **kwargs).validate(
        parse_toml_document(document),
        parse_schema(json.dumps(schema)),
    )


def kinds(errors):
    return [e.kind for e in errors]


def paths(errors):
    return [e.path for e in errors]
