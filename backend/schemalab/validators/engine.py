"""Validation Engine: parses document and schema, validates, produces a result.

This is the main entry point for document validation.

Usage:
    engine = ValidationEngine()
    result = engine.validate_json(document_bytes, schema_bytes)
    if not result.ok:
        # result.errors holds every violation, in document order
"""

import time
from typing import Callable, Optional

import structlog

from schemalab.validators.adapters import (
    ParseError,
    Source,
    parse_json_document,
    parse_schema,
    parse_toml_document,
)
from schemalab.validators.dialects import JSON_DIALECT, TOML_DIALECT
from schemalab.validators.models import SourceFormat, ValidationResult
from schemalab.validators.schema import Schema
from schemalab.validators.schema_validator import SchemaValidator
from schemalab.validators.values import Value

logger = structlog.get_logger()


class ValidationEngine:
    """Wires adapters and the schema validator together for both formats.

    Design principles:
        - Deterministic: same input → same output
        - Stateless: every call owns its own error collector
        - Fail-soft: structural errors are all collected; only a parse failure
          of the document or schema short-circuits the call
    """

    def __init__(self, max_depth: Optional[int] = None):
        self.validators: dict[SourceFormat, SchemaValidator] = {
            "json": SchemaValidator(JSON_DIALECT, max_depth),
            "toml": SchemaValidator(TOML_DIALECT, max_depth),
        }
        self.document_parsers: dict[SourceFormat, Callable[[Source], Value]] = {
            "json": parse_json_document,
            "toml": parse_toml_document,
        }

    def validate_json(self, document: Source, schema: Source) -> ValidationResult:
        """Validate a JSON document against a JSON-encoded schema."""
        return self._run("json", document, schema)

    def validate_toml(self, document: Source, schema: Source) -> ValidationResult:
        """Validate a TOML document against a JSON-encoded schema."""
        return self._run("toml", document, schema)

    def validate_parsed(self, format: SourceFormat, value: Value, schema: Schema) -> ValidationResult:
        """Validate an already-parsed value tree.

        Args:
            format: Which dialect to validate with ("json" or "toml")
            value: Parsed document
            schema: Parsed schema

        Returns:
            ValidationResult holding the unchanged value, or every error found
        """
        start_time = time.perf_counter()

        errors = self.validators[format].validate(value, schema)
        if errors:
            result = ValidationResult.failure(format, errors)
        else:
            result = ValidationResult.success(format, value)

        logger.info(
            "validation_complete",
            format=format,
            valid=result.ok,
            total_errors=len(errors),
            summary=result.summary,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return result

    def _run(self, format: SourceFormat, document: Source, schema: Source) -> ValidationResult:
        try:
            value = self.document_parsers[format](document)
            parsed_schema = parse_schema(schema)
        except ParseError as e:
            logger.warning(
                "document_parse_failed",
                format=format,
                source=e.source,
                error=e.message,
            )
            return ValidationResult.parse_failure(format, e.message)

        return self.validate_parsed(format, value, parsed_schema)


# Module-level singleton
validation_engine = ValidationEngine()


def validate_json(document: Source, schema: Source) -> ValidationResult:
    return validation_engine.validate_json(document, schema)


def validate_toml(document: Source, schema: Source) -> ValidationResult:
    return validation_engine.validate_toml(document, schema)
