"""Bundled sample schemas and documents."""

from schemalab.samples.loader import (
    clear_cache,
    list_samples,
    load_sample_bytes,
    load_sample_document,
    load_sample_schema,
    schema_for,
)

__all__ = [
    "clear_cache",
    "list_samples",
    "load_sample_bytes",
    "load_sample_document",
    "load_sample_schema",
    "schema_for",
]
