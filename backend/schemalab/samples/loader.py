"""Sample loader: bundled schemas and documents for trying the validator.

Parsed samples are cached process-wide, keyed by file identity (resolved path,
modification time and size), so an edited sample is re-parsed on next use.
"""

from pathlib import Path
from typing import Optional

import structlog

from schemalab.config import get_settings
from schemalab.validators.adapters import parse_json_document, parse_schema, parse_toml_document
from schemalab.validators.schema import Schema
from schemalab.validators.values import Value

logger = structlog.get_logger()

BUNDLED_DIR = Path(__file__).parent

# Sample document -> the schema it is meant to be validated against
SAMPLE_DOCUMENTS = {
    "valid-person.json": "sample-schema.json",
    "invalid-person.json": "sample-schema.json",
    "valid-config.toml": "config-schema.json",
    "invalid-config.toml": "config-schema.json",
}

SAMPLE_SCHEMAS = sorted(set(SAMPLE_DOCUMENTS.values()))

_parse_cache: dict[tuple, object] = {}


def samples_dir() -> Path:
    configured = get_settings().SAMPLES_DIR
    return Path(configured) if configured else BUNDLED_DIR


def _sample_path(name: str) -> Path:
    if name not in SAMPLE_DOCUMENTS and name not in SAMPLE_SCHEMAS:
        raise KeyError(name)
    return samples_dir() / name


def _identity(path: Path) -> tuple:
    stat = path.stat()
    return (str(path.resolve()), stat.st_mtime_ns, stat.st_size)


def sample_format(name: str) -> str:
    return "toml" if name.endswith(".toml") else "json"


def list_samples() -> list[dict]:
    """List bundled sample documents with their schema and format."""
    return [
        {"name": name, "schema": schema, "format": sample_format(name)}
        for name, schema in SAMPLE_DOCUMENTS.items()
    ]


def schema_for(document_name: str) -> Optional[str]:
    return SAMPLE_DOCUMENTS.get(document_name)


def load_sample_bytes(name: str) -> bytes:
    """Raw content of a sample document or schema.

    Raises:
        KeyError: unknown sample name
        FileNotFoundError: sample file missing from the samples directory
    """
    return _sample_path(name).read_bytes()


def _load_parsed(name: str, parse):
    path = _sample_path(name)
    key = _identity(path)
    cached = _parse_cache.get(key)
    if cached is not None:
        return cached

    parsed = parse(path.read_bytes())
    # One entry per file: drop versions parsed before the last edit
    for stale in [k for k in _parse_cache if k[0] == key[0]]:
        del _parse_cache[stale]
    _parse_cache[key] = parsed
    logger.debug("sample_parsed", sample=name, path=key[0])
    return parsed


def load_sample_document(name: str) -> Value:
    """Parsed sample document (cached). Raises ParseError if the sample is broken."""
    if name not in SAMPLE_DOCUMENTS:
        raise KeyError(name)
    parser = parse_toml_document if sample_format(name) == "toml" else parse_json_document
    return _load_parsed(name, parser)


def load_sample_schema(name: str) -> Schema:
    """Parsed sample schema (cached). Raises ParseError if the sample is broken."""
    if name not in SAMPLE_SCHEMAS:
        raise KeyError(name)
    return _load_parsed(name, parse_schema)


def clear_cache() -> None:
    _parse_cache.clear()
