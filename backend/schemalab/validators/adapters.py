"""Adapters: turn parser output into the Value/Schema models.

The JSON and TOML text parsers themselves are external (`json`, `toml`);
these functions only decode input, call them, and convert the result.
Every failure is raised as `ParseError`.
"""

import datetime
import json
from typing import Any, Union

import toml

from schemalab.validators.schema import Schema
from schemalab.validators.values import Value, ValueKind

Source = Union[bytes, bytearray, str]


class ParseError(ValueError):
    """A document or schema could not be parsed. Fatal for the validation call."""

    def __init__(self, message: str, source: str):
        super().__init__(message)
        self.message = message
        self.source = source


def _decode(source: Source, what: str) -> str:
    if isinstance(source, str):
        return source
    try:
        return bytes(source).decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"Cannot decode {what} as UTF-8: {e}", what) from e


def _load_json(source: Source, what: str) -> Any:
    text = _decode(source, what)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"{what.capitalize()} parsing error: {e}", what) from e
    except RecursionError as e:
        raise ParseError(f"{what.capitalize()} is nested too deeply to parse", what) from e


# ── JSON ──

def _from_json(node: Any) -> Value:
    if isinstance(node, dict):
        return Value.object({key: _from_json(child) for key, child in node.items()})
    if isinstance(node, list):
        return Value.array([_from_json(child) for child in node])
    if isinstance(node, str):
        return Value.string(node)
    # bool before number: bool is an int subclass
    if isinstance(node, bool):
        return Value.boolean(node)
    if isinstance(node, (int, float)):
        return Value.number(node)
    if node is None:
        return Value.null()
    raise ParseError(f"Unsupported JSON value of type {type(node).__name__}", "document")


def parse_json_document(source: Source) -> Value:
    """Parse JSON text (any root kind) into a Value tree."""
    tree = _load_json(source, "document")
    try:
        return _from_json(tree)
    except RecursionError as e:
        raise ParseError("Document is nested too deeply to parse", "document") from e


# ── TOML ──

def _from_toml(node: Any) -> Value:
    if isinstance(node, dict):
        return Value.object({key: _from_toml(child) for key, child in node.items()})
    if isinstance(node, list):
        return Value.array([_from_toml(child) for child in node])
    if isinstance(node, str):
        return Value.string(node)
    if isinstance(node, bool):
        return Value.boolean(node)
    if isinstance(node, int):
        return Value.integer(node)
    if isinstance(node, float):
        return Value.floating(node)
    # datetime before date: datetime is a date subclass
    if isinstance(node, datetime.datetime):
        return Value.temporal(ValueKind.DATETIME, node.isoformat())
    if isinstance(node, datetime.date):
        return Value.temporal(ValueKind.DATE, node.isoformat())
    if isinstance(node, datetime.time):
        return Value.temporal(ValueKind.TIME, node.isoformat())
    raise ParseError(f"Unsupported TOML value of type {type(node).__name__}", "document")


def parse_toml_document(source: Source) -> Value:
    """Parse TOML text into a Value tree rooted at a table."""
    text = _decode(source, "document")
    try:
        tree = toml.loads(text)
    except toml.TomlDecodeError as e:
        raise ParseError(f"Failed to parse TOML: {e}", "document") from e
    # The toml decoder lets some malformed input escape as plain errors
    except (TypeError, IndexError, ValueError) as e:
        raise ParseError(f"Failed to parse TOML: {e}", "document") from e
    except RecursionError as e:
        raise ParseError("Document is nested too deeply to parse", "document") from e
    try:
        return _from_toml(tree)
    except RecursionError as e:
        raise ParseError("Document is nested too deeply to parse", "document") from e


# ── Schema ──

def parse_schema(source: Source) -> Schema:
    """Parse a JSON-encoded schema. The root must be a JSON object."""
    tree = _load_json(source, "schema")
    if not isinstance(tree, dict):
        raise ParseError("Invalid JSON Schema format: root must be an object", "schema")
    try:
        return Schema.from_mapping(tree)
    except RecursionError as e:
        raise ParseError("Schema is nested too deeply to parse", "schema") from e
