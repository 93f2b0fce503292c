import json

import pytest

from schemalab.validators import ValidationEngine, validate_json, validate_toml
from schemalab.validators.adapters import parse_json_document, parse_schema
from schemalab.validators.models import ErrorKind

PERSON_SCHEMA = json.dumps({
    "type": "object",
    "required": ["name"],
    "properties": {
        "name": {"type": "string"},
        "age": {"type": "number", "minimum": 0},
    },
    "additionalProperties": False,
})


class TestValidateJson:
    def test_success_returns_value_unchanged(self):
        document = b'{"name": "Amy", "age": 34}'

        result = ValidationEngine().validate_json(document, PERSON_SCHEMA)

        assert result.ok
        assert result.errors == []
        assert result.value.to_native() == {"name": "Amy", "age": 34}

    def test_failure_returns_every_error(self):
        result = ValidationEngine().validate_json('{"name": "Amy", "age": -1, "extra": true}', PERSON_SCHEMA)

        assert not result.ok
        assert result.value is None
        assert [e.kind for e in result.errors] == [ErrorKind.INVALID_VALUE, ErrorKind.OTHER]
        assert result.summary == {"invalid-value": 1, "other": 1}

    def test_document_parse_error_short_circuits(self):
        result = ValidationEngine().validate_json("{not json", PERSON_SCHEMA)

        assert len(result.errors) == 1
        assert result.errors[0].kind == ErrorKind.PARSE_ERROR
        assert result.errors[0].path == "$"

    def test_schema_parse_error_short_circuits(self):
        result = ValidationEngine().validate_json('{"name": "Amy"}', "[1, 2]")

        assert [e.kind for e in result.errors] == [ErrorKind.PARSE_ERROR]

    def test_at_most_one_parse_error(self):
        result = ValidationEngine().validate_json("{", "{")

        assert len(result.errors) == 1

    def test_repeated_runs_are_identical(self):
        engine = ValidationEngine()
        document = '{"age": "old", "x": 1, "name": 5}'

        results = [engine.validate_json(document, PERSON_SCHEMA) for _ in range(3)]

        assert results[0].errors == results[1].errors == results[2].errors
        assert results[0].describe() == results[2].describe()

    def test_module_level_entry_point(self):
        assert validate_json("{}", '{"required": ["a"]}').errors[0].kind == ErrorKind.MISSING_REQUIRED_PROPERTY

    def test_depth_limit_is_configurable(self):
        result = ValidationEngine(max_depth=1).validate_json("[[[1]]]", '{"items": {"items": {"items": {}}}}')

        assert [e.path for e in result.errors] == ["$[0][0]"]


class TestValidateToml:
    def test_success(self):
        schema = json.dumps({
            "type": "table",
            "properties": {"title": {"type": "string"}, "when": {"type": "dateTime"}},
        })

        result = validate_toml('title = "x"\nwhen = 2024-01-15T10:30:00Z\n', schema)

        assert result.ok
        assert result.format == "toml"
        assert result.value.to_native()["title"] == "x"

    def test_parse_error(self):
        result = validate_toml("[server\n", '{"type": "table"}')

        assert [e.kind for e in result.errors] == [ErrorKind.PARSE_ERROR]
        assert "TOML" in result.errors[0].message

    @pytest.mark.parametrize("text", ["a = 1\n[a.b]\n", "5={:3 47{{T0=1"])
    def test_decoder_crashes_are_parse_errors(self, text):
        result = validate_toml(text, '{"type": "table"}')

        assert not result.ok
        assert [e.kind for e in result.errors] == [ErrorKind.PARSE_ERROR]
        assert result.errors[0].path == "$"

    def test_mixed_type_array_is_a_parse_error(self):
        result = validate_toml('ports = [8000, "http"]\n', '{"type": "table"}')

        assert [e.kind for e in result.errors] == [ErrorKind.PARSE_ERROR]


class TestValidateParsed:
    def test_uses_requested_dialect(self):
        engine = ValidationEngine()
        value = parse_json_document('"2024-01-15"')
        schema = parse_schema('{"type": "date"}')

        assert engine.validate_parsed("toml", value, schema).ok
        assert [e.kind for e in engine.validate_parsed("json", value, schema).errors] == [ErrorKind.OTHER]


class TestDescribe:
    def test_failure_report(self):
        result = validate_json('{"name": "Amy", "age": -1, "extra": true}', PERSON_SCHEMA)

        lines = result.describe().splitlines()

        assert lines[0] == "JSON schema validation failed with 2 error(s):"
        assert lines[1].startswith("[1] $.age: Number is less than required minimum 0")
        assert lines[1].endswith("(expected: >= 0, found: -1)")
        assert lines[2] == "[2] $.extra: Additional property 'extra' not allowed"

    def test_success_report(self):
        result = validate_toml('title = "x"\n', '{"type": "table"}')

        assert result.describe() == "Validation successful. TOML is valid according to the schema."
