"""
Tests for the validation API endpoints.
"""

import json

import pytest
from fastapi.testclient import TestClient

from schemalab.api import validation
from schemalab.config import Settings
from schemalab.main import app
from schemalab.samples import load_sample_bytes, loader

PERSON_SCHEMA = json.dumps({
    "type": "object",
    "required": ["name"],
    "properties": {"name": {"type": "string"}, "age": {"type": "number", "minimum": 0}},
    "additionalProperties": False,
})


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


class TestRootAndHealth:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "SchemaLab"

    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["dependencies"]["samples"]["status"] == "healthy"

    def test_health_degraded_without_samples(self, client, tmp_path, monkeypatch):
        monkeypatch.setattr(loader, "samples_dir", lambda: tmp_path)

        data = client.get("/api/v1/health").json()

        assert data["status"] == "degraded"
        assert data["dependencies"]["samples"]["status"] == "degraded"


class TestValidateEndpoints:
    def test_json_errors(self, client):
        response = client.post("/api/v1/validate/json", json={
            "document": '{"name": "Amy", "age": -1, "extra": true}',
            "schema": PERSON_SCHEMA,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is False
        assert data["value"] is None
        assert [(e["kind"], e["path"]) for e in data["errors"]] == [
            ("invalid-value", "$.age"),
            ("other", "$.extra"),
        ]
        assert data["summary"] == {"invalid-value": 1, "other": 1}

    def test_json_valid_returns_value(self, client):
        response = client.post("/api/v1/validate/json", json={
            "document": '{"name": "Amy", "age": 3}',
            "schema": PERSON_SCHEMA,
        })

        data = response.json()
        assert data["valid"] is True
        assert data["value"] == {"name": "Amy", "age": 3}
        assert data["errors"] == []

    def test_toml(self, client):
        response = client.post("/api/v1/validate/toml", json={
            "document": 'when = "soon"\n',
            "schema": json.dumps({"properties": {"when": {"type": "dateTime"}}}),
        })

        data = response.json()
        assert data["format"] == "toml"
        assert data["errors"][0]["kind"] == "invalid-datetime-format"
        assert data["errors"][0]["path"] == "$.when"

    def test_parse_error_is_a_result_not_a_failure(self, client):
        response = client.post("/api/v1/validate/json", json={"document": "{", "schema": PERSON_SCHEMA})

        assert response.status_code == 200
        assert [e["kind"] for e in response.json()["errors"]] == ["parse-error"]

    def test_malformed_toml_is_a_result_not_a_failure(self, client):
        response = client.post(
            "/api/v1/validate/toml",
            json={"document": "a = 1\n[a.b]\n", "schema": '{"type": "table"}'},
        )

        assert response.status_code == 200
        assert [e["kind"] for e in response.json()["errors"]] == ["parse-error"]

    def test_missing_schema_field(self, client):
        response = client.post("/api/v1/validate/json", json={"document": "{}"})

        assert response.status_code == 422

    def test_oversized_request(self, client, monkeypatch):
        monkeypatch.setattr(validation, "get_settings", lambda: Settings(MAX_DOCUMENT_BYTES=16))

        response = client.post("/api/v1/validate/json", json={"document": "[" + "1," * 20 + "1]", "schema": "{}"})

        assert response.status_code == 413


class TestSampleEndpoints:
    def test_list(self, client):
        response = client.get("/api/v1/samples")

        assert response.status_code == 200
        names = [s["name"] for s in response.json()]
        assert "valid-person.json" in names
        assert "invalid-config.toml" in names

    def test_get(self, client):
        response = client.get("/api/v1/samples/valid-config.toml")

        assert response.status_code == 200
        data = response.json()
        assert data["schema_name"] == "config-schema.json"
        assert "[database]" in data["content"]

    def test_unknown(self, client):
        assert client.get("/api/v1/samples/missing.json").status_code == 404
        assert client.post("/api/v1/samples/missing.json/validate").status_code == 404

    def test_validate_invalid_sample(self, client):
        response = client.post("/api/v1/samples/invalid-person.json/validate")

        data = response.json()
        assert data["valid"] is False
        assert len(data["errors"]) == 12
        assert data["report"].startswith("JSON schema validation failed with 12 error(s):")

    def test_broken_sample_is_a_parse_error_result(self, client, tmp_path, monkeypatch):
        (tmp_path / "valid-person.json").write_text('{"name": ')
        (tmp_path / "sample-schema.json").write_bytes(load_sample_bytes("sample-schema.json"))
        monkeypatch.setattr(loader, "samples_dir", lambda: tmp_path)

        response = client.post("/api/v1/samples/valid-person.json/validate")

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is False
        assert [e["kind"] for e in data["errors"]] == ["parse-error"]

    def test_missing_sample_file(self, client, tmp_path, monkeypatch):
        monkeypatch.setattr(loader, "samples_dir", lambda: tmp_path)

        assert client.post("/api/v1/samples/valid-config.toml/validate").status_code == 404
        assert client.get("/api/v1/samples/valid-config.toml").status_code == 404

    def test_validate_valid_sample(self, client):
        data = client.post("/api/v1/samples/valid-config.toml/validate").json()

        assert data["valid"] is True
        assert data["value"]["owner"]["name"] == "Tom Preston-Werner"
