"""Tests for specification loading and dereferencing."""

import pytest
from pathlib import Path

from openapi_to_mock.dereferencer import PathDereferencer, load_document
from openapi_to_mock.exceptions import DereferenceError, DocumentLoadError

FIXTURES = Path(__file__).parent / "fixtures"


def test_swagger_local_and_file_references():
    """Test that local and relative file references are resolved."""
    spec = load_document(FIXTURES / "petstore-swagger.yaml")

    responses = spec["paths"]["/pets/{petId}"]["get"]["responses"]
    assert responses["200"]["description"] == "Expected response to a valid request"
    assert responses["200"]["schema"]["properties"]["name"]["type"] == "string"
    assert responses["404"] == {"description": "Pet not found"}
    assert spec["paths"]["/pets"]["get"]["responses"]["default"] == {
        "description": "unexpected error"
    }


def test_circular_references():
    """Test handling of circular references."""
    spec = load_document(FIXTURES / "circular.yaml")

    node = spec["components"]["schemas"]["Node"]
    child = node["properties"]["child"]
    assert child["type"] == "object"
    assert child["properties"]["child"] == {
        "$$circular_ref": "#/components/schemas/Node"
    }


def test_invalid_ref_error():
    """Test that invalid references raise appropriate errors."""
    spec = {"paths": {"/invalid": {"$ref": "#/paths/nonexistent"}}}

    dereferencer = PathDereferencer(spec)
    with pytest.raises(DereferenceError):
        dereferencer.dereference()


def test_missing_external_file_error(tmp_path):
    spec = {"paths": {"/x": {"$ref": "missing.yaml#/paths/x"}}}

    with pytest.raises(DereferenceError):
        PathDereferencer(spec, base_path=tmp_path).dereference()


def test_additional_properties_preservation():
    """Test that additional properties alongside a $ref are preserved."""
    spec = {
        "paths": {
            "/base": {"get": {"summary": "Base endpoint"}},
            "/extended": {
                "$ref": "#/paths/~1base",
                "description": "Extended endpoint",
            },
        }
    }

    result = PathDereferencer(spec).dereference()

    extended = result["paths"]["/extended"]
    assert "get" in extended  # From base
    assert extended["description"] == "Extended endpoint"  # Additional property


def test_references_inside_lists():
    spec = {
        "parameters": {"limit": {"name": "limit", "in": "query"}},
        "paths": {"/pets": {"get": {"parameters": [{"$ref": "#/parameters/limit"}]}}},
    }

    result = PathDereferencer(spec).dereference()

    assert result["paths"]["/pets"]["get"]["parameters"] == [
        {"name": "limit", "in": "query"}
    ]


def test_source_spec_not_modified():
    spec = {"a": {"b": 1}, "c": {"$ref": "#/a"}}

    PathDereferencer(spec).dereference()

    assert spec["c"] == {"$ref": "#/a"}


def test_load_json_document(tmp_path):
    path = tmp_path / "spec.json"
    path.write_text('{"swagger": "2.0", "paths": {}}')

    assert load_document(path) == {"swagger": "2.0", "paths": {}}


def test_load_document_errors(tmp_path):
    """Test that unreadable or invalid documents raise DocumentLoadError."""
    with pytest.raises(DocumentLoadError):
        load_document(tmp_path / "missing.yaml")

    invalid = tmp_path / "invalid.yaml"
    invalid.write_text("openapi: [3.0.0\n")
    with pytest.raises(DocumentLoadError):
        load_document(invalid)

    scalar = tmp_path / "scalar.yaml"
    scalar.write_text("just text\n")
    with pytest.raises(DocumentLoadError):
        load_document(scalar)


def test_references_inside_external_files():
    """Test that references in an external file are resolved against that file."""
    spec = load_document(FIXTURES / "split" / "root.yaml")

    response = spec["paths"]["/status"]["get"]["responses"]["200"]
    assert response["description"] == "Service is up"
    assert response["headers"]["X-Rate-Limit"] == {
        "description": "Requests left",
        "schema": {"type": "integer"},
    }
    assert list(response["content"]) == ["text/plain"]


def test_relative_document_path(monkeypatch):
    monkeypatch.chdir(FIXTURES)

    spec = load_document("split/root.yaml")

    response = spec["paths"]["/status"]["get"]["responses"]["200"]
    assert response["description"] == "Service is up"
