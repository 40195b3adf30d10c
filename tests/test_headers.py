"""Tests for response headers and status codes."""

from openapi_to_mock.headers import build_response_headers, get_response_content_type
from openapi_to_mock.models import (
    Environment,
    Header,
    RouteResponse,
    is_supported_status,
    parse_status_code,
)


def _pairs(headers):
    return [(header.key, header.value) for header in headers]


def test_json_preferred_when_declared():
    headers = build_response_headers(["application/xml", "application/json"], None)
    assert _pairs(headers) == [("Content-Type", "application/json")]


def test_first_content_type_without_json():
    headers = build_response_headers(["application/xml", "text/plain"], None)
    assert _pairs(headers) == [("Content-Type", "application/xml")]


def test_default_content_type():
    assert _pairs(build_response_headers([], None)) == [
        ("Content-Type", "application/json")
    ]
    assert _pairs(build_response_headers(None, None)) == [
        ("Content-Type", "application/json")
    ]


def test_declared_headers_appended_with_empty_values():
    """Test that declared headers keep their order and lose their values."""
    headers = build_response_headers(
        ["text/csv"],
        {
            "X-Rate-Limit": {"type": "integer"},
            "X-Expires-After": {"schema": {"type": "string"}, "example": "soon"},
        },
    )
    assert _pairs(headers) == [
        ("Content-Type", "text/csv"),
        ("X-Rate-Limit", ""),
        ("X-Expires-After", ""),
    ]


def test_built_headers_are_not_shared():
    first = build_response_headers([], {"X-A": {}})
    second = build_response_headers([], {"X-A": {}})
    first[0].value = "text/html"
    assert second[0].value == "application/json"


def test_supported_status_codes():
    assert parse_status_code("200") == 200
    assert parse_status_code(404) == 404
    assert is_supported_status("599")


def test_unsupported_status_codes():
    """Test that ranges, wildcards and unknown codes are rejected."""
    for key in ["2XX", "4xx", "default", "abc", "", "200.0", "-200", "999", "20", " 200", "200 "]:
        assert parse_status_code(key) is None, key


def test_response_content_type_prefers_response_header():
    environment = Environment(headers=[Header(key="Content-Type", value="text/plain")])
    response = RouteResponse(
        headers=[Header(key="content-type", value="application/xml")]
    )
    assert get_response_content_type(environment, response) == "application/xml"


def test_response_content_type_falls_back_to_environment():
    environment = Environment(headers=[Header(key="Content-Type", value="text/plain")])
    response = RouteResponse(headers=[Header(key="Content-Type", value="")])
    assert get_response_content_type(environment, response) == "text/plain"


def test_response_content_type_missing():
    assert get_response_content_type(Environment(), RouteResponse()) is None
