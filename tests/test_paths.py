"""Tests for path parameter and server variable translation."""

import pytest

from openapi_to_mock.exceptions import ServerVariableError
from openapi_to_mock.paths import (
    extract_path_parameters,
    remove_leading_slash,
    replace_server_variables,
    to_openapi_path,
    to_route_path,
)


def test_to_route_path():
    """Test that OpenAPI parameters become route parameters."""
    assert to_route_path("/users/{id}/orders/{orderId}") == "/users/:id/orders/:orderId"
    assert to_route_path("/health") == "/health"


def test_to_openapi_path():
    """Test that route parameters become OpenAPI parameters with a leading slash."""
    assert to_openapi_path("users/:id/orders/:orderId") == "/users/{id}/orders/{orderId}"
    assert to_openapi_path("") == "/"


def test_path_round_trip():
    endpoint = "users/:id/orders/:order_id2"
    assert remove_leading_slash(to_route_path(to_openapi_path(endpoint))) == endpoint


def test_extract_path_parameters_unique_and_ordered():
    assert extract_path_parameters("a/:b/c/:a/:b") == ["b", "a"]
    assert extract_path_parameters("static/path") == []


def test_remove_leading_slash():
    assert remove_leading_slash("/v1") == "v1"
    assert remove_leading_slash("v1") == "v1"
    assert remove_leading_slash("") == ""


def test_replace_server_variables():
    """Test that server variables are replaced by their defaults."""
    url = replace_server_variables(
        "{scheme}://api.example.com:{port}/{base}",
        {
            "scheme": {"default": "https", "enum": ["http", "https"]},
            "port": {"default": "8443"},
            "base": {"default": "v2"},
        },
    )
    assert url == "https://api.example.com:8443/v2"


def test_replace_server_variables_without_default():
    """Test that a variable without default is reported."""
    with pytest.raises(ServerVariableError):
        replace_server_variables("https://{host}/v1", {"host": {"enum": ["a"]}})

    with pytest.raises(ServerVariableError):
        replace_server_variables("https://{host}/v1")
