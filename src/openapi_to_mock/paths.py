"""
Path parameter and server variable translation.

OpenAPI documents write path parameters as "{name}" while routes use ":name".
"""

import re
from typing import Any, Dict, List, Optional

from .exceptions import ServerVariableError

OPENAPI_PARAMETER_PATTERN = re.compile(r"{(\w+)}")
ROUTE_PARAMETER_PATTERN = re.compile(r":([a-zA-Z0-9_]+)")


def remove_leading_slash(value: str) -> str:
    """Remove one leading slash, if any."""
    return value[1:] if value.startswith("/") else value


def to_route_path(path: str) -> str:
    """Convert "{name}" parameters of an OpenAPI path to ":name".

    Args:
        path: Path key from a specification document (e.g. "/pets/{petId}")

    Returns:
        The path with route parameters (e.g. "/pets/:petId")
    """
    return OPENAPI_PARAMETER_PATTERN.sub(lambda match: ":" + match.group(1), path)


def replace_server_variables(
    url: str, variables: Optional[Dict[str, Dict[str, Any]]] = None
) -> str:
    """Replace "{name}" placeholders of a server URL with variable defaults.

    Args:
        url: Server URL template (e.g. "https://{host}/v1")
        variables: Server variables object of the server entry

    Returns:
        The URL with every placeholder replaced

    Raises:
        ServerVariableError: If a placeholder has no declared default
    """
    variables = variables or {}

    def _default(match: "re.Match[str]") -> str:
        name = match.group(1)
        variable = variables.get(name)
        if not isinstance(variable, dict) or variable.get("default") is None:
            raise ServerVariableError(
                f"Server variable '{name}' used in {url} has no default value"
            )
        return str(variable["default"])

    return OPENAPI_PARAMETER_PATTERN.sub(_default, url)


def extract_path_parameters(endpoint: str) -> List[str]:
    """List the unique parameter names of a route endpoint, in order."""
    names: List[str] = []
    for name in ROUTE_PARAMETER_PATTERN.findall(endpoint):
        if name not in names:
            names.append(name)
    return names


def to_openapi_path(endpoint: str) -> str:
    """Convert a route endpoint to an OpenAPI path key.

    Args:
        endpoint: Route endpoint without leading slash (e.g. "pets/:petId")

    Returns:
        The OpenAPI path (e.g. "/pets/{petId}")
    """
    return "/" + ROUTE_PARAMETER_PATTERN.sub(r"{\1}", endpoint)
