"""
Conversion between Swagger/OpenAPI specifications and mock environments.

OpenAPI specifications: https://github.com/OAI/OpenAPI-Specification/blob/master/versions/3.0.1.md
Swagger specifications: https://github.com/OAI/OpenAPI-Specification/blob/master/versions/2.0.md
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union
from urllib.parse import urlparse

from jsonschema.exceptions import ValidationError
from openapi_spec_validator import validate

from .dereferencer import load_document
from .exceptions import ConverterError, UnsupportedVersionError
from .factory import DEFAULT_CONTENT_TYPE, SchemaFactory
from .headers import (
    CONTENT_TYPE,
    build_response_headers,
    get_response_content_type,
    is_content_type,
)
from .models import (
    METHODS,
    Environment,
    Method,
    Route,
    RouteResponse,
    parse_status_code,
)
from .notifications import Errors, LoggingNotifier, Notifier
from .paths import (
    extract_path_parameters,
    remove_leading_slash,
    replace_server_variables,
    to_openapi_path,
    to_route_path,
)
from .versions import ParsedSpecification, SpecificationVersion

OPENAPI_VERSION = "3.0.0"
EXPORT_INFO_VERSION = "1.0.0"
DEFAULT_NAMES = {
    SpecificationVersion.SWAGGER: "Swagger import",
    SpecificationVersion.OPENAPI_V3: "OpenAPI import",
}


def _swagger_content_types(
    operation: Dict[str, Any], response: Dict[str, Any]
) -> List[str]:
    return operation.get("produces") or []


def _openapi_v3_content_types(
    operation: Dict[str, Any], response: Dict[str, Any]
) -> List[str]:
    return list(response.get("content") or {})


CONTENT_TYPE_EXTRACTORS: Dict[
    SpecificationVersion, Callable[[Dict[str, Any], Dict[str, Any]], List[str]]
] = {
    SpecificationVersion.SWAGGER: _swagger_content_types,
    SpecificationVersion.OPENAPI_V3: _openapi_v3_content_types,
}


def _swagger_port(document: Dict[str, Any]) -> Optional[int]:
    """Read the port of a Swagger 'host' ("hostname:port")."""
    parts = (document.get("host") or "").split(":")
    if len(parts) > 1 and parts[1].isdecimal() and int(parts[1]) > 0:
        return int(parts[1])
    return None


def _swagger_endpoint_prefix(document: Dict[str, Any]) -> Optional[str]:
    base_path = document.get("basePath")
    return remove_leading_slash(base_path) if base_path else None


def _openapi_v3_endpoint_prefix(document: Dict[str, Any]) -> Optional[str]:
    """Get the path of the first server URL.

    Raises:
        ServerVariableError: If the URL uses a variable without default
    """
    servers = document.get("servers")
    if (
        not isinstance(servers, list)
        or not servers
        or not isinstance(servers[0], dict)
        or not servers[0].get("url")
    ):
        return None

    url = replace_server_variables(servers[0]["url"], servers[0].get("variables"))
    return remove_leading_slash(urlparse(url).path)


class OpenAPIConverter:
    """Converts Swagger/OpenAPI specifications to and from mock environments."""

    def __init__(
        self,
        factory: Optional[SchemaFactory] = None,
        notifier: Optional[Notifier] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the converter.

        Args:
            factory: Builds entities with their default values
            notifier: Receives user facing warnings and errors
            logger: Receives diagnostic messages
        """
        self.factory = factory or SchemaFactory()
        self.logger = logger or logging.getLogger(__name__)
        self.notifier = notifier or LoggingNotifier(self.logger)

    def import_file(self, file_path: Union[str, Path]) -> Optional[Environment]:
        """Import a Swagger or OpenAPI file.

        Args:
            file_path: Path or URL of the specification

        Returns:
            The new environment, or None if the file could not be imported
        """
        self.logger.info(f"Starting OpenAPI file '{file_path}' import")

        try:
            document = load_document(file_path)
        except ConverterError as error:
            self._import_failed(error)
            return None

        return self.import_document(document)

    def import_document(self, document: Dict[str, Any]) -> Optional[Environment]:
        """Import a dereferenced Swagger or OpenAPI document.

        Args:
            document: The parsed specification

        Returns:
            The new environment, or None if the document could not be imported
        """
        try:
            parsed = ParsedSpecification.from_document(document)
        except UnsupportedVersionError:
            self.notifier.warn(Errors.IMPORT_WRONG_VERSION.value)
            return None

        try:
            return self.convert_from_specification(parsed)
        except (
            ConverterError,
            AttributeError,
            KeyError,
            IndexError,
            TypeError,
            ValueError,
        ) as error:
            self._import_failed(error)
            return None

    def export(
        self, environment: Environment, indent: Optional[int] = None
    ) -> Optional[str]:
        """Export an environment to an OpenAPI 3 JSON document.

        Args:
            environment: The environment to export
            indent: JSON indentation, compact output if None

        Returns:
            The serialized document, or None if the export failed
        """
        self.logger.info(
            f"Starting environment {environment.uuid} export to OpenAPI file"
        )

        try:
            document = self.convert_to_openapi_v3(environment)
            return json.dumps(document, indent=indent)
        except Exception as error:
            self.notifier.error(f"{Errors.EXPORT_ERROR.value}: {error}")
            self.logger.error(f"Error while exporting OpenAPI file: {error}")
            return None

    def _import_failed(self, error: Exception) -> None:
        self.notifier.error(f"{Errors.IMPORT_ERROR.value}: {error}")
        self.logger.error(f"Error while importing OpenAPI file: {error}")

    def convert_from_specification(self, parsed: ParsedSpecification) -> Environment:
        """Build an environment from a tagged specification.

        Raises:
            ServerVariableError: If the OpenAPI server URL cannot be resolved
        """
        version, document = parsed
        environment = self.factory.build_environment(
            has_default_route=False, has_default_header=False
        )

        if version is SpecificationVersion.SWAGGER:
            port = _swagger_port(document)
            endpoint_prefix = _swagger_endpoint_prefix(document)
        else:
            port = None
            endpoint_prefix = _openapi_v3_endpoint_prefix(document)

        if port is not None:
            environment.port = port
        if endpoint_prefix is not None:
            environment.endpoint_prefix = endpoint_prefix

        info = document.get("info") or {}
        environment.name = info.get("title") or DEFAULT_NAMES[version]
        environment.routes = self.create_routes(parsed)

        return environment

    def create_routes(self, parsed: ParsedSpecification) -> List[Route]:
        """Create the routes of every path and supported method."""
        version, document = parsed
        routes: List[Route] = []

        for route_path, path_item in (document.get("paths") or {}).items():
            for route_method, operation in (path_item or {}).items():
                method = str(route_method).lower()
                if method not in METHODS or not isinstance(operation, dict):
                    continue

                route = self.factory.build_route(has_default_response=False)
                route.documentation = (
                    operation.get("summary") or operation.get("description") or ""
                )
                route.method = Method(method)
                route.endpoint = remove_leading_slash(to_route_path(route_path))
                route.responses = self._create_route_responses(version, operation)
                routes.append(route)

        return routes

    def _create_route_responses(
        self, version: SpecificationVersion, operation: Dict[str, Any]
    ) -> List[RouteResponse]:
        extract_content_types = CONTENT_TYPE_EXTRACTORS[version]
        route_responses: List[RouteResponse] = []

        for response_status, response in (operation.get("responses") or {}).items():
            status_code = parse_status_code(response_status)
            if status_code is None:
                continue

            response = response or {}
            route_response = self.factory.build_route_response()
            route_response.body = ""
            route_response.status_code = status_code
            route_response.label = response.get("description") or ""
            route_response.headers = build_response_headers(
                extract_content_types(operation, response),
                response.get("headers"),
                self.factory,
            )
            route_responses.append(route_response)

        if not route_responses:
            route_response = self.factory.build_route_response()
            route_response.headers = [
                self.factory.build_header(CONTENT_TYPE, DEFAULT_CONTENT_TYPE)
            ]
            route_responses.append(route_response)

        return route_responses

    def convert_to_openapi_v3(self, environment: Environment) -> Dict[str, Any]:
        """Build an OpenAPI 3 document describing an environment.

        The document is validated but validation errors are only logged.
        """
        scheme = "https" if environment.https else "http"
        paths: Dict[str, Dict[str, Any]] = {}

        for route in environment.routes:
            endpoint = to_openapi_path(route.endpoint)
            operation: Dict[str, Any] = {
                "description": route.documentation,
                "responses": {
                    str(response.status_code): self._build_response(
                        environment, response
                    )
                    for response in route.responses
                },
            }

            parameters = extract_path_parameters(route.endpoint)
            if parameters:
                operation["parameters"] = [
                    {
                        "name": name,
                        "in": "path",
                        "schema": {"type": "string"},
                        "required": True,
                    }
                    for name in parameters
                ]

            paths.setdefault(endpoint, {})[route.method.value] = operation

        document = {
            "openapi": OPENAPI_VERSION,
            "info": {"title": environment.name, "version": EXPORT_INFO_VERSION},
            "servers": [
                {
                    "url": f"{scheme}://localhost:{environment.port}/{environment.endpoint_prefix}"
                }
            ],
            "paths": paths,
        }

        try:
            validate(document)
        except ValidationError as error:
            self.logger.error(
                f"Error while validating OpenAPI export object: {error.message}"
            )

        return document

    def _build_response(
        self, environment: Environment, response: RouteResponse
    ) -> Dict[str, Any]:
        content_type = get_response_content_type(environment, response)
        headers = {
            header.key: {"schema": {"type": "string"}, "example": header.value}
            for header in [*environment.headers, *response.headers]
            if header.key and not is_content_type(header)
        }

        return {
            "description": response.label,
            "content": {content_type: {}} if content_type else {},
            "headers": headers,
        }
