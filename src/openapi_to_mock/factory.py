"""
Default-valued environment entities.

The converters never build entities from scratch: they take the objects created
here and only override the fields a specification document provides.
"""

from .models import Environment, Header, Route, RouteResponse

DEFAULT_PORT = 3000
DEFAULT_ENVIRONMENT_NAME = "New environment"
DEFAULT_CONTENT_TYPE = "application/json"


class SchemaFactory:
    """Builds environment entities with their default values."""

    def build_header(self, key: str = "", value: str = "") -> Header:
        return Header(key=key, value=value)

    def build_route_response(self) -> RouteResponse:
        return RouteResponse(
            status_code=200,
            label="",
            body="{}",
            latency=0,
            headers=[self.build_header()],
        )

    def build_route(self, has_default_response: bool = True) -> Route:
        """Build a route.

        Args:
            has_default_response: Give the response a JSON Content-Type header

        Returns:
            A GET route with one response
        """
        response = self.build_route_response()
        if has_default_response:
            response.headers = [
                self.build_header("Content-Type", DEFAULT_CONTENT_TYPE)
            ]

        return Route(
            documentation="",
            method="get",
            endpoint="",
            responses=[response],
        )

    def build_environment(
        self, has_default_route: bool = True, has_default_header: bool = True
    ) -> Environment:
        """Build an environment.

        Args:
            has_default_route: Add an example route
            has_default_header: Add an environment-wide JSON Content-Type header

        Returns:
            The new environment
        """
        return Environment(
            name=DEFAULT_ENVIRONMENT_NAME,
            port=DEFAULT_PORT,
            endpoint_prefix="",
            latency=0,
            https=False,
            headers=(
                [self.build_header("Content-Type", DEFAULT_CONTENT_TYPE)]
                if has_default_header
                else []
            ),
            routes=[self.build_route()] if has_default_route else [],
        )
