"""Swagger/OpenAPI to mock environment converter package."""

from .converter import OpenAPIConverter
from .factory import SchemaFactory
from .models import Environment, Header, Method, Route, RouteResponse
from .notifications import CollectingNotifier, LoggingNotifier

__version__ = "0.1.0"
__all__ = [
    "OpenAPIConverter",
    "SchemaFactory",
    "Environment",
    "Header",
    "Method",
    "Route",
    "RouteResponse",
    "CollectingNotifier",
    "LoggingNotifier",
]
