"""
Data models for the mock server environment.
"""

import re
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .paths import remove_leading_slash


class Method(str, Enum):
    """HTTP methods a route can be served on."""

    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"
    HEAD = "head"
    OPTIONS = "options"


METHODS = [method.value for method in Method]

STATUS_CODES: Dict[int, str] = {
    100: "Continue",
    101: "Switching Protocols",
    102: "Processing",
    103: "Early Hints",
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-Authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    207: "Multi-Status",
    208: "Already Reported",
    226: "IM Used",
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    305: "Use Proxy",
    306: "Switch Proxy",
    307: "Temporary Redirect",
    308: "Permanent Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Payload Too Large",
    414: "URI Too Long",
    415: "Unsupported Media Type",
    416: "Range Not Satisfiable",
    417: "Expectation Failed",
    418: "I'm a teapot",
    420: "Enhance Your Calm",
    421: "Misdirected Request",
    422: "Unprocessable Entity",
    423: "Locked",
    424: "Failed Dependency",
    425: "Too Early",
    426: "Upgrade Required",
    428: "Precondition Required",
    429: "Too Many Requests",
    431: "Request Header Fields Too Large",
    444: "No Response",
    449: "Retry With",
    450: "Blocked by Windows Parental Controls",
    451: "Unavailable For Legal Reasons",
    494: "Request Header Too Large",
    495: "SSL Certificate Error",
    496: "SSL Certificate Required",
    497: "HTTP Request Sent to HTTPS Port",
    499: "Client Closed Request",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
    506: "Variant Also Negotiates",
    507: "Insufficient Storage",
    508: "Loop Detected",
    509: "Bandwidth Limit Exceeded",
    510: "Not Extended",
    511: "Network Authentication Required",
    598: "Network Read Timeout Error",
    599: "Network Connect Timeout Error",
}


def parse_status_code(value: Any) -> Optional[int]:
    """Parse a response key into a supported status code.

    Range and wildcard keys such as "2XX" or "default" are not supported.

    Args:
        value: Response key as declared in a specification document

    Returns:
        The status code as an integer, or None if it is not supported
    """
    text = str(value)
    if not re.fullmatch(r"[0-9]+", text):
        return None

    code = int(text)
    return code if code in STATUS_CODES else None


def is_supported_status(value: Any) -> bool:
    return parse_status_code(value) is not None


def _new_uuid() -> str:
    return str(uuid4())


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Header(CamelModel):
    """A header sent with a response."""

    key: str = ""
    value: str = ""


class RouteResponse(CamelModel):
    """One of the responses a route can serve."""

    uuid: str = Field(default_factory=_new_uuid)
    status_code: int = Field(200, alias="statusCode")
    label: str = ""
    body: str = "{}"
    latency: int = 0
    headers: List[Header] = Field(default_factory=list)

    @field_validator("status_code")
    @classmethod
    def _check_status_code(cls, value: int) -> int:
        if value not in STATUS_CODES:
            raise ValueError(f"Unsupported status code: {value}")
        return value


class Route(CamelModel):
    """A mocked endpoint."""

    uuid: str = Field(default_factory=_new_uuid)
    documentation: str = ""
    method: Method = Method.GET
    endpoint: str = ""
    responses: List[RouteResponse] = Field(min_length=1)

    @field_validator("method", mode="before")
    @classmethod
    def _lower_method(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


class Environment(CamelModel):
    """Configuration of one mock server."""

    uuid: str = Field(default_factory=_new_uuid)
    name: str = ""
    port: int = 3000
    endpoint_prefix: str = Field("", alias="endpointPrefix")
    latency: int = 0
    https: bool = False
    headers: List[Header] = Field(default_factory=list)
    routes: List[Route] = Field(default_factory=list)

    @field_validator("endpoint_prefix")
    @classmethod
    def _strip_leading_slash(cls, value: str) -> str:
        return remove_leading_slash(value)
