"""
Response header handling.
"""

from typing import Any, Dict, List, Optional

from .factory import DEFAULT_CONTENT_TYPE, SchemaFactory
from .models import Environment, Header, RouteResponse

CONTENT_TYPE = "Content-Type"


def build_response_headers(
    content_types: Optional[List[str]],
    declared_headers: Optional[Dict[str, Any]],
    factory: Optional[SchemaFactory] = None,
) -> List[Header]:
    """Build the headers of an imported response.

    Only the names of declared headers are kept, with empty values.

    Args:
        content_types: Declared content types ('produces' in Swagger, keys of
            'content' in OpenAPI 3)
        declared_headers: The response's 'headers' object
        factory: Factory used to create the headers

    Returns:
        The Content-Type header followed by one header per declared name
    """
    factory = factory or SchemaFactory()
    content_type_header = factory.build_header(CONTENT_TYPE, DEFAULT_CONTENT_TYPE)

    if content_types and DEFAULT_CONTENT_TYPE not in content_types:
        content_type_header.value = content_types[0]

    headers = [content_type_header]
    if declared_headers:
        headers.extend(factory.build_header(name, "") for name in declared_headers)

    return headers


def is_content_type(header: Header) -> bool:
    return header.key.lower() == CONTENT_TYPE.lower()


def get_response_content_type(
    environment: Environment, response: RouteResponse
) -> Optional[str]:
    """Get the content type a response is served with.

    Response headers take precedence over environment headers.
    """
    content_type = None
    for header in [*environment.headers, *response.headers]:
        if is_content_type(header) and header.value:
            content_type = header.value
    return content_type
