"""
Specification version detection.
"""

from enum import Enum
from typing import Any, Dict, NamedTuple

from .exceptions import UnsupportedVersionError


class SpecificationVersion(str, Enum):
    SWAGGER = "swagger"
    OPENAPI_V3 = "openapi_v3"
    UNRECOGNIZED = "unrecognized"


def detect_version(document: Any) -> SpecificationVersion:
    """Classify a parsed document as Swagger 2.0 or OpenAPI 3.x.

    Args:
        document: The parsed specification

    Returns:
        The detected version, SpecificationVersion.UNRECOGNIZED otherwise
    """
    if not isinstance(document, dict):
        return SpecificationVersion.UNRECOGNIZED

    if "swagger" in document:
        return SpecificationVersion.SWAGGER

    openapi = document.get("openapi")
    if isinstance(openapi, str) and openapi.startswith("3."):
        return SpecificationVersion.OPENAPI_V3

    return SpecificationVersion.UNRECOGNIZED


class ParsedSpecification(NamedTuple):
    """A specification document tagged with its version."""

    version: SpecificationVersion
    document: Dict[str, Any]

    @classmethod
    def from_document(cls, document: Any) -> "ParsedSpecification":
        """Tag a document with its version.

        Raises:
            UnsupportedVersionError: If the version is not recognized
        """
        version = detect_version(document)
        if version is SpecificationVersion.UNRECOGNIZED:
            raise UnsupportedVersionError(
                "Document is neither a Swagger 2.0 nor an OpenAPI 3.x specification"
            )
        return cls(version, document)
