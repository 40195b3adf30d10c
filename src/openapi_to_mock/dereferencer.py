"""
Loading and dereferencing of Swagger/OpenAPI documents.

This module turns a specification file into a self-contained dictionary by
resolving $ref references, including:
- Local references (e.g. "#/definitions/Pet" or "#/components/schemas/Pet")
- File references (e.g. "./common.yaml#/responses/NotFound")
- URL references (e.g. "https://example.com/common.json#/parameters/limit")

References found inside an external file are resolved against that file: local
pointers target the file itself and relative paths start from its directory.
"""

from typing import Any, Dict, NamedTuple, Optional, Tuple, Union, Set
from pathlib import Path
from urllib.parse import urljoin
import copy
import json
import urllib.request

import yaml

from .exceptions import DereferenceError, DocumentLoadError

Base = Union[Path, str]


def _is_url(location: Any) -> bool:
    return str(location).startswith(("http://", "https://"))


def _parse(content: Union[str, bytes], source: str) -> Any:
    """Parse JSON or YAML content.

    YAML files are parsed with the YAML loader, anything else is tried as JSON
    first since YAML is a superset of it.
    """
    if source.endswith((".yaml", ".yml")):
        return yaml.safe_load(content)
    try:
        return json.loads(content)
    except json.JSONDecodeError:
        return yaml.safe_load(content)


def _read(location: str) -> Any:
    if _is_url(location):
        with urllib.request.urlopen(location) as response:
            return _parse(response.read(), location)

    with open(location) as f:
        return _parse(f.read(), location)


class _Scope(NamedTuple):
    """The document a reference appears in."""

    document: Any
    location: str
    # Directory of a file, or the URL of a remote document
    base: Base


class PathDereferencer:
    """Resolves references in a specification document."""

    def __init__(self, spec: Dict[str, Any], base_path: Optional[Base] = None):
        """Initialize the dereferencer.

        Args:
            spec: The specification dictionary
            base_path: Base path (or URL of the document) for resolving relative
                      references. If not provided, uses the current working directory.
        """
        self.spec = copy.deepcopy(spec)
        if _is_url(base_path):
            self.base_path: Base = str(base_path)
        else:
            self.base_path = Path(base_path) if base_path else Path.cwd()
        self._cache: Dict[str, Any] = {}
        self._ref_stack: Set[str] = set()

    def _resolve_json_pointer(self, obj: Dict[str, Any], pointer: str) -> Any:
        """Resolve a JSON pointer within an object.

        Args:
            obj: The object to traverse
            pointer: JSON pointer (e.g. "/definitions/Pet")

        Returns:
            The referenced value

        Raises:
            DereferenceError: If the pointer cannot be resolved
        """
        if not pointer.startswith("/"):
            raise DereferenceError(f"Invalid JSON pointer: {pointer}")

        current = obj
        for part in pointer[1:].split("/"):
            # Unescape JSON pointer encoding
            part = part.replace("~1", "/").replace("~0", "~")
            if isinstance(current, list) and part.isdigit():
                part = int(part)

            try:
                current = current[part]
            except (KeyError, TypeError, IndexError):
                raise DereferenceError(f"Could not resolve pointer {pointer}")

        return current

    def _locate(self, ref_path: str, base: Base) -> Tuple[str, Base]:
        """Get the location of a referenced file and the base of its own references."""
        if _is_url(ref_path):
            return ref_path, ref_path
        if isinstance(base, str):
            location = urljoin(base, ref_path)
            return location, location

        file_path = (base / ref_path).resolve()
        return str(file_path), file_path.parent

    def _load_external_ref(self, location: str) -> Any:
        """Load an external reference from file or URL.

        Raises:
            DereferenceError: If the reference cannot be loaded
        """
        if location in self._cache:
            return self._cache[location]

        try:
            data = _read(location)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise DereferenceError(
                f"Failed to load external reference {location}: {str(e)}"
            )

        self._cache[location] = data
        return data

    def _resolve_ref(self, ref: str, scope: _Scope) -> Tuple[Any, _Scope]:
        """Resolve a $ref string to its value.

        Args:
            ref: The reference string (e.g. "#/definitions/Pet" or "./common.yaml#/responses/NotFound")
            scope: The document the reference appears in

        Returns:
            The referenced value and the document it belongs to

        Raises:
            DereferenceError: If the reference cannot be resolved
        """
        if "#" in ref:
            file_path, pointer = ref.split("#", 1)
        else:
            file_path, pointer = ref, ""

        if file_path:
            location, base = self._locate(file_path, scope.base)
            scope = _Scope(self._load_external_ref(location), location, base)

        if pointer:
            return self._resolve_json_pointer(scope.document, pointer), scope
        return scope.document, scope

    def _dereference(self, value: Any, scope: _Scope) -> Any:
        if isinstance(value, dict):
            return self._dereference_object(value, scope)
        if isinstance(value, list):
            return [self._dereference(item, scope) for item in value]
        return value

    def _dereference_object(self, obj: Dict[str, Any], scope: _Scope) -> Any:
        """Recursively dereference an object and its nested properties."""
        if not isinstance(obj.get("$ref"), str):
            return {key: self._dereference(value, scope) for key, value in obj.items()}

        ref = obj["$ref"]
        ref_value, ref_scope = self._resolve_ref(ref, scope)
        key = f"{ref_scope.location}#{ref.split('#', 1)[1] if '#' in ref else ''}"
        if key in self._ref_stack:
            return {"$$circular_ref": ref}

        self._ref_stack.add(key)
        try:
            ref_value = self._dereference(ref_value, ref_scope)
        finally:
            self._ref_stack.remove(key)

        if not isinstance(ref_value, dict):
            return ref_value

        # Sibling properties are kept next to the referenced ones
        result = {
            k: self._dereference(v, scope) for k, v in obj.items() if k != "$ref"
        }
        result.update(ref_value)
        return result

    def dereference(self) -> Dict[str, Any]:
        """Dereference all references in the specification.

        Returns:
            The specification with all references dereferenced

        Raises:
            DereferenceError: If any reference cannot be resolved
        """
        self._ref_stack.clear()
        return self._dereference(self.spec, _Scope(self.spec, "", self.base_path))


def load_document(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a specification file and dereference it.

    Args:
        path: Path or URL of a JSON or YAML specification

    Returns:
        The dereferenced specification

    Raises:
        DocumentLoadError: If the file cannot be read, parsed or dereferenced
    """
    location = str(path)

    try:
        spec = _read(location)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise DocumentLoadError(f"Failed to load {location}: {str(e)}")

    if not isinstance(spec, dict):
        raise DocumentLoadError(f"{location} does not contain a specification object")

    base_path = location if _is_url(location) else Path(location).resolve().parent
    return PathDereferencer(spec, base_path=base_path).dereference()
