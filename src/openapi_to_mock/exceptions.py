class ConverterError(Exception):
    """Base exception for OpenAPI converter errors."""
    pass

class DocumentLoadError(ConverterError):
    """Raised when a specification document cannot be loaded or parsed."""
    pass

class DereferenceError(DocumentLoadError):
    """Raised when a reference cannot be resolved."""
    pass

class ServerVariableError(DocumentLoadError):
    """Raised when a server URL references a variable without a default."""
    pass

class UnsupportedVersionError(ConverterError):
    """Raised when a document is neither Swagger 2.0 nor OpenAPI 3.x."""
    pass
