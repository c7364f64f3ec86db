"""
Exception types shared by the xeimport modules.

Kept outside the individual modules so the template, provisioning and batch
modules can raise and catch the same types without importing each other.
"""

__all__ = [
    "XEImportError",
    "RequestConflictError",
    "UnknownTemplateError",
    "TemplateLoadError",
    "InvalidTemplateError",
    "ConnectorError",
]


class XEImportError(Exception):
    """Base class for all xeimport errors."""


class RequestConflictError(XEImportError):
    """
    Raised when an import request has an ambiguous shape.

    Examples: no template source given, or an explicit session name
    combined with more than one template source. Always raised before any
    server is contacted.
    """


class UnknownTemplateError(XEImportError):
    """Raised when a catalog identifier has no matching template file."""

    def __init__(self, identifier: str, path):
        self.identifier = identifier
        self.path = path
        super().__init__(f"Unknown template '{identifier}' (looked for {path})")


class TemplateLoadError(XEImportError):
    """Raised when a template file cannot be read."""

    def __init__(self, path, details=None):
        self.path = path
        self.details = details or "could not read file"
        super().__init__(f"Could not load template {path}: {self.details}")


class InvalidTemplateError(XEImportError):
    """
    Raised when a template is not a recognized session document.

    Either the bytes are not well-formed XML, or the root element is not
    `event_sessions`.
    """

    def __init__(self, path, details=None):
        self.path = path
        self.details = details or "missing event_sessions element"
        super().__init__(f"Invalid template document {path}: {self.details}")


class ConnectorError(XEImportError):
    """Raised when a connector cannot be loaded or cannot reach a server."""
