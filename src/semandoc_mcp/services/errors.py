"""Error types raised while serving knowledge-base tools."""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Category of a tool failure."""

    VALIDATION = "validation"
    UNKNOWN_TOOL = "unknown_tool"
    TRANSPORT = "transport"


class DocumentToolError(Exception):
    """Base exception class for tool invocation errors."""

    kind: ErrorKind

    def __init__(self, message: str, error_code: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ToolValidationError(DocumentToolError):
    """Arguments do not satisfy the tool's schema. Raised before any request is sent."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "VALIDATION_ERROR", details)


class UnknownToolError(DocumentToolError):
    """No tool is registered under the requested name."""

    kind = ErrorKind.UNKNOWN_TOOL

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "UNKNOWN_TOOL", details)


class BackendRequestError(DocumentToolError):
    """The backend could not be reached or returned a body that is not JSON."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "BACKEND_REQUEST_ERROR", details)
