# Services package
# Contains tool registration, request translation and dispatch

from .document_tools import DocumentToolService
from .errors import (
    BackendRequestError,
    DocumentToolError,
    ErrorKind,
    ToolValidationError,
    UnknownToolError,
)
from .registry import ToolRegistry, build_registry
from .translator import RequestTranslator

__all__ = [
    "BackendRequestError",
    "DocumentToolError",
    "DocumentToolService",
    "ErrorKind",
    "RequestTranslator",
    "ToolRegistry",
    "ToolValidationError",
    "UnknownToolError",
    "build_registry",
]
