# Tool domain models

from .tool import (
    CreateDocumentArguments,
    DeleteDocumentArguments,
    DocumentMetadata,
    GetDocumentArguments,
    GetStatsArguments,
    ListDocumentsArguments,
    SearchDocumentsArguments,
    TextBlock,
    ToolDefinition,
    ToolResult,
)

__all__ = [
    "CreateDocumentArguments",
    "DeleteDocumentArguments",
    "DocumentMetadata",
    "GetDocumentArguments",
    "GetStatsArguments",
    "ListDocumentsArguments",
    "SearchDocumentsArguments",
    "TextBlock",
    "ToolDefinition",
    "ToolResult",
]
