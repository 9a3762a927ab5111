# Tool domain models
# Argument schemas for each knowledge-base tool and the MCP result envelope

from string import Formatter
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

# JSON number; booleans are rejected
Number = StrictInt | StrictFloat


class DocumentMetadata(BaseModel):
    """Metadata attached to a document. Forwarded to the backend untouched."""

    tags: list[StrictStr] | None = Field(None, description="Document tags")
    categories: list[StrictStr] | None = Field(
        None, description="Document categories"
    )


class CreateDocumentArguments(BaseModel):
    """Arguments for create_document."""

    content: StrictStr = Field(..., description="Full text of the document")
    metadata: DocumentMetadata = Field(
        default_factory=DocumentMetadata,
        description="Optional tags and categories for the document",
    )


class SearchDocumentsArguments(BaseModel):
    """Arguments for search_documents."""

    query: StrictStr = Field(..., description="Natural language search query")
    k: Number = Field(5, description="Number of results to return")
    tags: list[StrictStr] | None = Field(None, description="Only match these tags")
    categories: list[StrictStr] | None = Field(
        None, description="Only match these categories"
    )


class GetDocumentArguments(BaseModel):
    """Arguments for get_document."""

    document_id: StrictStr = Field(..., min_length=1, description="ID of the document")


class ListDocumentsArguments(BaseModel):
    """Arguments for list_documents."""

    skip: Number = Field(0, description="Number of documents to skip")
    limit: Number = Field(100, description="Maximum documents to return")
    tag: StrictStr | None = Field(None, description="Filter by tag")
    category: StrictStr | None = Field(None, description="Filter by category")


class GetStatsArguments(BaseModel):
    """get_stats takes no arguments."""


class DeleteDocumentArguments(BaseModel):
    """Arguments for delete_document."""

    document_id: StrictStr = Field(..., min_length=1, description="ID of the document to delete")


class ToolDefinition(BaseModel):
    """A tool exposed over MCP and the backend endpoint it maps to."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Unique tool name")
    description: str = Field(..., description="Tool description for LLM consumption")
    arguments_model: type[BaseModel] = Field(
        ..., description="Model validating the tool arguments"
    )
    method: Literal["GET", "POST", "DELETE"]
    path: str = Field(..., description="Path template relative to the backend URL")
    payload: Literal["json", "query", "none"] = "none"

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON Schema advertised to MCP clients."""
        return self.arguments_model.model_json_schema()

    @property
    def path_params(self) -> list[str]:
        """Names of the placeholders in the path template."""
        return [field for _, field, _, _ in Formatter().parse(self.path) if field]


class TextBlock(BaseModel):
    """Single text content block of a tool result."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Tool output envelope: {content: [{type: "text", text: ...}]}."""

    content: list[TextBlock]

    @classmethod
    def from_text(cls, text: str) -> "ToolResult":
        return cls(content=[TextBlock(text=text)])
