"""Registry of the knowledge-base tools and their argument schemas"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ValidationError

from ..models.tool import (
    CreateDocumentArguments,
    DeleteDocumentArguments,
    GetDocumentArguments,
    GetStatsArguments,
    ListDocumentsArguments,
    SearchDocumentsArguments,
    ToolDefinition,
)
from .errors import ToolValidationError, UnknownToolError

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Holds tool definitions keyed by name and validates invocations against them"""

    def __init__(self):
        self._tools: Dict[str, ToolDefinition] = {}

    def register(self, definition: ToolDefinition) -> None:
        """Add a tool definition

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        if definition.name in self._tools:
            raise ValueError(f"Tool {definition.name} is already registered")
        self._tools[definition.name] = definition
        logger.debug(f"Registered tool {definition.name}")

    def get(self, name: str) -> ToolDefinition:
        """Look up a tool by name

        Raises:
            UnknownToolError: If no tool has this name
        """
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(
                f"Unknown tool: {name}", details={"available": list(self._tools)}
            ) from None

    def definitions(self) -> List[ToolDefinition]:
        """All registered tools, in registration order"""
        return list(self._tools.values())

    def validate(self, name: str, arguments: Optional[Dict[str, Any]]) -> BaseModel:
        """Validate invocation arguments and apply defaults

        Args:
            name: Registered tool name
            arguments: Raw argument mapping from the caller, None means no arguments

        Returns:
            Instance of the tool's arguments model

        Raises:
            UnknownToolError: If no tool has this name
            ToolValidationError: If the arguments do not match the schema
        """
        definition = self.get(name)
        try:
            return definition.arguments_model.model_validate(arguments or {})
        except ValidationError as e:
            raise ToolValidationError(
                f"Invalid arguments for {name}: {e.error_count()} validation error(s)",
                details={"errors": e.errors(include_url=False, include_context=False)},
            ) from e

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def build_registry() -> ToolRegistry:
    """Create a registry holding the six knowledge-base tools"""
    registry = ToolRegistry()
    registry.register(ToolDefinition(
        name="create_document",
        description="Add a document to the knowledge base",
        arguments_model=CreateDocumentArguments,
        method="POST",
        path="/documents/",
        payload="json",
    ))
    registry.register(ToolDefinition(
        name="search_documents",
        description="Search the knowledge base for information related to a query",
        arguments_model=SearchDocumentsArguments,
        method="POST",
        path="/documents/search/",
        payload="json",
    ))
    registry.register(ToolDefinition(
        name="get_document",
        description="Get a document from the knowledge base by its ID",
        arguments_model=GetDocumentArguments,
        method="GET",
        path="/documents/{document_id}",
    ))
    registry.register(ToolDefinition(
        name="list_documents",
        description="List documents in the knowledge base page by page",
        arguments_model=ListDocumentsArguments,
        method="GET",
        path="/documents/",
        payload="query",
    ))
    registry.register(ToolDefinition(
        name="get_stats",
        description="Get statistics about the knowledge base",
        arguments_model=GetStatsArguments,
        method="GET",
        path="/documents/stats/overview",
    ))
    registry.register(ToolDefinition(
        name="delete_document",
        description="Delete a document from the knowledge base by its ID",
        arguments_model=DeleteDocumentArguments,
        method="DELETE",
        path="/documents/{document_id}",
    ))
    return registry
