"""Dispatch of tool invocations from the MCP server to the backend"""

import logging
from typing import Any, Dict, List, Optional

from ..models.tool import ToolDefinition, ToolResult
from .registry import ToolRegistry
from .translator import RequestTranslator

logger = logging.getLogger(__name__)


class DocumentToolService:
    """Validates tool invocations and forwards them to the knowledge-base backend"""

    def __init__(self, registry: ToolRegistry, translator: RequestTranslator):
        self.registry = registry
        self.translator = translator

    def list_tools(self) -> List[ToolDefinition]:
        return self.registry.definitions()

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """Execute a tool by name

        Args:
            name: Registered tool name
            arguments: Raw arguments from the caller

        Returns:
            Result envelope with the backend response as JSON text

        Raises:
            UnknownToolError: If the tool is not registered
            ToolValidationError: If the arguments fail validation. No request is sent.
            BackendRequestError: If the backend request fails
        """
        definition = self.registry.get(name)
        validated = self.registry.validate(name, arguments)
        logger.info(f"Calling tool {name}")
        return await self.translator.execute(definition, validated)
