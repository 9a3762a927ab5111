"""
MCP server for the SemanDoc knowledge base

Registers the knowledge-base tools with the MCP SDK and serves them over
stdio. stdout carries protocol frames only; all logging goes to stderr.
"""

import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

import httpx
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .config import BackendConfig, config_from_args, parse_args
from .services.document_tools import DocumentToolService
from .services.registry import build_registry
from .services.translator import RequestTranslator

SERVER_NAME = "semandoc-mcp"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def create_server(service: DocumentToolService) -> Server:
    """Bind the tool service to an MCP server instance"""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=definition.name,
                description=definition.description,
                inputSchema=definition.input_schema,
            )
            for definition in service.list_tools()
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        # Exceptions raised here are reported to the caller as an error result
        result = await service.call_tool(name, arguments)
        return [types.TextContent(type="text", text=block.text) for block in result.content]

    return server


def create_service(config: BackendConfig, client: httpx.AsyncClient) -> DocumentToolService:
    return DocumentToolService(build_registry(), RequestTranslator(config, client))


async def serve(config: BackendConfig) -> None:
    """Serve the tools over stdio until the client disconnects"""
    async with httpx.AsyncClient(timeout=config.timeout) as client:
        server = create_server(create_service(config, client))
        async with stdio_server() as (read_stream, write_stream):
            logger.info("SemanDoc MCP Server running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())


def configure_logging(level: str = "INFO") -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(log_level)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Resolve the backend address and run the stdio server"""
    configure_logging()
    try:
        # Reads SEMANDOC_* settings from the environment
        args = parse_args(argv)
        configure_logging(args.log_level)
        config = config_from_args(args)
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception as e:
        logger.error(f"Fatal error in main(): {e}")
        sys.exit(1)
