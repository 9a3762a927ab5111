"""Tests for the MCP server binding and process entry point."""

import json
import logging
from importlib.metadata import version

import httpx
import mcp.types as types
import pytest
from mcp.server.lowlevel import Server
from unittest.mock import patch

from semandoc_mcp import server as server_module
from semandoc_mcp.server import SERVER_NAME, create_server


@pytest.fixture
def mcp_server(tool_service):
    return create_server(tool_service)


async def list_tools(mcp_server):
    handler = mcp_server.request_handlers[types.ListToolsRequest]
    result = await handler(types.ListToolsRequest(method="tools/list"))
    return result.root.tools


async def call_tool(mcp_server, name, arguments=None):
    handler = mcp_server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    result = await handler(request)
    return result.root


class TestCreateServer:
    def test_server_name(self, mcp_server):
        assert mcp_server.name == SERVER_NAME

    @pytest.mark.asyncio
    async def test_lists_six_tools(self, mcp_server):
        tools = await list_tools(mcp_server)

        assert [t.name for t in tools] == [
            "create_document",
            "search_documents",
            "get_document",
            "list_documents",
            "get_stats",
            "delete_document",
        ]
        get_document = next(t for t in tools if t.name == "get_document")
        assert get_document.inputSchema["required"] == ["document_id"]

    @pytest.mark.asyncio
    async def test_call_tool_returns_text_content(self, mcp_server, mock_backend):
        mock_backend.payload = {"results": [{"id": "abc123", "score": 0.92}]}

        result = await call_tool(mcp_server, "search_documents", {"query": "rag"})

        assert not result.isError
        assert result.content[0].type == "text"
        assert result.content[0].text == '{"results":[{"id":"abc123","score":0.92}]}'
        assert mock_backend.last_json() == {"query": "rag", "k": 5}

    @pytest.mark.asyncio
    async def test_network_failure_is_error_result(self, mcp_server, mock_backend):
        mock_backend.fail_with = httpx.ConnectError

        result = await call_tool(mcp_server, "get_stats", {})

        assert result.isError

        # The server keeps serving after a failed call
        mock_backend.fail_with = None
        mock_backend.payload = {"total_documents": 7}
        result = await call_tool(mcp_server, "get_stats", {})

        assert not result.isError
        assert json.loads(result.content[0].text) == {"total_documents": 7}

    @pytest.mark.asyncio
    async def test_validation_failure_is_error_result(self, mcp_server, mock_backend):
        result = await call_tool(mcp_server, "create_document", {"metadata": {}})

        assert result.isError
        assert mock_backend.requests == []


class TestMain:
    def test_fatal_error_exits_non_zero(self, monkeypatch, caplog):
        async def broken_serve(config):
            raise RuntimeError("transport cannot bind")

        monkeypatch.setattr(server_module, "serve", broken_serve)

        with caplog.at_level(logging.ERROR):
            with pytest.raises(SystemExit) as exc_info:
                server_module.main(["--host", "foo", "--port", "9999"])

        assert exc_info.value.code == 1
        assert "transport cannot bind" in caplog.text

    def test_passes_resolved_config_to_serve(self, monkeypatch):
        seen = {}

        async def fake_serve(config):
            seen["config"] = config

        monkeypatch.setattr(server_module, "serve", fake_serve)
        monkeypatch.delenv("SEMANDOC_HOST", raising=False)

        server_module.main(["--port", "9999"])

        assert seen["config"].base_url == "http://localhost:9999"

    def test_package_entry_point(self):
        from semandoc_mcp import main

        with patch.object(server_module, "main") as run_server:
            main()

        run_server.assert_called_once_with()

    def test_bad_environment_setting_is_fatal(self, monkeypatch, caplog):
        monkeypatch.setenv("SEMANDOC_PORT", "abc")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(SystemExit) as exc_info:
                server_module.main([])

        assert exc_info.value.code == 1
        assert "Fatal error in main()" in caplog.text


def test_mcp_sdk_provides_tool_decorators():
    # create_server relies on the 1.x low-level Server decorators
    assert version("mcp").split(".")[0] == "1"
    assert hasattr(Server, "list_tools")
    assert hasattr(Server, "call_tool")
