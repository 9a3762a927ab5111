"""
Test configuration and shared fixtures for SemanDoc MCP tests.

The mock backend records every request it receives and answers with a
configurable JSON payload, or raises a transport error to simulate an
unreachable server.
"""

import json
from typing import Any, List, Optional

import httpx
import pytest

from semandoc_mcp.config import BackendConfig
from semandoc_mcp.services.document_tools import DocumentToolService
from semandoc_mcp.services.registry import build_registry
from semandoc_mcp.services.translator import RequestTranslator


class MockBackend:
    """Stand-in for the knowledge base HTTP API"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.payload: Any = {"status": "ok"}
        self.raw_body: Optional[bytes] = None
        self.fail_with: Optional[type] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with("Connection refused", request=request)
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def backend_config():
    """Config pointing at the default backend address"""
    return BackendConfig.from_host_port("localhost", 17548)


@pytest.fixture
def mock_backend():
    return MockBackend()


@pytest.fixture
def http_client(mock_backend):
    """httpx client routed to the mock backend"""
    return httpx.AsyncClient(transport=httpx.MockTransport(mock_backend.handler))


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def translator(backend_config, http_client):
    return RequestTranslator(backend_config, http_client)


@pytest.fixture
def tool_service(registry, translator):
    """Tool service wired to the mock backend"""
    return DocumentToolService(registry, translator)


@pytest.fixture
def sample_document():
    """Document record in the shape the backend returns"""
    return {
        "id": "abc123",
        "content": "Retrieval-augmented generation combines search with an LLM.",
        "metadata": {"tags": ["rag", "llm"], "categories": ["notes"]},
        "created_at": "2024-01-01T00:00:00Z",
    }
