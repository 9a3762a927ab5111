"""
SemanDoc MCP Test Suite

Covers the tool registry and argument validation, translation of tool calls
into backend HTTP requests, configuration resolution and the MCP server
binding. The backend is replaced by an httpx.MockTransport so every test can
count and inspect the outbound requests.
"""
