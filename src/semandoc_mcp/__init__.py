# MCP server exposing the SemanDoc knowledge base as tools
# Main module initialization

__version__ = "1.0.0"


def main() -> None:
    """CLI entry point for the application."""
    from .server import main as run_server

    run_server()
