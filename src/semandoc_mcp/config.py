"""Configuration management for the SemanDoc MCP server"""

import argparse
import logging
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Defaults for the command line, overridable with SEMANDOC_* environment variables"""

    # Backend location
    host: str = "localhost"
    port: int = 17548

    # None waits for the backend indefinitely
    request_timeout: float | None = None

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SEMANDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class BackendConfig(BaseModel):
    """Resolved backend address. Built once at startup and read-only afterwards."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    timeout: float | None = None

    @classmethod
    def from_host_port(cls, host: str, port: int, timeout: float | None = None) -> "BackendConfig":
        return cls(base_url=f"http://{host}:{port}", timeout=timeout)


def get_settings() -> Settings:
    """Load settings from the environment and .env file."""
    return Settings()


def build_parser(settings: Optional[Settings] = None) -> argparse.ArgumentParser:
    settings = settings or get_settings()
    parser = argparse.ArgumentParser(
        prog="semandoc-mcp",
        description="Serve the SemanDoc knowledge base API as MCP tools over stdio",
    )
    parser.add_argument("--host", default=settings.host, help="Backend host (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.port, help="Backend port (default: %(default)s)")
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.request_timeout,
        help="Seconds to wait for a backend response (default: wait indefinitely)",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> argparse.Namespace:
    return build_parser(settings).parse_args(argv)


def config_from_args(args: argparse.Namespace) -> BackendConfig:
    """Build the backend config from parsed arguments and report the resolved URL."""
    config = BackendConfig.from_host_port(args.host, args.port, timeout=args.timeout)
    logger.info(f"Using knowledge base API at {config.base_url}")
    return config


def resolve_config(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> BackendConfig:
    """Parse --host/--port and return the backend config.

    Defaults to http://localhost:17548. Host and port are not checked;
    a bad value only shows up as a connection failure later.
    """
    return config_from_args(parse_args(argv, settings))
