"""
Configuration management for NPB Data.

Provides centralized configuration for the scraper and the MCP server.
"""

import os

from pydantic import BaseModel, Field

from . import __version__

DEFAULT_BASE_URL = "https://npb.jp"


class ScraperConfig(BaseModel):
    """Configuration for fetching pages from the NPB site."""

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Site root, no trailing slash")

    user_agent: str = Field(
        default=f"npb-data/{__version__}",
        description="User-Agent header sent by library-created clients",
    )

    @classmethod
    def from_env(cls) -> "ScraperConfig":
        """
        Load configuration from environment variables.

        Environment variables:
            NPB_BASE_URL: Site root (default: https://npb.jp)
            NPB_USER_AGENT: User-Agent header (default: npb-data/<version>)

        Returns:
            ScraperConfig instance
        """
        return cls(
            base_url=os.getenv("NPB_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            user_agent=os.getenv("NPB_USER_AGENT", f"npb-data/{__version__}"),
        )


class MCPServerConfig(BaseModel):
    """Configuration for MCP server."""

    transport: str = Field(default="stdio", description="Transport mode (stdio only)")

    log_level: str = Field(default="info", description="Logging level")

    @classmethod
    def from_env(cls) -> "MCPServerConfig":
        """
        Load configuration from environment variables.

        Environment variables:
            NPB_MCP_TRANSPORT: Transport mode (default: stdio)
            NPB_MCP_LOG_LEVEL: Log level (default: info)

        Returns:
            MCPServerConfig instance
        """
        return cls(
            transport=os.getenv("NPB_MCP_TRANSPORT", "stdio"),
            log_level=os.getenv("NPB_MCP_LOG_LEVEL", "info"),
        )


class Config(BaseModel):
    """Master configuration for all NPB Data components."""

    scraper: ScraperConfig = Field(default_factory=ScraperConfig)
    mcp_server: MCPServerConfig = Field(default_factory=MCPServerConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Load all configuration from environment variables."""
        return cls(
            scraper=ScraperConfig.from_env(),
            mcp_server=MCPServerConfig.from_env(),
        )

    @classmethod
    def default(cls) -> "Config":
        return cls()


# Global configuration instance (loaded from environment)
config = Config.from_env()

__all__ = ["Config", "ScraperConfig", "MCPServerConfig", "config", "DEFAULT_BASE_URL"]
