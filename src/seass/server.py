"""MCP server exposing the SeaSS linter, built on FastMCP."""

import argparse
import asyncio
import os
import sys
from typing import Optional, Any

from fastmcp import FastMCP

from seass import __version__
from seass.config import load_config, SeassConfig
from seass.utils.logging_config import setup_logging, get_logger
from seass.utils.errors import ConfigurationError, SeassError
from seass.tools.lint_tools import register_lint_tools


class SeassMCPServer:
    """Main SeaSS MCP server class."""

    def __init__(self, config: SeassConfig):
        self.config = config
        self.logger = get_logger("server")

        self.mcp: Any = FastMCP(
            name="SeaSS",
            version=__version__,
        )

        self._register_tools()

        self.logger.info("SeaSS MCP server initialized")

    def _register_tools(self) -> None:
        """Register all MCP tools."""
        try:
            register_lint_tools(self.mcp)
            self.logger.info("Registered lint tools")
        except Exception as e:
            self.logger.error(f"Failed to register tools: {e}")
            raise ConfigurationError(f"Tool registration failed: {e}")

    async def start(self) -> None:
        """Start the MCP server."""
        try:
            self.logger.info("Starting SeaSS MCP server...")
            await self.mcp.run_async()
        except Exception as e:
            self.logger.error(f"Server failed to start: {e}")
            raise

    def run(self) -> None:
        """Run the server (blocking)."""
        try:
            asyncio.run(self.start())
        except KeyboardInterrupt:
            self.logger.info("Server stopped by user")
        except Exception as e:
            self.logger.error(f"Server error: {e}")
            sys.exit(1)


def create_server(config_path: Optional[str] = None) -> SeassMCPServer:
    """
    Create and configure the MCP server.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Configured SeassMCPServer instance
    """
    try:
        config = load_config(config_path)
        setup_logging(config.logging)
        return SeassMCPServer(config)

    except SeassError as e:
        print(f"Failed to create server: {e}", file=sys.stderr)
        sys.exit(1)


def main() -> None:
    """Main entry point for the server."""
    parser = argparse.ArgumentParser(description="SeaSS MCP Server")
    parser.add_argument("--config", "-c", type=str, help="Path to configuration file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    parser.add_argument("--version", action="version", version=__version__)

    args = parser.parse_args()

    if args.log_level:
        os.environ["LOG_LEVEL"] = args.log_level

    server = create_server(args.config)
    server.run()


if __name__ == "__main__":
    main()
