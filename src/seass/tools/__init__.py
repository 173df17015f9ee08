"""MCP tool implementations for the SeaSS linter."""

from .lint_tools import register_lint_tools

__all__ = [
    "register_lint_tools",
]
