"""Custom error classes for the SeaSS linter."""

from typing import Optional, Dict, Any


class SeassError(Exception):
    """Base exception class for the SeaSS linter."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(SeassError):
    """Exception raised when configuration is missing or invalid."""

    pass


class SourceReadError(SeassError):
    """Exception raised when a directory or stylesheet cannot be read.

    Aborts the whole run; no diagnostics are returned for it.
    """

    def __init__(self, path: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.path = path


class ToolExecutionError(SeassError):
    """Exception raised when MCP tool execution fails."""

    def __init__(self, tool_name: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.tool_name = tool_name
