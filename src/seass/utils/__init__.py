"""Utility modules for the SeaSS linter."""

from .errors import (
    SeassError,
    ConfigurationError,
    SourceReadError,
    ToolExecutionError,
)

__all__ = [
    "SeassError",
    "ConfigurationError",
    "SourceReadError",
    "ToolExecutionError",
]
