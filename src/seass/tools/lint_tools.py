"""MCP tools exposing the SeaSS linter."""

import time
from typing import Dict, Any, Annotated
from pydantic import Field

from ..linter import LintSession, lint_directory as run_lint_directory
from ..validators.selector_validator import SelectorValidator
from ..utils.logging_config import log_tool_execution, log_tool_completion, get_logger
from ..utils.errors import ToolExecutionError


def _summarize(diagnostics_count: int) -> str:
    if diagnostics_count == 0:
        return "No SeaSS violations"
    return f"{diagnostics_count} SeaSS violations"


def register_lint_tools(mcp: Any) -> None:
    """Register all linting tools with the MCP server."""

    selector_validator = SelectorValidator()

    logger = get_logger("lint_tools")

    @mcp.tool()
    async def lint_css(
        css_content: Annotated[
            str,
            Field(description="Stylesheet source to check against the single-class selector rules."),
        ],
        filename: Annotated[
            str, Field(description="Path used as the prefix of every diagnostic.")
        ] = "<inline>",
    ) -> Dict[str, Any]:
        """
        Lint one stylesheet in a fresh session.

        Args:
            css_content: The CSS content to lint
            filename: Path reported in diagnostics

        Returns:
            Dictionary with the sorted diagnostics
        """
        start_time = time.time()
        tool_name = "lint_css"

        try:
            log_tool_execution(tool_name, {"css_length": len(css_content), "filename": filename})

            session = LintSession(selector_validator)
            rule_count = session.lint_source(filename, css_content)
            diagnostics = session.results()

            response = {
                "valid": not diagnostics,
                "diagnostics": diagnostics,
                "summary": _summarize(len(diagnostics)),
                "stats": {
                    "rule_count": rule_count,
                    "class_count": len(session.duplicates),
                },
            }

            duration = time.time() - start_time
            log_tool_completion(tool_name, True, duration)

            return response

        except Exception as e:
            duration = time.time() - start_time
            error_msg = f"CSS linting failed: {str(e)}"
            log_tool_completion(tool_name, False, duration, error_msg)
            raise ToolExecutionError(tool_name, error_msg)

    @mcp.tool()
    async def lint_directory(
        directory: Annotated[
            str,
            Field(description="Project root containing a seass.yaml, seass.yml or seass.toml file."),
        ],
    ) -> Dict[str, Any]:
        """
        Lint every stylesheet below a project root.

        Args:
            directory: Project root to lint

        Returns:
            Dictionary with the sorted diagnostics
        """
        start_time = time.time()
        tool_name = "lint_directory"

        try:
            log_tool_execution(tool_name, {"directory": directory})

            diagnostics = run_lint_directory(directory)

            response = {
                "valid": not diagnostics,
                "diagnostics": diagnostics,
                "summary": _summarize(len(diagnostics)),
            }

            duration = time.time() - start_time
            log_tool_completion(tool_name, True, duration)

            return response

        except Exception as e:
            duration = time.time() - start_time
            error_msg = f"Directory linting failed: {str(e)}"
            log_tool_completion(tool_name, False, duration, error_msg)
            raise ToolExecutionError(tool_name, error_msg)

    @mcp.tool()
    async def check_selector(
        selector: Annotated[str, Field(description="Selector prelude, e.g. '.card > a'.")],
    ) -> Dict[str, Any]:
        """
        Check a single selector prelude.

        Args:
            selector: Selector text as written before ``{``

        Returns:
            Dictionary with the atomic selectors and the messages
        """
        start_time = time.time()
        tool_name = "check_selector"

        try:
            log_tool_execution(tool_name, {"selector": selector})

            result = selector_validator.check_selector(selector)

            response = {
                "valid": result.valid,
                "selector": selector,
                "selectors": [
                    {"text": atomic.text, "kind": atomic.kind.value}
                    for atomic in result.selectors
                ],
                "messages": result.messages,
            }

            duration = time.time() - start_time
            log_tool_completion(tool_name, True, duration)

            return response

        except Exception as e:
            duration = time.time() - start_time
            error_msg = f"Selector check failed: {str(e)}"
            log_tool_completion(tool_name, False, duration, error_msg)
            raise ToolExecutionError(tool_name, error_msg)

    logger.info("Registered lint tools: lint_css, lint_directory, check_selector")
