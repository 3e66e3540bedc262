"""Tool registry and request router.

The registry is a fixed, ordered catalog of tool descriptors. The router
validates arguments against the tool's input model, dispatches to its handler
and wraps the outcome in a ``CallToolResult``. Every failure, from validation
to a Linear outage, comes back as ``isError=True`` rather than an exception.
"""

import functools
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from mcp.shared.exceptions import McpError
from mcp.types import METHOD_NOT_FOUND, CallToolResult, ErrorData, Tool

from linear_mcp.inputs import parse_input
from linear_mcp.providers.base import TrackerFacade
from linear_mcp.tools import issues, labels, workspace
from linear_mcp.tools.common import ToolDef, _text

logger = logging.getLogger(__name__)

SERVICE_NAME = "Linear"

TOOL_NAMES = (
    "create_issue",
    "list_issues",
    "update_issue",
    "list_teams",
    "list_projects",
    "search_issues",
    "get_issue",
    "list_labels",
    "create_label",
    "update_label",
)


def registry() -> list[ToolDef]:
    """All tool definitions in catalog order."""
    defs = {d.tool.name: d for module in (issues, workspace, labels) for d in module.register()}
    return [defs[name] for name in TOOL_NAMES]


def error_result(exc: BaseException) -> CallToolResult:
    return CallToolResult(content=_text(f"{SERVICE_NAME} API error: {exc}"), isError=True)


def envelope(
    func: Callable[["ToolRouter", str, dict[str, Any] | None], Awaitable[Any]],
) -> Callable[["ToolRouter", str, dict[str, Any] | None], Awaitable[CallToolResult]]:
    """Turn a dispatch coroutine's result, or any exception it raises, into a CallToolResult."""

    @functools.wraps(func)
    async def wrapper(self: "ToolRouter", name: str, arguments: dict[str, Any] | None) -> CallToolResult:
        t0 = time.monotonic()
        try:
            result = await func(self, name, arguments)
        except Exception as exc:
            logger.error("%s API error in %s: %s", SERVICE_NAME, name, exc, exc_info=True)
            return error_result(exc)
        duration_ms = round((time.monotonic() - t0) * 1000, 1)
        logger.info("tool_call %s (%s ms)", name, duration_ms)
        return CallToolResult(content=_text(result), isError=False)

    return wrapper


class ToolRouter:
    def __init__(self, tracker: TrackerFacade, tool_defs: list[ToolDef] | None = None) -> None:
        self._tracker = tracker
        self._defs = tool_defs if tool_defs is not None else registry()
        self._by_name = {d.tool.name: d for d in self._defs}

    def list_tools(self) -> list[Tool]:
        return [d.tool for d in self._defs]

    @envelope
    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> Any:
        tool_def = self._by_name.get(name)
        if tool_def is None:
            raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))
        args = parse_input(name, tool_def.input_model, arguments)
        return await tool_def.handler(self._tracker, args)
