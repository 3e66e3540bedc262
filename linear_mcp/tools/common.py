"""Shared pieces for the tool modules."""

import json
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from mcp.types import TextContent, Tool

from linear_mcp.inputs import ToolInput
from linear_mcp.providers.base import TrackerFacade

Handler = Callable[[TrackerFacade, Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDef:
    """A tool descriptor bound to its input model and handler."""

    tool: Tool
    input_model: type[ToolInput]
    handler: Handler


def _text(content: object) -> list[TextContent]:
    if isinstance(content, str):
        return [TextContent(type="text", text=content)]
    return [TextContent(type="text", text=json.dumps(content, indent=2, default=str))]


def _page_size(description: str) -> dict[str, Any]:
    return {"type": "number", "description": description}
