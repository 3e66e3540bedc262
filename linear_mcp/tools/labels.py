"""MCP tools for team issue labels."""

from mcp.types import Tool

from linear_mcp.errors import NotFoundError
from linear_mcp.inputs import CreateLabelInput, ListLabelsInput, UpdateLabelInput
from linear_mcp.normalize import label_view
from linear_mcp.providers.base import TrackerFacade
from linear_mcp.tools.common import ToolDef


def register() -> list[ToolDef]:
    return [
        ToolDef(
            tool=Tool(
                name="list_labels",
                description="List the issue labels that belong to a team",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "teamId": {"type": "string", "description": "Team ID"},
                    },
                    "required": ["teamId"],
                },
            ),
            input_model=ListLabelsInput,
            handler=_list_labels,
        ),
        ToolDef(
            tool=Tool(
                name="create_label",
                description="Create a new issue label",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "teamId": {"type": "string", "description": "Team ID"},
                        "name": {"type": "string", "description": "Label name"},
                        "color": {"type": "string", "description": "Label color (hex color code)"},
                        "description": {"type": "string", "description": "Label description (optional)"},
                    },
                    "required": ["teamId", "name", "color"],
                },
            ),
            input_model=CreateLabelInput,
            handler=_create_label,
        ),
        ToolDef(
            tool=Tool(
                name="update_label",
                description="Edit an existing issue label. Only the fields you pass are changed.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "id": {"type": "string", "description": "Label ID"},
                        "name": {"type": "string", "description": "New label name (optional)"},
                        "color": {"type": "string", "description": "New color (hex color code, optional)"},
                        "description": {"type": "string", "description": "New description (optional)"},
                    },
                    "required": ["id"],
                },
            ),
            input_model=UpdateLabelInput,
            handler=_update_label,
        ),
    ]


async def _list_labels(tracker: TrackerFacade, args: ListLabelsInput) -> list[dict]:
    team = await tracker.team(args.team_id)
    if not team:
        raise NotFoundError("Team", args.team_id)
    return [label_view(node).to_json() for node in await tracker.team_labels(args.team_id)]


async def _create_label(tracker: TrackerFacade, args: CreateLabelInput) -> dict:
    return await tracker.create_issue_label(args.changes())


async def _update_label(tracker: TrackerFacade, args: UpdateLabelInput) -> dict:
    label = await tracker.issue_label(args.id)
    if not label:
        raise NotFoundError("Label", args.id)
    return await tracker.update_issue_label(args.id, args.changes("id"))
