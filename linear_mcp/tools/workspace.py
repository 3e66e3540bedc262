"""MCP tools for teams and projects."""

from mcp.types import Tool

from linear_mcp.inputs import ListProjectsInput, ListTeamsInput
from linear_mcp.normalize import project_view, team_view
from linear_mcp.providers.base import TrackerFacade
from linear_mcp.tools.common import ToolDef, _page_size


def register() -> list[ToolDef]:
    return [
        ToolDef(
            tool=Tool(
                name="list_teams",
                description="List all teams in the workspace",
                inputSchema={"type": "object", "properties": {}},
            ),
            input_model=ListTeamsInput,
            handler=_list_teams,
        ),
        ToolDef(
            tool=Tool(
                name="list_projects",
                description="List all projects",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "teamId": {"type": "string", "description": "Filter by team ID (optional)"},
                        "first": _page_size("Number of projects to return (default: 50)"),
                    },
                },
            ),
            input_model=ListProjectsInput,
            handler=_list_projects,
        ),
    ]


async def _list_teams(tracker: TrackerFacade, args: ListTeamsInput) -> list[dict]:
    return [team_view(node).to_json() for node in await tracker.teams()]


async def _list_projects(tracker: TrackerFacade, args: ListProjectsInput) -> list[dict]:
    nodes = await tracker.projects(args.first, args.project_filter())
    return [project_view(node).to_json() for node in nodes]
