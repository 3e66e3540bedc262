"""MCP tools for issue create, list, update, search and detail."""

import asyncio
import logging

from mcp.types import Tool

from linear_mcp.errors import NormalizationError, NotFoundError
from linear_mcp.inputs import (
    CreateIssueInput,
    GetIssueInput,
    ListIssuesInput,
    SearchIssuesInput,
    UpdateIssueInput,
)
from linear_mcp.normalize import issue_detail, issue_summary, search_hit
from linear_mcp.providers.base import ISSUE_FACETS, TrackerFacade
from linear_mcp.tools.common import ToolDef, _page_size

logger = logging.getLogger(__name__)


def register() -> list[ToolDef]:
    """Return the issue-domain tool definitions."""
    return [
        ToolDef(
            tool=Tool(
                name="create_issue",
                description="Create a new issue in Linear",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "title": {"type": "string", "description": "Issue title"},
                        "description": {"type": "string", "description": "Issue description (markdown supported)"},
                        "teamId": {"type": "string", "description": "Team ID"},
                        "assigneeId": {"type": "string", "description": "Assignee user ID (optional)"},
                        "priority": {
                            "type": "number",
                            "description": "Priority (0-4, optional)",
                            "minimum": 0,
                            "maximum": 4,
                        },
                        "labels": {
                            "type": "array",
                            "items": {"type": "string"},
                            "description": "Label IDs to apply (optional)",
                        },
                        "parentId": {"type": "string", "description": "Parent issue ID (optional)"},
                    },
                    "required": ["title", "teamId"],
                },
            ),
            input_model=CreateIssueInput,
            handler=_create_issue,
        ),
        ToolDef(
            tool=Tool(
                name="list_issues",
                description="List issues with optional filters",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "teamId": {"type": "string", "description": "Filter by team ID (optional)"},
                        "assigneeId": {"type": "string", "description": "Filter by assignee ID (optional)"},
                        "status": {"type": "string", "description": "Filter by status name (optional)"},
                        "first": _page_size("Number of issues to return (default: 50)"),
                    },
                },
            ),
            input_model=ListIssuesInput,
            handler=_list_issues,
        ),
        ToolDef(
            tool=Tool(
                name="update_issue",
                description="Update an existing issue. Only the fields you pass are changed.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "issueId": {"type": "string", "description": "Issue ID"},
                        "title": {"type": "string", "description": "New title (optional)"},
                        "description": {"type": "string", "description": "New description (optional)"},
                        "status": {
                            "type": "string",
                            "description": "New workflow state ID (optional, see statusUUID in list_issues)",
                        },
                        "assigneeId": {"type": "string", "description": "New assignee ID (optional)"},
                        "priority": {
                            "type": "number",
                            "description": "New priority (0-4, optional)",
                            "minimum": 0,
                            "maximum": 4,
                        },
                        "labels": {
                            "type": "array",
                            "items": {"type": "string"},
                            "description": "Label IDs (optional); replaces the issue's current labels",
                        },
                        "parentId": {"type": "string", "description": "Parent issue ID (optional)"},
                        "projectId": {"type": "string", "description": "Project ID (optional)"},
                    },
                    "required": ["issueId"],
                },
            ),
            input_model=UpdateIssueInput,
            handler=_update_issue,
        ),
        ToolDef(
            tool=Tool(
                name="search_issues",
                description="Search for issues using a text query",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "query": {"type": "string", "description": "Search query text"},
                        "first": _page_size("Number of results to return (default: 50)"),
                    },
                    "required": ["query"],
                },
            ),
            input_model=SearchIssuesInput,
            handler=_search_issues,
        ),
        ToolDef(
            tool=Tool(
                name="get_issue",
                description="Get detailed information about a specific issue",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "issueId": {"type": "string", "description": "Issue ID"},
                    },
                    "required": ["issueId"],
                },
            ),
            input_model=GetIssueInput,
            handler=_get_issue,
        ),
    ]


async def _create_issue(tracker: TrackerFacade, args: CreateIssueInput) -> dict:
    return await tracker.create_issue(args.changes())


async def _list_issues(tracker: TrackerFacade, args: ListIssuesInput) -> list[dict]:
    nodes = await tracker.issues(args.first, args.issue_filter())
    return [issue_summary(node).to_json() for node in nodes]


async def _update_issue(tracker: TrackerFacade, args: UpdateIssueInput) -> dict:
    issue = await tracker.issue(args.issue_id)
    if not issue:
        raise NotFoundError("Issue", args.issue_id)
    return await tracker.update_issue(issue["id"], args.changes("issue_id"))


async def _search_issues(tracker: TrackerFacade, args: SearchIssuesInput) -> list[dict]:
    nodes = await tracker.search_issues(args.query, args.first)
    return [search_hit(node).to_json() for node in nodes]


async def _get_issue(tracker: TrackerFacade, args: GetIssueInput) -> dict:
    issue = await tracker.issue(args.issue_id)
    if not issue:
        raise NotFoundError("Issue", args.issue_id)

    try:
        # Facets are independent; issue all lookups, then await them together
        resolved = await asyncio.gather(*(tracker.issue_facet(issue["id"], facet) for facet in ISSUE_FACETS))
        return issue_detail(issue, dict(zip(ISSUE_FACETS, resolved, strict=True))).to_json()
    except Exception as exc:
        logger.error("Error processing issue details for %s", args.issue_id, exc_info=True)
        raise NormalizationError(f"Failed to process issue details: {exc}") from exc
