"""Shared test fixtures."""

from typing import Any

import pytest

from linear_mcp.models import IssueSummary, Label, Team
from linear_mcp.providers.base import CONNECTION_FACETS, TrackerFacade
from linear_mcp.router import ToolRouter


class FakeTracker(TrackerFacade):
    """In-memory facade that records every call made to it."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []
        self.issue_nodes: dict[str, dict] = {}
        self.facets: dict[str, dict[str, Any]] = {}
        self.list_nodes: list[dict] = []
        self.search_nodes: list[dict] = []
        self.team_nodes: list[dict] = []
        self.project_nodes: list[dict] = []
        self.label_nodes: dict[str, list[dict]] = {}
        self.labels_by_id: dict[str, dict] = {}
        self.fail_with: Exception | None = None

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if self.fail_with is not None:
            raise self.fail_with

    def called(self, name: str) -> list[tuple]:
        return [args for call, args in self.calls if call == name]

    async def create_issue(self, fields: dict[str, Any]) -> dict[str, Any]:
        self._record("create_issue", fields)
        return {"success": True, "lastSyncId": 1, "issue": {"id": "new-issue", **fields}}

    async def issues(self, first: int, issue_filter: dict[str, Any]) -> list[dict[str, Any]]:
        self._record("issues", first, issue_filter)
        return self.list_nodes[:first]

    async def issue(self, issue_id: str) -> dict[str, Any] | None:
        self._record("issue", issue_id)
        return self.issue_nodes.get(issue_id)

    async def issue_facet(self, issue_id: str, facet: str) -> Any:
        self._record("issue_facet", issue_id, facet)
        default = [] if facet in CONNECTION_FACETS else None
        return self.facets.get(issue_id, {}).get(facet, default)

    async def update_issue(self, issue_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        self._record("update_issue", issue_id, fields)
        return {"success": True, "lastSyncId": 2, "issue": {**self.issue_nodes[issue_id], **fields}}

    async def search_issues(self, term: str, first: int) -> list[dict[str, Any]]:
        self._record("search_issues", term, first)
        return self.search_nodes[:first]

    async def teams(self) -> list[dict[str, Any]]:
        self._record("teams")
        return list(self.team_nodes)

    async def team(self, team_id: str) -> dict[str, Any] | None:
        self._record("team", team_id)
        return next((t for t in self.team_nodes if t["id"] == team_id), None)

    async def team_labels(self, team_id: str) -> list[dict[str, Any]]:
        self._record("team_labels", team_id)
        return self.label_nodes.get(team_id, [])

    async def projects(self, first: int, project_filter: dict[str, Any]) -> list[dict[str, Any]]:
        self._record("projects", first, project_filter)
        return self.project_nodes[:first]

    async def issue_label(self, label_id: str) -> dict[str, Any] | None:
        self._record("issue_label", label_id)
        return self.labels_by_id.get(label_id)

    async def create_issue_label(self, fields: dict[str, Any]) -> dict[str, Any]:
        self._record("create_issue_label", fields)
        return {"success": True, "lastSyncId": 3, "issueLabel": {"id": "new-label", **fields}}

    async def update_issue_label(self, label_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        self._record("update_issue_label", label_id, fields)
        return {"success": True, "lastSyncId": 4, "issueLabel": {**self.labels_by_id[label_id], **fields}}


ISSUE_NODE = {
    "id": "issue_abc",
    "identifier": "ENG-123",
    "title": "Fix null check",
    "description": "The middleware throws when session is None.",
    "priority": 2,
    "priorityLabel": "High",
    "url": "https://linear.app/team/issue/ENG-123",
    "createdAt": "2024-01-01T00:00:00.000Z",
    "updatedAt": "2024-01-02T00:00:00.000Z",
}

TEAM_NODES = [
    {"id": "team_eng", "name": "Engineering", "key": "ENG", "description": "Builds things"},
    {"id": "team_des", "name": "Design", "key": "DES", "description": None},
]

LABEL_NODE = {
    "id": "label_bug",
    "name": "bug",
    "color": "#eb5757",
    "description": "Something is broken",
    "createdAt": "2024-01-01T00:00:00.000Z",
    "updatedAt": "2024-01-01T00:00:00.000Z",
}


@pytest.fixture
def tracker() -> FakeTracker:
    fake = FakeTracker()
    fake.issue_nodes[ISSUE_NODE["id"]] = dict(ISSUE_NODE)
    fake.issue_nodes[ISSUE_NODE["identifier"]] = dict(ISSUE_NODE)
    fake.team_nodes = [dict(t) for t in TEAM_NODES]
    fake.label_nodes["team_eng"] = [dict(LABEL_NODE)]
    fake.labels_by_id[LABEL_NODE["id"]] = dict(LABEL_NODE)
    return fake


@pytest.fixture
def router(tracker: FakeTracker) -> ToolRouter:
    return ToolRouter(tracker)


@pytest.fixture
def issue_summary() -> IssueSummary:
    return IssueSummary(
        id="issue_abc",
        title="Fix null check",
        status="In Progress",
        assignee="Jane Doe",
        priority=2,
        url="https://linear.app/team/issue/ENG-123",
        status_uuid="state_started",
    )


@pytest.fixture
def sample_team() -> Team:
    return Team(id="team_eng", name="Engineering", key="ENG", description="Builds things")


@pytest.fixture
def sample_label() -> Label:
    return Label(
        id="label_bug",
        name="bug",
        color="#eb5757",
        description="Something is broken",
        created_at="2024-01-01T00:00:00.000Z",
        updated_at="2024-01-01T00:00:00.000Z",
    )
