"""Linear GraphQL API provider."""

from typing import Any

import httpx

from linear_mcp.errors import LinearAPIError, LinearNotFoundError
from linear_mcp.providers.base import CONNECTION_FACETS, ISSUE_FACETS, TrackerFacade
from linear_mcp.settings import DEFAULT_API_URL, Settings

ENDPOINT = DEFAULT_API_URL

_ISSUE_FIELDS = """
    id
    identifier
    title
    description
    priority
    priorityLabel
    url
    createdAt
    updatedAt
    startedAt
    completedAt
    canceledAt
    dueDate
    estimate
    customerTicketCount
    previousIdentifiers
    branchName
    archivedAt
    autoArchivedAt
    autoClosedAt
    trashed
"""

_LABEL_FIELDS = """
    id
    name
    color
    description
    createdAt
    updatedAt
"""

_GET_ISSUE = f"""
query GetIssue($id: String!) {{
  issue(id: $id) {{{_ISSUE_FIELDS}  }}
}}
"""

_FACET_SELECTIONS = {
    "state": "state { id name }",
    "assignee": "assignee { id name email }",
    "creator": "creator { id name email }",
    "team": "team { id name key }",
    "project": "project { id name state }",
    "parent": "parent { id title identifier }",
    "cycle": "cycle { id name number }",
    "labels": "labels { nodes { id name color } }",
    "comments": "comments { nodes { id body createdAt } }",
    "attachments": "attachments { nodes { id title url } }",
    "relations": "relations { nodes { id type relatedIssue { id title } } }",
}

_GET_ISSUE_FACET = """
query GetIssueFacet($id: String!) {{
  issue(id: $id) {{ {selection} }}
}}
"""

_LIST_ISSUES = """
query ListIssues($first: Int, $filter: IssueFilter) {
  issues(first: $first, filter: $filter) {
    nodes {
      id
      title
      priority
      url
      state { id name }
      assignee { name }
    }
  }
}
"""

_SEARCH_ISSUES = """
query SearchIssues($term: String!, $first: Int) {
  searchIssues(term: $term, first: $first) {
    nodes {
      id
      title
      priority
      url
      metadata
      state { id name }
      assignee { name }
    }
  }
}
"""

_CREATE_ISSUE = f"""
mutation CreateIssue($input: IssueCreateInput!) {{
  issueCreate(input: $input) {{
    success
    lastSyncId
    issue {{{_ISSUE_FIELDS}    }}
  }}
}}
"""

_UPDATE_ISSUE = f"""
mutation UpdateIssue($id: String!, $input: IssueUpdateInput!) {{
  issueUpdate(id: $id, input: $input) {{
    success
    lastSyncId
    issue {{{_ISSUE_FIELDS}    }}
  }}
}}
"""

_LIST_TEAMS = """
query ListTeams {
  teams {
    nodes {
      id
      name
      key
      description
    }
  }
}
"""

_GET_TEAM = """
query GetTeam($id: String!) {
  team(id: $id) {
    id
    name
    key
    description
  }
}
"""

_TEAM_LABELS = f"""
query TeamLabels($id: String!) {{
  team(id: $id) {{
    labels {{
      nodes {{{_LABEL_FIELDS}      }}
    }}
  }}
}}
"""

_LIST_PROJECTS = """
query ListProjects($first: Int, $filter: ProjectFilter) {
  projects(first: $first, filter: $filter) {
    nodes {
      id
      name
      description
      state
    }
  }
}
"""

_GET_LABEL = f"""
query GetLabel($id: String!) {{
  issueLabel(id: $id) {{{_LABEL_FIELDS}  }}
}}
"""

_CREATE_LABEL = f"""
mutation CreateLabel($input: IssueLabelCreateInput!) {{
  issueLabelCreate(input: $input) {{
    success
    lastSyncId
    issueLabel {{{_LABEL_FIELDS}    }}
  }}
}}
"""

_UPDATE_LABEL = f"""
mutation UpdateLabel($id: String!, $input: IssueLabelUpdateInput!) {{
  issueLabelUpdate(id: $id, input: $input) {{
    success
    lastSyncId
    issueLabel {{{_LABEL_FIELDS}    }}
  }}
}}
"""


def _nodes(connection: dict | None) -> list[dict]:
    return (connection or {}).get("nodes") or []


class LinearProvider(TrackerFacade):
    """Async client for the subset of the Linear API the tools need.

    Use as an async context manager so the connection pool gets closed.
    """

    def __init__(self, settings: Settings) -> None:
        if not settings.api_key:
            raise RuntimeError("api_key is required")
        self._endpoint = settings.api_url
        self._client = httpx.AsyncClient(
            headers={
                "Authorization": settings.api_key.get_secret_value(),
                "Content-Type": "application/json",
            },
            timeout=settings.timeout,
        )

    async def __aenter__(self) -> "LinearProvider":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _gql(self, query: str, variables: dict | None = None) -> dict:
        response = await self._client.post(
            self._endpoint,
            json={"query": query, "variables": variables or {}},
        )
        if response.status_code == 401:
            raise LinearAPIError("Linear API returned 401. Check LINEAR_API_KEY for the active profile.")
        data = response.json() if response.headers.get("content-type", "").startswith("application/json") else {}
        if isinstance(data, dict) and data.get("errors"):
            messages = [err.get("message", str(err)) for err in data["errors"]]
            if any(m.startswith("Entity not found") for m in messages):
                raise LinearNotFoundError("; ".join(messages))
            raise LinearAPIError("; ".join(messages))
        response.raise_for_status()
        if not isinstance(data, dict) or not isinstance(data.get("data"), dict):
            raise LinearAPIError(f"Unexpected response from Linear (HTTP {response.status_code}): no data in body")
        return data["data"]

    async def _lookup(self, query: str, key: str, entity_id: str) -> dict | None:
        try:
            data = await self._gql(query, {"id": entity_id})
        except LinearNotFoundError:
            return None
        return data.get(key)

    # -- issues ------------------------------------------------------------

    async def create_issue(self, fields: dict[str, Any]) -> dict[str, Any]:
        data = await self._gql(_CREATE_ISSUE, {"input": fields})
        return data["issueCreate"]

    async def issues(self, first: int, issue_filter: dict[str, Any]) -> list[dict[str, Any]]:
        data = await self._gql(_LIST_ISSUES, {"first": first, "filter": issue_filter})
        return _nodes(data["issues"])

    async def issue(self, issue_id: str) -> dict[str, Any] | None:
        return await self._lookup(_GET_ISSUE, "issue", issue_id)

    async def issue_facet(self, issue_id: str, facet: str) -> Any:
        if facet not in ISSUE_FACETS:
            raise ValueError(f"Unknown issue facet: {facet}")
        query = _GET_ISSUE_FACET.format(selection=_FACET_SELECTIONS[facet])
        data = await self._gql(query, {"id": issue_id})
        value = (data.get("issue") or {}).get(facet)
        if facet in CONNECTION_FACETS:
            return _nodes(value)
        return value

    async def update_issue(self, issue_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        data = await self._gql(_UPDATE_ISSUE, {"id": issue_id, "input": fields})
        return data["issueUpdate"]

    async def search_issues(self, term: str, first: int) -> list[dict[str, Any]]:
        data = await self._gql(_SEARCH_ISSUES, {"term": term, "first": first})
        return _nodes(data["searchIssues"])

    # -- teams & projects --------------------------------------------------

    async def teams(self) -> list[dict[str, Any]]:
        data = await self._gql(_LIST_TEAMS)
        return _nodes(data["teams"])

    async def team(self, team_id: str) -> dict[str, Any] | None:
        return await self._lookup(_GET_TEAM, "team", team_id)

    async def team_labels(self, team_id: str) -> list[dict[str, Any]]:
        data = await self._gql(_TEAM_LABELS, {"id": team_id})
        return _nodes((data.get("team") or {}).get("labels"))

    async def projects(self, first: int, project_filter: dict[str, Any]) -> list[dict[str, Any]]:
        data = await self._gql(_LIST_PROJECTS, {"first": first, "filter": project_filter})
        return _nodes(data["projects"])

    # -- labels ------------------------------------------------------------

    async def issue_label(self, label_id: str) -> dict[str, Any] | None:
        return await self._lookup(_GET_LABEL, "issueLabel", label_id)

    async def create_issue_label(self, fields: dict[str, Any]) -> dict[str, Any]:
        data = await self._gql(_CREATE_LABEL, {"input": fields})
        return data["issueLabelCreate"]

    async def update_issue_label(self, label_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        data = await self._gql(_UPDATE_LABEL, {"id": label_id, "input": fields})
        return data["issueLabelUpdate"]
