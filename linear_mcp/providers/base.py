"""Abstract facade over the remote issue tracker."""

from abc import ABC, abstractmethod
from typing import Any

# Related facets of an issue that get_issue resolves independently.
ISSUE_FACETS = (
    "state",
    "assignee",
    "creator",
    "team",
    "project",
    "parent",
    "cycle",
    "labels",
    "comments",
    "attachments",
    "relations",
)

# Facets that are connections: resolved to a list of nodes.
CONNECTION_FACETS = frozenset({"labels", "comments", "attachments", "relations"})


class TrackerFacade(ABC):
    @abstractmethod
    async def create_issue(self, fields: dict[str, Any]) -> dict[str, Any]: ...

    @abstractmethod
    async def issues(self, first: int, issue_filter: dict[str, Any]) -> list[dict[str, Any]]: ...

    @abstractmethod
    async def issue(self, issue_id: str) -> dict[str, Any] | None: ...

    @abstractmethod
    async def issue_facet(self, issue_id: str, facet: str) -> Any: ...

    @abstractmethod
    async def update_issue(self, issue_id: str, fields: dict[str, Any]) -> dict[str, Any]: ...

    @abstractmethod
    async def search_issues(self, term: str, first: int) -> list[dict[str, Any]]: ...

    @abstractmethod
    async def teams(self) -> list[dict[str, Any]]: ...

    @abstractmethod
    async def team(self, team_id: str) -> dict[str, Any] | None: ...

    @abstractmethod
    async def team_labels(self, team_id: str) -> list[dict[str, Any]]: ...

    @abstractmethod
    async def projects(self, first: int, project_filter: dict[str, Any]) -> list[dict[str, Any]]: ...

    @abstractmethod
    async def issue_label(self, label_id: str) -> dict[str, Any] | None: ...

    @abstractmethod
    async def create_issue_label(self, fields: dict[str, Any]) -> dict[str, Any]: ...

    @abstractmethod
    async def update_issue_label(self, label_id: str, fields: dict[str, Any]) -> dict[str, Any]: ...
