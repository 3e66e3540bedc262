"""Typed, validated arguments for each tool.

Arguments arrive as an untyped JSON object. Each tool parses them into one of
these models before any remote call is made. Required string fields must be
present and non-empty. ``Field(alias=...)`` is the wire name on the way in;
``serialization_alias`` is the Linear input field name on the way out.
"""

from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, ValidationError

from linear_mcp.errors import InvalidArgumentsError

DEFAULT_PAGE_SIZE = 50

RequiredStr = Annotated[str, StringConstraints(min_length=1)]

_M = TypeVar("_M", bound="ToolInput")


class ToolInput(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    def changes(self, *exclude: str) -> dict[str, Any]:
        """Only the fields the caller supplied, keyed by Linear input name."""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude=set(exclude))


class CreateIssueInput(ToolInput):
    title: RequiredStr
    team_id: RequiredStr = Field(alias="teamId")
    description: str | None = None
    assignee_id: str | None = Field(default=None, alias="assigneeId")
    priority: int | None = Field(default=None, ge=0, le=4)
    labels: list[str] | None = Field(default=None, serialization_alias="labelIds")
    parent_id: str | None = Field(default=None, alias="parentId")


class ListIssuesInput(ToolInput):
    team_id: str | None = Field(default=None, alias="teamId")
    assignee_id: str | None = Field(default=None, alias="assigneeId")
    status: str | None = None
    first: int = DEFAULT_PAGE_SIZE

    def issue_filter(self) -> dict[str, Any]:
        """AND-filter over the provided keys only; empty values add no constraint."""
        issue_filter: dict[str, Any] = {}
        if self.team_id:
            issue_filter["team"] = {"id": {"eq": self.team_id}}
        if self.assignee_id:
            issue_filter["assignee"] = {"id": {"eq": self.assignee_id}}
        if self.status:
            issue_filter["state"] = {"name": {"eq": self.status}}
        return issue_filter


class UpdateIssueInput(ToolInput):
    issue_id: RequiredStr = Field(alias="issueId")
    title: str | None = None
    description: str | None = None
    status: str | None = Field(default=None, serialization_alias="stateId")
    assignee_id: str | None = Field(default=None, alias="assigneeId")
    labels: list[str] | None = Field(default=None, serialization_alias="labelIds")
    priority: int | None = Field(default=None, ge=0, le=4)
    parent_id: str | None = Field(default=None, alias="parentId")
    project_id: str | None = Field(default=None, alias="projectId")


class ListTeamsInput(ToolInput):
    pass


class ListProjectsInput(ToolInput):
    team_id: str | None = Field(default=None, alias="teamId")
    first: int = DEFAULT_PAGE_SIZE

    def project_filter(self) -> dict[str, Any]:
        if self.team_id:
            return {"accessibleTeams": {"id": {"eq": self.team_id}}}
        return {}


class SearchIssuesInput(ToolInput):
    query: RequiredStr
    first: int = DEFAULT_PAGE_SIZE


class GetIssueInput(ToolInput):
    issue_id: RequiredStr = Field(alias="issueId")


class ListLabelsInput(ToolInput):
    team_id: RequiredStr = Field(alias="teamId")


class CreateLabelInput(ToolInput):
    team_id: RequiredStr = Field(alias="teamId")
    name: RequiredStr
    color: RequiredStr
    description: str | None = None


class UpdateLabelInput(ToolInput):
    id: RequiredStr
    name: str | None = None
    color: str | None = None
    description: str | None = None


def parse_input(tool: str, model: type[_M], arguments: dict[str, Any] | None) -> _M:
    """Validate raw tool arguments, raising InvalidArgumentsError on failure."""
    try:
        return model.model_validate(arguments or {})
    except ValidationError as exc:
        problems = [f"{'.'.join(str(p) for p in err['loc']) or 'arguments'}: {err['msg']}" for err in exc.errors()]
        raise InvalidArgumentsError(tool, problems) from exc
