"""Flattened views of Linear entities: the JSON contract handed to the model.

Every view is a pure projection built fresh per request. Field names are
serialized in camelCase and must stay stable across releases.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Fixed text for embeddedImages[].analysis; no image analysis is performed.
IMAGE_ANALYSIS_PLACEHOLDER = "Image analysis would go here"


class View(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class IssueSummary(View):
    """One row of list_issues."""

    id: str
    title: str
    status: str  # state name or "Unknown"
    assignee: str  # assignee name or "Unassigned"
    priority: int | None = None
    url: str
    status_uuid: str | None = Field(default=None, alias="statusUUID")


class SearchHit(View):
    """One row of search_issues; same as IssueSummary plus the search metadata."""

    id: str
    title: str
    status: str
    assignee: str
    priority: int | None = None
    url: str
    metadata: Any = None
    status_uuid: str | None = Field(default=None, alias="statusUUID")


class Team(View):
    id: str
    name: str
    key: str
    description: str | None = None


class Project(View):
    id: str
    name: str
    description: str | None = None
    state: str | None = None


class Label(View):
    id: str
    name: str
    color: str | None = None
    description: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


# ---------------------------------------------------------------------------
# get_issue parts
# ---------------------------------------------------------------------------


class UserRef(View):
    id: str
    name: str
    email: str | None = None


class TeamRef(View):
    id: str
    name: str
    key: str


class ProjectRef(View):
    id: str
    name: str
    state: str | None = None


class ParentRef(View):
    id: str
    title: str
    identifier: str


class CycleRef(View):
    id: str
    name: str
    number: int | float | None = None


class LabelRef(View):
    id: str
    name: str
    color: str | None = None


class CommentRef(View):
    id: str
    body: str
    created_at: str | None = None


class AttachmentRef(View):
    id: str
    title: str | None = None
    url: str


class RelatedIssue(View):
    id: str
    title: str


class Relation(View):
    id: str
    type: str
    issue: RelatedIssue


class EmbeddedImage(View):
    url: str
    analysis: str = IMAGE_ANALYSIS_PLACEHOLDER


class IssueDetail(View):
    """Full get_issue record. Defaults below are part of the output contract."""

    id: str
    identifier: str
    title: str
    description: str | None = None
    priority: int | None = None
    priority_label: str | None = None
    status: str
    status_uuid: str | None = Field(default=None, alias="statusUUID")
    url: str
    created_at: str | None = None
    updated_at: str | None = None
    started_at: str | None = None
    completed_at: str | None = None
    canceled_at: str | None = None
    due_date: str | None = None
    assignee: UserRef | None = None
    creator: UserRef | None = None
    team: TeamRef | None = None
    project: ProjectRef | None = None
    parent: ParentRef | None = None
    cycle: CycleRef | None = None
    labels: list[LabelRef] = []
    comments: list[CommentRef] = []
    attachments: list[AttachmentRef] = []
    embedded_images: list[EmbeddedImage] = []
    estimate: int | float | None = None
    customer_ticket_count: int = 0
    previous_identifiers: list[str] = []
    branch_name: str = ""
    archived_at: str | None = None
    auto_archived_at: str | None = None
    auto_closed_at: str | None = None
    trashed: bool = False
    relations: list[Relation] = []
