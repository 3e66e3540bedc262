"""Flatten raw Linear GraphQL nodes into the views in linear_mcp.models."""

import re
from typing import Any

from linear_mcp.models import (
    AttachmentRef,
    CommentRef,
    CycleRef,
    EmbeddedImage,
    IssueDetail,
    IssueSummary,
    Label,
    LabelRef,
    ParentRef,
    Project,
    ProjectRef,
    RelatedIssue,
    Relation,
    SearchHit,
    Team,
    TeamRef,
    UserRef,
)

# Markdown image: ![alt](url)
_IMAGE_RE = re.compile(r"!\[.*?\]\((.*?)\)")


def _status(node: dict) -> tuple[str, str | None]:
    state = node.get("state")
    if not state:
        return "Unknown", None
    return state.get("name") or "Unknown", state.get("id")


def _assignee_name(node: dict) -> str:
    assignee = node.get("assignee")
    return (assignee or {}).get("name") or "Unassigned"


def issue_summary(node: dict) -> IssueSummary:
    status, status_uuid = _status(node)
    return IssueSummary(
        id=node["id"],
        title=node["title"],
        status=status,
        assignee=_assignee_name(node),
        priority=node.get("priority"),
        url=node["url"],
        status_uuid=status_uuid,
    )


def search_hit(node: dict) -> SearchHit:
    status, status_uuid = _status(node)
    return SearchHit(
        id=node["id"],
        title=node["title"],
        status=status,
        assignee=_assignee_name(node),
        priority=node.get("priority"),
        url=node["url"],
        metadata=node.get("metadata"),
        status_uuid=status_uuid,
    )


def team_view(node: dict) -> Team:
    return Team(id=node["id"], name=node["name"], key=node["key"], description=node.get("description"))


def project_view(node: dict) -> Project:
    return Project(
        id=node["id"],
        name=node["name"],
        description=node.get("description"),
        state=node.get("state"),
    )


def label_view(node: dict) -> Label:
    return Label(
        id=node["id"],
        name=node["name"],
        color=node.get("color"),
        description=node.get("description"),
        created_at=node.get("createdAt"),
        updated_at=node.get("updatedAt"),
    )


def extract_embedded_images(description: str | None) -> list[EmbeddedImage]:
    """Collect Markdown image links from the description.

    Textual extraction only: ``analysis`` is always the fixed placeholder.
    """
    if not description:
        return []
    return [EmbeddedImage(url=url) for url in _IMAGE_RE.findall(description)]


def _user_ref(user: dict | None) -> UserRef | None:
    if not user:
        return None
    return UserRef(id=user["id"], name=user["name"], email=user.get("email"))


def _cycle_ref(cycle: dict | None) -> CycleRef | None:
    # A cycle with an empty name is reported as no cycle at all
    if not cycle or not cycle.get("name"):
        return None
    return CycleRef(id=cycle["id"], name=cycle["name"], number=cycle.get("number"))


def _relation(node: dict) -> Relation:
    # Report the other end of the link (relatedIssue), not the issue that owns the relation
    related = node.get("relatedIssue") or node.get("issue") or {}
    return Relation(
        id=node["id"],
        type=node["type"],
        issue=RelatedIssue(id=related["id"], title=related["title"]),
    )


def issue_detail(issue: dict, facets: dict[str, Any]) -> IssueDetail:
    """Assemble the get_issue record from the scalar issue and its resolved facets."""
    status, status_uuid = _status(facets)
    team = facets.get("team")
    project = facets.get("project")
    parent = facets.get("parent")
    return IssueDetail(
        id=issue["id"],
        identifier=issue["identifier"],
        title=issue["title"],
        description=issue.get("description"),
        priority=issue.get("priority"),
        priority_label=issue.get("priorityLabel"),
        status=status,
        status_uuid=status_uuid,
        url=issue["url"],
        created_at=issue.get("createdAt"),
        updated_at=issue.get("updatedAt"),
        started_at=issue.get("startedAt"),
        completed_at=issue.get("completedAt"),
        canceled_at=issue.get("canceledAt"),
        due_date=issue.get("dueDate"),
        assignee=_user_ref(facets.get("assignee")),
        creator=_user_ref(facets.get("creator")),
        team=TeamRef(id=team["id"], name=team["name"], key=team["key"]) if team else None,
        project=ProjectRef(id=project["id"], name=project["name"], state=project.get("state")) if project else None,
        parent=ParentRef(id=parent["id"], title=parent["title"], identifier=parent["identifier"]) if parent else None,
        cycle=_cycle_ref(facets.get("cycle")),
        labels=[LabelRef(id=n["id"], name=n["name"], color=n.get("color")) for n in facets.get("labels") or []],
        comments=[
            CommentRef(id=n["id"], body=n["body"], created_at=n.get("createdAt")) for n in facets.get("comments") or []
        ],
        attachments=[
            AttachmentRef(id=n["id"], title=n.get("title"), url=n["url"]) for n in facets.get("attachments") or []
        ],
        embedded_images=extract_embedded_images(issue.get("description")),
        estimate=issue.get("estimate"),
        customer_ticket_count=issue.get("customerTicketCount") or 0,
        previous_identifiers=issue.get("previousIdentifiers") or [],
        branch_name=issue.get("branchName") or "",
        archived_at=issue.get("archivedAt"),
        auto_archived_at=issue.get("autoArchivedAt"),
        auto_closed_at=issue.get("autoClosedAt"),
        trashed=issue.get("trashed") or False,
        relations=[_relation(n) for n in facets.get("relations") or []],
    )
