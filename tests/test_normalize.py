"""Tests for linear_mcp.normalize."""

from linear_mcp.models import IMAGE_ANALYSIS_PLACEHOLDER
from linear_mcp.normalize import extract_embedded_images, issue_detail, issue_summary, search_hit

_NODE = {"id": "i1", "title": "T", "priority": 3, "url": "https://linear.app/i1"}


class TestSummaries:
    def test_resolved_state_and_assignee(self) -> None:
        data = issue_summary(
            {**_NODE, "state": {"id": "s1", "name": "Todo"}, "assignee": {"name": "Jane Doe"}}
        ).to_json()
        assert data["status"] == "Todo"
        assert data["statusUUID"] == "s1"
        assert data["assignee"] == "Jane Doe"

    def test_missing_state_and_assignee_fall_back(self) -> None:
        data = issue_summary({**_NODE, "state": None, "assignee": None}).to_json()
        assert data["status"] == "Unknown"
        assert data["assignee"] == "Unassigned"
        assert data["statusUUID"] is None

    def test_empty_names_fall_back(self) -> None:
        data = issue_summary({**_NODE, "state": {"id": "s1", "name": ""}, "assignee": {"name": ""}}).to_json()
        assert data["status"] == "Unknown"
        assert data["assignee"] == "Unassigned"

    def test_search_hit_passes_metadata_through(self) -> None:
        metadata = {"score": 0.9, "context": {"matched": "title"}}
        data = search_hit({**_NODE, "metadata": metadata}).to_json()
        assert data["metadata"] == metadata
        assert data["status"] == "Unknown"


class TestEmbeddedImages:
    def test_no_description(self) -> None:
        assert extract_embedded_images(None) == []
        assert extract_embedded_images("") == []

    def test_two_images(self) -> None:
        images = extract_embedded_images("a ![one](http://img/1.png) b ![](https://img/2.jpg?x=1)")
        assert [i.url for i in images] == ["http://img/1.png", "https://img/2.jpg?x=1"]
        assert all(i.analysis == IMAGE_ANALYSIS_PLACEHOLDER for i in images)

    def test_plain_links_ignored(self) -> None:
        assert extract_embedded_images("[docs](http://example.com)") == []


class TestIssueDetail:
    _ISSUE = {"id": "i1", "identifier": "ENG-1", "title": "T", "url": "https://linear.app/i1"}

    def test_empty_cycle_name_is_no_cycle(self) -> None:
        detail = issue_detail(self._ISSUE, {"cycle": {"id": "c1", "name": "", "number": 4}}).to_json()
        assert detail["cycle"] is None

    def test_named_cycle_kept(self) -> None:
        detail = issue_detail(self._ISSUE, {"cycle": {"id": "c1", "name": "Sprint 4", "number": 4}}).to_json()
        assert detail["cycle"] == {"id": "c1", "name": "Sprint 4", "number": 4}

    def test_null_coalescing_contract(self) -> None:
        issue = {
            **self._ISSUE,
            "estimate": None,
            "customerTicketCount": None,
            "previousIdentifiers": None,
            "branchName": None,
            "trashed": None,
        }
        detail = issue_detail(issue, {}).to_json()
        assert detail["estimate"] is None
        assert detail["customerTicketCount"] == 0
        assert detail["previousIdentifiers"] == []
        assert detail["branchName"] == ""
        assert detail["trashed"] is False

    def test_relations_use_related_issue(self) -> None:
        facets = {"relations": [{"id": "r1", "type": "blocks", "relatedIssue": {"id": "i2", "title": "Other"}}]}
        detail = issue_detail(self._ISSUE, facets).to_json()
        assert detail["relations"] == [{"id": "r1", "type": "blocks", "issue": {"id": "i2", "title": "Other"}}]
