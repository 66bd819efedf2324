"""
Test suite for diagram endpoints.

System role: Verification of render and grammar HTTP contracts
"""


class TestRenderEndpoint:
    """Test suite for POST /api/v1/diagrams/render."""

    def test_renders_svg(self, client, sample_svg) -> None:
        """Test valid markup renders to SVG."""
        response = client.post("/api/v1/diagrams/render", json={"markup": "mindmap\n  root"})

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "rendered"
        assert body["svg"] == sample_svg

    def test_syntax_error_returns_failed_state(self, client) -> None:
        """Test invalid markup comes back as failed with the raw markup kept."""
        response = client.post("/api/v1/diagrams/render", json={"markup": "graph TD\n  bad -->"})

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "failed"
        assert body["markup"] == "graph TD\n  bad -->"
        assert body["error_detail"] == "Parse error on line 2"

    def test_blank_markup_is_empty(self, client) -> None:
        """Test blank markup yields the empty state."""
        response = client.post("/api/v1/diagrams/render", json={"markup": ""})

        assert response.json()["status"] == "empty"


class TestGrammarsEndpoint:
    """Test suite for GET /api/v1/diagrams/grammars."""

    def test_lists_all_categories(self, client) -> None:
        """Test every category is listed with its keyword."""
        response = client.get("/api/v1/diagrams/grammars")

        assert response.status_code == 200
        keywords = {entry["category"]: entry["keyword"] for entry in response.json()}
        assert keywords == {
            "hierarchy-map": "mindmap",
            "flowchart": "flowchart",
            "sequence": "sequenceDiagram",
            "timeline": "timeline",
            "org-hierarchy": "graph TD",
            "schedule": "gantt",
        }
