# tests/unit/infrastructure/web/test_context_api.py
import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from main import app
from application.services.context_formatter import TOOLS_PLACEHOLDER, NEW_SESSION_PLACEHOLDER

@pytest.fixture
def client():
    return TestClient(app)

@pytest.fixture
def package_payload():
    return {
        "task_type": "feature",
        "priority": "high",
        "completeness_score": 95,
        "session_id": "session-42",
        "timestamp": "2026-10-19T11:30:00Z",
        "user_input": "Add a React login page using the auth API",
        "system_instructions": ["Keep components small"],
        "relevant_knowledge": [
            {"title": "Token refresh", "description": "Refresh early", "type": "pattern", "relevance_score": 0.8}
        ],
        "short_term_memory": [
            {"timestamp": "2026-10-19T10:00:00Z", "user_input": "Scaffold app", "outcome": "success",
             "actions": ["create", "install"]}
        ],
        "long_term_memory": {
            "coding_style": {"languages": ["TypeScript"], "frameworks": ["React"]}
        }
    }

class TestFormatEndpoint:
    """Test POST /context/format"""

    def test_formats_package(self, client, package_payload):
        response = client.post("/context/format", json={
            "package": package_payload,
            "now": "2026-10-19T12:00:00Z"
        })

        assert response.status_code == 200
        body = response.json()
        assert body["section_count"] == 9
        assert "**Context Quality**: 🟢 95/100 (excellent)" in body["document"]
        assert TOOLS_PLACEHOLDER in body["document"]
        assert "**Conversation 1** (2 hours ago)" in body["document"]
        assert "• Actions: 2 executed" in body["document"]
        assert "• Languages: TypeScript" in body["document"]

    def test_minimal_package(self, client):
        response = client.post("/context/format", json={"package": {
            "task_type": "general",
            "completeness_score": 40,
            "session_id": "s",
            "timestamp": "2026-10-19T11:30:00Z"
        }})

        assert response.status_code == 200
        document = response.json()["document"]
        assert "**Priority**: 🟡 Medium" in document
        assert NEW_SESSION_PLACEHOLDER in document
        assert "User Preferences" in document

    def test_missing_score_and_instructions_are_generated(self, client):
        response = client.post("/context/format", json={"package": {
            "task_type": "general",
            "session_id": "s",
            "timestamp": "2026-10-19T11:30:00Z"
        }})

        assert response.status_code == 200
        document = response.json()["document"]
        assert "**Context Quality**: 🔴 23/100 (needs improvement)" in document
        assert "Adapt the approach to the specific nature of the task." in document
        assert "• Add project goals and value proposition to improve context completeness" in document

    def test_unknown_task_type_is_accepted(self, client, package_payload):
        package_payload["task_type"] = "migration"

        response = client.post("/context/format", json={"package": package_payload})

        assert response.status_code == 200
        assert "**Task Type**: migration" in response.json()["document"]

    def test_missing_task_type_is_rejected(self, client, package_payload):
        del package_payload["task_type"]

        response = client.post("/context/format", json={"package": package_payload})

        assert response.status_code == 422

    @pytest.mark.parametrize("field,value", [
        ("completeness_score", 101),
        ("completeness_score", -1),
        ("session_id", ""),
    ])
    def test_invalid_fields_are_rejected(self, client, package_payload, field, value):
        package_payload[field] = value

        response = client.post("/context/format", json={"package": package_payload})

        assert response.status_code == 422

    def test_relevance_out_of_range_is_rejected(self, client, package_payload):
        package_payload["relevant_knowledge"][0]["relevance_score"] = 1.5

        response = client.post("/context/format", json={"package": package_payload})

        assert response.status_code == 422

    def test_unexpected_failure_returns_500(self, client, package_payload):
        with patch("application.orchestrators.context_turn_orchestrator.SECTION_SEPARATOR", None):
            response = client.post("/context/format", json={"package": package_payload})

        assert response.status_code == 500
        assert response.json()["detail"].startswith("Failed to format context package")

class TestPrepareEndpoint:
    """Test POST /context/prepare"""

    def test_prepare(self, client, package_payload):
        response = client.post("/context/prepare", json={
            "package": package_payload,
            "now": "2026-10-19T12:00:00Z"
        })

        assert response.status_code == 200
        body = response.json()
        assert body["document"].startswith("# 🎯 Dynamic Context Package")
        queries = body["search_queries"]
        assert queries["library_search"] == ["react"]
        assert queries["code_search"] == "api"
        assert queries["file_patterns"] == ["*.component.*", "*.service.*", "*.controller.*"]

class TestSearchQueriesEndpoint:
    """Test POST /context/search-queries"""

    def test_derives_queries(self, client):
        response = client.post("/context/search-queries", json={
            "task_type": "bugfix",
            "user_input": "null pointer on save"
        })

        assert response.status_code == 200
        body = response.json()
        assert "null pointer on save" in body["web_search"]
        assert "fix solution debugging" in body["web_search"]
        assert body["code_search"] == "null pointer on save"
        assert body["library_search"] == []
        assert body["file_patterns"] == ["*.test.*", "*.spec.*", "*.js", "*.ts"]

    def test_requires_task_type(self, client):
        response = client.post("/context/search-queries", json={"user_input": "x"})

        assert response.status_code == 422

class TestExternalResultsEndpoint:
    """Test POST /context/external-results"""

    def test_formats_results(self, client):
        response = client.post("/context/external-results", json={
            "web_results": [{"title": "Guide", "url": "https://example.com", "snippet": "How to"}],
            "code_results": [{"file_path": "a.py", "line_number": 3, "language": "python", "code": "x = 1"}]
        })

        assert response.status_code == 200
        document = response.json()["document"]
        assert "**1. Guide**" in document
        assert "• Relevance: 50%" in document
        assert "**1. a.py:3**" in document
        assert "Library Documentation" not in document

    def test_empty_request(self, client):
        response = client.post("/context/external-results", json={})

        assert response.status_code == 200
        assert response.json()["document"] == ""

    def test_negative_line_number_is_rejected(self, client):
        response = client.post("/context/external-results", json={
            "code_results": [{"file_path": "a.py", "line_number": -1}]
        })

        assert response.status_code == 422

class TestServiceEndpoints:
    """Test root and health endpoints"""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root_lists_endpoints(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["endpoints"]["format_context"] == "POST /context/format"
