"""
Tests for the FastAPI backend: landing page and JSON endpoints.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from backend.main import app
from catalog import data
from catalog.models import LibraryPrompt


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data


class TestLandingPage:

    def test_renders_all_sections(self, client):
        response = client.get("/")
        assert response.status_code == 200
        html = response.text
        assert "Explore, Compare, and Build with LLMs" in html
        for anchor in ('id="models"', 'id="compare"', 'id="playground"', 'id="prompts"', 'id="pricing"'):
            assert anchor in html
        assert "GPT‑4o" in html
        assert "$79/mo" in html
        assert f"© {date.today().year}" in html

    def test_empty_draft_shows_empty_prompt(self, client):
        html = client.get("/").text
        assert "0/15" in html
        assert "Prompt is empty" in html

    def test_search_query_filters_library(self, client):
        html = client.get("/", params={"q": "code"}).text
        assert "Code Reviewer" in html
        assert "Blog Outliner" not in html

    def test_comparator_selection(self, client):
        html = client.get("/", params={"a": "mistral-large", "b": "gpt-4.1-mini"}).text
        assert '<option value="mistral-large" selected>' in html
        assert '<option value="gpt-4.1-mini" selected>' in html

    def test_unknown_comparator_selection_falls_back(self, client):
        response = client.get("/", params={"a": "nope"})
        assert response.status_code == 200
        assert '<option value="gpt-4o" selected>' in response.text

    def test_solid_draft_shows_affirmation(self, client):
        draft = "Act as a reviewer. Given the code, return json. " + " ".join(["lorem"] * 20)
        html = client.get("/", params={"draft": draft}).text
        assert "Looks solid. Try adding examples or edge cases." in html

    def test_static_assets(self, client):
        assert client.get("/static/app.js").status_code == 200
        assert client.get("/static/app.css").status_code == 200

    def test_prompt_body_with_quotes_is_escaped_in_attribute(self, client, monkeypatch):
        quoted = LibraryPrompt(id=9, title="Quoter", body='Say "hi" <b>now</b>', tags=["misc"])
        monkeypatch.setattr(data, "PROMPTS", [quoted])
        html = client.get("/").text
        assert 'data-body="Say &#34;hi&#34; &lt;b&gt;now&lt;/b&gt;"' in html

    def test_script_sets_prompt_body_through_dataset(self, client):
        js = client.get("/static/app.js").text
        assert "btn.dataset.body = p.body" in js
        assert 'data-body="${' not in js


class TestAnalyzeEndpoint:

    def test_empty_prompt(self, client):
        response = client.post("/analyze", json={"prompt": ""})
        assert response.status_code == 200
        data = response.json()
        assert data["score"] == 0
        assert data["tips"] == ["Prompt is empty"]
        assert data["label"] == "0/15"
        assert data["message"] is None

    def test_short_prompt(self, client):
        data = client.post("/analyze", json={"prompt": "hi"}).json()
        assert data["score"] == 0
        assert data["tips"] == [
            "Add more detail and context.",
            "Define a role (e.g., 'Act as a…').",
            "Specify output format or constraints.",
            "Provide concrete inputs or references.",
        ]
        assert data["word_count"] == 1
        assert data["signals"] == {
            "role": False,
            "context": False,
            "constraints": False,
            "audience": False,
        }

    def test_solid_prompt(self, client):
        prompt = "Act as a reviewer. Given the code, return json for developers. " + " ".join(["lorem"] * 20)
        data = client.post("/analyze", json={"prompt": prompt}).json()
        # 31 words -> 1 length point, plus 2 + 2 + 2 + 1
        assert data["score"] == 8
        assert data["tips"] == []
        assert data["message"] == "Looks solid. Try adding examples or edge cases."
        assert data["signals"]["audience"] is True

    def test_missing_prompt_is_rejected(self, client):
        response = client.post("/analyze", json={})
        assert response.status_code == 422


class TestCatalogEndpoints:

    def test_models(self, client):
        data = client.get("/models").json()
        assert len(data) == 4
        assert data[0]["id"] == "gpt-4o"

    def test_model_detail(self, client):
        data = client.get("/models/mistral-large").json()
        assert data["family"] == "Mistral"
        assert data["strength"] == ["Concise", "Efficient"]

    def test_unknown_model(self, client):
        response = client.get("/models/unknown")
        assert response.status_code == 404
        assert "unknown" in response.json()["detail"]

    def test_compare_defaults(self, client):
        data = client.get("/compare").json()
        assert data["a"]["id"] == "gpt-4o"
        assert data["b"]["id"] == "llama-3.1-70b"

    def test_compare_unknown(self, client):
        response = client.get("/compare", params={"a": "gpt-4o", "b": "missing"})
        assert response.status_code == 404

    def test_prompt_search(self, client):
        data = client.get("/prompts", params={"q": "design"}).json()
        assert [p["title"] for p in data] == ["UX Feedback Bot"]
        assert len(client.get("/prompts").json()) == 3

    def test_playground_returns_canned_response(self, client):
        a = client.post("/playground/run", json={"prompt": "one"}).json()
        b = client.post("/playground/run", json={"prompt": "two"}).json()
        assert a["response"] == b["response"]
        assert a["response"].startswith("Build, test, and compare AI models")
        assert a["prompt"] == "one"

    def test_pricing(self, client):
        data = client.get("/pricing").json()
        assert [t["cta"] for t in data] == ["Get Started", "Upgrade", "Contact Sales"]
