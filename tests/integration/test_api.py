"""
API tests over the FastAPI app with the Gemini service replaced by a fake.
"""

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_gemini_service, get_session_store
from app.main import app
from app.models import (
    CareerRecommendationResult,
    CollegeAlternativesResult,
    CompanySuggestionResult,
    SchoolRoadmapResult,
    SkillGapResult,
)
from app.services.gemini_service import GenerationError
from app.services.session_store import SessionStore
from tests.conftest import make_fake_gemini

PROFILE = {
    "academicBackground": "B.Tech in Computer Science, final year",
    "interests": "data, statistics",
    "skills": "Python, Excel",
    "goals": "Become a data scientist at a product company",
    "learningStyle": "Auditory",
}

SCHOOL_PROFILE = {
    "academicBackground": "Class 11, PCM stream",
    "interests": "physics",
    "target": "IIT Bombay",
    "learningStyle": "Visual",
}


@pytest.fixture
def gemini():
    return make_fake_gemini()


@pytest.fixture
def client(gemini):
    store = SessionStore()
    app.dependency_overrides[get_gemini_service] = lambda: gemini
    app.dependency_overrides[get_session_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def start_session(client) -> str:
    response = client.post("/api/v1/career/sessions", json=PROFILE)
    assert response.status_code == 201
    return response.json()["sessionId"]


class TestHealth:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "running" in response.json()["message"]


class TestCareerTrack:
    def test_full_flow(self, client, gemini):
        response = client.post("/api/v1/career/sessions", json=PROFILE)
        assert response.status_code == 201
        body = response.json()
        session_id = body["sessionId"]
        assert body["recommendations"]["careerOptions"] == [
            "Data Scientist",
            "ML Engineer",
            "Product Analyst",
        ]

        gaps = client.post(f"/api/v1/career/sessions/{session_id}/select", json={"career": "ML Engineer"})
        assert gaps.status_code == 200
        assert gaps.json()["missingTechnicalSkills"] == ["Statistics", "SQL"]

        roadmap = client.post(f"/api/v1/career/sessions/{session_id}/roadmap")
        assert roadmap.status_code == 200
        assert [m["month"] for m in roadmap.json()["milestones"]] == [1, 2, 3]
        assert roadmap.json()["audioRoadmap"].startswith("data:audio/wav;base64,")
        gemini.synthesize_speech.assert_awaited_once()

        state = client.get(f"/api/v1/career/sessions/{session_id}").json()
        assert state["selectedCareer"] == "ML Engineer"
        assert state["skillGaps"]["missingSoftSkills"] == ["Storytelling"]
        assert state["pending"] == []
        assert state["narration"] == "idle"

    def test_validation_errors_are_per_field(self, client, gemini):
        response = client.post(
            "/api/v1/career/sessions", json={**PROFILE, "goals": "rich", "skills": ""}
        )

        assert response.status_code == 422
        fields = {tuple(error["loc"]) for error in response.json()["detail"]}
        assert ("body", "goals") in fields
        assert ("body", "skills") in fields
        gemini.generate.assert_not_awaited()

    def test_model_failure_returns_toast(self, client):
        failing = make_fake_gemini({CareerRecommendationResult: GenerationError("quota")})
        app.dependency_overrides[get_gemini_service] = lambda: failing

        response = client.post("/api/v1/career/sessions", json=PROFILE)

        assert response.status_code == 502
        detail = response.json()["detail"]
        assert detail["variant"] == "destructive"
        assert detail["title"] == "Error"
        assert detail["description"] == "Could not generate career recommendations. Please try again."

    def test_gap_failure_keeps_recommendations(self, client, gemini):
        session_id = start_session(client)
        gemini.generate.side_effect = GenerationError("timeout")

        response = client.post(f"/api/v1/career/sessions/{session_id}/select", json={"career": "ML Engineer"})

        assert response.status_code == 502
        state = client.get(f"/api/v1/career/sessions/{session_id}").json()
        assert state["recommendations"]["careerOptions"][0] == "Data Scientist"
        assert state["skillGaps"] is None
        assert len(state["notifications"]) == 1

    def test_roadmap_before_selection_is_rejected(self, client):
        session_id = start_session(client)

        response = client.post(f"/api/v1/career/sessions/{session_id}/roadmap")

        assert response.status_code == 400

    def test_unknown_session(self, client):
        assert client.get("/api/v1/career/sessions/missing").status_code == 404

    def test_discard_session(self, client):
        session_id = start_session(client)

        assert client.delete(f"/api/v1/career/sessions/{session_id}").status_code == 204
        assert client.get(f"/api/v1/career/sessions/{session_id}").status_code == 404

    def test_resubmit_profile_resets_selection(self, client):
        session_id = start_session(client)
        client.post(f"/api/v1/career/sessions/{session_id}/select", json={"career": "ML Engineer"})

        response = client.put(f"/api/v1/career/sessions/{session_id}/profile", json=PROFILE)

        assert response.status_code == 200
        state = client.get(f"/api/v1/career/sessions/{session_id}").json()
        assert state["selectedCareer"] is None
        assert state["skillGaps"] is None


class TestRoadmapViewsAndNarration:
    def ready_session(self, client) -> str:
        session_id = start_session(client)
        client.post(f"/api/v1/career/sessions/{session_id}/select", json={"career": "ML Engineer"})
        client.post(f"/api/v1/career/sessions/{session_id}/roadmap")
        return session_id

    def test_chart_view(self, client):
        session_id = self.ready_session(client)

        response = client.get(f"/api/v1/career/sessions/{session_id}/roadmap/view", params={"layout": "chart"})

        assert response.status_code == 200
        assert [bar["name"] for bar in response.json()["view"]] == ["Month 1", "Month 2", "Month 3"]

    def test_mermaid_view(self, client):
        session_id = self.ready_session(client)

        response = client.get(f"/api/v1/career/sessions/{session_id}/roadmap/view", params={"layout": "mermaid"})

        assert response.json()["view"].startswith("graph TD")

    def test_view_without_roadmap_is_empty(self, client):
        session_id = start_session(client)

        response = client.get(f"/api/v1/career/sessions/{session_id}/roadmap/view")

        assert response.json() == {"layout": "flowchart", "view": []}

    def test_unknown_layout(self, client):
        session_id = start_session(client)

        response = client.get(f"/api/v1/career/sessions/{session_id}/roadmap/view", params={"layout": "pie"})

        assert response.status_code == 422

    def test_narration_controls(self, client):
        session_id = self.ready_session(client)
        base = f"/api/v1/career/sessions/{session_id}/narration"

        play = client.post(f"{base}/play")
        assert play.status_code == 200
        assert play.json()["state"] == "speaking"
        assert play.json()["audioRoadmap"].startswith("data:audio/wav")

        assert client.post(f"{base}/pause").json()["state"] == "paused"
        assert client.post(f"{base}/stop").json()["state"] == "cancelled"
        assert client.post(f"{base}/resume").status_code == 409
        assert client.post(f"{base}/rewind").status_code == 400

    def test_narration_needs_roadmap(self, client):
        session_id = start_session(client)

        assert client.post(f"/api/v1/career/sessions/{session_id}/narration/play").status_code == 400


class TestSchoolTrack:
    def test_both_slices(self, client):
        response = client.post("/api/v1/school/roadmap", json=SCHOOL_PROFILE)

        assert response.status_code == 200
        body = response.json()
        assert [m["quarter"] for m in body["roadmap"]["milestones"]] == [1, 2]
        assert body["alternatives"]["alternatives"][0]["name"] == "NIT Trichy"
        assert body["notifications"] == []

    def test_partial_failure_still_returns_other_slice(self, client):
        failing = make_fake_gemini({SchoolRoadmapResult: GenerationError("down")})
        app.dependency_overrides[get_gemini_service] = lambda: failing

        response = client.post("/api/v1/school/roadmap", json=SCHOOL_PROFILE)

        assert response.status_code == 200
        body = response.json()
        assert body["roadmap"] is None
        assert body["alternatives"]["alternatives"][0]["type"] == "Public"
        assert body["notifications"][0]["description"] == (
            "Could not generate a school roadmap. Please try again."
        )

    def test_total_failure_is_502(self, client):
        failing = make_fake_gemini(
            {
                SchoolRoadmapResult: GenerationError("down"),
                CollegeAlternativesResult: GenerationError("down"),
            }
        )
        app.dependency_overrides[get_gemini_service] = lambda: failing

        response = client.post("/api/v1/school/roadmap", json=SCHOOL_PROFILE)

        assert response.status_code == 502
        assert len(response.json()["notifications"]) == 2

    def test_view_shapes_milestones(self, client):
        response = client.post("/api/v1/school/roadmap/view", json=SCHOOL_PROFILE)

        assert response.status_code == 200
        assert [bar["name"] for bar in response.json()["chart"]] == ["Q1", "Q2"]
        assert response.json()["flowchart"][0]["label"] == "Quarter 1"

    def test_view_total_failure_is_502(self, client):
        failing = make_fake_gemini(
            {
                SchoolRoadmapResult: GenerationError("down"),
                CollegeAlternativesResult: GenerationError("down"),
            }
        )
        app.dependency_overrides[get_gemini_service] = lambda: failing

        response = client.post("/api/v1/school/roadmap/view", json=SCHOOL_PROFILE)

        assert response.status_code == 502
        body = response.json()
        assert body["flowchart"] == []
        assert body["alternatives"] is None
        assert len(body["notifications"]) == 2

    def test_view_partial_failure_is_200(self, client):
        failing = make_fake_gemini({CollegeAlternativesResult: GenerationError("down")})
        app.dependency_overrides[get_gemini_service] = lambda: failing

        response = client.post("/api/v1/school/roadmap/view", json=SCHOOL_PROFILE)

        assert response.status_code == 200
        assert [card["label"] for card in response.json()["flowchart"]] == ["Quarter 1", "Quarter 2"]


class TestStatelessTools:
    def test_explore(self, client, gemini):
        response = client.post("/api/v1/explore", json={"interests": "data", "skills": "SQL"})

        assert response.status_code == 200
        assert response.json()["recommendations"][0]["careerPath"] == "Data Engineer"
        assert "Goals: Not specified" in gemini.generate.call_args.args[0]

    def test_suggest_colleges(self, client):
        response = client.post(
            "/api/v1/suggestions/colleges",
            json={"course": "Computer Science", "degreeLevel": "Undergraduate", "interests": "AI, robotics"},
        )

        assert response.status_code == 200
        assert response.json()["colleges"][0]["collegeName"] == "IIT Bombay"

    def test_suggest_companies_failure(self, client):
        failing = make_fake_gemini({CompanySuggestionResult: GenerationError("down")})
        app.dependency_overrides[get_gemini_service] = lambda: failing

        response = client.post("/api/v1/suggestions/companies", json={"careerPath": "Data Scientist"})

        assert response.status_code == 502
        assert response.json()["detail"]["description"] == (
            "Could not fetch company suggestions. Please try again."
        )

    def test_company_alternatives(self, client):
        response = client.post(
            "/api/v1/alternatives/companies",
            json={"studentProfile": "B.Tech ECE graduate, 7.8 CGPA", "careerGoal": "ISRO scientist"},
        )

        assert response.status_code == 200
        assert response.json()["alternatives"][0]["estimatedCtc"] == "INR 10 LPA"

    def test_company_form_validation(self, client):
        response = client.post("/api/v1/suggestions/companies", json={"careerPath": "AI"})

        assert response.status_code == 422


class TestGeminiNotConfigured:
    def test_returns_503(self, monkeypatch):
        import app.dependencies as dependencies

        monkeypatch.setattr(dependencies, "_gemini_service", None)
        monkeypatch.setattr(dependencies.settings, "gemini_api_key", None)
        app.dependency_overrides.clear()

        with TestClient(app) as test_client:
            response = test_client.post("/api/v1/explore", json={"interests": "data", "skills": "SQL"})

        assert response.status_code == 503
