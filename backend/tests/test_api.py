"""
End-to-end tests for the HTTP surface with the scorer, rate limiter and
review store replaced through FastAPI dependency overrides.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from conftest import StubScorer
from resume_ats.api.routes.resume import get_pipeline
from resume_ats.core.config import Settings, get_settings
from resume_ats.core.exceptions import ReviewNotFound, ScoringMalformedResponse
from resume_ats.main_api import app
from resume_ats.schemas.resume import ResumeReview
from resume_ats.services.rate_limiter import get_rate_limiter
from resume_ats.services.resume_service import ResumeAnalysisPipeline
from resume_ats.services.review_store import get_review_store


class AllowAll:
    def is_rate_limited(self, client_id: str) -> bool:
        return False


class DenyAll:
    def is_rate_limited(self, client_id: str) -> bool:
        return True


@pytest.fixture
def scorer() -> StubScorer:
    return StubScorer()


@pytest.fixture
def review_store() -> MagicMock:
    return MagicMock()


@pytest.fixture
def client(scorer, review_store):
    app.dependency_overrides[get_pipeline] = lambda: ResumeAnalysisPipeline(scorer=scorer)
    app.dependency_overrides[get_rate_limiter] = lambda: AllowAll()
    app.dependency_overrides[get_review_store] = lambda: review_store
    app.dependency_overrides[get_settings] = lambda: Settings(max_upload_bytes=1024)
    yield TestClient(app)
    app.dependency_overrides.clear()


def post_resume(client, content: bytes, content_type: str, job: str | None):
    data = {"jobDescription": job} if job is not None else {}
    return client.post(
        "/analyze-resume",
        files={"file": ("resume", content, content_type)},
        data=data,
    )


class TestAnalyzeResume:

    def test_happy_path(self, client, scorer, resume_text, job_description):
        response = post_resume(client, resume_text.encode(), "text/plain", job_description)

        assert response.status_code == 200
        body = response.json()
        assert body["text"] == resume_text.strip()
        assert body["analysis"]["score"] == 72
        assert body["analysis"]["matchedKeywords"] == ["Go", "Kubernetes"]
        assert len(body["analysis"]["suggestions"]) == 3
        assert scorer.calls == [(resume_text.strip(), job_description)]

    def test_unsupported_format(self, client, scorer, job_description):
        response = post_resume(client, b"\x89PNG\r\n\x1a\n", "image/png", job_description)

        assert response.status_code == 400
        assert response.json() == {"error": "Unsupported file format"}
        assert scorer.calls == []

    def test_empty_job_description(self, client, scorer, resume_text):
        response = post_resume(client, resume_text.encode(), "text/plain", "")

        assert response.status_code == 400
        assert "error" in response.json()
        assert scorer.calls == []

    def test_missing_file(self, client, job_description):
        response = client.post("/analyze-resume", data={"jobDescription": job_description})

        assert response.status_code == 400
        assert response.json() == {"error": "Resume file is required"}

    def test_empty_upload_is_insufficient_content(self, client, scorer, job_description):
        response = post_resume(client, b"", "text/plain", job_description)

        assert response.status_code == 400
        assert response.json() == {
            "error": "Could not extract sufficient text from the provided resume"
        }
        assert scorer.calls == []

    def test_insufficient_content(self, client, job_description):
        response = post_resume(client, b"Too short", "text/plain", job_description)

        assert response.status_code == 400
        assert response.json() == {
            "error": "Could not extract sufficient text from the provided resume"
        }

    def test_malformed_scoring_response(self, client, scorer, resume_text, job_description):
        scorer.error = ScoringMalformedResponse()

        response = post_resume(client, resume_text.encode(), "text/plain", job_description)

        assert response.status_code == 500
        assert "invalid JSON" in response.json()["error"]

    def test_unconfigured_service(self, client, resume_text, job_description):
        app.dependency_overrides[get_pipeline] = lambda: ResumeAnalysisPipeline(scorer=None)

        response = post_resume(client, resume_text.encode(), "text/plain", job_description)

        assert response.status_code == 500
        assert "not configured" in response.json()["error"]

    def test_corrupt_pdf(self, client, job_description):
        response = post_resume(client, b"not really a pdf", "application/pdf", job_description)

        assert response.status_code == 500
        assert response.json()["error"].startswith("Failed to parse file:")

    def test_upload_too_large(self, client, scorer, job_description):
        response = post_resume(client, b"a" * 2048, "text/plain", job_description)

        assert response.status_code == 413
        assert "File too large" in response.json()["error"]
        assert scorer.calls == []

    def test_rate_limited(self, client, scorer, resume_text, job_description):
        app.dependency_overrides[get_rate_limiter] = lambda: DenyAll()

        response = post_resume(client, resume_text.encode(), "text/plain", job_description)

        assert response.status_code == 429
        assert response.json() == {"error": "Too many requests. Please try again later."}
        assert scorer.calls == []


class TestResumeReviews:

    def test_save_review(self, client, review_store, sample_analysis):
        review_store.save.return_value = ResumeReview(
            id="r1", created_at=1.0, job_description="Go engineer", analysis=sample_analysis
        )

        response = client.post(
            "/resume-reviews",
            json={
                "jobDescription": "Go engineer",
                "analysis": sample_analysis.model_dump(by_alias=True),
            },
        )

        assert response.status_code == 201
        assert response.json()["id"] == "r1"
        assert response.json()["analysis"]["missingKeywords"] == ["Terraform"]
        saved = review_store.save.call_args.args[0]
        assert saved.job_description == "Go engineer"

    def test_save_rejects_invalid_analysis(self, client):
        response = client.post(
            "/resume-reviews",
            json={"jobDescription": "Go engineer", "analysis": {"score": 500}},
        )

        assert response.status_code == 422
        assert "error" in response.json()

    def test_get_review(self, client, review_store, sample_analysis):
        review_store.get.return_value = ResumeReview(
            id="r1", created_at=1.0, job_description="Go engineer", analysis=sample_analysis
        )

        response = client.get("/resume-reviews/r1")

        assert response.status_code == 200
        assert response.json()["jobDescription"] == "Go engineer"
        review_store.get.assert_called_once_with("r1")

    def test_get_missing_review(self, client, review_store):
        review_store.get.side_effect = ReviewNotFound()

        response = client.get("/resume-reviews/missing")

        assert response.status_code == 404
        assert response.json() == {"error": "Resume review not found"}

    def test_list_reviews(self, client, review_store):
        review_store.list_recent.return_value = []

        response = client.get("/resume-reviews?limit=5")

        assert response.status_code == 200
        assert response.json() == []
        review_store.list_recent.assert_called_once_with(5)


class TestHealth:

    def test_reports_scorer_configuration(self, client):
        response = client.get("/health")
        assert response.json() == {"status": "ok", "scorer_configured": True}
