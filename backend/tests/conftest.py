from typing import List, Tuple

import pytest

from resume_ats.schemas.resume import AnalysisResult


SAMPLE_ANALYSIS = {
    "matchedKeywords": ["Go", "Kubernetes"],
    "missingKeywords": ["Terraform"],
    "score": 72,
    "suggestions": [
        "Mention Terraform experience if you have any",
        "Quantify the scale of the distributed systems you built",
        "Add a short skills section near the top",
    ],
}


class StubScorer:
    """Records every call and returns a canned analysis."""

    def __init__(self, result: AnalysisResult | None = None, error: Exception | None = None):
        self.result = result or AnalysisResult.model_validate(SAMPLE_ANALYSIS)
        self.error = error
        self.calls: List[Tuple[str, str]] = []

    def score(self, resume_text: str, job_description: str) -> AnalysisResult:
        self.calls.append((resume_text, job_description))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def sample_analysis() -> AnalysisResult:
    return AnalysisResult.model_validate(SAMPLE_ANALYSIS)


@pytest.fixture
def stub_scorer() -> StubScorer:
    return StubScorer()


@pytest.fixture
def resume_text() -> str:
    return (
        "Experienced backend engineer skilled in Go, Kubernetes, and distributed systems. "
        + "x" * 100
    )


@pytest.fixture
def job_description() -> str:
    return "Looking for a Go and Kubernetes engineer."
