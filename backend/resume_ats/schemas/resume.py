from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys, the shape the web client uses."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UploadedResume(BaseModel):
    content: bytes
    content_type: str = ""
    filename: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.content)


class SectionScores(CamelModel):
    skills: Optional[float] = Field(None, ge=0, le=100)
    experience: Optional[float] = Field(None, ge=0, le=100)
    education: Optional[float] = Field(None, ge=0, le=100)
    overall: Optional[float] = Field(None, ge=0, le=100)


class ActionVerbs(CamelModel):
    strong: List[str] = Field(default_factory=list)
    weak: List[str] = Field(default_factory=list)


class AnalysisResult(CamelModel):
    matched_keywords: List[str]
    missing_keywords: List[str]
    score: int = Field(..., ge=0, le=100)
    suggestions: List[str]

    # Optional detail the model is asked for; never required
    section_scores: Optional[SectionScores] = None
    keyword_importance: Optional[Dict[str, float]] = None
    action_verbs: Optional[ActionVerbs] = None
    readability_score: Optional[float] = Field(None, ge=0, le=100)
    content_gaps: Optional[List[str]] = None
    industry_keywords: Optional[List[str]] = None

    @field_validator(
        "section_scores",
        "keyword_importance",
        "action_verbs",
        "readability_score",
        "content_gaps",
        "industry_keywords",
        mode="wrap",
    )
    @classmethod
    def drop_invalid_detail(cls, value, handler):
        # A malformed optional field is discarded, the core analysis still stands
        try:
            return handler(value)
        except ValidationError:
            return None


class AnalyzeResumeResponse(CamelModel):
    text: str
    analysis: AnalysisResult


class ErrorResponse(BaseModel):
    error: str


class ResumeReviewCreate(CamelModel):
    job_description: str = Field(..., min_length=1)
    analysis: AnalysisResult


class ResumeReview(ResumeReviewCreate):
    id: str
    created_at: float
