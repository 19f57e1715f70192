import logging
from enum import Enum
from typing import Optional

from ..core.config import Settings, get_settings
from ..core.exceptions import (
    InsufficientContent,
    MissingInput,
    ResumeAnalysisError,
    ServiceUnconfigured,
)
from ..core.llm import get_llm
from ..schemas.resume import AnalyzeResumeResponse, UploadedResume
from ..utils.file_parsers import DEFAULT_PDF_MAX_PAGES, extract_text
from ..utils.text_cleaners import normalize_resume_text
from .scoring_service import LLMMatchScorer, MatchScorer

logger = logging.getLogger(__name__)

MIN_RESUME_CHARS = 50


class PipelineStage(str, Enum):
    RECEIVED = "received"
    VALIDATING = "validating"
    EXTRACTING = "extracting"
    NORMALIZING = "normalizing"
    SCORING = "scoring"
    COMPLETED = "completed"


class ResumeAnalysisPipeline:
    """
    Extract -> normalize -> score, in that order, for one uploaded resume.

    The pipeline holds no per-request state, so a single instance can serve
    concurrent requests. A missing scorer means the service is unconfigured
    and every request fails before any extraction work is done.
    """

    def __init__(
        self,
        scorer: Optional[MatchScorer],
        pdf_max_pages: Optional[int] = DEFAULT_PDF_MAX_PAGES,
        min_chars: int = MIN_RESUME_CHARS,
    ):
        self.scorer = scorer
        self.pdf_max_pages = pdf_max_pages
        self.min_chars = min_chars

    @property
    def configured(self) -> bool:
        return self.scorer is not None

    def analyze(
        self,
        resume: Optional[UploadedResume],
        job_description: Optional[str],
    ) -> AnalyzeResumeResponse:
        stage = PipelineStage.RECEIVED
        try:
            stage = PipelineStage.VALIDATING
            if resume is None:
                raise MissingInput("Resume file is required")
            if not job_description or not job_description.strip():
                raise MissingInput("Job description is required")
            if self.scorer is None:
                raise ServiceUnconfigured()

            stage = PipelineStage.EXTRACTING
            raw_text = extract_text(
                resume.content,
                resume.content_type,
                pdf_max_pages=self.pdf_max_pages,
            )

            stage = PipelineStage.NORMALIZING
            text = normalize_resume_text(raw_text)
            if len(text) < self.min_chars:
                raise InsufficientContent()

            stage = PipelineStage.SCORING
            analysis = self.scorer.score(text, job_description)

        except ResumeAnalysisError as e:
            logger.warning(f"Resume analysis failed at {stage.value}: {e.kind}: {e.message}")
            raise

        logger.info(
            f"Resume analysis {PipelineStage.COMPLETED.value}: "
            f"{len(text)} chars, score={analysis.score}"
        )
        return AnalyzeResumeResponse(text=text, analysis=analysis)


def build_pipeline(settings: Settings | None = None) -> ResumeAnalysisPipeline:
    """
    Wire the production pipeline. Credential presence is decided here once;
    without GROQ_API_KEY the pipeline has no scorer.
    """
    settings = settings or get_settings()

    scorer = None
    if settings.scorer_configured:
        scorer = LLMMatchScorer(get_llm(settings))
    else:
        logger.warning("GROQ_API_KEY is not set; resume analysis is disabled")

    return ResumeAnalysisPipeline(scorer=scorer, pdf_max_pages=settings.pdf_max_pages)
