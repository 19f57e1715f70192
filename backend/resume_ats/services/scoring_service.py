import json
import logging
import re
import time
from typing import List, Protocol

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from pydantic import ValidationError

from ..core.exceptions import (
    ScoringEmptyResponse,
    ScoringMalformedResponse,
    ScoringUnavailable,
)
from ..core.prompts import ATS_SYSTEM_PROMPT, ATS_USER_TEMPLATE
from ..schemas.resume import AnalysisResult
from ..utils.text_cleaners import clean_llm_response
from ..utils.token_guard import (
    MAX_JOB_DESCRIPTION_CHARS,
    MAX_RESUME_CHARS,
    truncate_prefix,
)

logger = logging.getLogger(__name__)

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


class MatchScorer(Protocol):
    def score(self, resume_text: str, job_description: str) -> AnalysisResult:
        ...


def build_analysis_messages(resume_text: str, job_description: str) -> List[BaseMessage]:
    """
    Fixed instructions go in the system message; caller text only ever fills
    the data slots of the user message, truncated to bound request size.
    """
    user_content = ATS_USER_TEMPLATE.format(
        resume_text=truncate_prefix(resume_text, MAX_RESUME_CHARS),
        job_description=truncate_prefix(job_description, MAX_JOB_DESCRIPTION_CHARS),
    )
    return [
        SystemMessage(content=ATS_SYSTEM_PROMPT),
        HumanMessage(content=user_content),
    ]


def parse_analysis(content: str) -> AnalysisResult:
    """Locate the JSON object in a model reply and validate it."""
    text = clean_llm_response(content)

    match = _JSON_OBJECT.search(text)
    if not match:
        raise ScoringMalformedResponse(
            "AI analysis failed: could not extract JSON from the scoring response"
        )

    try:
        payload = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise ScoringMalformedResponse() from e

    if not isinstance(payload, dict):
        raise ScoringMalformedResponse()

    try:
        return AnalysisResult.model_validate(payload)
    except ValidationError as e:
        raise ScoringMalformedResponse(
            "AI analysis failed: incomplete analysis data from the scoring service"
        ) from e


def _message_text(response) -> str:
    content = getattr(response, "content", response)
    if isinstance(content, list):
        # Some chat models return content blocks instead of a single string
        content = "".join(
            block.get("text", "") if isinstance(block, dict) else str(block)
            for block in content
        )
    return content or ""


class LLMMatchScorer:
    """
    Scores a resume against a job description with a single chat model call.
    No retries: any failure is surfaced to the caller as a ScoringFailed error.
    """

    def __init__(self, llm: BaseChatModel):
        self.llm = llm

    def score(self, resume_text: str, job_description: str) -> AnalysisResult:
        messages = build_analysis_messages(resume_text, job_description)

        started = time.perf_counter()
        try:
            response = self.llm.invoke(messages)
        except Exception as e:
            logger.error(f"Scoring call failed: {e}")
            raise ScoringUnavailable(f"AI analysis failed: {e}") from e

        elapsed = time.perf_counter() - started
        logger.info(f"Scoring call completed in {elapsed:.2f}s")

        content = _message_text(response)
        if not content.strip():
            raise ScoringEmptyResponse()

        analysis = parse_analysis(content)
        logger.info(
            f"Scored resume: score={analysis.score} "
            f"matched={len(analysis.matched_keywords)} "
            f"missing={len(analysis.missing_keywords)}"
        )
        return analysis
