import logging
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile

from ...core.config import Settings, get_settings
from ...schemas.resume import AnalyzeResumeResponse, ErrorResponse, UploadedResume
from ...services.rate_limiter import RateLimiter, get_rate_limiter
from ...services.resume_service import ResumeAnalysisPipeline, build_pipeline

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Resume"])


@lru_cache()
def get_pipeline() -> ResumeAnalysisPipeline:
    return build_pipeline(get_settings())


def read_upload(file: UploadFile, max_bytes: int) -> UploadedResume:
    # Read one byte past the limit so oversized uploads are detected without
    # buffering the whole file
    content = file.file.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size: {max_bytes // (1024 * 1024)}MB",
        )

    return UploadedResume(
        content=content,
        content_type=file.content_type or "",
        filename=file.filename,
    )


@router.post(
    "/analyze-resume",
    response_model=AnalyzeResumeResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def analyze_resume(
    request: Request,
    file: Optional[UploadFile] = File(None),
    job_description: Optional[str] = Form(None, alias="jobDescription"),
    pipeline: ResumeAnalysisPipeline = Depends(get_pipeline),
    rate_limiter: RateLimiter = Depends(get_rate_limiter),
    settings: Settings = Depends(get_settings),
):
    client_ip = request.client.host if request.client else "unknown"

    if rate_limiter.is_rate_limited(client_ip):
        raise HTTPException(
            status_code=429,
            detail="Too many requests. Please try again later.",
        )

    resume = read_upload(file, settings.max_upload_bytes) if file is not None else None

    logger.info(
        f"Analyzing resume for {client_ip}: "
        f"type={resume.content_type if resume else None} "
        f"size={resume.size if resume else 0}"
    )

    return pipeline.analyze(resume, job_description)
