from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from .api.routes.resume import get_pipeline, router as resume_router
from .api.routes.reviews import router as reviews_router
from .core.config import get_settings
from .core.exceptions import ResumeAnalysisError
from .core.logging import configure_logging
from .services.resume_service import ResumeAnalysisPipeline


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="University Review ATS API",
        version="1.0.0",
    )

    app.include_router(resume_router)
    app.include_router(reviews_router)

    @app.exception_handler(ResumeAnalysisError)
    async def resume_analysis_error_handler(request: Request, exc: ResumeAnalysisError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(HTTPException)
    async def http_error_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return JSONResponse(status_code=422, content={"error": message})

    @app.get("/health")
    def health_check(pipeline: ResumeAnalysisPipeline = Depends(get_pipeline)):
        return {"status": "ok", "scorer_configured": pipeline.configured}

    return app


app = create_app()
