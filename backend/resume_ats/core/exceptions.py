class ResumeAnalysisError(Exception):
    """Base error for the resume analysis flow.

    Every subclass carries the HTTP status the API layer answers with and a
    human-readable message that is shown to the user verbatim.
    """

    kind = "ResumeAnalysisError"
    status_code = 500
    default_message = "Failed to analyze resume. Please try again."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingInput(ResumeAnalysisError):
    kind = "MissingInput"
    status_code = 400
    default_message = "Resume file and job description are required"


class UnsupportedFormat(ResumeAnalysisError):
    kind = "UnsupportedFormat"
    status_code = 400
    default_message = "Unsupported file format"


class ExtractionFailed(ResumeAnalysisError):
    kind = "ExtractionFailed"
    status_code = 500
    default_message = "Failed to parse file"


class InsufficientContent(ResumeAnalysisError):
    kind = "InsufficientContent"
    status_code = 400
    default_message = "Could not extract sufficient text from the provided resume"


class ServiceUnconfigured(ResumeAnalysisError):
    kind = "ServiceUnconfigured"
    status_code = 500
    default_message = (
        "AI service is not configured. Please set the GROQ_API_KEY environment variable."
    )


class ScoringFailed(ResumeAnalysisError):
    """Raised when the external scoring call cannot produce an analysis"""

    kind = "ScoringFailed"
    status_code = 500
    default_message = "AI analysis failed"


class ScoringUnavailable(ScoringFailed):
    kind = "ScoringUnavailable"
    default_message = "AI analysis failed: the scoring service is unavailable"


class ScoringEmptyResponse(ScoringFailed):
    kind = "ScoringEmptyResponse"
    default_message = "AI analysis failed: empty response from the scoring service"


class ScoringMalformedResponse(ScoringFailed):
    kind = "ScoringMalformedResponse"
    default_message = "AI analysis failed: invalid JSON format in the scoring response"


class ReviewNotFound(ResumeAnalysisError):
    kind = "ReviewNotFound"
    status_code = 404
    default_message = "Resume review not found"


class ReviewStorageUnavailable(ResumeAnalysisError):
    kind = "ReviewStorageUnavailable"
    status_code = 503
    default_message = "Review storage is unavailable. Please try again later."
