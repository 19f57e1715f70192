import re

_LINE_ENDINGS = re.compile(r"\r\n?")
_EXCESS_BLANK_LINES = re.compile(r"\n\s*\n\s*\n")
_HORIZONTAL_WHITESPACE = re.compile(r"[^\S\n]+")
_SPACE_BEFORE_PUNCTUATION = re.compile(r"\s+([.,])")


def normalize_resume_text(text: str) -> str:
    """
    Deterministic cleanup of extracted resume text so scoring sees the same
    shape of input whatever the source format was.
    """
    text = _LINE_ENDINGS.sub("\n", text)               # Normalize line endings
    text = _EXCESS_BLANK_LINES.sub("\n\n", text)       # At most one blank line
    text = _HORIZONTAL_WHITESPACE.sub(" ", text)       # Collapse spaces/tabs
    text = _SPACE_BEFORE_PUNCTUATION.sub(r"\1", text)  # "word ." -> "word."
    return text.strip()


def clean_llm_response(response: str) -> str:
    """
    Remove markdown code fences the model sometimes wraps around its JSON.
    """
    response = response.strip()

    if response.startswith("```json"):
        response = response[7:].strip()
    elif response.startswith("```"):
        response = response[3:].strip()

    if response.endswith("```"):
        response = response[:-3].strip()

    return response
