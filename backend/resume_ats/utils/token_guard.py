MAX_RESUME_CHARS = 6000
MAX_JOB_DESCRIPTION_CHARS = 3000


def truncate_prefix(text: str, max_chars: int) -> str:
    """Keep the first ``max_chars`` characters. No marker is appended."""
    if len(text) <= max_chars:
        return text

    return text[:max_chars]
