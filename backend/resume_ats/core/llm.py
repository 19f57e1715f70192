from langchain_groq import ChatGroq

from .config import Settings, get_settings


def get_llm(settings: Settings | None = None) -> ChatGroq:
    """
    Factory function to create an LLM instance.
    Centralized so services never create models directly.
    """
    settings = settings or get_settings()
    return ChatGroq(
        model=settings.llm_model,
        temperature=settings.llm_temperature,
        api_key=settings.groq_api_key,
        timeout=settings.llm_timeout_seconds,
        max_tokens=settings.llm_max_tokens,
        max_retries=0,  # one attempt per request, failures go to the caller
    )
