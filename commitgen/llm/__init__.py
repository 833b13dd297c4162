"""LLM Client Package"""

from commitgen.errors import (
    LLMError,
    InvalidInputError,
    NetworkError,
    LLMTimeoutError,
    HttpStatusError,
    InvalidJsonError,
    NoCandidatesError,
    MalformedResponseError,
)
from commitgen.llm.base import LLMClient, CommitMessage, SYSTEM_PROMPT, check_request, system_prompt
from commitgen.llm.fake import FakeClient
from commitgen.llm.gemini import GeminiClient
from commitgen.llm.parser import decode_json, extract_text, parse_response, usage_tokens


def get_client(config, api_key: str) -> LLMClient:
    """Build the Gemini client from loaded configuration and an injected key."""
    return GeminiClient(
        api_key=api_key,
        model=config.model,
        timeout=config.timeout,
        temperature=config.temperature,
    )


__all__ = [
    "LLMClient",
    "CommitMessage",
    "GeminiClient",
    "FakeClient",
    "get_client",
    "SYSTEM_PROMPT",
    "check_request",
    "system_prompt",
    "decode_json",
    "extract_text",
    "parse_response",
    "usage_tokens",
    "LLMError",
    "InvalidInputError",
    "NetworkError",
    "LLMTimeoutError",
    "HttpStatusError",
    "InvalidJsonError",
    "NoCandidatesError",
    "MalformedResponseError",
]
