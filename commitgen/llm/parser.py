"""
Gemini response parsing.

Pure functions over the generateContent response body, kept apart from
the HTTP code so they can be tested against static fixtures:

    {"candidates": [{"content": {"parts": [{"text": "..."}]}}]}
"""

import json
from typing import Any

from commitgen.errors import InvalidJsonError, MalformedResponseError, NoCandidatesError


def decode_json(body: str | bytes) -> dict:
    """Decode a response body into a JSON object."""
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidJsonError(f"Response is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )
    return payload


def extract_text(payload: dict) -> str:
    """Return the first candidate's text, stripped of surrounding whitespace."""
    candidates = payload.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        raise NoCandidatesError(_block_reason(payload))

    candidate = candidates[0]
    if not isinstance(candidate, dict):
        raise MalformedResponseError("Candidate is not an object")

    content = candidate.get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts:
        raise MalformedResponseError(_with_finish_reason("Candidate has no content parts", candidate))

    first = parts[0]
    text = first.get("text") if isinstance(first, dict) else None
    if not isinstance(text, str):
        raise MalformedResponseError(_with_finish_reason("Candidate part has no text", candidate))

    text = text.strip()
    if not text:
        raise MalformedResponseError(_with_finish_reason("Candidate text is empty", candidate))
    return text


def usage_tokens(payload: dict) -> int:
    """Total tokens reported in usageMetadata, or 0."""
    usage = payload.get("usageMetadata")
    if isinstance(usage, dict):
        total = usage.get("totalTokenCount")
        if isinstance(total, int) and not isinstance(total, bool):
            return total
    return 0


def parse_response(body: str | bytes) -> str:
    """Decode a raw body and extract the generated text."""
    return extract_text(decode_json(body))


def _block_reason(payload: dict) -> str | None:
    feedback: Any = payload.get("promptFeedback")
    if isinstance(feedback, dict) and feedback.get("blockReason"):
        return str(feedback["blockReason"])
    return None


def _with_finish_reason(message: str, candidate: dict) -> str:
    reason = candidate.get("finishReason")
    return f"{message} (finishReason: {reason})" if reason else message
