"""Failure types for commit message generation.

Every stage after the CLI has parsed its arguments raises one of these.
Only the CLI turns them into user-facing text and exit codes.
"""


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class InvalidInputError(LLMError):
    """Empty description/prompt or unrecognized style. Raised before any network call."""
    pass


class NetworkError(LLMError):
    """Connection could not be established or was interrupted."""
    pass


class LLMTimeoutError(LLMError):
    """The request exceeded its bounded wait."""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"Request timed out after {timeout:g}s")


class HttpStatusError(LLMError):
    """The provider answered with a non-success status."""

    MAX_BODY_CHARS = 500

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body[:self.MAX_BODY_CHARS]
        message = f"Gemini API returned HTTP {status_code}"
        if self.body:
            message += f":\n{self.body}"
        super().__init__(message)


class InvalidJsonError(LLMError):
    """The response body could not be decoded as JSON."""
    pass


class NoCandidatesError(LLMError):
    """JSON decoded but contains no candidates."""

    def __init__(self, block_reason: str | None = None):
        self.block_reason = block_reason
        message = "Gemini returned no candidates"
        if block_reason:
            message += f" (prompt blocked: {block_reason})"
        super().__init__(message)


class MalformedResponseError(LLMError):
    """Candidate present but the generated text is missing or empty."""
    pass


__all__ = [
    "LLMError",
    "InvalidInputError",
    "NetworkError",
    "LLMTimeoutError",
    "HttpStatusError",
    "InvalidJsonError",
    "NoCandidatesError",
    "MalformedResponseError",
]
