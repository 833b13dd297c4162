"""In-memory LLM client for tests and offline runs."""

from commitgen.errors import LLMError
from commitgen.llm.base import CommitMessage, LLMClient, check_request
from commitgen.styles import CommitStyle


class FakeClient(LLMClient):
    """Returns a pre-programmed message or raises a pre-programmed error. No I/O."""

    def __init__(self, message: str | CommitMessage | None = None, error: LLMError | None = None):
        if (message is None) == (error is None):
            raise ValueError("FakeClient needs exactly one of message or error")
        if isinstance(message, str):
            message = CommitMessage(text=message, model="fake")
        self._message = message
        self._error = error
        self.calls: list[tuple[str, CommitStyle]] = []

    @property
    def name(self) -> str:
        return "Fake"

    async def generate(self, prompt: str, style: CommitStyle) -> CommitMessage:
        check_request(prompt, style)
        self.calls.append((prompt, style))
        if self._error is not None:
            raise self._error
        return self._message
