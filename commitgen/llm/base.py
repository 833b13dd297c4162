"""LLM Base Classes and Shared Code"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from commitgen.errors import InvalidInputError
from commitgen.styles import CommitStyle


SYSTEM_PROMPT = """You are a senior software engineer specialized in writing precise, informative git commit messages.

Your standards:
- Every word earns its place, no filler
- Specific verbs over vague ones (never "update", "change", "modify")
- Your entire response is the commit message itself: no surrounding text, explanations, apologies or markdown"""

STYLE_GUIDANCE = {
    CommitStyle.CONVENTIONAL: "You follow the Conventional Commits specification exactly.",
    CommitStyle.GITMOJI: "You start every subject line with a single gitmoji.",
    CommitStyle.SIMPLE: "You write plain imperative subject lines without prefixes.",
    CommitStyle.DETAILED: "You follow Conventional Commits and always explain the change in a bullet body.",
}


def system_prompt(style: CommitStyle) -> str:
    """System instruction for a style."""
    return f"{SYSTEM_PROMPT}\n\n{STYLE_GUIDANCE[style]}"


def check_request(prompt: str, style: CommitStyle) -> None:
    """Enforce the input contract shared by every client."""
    if not isinstance(prompt, str) or not prompt.strip():
        raise InvalidInputError("Prompt is empty")
    if not isinstance(style, CommitStyle):
        raise InvalidInputError(f"Unknown style: {style!r}")


@dataclass(frozen=True)
class CommitMessage:
    """Generated commit message plus provider metadata."""
    text: str
    model: str = ""
    tokens_used: int = 0

    @property
    def subject(self) -> str:
        return self.text.split('\n', 1)[0].strip()

    @property
    def body(self) -> str:
        parts = self.text.split('\n', 1)
        return parts[1].strip() if len(parts) > 1 else ""

    def __str__(self) -> str:
        return self.text


class LLMClient(ABC):
    """Abstract base for LLM clients."""

    @abstractmethod
    async def generate(self, prompt: str, style: CommitStyle) -> CommitMessage:
        """Generate a commit message. Raises an LLMError subclass on failure."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable provider name."""
        pass
