"""Prompt Builder - Construct LLM prompts for commit message generation."""

from dataclasses import dataclass

from commitgen import COMMIT_TYPES, GITMOJIS
from commitgen.errors import InvalidInputError
from commitgen.styles import CommitStyle

# Example template components
_SUBJECT_SIMPLE = "[subject: imperative verb + what changed]"
_SUBJECT_TYPED = "type(scope): [imperative verb + what changed]"
_SUBJECT_GITMOJI = "<gitmoji> [imperative verb + what changed]"

_BULLETS_DEFAULT = """\
- [bullet: specific detail of the change]
- [bullet: why or impact if relevant]"""

_BULLETS_DETAILED = """\
- [bullet: specific implementation detail]
- [bullet: why this approach was chosen]
- [bullet: what problem this solves]"""

# Lookup table: (style, include_body) -> (subject_template, body_template or None)
EXAMPLE_TEMPLATES: dict[tuple[CommitStyle, bool], tuple[str, str | None]] = {
    (CommitStyle.SIMPLE, True): (_SUBJECT_SIMPLE, _BULLETS_DEFAULT),
    (CommitStyle.SIMPLE, False): (_SUBJECT_SIMPLE, None),
    (CommitStyle.GITMOJI, True): (_SUBJECT_GITMOJI, _BULLETS_DEFAULT),
    (CommitStyle.GITMOJI, False): (_SUBJECT_GITMOJI, None),
    (CommitStyle.DETAILED, True): (_SUBJECT_TYPED, _BULLETS_DETAILED),
    (CommitStyle.DETAILED, False): (_SUBJECT_TYPED, _BULLETS_DETAILED),  # detailed always has body
    (CommitStyle.CONVENTIONAL, True): (_SUBJECT_TYPED, _BULLETS_DEFAULT),
    (CommitStyle.CONVENTIONAL, False): (_SUBJECT_TYPED, None),
}

FORMAT_EXAMPLES = {
    CommitStyle.CONVENTIONAL: "type(scope): subject line",
    CommitStyle.DETAILED: "type(scope): subject line",
    CommitStyle.GITMOJI: "<gitmoji> subject line",
    CommitStyle.SIMPLE: "Subject line here",
}


@dataclass
class PromptConfig:
    """User-provided options that shape the prompt."""
    style: CommitStyle = CommitStyle.CONVENTIONAL
    include_body: bool = True
    max_subject_length: int = 72
    hint: str | None = None

    def __post_init__(self):
        self.style = CommitStyle.parse(self.style)

    @property
    def wants_body(self) -> bool:
        return self.include_body or self.style is CommitStyle.DETAILED


class PromptBuilder:
    """Constructs prompts optimized for commit message generation."""

    def build(self, description: str, config: PromptConfig | CommitStyle | None = None) -> str:
        if not isinstance(description, str) or not description.strip():
            raise InvalidInputError("Description is empty. Describe the change, e.g.: gcm \"add login endpoint\"")
        if isinstance(config, CommitStyle):
            config = PromptConfig(style=config)
        config = config or PromptConfig()

        sections = [
            self._build_role_section(config),
            self._build_format_section(config),
            self._build_examples_section(config),
            self._build_change_section(description),
            self._build_hints_section(config),
            self._build_final_instructions(config),
        ]
        return "\n\n".join(filter(None, sections))

    def _build_role_section(self, config: PromptConfig) -> str:
        return f"""You are an expert programmer writing a git commit message.
Your task is to generate a single git commit message in the '{config.style.value}' style for the change described below.

Core principles:
- Write a subject that completes: "If applied, this commit will..."
- Use specific verbs: "Add", "Remove", "Replace", "Extract" instead of "Update" or "Change"
- Add bullets only for non-obvious details, impact, or reasoning"""

    def _build_format_section(self, config: PromptConfig) -> str:
        max_len = config.max_subject_length
        style = config.style

        if style is CommitStyle.SIMPLE:
            format_desc = f"subject line (imperative mood, max {max_len} chars)"
            style_instruction = "Use a simple, direct subject line without type prefixes or emoji."
        elif style is CommitStyle.GITMOJI:
            format_desc = f"<gitmoji> subject line (imperative mood, max {max_len} chars)"
            style_instruction = self._build_gitmoji_instruction()
        else:
            format_desc = f"type(scope): subject line (lowercase, imperative mood, max {max_len} chars)"
            style_instruction = self._build_type_instruction()

        if config.wants_body:
            body_section = "\n- bullet points explaining what changed and why (1-4 bullets)"
        else:
            body_section = "\nDo NOT include a body or bullet points. Subject line only."

        return f"""<format>
Write the commit message in this exact format:

{format_desc}
{body_section}

{style_instruction}
</format>"""

    def _build_type_instruction(self) -> str:
        types_list = "\n".join(f"  - {t}: {desc}" for t, desc in COMMIT_TYPES.items())
        return f"Choose the most appropriate type:\n{types_list}"

    def _build_gitmoji_instruction(self) -> str:
        emoji_list = "\n".join(f"  - {emoji} {desc}" for emoji, desc in GITMOJIS.items())
        return f"Start the subject with exactly one gitmoji:\n{emoji_list}"

    def _build_examples_section(self, config: PromptConfig) -> str:
        warning = "These show FORMAT only. Never copy words from these examples."

        subject, bullets = EXAMPLE_TEMPLATES[(config.style, config.include_body)]
        example = subject
        if bullets:
            example += "\n\n" + bullets

        return f"""<format-example>
{warning}

{example}
</format-example>"""

    def _build_change_section(self, description: str) -> str:
        return f"""<change>
Change description:
{description}
</change>"""

    def _build_hints_section(self, config: PromptConfig) -> str:
        if not config.hint:
            return ""

        return f"""<context>
The developer provided this extra context:
"{config.hint}"
</context>"""

    def _build_final_instructions(self, config: PromptConfig) -> str:
        format_example = FORMAT_EXAMPLES[config.style]
        body_rule = "- Include bullet points in the body" if config.wants_body else "- Do NOT include a body, subject line only"

        return f"""<instructions>
Generate exactly ONE commit message.

Rules:
- Start directly with the {format_example} line
- No markdown formatting (no ```, no bold)
- No preamble like "Here's a commit message:"
- No explanation after the message
{body_rule}
- Just the raw commit message, ready to use
</instructions>"""
