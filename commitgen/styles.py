"""Commit message styles."""

from enum import Enum

from commitgen.errors import InvalidInputError


class CommitStyle(str, Enum):
    """Formatting convention the model is asked to follow."""
    CONVENTIONAL = "conventional"
    GITMOJI = "gitmoji"
    SIMPLE = "simple"
    DETAILED = "detailed"

    @classmethod
    def parse(cls, value: "str | CommitStyle") -> "CommitStyle":
        """Resolve user input to a style. Unknown values raise InvalidInputError."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        key = STYLE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise InvalidInputError(
                f"Unknown style '{value}'. Use one of: {', '.join(STYLE_NAMES)}"
            ) from None


# Spellings people actually type for the same convention
STYLE_ALIASES = {
    "conventional commit": "conventional",
    "conventional commits": "conventional",
    "conventional-commit": "conventional",
    "conventional-commits": "conventional",
    "emoji": "gitmoji",
    "plain": "simple",
}

STYLE_NAMES = [s.value for s in CommitStyle]
STYLE_CHOICES = STYLE_NAMES + list(STYLE_ALIASES)
