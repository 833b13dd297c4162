"""
Gemini Commit

AI-powered commit message generation from a short description of the change.
"""

__version__ = "1.0.0"

# Centralized commit types - single source of truth
# Used by: prompts/builder.py, output (type coloring)
COMMIT_TYPES = {
    'feat': 'A new feature or capability',
    'fix': 'A bug fix',
    'refactor': 'Code restructuring without behavior change',
    'chore': 'Maintenance tasks, dependencies, tooling',
    'docs': 'Documentation only changes',
    'test': 'Adding or updating tests',
    'style': 'Formatting, whitespace, no code change',
    'perf': 'Performance improvement',
    'ci': 'CI/CD configuration changes',
    'build': 'Build system or external dependency changes',
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())

# Subset of https://gitmoji.dev used to steer the gitmoji style
GITMOJIS = {
    '✨': 'Introduce new features',
    '🐛': 'Fix a bug',
    '♻️': 'Refactor code',
    '📝': 'Add or update documentation',
    '✅': 'Add, update, or pass tests',
    '🎨': 'Improve structure / format of the code',
    '⚡️': 'Improve performance',
    '🔥': 'Remove code or files',
    '🔧': 'Add or update configuration files',
    '👷': 'Add or update CI build system',
    '⬆️': 'Upgrade dependencies',
    '🚑️': 'Critical hotfix',
}
