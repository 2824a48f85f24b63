"""Constants for the gitwok commit module.

Contains:
- ValidationReason: Reasons a commit message fails validation
- Footer tokens and separators defined by Conventional Commits v1.0.0
- PRESET_COMMIT_TYPES: Suggested commit types
"""

from enum import Enum


class ValidationReason(Enum):
    """Reasons a commit message is rejected, valued by their user-facing text."""

    REQUIRED_TYPE = "commit type is required"
    INVALID_TYPE = "commit type is invalid"
    INVALID_SCOPE = "commit scope is invalid"
    REQUIRED_DESC = "commit description is required"
    INVALID_DESC = "commit description is invalid"
    INVALID_FOOTER = "commit footer is invalid"
    INVALID_FOOTER_TOKEN = "commit footer token is invalid"
    INVALID_BRK_CHN_FT_SEP = "breaking change footer separator is invalid"
    REQUIRED_BRK_CHN_FT_DESC = "breaking change footer description is required"

    def __str__(self) -> str:
        return self.value


# Breaking change footer token and its alias (exact case)
FTOKEN_BRK_CHANGE = "BREAKING CHANGE"
FTOKEN_BRK_CHANGE_ALIAS = "BREAKING-CHANGE"

# Footer separators
FSEP_COLON_SPACE = ": "
FSEP_SPACE_SHARP = " #"

# Conventional commits suggested types
PRESET_COMMIT_TYPES = [
    "fix",
    "feat",
    "build",
    "chore",
    "ci",
    "docs",
    "perf",
    "refactor",
    "style",
    "test",
]
