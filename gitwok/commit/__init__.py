"""Conventional Commits message construction and validation.

This package is free of I/O and global state:
- constants: ValidationReason, footer tokens and separators, PRESET_COMMIT_TYPES
- text: contains_newline, contains_whitespace, trim_footer
- footers: FooterScanner, match_footers, parse_footer, is_breaking_change_token
- models: CommitMessage, make_commit_message
- renderer: render_commit_message, render_header
"""

# Constants
from gitwok.commit.constants import (
    FSEP_COLON_SPACE,
    FSEP_SPACE_SHARP,
    FTOKEN_BRK_CHANGE,
    FTOKEN_BRK_CHANGE_ALIAS,
    PRESET_COMMIT_TYPES,
    ValidationReason,
)

# Text utilities
from gitwok.commit.text import (
    contains_newline,
    contains_whitespace,
    trim_footer,
)

# Footers
from gitwok.commit.footers import (
    Footer,
    FooterScanner,
    FooterSpan,
    is_breaking_change_token,
    match_footers,
    parse_footer,
)

# Rendering
from gitwok.commit.renderer import (
    render_commit_message,
    render_header,
)

# Models
from gitwok.commit.models import (
    CommitMessage,
    make_commit_message,
)


__all__ = [
    # Constants
    "ValidationReason",
    "FTOKEN_BRK_CHANGE",
    "FTOKEN_BRK_CHANGE_ALIAS",
    "FSEP_COLON_SPACE",
    "FSEP_SPACE_SHARP",
    "PRESET_COMMIT_TYPES",
    # Text utilities
    "contains_newline",
    "contains_whitespace",
    "trim_footer",
    # Footers
    "Footer",
    "FooterSpan",
    "FooterScanner",
    "match_footers",
    "parse_footer",
    "is_breaking_change_token",
    # Rendering
    "render_commit_message",
    "render_header",
    # Models
    "CommitMessage",
    "make_commit_message",
]
