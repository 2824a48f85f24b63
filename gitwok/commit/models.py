"""Commit message model for gitwok.

Contains:
- CommitMessage: Normalized Conventional Commits message with validation
- make_commit_message: Build a CommitMessage from raw flag or prompt values
"""

from dataclasses import dataclass, field
from typing import Optional

from gitwok.commit.constants import (
    FSEP_COLON_SPACE,
    FTOKEN_BRK_CHANGE,
    ValidationReason,
)
from gitwok.commit.footers import is_breaking_change_token, parse_footer
from gitwok.commit.renderer import render_commit_message
from gitwok.commit.text import contains_newline, contains_whitespace, trim_footer


@dataclass
class CommitMessage:
    """A Conventional Commits v1.0.0 message.

    Values are normalized on construction: type, scope, description and body
    are stripped, footers are trimmed with trim_footer.

    Attributes:
        type: Commit type (fix, feat, ...). Required, single word.
        scope: Optional scope, rendered as "(scope)".
        has_breaking_change: Render a "!" before the header colon.
        description: Required single-line description.
        body: Optional free text body.
        footers: Footers in "token: value" or "token #value" form.
    """

    type: str = ""
    scope: str = ""
    has_breaking_change: bool = False
    description: str = ""
    body: str = ""
    footers: list[str] = field(default_factory=list)

    def __post_init__(self):
        self.type = (self.type or "").strip()
        self.scope = (self.scope or "").strip()
        self.has_breaking_change = bool(self.has_breaking_change)
        self.description = (self.description or "").strip()
        self.body = (self.body or "").strip()
        self.footers = [trim_footer(f) for f in (self.footers or [])]

    def _violations(self):
        """Yield violated rules in the order they are checked."""
        if not self.type:
            yield ValidationReason.REQUIRED_TYPE
        elif contains_whitespace(self.type):
            yield ValidationReason.INVALID_TYPE

        if self.scope and contains_newline(self.scope):
            yield ValidationReason.INVALID_SCOPE

        if not self.description:
            yield ValidationReason.REQUIRED_DESC
        elif contains_newline(self.description):
            yield ValidationReason.INVALID_DESC

        for f in self.footers:
            token, sep, value = parse_footer(f)
            if not token or not sep:
                yield ValidationReason.INVALID_FOOTER
                continue
            if token != FTOKEN_BRK_CHANGE and contains_whitespace(token):
                yield ValidationReason.INVALID_FOOTER_TOKEN
            if is_breaking_change_token(token) and sep != FSEP_COLON_SPACE:
                yield ValidationReason.INVALID_BRK_CHN_FT_SEP
            if is_breaking_change_token(token) and not value:
                yield ValidationReason.REQUIRED_BRK_CHN_FT_DESC

    def validate(self) -> tuple[bool, Optional[ValidationReason]]:
        """Validate the message, stopping at the first violated rule.

        Returns:
            (True, None) if valid, else (False, reason).
        """
        for reason in self._violations():
            return False, reason
        return True, None

    def validate_all(self) -> list[ValidationReason]:
        """Collect every violated rule, in the order validate() checks them.

        Returns:
            List of reasons, empty if the message is valid.
        """
        return list(self._violations())

    def render(self) -> str:
        """Render the message in Conventional Commits format."""
        return render_commit_message(self)

    def to_dict(self) -> dict:
        """Convert the message fields to a plain dictionary."""
        return {
            "type": self.type,
            "scope": self.scope,
            "breaking": self.has_breaking_change,
            "description": self.description,
            "body": self.body,
            "footers": list(self.footers),
        }


def make_commit_message(
    commit_type: Optional[str],
    scope: Optional[str] = None,
    has_breaking_change: bool = False,
    description: Optional[str] = None,
    body: Optional[str] = None,
    footers: Optional[list[str]] = None,
) -> CommitMessage:
    """Build a normalized CommitMessage from raw values.

    The footers list passed in is left untouched.

    Args:
        commit_type: Commit type.
        scope: Commit scope.
        has_breaking_change: Whether the commit has breaking changes.
        description: Commit description.
        body: Commit body.
        footers: Already delimited footers.

    Returns:
        The CommitMessage.
    """
    return CommitMessage(
        type=commit_type or "",
        scope=scope or "",
        has_breaking_change=has_breaking_change,
        description=description or "",
        body=body or "",
        footers=list(footers or []),
    )
