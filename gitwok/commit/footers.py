"""Footer parsing for gitwok commit messages.

Contains:
- Footer: (token, separator, value) triple of a single footer
- FooterSpan: Location of a token+separator match inside a footer block
- FooterScanner: Splits a raw multi-line footer block into footers
- match_footers: Parse a raw footer block, logging what was found
- parse_footer: Split a single footer into its components
- is_breaking_change_token: Check for the breaking change token or its alias
"""

import logging
import re
from typing import NamedTuple, Optional

from gitwok.commit.constants import (
    FSEP_COLON_SPACE,
    FSEP_SPACE_SHARP,
    FTOKEN_BRK_CHANGE,
    FTOKEN_BRK_CHANGE_ALIAS,
)
from gitwok.commit.text import trim_footer
from gitwok.logs import get_logger

logger = get_logger(__name__)


class Footer(NamedTuple):
    """Components of a single footer. All empty when the footer is malformed."""

    token: str
    separator: str
    value: str


class FooterSpan(NamedTuple):
    """Start and end offsets of a token+separator match."""

    start: int
    end: int


# "BREAKING CHANGE #" is not matched as a whole since " #" is not a valid
# separator for breaking changes; "CHANGE #" is matched instead.
FOOTER_TOKEN_PATTERN = r"([\w-]+(: | #))|(BREAKING CHANGE: )"


class FooterScanner:
    """Scanner locating footer starts in a raw footer block.

    Every token+separator match starts a footer which runs until the next
    match or the end of the block.
    """

    def __init__(self, pattern: str = FOOTER_TOKEN_PATTERN):
        self._regex = re.compile(pattern, re.ASCII)

    def spans(self, text: str) -> list[FooterSpan]:
        """Find all non-overlapping token+separator matches in order.

        Args:
            text: Raw footer block.

        Returns:
            List of FooterSpan, ordered by position.
        """
        return [FooterSpan(m.start(), m.end()) for m in self._regex.finditer(text)]

    def split(self, text: str) -> list[str]:
        """Split a raw footer block into trimmed footers.

        Args:
            text: Raw footer block.

        Returns:
            List of footers, empty if no token+separator was found.
        """
        spans = self.spans(text)
        footers = []
        for i, span in enumerate(spans):
            end = spans[i + 1].start if i + 1 < len(spans) else len(text)
            footers.append(trim_footer(text[span.start:end]))
        return footers


_default_scanner = FooterScanner()


def match_footers(text: str, log: Optional[logging.Logger] = None) -> list[str]:
    """Parse a raw footer block (e.g. a multi-line prompt answer) into footers.

    Finding no footer is not an error: an empty footer list is valid, so only
    a warning is logged.

    Args:
        text: Raw footer block.
        log: Logger to report to. Defaults to this module's logger.

    Returns:
        List of footer strings.
    """
    log = log or logger

    if not text:
        return []

    footers = _default_scanner.split(text)
    if not footers:
        log.warning("No valid footer message found")
        return []

    log.debug("Parsed %d footers: %s", len(footers), footers)
    return footers


def parse_footer(f: str) -> Footer:
    """Split a footer by its first ": " or, failing that, its first " #".

    The value side may span several lines.

    Args:
        f: A single footer.

    Returns:
        Footer triple, all empty if no separator was found.
    """
    for sep in (FSEP_COLON_SPACE, FSEP_SPACE_SHARP):
        token, found, value = f.partition(sep)
        if found:
            return Footer(token, sep, value)

    return Footer("", "", "")


def is_breaking_change_token(token: str) -> bool:
    """Check if a footer token is "BREAKING CHANGE" or "BREAKING-CHANGE"."""
    return token in (FTOKEN_BRK_CHANGE, FTOKEN_BRK_CHANGE_ALIAS)
