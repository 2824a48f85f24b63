"""String helpers shared by the footer parser and the commit message model."""

from gitwok.commit.constants import FSEP_COLON_SPACE, FSEP_SPACE_SHARP


def contains_newline(s: str) -> bool:
    """Check if a string contains a line break ("\\n" or "\\r\\n")."""
    return "\n" in s


def contains_whitespace(s: str) -> bool:
    """Check if a string contains any unicode whitespace character."""
    return any(c.isspace() for c in s)


def trim_footer(s: str) -> str:
    """Trim whitespace around a footer without destroying its separator.

    A separator carries meaning even when the footer value is empty, so the
    trailing space of ": " and the leading space of " #" are kept. A trimmed
    footer that starts with "#" or ends with ":" gets that space added back.

    Args:
        s: Raw footer string.

    Returns:
        The trimmed footer.
    """
    if not s.endswith(FSEP_COLON_SPACE):
        s = s.rstrip()
    if not s.startswith(FSEP_SPACE_SHARP):
        s = s.lstrip()

    if s.startswith("#"):
        s = " " + s

    if s.endswith(":"):
        s = s + " "

    return s
