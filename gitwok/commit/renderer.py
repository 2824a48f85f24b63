"""Conventional Commits renderer for gitwok.

Format:
    <type>(<scope>)!: <description>

    <body>

    <token>: <value>
    <token> #<value>
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gitwok.commit.models import CommitMessage


def render_header(msg: "CommitMessage") -> str:
    """Render the header line without its line break.

    Args:
        msg: The commit message.

    Returns:
        Header in the form type(scope)!: description.
    """
    header = msg.type
    if msg.scope:
        header += f"({msg.scope})"
    if msg.has_breaking_change:
        header += "!"
    return f"{header}: {msg.description}"


def render_commit_message(msg: "CommitMessage") -> str:
    """Render a commit message as Conventional Commits v1.0.0 text.

    The body and the footer block are each preceded by one blank line.
    Footers follow each other without blank lines and the output always ends
    with a single line break.

    Only validated messages should be rendered.

    Args:
        msg: The commit message.

    Returns:
        Formatted commit message.
    """
    parts = [render_header(msg)]

    if msg.body:
        parts.append("")  # Blank line
        parts.append(msg.body)

    if msg.footers:
        parts.append("")  # Blank line before footers
        parts.extend(msg.footers)

    return "\n".join(parts) + "\n"
