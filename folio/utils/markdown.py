"""
Markdown text helpers for the Markdown writer.
"""

import re

# Characters that would otherwise start emphasis, code, links or headings
MARKDOWN_SPECIAL_PATTERN = re.compile(r"([\\`*_\[\]#])")


def escape_markdown(text: str) -> str:
    """
    Backslash-escape Markdown metacharacters in plaintext.

    Example:
        >>> escape_markdown("*nix and C#")
        '\\\\*nix and C\\\\#'
    """
    if not text:
        return ""
    return MARKDOWN_SPECIAL_PATTERN.sub(r"\\\1", text)
