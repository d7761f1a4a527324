"""
LaTeX text helpers for the paginated-document writer.
"""

import re

LATEX_SPECIAL_CHARS = {
    "\\": r"\textbackslash{}",
    "%": r"\%",
    "$": r"\$",
    "&": r"\&",
    "_": r"\_",
    "#": r"\#",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

# Single pass, so a replacement is never escaped again
LATEX_SPECIAL_PATTERN = re.compile("|".join(re.escape(char) for char in LATEX_SPECIAL_CHARS))


def escape_latex(text: str) -> str:
    """
    Escape plaintext so it can be placed inside a LaTeX document.

    Example:
        >>> escape_latex("R&D at 87% capacity")
        'R\\\\&D at 87\\\\% capacity'
    """
    if not text:
        return ""

    result = LATEX_SPECIAL_PATTERN.sub(lambda m: LATEX_SPECIAL_CHARS[m.group()], text)

    # Line breaks inside free text become explicit LaTeX breaks
    return result.replace("\r\n", "\n").replace("\n", r"\newline ")


def html_color_to_latex(color: str) -> str:
    """Convert '#2563eb' to the 'HTML' model value xcolor expects ('2563EB')."""
    return color.lstrip("#").upper()
