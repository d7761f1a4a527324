"""
Document Writers

Serialize an AssembledDocument to LaTeX source or Markdown. Neither writer
re-derives content: every line comes from a block, styled from the preset.

The LaTeX writer prepares escaped, styled elements in Python and hands them
to document.tex.jinja (LaTeX delimiters, see TemplateRegistry).
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import TemplateError

from folio.contexts.rendering.assembler import (  # noqa: F401
    AssembledDocument,
    Block,
    BlockRole,
    export_filename,
)
from folio.contexts.rendering.style_presets import RoleStyle
from folio.contexts.templating.exceptions import TemplateRenderError
from folio.contexts.templating.registries import TemplateRegistry
from folio.contexts.templating.visual_tree import Fact
from folio.utils.latex import escape_latex, html_color_to_latex
from folio.utils.markdown import escape_markdown

RENDERING_TEMPLATES_PATH = Path(__file__).resolve().parent / "templates"
LATEX_TEMPLATE = "document.tex.jinja"

LATEX_ALIGNMENT = {
    "left": r"\raggedright",
    "center": r"\centering",
    "right": r"\raggedleft",
}

CATEGORY_SUFFIX = ":"


def is_category_label(block: Block) -> bool:
    """Skill category blocks are bold bodies carrying the entry title."""
    return block.role is BlockRole.BODY and block.fact == Fact.ENTRY_TITLE


def display_text(block: Block, style: RoleStyle) -> str:
    """Block text as it should appear on the page (case, category colon)."""
    text = block.text
    if is_category_label(block) and text:
        text = f"{text}{CATEGORY_SUFFIX}"
    return text.upper() if style.uppercase else text


# LaTeX


def _format_points(value: float) -> str:
    return f"{value:g}"


def latex_styled(text: str, style: RoleStyle) -> str:
    """Escape text and wrap it in the commands for a role style."""
    body = escape_latex(text)
    if not body:
        return ""
    if style.italic:
        body = rf"\textit{{{body}}}"
    if style.bold:
        body = rf"\textbf{{{body}}}"
    if style.decoration == "underline":
        body = rf"\underline{{{body}}}"
    if style.color:
        body = rf"\textcolor[HTML]{{{html_color_to_latex(style.color)}}}{{{body}}}"

    size = _format_points(style.font_size)
    leading = _format_points(round(style.font_size * 1.2, 1))
    return rf"\fontsize{{{size}}}{{{leading}}}\selectfont {body}"


def _latex_spacing(style: RoleStyle) -> Dict[str, str]:
    _, top, _, bottom = style.margin
    return {"space_before": _format_points(top), "space_after": _format_points(bottom)}


def latex_elements(assembled: AssembledDocument) -> List[Dict[str, Any]]:
    """
    Template-ready elements for a block sequence.

    Consecutive bullet blocks are grouped into one itemize element; row
    blocks become minipage cells with relative widths.
    """
    elements: List[Dict[str, Any]] = []

    for block in assembled.blocks:
        if block.is_row:
            cells = []
            for cell in block.columns:
                style = assembled.style_for(cell)
                cells.append(
                    {
                        "width": f"{(cell.width or 100) / 100:.2f}",
                        "align": LATEX_ALIGNMENT.get(style.alignment, LATEX_ALIGNMENT["left"]),
                        "latex": latex_styled(display_text(cell, style), style),
                    }
                )
            style = assembled.style_for(block)
            elements.append({"kind": "row", "cells": cells, **_latex_spacing(style)})
            continue

        style = assembled.style_for(block)
        latex = latex_styled(display_text(block, style), style)

        if block.role is BlockRole.BULLET:
            if elements and elements[-1]["kind"] == "itemize":
                elements[-1]["items"].append(latex)
            else:
                elements.append({"kind": "itemize", "items": [latex], **_latex_spacing(style)})
            continue

        elements.append(
            {
                "kind": "text",
                "align": LATEX_ALIGNMENT.get(style.alignment, LATEX_ALIGNMENT["left"]),
                "latex": latex,
                **_latex_spacing(style),
            }
        )

    return elements


def to_latex(assembled: AssembledDocument, registry: Optional[TemplateRegistry] = None) -> str:
    """
    Render an assembled document as a standalone LaTeX source.

    Args:
        assembled: Result of assemble()
        registry: LaTeX template registry (defaults to the rendering templates)

    Returns:
        LaTeX source ready for compile_latex()

    Raises:
        TemplateRenderError: If the document template fails to render
    """
    registry = registry or TemplateRegistry(RENDERING_TEMPLATES_PATH, latex=True)
    template = registry.get_template(LATEX_TEMPLATE)

    try:
        return template.render(
            elements=latex_elements(assembled),
            font_family=assembled.preset.font_family,
            margins=[_format_points(m) for m in assembled.preset.page_margins],
        )
    except TemplateError as e:
        raise TemplateRenderError(
            f"Failed to render {assembled.variant_id} document",
            template_name=LATEX_TEMPLATE,
            template_path=registry.get_template_path(LATEX_TEMPLATE),
            original_error=e,
        ) from e


# Markdown


def to_markdown(assembled: AssembledDocument) -> str:
    """
    Render an assembled document as Markdown.

    Headers map to #/##/###, bullets to "- " items, the subtitle/date row to
    one " | "-joined line, and a skill category is inlined in bold before its
    skill names.

    Args:
        assembled: Result of assemble()

    Returns:
        Markdown text ending with a newline
    """
    paragraphs: List[str] = []
    pending_category = None

    def add(text: str, joinable: bool = False):
        # Bullet runs stay in one paragraph
        if joinable and paragraphs and paragraphs[-1].startswith("- "):
            paragraphs[-1] = f"{paragraphs[-1]}\n{text}"
        else:
            paragraphs.append(text)

    for block in assembled.blocks:
        if block.is_row:
            parts = [escape_markdown(cell.text) for cell in block.columns if cell.text]
            if parts:
                add(" | ".join(parts))
            continue

        style = assembled.style_for(block)
        text = escape_markdown(display_text(block, style))

        if is_category_label(block):
            pending_category = text
            continue

        if block.role is BlockRole.HEADER:
            add(f"# {text}")
        elif block.role is BlockRole.SECTION_TITLE:
            add(f"## {text}")
        elif block.role is BlockRole.SUBHEADER:
            add(f"### {text}")
        elif block.role is BlockRole.BULLET:
            add(f"- {text}", joinable=True)
        elif pending_category is not None:
            add(f"**{pending_category}** {text}")
            pending_category = None
        elif block.fact == Fact.CONTACT and paragraphs and not paragraphs[-1].startswith("#"):
            # Contact lines share one paragraph, separated by hard breaks
            paragraphs[-1] = f"{paragraphs[-1]}  \n{text}"
        else:
            add(text)

    if pending_category is not None:
        add(f"**{pending_category}**")

    return "\n\n".join(paragraphs) + "\n"
