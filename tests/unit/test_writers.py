"""Unit tests for the LaTeX and Markdown writers."""

import pytest

from folio.contexts.rendering.assembler import assemble
from folio.contexts.rendering.style_presets import RoleStyle
from folio.contexts.rendering.writers import (
    latex_elements,
    latex_styled,
    to_latex,
    to_markdown,
)
from folio.utils.latex import escape_latex


@pytest.mark.unit
def test_latex_document_structure(sample_resume):
    source = to_latex(assemble(sample_resume, "modern"))

    assert source.lstrip().startswith(r"\documentclass")
    assert r"\begin{document}" in source
    assert source.rstrip().endswith(r"\end{document}")
    assert "left=40pt" in source
    assert r"\textcolor[HTML]{2563EB}" in source
    assert r"Certifications \& Awards" in source
    assert "Jan 2020 - Present" in source
    assert r"\begin{minipage}[t]{0.70\linewidth}" in source


@pytest.mark.unit
def test_latex_serif_and_uppercase_for_classic(sample_resume):
    source = to_latex(assemble(sample_resume, "classic"))
    assert "mathptmx" in source
    assert "WORK EXPERIENCE" in source
    assert r"\centering" in source


@pytest.mark.unit
def test_latex_minimal_margins(sample_resume):
    source = to_latex(assemble(sample_resume, "minimal"))
    assert "left=30pt" in source
    assert "helvet" in source


@pytest.mark.unit
def test_latex_escapes_special_characters(tricky_resume):
    source = to_latex(assemble(tricky_resume))
    assert r"R\&D Team\_\#1" in source
    assert r"100\% focused on \$cost \& \{quality\}" in source
    assert r"Obscure \textasciitilde{} Stuff:" in source


@pytest.mark.unit
def test_latex_escapes_backslash_once(name_only_resume):
    name_only_resume.personal_info.summary = "path C:\\tmp ^ 50%"
    source = to_latex(assemble(name_only_resume))

    assert r"path C:\textbackslash{}tmp \textasciicircum{} 50\%" in source
    assert r"\textbackslash\{" not in source
    assert escape_latex("{a}\\") == r"\{a\}\textbackslash{}"


@pytest.mark.unit
def test_bullets_are_grouped_into_one_itemize(sample_resume):
    elements = latex_elements(assemble(sample_resume))
    lists = [e for e in elements if e["kind"] == "itemize"]

    assert len(lists) == 2
    assert [len(e["items"]) for e in lists] == [3, 3]


@pytest.mark.unit
def test_latex_styled():
    style = RoleStyle(font_size=12, bold=True, decoration="underline", color="#2563eb")
    assert latex_styled("A&B", style) == (
        r"\fontsize{12}{14.4}\selectfont \textcolor[HTML]{2563EB}{\underline{\textbf{A\&B}}}"
    )
    assert latex_styled("", style) == ""


@pytest.mark.unit
def test_markdown_export(sample_resume):
    markdown = to_markdown(assemble(sample_resume))

    assert markdown.startswith("# John Doe\n\n")
    assert "john.doe@example.com | (555) 123-4567  \n123 Main St" in markdown
    assert "## Work Experience" in markdown
    assert "### Senior Software Engineer" in markdown
    assert "Tech Solutions Inc., San Francisco, CA | Jan 2020 - Present" in markdown
    assert "- Reduced page load time by 45% through code optimization\n- Mentored" in markdown
    assert "**Programming Languages:** JavaScript, TypeScript" in markdown
    assert "Technologies: React, Node.js, Express, MongoDB, Redux" in markdown
    assert markdown.endswith("\n")


@pytest.mark.unit
def test_markdown_omits_empty_sections(current_job_resume):
    markdown = to_markdown(assemble(current_job_resume))
    assert "Projects" not in markdown
    assert "## Skills" in markdown


@pytest.mark.unit
def test_markdown_escapes_user_text(name_only_resume):
    name_only_resume.personal_info.summary = "*nix fan, C#_dev_ [remote]"
    markdown = to_markdown(assemble(name_only_resume))

    assert r"\*nix fan, C\#\_dev\_ \[remote\]" in markdown
    assert markdown.startswith("# Ada Lovelace\n")
