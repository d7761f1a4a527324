"""Unit tests for export validation helpers and LaTeX log parsing."""

import pytest

from folio.contexts.rendering.assembler import assemble
from folio.contexts.rendering.compiler import _parse_latex_log, compile_latex
from folio.contexts.rendering.validator import (
    ValidationResult,
    expected_phrases,
    generate_feedback_report,
    validate_export,
)
from folio.utils.pdf_processing import find_in_order, normalize_for_matching


@pytest.mark.unit
def test_expected_phrases_follow_document_order(current_job_resume):
    phrases = expected_phrases(assemble(current_job_resume))
    assert phrases == ["Grace Hopper", "Work Experience", "Rear Admiral", "Skills", "A", "B"]


@pytest.mark.unit
def test_find_in_order():
    lines = ["JOHN DOE", "Work Experience", "Senior Software", "Engineer"]
    assert find_in_order(["John Doe", "Senior Software Engineer"], lines) == []
    assert find_in_order(["Senior Software Engineer", "John Doe"], lines) == ["John Doe"]
    assert normalize_for_matching("Certifications & Awards") == "certificationsawards"


@pytest.mark.unit
def test_validate_missing_pdf(tmp_path, sample_resume):
    result = validate_export(tmp_path / "missing.pdf", assemble(sample_resume))
    assert not result.is_valid
    assert result.missing == result.checked


@pytest.mark.unit
def test_feedback_report():
    report = generate_feedback_report(ValidationResult(is_valid=False, missing=["Projects"]))
    assert "issue:fact_missing::phrase:Projects" in report
    assert generate_feedback_report(ValidationResult(is_valid=True)) == ""


@pytest.mark.unit
def test_parse_latex_log():
    log = "\n".join(
        [
            "./resume.tex:12: Undefined control sequence.",
            "! Emergency stop.",
            "LaTeX Warning: Reference `x' on page 1 undefined.",
            "Overfull \\hbox (3.2pt too wide) in paragraph at lines 5--6",
        ]
    )
    errors, warnings = _parse_latex_log(log)

    assert "Undefined control sequence." in errors
    assert "Emergency stop." in errors
    assert len(errors) == 2
    assert "Reference `x' on page 1 undefined." in warnings
    assert "3.2pt too wide" in warnings


@pytest.mark.unit
def test_compile_missing_file_reports_error(tmp_path):
    result = compile_latex(tmp_path / "missing.tex")
    assert not result.success
    assert "TeX file not found" in result.errors[0]


@pytest.mark.unit
def test_compile_with_missing_compiler(tmp_path):
    tex = tmp_path / "doc.tex"
    tex.write_text("\\documentclass{article}\\begin{document}x\\end{document}")
    result = compile_latex(tex, compiler="definitely-not-a-latex-compiler")
    assert not result.success
    assert "LaTeX compiler not found" in result.errors[0]
