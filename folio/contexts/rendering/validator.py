"""
Export validation.

Checks a compiled PDF against the block sequence it was written from: the
name, every section title and every entry title must be found in the PDF
text, in document order. Text matching is case- and punctuation-insensitive,
so uppercase titles and wrapped lines still match.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from folio.contexts.rendering.assembler import AssembledDocument
from folio.contexts.rendering.logger import _log_debug, log_validation_result
from folio.contexts.templating.visual_tree import Fact
from folio.utils.pdf_processing import extract_lines, find_in_order, page_count

# Facts whose text must show up in the PDF
CHECKED_FACTS = (Fact.NAME, Fact.SECTION_TITLE, Fact.ENTRY_TITLE)


@dataclass
class ValidationResult:
    """
    Result of export validation.

    Attributes:
        is_valid: Whether every checked phrase was found, in order
        page_count: Page count of the PDF (None if unreadable)
        checked: Phrases looked for, in document order
        missing: Phrases not found after the previous match
        pdf_path: Validated PDF
    """

    is_valid: bool
    page_count: Optional[int] = None
    checked: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    pdf_path: Optional[Path] = None


def expected_phrases(assembled: AssembledDocument) -> List[str]:
    """Non-empty name, section title and entry title texts in block order."""
    phrases = []
    for block in assembled.iter_cells():
        if block.fact in CHECKED_FACTS and block.text:
            phrases.append(block.text)
    return phrases


def generate_feedback_report(result: ValidationResult) -> str:
    """
    Actionable lines for a failed validation.

    Each missing phrase gets an issue line and an action line.
    """
    lines = []
    for counter, phrase in enumerate(result.missing, 1):
        lines.append(f"\n#{counter}")
        lines.append(f"issue:fact_missing::phrase:{phrase}")
        lines.append(
            "action: Check that the text is not clipped, reordered, or hidden by the layout"
        )
    return "\n".join(lines)


def validate_export(pdf_path: Path, assembled: AssembledDocument) -> ValidationResult:
    """
    Validate a compiled PDF against its assembled document.

    Args:
        pdf_path: Compiled PDF
        assembled: AssembledDocument the PDF was written from

    Returns:
        ValidationResult (is_valid False when the PDF is missing or unreadable)
    """
    pdf_path = Path(pdf_path)
    phrases = expected_phrases(assembled)

    if not pdf_path.exists():
        return ValidationResult(is_valid=False, checked=phrases, missing=phrases, pdf_path=pdf_path)

    pages = page_count(pdf_path)
    if pages is None:
        return ValidationResult(is_valid=False, checked=phrases, missing=phrases, pdf_path=pdf_path)

    try:
        lines = extract_lines(pdf_path)
    except OSError as e:
        _log_debug(f"Could not read text from {pdf_path.name}: {e}")
        return ValidationResult(is_valid=False, checked=phrases, missing=phrases, pdf_path=pdf_path)

    _log_debug(f"Extracted {len(lines)} lines from {pdf_path.name}")
    missing = find_in_order(phrases, lines)

    result = ValidationResult(
        is_valid=not missing,
        page_count=pages,
        checked=phrases,
        missing=missing,
        pdf_path=pdf_path,
    )
    log_validation_result(assembled.filename, result)
    return result
