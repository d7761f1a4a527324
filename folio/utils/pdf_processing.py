"""
PDF inspection helpers used to check exported resumes.

Helper functions:
    page_count: Quick page count without text extraction.
    extract_lines: Text lines for the whole document, page order then top-to-bottom.
    normalize_for_matching: Text normalization for fuzzy matching.
    find_in_order: Locate a sequence of phrases in document order.
"""

from pathlib import Path
from typing import List, Optional, Sequence

import pdfplumber
from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError


def page_count(pdf_path: Path) -> Optional[int]:
    """Get page count from PDF, or None if unreadable."""
    try:
        reader = PdfReader(str(pdf_path))
        return len(reader.pages)
    except (OSError, PdfReadError):
        return None


def extract_lines(pdf_path: Path, max_pages: int = 20) -> List[str]:
    """
    Extract text lines from a PDF.

    Args:
        pdf_path: Path to the PDF
        max_pages: Stop after this many pages

    Returns:
        Non-empty text lines across all pages, in reading order
    """
    lines: List[str] = []
    with pdfplumber.open(pdf_path) as pdf:
        for page in pdf.pages[:max_pages]:
            text = page.extract_text() or ""
            lines.extend(line for line in text.splitlines() if line.strip())
    return lines


def normalize_for_matching(text: str) -> str:
    """Keep only lowercase alphanumeric characters for fuzzy text matching."""
    return "".join(c for c in text.lower() if c.isalnum())


def find_in_order(phrases: Sequence[str], lines: Sequence[str]) -> List[str]:
    """
    Check that phrases appear in the given lines in order.

    Matching is done on the normalized concatenation of all lines, so a phrase
    wrapped across a line break still matches.

    Args:
        phrases: Phrases expected in this order
        lines: Document text lines

    Returns:
        Phrases that were not found after the previous match (empty if all found)
    """
    haystack = "".join(normalize_for_matching(line) for line in lines)
    missing = []
    cursor = 0

    for phrase in phrases:
        needle = normalize_for_matching(phrase)
        if not needle:
            continue
        position = haystack.find(needle, cursor)
        if position == -1:
            missing.append(phrase)
        else:
            cursor = position + len(needle)

    return missing
