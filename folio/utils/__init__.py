"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Logging setup
- Timestamps for log and result directories
- LaTeX and Markdown escaping
- PDF inspection
"""

from folio.utils.timestamp import now, today

__all__ = ["now", "today"]
