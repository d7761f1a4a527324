"""
Document context logger.

Provides logging interface for the document context with automatic [document] prefix.
All document modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[document]"


def setup_document_logger(log_dir: Path) -> Path:
    """Setup logger for a document session. Returns path to log file."""
    return _setup_logger(context_name="document", log_dir=log_dir)


def _log_info(message: str) -> None:
    """Log info message with [document] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [document] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
