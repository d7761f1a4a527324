"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, variant_id: str = "") -> Path:
    """
    Setup logger for a preview session.

    Args:
        log_dir: Directory for this session
        variant_id: Variant being previewed, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Variant": variant_id},
    )


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_preview_result(resume_name: str, variant_id: str, output_path: Path, elapsed_time: float) -> None:
    """Log a written HTML preview."""
    _log_success(f"{resume_name}: {variant_id} preview written ({elapsed_time:.2f}s)")
    _log_info(f"  Output: {output_path}")
