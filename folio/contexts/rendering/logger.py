"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, variant_id: str = "") -> Path:
    """
    Setup logger for an export session.

    Args:
        log_dir: Directory for this export session
        variant_id: Variant being exported, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={
            "Variant": variant_id,
            "LaTeX compiler": os.getenv("LATEX_COMPILER", "pdflatex"),
        },
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_export_start(resume_name: str, variant_id: str, fmt: str, output_dir: Path) -> None:
    """Log start of an export with context."""
    _log_info(f"Exporting {resume_name} ({variant_id}, {fmt})")
    _log_debug(f"  Output directory: {output_dir}")


def log_compilation_result(
    resume_name: str,
    result,  # CompilationResult
    elapsed_time: float,
    verbose: bool = False,
) -> None:
    """
    Log compilation result with diagnostics.

    Args:
        resume_name: Resume identifier
        result: CompilationResult from compile_latex()
        elapsed_time: Time taken to compile
        verbose: Show detailed warnings/errors (default: False)
    """
    if result.success:
        _log_success(f"{resume_name}: compiled, {len(result.warnings)} warnings ({elapsed_time:.2f}s)")
        if result.pdf_path:
            _log_debug(f"  PDF: {result.pdf_path}")
    else:
        _log_error(f"{resume_name}: compilation failed, {len(result.errors)} errors ({elapsed_time:.2f}s)")
        error_limit = 10 if verbose else 5
        for i, err in enumerate(result.errors[:error_limit], 1):
            _log_error(f"  Error {i}: {err}")
        if len(result.errors) > error_limit:
            _log_error(f"  ... and {len(result.errors) - error_limit} more errors")

    if result.warnings:
        warning_limit = 10 if verbose else 3
        for i, warn in enumerate(result.warnings[:warning_limit], 1):
            _log_debug(f"  Warning {i}: {warn}")
        if len(result.warnings) > warning_limit:
            _log_debug(f"  ... and {len(result.warnings) - warning_limit} more warnings")

    # raw=True keeps loguru from prefixing every line of the compiler output
    if verbose or not result.success:
        if result.stdout:
            logger.opt(raw=True).debug(
                f"\n{'=' * 80}\nLATEX STDOUT:\n{'=' * 80}\n{result.stdout}\n"
            )
        if result.stderr:
            logger.opt(raw=True).debug(
                f"\n{'=' * 80}\nLATEX STDERR:\n{'=' * 80}\n{result.stderr}\n"
            )


def log_export_result(resume_name: str, result, elapsed_time: float) -> None:
    """
    Log the outcome of export_resume().

    Args:
        resume_name: Resume identifier
        result: ExportResult
        elapsed_time: Time taken for the whole export
    """
    if result.success:
        _log_success(f"{resume_name}: exported {result.output_path} ({elapsed_time:.2f}s)")
    else:
        _log_error(f"{resume_name}: export failed ({elapsed_time:.2f}s)")
        for error in result.errors:
            _log_error(f"  {error}")


def log_validation_result(resume_name: str, result) -> None:
    """Log a ValidationResult."""
    if result.is_valid:
        _log_success(f"{resume_name}: {result.page_count} page(s), all facts found")
    else:
        _log_warning(f"{resume_name}: {len(result.missing)} fact(s) not found in PDF")
        for phrase in result.missing[:10]:
            _log_debug(f"  Missing: {phrase}")
