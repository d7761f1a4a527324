"""
Logger setup shared by every FOLIO context.

Provides loguru configuration with a provenance header. Context-specific
wrappers (prefixed messages, high-level helpers) live in
folio/contexts/{context}/logger.py and call setup_logger() from here.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

load_dotenv()
CONSOLE_LOG_LEVEL = os.getenv("CONSOLE_LOG_LEVEL", "INFO")

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, str]] = None,
    level_colors: Optional[Dict[str, str]] = None,
    console: bool = True,
) -> Path:
    """
    Configure loguru for one session of a context.

    Replaces any existing sinks with a DEBUG file sink at
    {log_dir}/{context_name}.log and, optionally, a colorized console sink
    at CONSOLE_LOG_LEVEL. Writes a provenance header before returning.

    Args:
        context_name: Context identifier ("document", "template", "render")
        log_dir: Directory for this logging session (created if missing)
        extra_provenance: Additional key-value pairs for the provenance header
        level_colors: Overrides for LEVEL_COLORS (e.g., {"INFO": "<cyan>"})
        console: Whether to also log to stdout

    Returns:
        Path to the log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")

    if console:
        logger.add(sys.stdout, format=CONSOLE_FORMAT, level=CONSOLE_LOG_LEVEL, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[Dict[str, str]] = None) -> None:
    """
    Log execution provenance (script, command, working directory, Python version).

    Args:
        extra_context: Additional key-value pairs to log
    """
    logger.info("=" * 80)
    logger.info(f"Script: {sys.argv[0]}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
