"""
LaTeX Compilation Module

Handles compilation of .tex files to PDF using pdflatex (or LATEX_COMPILER).
"""

import os
import re
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from folio.contexts.rendering.logger import _log_debug
from folio.utils.pdf_processing import page_count

load_dotenv()

LATEX_COMPILER = os.getenv("LATEX_COMPILER", "pdflatex")
KEEP_LATEX_ARTIFACTS = os.getenv("KEEP_LATEX_ARTIFACTS", "false").lower() == "true"

# LaTeX intermediate files created during compilation
LATEX_ARTIFACTS = [".aux", ".log", ".out", ".toc"]


@dataclass
class CompilationResult:
    """
    Result of LaTeX compilation.

    Attributes:
        success: Whether compilation succeeded
        pdf_path: Path to generated PDF (None if failed)
        stdout: Standard output from the compiler
        stderr: Standard error from the compiler
        errors: List of parsed LaTeX errors
        warnings: List of parsed LaTeX warnings
        page_count: Number of pages in generated PDF (None if not available)
    """

    success: bool
    pdf_path: Optional[Path] = None
    stdout: str = ""
    stderr: str = ""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    page_count: Optional[int] = None


def latex_compiler_available(compiler: str = None) -> bool:
    """Whether the LaTeX compiler is on PATH."""
    return shutil.which(compiler or LATEX_COMPILER) is not None


def _parse_latex_log(log_content: str) -> Tuple[List[str], List[str]]:
    """
    Parse LaTeX log file for errors and warnings.

    Args:
        log_content: Content of the .log file

    Returns:
        Tuple of (errors, warnings)
    """
    errors = []
    warnings = []

    # "! Error message", or "file:line: message" with -file-line-error
    error_pattern = re.compile(r"^(?:! |[^\s:]+:\d+: )(.+)$", re.MULTILINE)
    for match in error_pattern.finditer(log_content):
        message = match.group(1).strip()
        if message not in errors:
            errors.append(message)

    # Errors that do not always start with "!"
    additional_error_patterns = [
        r"Undefined control sequence",
        r"File ended while scanning use of",
        r"Emergency stop",
    ]
    for pattern in additional_error_patterns:
        match = re.search(rf"({pattern}.*?)$", log_content, re.MULTILINE)
        if match and not any(match.group(1) in error for error in errors):
            errors.append(match.group(1))

    warning_patterns = [
        r"LaTeX Warning: (.+)",
        r"Package \w+ Warning: (.+)",
        r"Overfull \\hbox \((.+)\)",
        r"Underfull \\hbox \((.+)\)",
    ]
    for pattern in warning_patterns:
        for match in re.finditer(pattern, log_content, re.MULTILINE):
            warnings.append(match.group(1).strip())

    return errors, warnings


def _remove_artifacts(tex_path: Path) -> None:
    """
    Remove intermediate LaTeX files.

    Args:
        tex_path: Path to the .tex file
    """
    base_path = tex_path.parent / tex_path.stem

    for ext in LATEX_ARTIFACTS:
        artifact_path = base_path.with_suffix(ext)
        if artifact_path.exists():
            artifact_path.unlink()


def compile_latex(
    tex_file: Path,
    compile_dir: Optional[Path] = None,
    num_passes: int = 2,
    keep_artifacts: bool = KEEP_LATEX_ARTIFACTS,
    compiler: Optional[str] = None,
) -> CompilationResult:
    """
    Compile a LaTeX file to PDF.

    Pure compilation function - assumes compile_dir exists. Failures are
    reported in the result, never raised.

    Args:
        tex_file: Path to the .tex file to compile
        compile_dir: Output directory (default: alongside the .tex file)
        num_passes: Number of compiler passes
        keep_artifacts: Keep intermediate files (default: from KEEP_LATEX_ARTIFACTS env)
        compiler: Compiler executable (default: from LATEX_COMPILER env)

    Returns:
        CompilationResult with success status and diagnostic information
    """
    tex_file = Path(tex_file).resolve()
    compiler = compiler or LATEX_COMPILER

    if not tex_file.exists():
        return CompilationResult(success=False, errors=[f"TeX file not found: {tex_file}"])
    if not latex_compiler_available(compiler):
        return CompilationResult(success=False, errors=[f"LaTeX compiler not found: {compiler}"])

    original_tex_file = tex_file
    if compile_dir is None:
        compile_dir = tex_file.parent
    else:
        compile_dir = Path(compile_dir).resolve()
        if compile_dir != tex_file.parent:
            tex_file = compile_dir / tex_file.name
            shutil.copy2(original_tex_file, tex_file)

    # Missing log file means the compiler never ran; stale PDFs must not count as success
    stem = tex_file.stem
    for ext in [".pdf"] + LATEX_ARTIFACTS:
        old_file = compile_dir / f"{stem}{ext}"
        if old_file.exists():
            old_file.unlink()

    all_stdout = []
    all_stderr = []
    success = True

    for pass_number in range(1, num_passes + 1):
        cmd = [compiler, "-interaction=nonstopmode", "-file-line-error", tex_file.name]
        _log_debug(f"Pass {pass_number}/{num_passes}: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                cwd=compile_dir,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            return CompilationResult(success=False, errors=[f"Could not run {compiler}: {e}"])

        all_stdout.append(result.stdout)
        all_stderr.append(result.stderr)

        if result.returncode != 0:
            success = False
            break

    log_file = compile_dir / f"{stem}.log"
    errors = []
    warnings = []

    if log_file.exists():
        # LaTeX logs are not guaranteed UTF-8
        log_content = log_file.read_text(encoding="latin-1")
        errors, warnings = _parse_latex_log(log_content)

    pdf_path = compile_dir / f"{stem}.pdf"
    if not pdf_path.exists():
        success = False
        if not errors:
            errors.append("PDF file was not generated")
    elif not errors:
        # A non-zero exit with a PDF and no parsed errors is still a success
        success = True

    if not keep_artifacts:
        _remove_artifacts(tex_file)

    if original_tex_file != tex_file and tex_file.exists():
        tex_file.unlink()

    return CompilationResult(
        success=success,
        pdf_path=pdf_path if pdf_path.exists() else None,
        stdout="\n".join(all_stdout),
        stderr="\n".join(all_stderr),
        errors=errors,
        warnings=warnings,
        page_count=page_count(pdf_path) if pdf_path.exists() else None,
    )
