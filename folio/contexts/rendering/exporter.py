"""
Resume Export

Orchestrates assemble -> write -> (compile -> validate) for one resume and
variant. Supported formats:
    pdf: LaTeX source compiled with LATEX_COMPILER, then validated
    tex: LaTeX source only
    md:  Markdown

Failures of the write/compile step are reported in ExportResult.errors and
never raised; the caller decides how to surface them.
"""

import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from folio.contexts.document.schema import ResumeSchema
from folio.contexts.rendering.assembler import assemble, export_filename
from folio.contexts.rendering.compiler import KEEP_LATEX_ARTIFACTS, compile_latex
from folio.contexts.rendering.dispatcher import RenderingDispatcher
from folio.contexts.rendering.logger import (
    _log_debug,
    log_compilation_result,
    log_export_result,
    log_export_start,
)
from folio.contexts.rendering.validator import ValidationResult, validate_export
from folio.contexts.rendering.writers import to_latex, to_markdown
from folio.contexts.templating.exceptions import TemplateRenderError
from folio.utils.timestamp import today

load_dotenv()
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", "outs/results"))

EXPORT_FORMATS = ("pdf", "tex", "md")


@dataclass
class ExportResult:
    """
    Result of export_resume().

    Attributes:
        success: Whether the output file was produced
        fmt: Requested format
        variant_id: Resolved variant id
        output_path: Written file (None if failed)
        errors: Write or compile errors
        warnings: Compiler warnings
        page_count: PDF page count (pdf only)
        validation: PDF text check (pdf only)
    """

    success: bool
    fmt: str
    variant_id: str
    output_path: Optional[Path] = None
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    page_count: Optional[int] = None
    validation: Optional[ValidationResult] = None


def export_resume(
    schema: ResumeSchema,
    variant_id: Optional[str] = None,
    output_dir: Optional[Path] = None,
    fmt: str = "pdf",
    dispatcher: Optional[RenderingDispatcher] = None,
    num_passes: int = 2,
    keep_artifacts: bool = KEEP_LATEX_ARTIFACTS,
    verbose: bool = False,
) -> ExportResult:
    """
    Export a resume to a file named "<First>_<Last>_Resume.<fmt>".

    Args:
        schema: Resume to export (a snapshot is taken)
        variant_id: Requested variant id (unknown ids use the default)
        output_dir: Target directory (default: RESULTS_PATH/<today>)
        fmt: One of EXPORT_FORMATS
        dispatcher: Dispatcher to use (defaults to the built-in variants)
        num_passes: LaTeX passes (pdf only)
        keep_artifacts: Keep .tex/.aux/.log next to the PDF
        verbose: Log full compiler diagnostics

    Returns:
        ExportResult
    """
    start_time = time.time()
    fmt = fmt.lower().lstrip(".")
    output_dir = Path(output_dir) if output_dir is not None else RESULTS_PATH / today()

    assembled = assemble(schema.snapshot(), variant_id, dispatcher)
    resume_name = assembled.filename
    log_export_start(resume_name, assembled.variant_id, fmt, output_dir)

    if fmt not in EXPORT_FORMATS:
        result = ExportResult(
            success=False,
            fmt=fmt,
            variant_id=assembled.variant_id,
            errors=[f"Unsupported format '{fmt}' (expected one of {', '.join(EXPORT_FORMATS)})"],
        )
        log_export_result(resume_name, result, time.time() - start_time)
        return result

    try:
        if fmt == "md":
            content = to_markdown(assembled)
        else:
            content = to_latex(assembled)
    except TemplateRenderError as e:
        result = ExportResult(
            success=False, fmt=fmt, variant_id=assembled.variant_id, errors=[str(e)]
        )
        log_export_result(resume_name, result, time.time() - start_time)
        return result

    source_ext = "md" if fmt == "md" else "tex"
    source_path = output_dir / export_filename(schema.personal_info, source_ext)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        source_path.write_text(content, encoding="utf-8")
    except OSError as e:
        result = ExportResult(
            success=False,
            fmt=fmt,
            variant_id=assembled.variant_id,
            errors=[f"Could not write {source_path}: {e}"],
        )
        log_export_result(resume_name, result, time.time() - start_time)
        return result
    _log_debug(f"Wrote {source_path}")

    if fmt != "pdf":
        result = ExportResult(
            success=True, fmt=fmt, variant_id=assembled.variant_id, output_path=source_path
        )
        log_export_result(resume_name, result, time.time() - start_time)
        return result

    compile_start = time.time()
    compilation = compile_latex(
        tex_file=source_path,
        compile_dir=output_dir,
        num_passes=num_passes,
        keep_artifacts=keep_artifacts,
    )
    log_compilation_result(resume_name, compilation, time.time() - compile_start, verbose=verbose)

    if not keep_artifacts and source_path.exists():
        source_path.unlink()

    validation = None
    if compilation.success and compilation.pdf_path is not None:
        validation = validate_export(compilation.pdf_path, assembled)

    result = ExportResult(
        success=compilation.success,
        fmt=fmt,
        variant_id=assembled.variant_id,
        output_path=compilation.pdf_path,
        errors=list(compilation.errors),
        warnings=list(compilation.warnings),
        page_count=compilation.page_count,
        validation=validation,
    )
    log_export_result(resume_name, result, time.time() - start_time)
    return result
