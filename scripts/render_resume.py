#!/usr/bin/env python3
"""
Resume Rendering CLI

Previews, exports and checks the local resume document.

Commands:
    variants - List the available template variants
    init     - Write the sample (or an empty) resume document
    preview  - Render the HTML preview for a variant
    export   - Export to PDF, LaTeX or Markdown
    check    - Verify preview and paginated output show the same facts
    blocks   - Print the assembled block sequence

Examples:\n

    render_resume.py init                               # Sample resume at FOLIO_DOCUMENT_PATH

    render_resume.py preview --variant classic          # HTML preview

    render_resume.py export --format md                 # Markdown export

    render_resume.py check                              # All variants
"""

import os
import time
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.document import (
    InvalidDocumentError,
    default_resume,
    empty_resume,
    load_document,
    save_document,
)
from folio.contexts.document.logger import setup_document_logger
from folio.contexts.document.store import DOCUMENT_PATH
from folio.contexts.rendering.assembler import assemble, export_filename
from folio.contexts.rendering.consistency import check_consistency
from folio.contexts.rendering.dispatcher import RenderingDispatcher
from folio.contexts.rendering.exporter import EXPORT_FORMATS, export_resume
from folio.contexts.rendering.logger import setup_rendering_logger
from folio.contexts.rendering.style_presets import load_style_overrides
from folio.contexts.templating.exceptions import TemplateRenderError
from folio.contexts.templating.html import render_html
from folio.contexts.templating.logger import log_preview_result, setup_templating_logger
from folio.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", "outs/results"))


app = typer.Typer(
    help="Preview, export and check the local resume document",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


DocumentOption = Annotated[
    Optional[Path],
    typer.Option("--document", "-d", help="Resume document YAML (default: FOLIO_DOCUMENT_PATH)"),
]
VariantOption = Annotated[
    Optional[str],
    typer.Option("--variant", "-t", help="Variant id (default: the one saved in the document)"),
]


def build_dispatcher() -> RenderingDispatcher:
    """Built-in variants with style overrides from STYLE_PRESETS_PATH, if any."""
    try:
        return RenderingDispatcher(style_overrides=load_style_overrides())
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def open_document(document: Optional[Path]):
    try:
        return load_document(document)
    except InvalidDocumentError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("variants")
def variants_command():
    """List the available template variants."""
    dispatcher = build_dispatcher()
    for variant_id in dispatcher.variant_ids:
        template = dispatcher.template(variant_id)
        marker = " (default)" if variant_id == dispatcher.default_variant else ""
        typer.secho(f"{variant_id}{marker}", fg=typer.colors.BLUE, bold=True)
        typer.echo(f"  {template.description}")


@app.command("init")
def init_command(
    document: DocumentOption = None,
    variant: VariantOption = None,
    empty: Annotated[
        bool, typer.Option("--empty", help="Start from an empty resume instead of the sample")
    ] = False,
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite an existing document")
    ] = False,
):
    """
    Write a new resume document.

    Examples:\n

        $ render_resume.py init                        # Sample resume

        $ render_resume.py init --empty -d cv.yaml     # Empty resume at cv.yaml
    """
    target = document if document is not None else DOCUMENT_PATH
    if target.exists() and not force:
        typer.secho(f"Error: {target} already exists (use --force)\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    setup_document_logger(LOGS_PATH / f"init_{now()}")
    resume = empty_resume() if empty else default_resume()
    path = save_document(resume, variant or "modern", target)
    typer.secho(f"✓ Wrote {path}", fg=typer.colors.GREEN, bold=True)


@app.command("preview")
def preview_command(
    document: DocumentOption = None,
    variant: VariantOption = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="HTML file (default: RESULTS_PATH/<name>_<variant>.html)"),
    ] = None,
):
    """
    Render the HTML preview of the document.

    Examples:\n

        $ render_resume.py preview --variant minimal -o preview.html
    """
    stored = open_document(document)
    dispatcher = build_dispatcher()
    choice = dispatcher.dispatch(variant or stored.variant_id)

    log_dir = LOGS_PATH / f"preview_{now()}"
    setup_templating_logger(log_dir, choice.variant_id)

    start_time = time.time()
    resume_name = export_filename(stored.resume.personal_info)
    tree = choice.template.render(stored.resume.snapshot())

    try:
        html = render_html(tree, choice.template, title=stored.resume.personal_info.full_name or "Resume")
    except TemplateRenderError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if output is None:
        output = RESULTS_PATH / f"{resume_name}_{choice.variant_id}.html"
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")

    log_preview_result(resume_name, choice.variant_id, output, time.time() - start_time)
    typer.secho(f"✓ Preview: {output}", fg=typer.colors.GREEN, bold=True)


@app.command("export")
def export_command(
    document: DocumentOption = None,
    variant: VariantOption = None,
    fmt: Annotated[
        str, typer.Option("--format", "-f", help=f"One of: {', '.join(EXPORT_FORMATS)}")
    ] = "pdf",
    output_dir: Annotated[
        Optional[Path], typer.Option("--output-dir", "-o", help="Target directory")
    ] = None,
    num_passes: Annotated[
        int, typer.Option("--passes", "-p", help="Number of LaTeX passes", min=1, max=5)
    ] = 2,
    keep_artifacts: Annotated[
        bool, typer.Option("--keep-artifacts", "-k", help="Keep .tex and LaTeX artifacts")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show detailed compiler output")
    ] = False,
):
    """
    Export the document as "<First>_<Last>_Resume.<format>".

    Examples:\n

        $ render_resume.py export                          # PDF, saved variant

        $ render_resume.py export -f tex -t classic        # LaTeX source
    """
    stored = open_document(document)
    dispatcher = build_dispatcher()
    variant_id = dispatcher.resolve(variant or stored.variant_id)

    log_dir = LOGS_PATH / f"export_{now()}"
    setup_rendering_logger(log_dir, variant_id)

    result = export_resume(
        stored.resume,
        variant_id,
        output_dir=output_dir,
        fmt=fmt,
        dispatcher=dispatcher,
        num_passes=num_passes,
        keep_artifacts=keep_artifacts,
        verbose=verbose,
    )

    typer.echo("")
    if result.success:
        typer.secho("✓ Export succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  File: {result.output_path}")
        if result.page_count is not None:
            typer.echo(f"  Pages: {result.page_count}")
        if result.validation is not None and not result.validation.is_valid:
            typer.secho(
                f"  Missing from PDF: {', '.join(result.validation.missing)}",
                fg=typer.colors.YELLOW,
            )
    else:
        typer.secho(f"✗ Export failed with {len(result.errors)} errors", fg=typer.colors.RED, bold=True)
        for error in result.errors[:10]:
            typer.secho(f"  - {error}", fg=typer.colors.RED)
        if len(result.errors) > 10:
            typer.echo(f"  ... and {len(result.errors) - 10} more")

    typer.echo(f"  Log: {log_dir}")
    raise typer.Exit(code=0 if result.success else 1)


@app.command("check")
def check_command(
    document: DocumentOption = None,
    variants: Annotated[
        Optional[List[str]],
        typer.Option("--variant", "-t", help="Variant to check (repeatable; default: all)"),
    ] = None,
):
    """
    Check that preview and paginated output show the same facts.

    Exits 1 when any mismatch is found.
    """
    stored = open_document(document)
    report = check_consistency(stored.resume, variants or None, build_dispatcher())

    if report.is_consistent:
        typer.secho(
            f"✓ Consistent across {', '.join(report.variant_ids)}", fg=typer.colors.GREEN, bold=True
        )
        raise typer.Exit(code=0)

    typer.secho(f"✗ {len(report.mismatches)} mismatch(es)", fg=typer.colors.RED, bold=True)
    for mismatch in report.mismatches:
        typer.echo(f"  - {mismatch}")
    raise typer.Exit(code=1)


@app.command("blocks")
def blocks_command(
    document: DocumentOption = None,
    variant: VariantOption = None,
):
    """Print the assembled block sequence, one block per line."""
    stored = open_document(document)
    assembled = assemble(stored.resume, variant or stored.variant_id, build_dispatcher())

    typer.secho(f"{assembled.filename} ({assembled.variant_id})", fg=typer.colors.BLUE, bold=True)
    for block in assembled.blocks:
        if block.is_row:
            cells = " || ".join(f"{cell.text} [{cell.width}%]" for cell in block.columns)
            typer.echo(f"  {'row':<13} {cells}")
        else:
            typer.echo(f"  {block.role.value:<13} {block.text}")


if __name__ == "__main__":
    app()
