"""
Rendering Context

Responsibilities:
- Resolves variant ids to a template variant and a style preset
- Assembles the paginated document as an ordered block sequence
- Writes LaTeX and Markdown, compiles PDFs, and validates the output
- Checks that preview and paginated output show the same facts

Owns: Style presets, dispatch, document assembly, export
Never: Modifies resume content
"""

from folio.contexts.rendering.assembler import AssembledDocument, Block, BlockRole, assemble
from folio.contexts.rendering.consistency import ConsistencyReport, check_consistency
from folio.contexts.rendering.dispatcher import (
    DEFAULT_VARIANT,
    RenderingDispatcher,
    VariantId,
    dispatch,
    render_preview,
)
from folio.contexts.rendering.exporter import ExportResult, export_resume

__all__ = [
    "assemble",
    "AssembledDocument",
    "Block",
    "BlockRole",
    "dispatch",
    "render_preview",
    "RenderingDispatcher",
    "VariantId",
    "DEFAULT_VARIANT",
    "check_consistency",
    "ConsistencyReport",
    "export_resume",
    "ExportResult",
]
