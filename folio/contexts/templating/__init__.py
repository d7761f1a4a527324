"""
Templating Context

Responsibilities:
- Derives presentation-ready facts from the schema (dates, grouping, joins)
- Projects a resume into a preview tree through interchangeable variants
- Serializes preview trees to HTML

Owns: Section formatters, template variants, the visual tree, HTML preview
Never: Mutates the schema or makes pagination decisions
"""

from folio.contexts.templating.formatters import (
    DocumentFacts,
    EntryFacts,
    document_facts,
    format_date_range,
    format_month_year,
    group_skills,
)
from folio.contexts.templating.html import render_html
from folio.contexts.templating.variants import (
    ClassicTemplate,
    MinimalTemplate,
    ModernTemplate,
    TemplateVariant,
)
from folio.contexts.templating.visual_tree import Fact, VisualNode

__all__ = [
    # Formatters
    "format_month_year",
    "format_date_range",
    "group_skills",
    "document_facts",
    "DocumentFacts",
    "EntryFacts",
    # Variants and preview
    "TemplateVariant",
    "ModernTemplate",
    "ClassicTemplate",
    "MinimalTemplate",
    "VisualNode",
    "Fact",
    "render_html",
]
