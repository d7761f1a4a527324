"""
HTML preview of a VisualTree.

Serializes the tree produced by a template variant into a standalone HTML
page whose stylesheet is filled from the variant's style tokens.
"""

from typing import Optional

from jinja2 import TemplateError

from folio.contexts.templating.exceptions import TemplateRenderError
from folio.contexts.templating.logger import _log_debug, _log_error
from folio.contexts.templating.registries import TemplateRegistry
from folio.contexts.templating.variants import ModernTemplate, TemplateVariant
from folio.contexts.templating.visual_tree import VisualNode

PREVIEW_TEMPLATE = "preview.html.jinja"

# Tokens a custom variant may leave out
DEFAULT_TOKENS = dict(ModernTemplate.tokens)


def render_html(
    tree: VisualNode,
    variant: TemplateVariant,
    title: str = "Resume",
    registry: Optional[TemplateRegistry] = None,
) -> str:
    """
    Render a preview tree as an HTML page.

    Args:
        tree: Root node returned by variant.render()
        variant: Variant that produced the tree (supplies style tokens)
        title: Page title
        registry: Template registry (a fresh one by default)

    Returns:
        Complete HTML document

    Raises:
        TemplateRenderError: If the preview template fails to render
    """
    registry = registry or TemplateRegistry()
    template = registry.get_template(PREVIEW_TEMPLATE)
    tokens = {**DEFAULT_TOKENS, **variant.tokens}

    try:
        html = template.render(tree=tree, tokens=tokens, title=title)
    except TemplateError as e:
        _log_error(f"Preview template failed: {e}")
        raise TemplateRenderError(
            f"Failed to render {variant.name or 'custom'} preview",
            template_name=PREVIEW_TEMPLATE,
            template_path=registry.get_template_path(PREVIEW_TEMPLATE),
            original_error=e,
        ) from e

    _log_debug(f"Rendered {variant.name or 'custom'} preview ({len(html)} chars)")
    return html
