"""
Rendering Dispatcher

Maps a variant id to the template variant used for the preview and the
style preset used for the paginated document. Both renderers resolve their
choice here, so a given id always means the same variant in both.

Unknown or missing ids fall back to the default variant ("modern") with a
debug log line; dispatch never fails.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from folio.contexts.document.schema import ResumeSchema
from folio.contexts.rendering.logger import _log_debug
from folio.contexts.rendering.style_presets import (
    VARIANT_STYLE_OVERRIDES,
    StylePreset,
    resolve_style_preset,
)
from folio.contexts.templating.variants import (
    ClassicTemplate,
    MinimalTemplate,
    ModernTemplate,
    TemplateVariant,
)
from folio.contexts.templating.visual_tree import VisualNode


class VariantId(str, Enum):
    """Built-in variant identifiers."""

    MODERN = "modern"
    CLASSIC = "classic"
    MINIMAL = "minimal"


DEFAULT_VARIANT = VariantId.MODERN


@dataclass(frozen=True)
class RenderingChoice:
    """The template variant and style preset selected for one variant id."""

    variant_id: str
    template: TemplateVariant
    preset: StylePreset


def _default_templates() -> Dict[str, TemplateVariant]:
    return {
        VariantId.MODERN.value: ModernTemplate(),
        VariantId.CLASSIC.value: ClassicTemplate(),
        VariantId.MINIMAL.value: MinimalTemplate(),
    }


class RenderingDispatcher:
    """
    Immutable registry of variants.

    Registering a new variant returns a new dispatcher; existing instances
    keep their mapping. Style overrides loaded from STYLE_PRESETS_PATH can be
    passed in as `style_overrides`.
    """

    def __init__(
        self,
        templates: Optional[Mapping[str, TemplateVariant]] = None,
        variant_styles: Optional[Mapping[str, Dict[str, Any]]] = None,
        style_overrides: Optional[Dict[str, Any]] = None,
        default_variant: str = DEFAULT_VARIANT.value,
    ):
        templates = dict(_default_templates() if templates is None else templates)
        if default_variant not in templates:
            raise ValueError(f"Default variant '{default_variant}' is not registered")

        self._templates = MappingProxyType(templates)
        self._variant_styles = MappingProxyType(
            dict(VARIANT_STYLE_OVERRIDES if variant_styles is None else variant_styles)
        )
        self._style_overrides = dict(style_overrides or {})
        self.default_variant = default_variant

    @property
    def variant_ids(self) -> Tuple[str, ...]:
        """Registered ids, in registration order."""
        return tuple(self._templates)

    def template(self, variant_id: str) -> TemplateVariant:
        return self._templates[self.resolve(variant_id)]

    def resolve(self, variant_id: Optional[str]) -> str:
        """
        Map a requested id onto a registered one.

        Args:
            variant_id: Requested id (may be None, empty, or unknown)

        Returns:
            The id itself when registered, otherwise the default variant id
        """
        if isinstance(variant_id, Enum):
            variant_id = variant_id.value
        if variant_id in self._templates:
            return variant_id

        _log_debug(f"Unknown variant '{variant_id}', falling back to '{self.default_variant}'")
        return self.default_variant

    def dispatch(self, variant_id: Optional[str]) -> RenderingChoice:
        """
        Select the template variant and style preset for an id.

        Args:
            variant_id: Requested variant id

        Returns:
            RenderingChoice for the resolved id
        """
        resolved = self.resolve(variant_id)
        return RenderingChoice(
            variant_id=resolved,
            template=self._templates[resolved],
            preset=resolve_style_preset(resolved, self._style_overrides, self._variant_styles),
        )

    def with_variant(
        self,
        variant_id: str,
        template: TemplateVariant,
        style: Optional[Dict[str, Any]] = None,
    ) -> "RenderingDispatcher":
        """
        Return a new dispatcher with one more (or a replaced) variant.

        Args:
            variant_id: Id to register
            template: Template variant for the preview
            style: Preset overrides applied on top of the base preset

        Returns:
            New RenderingDispatcher; this one is unchanged
        """
        templates = dict(self._templates)
        templates[variant_id] = template
        variant_styles = dict(self._variant_styles)
        variant_styles[variant_id] = style or {}
        return RenderingDispatcher(
            templates=templates,
            variant_styles=variant_styles,
            style_overrides=self._style_overrides,
            default_variant=self.default_variant,
        )


DEFAULT_DISPATCHER = RenderingDispatcher()


def resolve_variant_id(variant_id: Optional[str]) -> str:
    """Registered id for a request, using the built-in variants."""
    return DEFAULT_DISPATCHER.resolve(variant_id)


def dispatch(variant_id: Optional[str]) -> RenderingChoice:
    """Dispatch with the built-in variants."""
    return DEFAULT_DISPATCHER.dispatch(variant_id)


def render_preview(
    schema: ResumeSchema,
    variant_id: Optional[str] = None,
    dispatcher: Optional[RenderingDispatcher] = None,
) -> VisualNode:
    """
    Render the live preview tree for a schema.

    Args:
        schema: Resume to render
        variant_id: Requested variant id (unknown ids use the default)
        dispatcher: Dispatcher to use (defaults to the built-in variants)

    Returns:
        Root VisualNode
    """
    choice = (dispatcher or DEFAULT_DISPATCHER).dispatch(variant_id)
    return choice.template.render(schema)
