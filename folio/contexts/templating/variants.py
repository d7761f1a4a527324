"""
Template Variants

Interchangeable layout strategies that project a resume into a VisualTree.

Every variant renders the same facts from formatters.document_facts() in the
same section order. Variants differ only in:
- style tokens (typography, colors), resolved by the preview stylesheet
- entity layout: "columns" (heading left, dates right) or "stacked"
- skill category labels: "tagged" (own heading) or "inline" (prefix)

New variants subclass TemplateVariant and override class attributes or the
render_* hooks; they must not drop or reorder facts.
"""

from typing import Dict, Tuple

from folio.contexts.document.schema import ResumeSchema, SectionKey
from folio.contexts.templating.formatters import (
    DocumentFacts,
    EntryFacts,
    HeaderFacts,
    SectionFacts,
    document_facts,
)
from folio.contexts.templating.visual_tree import Fact, VisualNode

COLUMNS_LAYOUT = "columns"
STACKED_LAYOUT = "stacked"
TAGGED_CATEGORIES = "tagged"
INLINE_CATEGORIES = "inline"


class TemplateVariant:
    """
    Base layout strategy.

    Subclasses set `name`, `label`, `description`, `tokens` and the layout
    switches; the base class owns section ordering and the presence rule.
    """

    name: str = ""
    label: str = ""
    description: str = ""
    entry_layout: str = COLUMNS_LAYOUT
    category_style: str = TAGGED_CATEGORIES
    header_alignment: str = "left"
    tokens: Dict[str, str] = {}

    def render(self, schema: ResumeSchema) -> VisualNode:
        """
        Render a schema snapshot into a VisualTree.

        Args:
            schema: Resume to render (not modified)

        Returns:
            Root VisualNode of the preview
        """
        return self.render_facts(document_facts(schema))

    def render_facts(self, facts: DocumentFacts) -> VisualNode:
        root = VisualNode("div", classes=("resume", f"{self.name}-template"))
        root.append(self.render_header(facts.header))
        for section in facts.sections:
            root.append(self.render_section(section))
        return root

    # Hooks

    def render_header(self, header: HeaderFacts) -> VisualNode:
        node = VisualNode("header", classes=("header", f"align-{self.header_alignment}"))
        if header.full_name:
            node.append(VisualNode("h1", text=header.full_name, classes=("name",), fact=Fact.NAME))

        contact = node.append(VisualNode("div", classes=("contact",)))
        for item in header.contact_items + header.location_items + header.web_items:
            contact.append(VisualNode("span", text=item, classes=("contact-item",), fact=Fact.CONTACT))
        return node

    def render_section(self, section: SectionFacts) -> VisualNode:
        key = section.key.value
        node = VisualNode("section", classes=("section", f"section-{key}"), section=key)
        node.append(
            VisualNode(
                "h2",
                text=section.title,
                classes=self.section_title_classes(),
                fact=Fact.SECTION_TITLE,
                section=key,
            )
        )

        if section.key is SectionKey.SUMMARY:
            node.append(
                VisualNode("p", text=section.text, classes=("summary",), fact=Fact.SUMMARY, section=key)
            )
            return node

        for index, entry in enumerate(section.entries):
            if section.key is SectionKey.SKILLS:
                node.append(self.render_skill_group(key, index, entry))
            else:
                node.append(self.render_entry(key, index, entry))
        return node

    def section_title_classes(self) -> Tuple[str, ...]:
        return ("section-title",)

    def render_entry(self, section: str, index: int, entry: EntryFacts) -> VisualNode:
        node = VisualNode("div", classes=("entry",), section=section, entry=index)

        def tagged(tag, text, classes, fact):
            return VisualNode(tag, text=text, classes=classes, fact=fact, section=section, entry=index)

        title = tagged("h3", entry.title, ("entry-title",), Fact.ENTRY_TITLE)
        subtitle = tagged("p", entry.subtitle, ("entry-subtitle",), Fact.SUBTITLE) if entry.subtitle else None
        dates = tagged("p", entry.date_range, ("date-range",), Fact.DATE_RANGE) if entry.date_range else None

        if self.entry_layout == COLUMNS_LAYOUT:
            row = node.append(VisualNode("div", classes=("entry-row",)))
            main = row.append(VisualNode("div", classes=("entry-main",)))
            main.append(title)
            if subtitle is not None:
                main.append(subtitle)
            aside = row.append(VisualNode("div", classes=("entry-aside",)))
            if dates is not None:
                aside.append(dates)
        else:
            heading = node.append(VisualNode("div", classes=("entry-heading",)))
            heading.append(title)
            if dates is not None:
                heading.append(dates)
            if subtitle is not None:
                node.append(subtitle)

        if entry.description:
            node.append(tagged("p", entry.description, ("description",), Fact.DESCRIPTION))

        if entry.bullets:
            bullets = node.append(VisualNode("ul", classes=("bullets",)))
            for bullet in entry.bullets:
                bullets.append(tagged("li", bullet, ("bullet",), Fact.BULLET))

        for label, value in entry.details:
            node.append(tagged("p", f"{label}: {value}", ("detail",), Fact.DETAIL))

        if entry.items:
            items = node.append(VisualNode("div", classes=("items",)))
            if entry.items_label:
                items.append(tagged("span", entry.items_label, ("items-label",), Fact.ITEMS_LABEL))
            for item in entry.items:
                items.append(tagged("span", item, ("chip",), Fact.ITEM))

        return node

    def render_skill_group(self, section: str, index: int, entry: EntryFacts) -> VisualNode:
        if self.category_style == INLINE_CATEGORIES:
            node = VisualNode("p", classes=("skill-group", "inline"), section=section, entry=index)
            label_classes = ("category-inline",)
        else:
            node = VisualNode("div", classes=("skill-group", "tagged"), section=section, entry=index)
            label_classes = ("category-tag",)

        node.append(
            VisualNode(
                "span" if self.category_style == INLINE_CATEGORIES else "h4",
                text=entry.title,
                classes=label_classes,
                fact=Fact.ENTRY_TITLE,
                section=section,
                entry=index,
            )
        )
        for item in entry.items:
            node.append(
                VisualNode("span", text=item, classes=("chip",), fact=Fact.ITEM, section=section, entry=index)
            )
        return node


class ModernTemplate(TemplateVariant):
    """Clean sans-serif layout with a blue accent and tagged skill categories."""

    name = "modern"
    label = "Modern"
    description = "A clean, professional template with a touch of color"
    entry_layout = COLUMNS_LAYOUT
    category_style = TAGGED_CATEGORIES
    tokens = {
        "font_family": "ui-sans-serif, system-ui, sans-serif",
        "text_color": "#333333",
        "accent_color": "#2563eb",
        "muted_color": "#4b5563",
        "chip_background": "#ebf5ff",
        "chip_color": "#2563eb",
        "name_size": "1.875rem",
        "title_size": "1.125rem",
        "body_size": "0.875rem",
        "title_transform": "none",
    }

    def section_title_classes(self) -> Tuple[str, ...]:
        return ("section-title", "accent", "rule")


class ClassicTemplate(TemplateVariant):
    """Traditional serif layout: centered header, uppercase ruled section titles."""

    name = "classic"
    label = "Classic"
    description = "A traditional resume layout, perfect for formal applications"
    entry_layout = COLUMNS_LAYOUT
    category_style = TAGGED_CATEGORIES
    header_alignment = "center"
    tokens = {
        "font_family": "Georgia, 'Times New Roman', serif",
        "text_color": "#333333",
        "accent_color": "#222222",
        "muted_color": "#333333",
        "chip_background": "transparent",
        "chip_color": "#333333",
        "name_size": "1.875rem",
        "title_size": "1.125rem",
        "body_size": "0.875rem",
        "title_transform": "uppercase",
    }

    def section_title_classes(self) -> Tuple[str, ...]:
        return ("section-title", "uppercase", "rule")

    def render_entry(self, section: str, index: int, entry: EntryFacts) -> VisualNode:
        node = super().render_entry(section, index, entry)
        node.classes = node.classes + ("tabular",)
        return node


class MinimalTemplate(TemplateVariant):
    """Compact layout with small type and inline category prefixes."""

    name = "minimal"
    label = "Minimal"
    description = "A simple, straightforward layout that focuses on content"
    entry_layout = STACKED_LAYOUT
    category_style = INLINE_CATEGORIES
    tokens = {
        "font_family": "ui-sans-serif, system-ui, sans-serif",
        "text_color": "#333333",
        "accent_color": "#333333",
        "muted_color": "#4b5563",
        "chip_background": "transparent",
        "chip_color": "#333333",
        "name_size": "1.5rem",
        "title_size": "1rem",
        "body_size": "0.75rem",
        "title_transform": "uppercase",
    }

    def section_title_classes(self) -> Tuple[str, ...]:
        return ("section-title", "uppercase")
