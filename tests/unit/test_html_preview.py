"""Unit tests for the HTML preview and the template registry."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from folio.contexts.document.schema import PersonalInfo, ResumeSchema
from folio.contexts.rendering.writers import RENDERING_TEMPLATES_PATH
from folio.contexts.templating.html import PREVIEW_TEMPLATE, render_html
from folio.contexts.templating.registries import TemplateRegistry
from folio.contexts.templating.variants import ClassicTemplate, MinimalTemplate, ModernTemplate


@pytest.mark.unit
def test_registry_caches_templates():
    registry = TemplateRegistry()
    assert registry._cache == {}

    first = registry.get_template(PREVIEW_TEMPLATE)
    assert registry.is_cached(PREVIEW_TEMPLATE)
    assert registry.get_template(PREVIEW_TEMPLATE) is first

    registry.clear_cache()
    assert not registry.is_cached(PREVIEW_TEMPLATE)


@pytest.mark.unit
def test_registry_missing_template():
    with pytest.raises(TemplateNotFound):
        TemplateRegistry().get_template("nonexistent.html.jinja")


@pytest.mark.unit
def test_registry_template_path():
    path = TemplateRegistry().get_template_path(PREVIEW_TEMPLATE)
    assert isinstance(path, Path)
    assert path.exists()


@pytest.mark.unit
def test_latex_registry_uses_latex_delimiters():
    registry = TemplateRegistry(RENDERING_TEMPLATES_PATH, latex=True)
    template = registry.env.from_string(r"\textbf{<<< name >>>}<%% if x %%>!<%% endif %%>")
    assert template.render(name="Ada", x=True) == r"\textbf{Ada}!"


@pytest.mark.unit
def test_preview_contains_facts_and_tokens(sample_resume):
    variant = ModernTemplate()
    html = render_html(variant.render(sample_resume), variant, title="John Doe")

    assert html.lstrip().startswith("<!DOCTYPE html>")
    assert "<title>John Doe</title>" in html
    assert "#2563eb" in html
    assert 'data-fact="section_title"' in html
    assert "Jan 2020 - Present" in html
    assert "Certifications &amp; Awards" in html


@pytest.mark.unit
def test_preview_escapes_user_text():
    schema = ResumeSchema(personal_info=PersonalInfo(first_name="<script>", summary="a < b"))
    variant = MinimalTemplate()
    html = render_html(variant.render(schema), variant)

    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "a &lt; b" in html


@pytest.mark.unit
def test_classic_preview_uses_serif_tokens(sample_resume):
    variant = ClassicTemplate()
    html = render_html(variant.render(sample_resume), variant)
    assert "Georgia" in html
    assert "text-transform: uppercase" in html
