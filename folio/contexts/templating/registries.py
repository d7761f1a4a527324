"""
Templating Registries

Loads and caches the Jinja2 templates used by the HTML preview and the LaTeX
writer. Caches are per registry instance.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    select_autoescape,
)

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("FOLIO_TEMPLATES_PATH", Path(__file__).resolve().parent / "templates")
)

# Delimiters that do not collide with LaTeX braces
LATEX_DELIMITERS = {
    "variable_start_string": "<<<",
    "variable_end_string": ">>>",
    "block_start_string": "<%%",
    "block_end_string": "%%>",
    "comment_start_string": "<#",
    "comment_end_string": "#>",
}


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates.

    HTML templates use the default Jinja2 syntax with autoescaping. LaTeX
    templates (latex=True) use custom delimiters and preserve whitespace:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>
    """

    def __init__(self, templates_path: Path = None, latex: bool = False):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding the templates. Defaults to
                            FOLIO_TEMPLATES_PATH from environment
            latex: Use LaTeX-safe delimiters instead of HTML autoescaping
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self.latex = latex
        self._cache: Dict[str, Template] = {}

        if latex:
            self.env = Environment(
                loader=FileSystemLoader(str(self.templates_path)),
                undefined=StrictUndefined,
                trim_blocks=False,
                lstrip_blocks=False,
                keep_trailing_newline=True,
                **LATEX_DELIMITERS,
            )
        else:
            self.env = Environment(
                loader=FileSystemLoader(str(self.templates_path)),
                undefined=StrictUndefined,
                autoescape=select_autoescape(["html", "html.jinja"]),
                trim_blocks=True,
                lstrip_blocks=True,
            )

    def get_template(self, template_name: str) -> Template:
        """
        Get a template by file name, loading and caching it if necessary.

        Args:
            template_name: File name relative to templates_path (e.g., 'preview.html.jinja')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if template_name in self._cache:
            return self._cache[template_name]

        try:
            template = self.env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template '{template_name}' not found at {self.get_template_path(template_name)}"
            ) from e

        self._cache[template_name] = template
        return template

    def get_template_path(self, template_name: str) -> Path:
        """Path to a template file."""
        return self.templates_path / template_name

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, template_name: str) -> bool:
        """Check if a template is in the cache."""
        return template_name in self._cache
