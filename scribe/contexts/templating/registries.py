"""
Templating Registries

Centralized registry for loading and caching the Jinja2 layout templates.
"""

from pathlib import Path
from typing import Dict, List

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

TEMPLATES_PATH = Path(__file__).parent / "template"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Layout templates are stored in template/layouts/{layout_name}/template.html.jinja
    and extend template/structure/document.html.jinja. Shared building blocks
    (sidebar rows, main sections, contact items) live in template/macros/.

    Autoescaping is always on, so every value inserted into a template is
    escaped for & < > " ' unless explicitly marked safe.
    """

    def __init__(self, templates_base_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_base_path: Base path for template directories. Defaults to
                           the template/ directory shipped with the package
        """
        if templates_base_path is None:
            templates_base_path = TEMPLATES_PATH

        self.templates_base_path = templates_base_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_base_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def get_template(self, layout_name: str) -> Template:
        """
        Get a layout template by name, loading and caching it if necessary.

        Args:
            layout_name: Name of the layout (e.g., 'donker')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if layout_name in self._cache:
            return self._cache[layout_name]

        template_path = f"layouts/{layout_name}/template.html.jinja"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for layout '{layout_name}' at {self.templates_base_path / template_path}"
            ) from e

        self._cache[layout_name] = template
        return template

    def get_template_path(self, layout_name: str) -> Path:
        """
        Get the file path for a layout's template.

        Args:
            layout_name: Name of the layout (e.g., 'donker')

        Returns:
            Path to template file
        """
        return self.templates_base_path / "layouts" / layout_name / "template.html.jinja"

    def available_layouts(self) -> List[str]:
        """Names of layouts that have a template file, sorted."""
        layouts_dir = self.templates_base_path / "layouts"
        if not layouts_dir.exists():
            return []
        return sorted(
            path.name for path in layouts_dir.iterdir() if (path / "template.html.jinja").exists()
        )

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, layout_name: str) -> bool:
        """
        Check if a template is in the cache.

        Args:
            layout_name: Name of the layout

        Returns:
            True if cached, False otherwise
        """
        return layout_name in self._cache
