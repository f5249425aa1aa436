"""
HTML Generator

Renders a TemplateInput into a self-contained HTML page using one of the
fixed layouts. All layouts share the sidebar, main-section and contact
macros; a small LayoutStyle descriptor captures what differs between them.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from jinja2 import TemplateError

from scribe.contexts.templating.cv_components_data_structures import A4_PAGE, PageSpec, TemplateInput
from scribe.contexts.templating.defaults import DEFAULT_TEMPLATE, KLASSIEK_NAVY
from scribe.contexts.templating.exceptions import TemplateRenderError
from scribe.contexts.templating.logger import _log_debug, _log_warning
from scribe.contexts.templating.registries import TemplateRegistry


@dataclass(frozen=True)
class LayoutStyle:
    """
    Per-layout style descriptor.

    Attributes:
        name: Layout identifier (front-matter "template" value)
        header_placement: "card" (floating over dark page), "band" (full width) or "sidebar"
        heading_style: Main-section heading decoration: "badge", "underline" or "leftbar"
        description: One-line description for listings
        brand_color: Fixed color for headings and bars; None means use the accent
    """

    name: str
    header_placement: str
    heading_style: str
    description: str
    brand_color: Optional[str] = None

    def palette(self, template_input: TemplateInput) -> Dict[str, str]:
        """Color roles for this layout given the document's colors."""
        return {
            "accent": template_input.accent,
            "dark": template_input.dark,
            "brand": self.brand_color or template_input.accent,
        }


# Order matters: the first layout is the fallback for unknown names
LAYOUTS: Dict[str, LayoutStyle] = {
    "donker": LayoutStyle(
        name="donker",
        header_placement="card",
        heading_style="badge",
        description="Dark page and sidebar, accent header card",
    ),
    "klassiek": LayoutStyle(
        name="klassiek",
        header_placement="band",
        heading_style="underline",
        description="Light sidebar, full-width navy header band",
        brand_color=KLASSIEK_NAVY,
    ),
    "strak": LayoutStyle(
        name="strak",
        header_placement="sidebar",
        heading_style="leftbar",
        description="Accent sidebar with name and contact, open main column",
    ),
}


def layout_names() -> List[str]:
    return list(LAYOUTS)


class HTMLGenerator:
    """Converts a TemplateInput to HTML."""

    def __init__(self, template_registry: TemplateRegistry = None, page: PageSpec = A4_PAGE):
        self.template_registry = template_registry or TemplateRegistry()
        self.page = page

    def resolve_template_name(self, template_name: Optional[str]) -> str:
        """
        Map an authored template identifier to a known layout.

        Matching ignores case and surrounding whitespace. Empty or unknown
        names fall back to the default layout (unknown ones with a warning).
        """
        if not template_name or not str(template_name).strip():
            return DEFAULT_TEMPLATE

        name = str(template_name).strip().lower()
        if name not in LAYOUTS:
            _log_warning(f"Unknown template '{template_name}', falling back to '{DEFAULT_TEMPLATE}'")
            return DEFAULT_TEMPLATE
        return name

    def render(self, template_input: TemplateInput, template_name: Optional[str] = None) -> str:
        """
        Render the complete HTML page.

        Args:
            template_input: Assembled view model
            template_name: Layout identifier; unknown names use the default layout

        Returns:
            HTML document string

        Raises:
            TemplateRenderError: If the layout template itself is broken
        """
        name = self.resolve_template_name(template_name)
        layout = LAYOUTS[name]

        try:
            template = self.template_registry.get_template(name)
            html = template.render(
                doc=template_input,
                layout=layout,
                palette=layout.palette(template_input),
                page=self.page,
            )
        except TemplateError as e:
            raise TemplateRenderError(
                "Failed to render layout template", template_name=name, original_error=e
            ) from e

        _log_debug(f"Layout '{name}' produced {len(html)} chars")
        return html
