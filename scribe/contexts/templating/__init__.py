"""
Templating Context

Responsibilities:
- Manages CV document representation (front-matter + ordered sections)
- Classifies sections into the sidebar and main regions
- Parses sidebar items and their proficiency levels
- Renders documents to HTML through the fixed layout templates
- Writes edited item lists back into the canonical markdown text

Owns: CV document representation, markdown -> HTML conversion, layout template system
Never: Touches the filesystem or decides content
"""

from scribe.contexts.templating.converter import (
    RenderResult,
    SectionSummary,
    load_section_items,
    render_document,
    summarize_sections,
    update_section_items,
)
from scribe.contexts.templating.cv_components_data_structures import (
    A4_PAGE,
    PageSpec,
    Region,
    SidebarItem,
    TemplateInput,
)
from scribe.contexts.templating.defaults import RenderDefaults
from scribe.contexts.templating.document_structure import Document, FrontMatter, Section, parse_document
from scribe.contexts.templating.exceptions import (
    ScribeTemplatingError,
    SectionNotFoundError,
    TemplateRenderError,
)
from scribe.contexts.templating.html_generator import HTMLGenerator, layout_names
from scribe.contexts.templating.section_writer import rewrite_section, upsert_front_matter_field

__all__ = [
    # Orchestrators
    "render_document",
    "summarize_sections",
    "load_section_items",
    "update_section_items",
    "RenderResult",
    "SectionSummary",
    # Parsing and writing
    "parse_document",
    "rewrite_section",
    "upsert_front_matter_field",
    # Data structure classes
    "Document",
    "FrontMatter",
    "Section",
    "SidebarItem",
    "TemplateInput",
    "Region",
    "PageSpec",
    "A4_PAGE",
    "RenderDefaults",
    # Rendering
    "HTMLGenerator",
    "layout_names",
    # Errors
    "ScribeTemplatingError",
    "SectionNotFoundError",
    "TemplateRenderError",
]
