"""
Markdown -> HTML Converter

Main module providing the pure, text-in/text-out entry points of the
templating context:

- render_document: canonical CV text -> RenderResult (HTML + classification)
- summarize_sections: canonical CV text -> per-section classification report
- update_section_items: canonical CV text + edited items -> new canonical text

Every call parses the text again; nothing is cached between calls except the
compiled layout templates.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from scribe.contexts.templating.builders import build_sidebar_section, build_template_input
from scribe.contexts.templating.classifier import classify_section, is_editable_title, is_itemized_title
from scribe.contexts.templating.cv_components_data_structures import (
    A4_PAGE,
    PageSpec,
    Region,
    SidebarItem,
)
from scribe.contexts.templating.defaults import RenderDefaults
from scribe.contexts.templating.document_structure import parse_document
from scribe.contexts.templating.html_generator import HTMLGenerator
from scribe.contexts.templating.logger import log_render_result
from scribe.contexts.templating.section_writer import rewrite_section


@dataclass
class RenderResult:
    """Result from render_document()."""

    html: str
    template_name: str
    sidebar_titles: List[str] = field(default_factory=list)
    main_titles: List[str] = field(default_factory=list)
    page: PageSpec = A4_PAGE


@dataclass
class SectionSummary:
    """Classification of one section, as reported by summarize_sections()."""

    title: str
    region: Region
    itemized: bool
    editable: bool
    items: List[SidebarItem] = field(default_factory=list)


def render_document(
    text: str,
    template_name: Optional[str] = None,
    defaults: RenderDefaults = RenderDefaults(),
    generator: HTMLGenerator = None,
) -> RenderResult:
    """
    Render canonical CV text to HTML.

    Args:
        text: Canonical document text
        template_name: Layout override; when None the front-matter "template"
            key is used, then defaults.template
        defaults: Fallback colors and layout
        generator: HTMLGenerator to reuse (a new one is created if None)

    Returns:
        RenderResult with the HTML and the sidebar/main split
    """
    generator = generator or HTMLGenerator()
    document = parse_document(text)
    template_input = build_template_input(document, defaults)

    requested = template_name or document.front_matter.template or defaults.template
    resolved = generator.resolve_template_name(requested)
    html = generator.render(template_input, resolved)

    log_render_result(resolved, len(template_input.sidebar), len(template_input.main), len(html))
    return RenderResult(
        html=html,
        template_name=resolved,
        sidebar_titles=[s.title for s in template_input.sidebar],
        main_titles=[s.title for s in template_input.main],
        page=generator.page,
    )


def summarize_sections(text: str) -> List[SectionSummary]:
    """
    Report how each section of a document is classified.

    Sidebar sections include their parsed items; main sections have none.
    """
    summaries = []
    for section in parse_document(text).sections:
        region = classify_section(section)
        items = build_sidebar_section(section).items if region is Region.SIDEBAR else []
        summaries.append(
            SectionSummary(
                title=section.title,
                region=region,
                itemized=is_itemized_title(section.title),
                editable=is_editable_title(section.title),
                items=items,
            )
        )
    return summaries


def load_section_items(text: str, title: str) -> Optional[List[SidebarItem]]:
    """
    Parse the current items of one section.

    Returns:
        Items of the first section matching title, or None if there is none
    """
    section = parse_document(text).find_section(title)
    if section is None:
        return None
    return build_sidebar_section(section).items


def update_section_items(
    text: str,
    title: str,
    items: Sequence[SidebarItem],
    strict: bool = True,
) -> str:
    """
    Write a new item list into one section, deriving the itemized style from its title.

    Args:
        text: Canonical document text
        title: Section title (case-insensitive)
        items: Replacement items in final order
        strict: Raise SectionNotFoundError when the section is missing

    Returns:
        New canonical text
    """
    return rewrite_section(text, title, items, itemized=is_itemized_title(title), strict=strict)
