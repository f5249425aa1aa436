"""
Section Builders

Transforms a parsed Document into the TemplateInput view model: sidebar
sections with parsed items, main sections with HTML bodies, contact items
from the front-matter, and the two theme colors.
"""

from dataclasses import replace
from typing import List

from scribe.contexts.templating.classifier import is_itemized_title, split_regions
from scribe.contexts.templating.cv_components_data_structures import (
    ContactItem,
    MainSection,
    SidebarSection,
    TemplateInput,
)
from scribe.contexts.templating.defaults import RenderDefaults
from scribe.contexts.templating.document_structure import Document, FrontMatter, Section
from scribe.contexts.templating.level_parser import parse_sidebar_items
from scribe.contexts.templating.logger import _log_error, _log_warning, log_classification
from scribe.contexts.templating.patterns import StyleRegex
from scribe.utils.markdown import markdown_to_html

# Contact icons by front-matter field
CONTACT_ICONS = {
    "email": "✉",
    "phone": "☎",
    "location": "⊙",
    "github": "gh",
    "linkedin": "in",
}


def ensure_https(url: str) -> str:
    """Prefix https:// unless the value already carries a scheme."""
    return url if url.startswith("http") else f"https://{url}"


def build_sidebar_section(section: Section) -> SidebarSection:
    """
    Build a sidebar section from a parsed section.

    Itemized (interest/hobby) sections keep labels only; their levels are cleared.
    """
    itemized = is_itemized_title(section.title)
    items = parse_sidebar_items(section.body)
    if itemized:
        items = [replace(item, level=None) for item in items]
    return SidebarSection(title=section.title, items=items, itemized=itemized)


def build_main_section(section: Section) -> MainSection:
    """
    Build a main section, converting the body markdown to HTML.

    A conversion failure only affects this section: it is logged and the body
    renders empty.
    """
    try:
        html = markdown_to_html(section.body)
    except Exception as e:
        _log_error(f"Markdown conversion failed for section '{section.title}': {e}")
        html = ""
    return MainSection(title=section.title, html=html)


def build_contact_items(front_matter: FrontMatter) -> List[ContactItem]:
    """
    Build contact items from the front-matter, in fixed display order.

    Email, GitHub and LinkedIn are links; phone and location are plain text.
    """
    items = []
    if front_matter.email:
        items.append(
            ContactItem(CONTACT_ICONS["email"], front_matter.email, f"mailto:{front_matter.email}")
        )
    if front_matter.phone:
        items.append(ContactItem(CONTACT_ICONS["phone"], front_matter.phone))
    if front_matter.location:
        items.append(ContactItem(CONTACT_ICONS["location"], front_matter.location))
    if front_matter.github:
        user = front_matter.github
        items.append(
            ContactItem(CONTACT_ICONS["github"], f"github.com/{user}", f"https://github.com/{user}")
        )
    if front_matter.linkedin:
        items.append(
            ContactItem(
                CONTACT_ICONS["linkedin"], front_matter.linkedin, ensure_https(front_matter.linkedin)
            )
        )
    return items


def resolve_color(value: str, default: str, field_name: str) -> str:
    """
    Return value if it is a plain CSS color, otherwise the default.

    Args:
        value: Color from the front-matter ("" when absent)
        default: Fallback color
        field_name: Front-matter key, for the warning message
    """
    if not value:
        return default
    if StyleRegex.CSS_COLOR.match(value) is None:
        _log_warning(f"Ignoring invalid color for '{field_name}': {value!r}, using {default}")
        return default
    return value


def build_template_input(document: Document, defaults: RenderDefaults = RenderDefaults()) -> TemplateInput:
    """
    Assemble the full view model for one document.

    Args:
        document: Parsed document
        defaults: Colors used when the front-matter supplies none

    Returns:
        TemplateInput with sections in document order within each region
    """
    front_matter = document.front_matter
    sidebar_sections, main_sections = split_regions(document.sections)
    log_classification(
        [s.title for s in sidebar_sections],
        [s.title for s in main_sections],
    )

    return TemplateInput(
        name=front_matter.name,
        role=front_matter.role,
        contact=build_contact_items(front_matter),
        sidebar=[build_sidebar_section(s) for s in sidebar_sections],
        main=[build_main_section(s) for s in main_sections],
        accent=resolve_color(front_matter.accent, defaults.accent, "accent"),
        dark=resolve_color(front_matter.dark, defaults.dark, "darkColor"),
    )
