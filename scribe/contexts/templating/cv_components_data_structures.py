"""
CV Component Data Structures

Defines the view model consumed by the HTML generator: sidebar sections with
leveled or itemized rows, main sections with converted HTML bodies, contact
items, and the fully assembled template input.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from scribe.contexts.templating.defaults import DEFAULT_ACCENT, DEFAULT_DARK


class Region(str, Enum):
    """Page region a section is rendered in."""

    SIDEBAR = "sidebar"
    MAIN = "main"


@dataclass(frozen=True)
class SidebarItem:
    """
    One row of a sidebar section.

    Attributes:
        label: Display text (plain, unescaped)
        level: Proficiency 0-100, or None for itemized sections (interests, hobbies)
    """

    label: str
    level: Optional[int] = None


@dataclass
class SidebarSection:
    """
    Section rendered in the narrow side column.

    Attributes:
        title: Section title as authored (upper-cased at render time)
        items: Rows in document order
        itemized: True for plain marked lists (no level bar)
    """

    title: str
    items: List[SidebarItem] = field(default_factory=list)
    itemized: bool = False


@dataclass
class MainSection:
    """
    Section rendered in the primary content column.

    Attributes:
        title: Section title as authored (upper-cased at render time)
        html: Body converted to HTML (empty when conversion failed)
    """

    title: str
    html: str = ""


@dataclass(frozen=True)
class ContactItem:
    """
    Contact line in the header (or in the sidebar for the "strak" layout).

    Attributes:
        icon: Short icon token (a glyph or two letters)
        text: Display text
        href: Link target; None for non-linkable items (phone, location)
    """

    icon: str
    text: str
    href: Optional[str] = None


@dataclass
class TemplateInput:
    """
    Fully assembled view model passed to the HTML generator.

    Attributes:
        name: Display name
        role: Professional title / role line (may be empty)
        contact: Contact items in display order
        sidebar: Sidebar sections in document order
        main: Main sections in document order
        accent: Accent color
        dark: Dark/base color
    """

    name: str
    role: str = ""
    contact: List[ContactItem] = field(default_factory=list)
    sidebar: List[SidebarSection] = field(default_factory=list)
    main: List[MainSection] = field(default_factory=list)
    accent: str = DEFAULT_ACCENT
    dark: str = DEFAULT_DARK


@dataclass(frozen=True)
class PageSpec:
    """
    Fixed page geometry shared by the templates and the external rasterizer.

    Attributes:
        width: CSS page width
        height: CSS page height (minimum height of the rendered body)
        print_background: Whether background colors must be printed
        margin: Page margin on every side
    """

    width: str = "210mm"
    height: str = "297mm"
    print_background: bool = True
    margin: str = "0"


A4_PAGE = PageSpec()
