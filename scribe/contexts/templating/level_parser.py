"""
List Item Level Parser

Converts one line of list markup into a SidebarItem (label + level 0-100).

Authors express proficiency inconsistently: a number, a word, or nothing at
all. Recognizers are tried in order and the first match wins; a line that no
recognizer accepts still becomes an item with the default level.
"""

from typing import Callable, List, Optional, Tuple

from scribe.contexts.templating.cv_components_data_structures import SidebarItem
from scribe.contexts.templating.defaults import DEFAULT_LEVEL, MAX_LEVEL, MIN_LEVEL
from scribe.contexts.templating.patterns import ListRegex
from scribe.utils.text_processing import strip_inline_markdown

# Proficiency vocabulary (Dutch, English, CEFR), matched case-insensitively
LEVEL_KEYWORDS = {
    "moedertaal": 100,
    "native": 100,
    "expert": 90,
    "vloeiend": 90,
    "fluent": 90,
    "professioneel": 80,
    "professional": 80,
    "goed": 80,
    "good": 80,
    "gevorderd": 70,
    "advanced": 70,
    "gemiddeld": 55,
    "intermediate": 55,
    "basis": 35,
    "basic": 35,
    "beginner": 20,
    "c2": 95,
    "c1": 80,
    "b2": 70,
    "b1": 55,
    "a2": 35,
    "a1": 20,
}

Recognizer = Callable[[str], Optional[SidebarItem]]


def clamp_level(level: int) -> int:
    """Clamp a level into [0, 100]."""
    return max(MIN_LEVEL, min(MAX_LEVEL, level))


def strip_list_marker(line: str) -> str:
    """
    Remove the leading bullet and enumeration markup, then inline markdown.

    Example:
        >>> strip_list_marker("- **Python** (90)")
        'Python (90)'
    """
    text = ListRegex.BULLET.sub("", line, count=1)
    text = ListRegex.ENUMERATION.sub("", text, count=1)
    return strip_inline_markdown(text)


def recognize_numeric_level(text: str) -> Optional[SidebarItem]:
    """Match "Label (85)" or "Label (85%)"."""
    match = ListRegex.NUMERIC_LEVEL.match(text)
    if match is None:
        return None
    return SidebarItem(
        label=match.group("label").strip(),
        level=clamp_level(int(match.group("level"))),
    )


def recognize_keyword_level(text: str) -> Optional[SidebarItem]:
    """Match "Label (keyword)" where keyword is in LEVEL_KEYWORDS."""
    match = ListRegex.KEYWORD_LEVEL.match(text)
    if match is None:
        return None

    level = LEVEL_KEYWORDS.get(match.group("keyword").strip().casefold())
    if level is None:
        return None
    return SidebarItem(label=match.group("label").strip(), level=level)


# Evaluated in order, first match wins
LEVEL_RECOGNIZERS: Tuple[Recognizer, ...] = (
    recognize_numeric_level,
    recognize_keyword_level,
)


def parse_item_text(text: str, recognizers: Tuple[Recognizer, ...] = LEVEL_RECOGNIZERS) -> SidebarItem:
    """
    Turn plain item text into a SidebarItem.

    Args:
        text: Item text with list marker and inline markdown already removed
        recognizers: Recognizers to try in order

    Returns:
        First recognizer match, or the whole text at DEFAULT_LEVEL
    """
    for recognize in recognizers:
        item = recognize(text)
        if item is not None:
            return item
    return SidebarItem(label=text.strip(), level=DEFAULT_LEVEL)


def parse_item_line(line: str) -> SidebarItem:
    """
    Parse one list line into a SidebarItem.

    Examples:
        >>> parse_item_line("- Python (90)")
        SidebarItem(label='Python', level=90)
        >>> parse_item_line("- Nederlands (moedertaal)")
        SidebarItem(label='Nederlands', level=100)
        >>> parse_item_line("- SomeSkill")
        SidebarItem(label='SomeSkill', level=70)
    """
    return parse_item_text(strip_list_marker(line))


def parse_sidebar_items(body: str) -> List[SidebarItem]:
    """
    Parse a section body into sidebar items.

    If the body has list-marker lines, only those are items. Otherwise every
    non-empty line is an item at the default level. Items whose label ends up
    empty (a bare "- ") are dropped.

    Args:
        body: Raw section body

    Returns:
        Items in document order
    """
    lines = body.splitlines()
    list_lines = [line for line in lines if ListRegex.LIST_LINE.match(line)]

    if list_lines:
        items = [parse_item_line(line) for line in list_lines]
    else:
        items = [
            SidebarItem(label=strip_inline_markdown(line), level=DEFAULT_LEVEL)
            for line in lines
            if line.strip()
        ]

    return [item for item in items if item.label]
