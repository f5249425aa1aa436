"""
Section Classifier

Assigns each section to the sidebar or the main column using declarative
title rules, evaluated in order:

1. always-sidebar titles (languages, traits, volunteering, interests)
2. conditionally-sidebar titles (skills), sidebar only when the body is a list
3. anything else is main content

A separate sub-classifier marks interest/hobby titles as itemized, which
controls row style (plain marker instead of a level bar).
"""

from typing import Callable, List, Optional, Tuple

from scribe.contexts.templating.cv_components_data_structures import Region
from scribe.contexts.templating.document_structure import Document, Section
from scribe.utils.text_processing import normalize_title

ITEMIZED_TITLES = frozenset(
    {
        "hobby's en interesses",
        "hobby's",
        "hobbies",
        "interesses",
        "hobby's & interesses",
        "interessen",
        "interests",
        "hobbies & interests",
    }
)

ALWAYS_SIDEBAR_TITLES = frozenset(
    {
        "talen",
        "languages",
        "persoonlijke eigenschappen",
        "personal traits",
        "persoonlijk",
        "vrijwilligerswerk",
        "volunteering",
    }
    | ITEMIZED_TITLES
)

CONDITIONAL_SIDEBAR_TITLES = frozenset(
    {
        "vaardigheden",
        "skills",
        "competenties",
        "competencies",
    }
)

# Sections that can be edited item-by-item and written back
EDITABLE_TITLES = frozenset(
    {
        "talen",
        "languages",
        "vaardigheden",
        "skills",
        "persoonlijke eigenschappen",
        "personal traits",
    }
    | ITEMIZED_TITLES
)

Rule = Callable[[Section], Optional[Region]]


def always_sidebar_rule(section: Section) -> Optional[Region]:
    if section.normalized_title in ALWAYS_SIDEBAR_TITLES:
        return Region.SIDEBAR
    return None


def conditional_sidebar_rule(section: Section) -> Optional[Region]:
    # A prose-only skills section cannot be drawn as labeled bars
    if section.normalized_title in CONDITIONAL_SIDEBAR_TITLES:
        return Region.SIDEBAR if section.has_list_items else Region.MAIN
    return None


# Evaluated in order; the first rule returning a region decides
CLASSIFICATION_RULES: Tuple[Rule, ...] = (
    always_sidebar_rule,
    conditional_sidebar_rule,
)


def classify_section(section: Section, rules: Tuple[Rule, ...] = CLASSIFICATION_RULES) -> Region:
    """
    Decide which region a section is rendered in.

    Args:
        section: Parsed section
        rules: Rules to evaluate in order

    Returns:
        Region.SIDEBAR or Region.MAIN (default when no rule matches)
    """
    for rule in rules:
        region = rule(section)
        if region is not None:
            return region
    return Region.MAIN


def is_itemized_title(title: str) -> bool:
    """True for interest/hobby-style titles rendered without level bars."""
    return normalize_title(title) in ITEMIZED_TITLES


def is_editable_title(title: str) -> bool:
    return normalize_title(title) in EDITABLE_TITLES


def split_regions(sections: List[Section]) -> Tuple[List[Section], List[Section]]:
    """
    Partition sections into sidebar and main, preserving document order in both.

    Returns:
        (sidebar_sections, main_sections)
    """
    sidebar, main = [], []
    for section in sections:
        if classify_section(section) is Region.SIDEBAR:
            sidebar.append(section)
        else:
            main.append(section)
    return sidebar, main


def editable_sections(document: Document) -> List[Section]:
    """Sections of the document that can be edited item-by-item."""
    return [section for section in document.sections if is_editable_title(section.title)]
