"""
Text processing utilities for parsing and display.
"""

import re
import unicodedata


# Inline markdown constructs, unwrapped in this order (links before emphasis
# so that emphasis inside link text is handled on the second pass)
INLINE_MARKDOWN_PATTERNS = [
    (re.compile(r"\[([^\]]+)\]\([^)]+\)"), r"\1"),
    (re.compile(r"\*\*([^*]+)\*\*"), r"\1"),
    (re.compile(r"__([^_]+)__"), r"\1"),
    (re.compile(r"\*([^*]+)\*"), r"\1"),
    (re.compile(r"_([^_]+)_"), r"\1"),
    (re.compile(r"`([^`]+)`"), r"\1"),
]


def normalize_title(title: str) -> str:
    """
    Normalize a section title for comparison.

    Args:
        title: Section title as authored

    Returns:
        Case-folded, trimmed title

    Example:
        >>> normalize_title("  Talen ")
        'talen'
    """
    return title.strip().casefold()


def strip_inline_markdown(text: str) -> str:
    """
    Remove inline markdown (links, bold, italic, code) keeping the visible text.

    Args:
        text: Single line of markdown

    Returns:
        Plain text, trimmed

    Example:
        >>> strip_inline_markdown("**Python** [docs](https://python.org)")
        'Python docs'
    """
    for pattern, replacement in INLINE_MARKDOWN_PATTERNS:
        text = pattern.sub(replacement, text)
    return text.strip()


def slugify(title: str, max_length: int = 60) -> str:
    """
    Build a filesystem-friendly slug from a title.

    Accents are removed, anything outside [a-z0-9 -] is dropped and whitespace
    becomes a single hyphen.

    Example:
        >>> slugify("Curriculum Vitae Jané Doe")
        'curriculum-vitae-jane-doe'
    """
    decomposed = unicodedata.normalize("NFD", title.lower())
    ascii_only = "".join(c for c in decomposed if not unicodedata.combining(c))
    cleaned = re.sub(r"[^a-z0-9\s-]", "", ascii_only).strip()
    return re.sub(r"\s+", "-", cleaned)[:max_length]


def format_level_bar(level: int, width: int = 12, filled: str = "█", empty: str = "░") -> str:
    """
    Render a proficiency level as a fixed-width text bar for terminal output.

    Args:
        level: Level between 0 and 100
        width: Number of characters in the bar

    Returns:
        Bar string, e.g. "██████████░░" for level 80

    Example:
        >>> format_level_bar(50, width=4)
        '██░░'
    """
    level = max(0, min(100, level))
    n_filled = round(level / 100 * width)
    return filled * n_filled + empty * (width - n_filled)
