"""
Markdown Pattern Constants

Centralized pattern strings and compiled regexes used for parsing and rewriting
CV documents. String constants are grouped in frozen dataclasses; compiled
regexes live on plain classes next to them.
"""

import re
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class DocumentPatterns:
    """
    Document-level markers.

    Used for front-matter detection and section splitting.
    """
    FRONT_MATTER_MARKER: str = "---"
    SECTION_HEADING: str = "## "


@dataclass(frozen=True)
class ListPatterns:
    """
    List item markers recognized in section bodies.
    """
    BULLETS: Tuple[str, ...] = ("-", "*", "•")
    ITEM_PREFIX: str = "- "


class DocumentRegex:
    """Compiled regexes for document structure."""

    # Leading "---" block; the closing marker must sit on its own line
    FRONT_MATTER = re.compile(
        r"\A---[ \t]*\r?\n(?P<interior>.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL
    )
    # A YAML "key: value" (or "key:") line, used to reject interiors that are plain prose
    KEY_VALUE_LINE = re.compile(r"^[ \t]*[^\s#:-][^:\n]*:(?:[ \t]|$)", re.MULTILINE)
    # Section split point (marker consumed)
    SECTION_HEADING = re.compile(r"^## ", re.MULTILINE)
    # Section boundary (marker kept, zero-width)
    SECTION_BOUNDARY = re.compile(r"(?=^## )", re.MULTILINE)


class ListRegex:
    """Compiled regexes for list items and their trailing proficiency."""

    LIST_LINE = re.compile(r"^(?:[-*•]|\d+[.)])[ \t]+", re.MULTILINE)
    BULLET = re.compile(r"^\s*[-*•]\s+")
    ENUMERATION = re.compile(r"^\s*\d+[.)]\s+")
    NUMERIC_LEVEL = re.compile(r"^(?P<label>.+?)\s*\((?P<level>\d+)\s*%?\)\s*$")
    KEYWORD_LEVEL = re.compile(r"^(?P<label>.+?)\s*\((?P<keyword>[^()]+)\)\s*$")


class StyleRegex:
    """Compiled regexes for values inserted into style rules."""

    CSS_COLOR = re.compile(
        r"^(?:#[0-9a-fA-F]{3,8}|(?:rgb|rgba|hsl|hsla)\([0-9.,%\s]+\)|[a-zA-Z]{3,30})$"
    )
