"""
CV Document Structure

Parses canonical CV text (YAML front-matter + "## " titled sections) into a
Document. A Document is never cached: every read, render or rewrite parses
the canonical text again.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from omegaconf import DictConfig, OmegaConf

from scribe.contexts.templating.logger import _log_debug, _log_warning
from scribe.contexts.templating.patterns import DocumentRegex, ListRegex
from scribe.utils.text_processing import normalize_title

# Front-matter keys the engine reads; any other key is kept but ignored.
RECOGNIZED_KEYS = (
    "name",
    "title",
    "role",
    "email",
    "phone",
    "linkedin",
    "github",
    "location",
    "version",
    "date",
    "target",
    "accent",
    "darkColor",
    "dark_color",
    "dark",
    "template",
)


class FrontMatter(Mapping):
    """
    Open key-value mapping parsed from the front-matter block.

    Behaves as a read-only dict; recognized keys are also exposed as typed
    properties that return "" (or None for version) when absent.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data = dict(data or {})

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrontMatter({self._data!r})"

    def _first_text(self, *keys: str) -> str:
        for key in keys:
            value = self._data.get(key)
            if value is not None and str(value).strip():
                return str(value).strip()
        return ""

    @property
    def unknown_keys(self) -> List[str]:
        """Keys present in the block that the engine does not read."""
        return [key for key in self._data if key not in RECOGNIZED_KEYS]

    @property
    def name(self) -> str:
        return self._first_text("name")

    @property
    def role(self) -> str:
        return self._first_text("title", "role")

    @property
    def email(self) -> str:
        return self._first_text("email")

    @property
    def phone(self) -> str:
        return self._first_text("phone")

    @property
    def linkedin(self) -> str:
        return self._first_text("linkedin")

    @property
    def github(self) -> str:
        return self._first_text("github")

    @property
    def location(self) -> str:
        return self._first_text("location")

    @property
    def date(self) -> str:
        return self._first_text("date")

    @property
    def target(self) -> str:
        return self._first_text("target")

    @property
    def accent(self) -> str:
        return self._first_text("accent")

    @property
    def dark(self) -> str:
        return self._first_text("darkColor", "dark_color", "dark")

    @property
    def template(self) -> str:
        return self._first_text("template")

    @property
    def version(self) -> Optional[int]:
        value = self._data.get("version")
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None


@dataclass
class Section:
    """
    A titled block of the document body.

    Attributes:
        title: Heading text, trimmed
        body: Raw markdown below the heading, trimmed (may be empty)
    """

    title: str
    body: str = ""

    @property
    def normalized_title(self) -> str:
        return normalize_title(self.title)

    @property
    def has_list_items(self) -> bool:
        """True if at least one body line starts with a list marker."""
        return ListRegex.LIST_LINE.search(self.body) is not None


@dataclass
class Document:
    """
    Parsed CV document.

    Attributes:
        front_matter: Parsed key-value metadata (empty if absent or malformed)
        sections: Sections in document order
        front_matter_block: Exact text of the front-matter block ("" if absent or malformed)
        body: Text the sections were parsed from
    """

    front_matter: FrontMatter = field(default_factory=FrontMatter)
    sections: List[Section] = field(default_factory=list)
    front_matter_block: str = ""
    body: str = ""

    @property
    def titles(self) -> List[str]:
        return [section.title for section in self.sections]

    def find_section(self, title: str) -> Optional[Section]:
        """
        Find the first section whose normalized title matches.

        Args:
            title: Title to look for (case and surrounding whitespace ignored)

        Returns:
            Matching Section, or None
        """
        wanted = normalize_title(title)
        for section in self.sections:
            if section.normalized_title == wanted:
                return section
        return None


def _require_text(text: Any) -> None:
    if not isinstance(text, str):
        raise TypeError(f"Expected document text as str, got {type(text).__name__}")


def front_matter_span(text: str) -> Tuple[int, int]:
    """
    Locate the front-matter block at the start of the text.

    The block is located by its marker lines only; the interior is not parsed.

    Args:
        text: Canonical document text

    Returns:
        (start, end) offsets of the block including its closing marker line,
        or (0, 0) if the text does not start with a block
    """
    _require_text(text)
    match = DocumentRegex.FRONT_MATTER.match(text)
    if match is None:
        return 0, 0
    return match.span()


def _parse_key_values(interior: str) -> Optional[Dict[str, Any]]:
    """Parse the interior of a front-matter block; None if it is not key-value data."""
    if not DocumentRegex.KEY_VALUE_LINE.search(interior):
        return None

    try:
        config = OmegaConf.create(interior)
    except Exception as e:
        _log_warning(f"Front-matter is not valid YAML, ignoring it: {e}")
        return None

    if not isinstance(config, DictConfig):
        return None

    return OmegaConf.to_container(config, resolve=False)


def split_front_matter(text: str) -> Tuple[FrontMatter, str]:
    """
    Separate the front-matter block from the body.

    If the marker pair is absent or the interior is not key-value data, the
    result is an empty FrontMatter and the original text, unmodified, as body.

    Args:
        text: Canonical document text

    Returns:
        (front_matter, body)

    Raises:
        TypeError: If text is not a str
    """
    _require_text(text)
    match = DocumentRegex.FRONT_MATTER.match(text)
    if match is None:
        return FrontMatter(), text

    data = _parse_key_values(match.group("interior"))
    if data is None:
        _log_warning("Front-matter block could not be read as key-value data; using whole text as body")
        return FrontMatter(), text

    front_matter = FrontMatter(data)
    if front_matter.unknown_keys:
        _log_debug(f"Ignoring unknown front-matter keys: {front_matter.unknown_keys}")
    return front_matter, text[match.end():]


def parse_sections(body: str) -> List[Section]:
    """
    Split body text into sections at every line starting with "## ".

    Text before the first heading is preamble and is discarded. Chunks with
    neither title nor body are skipped.

    Args:
        body: Document body (front-matter already removed)

    Returns:
        Sections in order of appearance
    """
    _require_text(body)
    chunks = DocumentRegex.SECTION_HEADING.split(body)

    sections = []
    # chunks[0] is the preamble ("" when the body starts with a heading)
    for chunk in chunks[1:]:
        if not chunk.strip():
            continue
        title, _, rest = chunk.partition("\n")
        sections.append(Section(title=title.strip(), body=rest.strip()))

    return sections


def parse_document(text: str) -> Document:
    """
    Parse canonical text into front-matter and ordered sections.

    Args:
        text: Canonical document text

    Returns:
        Document
    """
    front_matter, body = split_front_matter(text)
    block = text[: len(text) - len(body)]
    sections = parse_sections(body)
    _log_debug(f"Parsed document: {len(front_matter)} front-matter key(s), {len(sections)} section(s)")
    return Document(
        front_matter=front_matter,
        sections=sections,
        front_matter_block=block,
        body=body,
    )
