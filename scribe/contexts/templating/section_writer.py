"""
Section Writer

Writes an edited item list back into canonical CV text. Only the body of the
target section changes; the front-matter block, the preamble and every other
section are copied byte-for-byte in their original order.
"""

from typing import List, Sequence, Tuple

from scribe.contexts.templating.cv_components_data_structures import SidebarItem
from scribe.contexts.templating.document_structure import front_matter_span
from scribe.contexts.templating.exceptions import SectionNotFoundError
from scribe.contexts.templating.logger import _log_warning, log_rewrite_result
from scribe.contexts.templating.patterns import DocumentPatterns, DocumentRegex, ListPatterns
from scribe.utils.text_processing import normalize_title

HEADING = DocumentPatterns.SECTION_HEADING


def format_item(item: SidebarItem, itemized: bool) -> str:
    """
    Format one item as a markdown list line.

    Line breaks inside the label become spaces so an item can never start a
    new line (or a new section) in the document.

    Example:
        >>> format_item(SidebarItem("Python", 90), itemized=False)
        '- Python (90)'
    """
    label = " ".join(item.label.splitlines()).strip()
    if itemized or item.level is None:
        return f"{ListPatterns.ITEM_PREFIX}{label}"
    return f"{ListPatterns.ITEM_PREFIX}{label} ({item.level})"


def _split_parts(body: str) -> List[str]:
    """Split body into preamble + one part per section, headings kept."""
    return DocumentRegex.SECTION_BOUNDARY.split(body)


def _part_title(part: str) -> str:
    heading_line = part.partition("\n")[0]
    return heading_line[len(HEADING):].strip()


def _rebuild_part(part: str, items: Sequence[SidebarItem], itemized: bool) -> str:
    """Replace the body of one section part, keeping its heading line, line endings and trailing whitespace."""
    heading_line = part.partition("\n")[0]
    newline = "\r\n" if heading_line.endswith("\r") else "\n"
    heading_line = heading_line.rstrip("\r")
    stripped = part.rstrip()
    trailing = part[len(stripped):]
    if "\n" not in trailing:
        trailing = newline

    lines = [format_item(item, itemized) for item in items]
    if not lines:
        return f"{heading_line}{trailing}"
    return heading_line + newline * 2 + newline.join(lines) + trailing


def _locate(parts: List[str], title: str) -> Tuple[int, List[str]]:
    """Index of the first part whose heading matches title (-1 if none), plus all titles."""
    wanted = normalize_title(title)
    titles = []
    index = -1
    for i, part in enumerate(parts):
        if not part.startswith(HEADING):
            continue
        part_title = _part_title(part)
        titles.append(part_title)
        if index < 0 and normalize_title(part_title) == wanted:
            index = i
    return index, titles


def rewrite_section(
    text: str,
    title: str,
    items: Sequence[SidebarItem],
    itemized: bool = False,
    strict: bool = True,
) -> str:
    """
    Replace the items of one section in canonical text.

    The first section whose normalized title matches keeps its heading line
    and gets one "- label" (itemized) or "- label (level)" line per item, in
    the order given.

    A front-matter block is located by its markers alone and never edited,
    even when its interior is not valid YAML. The parser reads such a text
    as all body, so a "## " line inside a malformed block is a section to
    parse_document but not to this writer.

    Args:
        text: Canonical document text
        title: Title of the section to rewrite (case-insensitive)
        items: Replacement items, in final order
        itemized: Write labels only (interest/hobby sections)
        strict: Raise when the section is missing; otherwise return text unchanged

    Returns:
        New canonical text

    Raises:
        SectionNotFoundError: If no section matches and strict is True
        TypeError: If text is not a str
    """
    _, block_end = front_matter_span(text)
    block, body = text[:block_end], text[block_end:]

    parts = _split_parts(body)
    index, titles = _locate(parts, title)

    if index < 0:
        if strict:
            raise SectionNotFoundError(title, titles)
        _log_warning(f"Section '{title}' not found; document left unchanged")
        return text

    parts[index] = _rebuild_part(parts[index], items, itemized)
    log_rewrite_result(_part_title(parts[index]), len(items), itemized)
    return block + "".join(parts)


def upsert_front_matter_field(text: str, key: str, value: str) -> str:
    """
    Set one key in the front-matter block, leaving the body untouched.

    An existing "key: ..." line is replaced in place; otherwise the key is
    appended as the last line of the block. Text without a front-matter block
    is returned unchanged.

    Args:
        text: Canonical document text
        key: Front-matter key
        value: String value (written double-quoted)

    Returns:
        New canonical text
    """
    start, end = front_matter_span(text)
    if end == 0:
        _log_warning(f"No front-matter block; cannot set '{key}'")
        return text

    block = text[start:end]
    lines = block.splitlines(keepends=True)
    quoted = value.replace("\\", "\\\\").replace('"', '\\"')
    new_line = f'{key}: "{quoted}"'

    # lines[0] is the opening marker, lines[-1] the closing marker
    for i in range(1, len(lines) - 1):
        if lines[i].split(":", 1)[0].strip() == key and ":" in lines[i]:
            newline = lines[i][len(lines[i].rstrip("\r\n")):]
            lines[i] = new_line + newline
            break
    else:
        newline = "\r\n" if lines[0].endswith("\r\n") else "\n"
        lines.insert(len(lines) - 1, new_line + newline)

    return "".join(lines) + text[end:]
