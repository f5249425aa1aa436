"""
Document Store

Whole-file read/modify/write of canonical CV documents. The canonical text is
the single source of truth: every edit reads the file, transforms the text
and writes the result back in one step.

Drafts are named cv_v<N>_<date>[_suffix].md inside a drafts directory.

Usage:
    from scribe.utils.document_store import read_document, update_section

    text = read_document(Path("drafts/cv_v3_2026-10-19.md"))
    update_section(path, "Talen", [SidebarItem("Engels", 80)])
"""

import os
import re
import shutil
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from scribe.contexts.templating.converter import update_section_items
from scribe.contexts.templating.cv_components_data_structures import SidebarItem
from scribe.contexts.templating.section_writer import upsert_front_matter_field
from scribe.utils.text_processing import slugify
from scribe.utils.timestamp import today

DRAFT_VERSION_PATTERN = re.compile(r"cv_v(\d+)")
BACKUP_MARKER = "_backup_"


def read_document(path: Path) -> str:
    """
    Read a canonical document as UTF-8 text, line endings untranslated.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_document(path: Path, text: str) -> None:
    """
    Write a text file atomically.

    The text is written to a temporary file in the target directory first and
    only moved over the target once the write succeeded, so readers never see
    a half-written document.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Write to temp file first (atomic write pattern)
    temp_fd, temp_path = tempfile.mkstemp(suffix=path.suffix, dir=path.parent, text=True)
    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)

        # Only overwrite original if write succeeded
        shutil.move(temp_path, path)
    except Exception:
        # Clean up temp file if write failed
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise


def update_section(
    path: Path,
    title: str,
    items: Sequence[SidebarItem],
    strict: bool = True,
) -> str:
    """
    Replace the items of one section in a document on disk.

    Args:
        path: Document file
        title: Section title (case-insensitive)
        items: Replacement items in final order
        strict: Raise SectionNotFoundError when the section is missing

    Returns:
        The new canonical text (the file is left untouched if nothing changed)
    """
    text = read_document(path)
    new_text = update_section_items(text, title, items, strict=strict)
    if new_text != text:
        write_document(path, new_text)
        logger.debug(f"Saved {path}")
    return new_text


def set_front_matter_field(path: Path, key: str, value: str) -> str:
    """Set one front-matter key in a document on disk. Returns the new text."""
    text = read_document(path)
    new_text = upsert_front_matter_field(text, key, value)
    if new_text != text:
        write_document(path, new_text)
    return new_text


def next_version_number(drafts_dir: Path) -> int:
    """
    Next free draft version number in a drafts directory.

    Scans markdown files named cv_v<N>..., ignoring backups.

    Returns:
        Highest existing version + 1, or 1 if there are no drafts
    """
    drafts_dir = Path(drafts_dir)
    if not drafts_dir.exists():
        return 1

    versions = []
    for draft in drafts_dir.glob("*.md"):
        if BACKUP_MARKER in draft.name:
            continue
        match = DRAFT_VERSION_PATTERN.search(draft.name)
        versions.append(int(match.group(1)) if match else 0)

    return max(versions) + 1 if versions else 1


def draft_path(drafts_dir: Path, version: int, suffix: Optional[str] = None, date: str = None) -> Path:
    """
    Path of a draft file.

    Example:
        >>> draft_path(Path("drafts"), 4, suffix="Targeted", date="2026-10-19")
        PosixPath('drafts/cv_v4_2026-10-19_targeted.md')
    """
    name = f"cv_v{version}_{date or today()}"
    if suffix:
        name += f"_{slugify(suffix)}"
    return Path(drafts_dir) / f"{name}.md"
