"""
Markdown Utilities

Conversion of authored Markdown section bodies to HTML.
"""

import markdown2

# markdown2 extras used for CV section bodies
MARKDOWN_EXTRAS = ["cuddled-lists", "strike"]


def markdown_to_html(text: str) -> str:
    """
    Convert a Markdown section body to HTML.

    Raw HTML in the source is escaped (safe_mode="escape"), so the result can
    be inserted into a template as trusted markup.

    Args:
        text: Markdown body of a single section

    Returns:
        HTML fragment (empty string for empty input)
    """
    if not text.strip():
        return ""

    return markdown2.markdown(text, extras=MARKDOWN_EXTRAS, safe_mode="escape").strip()
