"""Custom exceptions for the templating context."""

from typing import List, Optional


class ScribeTemplatingError(Exception):
    """Base class for templating context errors."""


class SectionNotFoundError(ScribeTemplatingError, LookupError):
    """
    Exception raised when a section targeted for rewriting does not exist.

    Attributes:
        title: Section title that was requested
        available_titles: Titles present in the document, in document order
    """

    def __init__(self, title: str, available_titles: Optional[List[str]] = None):
        self.title = title
        self.available_titles = available_titles or []

        parts = [f"Section not found: '{title}'"]
        if self.available_titles:
            parts.append(f"Available sections: {', '.join(self.available_titles)}")

        super().__init__("\n".join(parts))


class TemplateRenderError(ScribeTemplatingError):
    """
    Exception raised when template rendering fails.

    Rendering only fails on an internal defect (missing template file, template
    syntax error, undefined variable), never on document content.

    Attributes:
        message: Error description
        template_name: Name of the layout being rendered
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.original_error = original_error

        parts = [message]

        if template_name:
            parts.append(f"\nTemplate: {template_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
