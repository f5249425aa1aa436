"""
HTML Export Module

Renders a canonical CV document on disk to a self-contained HTML file. The
page specification travels with the result so a rasterizer can produce the
paginated output from the HTML.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from scribe.contexts.rendering.logger import log_export_result, log_render_start
from scribe.contexts.templating.converter import render_document
from scribe.contexts.templating.cv_components_data_structures import A4_PAGE, PageSpec
from scribe.contexts.templating.defaults import RenderDefaults
from scribe.contexts.templating.exceptions import TemplateRenderError
from scribe.contexts.templating.html_generator import HTMLGenerator
from scribe.utils.document_store import read_document, write_document


@dataclass
class ExportResult:
    """
    Result of an HTML export.

    Attributes:
        success: Whether the HTML file was written
        input_path: Source document
        output_path: HTML file (None if failed)
        template_name: Layout actually used (None if failed before rendering)
        page: Page specification for rasterization
        error: Failure description (None if succeeded)
        time_s: Wall time of the export
    """

    success: bool
    input_path: Path
    output_path: Optional[Path] = None
    template_name: Optional[str] = None
    page: PageSpec = A4_PAGE
    error: Optional[str] = None
    time_s: float = 0.0


def output_path_for(document_path: Path, output_dir: Path = None) -> Path:
    """
    Default HTML path for a document: same stem, .html suffix.

    Args:
        document_path: Source markdown file
        output_dir: Target directory (defaults to the document's own directory)
    """
    document_path = Path(document_path)
    directory = Path(output_dir) if output_dir is not None else document_path.parent
    return directory / f"{document_path.stem}.html"


def export_html(
    document_path: Path,
    output_path: Path = None,
    template_name: Optional[str] = None,
    defaults: RenderDefaults = RenderDefaults(),
    generator: HTMLGenerator = None,
) -> ExportResult:
    """
    Render a document file to an HTML file.

    Read and write failures are reported in the result rather than raised.

    Args:
        document_path: Source markdown file
        output_path: HTML file to write (defaults to output_path_for(document_path))
        template_name: Layout override (None uses the document's "template" key)
        defaults: Fallback colors and layout
        generator: HTMLGenerator to reuse across exports

    Returns:
        ExportResult
    """
    document_path = Path(document_path)
    output_path = Path(output_path) if output_path is not None else output_path_for(document_path)
    log_render_start(document_path, output_path)
    start = time.time()

    try:
        text = read_document(document_path)
        rendered = render_document(text, template_name, defaults, generator)
        write_document(output_path, rendered.html)
    except (OSError, UnicodeDecodeError, TemplateRenderError) as e:
        result = ExportResult(
            success=False,
            input_path=document_path,
            error=f"{type(e).__name__}: {e}",
            time_s=time.time() - start,
        )
        log_export_result(result)
        return result

    result = ExportResult(
        success=True,
        input_path=document_path,
        output_path=output_path,
        template_name=rendered.template_name,
        page=rendered.page,
        time_s=time.time() - start,
    )
    log_export_result(result)
    return result
