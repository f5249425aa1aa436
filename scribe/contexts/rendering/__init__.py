"""
Rendering Context

Responsibilities:
- Exports rendered CV HTML to files
- Manages output files and directory structure
- Hands the page specification to the external rasterizer

Owns: HTML export, output management, page specification
Never: Modifies document content
"""

from scribe.contexts.rendering.exporter import ExportResult, export_html, output_path_for

__all__ = [
    "export_html",
    "output_path_for",
    "ExportResult",
]
