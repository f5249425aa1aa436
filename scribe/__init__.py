"""
Scribe - structured CV authoring and rendering

Turns a Markdown CV (YAML front-matter + titled sections) into a print-ready
HTML page in one of several fixed layouts, and writes edited sidebar
sections back into the canonical Markdown text.

Architecture:
- Templating Context: Document parsing, section classification, HTML generation, section rewriting
- Rendering Context: HTML export and page specification for the external rasterizer
"""

__version__ = "0.1.0"
