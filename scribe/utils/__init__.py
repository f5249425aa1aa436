"""
Shared utilities for Scribe.

- logger: loguru setup with provenance tracking
- text_processing: title normalization, markdown stripping, slugs and level bars
- markdown: Markdown to HTML conversion
- document_store: whole-file read/modify/write of canonical documents
- timestamp: timestamp helpers for log directories
"""
