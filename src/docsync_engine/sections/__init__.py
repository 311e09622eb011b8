"""Sections module: locate anchored spans in documents and replace them."""

from docsync_engine.sections.excerpt import excerpt_text, extract_excerpt
from docsync_engine.sections.splice import update_header, update_section

__all__ = ["excerpt_text", "extract_excerpt", "update_header", "update_section"]
