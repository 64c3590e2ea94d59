#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/__init__.py
"""Utility helpers for escaping, footnote numbering and output sinks."""

from md2html.utils.footnotes import FootnoteIndexTracker
from md2html.utils.html_utils import escape_html, write_escaped_html
from md2html.utils.io_utils import TextSink, write_to_sink

__all__ = [
    "FootnoteIndexTracker",
    "TextSink",
    "escape_html",
    "write_escaped_html",
    "write_to_sink",
]
