#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/__init__.py
"""md2html - render parsed markdown document trees to HTML.

md2html takes the output of a pull-style markdown parser, either as a flat
``Start``/``End`` event stream or as an already grouped tree of Block and
Item nodes, and renders it to an HTML fragment.

Key Features
------------
- Paragraphs, headers, code blocks and footnote definitions rendered with
  correctly nested markup
- Footnotes numbered in first-seen order, shared by references and definitions
- Lazy, single-pass traversal; the input is never materialized
- Text and raw HTML passed through untouched

Requirements
------------
- Python 3.10+

Examples
--------
Rendering a flat event stream:

    >>> from md2html import events_to_html
    >>> from md2html.ast import End, Paragraph, Start, Text
    >>> events_to_html([Start(Paragraph()), Text("hi"), End(Paragraph())])
    '<p>hi</p>\\n'

Rendering into an existing buffer:

    >>> from io import StringIO
    >>> from md2html import into_html
    >>> from md2html.ast import Content, Header, block
    >>> buf = StringIO()
    >>> into_html(Content([block(Header(2), Text("Title"))]), buf)
    >>> buf.getvalue()
    '<h2>Title</h2>\\n'

See Also
--------
md2html.ast : Tree node, tag and event definitions
md2html.renderers : Renderer classes

"""

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2html requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2html.api import events_to_html, into_html, render_html
from md2html.exceptions import MalformedTreeError, Md2HtmlError, OutputWriteError, RenderingError
from md2html.logging_utils import configure_logging
from md2html.options import HtmlRendererOptions
from md2html.renderers.html import HtmlRenderer

__all__ = [
    "__version__",
    "events_to_html",
    "into_html",
    "render_html",
    "configure_logging",
    "HtmlRenderer",
    "HtmlRendererOptions",
    "Md2HtmlError",
    "RenderingError",
    "MalformedTreeError",
    "OutputWriteError",
]
