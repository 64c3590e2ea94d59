#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/renderers/__init__.py
"""Renderers for converting document trees to output formats.

Available renderers:
- HtmlRenderer: Render to an HTML fragment

Examples
--------
    >>> from md2html.ast import CodeBlock, Content, Text, block
    >>> from md2html.renderers import HtmlRenderer
    >>> HtmlRenderer().render_to_string(Content([block(CodeBlock("python"), Text("x=1"))]))
    '<pre><code>x=1</code></pre>\\n'

"""

from md2html.renderers.base import BaseRenderer
from md2html.renderers.html import HtmlRenderer, HtmlTreeWalker, RenderContext, TagDirection

__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
    "HtmlTreeWalker",
    "RenderContext",
    "TagDirection",
]
