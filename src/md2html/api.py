#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/api.py
"""The main exported API functions for rendering document trees to HTML."""

import logging
from typing import Iterable, Optional

from md2html.ast.builder import build_content
from md2html.ast.events import Event
from md2html.ast.nodes import Node
from md2html.options.html import HtmlRendererOptions
from md2html.renderers.html import HtmlRenderer
from md2html.utils.decorators import debug_timer
from md2html.utils.io_utils import TextSink

logger = logging.getLogger(__name__)


def into_html(
    content: Iterable[Node],
    buf: TextSink,
    options: Optional[HtmlRendererOptions] = None,
) -> None:
    """Render tree content as HTML into a caller-owned buffer.

    Every call starts from a fresh render context: footnote numbering begins
    at 1 and no state carries over between calls. Output is appended to
    ``buf``; nothing is returned.

    Parameters
    ----------
    content : iterable of Node
        Top-level Block/Item nodes (typically a :class:`~md2html.ast.Content`),
        consumed exactly once in order
    buf : TextSink
        Destination with a ``write(str)`` method, e.g. ``io.StringIO``
    options : HtmlRendererOptions, optional
        Rendering options

    Raises
    ------
    MalformedTreeError
        If the tree breaks the node/event contract. Markup written before the
        failure stays in ``buf``.
    OutputWriteError
        If ``buf`` rejects a write

    Examples
    --------
        >>> from io import StringIO
        >>> from md2html.ast import Content, Paragraph, Text, block
        >>> buf = StringIO()
        >>> into_html(Content([block(Paragraph(), Text("hi"))]), buf)
        >>> buf.getvalue()
        '<p>hi</p>\\n'

    """
    with debug_timer(logger, "Rendering (html)"):
        HtmlRenderer(options).render(content, buf)


def render_html(content: Iterable[Node], options: Optional[HtmlRendererOptions] = None) -> str:
    """Render tree content and return the HTML fragment as a string.

    Parameters
    ----------
    content : iterable of Node
        Top-level Block/Item nodes, consumed exactly once in order
    options : HtmlRendererOptions, optional
        Rendering options

    Returns
    -------
    str
        HTML fragment

    """
    with debug_timer(logger, "Rendering (html)"):
        return HtmlRenderer(options).render_to_string(content)


def events_to_html(events: Iterable[Event], options: Optional[HtmlRendererOptions] = None) -> str:
    """Build a tree from a flat Start/End event stream and render it.

    Parameters
    ----------
    events : iterable of Event
        Flat event stream from the upstream parser
    options : HtmlRendererOptions, optional
        Rendering options

    Returns
    -------
    str
        HTML fragment

    Raises
    ------
    MalformedTreeError
        If Start/End markers do not pair up, or an unsupported event appears

    """
    return render_html(build_content(events), options=options)
