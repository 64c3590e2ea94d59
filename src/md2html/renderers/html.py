#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/renderers/html.py
"""HTML rendering from a document tree.

This module provides the HtmlRenderer class which converts Block/Item tree
content into an HTML fragment. Traversal uses the visitor pattern: nodes,
tags and events each dispatch to a method on :class:`HtmlTreeWalker`, which
writes into the output sink through a per-call :class:`RenderContext`.

Every block renders as opening markup, nested content, closing markup and a
single newline. Text and raw HTML pass through unescaped; footnote
identifiers are escaped wherever they land in an attribute.

"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence

from md2html.ast.events import (
    CodeBlock,
    End,
    Event,
    FootnoteDefinition,
    FootnoteReference,
    HardBreak,
    Header,
    Html,
    InlineHtml,
    Paragraph,
    SoftBreak,
    Start,
    Tag,
    Text,
    UnrenderedTag,
)
from md2html.ast.nodes import Block, Item, Node
from md2html.ast.visitors import EventVisitor, NodeVisitor, TagVisitor
from md2html.constants import (
    BLOCK_TERMINATOR,
    CODE_BLOCK_TAGS,
    FOOTNOTE_DEFINITION_CLASS,
    FOOTNOTE_DEFINITION_LABEL_CLASS,
    FOOTNOTE_REFERENCE_CLASS,
    HEADER_TAG_PREFIX,
    PARAGRAPH_TAG,
)
from md2html.exceptions import MalformedTreeError, RenderingError
from md2html.options.html import HtmlRendererOptions
from md2html.renderers.base import BaseRenderer
from md2html.utils.footnotes import FootnoteIndexTracker
from md2html.utils.html_utils import write_escaped_html
from md2html.utils.io_utils import TextSink, write_to_sink

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


class TagDirection(Enum):
    """Which half of a block's markup is being emitted."""

    OPENING = "opening"
    CLOSING = "closing"


class RenderContext:
    """Mutable state for a single render call.

    Holds the direction flag, the footnote numbering and the output sink.
    A context is created at the start of a render and discarded afterwards.

    Parameters
    ----------
    sink : TextSink
        Destination for rendered markup

    Attributes
    ----------
    direction : TagDirection or None
        OPENING while a block's opening markup is emitted, CLOSING while its
        closing markup is emitted, None otherwise
    footnotes : FootnoteIndexTracker
        Footnote numbering shared by references and definitions

    """

    def __init__(self, sink: TextSink):
        """Initialize an empty context writing to ``sink``."""
        self.sink = sink
        self.direction: Optional[TagDirection] = None
        self.footnotes = FootnoteIndexTracker()

    def write(self, text: str) -> None:
        """Append raw text to the sink."""
        write_to_sink(self.sink, text)

    def write_escaped(self, text: str) -> None:
        """Append HTML-escaped text to the sink."""
        write_escaped_html(self.sink, text)

    def render_tag(self, name: str) -> None:
        """Emit ``<name>`` or ``</name>`` according to the direction; nothing without one.

        Parameters
        ----------
        name : str
            Element name

        """
        if self.direction is TagDirection.OPENING:
            self.write(f"<{name}>")
        elif self.direction is TagDirection.CLOSING:
            self.write(f"</{name}>")

    def render_nested_tags(self, names: Sequence[str]) -> None:
        """Emit a stack of elements, outermost first.

        Opening tags come out in the listed order and closing tags in reverse,
        so ``["pre", "code"]`` opens as ``<pre><code>`` and closes as
        ``</code></pre>``.

        Parameters
        ----------
        names : sequence of str
            Element names, outermost first

        """
        if self.direction is TagDirection.OPENING:
            for name in names:
                self.render_tag(name)
        elif self.direction is TagDirection.CLOSING:
            for name in reversed(names):
                self.render_tag(name)

    def get_footnote_index(self, identifier: str) -> int:
        """Return the footnote index for an identifier, assigning one if needed."""
        return self.footnotes.get_index(identifier)

    def render_footnote_reference(self, identifier: str) -> None:
        """Emit the superscript link for a footnote reference.

        Parameters
        ----------
        identifier : str
            Footnote identifier

        """
        self.write(f'<sup class="{FOOTNOTE_REFERENCE_CLASS}"><a href="#')
        self.write_escaped(identifier)
        self.write('">')
        self.write(str(self.get_footnote_index(identifier)))
        self.write("</a></sup>")

    def render_footnote_definition(self, identifier: str) -> None:
        """Emit the wrapper markup for a footnote definition.

        On opening, writes the ``div`` start tag followed by the complete
        label ``sup`` element and a newline. On closing, writes only the
        ``div`` end tag.

        Parameters
        ----------
        identifier : str
            Footnote identifier

        """
        if self.direction is TagDirection.OPENING:
            self.write(f'<div class="{FOOTNOTE_DEFINITION_CLASS}" id="')
            self.write_escaped(identifier)
            self.write(f'"><sup class="{FOOTNOTE_DEFINITION_LABEL_CLASS}">')
            self.write(str(self.get_footnote_index(identifier)))
            self.write("</sup>\n")
        elif self.direction is TagDirection.CLOSING:
            self.write("</div>")


class HtmlTreeWalker(NodeVisitor, TagVisitor, EventVisitor):
    """Visitor that drives a :class:`RenderContext` over tree content.

    Nested content is walked with an explicit stack of open blocks rather
    than by recursion, so the depth of a tree is bounded only by
    ``options.max_nesting_depth`` and never by the interpreter stack.

    Parameters
    ----------
    context : RenderContext
        Per-call state and output sink
    options : HtmlRendererOptions
        Rendering options

    """

    def __init__(self, context: RenderContext, options: HtmlRendererOptions):
        """Initialize the walker for one render call."""
        self.context = context
        self.options = options
        # (open block or None for the top level, iterator over its content)
        self._frames: list[tuple[Optional[Block], Iterator[Node]]] = []
        self.depth = 0

    def render_content(self, content: Iterable[Node]) -> None:
        """Render every node of ``content`` in order.

        Blocks met along the way are opened by :meth:`visit_block` and their
        content is pulled from the same loop; a block is closed once its
        content is exhausted.

        Parameters
        ----------
        content : iterable of Node
            Nodes to render, consumed exactly once

        Raises
        ------
        MalformedTreeError
            If the content yields something that is not a Node

        """
        base = len(self._frames)
        self._frames.append((None, iter(content)))
        try:
            while len(self._frames) > base:
                owner, nodes = self._frames[-1]
                node = next(nodes, _EXHAUSTED)
                if node is _EXHAUSTED:
                    self._frames.pop()
                    if owner is not None:
                        self._close_block(owner)
                    continue
                if not isinstance(node, Node):
                    raise MalformedTreeError(f"Expected a Block or Item node, got {type(node).__name__}", node=node)
                node.accept(self)
        finally:
            del self._frames[base:]
            self.depth = sum(1 for owner, _ in self._frames if owner is not None)

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def visit_block(self, node: Block) -> None:
        """Render a Block: opening markup, nested content, closing markup, newline.

        Inside :meth:`render_content` this writes the opening markup and
        schedules the nested content; the closing markup follows once that
        content is exhausted. Called on its own, it renders the whole block.

        Parameters
        ----------
        node : Block
            Block to render

        Raises
        ------
        RenderingError
            If opening the block would exceed ``max_nesting_depth``

        """
        if not self._frames:
            self.render_content((node,))
            return

        if not isinstance(node.tag, Tag):
            raise MalformedTreeError(f"Block tag must be a Tag, got {type(node.tag).__name__}", node=node)

        limit = self.options.max_nesting_depth
        if limit is not None and self.depth >= limit:
            raise RenderingError(
                f"Block nesting exceeds max_nesting_depth={limit}",
                rendering_stage="traversal",
            )

        context = self.context
        context.direction = TagDirection.OPENING
        node.tag.accept(self)
        context.direction = None
        self._frames.append((node, iter(node.content)))
        self.depth += 1

    def _close_block(self, node: Block) -> None:
        self.depth -= 1
        context = self.context
        context.direction = TagDirection.CLOSING
        node.tag.accept(self)
        context.write(BLOCK_TERMINATOR)
        context.direction = None

    def visit_item(self, node: Item) -> None:
        """Render an Item by dispatching on its event.

        Parameters
        ----------
        node : Item
            Item to render

        """
        if not isinstance(node.event, Event):
            raise MalformedTreeError(f"Item must wrap an Event, got {type(node.event).__name__}", node=node)
        node.event.accept(self)

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    def visit_paragraph(self, tag: Paragraph) -> None:
        """Render a Paragraph tag as ``p``."""
        self.context.render_tag(PARAGRAPH_TAG)

    def visit_header(self, tag: Header) -> None:
        """Render a Header tag as ``h{level}``."""
        self.context.render_tag(f"{HEADER_TAG_PREFIX}{tag.level}")

    def visit_code_block(self, tag: CodeBlock) -> None:
        """Render a CodeBlock tag as ``pre`` wrapping ``code``."""
        self.context.render_nested_tags(CODE_BLOCK_TAGS)

    def visit_footnote_definition(self, tag: FootnoteDefinition) -> None:
        """Render a FootnoteDefinition tag."""
        self.context.render_footnote_definition(tag.identifier)

    def visit_unrendered_tag(self, tag: UnrenderedTag) -> None:
        """Emit nothing for tags without markup of their own."""
        if self.context.direction is TagDirection.OPENING:
            level = logging.WARNING if self.options.warn_on_ignored_tags else logging.DEBUG
            logger.log(level, "No HTML markup for %r; rendering its content only", tag)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def visit_text(self, event: Text) -> None:
        """Append text verbatim; the producer has already escaped it."""
        self.context.write(event.text)

    def visit_html(self, event: Html) -> None:
        """Append raw HTML verbatim."""
        self.context.write(event.html)

    def visit_inline_html(self, event: InlineHtml) -> None:
        """Append raw inline HTML verbatim."""
        self.context.write(event.html)

    def visit_footnote_reference(self, event: FootnoteReference) -> None:
        """Render a footnote reference link."""
        self.context.render_footnote_reference(event.identifier)

    def visit_start(self, event: Start) -> None:
        """Reject a Start marker that was never grouped into a Block."""
        raise MalformedTreeError(
            f"Structural marker {event!r} reached the renderer as a leaf item; it should be grouped into a Block",
            node=event,
        )

    def visit_end(self, event: End) -> None:
        """Reject an End marker that was never grouped into a Block."""
        raise MalformedTreeError(
            f"Structural marker {event!r} reached the renderer as a leaf item; it should be grouped into a Block",
            node=event,
        )

    def visit_soft_break(self, event: SoftBreak) -> None:
        """Reject soft breaks, which this renderer has no output for."""
        raise MalformedTreeError(f"Unsupported event {type(event).__name__}", node=event)

    def visit_hard_break(self, event: HardBreak) -> None:
        """Reject hard breaks, which this renderer has no output for."""
        raise MalformedTreeError(f"Unsupported event {type(event).__name__}", node=event)


class HtmlRenderer(BaseRenderer):
    """Render tree content to an HTML fragment.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
    Basic usage:

        >>> from md2html.ast import Content, Header, Text, block
        >>> from md2html.renderers.html import HtmlRenderer
        >>> content = Content([block(Header(2), Text("Title"))])
        >>> HtmlRenderer().render_to_string(content)
        '<h2>Title</h2>\\n'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options

    def render(self, content: Iterable[Node], output: TextSink) -> None:
        """Render tree content as HTML, appending to ``output``.

        A fresh :class:`RenderContext` is created for every call, so footnote
        numbering always starts at 1.

        Parameters
        ----------
        content : iterable of Node
            Top-level nodes, consumed exactly once in order
        output : TextSink
            Destination with a ``write(str)`` method

        Raises
        ------
        MalformedTreeError
            If the tree breaks the node/event contract
        OutputWriteError
            If the sink rejects a write
        RenderingError
            If nesting exceeds a configured ``max_nesting_depth``

        """
        context = RenderContext(output)
        walker = HtmlTreeWalker(context, self.options)
        logger.debug("Rendering HTML")
        walker.render_content(content)
        logger.debug("Rendered HTML with %d footnote(s)", len(context.footnotes))
