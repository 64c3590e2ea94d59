#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/ast/__init__.py
"""Document tree module.

The module consists of several components:

- events: the closed Tag and Event variant sets produced by the upstream parser
- nodes: Block and Item nodes and the lazy Content sequence
- builder: grouping of a flat Start/End event stream into a tree
- visitors: visitor interfaces for nodes, tags and events

Examples
--------
Hand-built tree:

    >>> from md2html.ast import Header, Paragraph, Text, Content, block
    >>> content = Content([
    ...     block(Header(1), Text("Title")),
    ...     block(Paragraph(), Text("Hello world")),
    ... ])

From a flat event stream:

    >>> from md2html.ast import End, Start
    >>> content = Content.from_events([Start(Paragraph()), Text("hi"), End(Paragraph())])

"""

from __future__ import annotations

from md2html.ast.builder import EventTreeBuilder, build_content
from md2html.ast.events import (
    Alignment,
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    End,
    Event,
    FootnoteDefinition,
    FootnoteReference,
    HardBreak,
    Header,
    Html,
    Image,
    InlineHtml,
    Link,
    List,
    ListItem,
    Paragraph,
    Rule,
    SoftBreak,
    Start,
    Strong,
    Table,
    TableCell,
    TableHead,
    TableRow,
    Tag,
    Text,
    UnrenderedTag,
)
from md2html.ast.nodes import Block, Content, Item, Node, block
from md2html.ast.visitors import EventVisitor, NodeVisitor, TagVisitor

__all__ = [
    # Tags
    "Tag",
    "Paragraph",
    "Header",
    "CodeBlock",
    "FootnoteDefinition",
    "UnrenderedTag",
    "BlockQuote",
    "List",
    "ListItem",
    "Emphasis",
    "Strong",
    "Code",
    "Link",
    "Image",
    "Rule",
    "Table",
    "TableHead",
    "TableRow",
    "TableCell",
    "Alignment",
    # Events
    "Event",
    "Text",
    "Html",
    "InlineHtml",
    "FootnoteReference",
    "Start",
    "End",
    "SoftBreak",
    "HardBreak",
    # Nodes
    "Node",
    "Block",
    "Item",
    "Content",
    "block",
    # Builder
    "EventTreeBuilder",
    "build_content",
    # Visitors
    "NodeVisitor",
    "TagVisitor",
    "EventVisitor",
]
