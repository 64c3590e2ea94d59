#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/ast/visitors.py
"""Visitor pattern interfaces for tree traversal.

Three visitor bases cover the three closed variant sets:

- NodeVisitor: Block and Item
- TagVisitor: every Tag variant
- EventVisitor: every Event variant

Every visit method is abstract. A visitor that forgets a variant fails at
instantiation time with ``TypeError`` instead of silently skipping nodes.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from md2html.ast.events import (
    CodeBlock,
    End,
    FootnoteDefinition,
    FootnoteReference,
    HardBreak,
    Header,
    Html,
    InlineHtml,
    Paragraph,
    SoftBreak,
    Start,
    Text,
    UnrenderedTag,
)
from md2html.ast.nodes import Block, Item


class NodeVisitor(ABC):
    """Abstract base class for tree node visitors.

    Examples
    --------
    Counting leaf items in a tree:

        >>> class ItemCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_block(self, node):
        ...         for child in node.content:
        ...             child.accept(self)
        ...
        ...     def visit_item(self, node):
        ...         self.count += 1

    """

    @abstractmethod
    def visit_block(self, node: Block) -> Any:
        """Visit a Block node.

        Parameters
        ----------
        node : Block
            The block to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_item(self, node: Item) -> Any:
        """Visit an Item node.

        Parameters
        ----------
        node : Item
            The item to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass


class TagVisitor(ABC):
    """Abstract base class for tag visitors."""

    @abstractmethod
    def visit_paragraph(self, tag: Paragraph) -> Any:
        """Visit a Paragraph tag."""
        pass

    @abstractmethod
    def visit_header(self, tag: Header) -> Any:
        """Visit a Header tag."""
        pass

    @abstractmethod
    def visit_code_block(self, tag: CodeBlock) -> Any:
        """Visit a CodeBlock tag."""
        pass

    @abstractmethod
    def visit_footnote_definition(self, tag: FootnoteDefinition) -> Any:
        """Visit a FootnoteDefinition tag."""
        pass

    @abstractmethod
    def visit_unrendered_tag(self, tag: UnrenderedTag) -> Any:
        """Visit any tag without markup of its own (lists, emphasis, tables, ...)."""
        pass


class EventVisitor(ABC):
    """Abstract base class for event visitors."""

    @abstractmethod
    def visit_text(self, event: Text) -> Any:
        """Visit a Text event."""
        pass

    @abstractmethod
    def visit_html(self, event: Html) -> Any:
        """Visit an Html event."""
        pass

    @abstractmethod
    def visit_inline_html(self, event: InlineHtml) -> Any:
        """Visit an InlineHtml event."""
        pass

    @abstractmethod
    def visit_footnote_reference(self, event: FootnoteReference) -> Any:
        """Visit a FootnoteReference event."""
        pass

    @abstractmethod
    def visit_start(self, event: Start) -> Any:
        """Visit a Start structural marker."""
        pass

    @abstractmethod
    def visit_end(self, event: End) -> Any:
        """Visit an End structural marker."""
        pass

    @abstractmethod
    def visit_soft_break(self, event: SoftBreak) -> Any:
        """Visit a SoftBreak event."""
        pass

    @abstractmethod
    def visit_hard_break(self, event: HardBreak) -> Any:
        """Visit a HardBreak event."""
        pass
