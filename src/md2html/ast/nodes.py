#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/ast/nodes.py
"""Document tree nodes.

A document is a lazy, single-pass :class:`Content` sequence of nodes. Each
node is either:

    - Block: a Tag paired with its own nested Content
    - Item: a single leaf Event (text, raw HTML, footnote reference)

Nodes support the visitor pattern through ``accept``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from md2html.ast.events import Event, Tag


class Node(ABC):
    """Base class for tree nodes."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_block and visit_item methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


class Content:
    """Lazy, single-pass sequence of nodes.

    Wraps any iterable of nodes without materializing it. Once a node has
    been pulled it is gone: iterating the same Content again continues where
    the previous iteration stopped, and an exhausted Content yields nothing.

    Parameters
    ----------
    nodes : iterable of Node, default = empty
        Nodes to yield, in document order

    Examples
    --------
        >>> content = Content([Block(Paragraph(), Content([Item(Text("hi"))]))])
        >>> [type(node).__name__ for node in content]
        ['Block']
        >>> list(content)
        []

    """

    def __init__(self, nodes: Iterable[Node] = ()):
        """Wrap an iterable of nodes."""
        self._nodes: Iterator[Node] = iter(nodes)

    @classmethod
    def from_events(cls, events: Iterable[Event]) -> Content:
        """Build content from a flat event stream.

        ``Start``/``End`` pairs become :class:`Block` nodes and every other
        event becomes an :class:`Item`. See :class:`md2html.ast.builder.EventTreeBuilder`.

        Parameters
        ----------
        events : iterable of Event
            Flat event stream from the upstream parser

        Returns
        -------
        Content
            Lazy tree over the stream

        """
        from md2html.ast.builder import build_content

        return build_content(events)

    def __iter__(self) -> Iterator[Node]:
        return self

    def __next__(self) -> Node:
        return next(self._nodes)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(<lazy>)"


@dataclass(eq=False)
class Block(Node):
    """A tag with nested content.

    Parameters
    ----------
    tag : Tag
        The construct this block represents
    content : Content
        Nested nodes, consumed once during rendering

    """

    tag: Tag
    content: Content

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_block method

        Returns
        -------
        Any
            Result from visitor.visit_block(self)

        """
        return visitor.visit_block(self)


@dataclass(frozen=True)
class Item(Node):
    """A single leaf event.

    Parameters
    ----------
    event : Event
        The wrapped event

    """

    event: Event

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this item.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_item method

        Returns
        -------
        Any
            Result from visitor.visit_item(self)

        """
        return visitor.visit_item(self)


def block(tag: Tag, *children: Node | Event) -> Block:
    """Build a block from eagerly supplied children.

    Events are wrapped in :class:`Item` automatically, which keeps hand-built
    trees short.

    Parameters
    ----------
    tag : Tag
        Tag of the new block
    *children : Node or Event
        Nested nodes or bare events, in document order

    Returns
    -------
    Block
        Block whose content yields the given children

    Examples
    --------
        >>> block(Paragraph(), Text("hi"))
        Block(tag=Paragraph(), content=Content(<lazy>))

    """
    nodes = [Item(child) if isinstance(child, Event) else child for child in children]
    return Block(tag, Content(nodes))
