#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/ast/builder.py
"""Build a document tree from a flat parser event stream.

Markdown parsers in the pulldown/pull-parser style emit a flat sequence of
events where containers are bracketed by ``Start(tag)`` and ``End(tag)``.
:class:`EventTreeBuilder` groups those brackets into :class:`Block` nodes
lazily, so the tree can be rendered while the parser is still producing
events.

"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from md2html.ast.events import End, Event, Start, Tag
from md2html.ast.nodes import Block, Content, Item, Node
from md2html.exceptions import MalformedTreeError

logger = logging.getLogger(__name__)


class EventTreeBuilder:
    """Group a flat event stream into Block and Item nodes.

    All levels of the tree pull from one shared iterator. When the consumer
    moves past a block without reading all of its nested content, the rest
    of that block's events are drained before the next sibling is produced,
    so siblings never pick up events that belong to a child.

    Parameters
    ----------
    events : iterable of Event
        Flat event stream. Consumed exactly once.

    Raises
    ------
    MalformedTreeError
        Raised during iteration for an ``End`` without a matching ``Start``,
        an ``End`` whose tag differs from the open block, or a stream that
        ends with blocks still open.

    Examples
    --------
        >>> from md2html.ast.events import Paragraph, Text
        >>> builder = EventTreeBuilder([Start(Paragraph()), Text("hi"), End(Paragraph())])
        >>> [type(node).__name__ for node in builder.content()]
        ['Block']

    """

    def __init__(self, events: Iterable[Event]):
        """Initialize the builder over an event stream."""
        self._events: Iterator[Event] = iter(events)

    def content(self) -> Content:
        """Return the top-level content of the stream.

        Returns
        -------
        Content
            Lazy top-level content

        """
        return Content(self._iter_level(None))

    def _iter_level(self, parent: Optional[Tag]) -> Iterator[Node]:
        for event in self._events:
            if isinstance(event, Start):
                nested = self._iter_level(event.tag)
                yield Block(event.tag, Content(nested))
                # Anything the consumer left unread belongs to the block just yielded
                for _ in nested:
                    pass
            elif isinstance(event, End):
                if parent is None:
                    raise MalformedTreeError(f"End({event.tag!r}) without a matching Start", node=event)
                if event.tag != parent:
                    raise MalformedTreeError(
                        f"End({event.tag!r}) does not close the open block {parent!r}", node=event
                    )
                return
            else:
                yield Item(event)

        if parent is not None:
            raise MalformedTreeError(f"Event stream ended inside an open block {parent!r}")
        logger.debug("Event stream exhausted")


def build_content(events: Iterable[Event]) -> Content:
    """Build lazy tree content from a flat event stream.

    Parameters
    ----------
    events : iterable of Event
        Flat event stream from the upstream parser

    Returns
    -------
    Content
        Lazy top-level content

    """
    return EventTreeBuilder(events).content()
