#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/utils.py
"""Test utilities for the md2html test suite.

Trees are described as plain data so a fresh single-pass Content can be
built for every render:

    ("block", tag, [children...])
    ("item", event)

"""

from __future__ import annotations

import re
from typing import Any, Iterable, Iterator

from hypothesis import strategies as st

from md2html.ast import (
    BlockQuote,
    CodeBlock,
    Content,
    Emphasis,
    Event,
    FootnoteDefinition,
    FootnoteReference,
    Header,
    Html,
    Item,
    List,
    Paragraph,
    Text,
    block,
)
from md2html.ast.nodes import Block, Node

TAG_PATTERN = re.compile(r"<(/?)([a-z][a-z0-9]*)[^>]*>")


class FailingSink:
    """Sink whose writes always fail."""

    def write(self, s: str) -> int:
        raise OSError("disk full")


class CountingEvents:
    """Event iterator that records how many events have been pulled."""

    def __init__(self, events: Iterable[Event]):
        self._events = iter(events)
        self.pulled = 0

    def __iter__(self) -> Iterator[Event]:
        return self

    def __next__(self) -> Event:
        event = next(self._events)
        self.pulled += 1
        return event


def to_node(shape: tuple) -> Node:
    """Build a node from its data description."""
    if shape[0] == "item":
        return Item(shape[1])
    _, tag, children = shape
    return Block(tag, Content(to_node(child) for child in children))


def to_content(shapes: list) -> Content:
    """Build fresh top-level content from data descriptions."""
    return Content(to_node(shape) for shape in shapes)


def iter_shapes(shapes: list) -> Iterator[tuple]:
    """Yield every description in pre-order."""
    for shape in shapes:
        yield shape
        if shape[0] == "block":
            yield from iter_shapes(shape[2])


def first_seen_footnotes(shapes: list) -> list[str]:
    """Return footnote identifiers in the order a pre-order walk first meets them."""
    seen: dict[str, None] = {}
    for shape in iter_shapes(shapes):
        if shape[0] == "block" and isinstance(shape[1], FootnoteDefinition):
            seen.setdefault(shape[1].identifier)
        elif shape[0] == "item" and isinstance(shape[1], FootnoteReference):
            seen.setdefault(shape[1].identifier)
    return list(seen)


def count_blocks(shapes: list, tag_type: Any = None) -> int:
    """Count blocks, optionally only those with a given tag type."""
    return sum(
        1
        for shape in iter_shapes(shapes)
        if shape[0] == "block" and (tag_type is None or isinstance(shape[1], tag_type))
    )


def assert_balanced(html: str) -> None:
    """Assert every end tag in ``html`` closes the most recent open tag."""
    stack: list[str] = []
    for match in TAG_PATTERN.finditer(html):
        closing, name = match.groups()
        if closing:
            assert stack, f"</{name}> without an open tag in {html!r}"
            assert stack.pop() == name, f"</{name}> closes the wrong element in {html!r}"
        else:
            stack.append(name)
    assert not stack, f"unclosed {stack} in {html!r}"


def paragraph(*children: Any) -> Block:
    """Shorthand for a paragraph block."""
    return block(Paragraph(), *children)


# ----------------------------------------------------------------------
# Hypothesis strategies
# ----------------------------------------------------------------------

identifiers = st.text(alphabet="abcdefxyz0123456789", min_size=1, max_size=4)
plain_text = st.text(alphabet="abc XYZ.,;:!?", max_size=8)

tags = st.one_of(
    st.just(Paragraph()),
    st.integers(min_value=1, max_value=6).map(Header),
    plain_text.map(CodeBlock),
    identifiers.map(FootnoteDefinition),
    st.just(BlockQuote()),
    st.just(Emphasis()),
    st.just(List(start=1)),
)

plain_leaves = st.one_of(
    plain_text.map(Text),
    identifiers.map(FootnoteReference),
).map(lambda event: ("item", event))

any_leaves = st.one_of(
    st.text(max_size=10).map(Text),
    st.text(max_size=10).map(Html),
    st.text(max_size=6).map(FootnoteReference),
).map(lambda event: ("item", event))


def documents(leaves: st.SearchStrategy = plain_leaves) -> st.SearchStrategy:
    """Strategy for lists of tree descriptions."""
    trees = st.recursive(
        leaves,
        lambda children: st.tuples(st.just("block"), tags, st.lists(children, max_size=4)),
        max_leaves=20,
    )
    return st.lists(trees, max_size=5)
