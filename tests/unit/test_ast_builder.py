#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_builder.py
"""Unit tests for grouping flat event streams into a tree."""

import pytest
from utils import CountingEvents

from md2html.ast import (
    Block,
    CodeBlock,
    Content,
    Emphasis,
    End,
    EventTreeBuilder,
    FootnoteReference,
    Header,
    Item,
    Paragraph,
    SoftBreak,
    Start,
    Text,
    build_content,
)
from md2html.exceptions import MalformedTreeError


def flatten(content):
    """Return a nested-list snapshot of content, consuming it fully."""
    result = []
    for node in content:
        if isinstance(node, Block):
            result.append((node.tag, flatten(node.content)))
        else:
            result.append(node.event)
    return result


@pytest.mark.unit
class TestEventTreeBuilder:
    """Tests for building Block and Item nodes from Start/End events."""

    def test_empty_stream(self):
        """Test that an empty stream yields no nodes."""
        assert list(build_content([])) == []

    def test_leaf_events_become_items(self):
        """Test that non-structural events become Items."""
        events = [Text("a"), FootnoteReference("n"), SoftBreak()]
        assert list(build_content(events)) == [Item(event) for event in events]

    def test_start_end_become_block(self):
        """Test grouping a single bracketed block."""
        content = build_content([Start(Paragraph()), Text("hi"), End(Paragraph())])
        assert flatten(content) == [(Paragraph(), [Text("hi")])]

    def test_nested_blocks(self):
        """Test grouping nested brackets."""
        events = [
            Start(Paragraph()),
            Text("a"),
            Start(Emphasis()),
            Text("b"),
            End(Emphasis()),
            Text("c"),
            End(Paragraph()),
            Start(Header(2)),
            Text("d"),
            End(Header(2)),
        ]
        assert flatten(build_content(events)) == [
            (Paragraph(), [Text("a"), (Emphasis(), [Text("b")]), Text("c")]),
            (Header(2), [Text("d")]),
        ]

    def test_unread_nested_content_is_skipped(self):
        """Test that siblings stay aligned when a block's content is never read."""
        events = [
            Start(Paragraph()),
            Text("inside"),
            Start(Emphasis()),
            Text("deeper"),
            End(Emphasis()),
            End(Paragraph()),
            Text("after"),
        ]
        nodes = list(build_content(events))
        assert len(nodes) == 2
        assert isinstance(nodes[0], Block)
        assert nodes[1] == Item(Text("after"))
        assert list(nodes[0].content) == []

    def test_partially_read_nested_content_is_skipped(self):
        """Test that the unread rest of a block is drained before the next sibling."""
        events = [
            Start(CodeBlock("py")),
            Text("one"),
            Text("two"),
            End(CodeBlock("py")),
            Text("after"),
        ]
        content = build_content(events)
        first = next(content)
        assert next(first.content) == Item(Text("one"))
        assert next(content) == Item(Text("after"))

    def test_builder_is_lazy(self):
        """Test that events are pulled only as nodes are requested."""
        events = CountingEvents([Start(Paragraph()), Text("a"), End(Paragraph()), Text("b"), Text("c")])
        content = EventTreeBuilder(events).content()
        assert events.pulled == 0

        first = next(content)
        assert events.pulled == 1
        assert next(first.content) == Item(Text("a"))
        assert events.pulled == 2

        assert next(content) == Item(Text("b"))
        assert events.pulled == 4

    def test_from_events_classmethod(self):
        """Test Content.from_events builds the same tree."""
        content = Content.from_events([Start(Paragraph()), Text("x"), End(Paragraph())])
        assert flatten(content) == [(Paragraph(), [Text("x")])]


@pytest.mark.unit
class TestMalformedStreams:
    """Tests for Start/End pairing errors."""

    def test_end_without_start(self):
        """Test an End at the top level."""
        with pytest.raises(MalformedTreeError, match="without a matching Start"):
            list(build_content([Text("a"), End(Paragraph())]))

    def test_mismatched_end(self):
        """Test an End that does not close the open block."""
        with pytest.raises(MalformedTreeError, match="does not close"):
            flatten(build_content([Start(Paragraph()), Text("a"), End(Emphasis())]))

    def test_mismatched_header_level(self):
        """Test that header levels must match between Start and End."""
        with pytest.raises(MalformedTreeError):
            flatten(build_content([Start(Header(1)), End(Header(2))]))

    def test_unclosed_block(self):
        """Test a stream that ends inside a block."""
        with pytest.raises(MalformedTreeError, match="ended inside an open block"):
            flatten(build_content([Start(Paragraph()), Text("a")]))

    def test_unclosed_block_detected_when_skipping(self):
        """Test that draining an unread block also reports a missing End."""
        with pytest.raises(MalformedTreeError):
            list(build_content([Start(Paragraph()), Text("a")]))

    def test_error_carries_offending_event(self):
        """Test that the offending event is attached to the error."""
        stray = End(Header(3))
        with pytest.raises(MalformedTreeError) as exc_info:
            list(build_content([stray]))
        assert exc_info.value.node == stray
        assert exc_info.value.rendering_stage == "traversal"
