#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/ast/events.py
"""Tag and event variants produced by the upstream markdown parser.

Two closed variant sets live here:

Tags name block-level or container constructs:
    - Paragraph, Header, CodeBlock, FootnoteDefinition (rendered with markup)
    - BlockQuote, List, ListItem, Emphasis, Strong, Code, Link, Image, Rule,
      Table, TableHead, TableRow, TableCell (UnrenderedTag: no markup of
      their own, nested content still rendered)

Events are the leaf items of the stream:
    - Text, Html, InlineHtml, FootnoteReference (content)
    - Start, End (structural markers, grouped into blocks by the tree builder)
    - SoftBreak, HardBreak

Every variant dispatches to exactly one ``visit_*`` method. The visitor base
classes in :mod:`md2html.ast.visitors` declare all of them abstract, so a
visitor that misses a variant cannot be instantiated.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Literal, Optional

Alignment = Literal["none", "left", "center", "right"]


class Tag(ABC):
    """Base class for all tag variants."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a tag visitor.

        Parameters
        ----------
        visitor : Any
            A visitor implementing the TagVisitor methods

        Returns
        -------
        Any
            Result from the matching visit_* method

        """
        pass


class Event(ABC):
    """Base class for all event variants."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept an event visitor.

        Parameters
        ----------
        visitor : Any
            A visitor implementing the EventVisitor methods

        Returns
        -------
        Any
            Result from the matching visit_* method

        """
        pass


# ============================================================================
# Rendered tags
# ============================================================================


@dataclass(frozen=True)
class Paragraph(Tag):
    """Paragraph tag, rendered as ``p``."""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self)


@dataclass(frozen=True)
class Header(Tag):
    """Header tag, rendered as ``h{level}``.

    Parameters
    ----------
    level : int
        Header level. Must be a positive int (bool is rejected); the value is
        used literally in the tag name.

    """

    level: int

    def __post_init__(self) -> None:
        """Validate that the header level is a positive integer."""
        if isinstance(self.level, bool) or not isinstance(self.level, int):
            raise TypeError(f"Header level must be an int, got {type(self.level).__name__}")
        if self.level < 1:
            raise ValueError(f"Header level must be positive, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_header``."""
        return visitor.visit_header(self)


@dataclass(frozen=True)
class CodeBlock(Tag):
    """Code block tag, rendered as ``pre`` wrapping ``code``.

    Parameters
    ----------
    info : str, default ""
        Info string following the opening fence. Carried for consumers of the
        tree; the HTML renderer does not emit it.

    """

    info: str = ""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self)


@dataclass(frozen=True)
class FootnoteDefinition(Tag):
    """Footnote definition tag.

    Parameters
    ----------
    identifier : str
        Footnote identifier, shared with the matching FootnoteReference events

    """

    identifier: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_footnote_definition``."""
        return visitor.visit_footnote_definition(self)


# ============================================================================
# Tags without markup of their own
# ============================================================================


class UnrenderedTag(Tag):
    """Base class for tags the HTML renderer emits no markup for.

    Their nested content is still traversed and rendered.
    """

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_unrendered_tag``."""
        return visitor.visit_unrendered_tag(self)


@dataclass(frozen=True)
class BlockQuote(UnrenderedTag):
    """Block quote container."""

@dataclass(frozen=True)
class List(UnrenderedTag):
    """List container; ``start`` is set for ordered lists."""

    start: Optional[int] = None


@dataclass(frozen=True)
class ListItem(UnrenderedTag):
    """List item container."""


@dataclass(frozen=True)
class Emphasis(UnrenderedTag):
    """Emphasis span."""


@dataclass(frozen=True)
class Strong(UnrenderedTag):
    """Strong emphasis span."""


@dataclass(frozen=True)
class Code(UnrenderedTag):
    """Inline code span."""


@dataclass(frozen=True)
class Link(UnrenderedTag):
    """Hyperlink span."""

    destination: str
    title: str = ""


@dataclass(frozen=True)
class Image(UnrenderedTag):
    """Image span; nested content is the alt text."""

    destination: str
    title: str = ""


@dataclass(frozen=True)
class Rule(UnrenderedTag):
    """Thematic break."""


@dataclass(frozen=True)
class Table(UnrenderedTag):
    """Table container."""

    alignments: tuple[Alignment, ...] = ()


@dataclass(frozen=True)
class TableHead(UnrenderedTag):
    """Table header row group."""


@dataclass(frozen=True)
class TableRow(UnrenderedTag):
    """Table row."""


@dataclass(frozen=True)
class TableCell(UnrenderedTag):
    """Table cell."""


# ============================================================================
# Events
# ============================================================================


@dataclass(frozen=True)
class Text(Event):
    """Text content. Already escaped by the producer; rendered verbatim."""

    text: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass(frozen=True)
class Html(Event):
    """Raw HTML block content, rendered verbatim."""

    html: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_html``."""
        return visitor.visit_html(self)


@dataclass(frozen=True)
class InlineHtml(Event):
    """Raw inline HTML, rendered verbatim."""

    html: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_inline_html``."""
        return visitor.visit_inline_html(self)


@dataclass(frozen=True)
class FootnoteReference(Event):
    """Inline reference to a footnote definition."""

    identifier: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_footnote_reference``."""
        return visitor.visit_footnote_reference(self)


@dataclass(frozen=True)
class Start(Event):
    """Opening structural marker for ``tag``."""

    tag: Tag

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_start``."""
        return visitor.visit_start(self)


@dataclass(frozen=True)
class End(Event):
    """Closing structural marker for ``tag``."""

    tag: Tag

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_end``."""
        return visitor.visit_end(self)


@dataclass(frozen=True)
class SoftBreak(Event):
    """Soft line break."""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_soft_break``."""
        return visitor.visit_soft_break(self)


@dataclass(frozen=True)
class HardBreak(Event):
    """Hard line break."""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_hard_break``."""
        return visitor.visit_hard_break(self)
