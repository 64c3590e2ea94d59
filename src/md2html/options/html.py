#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/options/html.py
"""Configuration options for HTML rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2html.constants import DEFAULT_WARN_ON_IGNORED_TAGS
from md2html.options.base import BaseRendererOptions


# src/md2html/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering a document tree to HTML.

    Parameters
    ----------
    warn_on_ignored_tags : bool, default False
        Log tags that contribute no markup of their own (block quotes, lists,
        emphasis, ...) at WARNING instead of DEBUG. Their nested content is
        rendered either way.

    """

    warn_on_ignored_tags: bool = field(
        default=DEFAULT_WARN_ON_IGNORED_TAGS,
        metadata={
            "help": "Log tags rendered without markup at WARNING level",
            "importance": "advanced",
        },
    )
