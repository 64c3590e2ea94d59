#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/options/__init__.py
"""Configuration options for md2html renderers.

Using frozen dataclasses provides type safety, default values, and a clean
API for configuring rendering behavior.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from md2html.options.base import BaseRendererOptions, CloneFrozenMixin
from md2html.options.html import HtmlRendererOptions


def create_updated_options(options: Any, **kwargs: Any) -> Any:
    """Create a new options instance with updated values.

    Parameters
    ----------
    options : Any
        The original options instance (must be a dataclass)
    **kwargs
        Keyword arguments with the field names and new values to update

    Returns
    -------
    Any
        A new options instance with the updated values

    Examples
    --------
    >>> original = HtmlRendererOptions()
    >>> updated = create_updated_options(original, warn_on_ignored_tags=True)
    >>> # original remains unchanged, updated has new values

    """
    return replace(options, **kwargs)


__all__ = [
    "CloneFrozenMixin",
    "BaseRendererOptions",
    "HtmlRendererOptions",
    "create_updated_options",
]
