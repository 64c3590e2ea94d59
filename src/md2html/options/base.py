#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/options/base.py
"""Base classes for renderer options.

This module defines the foundation classes for the options consumed by
md2html renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from md2html.constants import DEFAULT_MAX_NESTING_DEPTH


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    max_nesting_depth : int or None, default None
        Maximum number of nested blocks the renderer will descend into before
        raising RenderingError. None renders trees of any depth.

    Notes
    -----
    Subclasses should define renderer-specific options as frozen dataclass fields.
    No option changes the markup a renderer produces for a given tree.

    """

    max_nesting_depth: Optional[int] = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={
            "help": "Maximum block nesting depth before rendering fails (None for unbounded)",
            "type": int,
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges for base renderer options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.max_nesting_depth is not None and self.max_nesting_depth <= 0:
            raise ValueError(f"max_nesting_depth must be positive, got {self.max_nesting_depth}")
