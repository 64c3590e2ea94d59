#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/footnotes.py
"""Footnote numbering shared by footnote references and definitions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, ItemsView

from md2html.constants import FOOTNOTE_FIRST_INDEX

logger = logging.getLogger(__name__)


@dataclass
class FootnoteIndexTracker:
    """Assign stable, first-seen-order indices to footnote identifiers.

    The first identifier seen gets 1, the next new one 2, and so on. A
    reference and a definition with the same identifier share one index
    no matter which of the two is encountered first.

    Examples
    --------
        >>> tracker = FootnoteIndexTracker()
        >>> tracker.get_index("b"), tracker.get_index("a"), tracker.get_index("b")
        (1, 2, 1)

    """

    _indices: Dict[str, int] = field(default_factory=dict, init=False, repr=False)

    def get_index(self, identifier: str) -> int:
        """Return the index for an identifier, assigning the next one if unseen.

        Parameters
        ----------
        identifier : str
            Footnote identifier, compared by string value

        Returns
        -------
        int
            Positive index, stable for the lifetime of this tracker

        """
        index = self._indices.get(identifier)
        if index is None:
            index = len(self._indices) + FOOTNOTE_FIRST_INDEX
            self._indices[identifier] = index
            logger.debug("Assigned footnote index %d to %r", index, identifier)
        return index

    def items(self) -> ItemsView[str, int]:
        """Return a read-only view of (identifier, index) pairs in first-seen order."""
        return self._indices.items()

    def __len__(self) -> int:
        return len(self._indices)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._indices
