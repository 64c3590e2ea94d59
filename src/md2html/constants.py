#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/constants.py
"""Constants and default values for the md2html library.

This module centralizes the fixed markup fragments, escape tables and default
configuration values used across md2html.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Rendering Defaults - Default values for renderer options
3. Markup Constants - Fixed class names and tag names emitted by the renderer
4. Escaping - Character substitution table for identifier escaping
"""

from __future__ import annotations

from typing import Literal, Optional

# =============================================================================
# Type Definitions
# =============================================================================

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# =============================================================================
# Rendering Defaults
# =============================================================================

# None leaves block nesting unbounded
DEFAULT_MAX_NESTING_DEPTH: Optional[int] = None
DEFAULT_WARN_ON_IGNORED_TAGS = False

# Appended after the closing markup of every block
BLOCK_TERMINATOR = "\n"

# =============================================================================
# Markup Constants
# =============================================================================

PARAGRAPH_TAG = "p"
HEADER_TAG_PREFIX = "h"
CODE_BLOCK_TAGS: tuple[str, ...] = ("pre", "code")

FOOTNOTE_REFERENCE_CLASS = "footnote-reference"
FOOTNOTE_DEFINITION_CLASS = "footnote-definition"
FOOTNOTE_DEFINITION_LABEL_CLASS = "footnote-definition-label"

# First index handed out by the footnote tracker
FOOTNOTE_FIRST_INDEX = 1

# =============================================================================
# Escaping
# =============================================================================

# Applied to the UTF-8 bytes of the input, one character per byte.
# The apostrophe maps to &#47; (the solidus entity); downstream consumers
# depend on this exact output.
HTML_ESCAPE_TABLE: dict[int, str] = {
    ord('"'): "&quot;",
    ord("&"): "&amp;",
    ord("'"): "&#47;",
    ord("<"): "&lt;",
    ord(">"): "&gt;",
}
