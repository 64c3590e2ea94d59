#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/renderers/base.py
"""Base classes for tree renderers.

This module defines the abstract base class that all renderers inherit from.
The BaseRenderer provides a consistent interface for converting document
tree content into an output format.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import StringIO
from typing import Iterable

from md2html.ast.nodes import Node
from md2html.exceptions import InvalidOptionsError
from md2html.options.base import BaseRendererOptions
from md2html.utils.io_utils import TextSink


class BaseRenderer(ABC):
    """Abstract base class for all tree renderers.

    Renderers keep nothing but their options between calls. All per-call
    state lives in objects created inside :meth:`render`, so one renderer
    instance can serve concurrent calls as long as each call has its own
    output sink.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Renderer-specific options

    Examples
    --------
    Creating a custom renderer:

        >>> from md2html.renderers.base import BaseRenderer
        >>>
        >>> class ItemCountRenderer(BaseRenderer):
        ...     def render(self, content, output):
        ...         output.write(str(sum(1 for _ in content)))

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Renderer-specific options. If None, default options will be used.

        """
        self.options = options or BaseRendererOptions()

    @abstractmethod
    def render(self, content: Iterable[Node], output: TextSink) -> None:
        """Render tree content, appending the result to ``output``.

        Parameters
        ----------
        content : iterable of Node
            Top-level nodes, consumed exactly once in order
        output : TextSink
            Destination with a ``write(str)`` method

        Raises
        ------
        RenderingError
            If rendering fails

        """
        pass

    def render_to_string(self, content: Iterable[Node]) -> str:
        """Render tree content to a string.

        Parameters
        ----------
        content : iterable of Node
            Top-level nodes, consumed exactly once in order

        Returns
        -------
        str
            Rendered output

        """
        buffer = StringIO()
        self.render(content, buffer)
        return buffer.getvalue()

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
