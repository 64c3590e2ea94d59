#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/html_utils.py
"""HTML escaping helpers."""

from __future__ import annotations

from io import StringIO

from md2html.constants import HTML_ESCAPE_TABLE
from md2html.utils.io_utils import TextSink, write_to_sink


def _escape(text: str) -> str:
    # One character per UTF-8 byte, so non-ASCII input is not preserved as-is
    return text.encode("utf-8").decode("latin-1").translate(HTML_ESCAPE_TABLE)


def write_escaped_html(sink: TextSink, text: str) -> None:
    """Append text to a sink with HTML special characters replaced by entities.

    Replaces ``"`` with ``&quot;``, ``&`` with ``&amp;``, ``'`` with ``&#47;``,
    ``<`` with ``&lt;`` and ``>`` with ``&gt;``. Everything else is copied
    byte by byte from the UTF-8 encoding of ``text``, each byte becoming
    one character.

    Parameters
    ----------
    sink : TextSink
        Destination with a ``write(str)`` method
    text : str
        Text to escape

    Raises
    ------
    OutputWriteError
        If the sink rejects the write

    Examples
    --------
        >>> buf = StringIO()
        >>> write_escaped_html(buf, "<b>&\\"'</b>")
        >>> buf.getvalue()
        '&lt;b&gt;&amp;&quot;&#47;&lt;/b&gt;'

    """
    write_to_sink(sink, _escape(text))


def escape_html(text: str) -> str:
    """Return text escaped exactly as :func:`write_escaped_html` would write it."""
    buf = StringIO()
    write_escaped_html(buf, text)
    return buf.getvalue()


__all__ = ["escape_html", "write_escaped_html"]
