#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/io_utils.py
"""Output sink helpers shared by the escaper and the renderers."""

from __future__ import annotations

from typing import Protocol

from md2html.exceptions import OutputWriteError


class TextSink(Protocol):
    """Anything rendered text can be appended to (``io.StringIO``, text files, ...)."""

    def write(self, s: str, /) -> int | None: ...


def write_to_sink(sink: TextSink, text: str) -> None:
    """Append text to a sink.

    Parameters
    ----------
    sink : TextSink
        Destination with a ``write(str)`` method
    text : str
        Text to append

    Raises
    ------
    OutputWriteError
        If the sink rejects the write. Cannot happen for ``io.StringIO``.

    """
    try:
        sink.write(text)
    except (OSError, ValueError, TypeError) as exc:
        raise OutputWriteError(repr(sink), original_error=exc) from exc
