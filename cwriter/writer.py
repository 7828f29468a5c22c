"""Indentation-tracking text writer.

The :class:`Writer` is the single mutable object threaded through a render
pass. It forwards text to a sink and tracks the current indentation prefix,
which block elements push and pop as they are entered and exited.

Example
-------
::

    from cwriter.writer import Writer

    writer = Writer(indentation="\\t")
    with writer.indented():
        writer.write(writer.current_indentation)
        writer.write("int x;\\n")
    print(writer.getvalue())
"""

from __future__ import annotations

import io
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol, runtime_checkable

__all__ = [
    "DEFAULT_INDENTATION",
    "TextSink",
    "Writer",
]

DEFAULT_INDENTATION = "    "


@runtime_checkable
class TextSink(Protocol):
    """Protocol for append-only text outputs.

    Anything with a ``write(str)`` method qualifies: ``io.StringIO``, an open
    text file, or a :class:`Writer`.
    """

    def write(self, text: str, /) -> object:
        """Append ``text`` to the output."""
        ...


class Writer:
    """Accumulates rendered C text and tracks indentation.

    :param stream: Sink receiving the text. Defaults to a fresh
        :class:`io.StringIO`, in which case :meth:`getvalue` returns everything
        written so far.
    :param indentation: The indentation unit pushed by each nested block.
    """

    def __init__(self, stream: TextSink | None = None, indentation: str = DEFAULT_INDENTATION) -> None:
        self.stream: TextSink = stream if stream is not None else io.StringIO()
        self.indentation: str = indentation
        self.current_indentation: str = ""

    def write(self, text: str) -> None:
        """Append ``text`` to the sink."""
        self.stream.write(text)

    def indent(self) -> None:
        """Push one indentation unit."""
        self.current_indentation += self.indentation

    def dedent(self) -> None:
        """Pop one indentation unit.

        :raises ValueError: If the prefix is shorter than one unit.
        """
        unit = len(self.indentation)
        if len(self.current_indentation) < unit:
            raise ValueError("Cannot dedent: writer is not indented")
        if unit:
            self.current_indentation = self.current_indentation[:-unit]

    @contextmanager
    def indented(self) -> Iterator[Writer]:
        """Indent for the duration of a ``with`` block.

        The previous prefix is restored on exit, also when the block raises.
        """
        self.indent()
        try:
            yield self
        finally:
            self.dedent()

    def getvalue(self) -> str:
        """Return all text written so far.

        :raises TypeError: If the sink does not keep its contents (for example
            an open file).
        """
        getvalue = getattr(self.stream, "getvalue", None)
        if getvalue is None:
            raise TypeError(f"{type(self.stream).__name__} does not retain written text")
        value: str = getvalue()
        return value

    def __repr__(self) -> str:
        return f"Writer(indentation={self.indentation!r}, current_indentation={self.current_indentation!r})"
