# topmark:header:start
#
#   project      : TagPrint
#   file         : formatter.py
#   file_relpath : src/tagprint/engine/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Minimal box/indent formatter exposing a tag-hook interface.

This is the pretty-printing collaborator the renderers plug into. It streams
output directly (there is no line-fitting algorithm):

- vertical boxes remember the column they were opened at plus an indent;
- a cut breaks the line inside a box and is a no-op at top level;
- tags are opened and closed around regions; when *mark tags* is enabled the
  mark hooks return literal text inserted at the boundary (zero width), and
  when *print tags* is enabled the print hooks are invoked for their layout
  side effects.

Output goes through a replaceable set of [`OutFunctions`][tagprint.engine.formatter.OutFunctions],
which is the override point used to intercept newlines.
"""

from __future__ import annotations

import io
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, TextIO

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True)
class TagFunctions:
    """The four tag hooks of a formatter.

    Attributes:
        mark_open (Callable[[str], str]): Literal text inserted when a tag opens.
        mark_close (Callable[[str], str]): Literal text inserted when a tag closes.
        print_open (Callable[[str], None]): Layout side effect when a tag opens.
        print_close (Callable[[str], None]): Layout side effect when a tag closes.
    """

    mark_open: Callable[[str], str]
    mark_close: Callable[[str], str]
    print_open: Callable[[str], None]
    print_close: Callable[[str], None]


@dataclass(frozen=True)
class OutFunctions:
    """Low-level output primitives of a formatter."""

    out_string: Callable[[str], None]
    out_newline: Callable[[], None]
    out_spaces: Callable[[int], None]
    out_flush: Callable[[], None]


def default_mark_open(payload: str) -> str:
    return f"<{payload}>"


def default_mark_close(payload: str) -> str:
    return f"</{payload}>"


def default_print_tag(payload: str) -> None:
    return None


DEFAULT_TAG_FUNCTIONS = TagFunctions(
    mark_open=default_mark_open,
    mark_close=default_mark_close,
    print_open=default_print_tag,
    print_close=default_print_tag,
)


def stream_out_functions(stream: TextIO) -> OutFunctions:
    """Return output functions writing to ``stream``."""
    return OutFunctions(
        out_string=stream.write,
        out_newline=lambda: stream.write("\n"),
        out_spaces=lambda n: stream.write(" " * n),
        out_flush=stream.flush,
    )


class Formatter:
    """Streaming formatter with boxes, cuts and tag hooks.

    Args:
        out (TextIO | None): Destination stream. Defaults to `sys.stdout`.

    Attributes:
        mark_tags (bool): Whether mark hooks insert literal text.
        print_tags (bool): Whether print hooks are invoked.
    """

    mark_tags: bool
    print_tags: bool

    def __init__(self, out: TextIO | None = None) -> None:
        self.stream: TextIO = out or sys.stdout
        self._out: OutFunctions = stream_out_functions(self.stream)
        self._tags: TagFunctions = DEFAULT_TAG_FUNCTIONS
        self.mark_tags = False
        self.print_tags = False
        self._column: int = 0
        self._boxes: list[int] = []
        self._open_tags: list[str] = []

    @classmethod
    def in_memory(cls) -> Formatter:
        """Return a formatter writing to a fresh `io.StringIO`."""
        return cls(io.StringIO())

    def getvalue(self) -> str:
        """Return everything written so far (in-memory formatters only)."""
        if not isinstance(self.stream, io.StringIO):
            raise TypeError("getvalue() requires a formatter created with in_memory()")
        return self.stream.getvalue()

    # --- hook and output function accessors ---

    def get_tag_functions(self) -> TagFunctions:
        return self._tags

    def set_tag_functions(self, functions: TagFunctions) -> None:
        self._tags = functions

    def get_out_functions(self) -> OutFunctions:
        return self._out

    def set_out_functions(self, functions: OutFunctions) -> None:
        self._out = functions

    @property
    def column(self) -> int:
        """Current output column."""
        return self._column

    # --- layout primitives ---

    def open_box(self, indent: int = 0) -> None:
        """Open a vertical box indented ``indent`` columns past the current column."""
        self._boxes.append(self._column + indent)

    def close_box(self) -> None:
        """Close the innermost box (no-op when none is open)."""
        if self._boxes:
            self._boxes.pop()

    def print_cut(self) -> None:
        """Break the line inside a box; do nothing at top level."""
        if self._boxes:
            self._break()

    def force_newline(self) -> None:
        """Break the line unconditionally."""
        self._break()

    def print_string(self, text: str) -> None:
        """Print ``text`` at the current position."""
        self._out.out_string(text)
        nl = text.rfind("\n")
        self._column = len(text) - nl - 1 if nl >= 0 else self._column + len(text)

    def print_as(self, width: int, text: str) -> None:
        """Print ``text`` as if it occupied ``width`` columns (e.g. a terminal escape)."""
        self._out.out_string(text)
        self._column += width

    def flush(self) -> None:
        self._out.out_flush()

    def _break(self) -> None:
        self._out.out_newline()
        indent = self._boxes[-1] if self._boxes else 0
        if indent:
            self._out.out_spaces(indent)
        self._column = indent

    # --- tags ---

    def open_tag(self, payload: str) -> None:
        """Open a tag: insert the mark-open text, then run the print-open hook."""
        if self.mark_tags:
            self._out.out_string(self._tags.mark_open(payload))
        if self.print_tags:
            self._tags.print_open(payload)
        # Only a tag whose hooks succeeded can be closed.
        self._open_tags.append(payload)

    def close_tag(self) -> None:
        """Close the innermost tag: run print-close, then insert the mark-close text."""
        if not self._open_tags:
            return
        payload = self._open_tags.pop()
        if self.print_tags:
            self._tags.print_close(payload)
        if self.mark_tags:
            self._out.out_string(self._tags.mark_close(payload))

    @contextmanager
    def tag(self, payload: str) -> Iterator[None]:
        """Wrap the body in ``open_tag(payload)`` / ``close_tag()``."""
        self.open_tag(payload)
        try:
            yield
        finally:
            self.close_tag()
