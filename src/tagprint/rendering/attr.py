# topmark:header:start
#
#   project      : TagPrint
#   file         : attr.py
#   file_relpath : src/tagprint/rendering/attr.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI attribute renderer.

Attribute tags have the payload form ``.<name> <rest>``. Only names present in
the renderer's allow-list are acted upon:

- ``.foreground <value>`` and ``.background <value>`` print ``value`` verbatim
  (an already resolved terminal escape) and leave the terminal *dirty*;
- any other registered attribute prints the raw payload followed by a forced
  newline;
- unregistered attributes are ignored.

Colors are not reset when a tag closes: the formatter may break a line
without closing the tag first. Instead, the renderer wraps the formatter's
output functions in a [`ColorResetSink`][tagprint.rendering.attr.ColorResetSink],
which emits the reset sequence in front of every newline while the terminal
is dirty.

Installing binds the engine default hooks with only print-open replaced, and
turns marking off, so no markup from a previously installed mode survives.
"""

from __future__ import annotations

import re
from dataclasses import replace
from functools import partial
from typing import TYPE_CHECKING, Final

from tagprint.config.logging import get_logger
from tagprint.engine.formatter import DEFAULT_TAG_FUNCTIONS, OutFunctions
from tagprint.rendering.base import TagMode, TagRenderer

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from tagprint.config.logging import TagprintLogger
    from tagprint.engine.formatter import Formatter

logger: TagprintLogger = get_logger(__name__)

# Restore default foreground and background colors.
RESET_SEQUENCE: Final[str] = "\x1b[39;49m"

COLOR_ATTRIBUTES: Final[frozenset[str]] = frozenset({"foreground", "background"})

_ATTRIBUTE_RE: Final[re.Pattern[str]] = re.compile(r"\s*\.(\S+)\s*([^\n]*)")


def _match(payload: str) -> re.Match[str] | None:
    return _ATTRIBUTE_RE.match(payload)


def attribute_name(payload: str) -> str | None:
    """Return the attribute name of a ``.<name> <rest>`` payload.

    Payloads without a leading ``.`` have no attribute name.
    """
    m = _match(payload)
    return m.group(1) if m else None


def color_directive(payload: str) -> str | None:
    """Return the value of a ``.foreground``/``.background`` payload.

    The value runs up to the first newline. Other payloads return None.
    """
    m = _match(payload)
    if m is None or m.group(1) not in COLOR_ATTRIBUTES:
        return None
    return m.group(2)


class AttributeSet:
    """Allow-list of attribute names. Grows only through `register`."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: set[str] = set(names)

    def register(self, name: str) -> None:
        self._names.add(name)

    def copy(self) -> AttributeSet:
        return AttributeSet(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"AttributeSet({sorted(self._names)!r})"


# Seed for renderers built without an explicit allow-list.
DEFAULT_ATTRIBUTES = AttributeSet()


def register_attribute(name: str) -> None:
    """Add ``name`` to the default attribute allow-list."""
    DEFAULT_ATTRIBUTES.register(name)


class ColorResetSink:
    """Output-function wrapper resetting terminal colors before newlines.

    Attributes:
        clean (bool): True while the terminal is at its default colors.
        reset_sequence (str): Escape written to restore the defaults.
    """

    clean: bool

    def __init__(self, reset_sequence: str = RESET_SEQUENCE) -> None:
        self.reset_sequence = reset_sequence
        self.clean = True
        self._inner: OutFunctions | None = None

    @property
    def inner(self) -> OutFunctions:
        if self._inner is None:
            raise RuntimeError("ColorResetSink is not attached to any output functions")
        return self._inner

    def wrap(self, inner: OutFunctions) -> OutFunctions:
        """Attach to ``inner`` and return the intercepting output functions."""
        self._inner = inner
        return OutFunctions(
            out_string=self.out_string,
            out_newline=self.out_newline,
            out_spaces=inner.out_spaces,
            out_flush=inner.out_flush,
        )

    def mark_dirty(self) -> None:
        self.clean = False

    def reset(self) -> None:
        """Write the reset sequence if a color is active."""
        if not self.clean:
            self.inner.out_string(self.reset_sequence)
            logger.trace("attr: color reset")
        self.clean = True

    def out_newline(self) -> None:
        self.reset()
        self.inner.out_newline()

    def out_string(self, text: str) -> None:
        if self.clean or "\n" not in text:
            self.inner.out_string(text)
            return
        head, _, tail = text.partition("\n")
        self.inner.out_string(head)
        self.reset()
        self.inner.out_string("\n" + tail)


class AttrRenderer(TagRenderer):
    """Render registered attribute tags as ANSI escapes.

    Args:
        attributes (Iterable[str]): Initial allow-list; copied at construction.
    """

    mode = TagMode.ATTR

    def __init__(self, attributes: Iterable[str] = ()) -> None:
        self.attributes = AttributeSet(attributes)
        self.sink = ColorResetSink()

    @property
    def clean(self) -> bool:
        """Whether the terminal is currently at its default colors."""
        return self.sink.clean

    def register_attribute(self, name: str) -> None:
        self.attributes.register(name)

    def print_open(self, fmt: Formatter, payload: str) -> None:
        name = attribute_name(payload)
        if name is None or name not in self.attributes:
            logger.trace("attr: ignoring %r", payload)
            return
        color = color_directive(payload)
        if color is not None:
            fmt.print_as(0, color)
            self.sink.mark_dirty()
        else:
            fmt.print_string(payload)
            fmt.force_newline()

    def install(self, fmt: Formatter) -> None:
        fmt.mark_tags = False
        fmt.print_tags = True
        fmt.set_tag_functions(replace(DEFAULT_TAG_FUNCTIONS, print_open=partial(self.print_open, fmt)))
        fmt.set_out_functions(self.sink.wrap(fmt.get_out_functions()))

    def detach(self, fmt: Formatter) -> None:
        self.sink.reset()
