# topmark:header:start
#
#   project      : TagPrint
#   file         : base.py
#   file_relpath : src/tagprint/rendering/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Renderer abstraction shared by every tag rendering mode.

A renderer exposes the capability set of the formatter's tag hooks:

- `mark_open` / `mark_close` return literal text inserted at a tag boundary;
- `print_open` / `print_close` only affect layout (boxes, breaks).

`install()` binds those hooks (and the mark/print flags) onto a
[`Formatter`][tagprint.engine.formatter.Formatter]. The variants are closed:
[`TagMode`][tagprint.rendering.base.TagMode] names them and
[`make_renderer`][tagprint.rendering.dispatch.make_renderer] builds them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from functools import partial
from typing import TYPE_CHECKING, ClassVar

from tagprint.engine.formatter import TagFunctions
from tagprint.tags.parser import parse

if TYPE_CHECKING:
    from tagprint.engine.formatter import Formatter
    from tagprint.tags.model import Tag


class TagMode(str, Enum):
    """Tag rendering modes.

    Attributes:
        HTML: Tags become HTML elements laid out as indented blocks.
        TEXT: Labelled tags become ``begin(label)`` / ``end(label)`` markers.
        ATTR: Registered attributes become ANSI color escapes.
        NONE: Tags are invisible (no text, no layout effect).
    """

    HTML = "html"
    TEXT = "text"
    ATTR = "attr"
    NONE = "none"


class TagRenderer(ABC):
    """Base class of the tag renderers."""

    mode: ClassVar[TagMode]

    def mark_open(self, payload: str) -> str:
        return ""

    def mark_close(self, payload: str) -> str:
        return ""

    def print_open(self, fmt: Formatter, payload: str) -> None:
        return None

    def print_close(self, fmt: Formatter, payload: str) -> None:
        return None

    def tag_functions(self, fmt: Formatter) -> TagFunctions:
        """Return the hooks of this renderer bound to ``fmt``."""
        return TagFunctions(
            mark_open=self.mark_open,
            mark_close=self.mark_close,
            print_open=partial(self.print_open, fmt),
            print_close=partial(self.print_close, fmt),
        )

    @abstractmethod
    def install(self, fmt: Formatter) -> None:
        """Bind this renderer onto ``fmt``."""

    def detach(self, fmt: Formatter) -> None:
        """Settle any pending output before the renderer is unbound from ``fmt``."""
        return None


class StructuredTagRenderer(TagRenderer):
    """Renderer over parsed [`Tag`][tagprint.tags.model.Tag] values.

    Subclasses implement the four tag-level operations; the payload-level
    hooks parse the payload and delegate.
    """

    @abstractmethod
    def open_text(self, tag: Tag) -> str: ...

    @abstractmethod
    def close_text(self, tag: Tag) -> str: ...

    @abstractmethod
    def on_open(self, fmt: Formatter, tag: Tag) -> None: ...

    @abstractmethod
    def on_close(self, fmt: Formatter, tag: Tag) -> None: ...

    def mark_open(self, payload: str) -> str:
        return self.open_text(parse(payload))

    def mark_close(self, payload: str) -> str:
        return self.close_text(parse(payload))

    def print_open(self, fmt: Formatter, payload: str) -> None:
        self.on_open(fmt, parse(payload))

    def print_close(self, fmt: Formatter, payload: str) -> None:
        self.on_close(fmt, parse(payload))

    def install(self, fmt: Formatter) -> None:
        fmt.mark_tags = True
        fmt.print_tags = True
        fmt.set_tag_functions(self.tag_functions(fmt))


class NullRenderer(TagRenderer):
    """Disabled mode: tag markers are stripped from the output."""

    mode = TagMode.NONE

    def install(self, fmt: Formatter) -> None:
        fmt.mark_tags = False
        fmt.print_tags = False
