# topmark:header:start
#
#   project      : TagPrint
#   file         : dispatch.py
#   file_relpath : src/tagprint/rendering/dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mode dispatcher: select a renderer and bind it onto a formatter.

Exactly one mode is bound to a formatter at a time. `with_mode` installs a
mode temporarily and restores the previous hooks, output functions and
mark/print flags on every exit path.

Example:
    ```python
    fmt = Formatter.in_memory()
    with with_mode(fmt, TagMode.TEXT):
        with fmt.tag('(section (id intro))'):
            fmt.print_string("hello")
    ```
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tagprint.config.logging import get_logger
from tagprint.rendering.attr import DEFAULT_ATTRIBUTES, AttrRenderer
from tagprint.rendering.base import NullRenderer, TagMode, TagRenderer
from tagprint.rendering.html import HtmlRenderer
from tagprint.rendering.text import TextRenderer

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from tagprint.config.logging import TagprintLogger
    from tagprint.config.model import Config
    from tagprint.engine.formatter import Formatter, OutFunctions, TagFunctions

logger: TagprintLogger = get_logger(__name__)


def make_renderer(mode: TagMode | str, *, attributes: Iterable[str] | None = None) -> TagRenderer:
    """Build the renderer for ``mode``.

    Args:
        mode (TagMode | str): Rendering mode (enum member or its value).
        attributes (Iterable[str] | None): Allow-list for `TagMode.ATTR`.
            Defaults to a copy of the default allow-list.

    Returns:
        TagRenderer: A fresh renderer instance.

    Raises:
        ValueError: If ``mode`` is not a known mode name.
    """
    mode = TagMode(mode)
    if mode is TagMode.HTML:
        return HtmlRenderer()
    if mode is TagMode.TEXT:
        return TextRenderer()
    if mode is TagMode.ATTR:
        return AttrRenderer(DEFAULT_ATTRIBUTES if attributes is None else attributes)
    return NullRenderer()


def install(
    fmt: Formatter,
    mode: TagMode | str,
    *,
    attributes: Iterable[str] | None = None,
) -> TagRenderer:
    """Bind the renderer for ``mode`` onto ``fmt`` and return it."""
    renderer = make_renderer(mode, attributes=attributes)
    renderer.install(fmt)
    logger.debug("installed %s renderer", renderer.mode.value)
    return renderer


def install_from_config(fmt: Formatter, config: Config) -> TagRenderer:
    """Install the configured mode; configured attributes extend the default allow-list."""
    return install(fmt, config.mode, attributes=[*DEFAULT_ATTRIBUTES, *config.attributes])


@dataclass(frozen=True)
class FormatterState:
    """Snapshot of everything a renderer may rebind on a formatter."""

    tag_functions: TagFunctions
    out_functions: OutFunctions
    mark_tags: bool
    print_tags: bool

    @classmethod
    def capture(cls, fmt: Formatter) -> FormatterState:
        return cls(
            tag_functions=fmt.get_tag_functions(),
            out_functions=fmt.get_out_functions(),
            mark_tags=fmt.mark_tags,
            print_tags=fmt.print_tags,
        )

    def restore(self, fmt: Formatter) -> None:
        fmt.mark_tags = self.mark_tags
        fmt.print_tags = self.print_tags
        fmt.set_tag_functions(self.tag_functions)
        fmt.set_out_functions(self.out_functions)


@contextmanager
def with_mode(
    fmt: Formatter,
    mode: TagMode | str,
    *,
    attributes: Iterable[str] | None = None,
) -> Iterator[TagRenderer]:
    """Temporarily install ``mode`` on ``fmt``.

    Yields:
        TagRenderer: The installed renderer.
    """
    saved = FormatterState.capture(fmt)
    renderer = install(fmt, mode, attributes=attributes)
    try:
        yield renderer
    finally:
        try:
            renderer.detach(fmt)
        finally:
            saved.restore(fmt)
            logger.debug("restored formatter after %s mode", renderer.mode.value)
