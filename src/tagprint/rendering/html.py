# topmark:header:start
#
#   project      : TagPrint
#   file         : html.py
#   file_relpath : src/tagprint/rendering/html.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML tag renderer.

Each tag becomes an element; attributes are rendered in source order and
every tagged region is laid out as a block indented by one column.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tagprint.config.logging import get_logger
from tagprint.rendering.base import StructuredTagRenderer, TagMode

if TYPE_CHECKING:
    from tagprint.config.logging import TagprintLogger
    from tagprint.engine.formatter import Formatter
    from tagprint.tags.model import Tag

logger: TagprintLogger = get_logger(__name__)


class HtmlRenderer(StructuredTagRenderer):
    """Render tags as HTML open/close elements."""

    mode = TagMode.HTML

    def open_text(self, tag: Tag) -> str:
        """Return ``<name k1="v1" ...>``, or ``<name>`` for bare tags."""
        if tag.is_bare:
            return f"<{tag.name}>"
        attrs = " ".join(f"{attr.key}={attr.quoted_value()}" for attr in tag.attributes)
        return f"<{tag.name} {attrs}>"

    def close_text(self, tag: Tag) -> str:
        return f"</{tag.name}>"

    def on_open(self, fmt: Formatter, tag: Tag) -> None:
        logger.trace("html: open block for <%s>", tag.name)
        fmt.open_box(1)
        fmt.print_cut()

    def on_close(self, fmt: Formatter, tag: Tag) -> None:
        fmt.close_box()
        fmt.print_cut()
