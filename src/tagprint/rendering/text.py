# topmark:header:start
#
#   project      : TagPrint
#   file         : text.py
#   file_relpath : src/tagprint/rendering/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain-text tag renderer.

Only labelled tags are visible. The label is taken from the ``title``
attribute, or from ``id`` when there is no title; quotes are removed.
Labelled regions are wrapped in ``begin(label) `` / ``end(label)`` markers and
laid out as an indented block. Unlabelled tags have no effect at all, neither
on the text nor on the layout.

A tag carrying more than one ``title`` (or more than one ``id``) has no label.
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


class TextRenderer(StructuredTagRenderer):
    """Render labelled tags as ``begin``/``end`` markers."""

    mode = TagMode.TEXT

    @staticmethod
    def label(tag: Tag) -> str | None:
        """Return the label of ``tag``, or None when it has none.

        Args:
            tag (Tag): Parsed tag.

        Returns:
            str | None: The unquoted ``title`` value, else the unquoted ``id``
            value, else None. Duplicate ``title`` or ``id`` entries yield None.
        """
        titles = [a.text for a in tag.attributes if a.key == "title"]
        ids = [a.text for a in tag.attributes if a.key == "id"]
        if len(titles) > 1 or len(ids) > 1:
            logger.trace("text: ambiguous label on %r (titles=%s, ids=%s)", tag.name, titles, ids)
            return None
        if titles:
            return titles[0]
        if ids:
            return ids[0]
        return None

    def open_text(self, tag: Tag) -> str:
        label = self.label(tag)
        return "" if label is None else f"begin({label}) "

    def close_text(self, tag: Tag) -> str:
        label = self.label(tag)
        return "" if label is None else f"end({label})"

    def on_open(self, fmt: Formatter, tag: Tag) -> None:
        if self.label(tag) is not None:
            fmt.open_box(1)
            fmt.print_cut()

    def on_close(self, fmt: Formatter, tag: Tag) -> None:
        if self.label(tag) is not None:
            fmt.close_box()
            fmt.print_cut()
