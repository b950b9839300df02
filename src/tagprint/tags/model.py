# topmark:header:start
#
#   project      : TagPrint
#   file         : model.py
#   file_relpath : src/tagprint/tags/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structured tag values produced by the tag grammar parser.

A tag is a name plus an ordered sequence of key/value attributes. Attribute
values keep their *source form*: a value that was written as a double-quoted
string keeps its quotes, so renderers that must quote values can emit it
verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


def quote(text: str) -> str:
    """Return ``text`` as a double-quoted literal, escaping ``\\`` and ``"``."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def unquote(literal: str) -> str:
    """Return the content of a double-quoted literal with escapes resolved.

    Bare (unquoted) text is returned unchanged.
    """
    if len(literal) < 2 or not (literal.startswith('"') and literal.endswith('"')):
        return literal
    out: list[str] = []
    chars = iter(literal[1:-1])
    for ch in chars:
        if ch == "\\":
            out.append(next(chars, "\\"))
        else:
            out.append(ch)
    return "".join(out)


class Attribute(NamedTuple):
    """A single ``(key value)`` pair of a tag."""

    key: str
    value: str

    @property
    def is_quoted(self) -> bool:
        """Whether the value was written as a double-quoted string."""
        return self.value.startswith('"')

    @property
    def text(self) -> str:
        """The value with quotes removed and escapes resolved."""
        return unquote(self.value)

    def quoted_value(self) -> str:
        """Return the value as a double-quoted literal.

        Values that are already quoted are returned as-is.
        """
        return self.value if self.is_quoted else quote(self.value)


@dataclass(frozen=True)
class Tag:
    """A parsed tag: ``name`` and its ordered ``attributes``.

    Attributes:
        name (str): The tag name (head atom of the payload).
        attributes (tuple[Attribute, ...]): Attribute pairs in source order.
    """

    name: str
    attributes: tuple[Attribute, ...] = field(default_factory=tuple)

    @property
    def is_bare(self) -> bool:
        """True for tags without attributes."""
        return not self.attributes
