# topmark:header:start
#
#   project      : TagPrint
#   file         : __init__.py
#   file_relpath : src/tagprint/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagPrint package.

TagPrint renders semantic tags attached to pretty-printed output. A tag is a
name plus key/value attributes; depending on the installed mode it becomes
HTML markup, ``begin``/``end`` text markers, ANSI color escapes, or nothing.

Example:
    ```python
    from tagprint import Formatter, TagMode, with_mode

    fmt = Formatter.in_memory()
    with with_mode(fmt, TagMode.HTML):
        with fmt.tag('(p (id "1"))'):
            fmt.print_string("hello")
    print(fmt.getvalue())
    ```
"""

from __future__ import annotations

from tagprint.engine.formatter import Formatter
from tagprint.rendering.attr import register_attribute
from tagprint.rendering.base import TagMode
from tagprint.rendering.dispatch import install, with_mode
from tagprint.tags.model import Attribute, Tag
from tagprint.tags.parser import parse

__all__ = [
    "Attribute",
    "Formatter",
    "Tag",
    "TagMode",
    "install",
    "parse",
    "register_attribute",
    "with_mode",
]
