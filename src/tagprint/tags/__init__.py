# topmark:header:start
#
#   project      : TagPrint
#   file         : __init__.py
#   file_relpath : src/tagprint/tags/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag payload model and grammar.

Public modules:
    - tagprint.tags.model
    - tagprint.tags.parser
"""

from __future__ import annotations

from tagprint.tags.model import Attribute, Tag
from tagprint.tags.parser import (
    MalformedArgError,
    MalformedTagError,
    TagSyntaxError,
    parse,
)

__all__ = [
    "Attribute",
    "MalformedArgError",
    "MalformedTagError",
    "Tag",
    "TagSyntaxError",
    "parse",
]
