# topmark:header:start
#
#   project      : TagPrint
#   file         : __init__.py
#   file_relpath : src/tagprint/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pretty-printing engine collaborator used by the tag renderers."""

from __future__ import annotations

from tagprint.engine.formatter import Formatter, OutFunctions, TagFunctions

__all__ = ["Formatter", "OutFunctions", "TagFunctions"]
