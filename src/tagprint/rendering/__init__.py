# topmark:header:start
#
#   project      : TagPrint
#   file         : __init__.py
#   file_relpath : src/tagprint/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag renderers for TagPrint.

Public modules:
    - tagprint.rendering.base
    - tagprint.rendering.html
    - tagprint.rendering.text
    - tagprint.rendering.attr
    - tagprint.rendering.dispatch
"""

from __future__ import annotations
