# topmark:header:start
#
#   project      : TagPrint
#   file         : __init__.py
#   file_relpath : src/tagprint/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagPrint configuration and logging.

Public modules:
    - tagprint.config.model
    - tagprint.config.loaders
    - tagprint.config.logging
"""

from __future__ import annotations
