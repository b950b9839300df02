# topmark:header:start
#
#   project      : TagPrint
#   file         : constants.py
#   file_relpath : src/tagprint/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagPrint constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TAGPRINT_VERSION: str = get_version("tagprint")
