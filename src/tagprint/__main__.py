# topmark:header:start
#
#   project      : TagPrint
#   file         : __main__.py
#   file_relpath : src/tagprint/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point: ``python -m tagprint`` runs the ``tagprint`` CLI."""

from __future__ import annotations

from tagprint.cli.main import cli

if __name__ == "__main__":
    cli()
