# topmark:header:start
#
#   project      : TagPrint
#   file         : console_api.py
#   file_relpath : src/tagprint/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic console interface for program output.

Rendered documents and user-facing messages go through a console; internal
diagnostics go through `logging`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from typing import TextIO


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    @property
    def out(self) -> TextIO:
        """Stream receiving program output."""
        ...

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...
