# topmark:header:start
#
#   project      : TagPrint
#   file         : console.py
#   file_relpath : src/tagprint/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-backed console for user-facing program output."""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from tagprint.cli_shared.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, styled text carries ANSI codes.
        out (TextIO | None): Standard output stream. Defaults to `sys.stdout`.
        err (TextIO | None): Error stream. Defaults to `sys.stderr`.
    """

    enable_color: bool

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        # Resolved lazily so Click's test runner stream swapping is honored.
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        # color=True: rendered ANSI attributes must survive even when stdout is not a TTY.
        click.echo(text, nl=nl, file=self.out, color=True)

    def error(self, text: str, *, nl: bool = True) -> None:
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged when color is off."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
