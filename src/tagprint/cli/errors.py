# topmark:header:start
#
#   project      : TagPrint
#   file         : errors.py
#   file_relpath : src/tagprint/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TagPrint CLI.

Library errors ([`TagSyntaxError`][tagprint.tags.parser.TagSyntaxError],
[`ConfigError`][tagprint.config.model.ConfigError]) are translated into these
at the command boundary so that each maps onto a distinct exit code.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tagprint.cli_shared.exit_codes import ExitCode


class TagprintError(click.ClickException):
    """Base class for all TagPrint CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error through the project console when one is available."""
        ctx = click.get_current_context(silent=True)
        console = None
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class TagprintUsageError(TagprintError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class TagprintTagError(TagprintError):
    """A tag payload does not match the tag grammar."""

    exit_code = ExitCode.TAG_ERROR


class TagprintConfigError(TagprintError):
    """Missing, unreadable or invalid configuration."""

    exit_code = ExitCode.CONFIG_ERROR
