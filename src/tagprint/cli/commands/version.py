# topmark:header:start
#
#   project      : TagPrint
#   file         : version.py
#   file_relpath : src/tagprint/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagPrint `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tagprint.constants import TAGPRINT_VERSION

if TYPE_CHECKING:
    from tagprint.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the installed version of TagPrint.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    console: ConsoleLike = ctx.obj["console"]
    console.print(console.styled(TAGPRINT_VERSION, bold=True))
