# topmark:header:start
#
#   project      : TagPrint
#   file         : render.py
#   file_relpath : src/tagprint/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagPrint `render` command.

Renders a text body wrapped in one or more nested tags, so a tag payload can
be previewed in every mode:

```
tagprint render '(section (title intro))' --body 'Hello'
tagprint render --mode html '(p (id "1") (class note))' --body 'Hello'
tagprint render --mode attr -a foreground '.foreground $(tput setaf 1)' --body 'red'
```

Payloads are given outermost first. ``attr`` mode falls back to ``none``
when color output is disabled.
"""

from __future__ import annotations

from contextlib import ExitStack
from dataclasses import replace
from typing import TYPE_CHECKING

import click

from tagprint.cli.cli_types import EnumChoiceParam
from tagprint.cli.errors import TagprintConfigError, TagprintTagError
from tagprint.cli.options import common_config_options
from tagprint.config.loaders import load_config
from tagprint.config.logging import get_logger
from tagprint.config.model import Config, ConfigError
from tagprint.engine.formatter import Formatter
from tagprint.rendering.base import TagMode
from tagprint.rendering.dispatch import install_from_config
from tagprint.tags.parser import TagSyntaxError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from tagprint.cli_shared.console_api import ConsoleLike
    from tagprint.config.logging import TagprintLogger

logger: TagprintLogger = get_logger(__name__)


def resolve_config(config_path: Path | None, *, no_config: bool) -> Config:
    """Load the configuration for a command, mapping failures onto CLI errors."""
    if no_config and config_path is None:
        return Config.from_defaults()
    try:
        return load_config(config_path)
    except ConfigError as exc:
        raise TagprintConfigError(str(exc)) from exc


def render_tagged(fmt: Formatter, config: Config, payloads: Sequence[str], body: str) -> None:
    """Print ``body`` inside the nested ``payloads`` using the configured mode."""
    renderer = install_from_config(fmt, config)
    with ExitStack() as stack:
        for payload in payloads:
            stack.enter_context(fmt.tag(payload))
        fmt.print_string(body)
    renderer.detach(fmt)
    fmt.flush()


@click.command(
    name="render",
    help="Render BODY wrapped in the given tag PAYLOADS (outermost first).",
)
@click.argument("payloads", nargs=-1, required=True)
@click.option(
    "--mode",
    type=EnumChoiceParam(TagMode),
    default=None,
    help=f"Rendering mode ({', '.join(m.value for m in TagMode)}). Overrides the config file.",
)
@click.option(
    "-a",
    "--attribute",
    "attributes",
    multiple=True,
    help="Register an attribute name for attr mode (repeatable).",
)
@click.option("--body", default="", help="Text printed inside the innermost tag.")
@common_config_options
@click.pass_context
def render_command(
    ctx: click.Context,
    *,
    payloads: tuple[str, ...],
    mode: TagMode | None,
    attributes: tuple[str, ...],
    body: str,
    config_path: Path | None,
    no_config: bool,
) -> None:
    console: ConsoleLike = ctx.obj["console"]

    config = resolve_config(config_path, no_config=no_config).with_overrides(
        mode=mode, attributes=attributes
    )
    if config.mode is TagMode.ATTR and not ctx.obj.get("color_enabled", False):
        logger.info("color output disabled: rendering attr tags in 'none' mode")
        config = replace(config, mode=TagMode.NONE)

    fmt = Formatter.in_memory()
    try:
        render_tagged(fmt, config, payloads, body)
    except TagSyntaxError as exc:
        raise TagprintTagError(f"{exc}: {exc.payload!r}") from exc

    console.print(fmt.getvalue())
