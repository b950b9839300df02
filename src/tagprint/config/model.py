# topmark:header:start
#
#   project      : TagPrint
#   file         : model.py
#   file_relpath : src/tagprint/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable TagPrint configuration.

The configuration selects the rendering mode and the attribute names the
ANSI renderer acts upon. It is built from a TOML table (see
[`tagprint.config.loaders`][tagprint.config.loaders]) and may be overridden
from the command line with [`Config.with_overrides`][tagprint.config.model.Config.with_overrides].
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Final

from tagprint.rendering.base import TagMode

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

KEY_MODE: Final[str] = "mode"
KEY_ATTRIBUTES: Final[str] = "attributes"


class ConfigError(ValueError):
    """Invalid configuration value or unreadable configuration source."""


@dataclass(frozen=True)
class Config:
    """Effective configuration.

    Attributes:
        mode (TagMode): Rendering mode to install.
        attributes (tuple[str, ...]): Attribute names registered for `TagMode.ATTR`.
        source (str | None): Where the values came from, for diagnostics.
    """

    mode: TagMode = TagMode.TEXT
    attributes: tuple[str, ...] = ()
    source: str | None = None

    @classmethod
    def from_defaults(cls) -> Config:
        return cls()

    @classmethod
    def from_toml_dict(cls, data: Mapping[str, Any], *, source: str | None = None) -> Config:
        """Build a configuration from a ``[tool.tagprint]``-style table.

        Unknown keys are ignored.

        Raises:
            ConfigError: If ``mode`` is not a known mode or ``attributes`` is
                not a list of strings.
        """
        where = f" in {source}" if source else ""
        raw_mode = data.get(KEY_MODE, TagMode.TEXT.value)
        try:
            mode = TagMode(str(raw_mode).lower())
        except ValueError as exc:
            choices = ", ".join(m.value for m in TagMode)
            raise ConfigError(f"Invalid mode {raw_mode!r}{where} (expected one of: {choices})") from exc

        raw_attrs = data.get(KEY_ATTRIBUTES, [])
        if not isinstance(raw_attrs, list) or not all(isinstance(a, str) for a in raw_attrs):
            raise ConfigError(f"'{KEY_ATTRIBUTES}'{where} must be a list of strings")

        return cls(mode=mode, attributes=_dedupe(raw_attrs), source=source)

    def with_overrides(
        self,
        *,
        mode: TagMode | None = None,
        attributes: Iterable[str] = (),
    ) -> Config:
        """Return a copy with ``mode`` replaced and ``attributes`` appended."""
        return replace(
            self,
            mode=mode or self.mode,
            attributes=_dedupe([*self.attributes, *attributes]),
        )


def _dedupe(names: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(names))
