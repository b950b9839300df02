# topmark:header:start
#
#   project      : TagPrint
#   file         : test_attr_renderer.py
#   file_relpath : tests/rendering/test_attr_renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the ANSI attribute renderer and its newline-anchored color reset."""

from __future__ import annotations

import pytest

from tagprint.engine.formatter import DEFAULT_TAG_FUNCTIONS, Formatter
from tagprint.rendering.attr import (
    DEFAULT_ATTRIBUTES,
    RESET_SEQUENCE,
    AttributeSet,
    AttrRenderer,
    ColorResetSink,
    attribute_name,
    color_directive,
    register_attribute,
)
from tagprint.rendering.dispatch import make_renderer
from tagprint.rendering.html import HtmlRenderer
from tests.conftest import render

RED = "\x1b[31m"
BLUE_BG = "\x1b[44m"


@pytest.fixture
def renderer(fmt: Formatter) -> AttrRenderer:
    r = AttrRenderer(["foreground", "background"])
    r.install(fmt)
    return r


# --- payload helpers -------------------------------------------------------------


@pytest.mark.parametrize(
    ("payload", "name"),
    [
        (f".foreground {RED}", "foreground"),
        ("  .bold", "bold"),
        (".unknown x y", "unknown"),
        ("foreground x", None),
        ("", None),
    ],
)
def test_attribute_name(payload: str, name: str | None) -> None:
    assert attribute_name(payload) == name


@pytest.mark.parametrize(
    ("payload", "value"),
    [
        (f".foreground {RED}", RED),
        (f".background {BLUE_BG}\nignored", BLUE_BG),
        (".foreground", ""),
        (".bold on", None),
        ("plain", None),
    ],
)
def test_color_directive(payload: str, value: str | None) -> None:
    assert color_directive(payload) == value


def test_attribute_set_is_idempotent() -> None:
    names = AttributeSet()
    names.register("foreground")
    names.register("foreground")
    assert len(names) == 1
    assert "foreground" in names
    assert list(names) == ["foreground"]


# --- rendering ---------------------------------------------------------------------


def test_color_then_newline_resets_once(fmt: Formatter, renderer: AttrRenderer) -> None:
    fmt.open_tag(f".foreground {RED}")
    assert fmt.getvalue() == RED
    assert not renderer.clean

    fmt.force_newline()
    assert fmt.getvalue() == RED + RESET_SEQUENCE + "\n"
    assert renderer.clean

    fmt.force_newline()
    assert fmt.getvalue() == RED + RESET_SEQUENCE + "\n\n"


def test_reset_happens_without_tag_close(fmt: Formatter, renderer: AttrRenderer) -> None:
    """Colors are reset by the line break itself, even inside an open tag."""
    fmt.open_tag(f".background {BLUE_BG}")
    fmt.print_string("a")
    fmt.force_newline()
    fmt.print_string("b")
    assert fmt.getvalue() == f"{BLUE_BG}a{RESET_SEQUENCE}\nb"


def test_unregistered_attribute_is_ignored(fmt: Formatter, renderer: AttrRenderer) -> None:
    out = render(fmt, ".unknown x", "body")
    assert out == "body"
    assert renderer.clean


def test_registered_non_color_attribute_prints_payload_and_newline(fmt: Formatter) -> None:
    renderer = AttrRenderer(["bold"])
    renderer.install(fmt)
    out = render(fmt, ".bold on", "body")
    assert out == ".bold on\nbody"
    assert renderer.clean


def test_registration_after_install_takes_effect(fmt: Formatter, renderer: AttrRenderer) -> None:
    render(fmt, ".bold on")
    assert fmt.getvalue() == ""
    renderer.register_attribute("bold")
    assert render(fmt, ".bold on") == ".bold on\n"


def test_install_replaces_the_previous_mode_hooks(fmt: Formatter) -> None:
    HtmlRenderer().install(fmt)
    AttrRenderer(["foreground"]).install(fmt)
    hooks = fmt.get_tag_functions()
    assert hooks.mark_open is DEFAULT_TAG_FUNCTIONS.mark_open
    assert hooks.mark_close is DEFAULT_TAG_FUNCTIONS.mark_close
    assert hooks.print_close is DEFAULT_TAG_FUNCTIONS.print_close
    assert hooks.print_open is not DEFAULT_TAG_FUNCTIONS.print_open
    assert not fmt.mark_tags
    assert fmt.print_tags
    assert render(fmt, f".foreground {RED}", "x") == f"{RED}x"


def test_color_escape_takes_no_columns(fmt: Formatter, renderer: AttrRenderer) -> None:
    fmt.open_tag(f".foreground {RED}")
    fmt.print_string("x")
    assert fmt.column == 1


def test_marking_stays_disabled_on_a_fresh_formatter(fmt: Formatter, renderer: AttrRenderer) -> None:
    assert not fmt.mark_tags
    assert render(fmt, f".foreground {RED}", "x") == f"{RED}x"


def test_newline_inside_printed_text_resets_first(fmt: Formatter, renderer: AttrRenderer) -> None:
    fmt.open_tag(f".foreground {RED}")
    fmt.print_string("a\nb\nc")
    assert fmt.getvalue() == f"{RED}a{RESET_SEQUENCE}\nb\nc"
    assert renderer.clean


def test_detach_flushes_pending_reset(fmt: Formatter, renderer: AttrRenderer) -> None:
    fmt.open_tag(f".foreground {RED}")
    renderer.detach(fmt)
    renderer.detach(fmt)
    assert fmt.getvalue() == RED + RESET_SEQUENCE


def test_color_state_is_per_renderer() -> None:
    """Two formatters with their own renderers never share color state."""
    fmt_a, fmt_b = Formatter.in_memory(), Formatter.in_memory()
    renderer_a = AttrRenderer(["foreground"])
    renderer_b = AttrRenderer(["foreground"])
    renderer_a.install(fmt_a)
    renderer_b.install(fmt_b)

    fmt_a.open_tag(f".foreground {RED}")
    fmt_b.force_newline()

    assert not renderer_a.clean
    assert renderer_b.clean
    assert fmt_b.getvalue() == "\n"


def test_default_allow_list_seeds_new_renderers() -> None:
    register_attribute("foreground")
    renderer = make_renderer("attr")
    assert isinstance(renderer, AttrRenderer)
    assert "foreground" in renderer.attributes

    # The renderer owns a copy: later registrations do not reach it.
    register_attribute("background")
    assert "background" in DEFAULT_ATTRIBUTES
    assert "background" not in renderer.attributes


def test_unattached_sink_only_fails_when_it_has_to_write() -> None:
    sink = ColorResetSink()
    sink.reset()
    sink.mark_dirty()
    with pytest.raises(RuntimeError):
        sink.reset()
