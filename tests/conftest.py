# topmark:header:start
#
#   project      : TagPrint
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TagPrint test suite.

Notes:
    The default ANSI attribute allow-list is process-wide. The autouse fixture
    below snapshots it around every test so that registrations made by one
    test never leak into another.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tagprint.engine.formatter import Formatter
from tagprint.rendering.attr import DEFAULT_ATTRIBUTES

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _isolate_default_attributes() -> Iterator[None]:
    saved = set(DEFAULT_ATTRIBUTES)
    yield
    DEFAULT_ATTRIBUTES._names.clear()  # pyright: ignore[reportPrivateUsage]
    DEFAULT_ATTRIBUTES._names.update(saved)  # pyright: ignore[reportPrivateUsage]


@pytest.fixture
def fmt() -> Formatter:
    """Return a fresh in-memory formatter."""
    return Formatter.in_memory()


def render(fmt: Formatter, payloads: list[str] | str, body: str = "") -> str:
    """Print ``body`` inside the nested ``payloads`` and return the formatter output.

    Args:
        fmt (Formatter): In-memory formatter with a mode already installed.
        payloads (list[str] | str): Tag payloads, outermost first.
        body (str): Text printed inside the innermost tag.

    Returns:
        str: Everything written to the formatter so far.
    """
    if isinstance(payloads, str):
        payloads = [payloads]
    if not payloads:
        fmt.print_string(body)
        return fmt.getvalue()
    with fmt.tag(payloads[0]):
        if len(payloads) == 1:
            fmt.print_string(body)
        else:
            render(fmt, payloads[1:], body)
    return fmt.getvalue()
