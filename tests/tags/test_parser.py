# topmark:header:start
#
#   project      : TagPrint
#   file         : test_parser.py
#   file_relpath : tests/tags/test_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit and property tests for the tag payload grammar."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tagprint.tags.model import Attribute, Tag
from tagprint.tags.parser import (
    MALFORMED_ARG_MESSAGE,
    MALFORMED_TAG_MESSAGE,
    MalformedArgError,
    MalformedTagError,
    TagSyntaxError,
    TokenKind,
    parse,
    tokenize,
)


def test_bare_atom_has_no_attributes() -> None:
    """A bare atom is a tag name without attributes."""
    tag = parse("br")
    assert tag == Tag("br")
    assert tag.is_bare


def test_list_without_arguments() -> None:
    assert parse("(p)") == Tag("p")


def test_grouped_single_argument() -> None:
    """`(p ((id "1")))` groups the arguments in one extra list."""
    tag = parse('(p ((id "1")))')
    assert tag.name == "p"
    assert tag.attributes == (Attribute("id", '"1"'),)
    assert tag.attributes[0].is_quoted
    assert tag.attributes[0].text == "1"


def test_grouped_arguments_keep_order() -> None:
    tag = parse('(p ((id "1") (title foo)))')
    assert [a.key for a in tag.attributes] == ["id", "title"]
    assert tag.attributes[1] == Attribute("title", "foo")


def test_flat_arguments() -> None:
    tag = parse("(a (href x) (class y) (id z))")
    assert tag.attributes == (
        Attribute("href", "x"),
        Attribute("class", "y"),
        Attribute("id", "z"),
    )


def test_quoted_value_with_escapes_and_spaces() -> None:
    tag = parse(r'(p (title "say \"hi\" (twice)"))')
    (attr,) = tag.attributes
    assert attr.value == r'"say \"hi\" (twice)"'
    assert attr.text == 'say "hi" (twice)'


@pytest.mark.parametrize("payload", ["(p (badarg))", "(p (a b c))", "(p ())", "(p ((a b) c))", "(p (a (b)))"])
def test_malformed_argument(payload: str) -> None:
    with pytest.raises(MalformedArgError) as exc_info:
        parse(payload)
    assert str(exc_info.value) == MALFORMED_ARG_MESSAGE
    assert exc_info.value.payload == payload


@pytest.mark.parametrize(
    "payload",
    ["", "   ", "()", "((p))", "(p", "p)", ")", "a b", "(p (id x)) extra", '(p (title "open'],
)
def test_malformed_tag(payload: str) -> None:
    with pytest.raises(MalformedTagError) as exc_info:
        parse(payload)
    assert str(exc_info.value) == MALFORMED_TAG_MESSAGE


def test_errors_share_a_value_error_base() -> None:
    """Both grammar errors are `ValueError`s with a common base."""
    assert issubclass(MalformedTagError, TagSyntaxError)
    assert issubclass(MalformedArgError, TagSyntaxError)
    assert issubclass(TagSyntaxError, ValueError)


def test_tokenize_keeps_quoted_source_form() -> None:
    tokens = tokenize('(p (id "a b"))')
    assert [t.kind for t in tokens] == [
        TokenKind.LPAREN,
        TokenKind.ATOM,
        TokenKind.LPAREN,
        TokenKind.ATOM,
        TokenKind.ATOM,
        TokenKind.RPAREN,
        TokenKind.RPAREN,
    ]
    assert tokens[4].text == '"a b"'
    assert tokens[4].pos == 7


def test_parse_is_memoized() -> None:
    assert parse("(p (id memo))") is parse("(p (id memo))")


# --- Property tests -------------------------------------------------------------

bare_atoms = st.from_regex(r"[A-Za-z_][A-Za-z0-9_.:-]{0,8}", fullmatch=True)
quoted_atoms = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters='"\\'),
    max_size=8,
).map(lambda s: f'"{s}"')
atoms = st.one_of(bare_atoms, quoted_atoms)


@given(
    name=bare_atoms,
    pairs=st.lists(st.tuples(bare_atoms, atoms), max_size=5),
    grouped=st.booleans(),
)
def test_well_formed_payloads_round_trip(
    name: str, pairs: list[tuple[str, str]], grouped: bool
) -> None:
    """Any payload built from the grammar parses back to its parts."""
    args = " ".join(f"({k} {v})" for k, v in pairs)
    if grouped and pairs:
        args = f"({args})"
    payload = f"({name} {args})" if pairs else f"({name})"

    tag = parse(payload)

    assert tag.name == name
    assert tag.attributes == tuple(Attribute(k, v) for k, v in pairs)
