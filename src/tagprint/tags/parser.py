# topmark:header:start
#
#   project      : TagPrint
#   file         : parser.py
#   file_relpath : src/tagprint/tags/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag payload grammar: tokenizer and recursive-descent parser.

Grammar:

```
TAG   := ATOM | "(" ATOM ARG* ")" | "(" ATOM "(" ARG+ ")" ")"
ARG   := "(" ATOM ATOM ")"
ATOM  := bare token | double-quoted string
```

The last `TAG` form groups every argument in one extra list, e.g.
``(p ((id "1") (title foo)))``. A single trailing element is read as such a
group only when it is a non-empty list made exclusively of lists.

Malformed payloads are programmer errors in tag-producing code; they raise
[`TagSyntaxError`][tagprint.tags.parser.TagSyntaxError] subclasses and are
never recovered from by the renderers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Final, Union

from tagprint.tags.model import Attribute, Tag

MALFORMED_TAG_MESSAGE: Final[str] = "malformed tag: expected `name` or `(name (key val)...)`"
MALFORMED_ARG_MESSAGE: Final[str] = "malformed arg: expected `(key val)`"


class TagSyntaxError(ValueError):
    """Base class for tag payload grammar violations."""

    message: str = MALFORMED_TAG_MESSAGE

    def __init__(self, payload: str) -> None:
        super().__init__(self.message)
        self.payload = payload


class MalformedTagError(TagSyntaxError):
    """The payload matches neither ``name`` nor ``(name (key val)...)``."""

    message = MALFORMED_TAG_MESSAGE


class MalformedArgError(TagSyntaxError):
    """An argument element is not a two-atom list ``(key val)``."""

    message = MALFORMED_ARG_MESSAGE


class TokenKind(Enum):
    """Lexical token kinds."""

    LPAREN = "("
    RPAREN = ")"
    ATOM = "atom"


@dataclass(frozen=True)
class Token:
    """A lexical token; ``text`` is the atom in its source form."""

    kind: TokenKind
    text: str
    pos: int


_DELIMITERS: Final[str] = '()"'

# A parsed s-expression node: an atom (source text) or a list of nodes.
_Node = Union[str, list["_Node"]]


def tokenize(payload: str) -> list[Token]:
    """Split ``payload`` into parenthesis and atom tokens.

    Quoted atoms keep their surrounding quotes and escapes.

    Raises:
        MalformedTagError: On an unterminated quoted string.
    """
    tokens: list[Token] = []
    i: int = 0
    n: int = len(payload)
    while i < n:
        ch = payload[i]
        if ch.isspace():
            i += 1
        elif ch == "(":
            tokens.append(Token(TokenKind.LPAREN, ch, i))
            i += 1
        elif ch == ")":
            tokens.append(Token(TokenKind.RPAREN, ch, i))
            i += 1
        elif ch == '"':
            j = i + 1
            while j < n and payload[j] != '"':
                j += 2 if payload[j] == "\\" else 1
            if j >= n:
                raise MalformedTagError(payload)
            tokens.append(Token(TokenKind.ATOM, payload[i : j + 1], i))
            i = j + 1
        else:
            j = i
            while j < n and not payload[j].isspace() and payload[j] not in _DELIMITERS:
                j += 1
            tokens.append(Token(TokenKind.ATOM, payload[i:j], i))
            i = j
    return tokens


class _Parser:
    """Recursive-descent reader turning tokens into nested nodes."""

    def __init__(self, payload: str) -> None:
        self.payload = payload
        self.tokens = tokenize(payload)
        self.pos = 0

    def _next(self) -> Token:
        if self.pos >= len(self.tokens):
            raise MalformedTagError(self.payload)
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def read_node(self) -> _Node:
        tok = self._next()
        if tok.kind is TokenKind.ATOM:
            return tok.text
        if tok.kind is TokenKind.RPAREN:
            raise MalformedTagError(self.payload)
        items: list[_Node] = []
        while True:
            if self.pos >= len(self.tokens):
                raise MalformedTagError(self.payload)
            if self.tokens[self.pos].kind is TokenKind.RPAREN:
                self.pos += 1
                return items
            items.append(self.read_node())

    def read_payload(self) -> _Node:
        node = self.read_node()
        if self.pos != len(self.tokens):
            raise MalformedTagError(self.payload)
        return node


def _is_group(node: _Node) -> bool:
    return isinstance(node, list) and bool(node) and all(isinstance(n, list) for n in node)


def _to_attribute(node: _Node, payload: str) -> Attribute:
    if isinstance(node, list) and len(node) == 2:
        key, value = node
        if isinstance(key, str) and isinstance(value, str):
            return Attribute(key, value)
    raise MalformedArgError(payload)


@lru_cache(maxsize=512)
def parse(payload: str) -> Tag:
    """Parse a tag payload into a [`Tag`][tagprint.tags.model.Tag].

    Args:
        payload (str): The textual tag payload.

    Returns:
        Tag: The parsed tag.

    Raises:
        MalformedTagError: When the top-level shape is not ``name`` or
            ``(name ...)``.
        MalformedArgError: When an argument is not a ``(key val)`` pair.
    """
    node = _Parser(payload).read_payload()
    if isinstance(node, str):
        return Tag(node)
    if not node or not isinstance(node[0], str):
        raise MalformedTagError(payload)

    name, tail = node[0], node[1:]
    if len(tail) == 1 and _is_group(tail[0]):
        tail = tail[0]  # type: ignore[assignment]
    return Tag(name, tuple(_to_attribute(arg, payload) for arg in tail))
