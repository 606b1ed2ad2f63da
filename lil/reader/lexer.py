"""
  Lisp Lexer

- Streaming, lazy tokenization
- Emits Token tuples (kind, text, pos):

    - lparen -> "("
    - rparen -> ")"
    - quote  -> "'"  (abbreviated quote prefix)
    - string -> '"..."'  raw text including the delimiters, no escapes
    - atom   -> any other run of non-space, non-paren, non-quote characters

  Whitespace outside strings only separates tokens. Parentheses and spaces
  inside a string are part of the string.
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple

from lil.errors import LilLexError


class TokenKind:
    LPAREN = "lparen"
    RPAREN = "rparen"
    QUOTE = "quote"
    STRING = "string"
    ATOM = "atom"


class Token(NamedTuple):
    kind: str
    text: str
    pos: int


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # '
    r'|(?P<string>"[^"]*")'  # double-quoted strings, taken verbatim
    r'|(?P<atom>[^\s()\'"]+)'  # fallback: identifiers and numbers
    r")"
)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, text, pos) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            rest = source[pos:]
            if not rest.strip():
                break
            # The only character no alternative accepts is an unmatched '"'
            start = pos + (len(rest) - len(rest.lstrip()))
            raise LilLexError(f"Unterminated string starting at {start}")
        kind = m.lastgroup
        yield Token(kind, m.group(kind), m.start(kind))
        pos = m.end()
