"""
  Lisp Parser

Recursive descent over the token stream produced by lil.reader.lexer.
Builds immutable syntax nodes (lil.types.nodes):

    - atom matching a numeric literal -> Number(int | float)
    - "delimited text"               -> String(str)
    - any other atom                 -> Identifier(str)
    - ( ... )                        -> Form(children)
    - 'x  or  '( ... )               -> Quote(inner)

Exactly one top-level node must cover the whole input.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from lil import SExpression
from lil.errors import LilParseError
from lil.reader.lexer import Token, TokenKind, lex
from lil.types.nodes import Form, Identifier, Number, Quote, String


INT_RE = re.compile(r"[-+]?\d+")
NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def classify_atom(text: str) -> SExpression:
    """Turn bare atom text into a Number when it is a numeric literal, else an Identifier."""
    if INT_RE.fullmatch(text):
        return Number(int(text))
    if NUMBER_RE.fullmatch(text):
        return Number(float(text))
    return Identifier(text)


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens: Iterator[Token] = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise LilParseError("Unexpected end of input")

        if tok.kind == TokenKind.ATOM:
            return classify_atom(tok.text)

        if tok.kind == TokenKind.STRING:
            return String(tok.text[1:-1])

        # Quote prefix attaches to the very next node, atom or form
        if tok.kind == TokenKind.QUOTE:
            if self.peek() is None:
                raise LilParseError(f"Nothing to quote after ' at {tok.pos}")
            return Quote(self.parse_expr())

        if tok.kind == TokenKind.LPAREN:
            children = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise LilParseError(f"Unmatched '(' at {tok.pos}")
                if nxt.kind == TokenKind.RPAREN:
                    self.advance()
                    break
                children.append(self.parse_expr())
            return Form(tuple(children))

        if tok.kind == TokenKind.RPAREN:
            raise LilParseError(f"Unmatched ')' at {tok.pos}")

        raise LilParseError(f"Unknown token: {tok.kind} {tok.text!r}")

    def parse_one(self) -> SExpression:
        """Parse a single top-level node and insist nothing follows it."""
        if self.peek() is None:
            raise LilParseError("Empty input")
        expr = self.parse_expr()
        trailing = self.peek()
        if trailing is not None:
            if trailing.kind == TokenKind.RPAREN:
                raise LilParseError(f"Unmatched ')' at {trailing.pos}")
            raise LilParseError(
                f"Unexpected trailing token {trailing.text!r} at {trailing.pos}"
            )
        return expr


def parse(source: str | Iterable[Token]) -> SExpression:
    """Parse source text (or an already lexed token sequence) into one syntax node."""
    tokens = lex(source) if isinstance(source, str) else source
    return TokenStream(tokens).parse_one()
