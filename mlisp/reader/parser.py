"""
  Lisp Reader, Lexer and Parser

- Streaming: characters are pulled from a text stream one at a time with a
  single character of lookahead, so a reader can be re-entered mid-stream
  (the `read` primitive does this)
- Tokens:
    - "(" and ")" are always tokens of their own
    - anything else runs to whitespace, a parenthesis or end of input, and is
      truncated to symbol_max - 1 characters (the excess is discarded)
- Forms:
    - () -> None
    - lists -> right-nested Pair chains
    - every other token -> an interned Symbol
- No quote characters, numbers, strings, comments or dotted-pair syntax
"""

from __future__ import annotations

import io
import logging
from typing import Iterator, Optional, TextIO

from mlisp import SExpression
from mlisp.config import get_symbol_max
from mlisp.errors import MLispSyntaxError, MLispTokenTruncation
from mlisp.runtime_context import report
from mlisp.types.pair import from_list
from mlisp.types.symbol import intern

logger = logging.getLogger(__name__)

PARENS = ("(", ")")


class Lexer:
    """Tokenizer over a character stream with one character of lookahead."""

    def __init__(self, stream: TextIO | str, symbol_max: int | None = None):
        if isinstance(stream, str):
            stream = io.StringIO(stream)
        self.stream: TextIO = stream
        self.symbol_max: int = get_symbol_max() if symbol_max is None else symbol_max
        # None = nothing buffered; "" = end of input.
        self.look: Optional[str] = None

    def _peek(self) -> str:
        if self.look is None:
            self.look = self.stream.read(1)
        return self.look

    def _consume(self) -> str:
        ch = self._peek()
        self.look = None
        return ch

    def _skip_whitespace(self) -> None:
        ch = self._peek()
        while ch and ch.isspace():
            self._consume()
            ch = self._peek()

    def next_token(self) -> Optional[str]:
        """Return the next token, or None at end of input."""
        self._skip_whitespace()
        ch = self._peek()
        if not ch:
            return None
        if ch in PARENS:
            return self._consume()

        limit = self.symbol_max - 1 if self.symbol_max > 0 else None
        chars: list[str] = []
        dropped = 0
        while ch and not ch.isspace() and ch not in PARENS:
            if limit is None or len(chars) < limit:
                chars.append(ch)
            else:
                dropped += 1
            self._consume()
            ch = self._peek()

        token = "".join(chars)
        if dropped:
            report(MLispTokenTruncation(token, dropped))
        return token


def lex(source: TextIO | str, symbol_max: int | None = None) -> Iterator[str]:
    """Token generator over `source`."""
    lexer = Lexer(source, symbol_max)
    while (token := lexer.next_token()) is not None:
        yield token


class TokenStream:
    """Recursive-descent parser over a Lexer."""

    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.eof = False

    def parse_expr(self) -> SExpression:
        """Parse one form. Returns None both for () and at end of input;
        check `eof` to tell them apart."""
        token = self.lexer.next_token()
        if token is None:
            self.eof = True
            return None
        return self._parse_token(token)

    def _parse_token(self, token: str) -> SExpression:
        if token == "(":
            return self._parse_list()
        if token == ")":
            report(MLispSyntaxError("unexpected ')'"))
            return None
        return intern(token)

    def _parse_list(self) -> SExpression:
        items: list[SExpression] = []
        while True:
            token = self.lexer.next_token()
            if token is None:
                report(MLispSyntaxError("unexpected end of input inside list"))
                break
            if token == ")":
                break
            items.append(self._parse_token(token))
        logger.debug("parsed list of %d element(s)", len(items))
        return from_list(items)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            expr = self.parse_expr()
            if self.eof:
                break
            yield expr


def read(source: TextIO | str) -> SExpression:
    """Parse the first form of `source`."""
    return TokenStream(Lexer(source)).parse_expr()
