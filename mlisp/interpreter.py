from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from mlisp import LispValue, SExpression
from mlisp import runtime_context
from mlisp.builtin.env_builtin import register
from mlisp.config import get_recursion_limit
from mlisp.errors import MLispRecursionDepth
from mlisp.evaluation.evaluator import evaluate
from mlisp.printer import write
from mlisp.reader.parser import Lexer, TokenStream

logger = logging.getLogger(__name__)


def raise_recursion_limit(limit: int | None = None) -> int:
    """Raise the Python recursion limit to at least `limit` (MLISP_RECURSION_LIMIT
    by default). The limit is never lowered. Returns the limit in effect."""
    wanted = get_recursion_limit() if limit is None else limit
    if sys.getrecursionlimit() < wanted:
        logger.debug("raising recursion limit to %d", wanted)
        sys.setrecursionlimit(wanted)
    return sys.getrecursionlimit()


class Interpreter:
    """
    Reads and evaluates mlisp code against the builtin environment.

    The interpreter owns an input reader and the output/error ports; they are
    installed into the runtime context while it evaluates, so the `read` and
    `write` primitives and diagnostics use them.

    Reading and evaluation both recurse on the Python stack. Nesting past the
    recursion limit is reported as a diagnostic and yields absent.
    """

    def __init__(
        self,
        input: TextIO | str | None = None,
        output: TextIO | None = None,
        errors: TextIO | None = None,
        strict: Optional[bool] = None,
        symbol_max: int | None = None,
    ):
        raise_recursion_limit()
        self.env: LispValue = register()
        self.symbol_max = symbol_max
        self.reader = TokenStream(Lexer(sys.stdin if input is None else input, symbol_max))
        self.output = output
        self.errors = errors
        self.strict = strict

    def _install(self) -> None:
        runtime_context.set_current_reader(self.reader)
        runtime_context.set_output_port(self.output)
        runtime_context.set_error_port(self.errors)
        runtime_context.set_strict(self.strict)

    def _too_deep(self) -> None:
        runtime_context.report(MLispRecursionDepth(sys.getrecursionlimit()))

    def _guarded(self, step: Callable[[], LispValue]) -> LispValue:
        try:
            return step()
        except RecursionError:
            self._too_deep()
            return None

    def evaluate(self, expr: SExpression) -> LispValue:
        self._install()
        return self._guarded(lambda: evaluate(expr, self.env))

    def read(self) -> SExpression:
        """Read one form from the input port."""
        self._install()
        return self._guarded(self.reader.parse_expr)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; returns the last value (absent if none)."""
        self._install()
        stream = TokenStream(Lexer(code, self.symbol_max))
        result: LispValue = None
        try:
            for expr in stream.parse_all():
                result = self.evaluate(expr)
        except RecursionError:
            self._too_deep()
            return None
        return result

    def run(self) -> LispValue:
        """Read one form from input, evaluate it and print the result."""
        expr = self.read()
        logger.debug("evaluating top-level form")
        result = self.evaluate(expr)
        self._guarded(lambda: write(result, runtime_context.get_output_port()))
        return result
