from __future__ import annotations

import argparse
import logging
import sys

from mlisp.config import get_log_level
from mlisp.errors import MLispError
from mlisp.interpreter import Interpreter
from mlisp.types.symbol import SYMBOLS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mlisp',
        description='Read one expression, evaluate it and print the result',
    )
    parser.add_argument('file', nargs='?', help='read the expression from FILE instead of stdin')
    parser.add_argument('--strict', action='store_true', default=None,
                        help='raise on the first diagnostic instead of substituting null')
    parser.add_argument('--symbol-max', type=int, metavar='N',
                        help='token buffer size; names are significant up to N-1 characters (0 = unbounded)')
    parser.add_argument('-v', '--verbose', action='store_true', help='enable debug logging')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else get_log_level()
    logging.basicConfig(level=level, format='%(name)s: %(levelname)s: %(message)s')
    logging.getLogger('mlisp').setLevel(level)

    symbol_max = args.symbol_max
    if symbol_max is not None and symbol_max != 0:
        symbol_max = max(symbol_max, 2)
    if symbol_max is not None:
        SYMBOLS.rebound(symbol_max)

    try:
        if args.file:
            with open(args.file, encoding='utf-8') as source:
                Interpreter(input=source, strict=args.strict, symbol_max=symbol_max).run()
        else:
            Interpreter(strict=args.strict, symbol_max=symbol_max).run()
    except MLispError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
