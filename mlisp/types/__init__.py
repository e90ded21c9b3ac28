from mlisp.types.symbol import Symbol, SymbolTable, SYMBOLS, intern
from mlisp.types.pair import Pair, cons, first, rest, from_list, to_list, iter_list, make_true, truth
from mlisp.types.native import Primitive, Syntax
from mlisp.types.lambda_fn import Lambda, Closure, Macro
from mlisp.types.environment import UNBOUND, lookup, define, from_mapping
from mlisp.types.bind import VARIADIC_MARKER, extend
