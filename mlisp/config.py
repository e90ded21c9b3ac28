from __future__ import annotations
import os


# Defaults
_DEFAULT_SYMBOL_MAX = 32
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_RECURSION_LIMIT = 10000
_TRUTHY = {'1', 'true', 'yes', 'on'}


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= 0 else default


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def get_symbol_max() -> int:
    # Token buffer size; names are significant up to symbol_max - 1 characters.
    # 0 disables truncation entirely.
    value = int_from_env('MLISP_SYMBOL_MAX', _DEFAULT_SYMBOL_MAX)
    return 0 if value == 0 else max(value, 2)


def get_recursion_limit() -> int:
    # Python stack frames available to the reader and evaluator.
    return max(int_from_env('MLISP_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT), 1000)


def get_strict() -> bool:
    return flag_from_env('MLISP_STRICT')


def get_log_level() -> str:
    raw = os.environ.get('MLISP_LOG_LEVEL')
    if not raw or not raw.strip():
        return _DEFAULT_LOG_LEVEL
    return raw.strip().upper()
