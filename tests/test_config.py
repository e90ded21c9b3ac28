import pytest

from mlisp.config import (
    flag_from_env,
    get_log_level,
    get_recursion_limit,
    get_strict,
    get_symbol_max,
    int_from_env,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("MLISP_SYMBOL_MAX", "MLISP_LOG_LEVEL", "MLISP_RECURSION_LIMIT", "MLISP_FLAG"):
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    assert get_symbol_max() == 32
    assert get_strict() is False
    assert get_log_level() == "WARNING"
    assert get_recursion_limit() == 10000


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("16", 16),
        (" 8 ", 8),
        ("0", 0),
        ("1", 2),
        ("-3", 32),
        ("many", 32),
        ("", 32),
    ],
)
def test_symbol_max_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("MLISP_SYMBOL_MAX", raw)
    assert get_symbol_max() == expected


def test_int_from_env_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("MLISP_SYMBOL_MAX", "4.5")
    assert int_from_env("MLISP_SYMBOL_MAX", 7) == 7
    assert int_from_env("MLISP_UNSET_VARIABLE", 7) == 7


@pytest.mark.parametrize("raw", ["1", "true", "TRUE", " yes ", "on"])
def test_flag_truthy(monkeypatch, raw):
    monkeypatch.setenv("MLISP_FLAG", raw)
    assert flag_from_env("MLISP_FLAG") is True


@pytest.mark.parametrize("raw", ["0", "no", "off", ""])
def test_flag_falsy(monkeypatch, raw):
    monkeypatch.setenv("MLISP_FLAG", raw)
    assert flag_from_env("MLISP_FLAG", default=True) is False


def test_flag_default_when_unset():
    assert flag_from_env("MLISP_FLAG") is False
    assert flag_from_env("MLISP_FLAG", default=True) is True


def test_strict_from_env(monkeypatch):
    monkeypatch.setenv("MLISP_STRICT", "yes")
    assert get_strict() is True


def test_log_level_is_upper_cased(monkeypatch):
    monkeypatch.setenv("MLISP_LOG_LEVEL", " debug ")
    assert get_log_level() == "DEBUG"
    monkeypatch.setenv("MLISP_LOG_LEVEL", "  ")
    assert get_log_level() == "WARNING"


@pytest.mark.parametrize("raw, expected", [("50000", 50000), ("10", 1000), ("junk", 10000)])
def test_recursion_limit_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("MLISP_RECURSION_LIMIT", raw)
    assert get_recursion_limit() == expected
