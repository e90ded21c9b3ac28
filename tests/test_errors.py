import pytest

from mlisp import runtime_context
from mlisp.errors import (
    MLispError,
    MLispNotApplicable,
    MLispNotEvaluable,
    MLispSyntaxError,
    MLispTypeError,
    MLispUnboundVariable,
)
from mlisp.evaluation.evaluator import evaluate
from mlisp.printer import to_string
from mlisp.reader.parser import read
from mlisp.types.environment import lookup
from mlisp.types.symbol import intern


# -----------------------------------------------------
# Diagnostics: report and substitute absent
# -----------------------------------------------------

def test_unbound_symbol_returns_absent(run, ports):
    assert run("never-bound-symbol") is None
    assert ports.errors.getvalue() == "unbound variable: never-bound-symbol\n"


def test_evaluation_continues_after_unbound(run, ports):
    assert run("never-bound-symbol") is None
    assert run("(quote ok)") is intern("ok")
    assert run("never-bound-symbol") is None
    assert ports.errors.getvalue().count("unbound variable") == 2


def test_unbound_argument_degrades_result(run, ports):
    assert to_string(run("(cons (quote a) oops)")) == "(a)"
    assert ports.errors.getvalue() == "unbound variable: oops\n"


def test_unbound_head(run, ports):
    assert run("(undefined-fn (quote a))") is None
    assert ports.errors.getvalue().splitlines() == [
        "unbound variable: undefined-fn",
        "not applicable: null",
    ]


def test_symbol_is_not_applicable(run, ports):
    assert run("((quote a) (quote b))") is None
    assert ports.errors.getvalue() == "not applicable: a\n"


def test_list_is_not_applicable(run, ports):
    assert run("((quote (a b)))") is None
    assert ports.errors.getvalue() == "not applicable: (a b)\n"


def test_primitive_is_not_evaluable(env, ports):
    car = lookup(env, intern("car"))
    assert evaluate(car, env) is None
    assert ports.errors.getvalue() == "cannot evaluate expression: <primitive car>\n"


def test_macro_is_not_evaluable(run, env, ports):
    macro = run("(macro (lambda (x) x))")
    assert evaluate(macro, env) is None
    assert ports.errors.getvalue() == "cannot evaluate expression: <macro>\n"


def test_diagnostics_are_not_written_to_output(run, ports):
    run("never-bound-symbol")
    assert ports.output.getvalue() == ""


# -----------------------------------------------------
# Strict mode: raise instead
# -----------------------------------------------------

@pytest.fixture
def strict():
    runtime_context.set_strict(True)


@pytest.mark.parametrize(
    "source,error",
    [
        ("never-bound-symbol", MLispUnboundVariable),
        ("((quote a))", MLispNotApplicable),
        ("(macro (quote a))", MLispTypeError),
    ]
)
def test_strict_mode_raises(strict, run, ports, source, error):
    with pytest.raises(error):
        run(source)
    assert ports.errors.getvalue() == ""


def test_strict_not_evaluable(strict, env):
    with pytest.raises(MLispNotEvaluable) as exc:
        evaluate(lookup(env, intern("cons")), env)
    assert str(exc.value) == "cannot evaluate expression: <primitive cons>"


def test_strict_syntax_error(strict):
    with pytest.raises(MLispSyntaxError):
        read("(a b")


def test_strict_from_environment_variable(monkeypatch, run):
    runtime_context.set_strict(None)
    monkeypatch.setenv("MLISP_STRICT", "yes")
    with pytest.raises(MLispError):
        run("never-bound-symbol")


def test_unbound_error_carries_name():
    err = MLispUnboundVariable("foo")
    assert err.name == "foo"
    assert str(err) == "unbound variable: foo"
    assert isinstance(err, MLispError)
