import io

import pytest

from mlisp import runtime_context
from mlisp.builtin.env_builtin import register
from mlisp.evaluation.evaluator import evaluate
from mlisp.reader.parser import read

# Every test gets fresh in-memory output/error ports installed in the runtime
# context, with strict mode off, so diagnostics can be asserted on.


class Ports:
    def __init__(self):
        self.output = io.StringIO()
        self.errors = io.StringIO()


@pytest.fixture(autouse=True)
def ports(monkeypatch):
    monkeypatch.delenv("MLISP_STRICT", raising=False)
    p = Ports()
    runtime_context.set_output_port(p.output)
    runtime_context.set_error_port(p.errors)
    runtime_context.set_strict(False)
    runtime_context.set_current_reader(None)
    yield p
    runtime_context.set_output_port(None)
    runtime_context.set_error_port(None)
    runtime_context.set_strict(None)
    runtime_context.set_current_reader(None)


@pytest.fixture
def env():
    """The global environment with every builtin registered."""
    return register()


@pytest.fixture
def run(env):
    """Read the first form of a source string and evaluate it in `env`."""
    def _run(source: str):
        return evaluate(read(source), env)
    return _run
