import pytest

from sublisp.interpreter import Interpreter


@pytest.fixture
def interp():
    """Fresh interpreter with builtins and the standard library loaded."""
    return Interpreter(debug=False)


@pytest.fixture
def run(interp):
    """Evaluate source text and return the printed result."""
    def _run(source: str) -> str:
        return interp.to_string(interp.eval(source))
    return _run
