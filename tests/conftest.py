import pytest

from pymal.builtin.env_builtin import register
from pymal.interpreter import Interpreter
from pymal.types.environment import Environment


# Tests build either a bare root environment with the builtins registered
# (for calling evaluate() directly on hand-built forms) or a full
# Interpreter with the prelude loaded (for source-level tests).


@pytest.fixture
def env():
    """Fresh root environment with special forms and primitives."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter with the packaged prelude."""
    return Interpreter()


@pytest.fixture
def rep(interp):
    """Run one read/eval/print cycle and return the printed result."""
    return interp.rep
