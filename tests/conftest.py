from io import StringIO

import pytest

from ember.builtin.env_builtin import register
from ember.interpreter import Interpreter
from ember.types.environment import Environment


@pytest.fixture
def out():
    """In-memory sink that collects everything `print` writes."""
    return StringIO()


@pytest.fixture
def env(out):
    """Return a fresh global environment with all builtins registered."""
    e = Environment()
    register(e, out)
    return e


@pytest.fixture
def interp(out):
    return Interpreter(out)
