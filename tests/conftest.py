import sys
from pathlib import Path

import pytest

# Make the package importable when running pytest from a source checkout.
BASE_DIR = Path(__file__).resolve().parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from cloji.builtin.core import get_core_scope  # noqa: E402
from cloji.interpreter import execute  # noqa: E402
from cloji.types.scope import Scope  # noqa: E402


@pytest.fixture
def scope():
    """A fresh script-level scope over the shared core library."""
    return Scope({}, get_core_scope())


@pytest.fixture
def run():
    """Execute a source string and return its ExecutionResult."""
    def _run(source, globals=None, throw_on_error=True):
        return execute(source, globals, throw_on_error)
    return _run


@pytest.fixture
def value(run):
    """Execute a source string and return the value of its last expression."""
    def _value(source, globals=None):
        return run(source, globals).value
    return _value
