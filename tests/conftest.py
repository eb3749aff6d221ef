import pytest

from toylisp.interpreter import Interpreter
from toylisp.types.environment import Environment
from toylisp.builtin.env_builtin import default_registry


# Environment variables that change interpreter defaults are cleared for the
# whole session so that a developer's shell settings cannot leak into results.
# Session scope keeps the fixture usable from hypothesis-driven tests.
@pytest.fixture(autouse=True, scope="session")
def _clean_config_env():
    with pytest.MonkeyPatch.context() as mp:
        for var in ("TOYLISP_MAX_DEPTH", "TOYLISP_LOG_LEVEL", "TOYLISP_PRELUDE"):
            mp.delenv(var, raising=False)
        yield


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def env():
    """Fresh program frame over a root frame holding the standard primitives."""
    return default_registry().install(Environment()).extend()
