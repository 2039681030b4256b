import pytest

from mal.core import default_environment, evaluate, read


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    return default_environment()


@pytest.fixture
def ev(env):
    """Read and evaluate one form against the test's environment."""
    def _ev(source: str):
        return evaluate(env, read(source))
    return _ev
