import pytest

from lil.interpreter import interpret
from lil.reader.parser import parse


# Every test starts from the built-in defaults: no LIL_* configuration leaks
# in from the shell running the suite.
@pytest.fixture(autouse=True)
def _clean_lil_environment(monkeypatch):
    monkeypatch.delenv("LIL_OUTPUT", raising=False)
    monkeypatch.delenv("LIL_HOST_BUILTINS", raising=False)


@pytest.fixture
def printed():
    """Collects everything handed to the print sink."""
    return []


@pytest.fixture
def run(printed):
    """Parse and interpret one source string, capturing print output."""
    def _run(source, bindings=None):
        return interpret(parse(source), bindings, printed.append)
    return _run
