import pytest

from lil import Interpreter, interpret, parse
from lil.errors import LilError, LilLexError, LilParseError, LilRuntimeError
from lil.types.values import Absent


def test_interpret_with_initial_bindings():
    assert interpret(parse("(list a b)"), {"a": 1, "b": "two"}) == [1, "two"]


def test_interpret_without_bindings_has_empty_root():
    assert interpret(parse("+")) is Absent


def test_interpreter_keeps_root_bindings_between_runs():
    interp = Interpreter(bindings={"x": 10}, output=lambda text: None)
    assert interp.eval("x") == 10
    assert interp.eval("(let ((y 1)) (list x y))") == [10, 1]
    assert interp.eval("(let ((y 2)) y)") == 2


def test_interpreter_output_sink():
    seen = []
    interp = Interpreter(output=seen.append)
    interp.eval('(print "hello")')
    assert seen == ["hello"]


def test_host_builtins_from_environment(monkeypatch):
    monkeypatch.setenv("LIL_HOST_BUILTINS", "yes")
    assert Interpreter().eval("(+ 1 2)") == 3


def test_explicit_bindings_win_over_environment(monkeypatch):
    monkeypatch.setenv("LIL_HOST_BUILTINS", "1")
    assert Interpreter(bindings={}).eval("+") is Absent


def test_host_builtins_off_by_default():
    assert Interpreter().eval("+") is Absent


@pytest.mark.parametrize(
    "source,error",
    [
        ('(print "oops)', LilLexError),
        ("(list 1", LilParseError),
        ("(first (list))", LilRuntimeError),
    ]
)
def test_errors_share_a_base(source, error):
    with pytest.raises(error) as excinfo:
        Interpreter(output=lambda text: None).eval(source)
    assert isinstance(excinfo.value, LilError)
