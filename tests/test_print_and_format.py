import logging

import pytest

from lil.debug_utils.pprint import node_to_source, to_lisp_string
from lil.evaluation.context import EvalContext, log_sink, null_sink, stdout_sink
from lil.interpreter import interpret
from lil.reader.parser import parse
from lil.types.nodes import Constant, Form, Identifier, Number, Quote, String
from lil.types.values import Absent, Empty, QuotedForm


def test_print_returns_its_value(run, printed):
    assert run("(print 1)") == 1
    assert printed == ["1"]


def test_print_is_transparent_inside_expressions(run, printed):
    assert run("(first (print (list 1 2 3)))") == 1
    assert printed == ["(1 2 3)"]


def test_print_fires_once_per_evaluation(run, printed):
    run("((lambda (x) (list x x)) (print 5))")
    assert printed == ["5"]


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(print "a b")', "a b"),
        ("(print (list 1 (list 2.5 \"s\")))", "(1 (2.5 s))"),
        ("(print ())", "()"),
        ("(print nothing)", "absent"),
        ("(print (list))", "()"),
        ("(print '(a 'b \"c\"))", "'(a 'b \"c\")"),
        ("(print (lambda (x y) (list x y)))", "(lambda (x y) (list x y))"),
    ]
)
def test_print_text(run, printed, source, expected):
    run(source)
    assert printed == [expected]


def test_print_host_callable(run, printed):
    def shout():
        return "!"
    run("(print shout)", {"shout": shout})
    assert printed == ["<host shout>"]


def test_node_to_source():
    node = Form((Identifier("f"), Number(1), String("x y"), Quote(Form(())), Constant(Empty)))
    assert node_to_source(node) == '(f 1 "x y" \'() ())'


def test_to_lisp_string_values():
    assert to_lisp_string(Absent) == "absent"
    assert to_lisp_string(Empty) == "()"
    assert to_lisp_string(QuotedForm(Identifier("q"))) == "'q"
    assert to_lisp_string([1, [2], "three"]) == "(1 (2) three)"


# ------------------ Sinks ------------------

def test_stdout_sink(capsys):
    interpret(parse('(print "alpha")'), output=stdout_sink)
    assert capsys.readouterr().out == "alpha\n"


def test_log_sink(caplog):
    with caplog.at_level(logging.INFO, logger="lil.output"):
        interpret(parse("(print 42)"), output=log_sink)
    assert [r.getMessage() for r in caplog.records if r.name == "lil.output"] == ["42"]


def test_null_sink(capsys):
    interpret(parse("(print 42)"), output=null_sink)
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "mode,sink",
    [("stdout", stdout_sink), ("log", log_sink), ("none", null_sink), ("bogus", log_sink)]
)
def test_default_sink_from_environment(monkeypatch, mode, sink):
    monkeypatch.setenv("LIL_OUTPUT", mode)
    assert EvalContext.default().output is sink


def test_default_sink_is_log():
    assert EvalContext.default().output is log_sink


def test_interpret_uses_configured_sink(monkeypatch, capsys):
    monkeypatch.setenv("LIL_OUTPUT", "stdout")
    assert interpret(parse("(print 7)")) == 7
    assert capsys.readouterr().out == "7\n"
