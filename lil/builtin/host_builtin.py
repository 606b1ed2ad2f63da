"""Host primitives a program may inject into the root environment.

The interpreter core knows nothing about arithmetic; these callables are
ordinary Python functions handed to `interpret()` or `Interpreter` through
the initial bindings. They receive evaluated arguments positionally.
Comparisons return 1 or 0 so they compose with `if`.
"""
from __future__ import annotations

from functools import reduce
import operator

from lil import LispValue
from lil.errors import LilArityError, LilTypeError


def _numbers(name: str, args: tuple) -> tuple:
    for a in args:
        if isinstance(a, bool) or not isinstance(a, (int, float)):
            raise LilTypeError(f"{name} expects numbers, got {a!r}")
    return args


def add(*args: LispValue) -> LispValue:
    """(+ a b ...) sum of all arguments; (+) is 0."""
    return sum(_numbers("+", args))


def sub(*args: LispValue) -> LispValue:
    """(- a) negates; (- a b ...) subtracts the rest from a."""
    _numbers("-", args)
    if not args:
        raise LilArityError("- expects at least one argument")
    if len(args) == 1:
        return -args[0]
    return args[0] - sum(args[1:])


def mul(*args: LispValue) -> LispValue:
    """(* a b ...) product of all arguments; (*) is 1."""
    return reduce(operator.mul, _numbers("*", args), 1)


def div(*args: LispValue) -> LispValue:
    _numbers("/", args)
    if len(args) < 2:
        raise LilArityError("/ expects at least two arguments")
    return reduce(operator.truediv, args)


def _compare(name: str, op, args: tuple) -> int:
    if len(args) < 2:
        raise LilArityError(f"{name} expects at least two arguments")
    return 1 if all(op(a, b) for a, b in zip(args, args[1:])) else 0


def equals(*args: LispValue) -> int:
    return _compare("=", operator.eq, args)


def less_than(*args: LispValue) -> int:
    return _compare("<", operator.lt, _numbers("<", args))


def greater_than(*args: LispValue) -> int:
    return _compare(">", operator.gt, _numbers(">", args))


def host_bindings() -> dict[str, LispValue]:
    """Return a fresh name -> callable mapping of the host primitives."""
    return {
        "+": add,
        "-": sub,
        "*": mul,
        "/": div,
        "=": equals,
        "<": less_than,
        ">": greater_than,
    }
