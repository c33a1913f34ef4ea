"""Evaluation of type-checked nameless expressions.

The environment is a tuple of Values, one per enclosing abstraction, innermost first, mirroring the type checker's
context. Evaluating an abstraction captures the current environment in a Closure; applying a closure evaluates its
body under the captured environment with the argument prepended, never under the caller's environment.

expr must already have passed type checking under a context shaped like env. The evaluator performs no type checks of
its own: a closure where an integer is required (or vice versa) raises an internal error.
"""

from stlc.core import nameless
from stlc.core.typechecker import lookup
from stlc.core.values import Closure, IntValue
from stlc.lang.error import GenericException


def _expect(value, cls, expr):
    """Returns value if it is a cls, otherwise raises an internal error naming expr."""
    if not isinstance(value, cls):
        msg = "'{}' evaluated to '{}', expected a {}; was it type checked?"
        raise GenericException(msg, [expr, value, cls.__name__], internal=True)
    return value


def evaluate(env, expr):
    """Returns the Value of nameless expression expr under env."""
    env = tuple(env)

    if isinstance(expr, nameless.Num):
        return IntValue(expr.value)

    elif isinstance(expr, nameless.BoundVar):
        return lookup(env, expr.depth)

    elif isinstance(expr, nameless.Lam):
        return Closure(env, expr.body)

    elif isinstance(expr, nameless.BinOp):
        left = _expect(evaluate(env, expr.left), IntValue, expr.left)
        right = _expect(evaluate(env, expr.right), IntValue, expr.right)
        return IntValue(nameless.OPERATORS[expr.op](left.value, right.value))

    elif isinstance(expr, nameless.App):
        closure = _expect(evaluate(env, expr.fn), Closure, expr.fn)
        arg = evaluate(env, expr.arg)
        return evaluate((arg,) + closure.env, closure.body)

    raise GenericException("'{}' is not a nameless expression", repr(expr), internal=True)
