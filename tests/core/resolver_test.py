import unittest

from stlc.core import nameless, syntax
from stlc.core.resolver import resolve
from stlc.core.types import Function, Int
from stlc.lang.error import UnboundError
from stlc.lang.programs import PROGRAMS


class ResolverTestCase(unittest.TestCase):

    def test_resolve(self):
        cases = {
            "number": (syntax.Num(4), nameless.Num(4)),
            "identity": (syntax.Lam(Int(), "a", syntax.Var("a")), nameless.Lam(Int(), nameless.BoundVar(0))),
            "outer binder": (
                syntax.Lam(Int(), "a", syntax.Lam(Int(), "b", syntax.Var("a"))),
                nameless.Lam(Int(), nameless.Lam(Int(), nameless.BoundVar(1)))
            ),
            "shadowing": (
                syntax.Lam(Int(), "a", syntax.Lam(Int(), "a", syntax.Var("a"))),
                nameless.Lam(Int(), nameless.Lam(Int(), nameless.BoundVar(0)))
            ),
            "addition": (
                syntax.Lam(Int(), "a", syntax.Add(syntax.Var("a"), syntax.Num(1))),
                nameless.Lam(Int(), nameless.BinOp(nameless.Op.ADD, nameless.BoundVar(0), nameless.Num(1)))
            ),
            "function parameter": (
                syntax.Lam(Function(Int(), Int()), "f", syntax.App(syntax.Var("f"), syntax.Num(1))),
                nameless.Lam(Function(Int(), Int()), nameless.App(nameless.BoundVar(0), nameless.Num(1)))
            ),
        }
        for case, (expr, result) in cases.items():
            self.assertEqual(result, resolve((), expr), case)

    def test_alpha_equivalence(self):
        renamed = syntax.Lam(Int(), "x", syntax.Lam(Int(), "y", syntax.Var("x")))
        self.assertEqual(resolve((), PROGRAMS["const"]), resolve((), renamed))

    def test_scope(self):
        self.assertEqual(nameless.BoundVar(0), resolve(("x",), syntax.Var("x")))
        self.assertEqual(nameless.BoundVar(1), resolve(["y", "x"], syntax.Var("x")))
        self.assertEqual(nameless.BoundVar(0), resolve(("x", "x"), syntax.Var("x")))

    def test_unbound(self):
        cases = {
            "c": PROGRAMS["unbound"],
            "x": syntax.Var("x"),
            "a": syntax.App(syntax.Lam(Int(), "a", syntax.Var("a")), syntax.Var("a")),  # binder does not leak
            "l": syntax.Add(syntax.Var("l"), syntax.Var("r")),                           # left operand first
            "f": syntax.App(syntax.Var("f"), syntax.Var("g")),
        }
        for name, expr in cases.items():
            with self.assertRaises(UnboundError, msg=name) as context:
                resolve((), expr)
            self.assertEqual(name, context.exception.name)
            self.assertFalse(context.exception.internal)


if __name__ == '__main__':
    unittest.main()
