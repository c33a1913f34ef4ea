"""Nameless expression tree produced by the resolver and shared read-only by the type checker and evaluator.

Every variable reference is a binding-depth index: `BoundVar(n)` refers to the binder introduced by the n-th
enclosing `Lam`, counting outward from the point of use (0 = innermost). Binders carry no names, so alpha-equivalent
surface programs resolve to equal trees:

```
λa:Int. λb:Int. a   ==>   λ:Int. λ:Int. #1
λa:Int. λa:Int. a   ==>   λ:Int. λ:Int. #0
```

Binary operators are an `Op` tag rather than a host function, so trees stay comparable and printable. OPERATORS
maps each tag to its semantics.
"""

import operator
from dataclasses import dataclass
from enum import Enum

from stlc.core.tree import Node
from stlc.core.types import Type


class Op(Enum):
    ADD = "add"


OPERATORS = {Op.ADD: operator.add}
SYMBOLS = {Op.ADD: "+"}


class CoreExpr(Node):
    """Superclass of every nameless expression node."""

    def parts(self):
        """Returns each child as it is printed inside this node, left to right."""
        return [str(node) for node in self.nodes]

    def span(self, slot):
        """Returns (start, end) of child slot (0 = leftmost) within str(self), parentheses included. Only defined for
        nodes with exactly two children, whose printed forms begin and end the printed node.
        """
        parts, text = self.parts(), str(self)
        if slot == 0:
            return 0, len(parts[0])
        return len(text) - len(parts[-1]), len(text)


def _atom(expr):
    return str(expr) if isinstance(expr, (BoundVar, Num)) else f"({expr})"


@dataclass(frozen=True)
class BoundVar(CoreExpr):
    depth: int

    def __post_init__(self):
        if self.depth < 0:
            raise ValueError(f"binding depth must be non-negative, got {self.depth}")

    def __str__(self):
        return f"#{self.depth}"


@dataclass(frozen=True)
class App(CoreExpr):
    fn: CoreExpr
    arg: CoreExpr

    @property
    def nodes(self):
        return [self.fn, self.arg]

    def parts(self):
        fn = str(self.fn) if isinstance(self.fn, App) else _atom(self.fn)
        return [fn, _atom(self.arg)]

    def __str__(self):
        return " ".join(self.parts())


@dataclass(frozen=True)
class Lam(CoreExpr):
    param_type: Type
    body: CoreExpr

    @property
    def nodes(self):
        return [self.body]

    def __str__(self):
        return f"λ:{self.param_type}. {self.body}"


@dataclass(frozen=True)
class Num(CoreExpr):
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class BinOp(CoreExpr):
    op: Op
    left: CoreExpr
    right: CoreExpr

    @property
    def nodes(self):
        return [self.left, self.right]

    def parts(self):
        left = str(self.left) if isinstance(self.left, (App, BinOp)) else _atom(self.left)
        right = str(self.right) if isinstance(self.right, App) else _atom(self.right)
        return [left, right]

    def __str__(self):
        return f" {SYMBOLS[self.op]} ".join(self.parts())
