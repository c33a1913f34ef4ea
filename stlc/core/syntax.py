"""Surface syntax: the named expression tree a caller builds and hands to the resolver.

```
<expr> ::= <name>                          ; "variable"
         | <expr> <expr>                   ; "application", associating left: f x y = (f x) y
         | "λ" <name> ":" <type> "." <expr> ; "abstraction", binds exactly one name in its body
         | <integer>                       ; "number"
         | <expr> "+" <expr>               ; "addition"
```

There is no parser: the grammar above only describes how trees are printed. Names are the sole form of variable
reference here; the resolver replaces them with binding-depth indices (see nameless.py).
"""

from dataclasses import dataclass

from stlc.core.tree import Node
from stlc.core.types import Type


class SurfaceExpr(Node):
    """Superclass of every surface expression node."""


def _atom(expr):
    """Parenthesizes expr unless it is a variable or a number."""
    return str(expr) if isinstance(expr, (Var, Num)) else f"({expr})"


@dataclass(frozen=True)
class Var(SurfaceExpr):
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class App(SurfaceExpr):
    fn: SurfaceExpr
    arg: SurfaceExpr

    @property
    def nodes(self):
        return [self.fn, self.arg]

    def __str__(self):
        fn = str(self.fn) if isinstance(self.fn, App) else _atom(self.fn)
        return f"{fn} {_atom(self.arg)}"


@dataclass(frozen=True)
class Lam(SurfaceExpr):
    param_type: Type
    param_name: str
    body: SurfaceExpr

    @property
    def nodes(self):
        return [self.body]

    def __str__(self):
        return f"λ{self.param_name}:{self.param_type}. {self.body}"


@dataclass(frozen=True)
class Num(SurfaceExpr):
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Add(SurfaceExpr):
    left: SurfaceExpr
    right: SurfaceExpr

    @property
    def nodes(self):
        return [self.left, self.right]

    def __str__(self):
        left = str(self.left) if isinstance(self.left, (App, Add)) else _atom(self.left)
        right = str(self.right) if isinstance(self.right, App) else _atom(self.right)
        return f"{left} + {right}"
