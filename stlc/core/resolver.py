"""Resolution of surface syntax into the nameless representation.

The scope is a tuple of names, innermost binder first. Entering an abstraction resolves its body against a new tuple
with the parameter name prepended, so sibling sub-expressions never observe each other's binders and the binder is
dropped again once the body is resolved. A variable's binding depth is the position of the first (innermost)
occurrence of its name in the scope, which makes shadowing pick the nearest binder.
"""

from stlc.core import nameless, syntax
from stlc.lang.error import GenericException, UnboundError


def resolve(scope, expr):
    """Returns the nameless equivalent of surface expression expr under scope. Raises UnboundError if expr uses a name
    that scope does not contain.
    """
    scope = tuple(scope)

    if isinstance(expr, syntax.Num):
        return nameless.Num(expr.value)

    elif isinstance(expr, syntax.Var):
        try:
            return nameless.BoundVar(scope.index(expr.name))
        except ValueError:
            raise UnboundError(expr.name)

    elif isinstance(expr, syntax.Lam):
        return nameless.Lam(expr.param_type, resolve((expr.param_name,) + scope, expr.body))

    elif isinstance(expr, syntax.App):
        return nameless.App(resolve(scope, expr.fn), resolve(scope, expr.arg))

    elif isinstance(expr, syntax.Add):
        return nameless.BinOp(nameless.Op.ADD, resolve(scope, expr.left), resolve(scope, expr.right))

    raise GenericException("'{}' is not a surface expression", repr(expr), internal=True)
