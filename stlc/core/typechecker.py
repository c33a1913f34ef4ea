"""Type checking of nameless expressions.

With binding-depth indices the typing context is simply a stack: a tuple of Types, one per enclosing abstraction,
innermost first, so `BoundVar(n)` has type `context[n]`. Checking an abstraction body prepends the parameter type to
a new tuple; the caller's context is never modified.

The first error encountered is raised; errors are not accumulated. Two diagnostics are kept exactly as they have
always been reported:
    - for `l + r`, the right operand is checked against Int before the left one, so when both are ill-typed the error
      is attached to r
    - for `f a` where f does not have a function type, NotAFunctionError is attached to the argument a
"""

from stlc.core import nameless
from stlc.core.types import Function, Int
from stlc.lang.error import GenericException, IllTypedError, NotAFunctionError


def lookup(stack, depth):
    """Returns stack[depth], the entry bound depth binders out. Raises an internal error if depth does not refer to an
    entry of stack, which only happens if expr was not produced by the resolver under a matching scope.
    """
    if not 0 <= depth < len(stack):
        msg = "binding depth '{}' exceeds the {} enclosing binder(s)"
        raise GenericException(msg, [depth, len(stack)], internal=True)
    return stack[depth]


def typecheck(context, expr):
    """Returns the Type of nameless expression expr under context. Raises NotAFunctionError or IllTypedError if expr is
    ill-typed.
    """
    context = tuple(context)

    if isinstance(expr, nameless.Num):
        return Int()

    elif isinstance(expr, nameless.BoundVar):
        return lookup(context, expr.depth)

    elif isinstance(expr, nameless.Lam):
        return Function(expr.param_type, typecheck((expr.param_type,) + context, expr.body))

    elif isinstance(expr, nameless.BinOp):
        left_type = typecheck(context, expr.left)
        right_type = typecheck(context, expr.right)

        if right_type != Int():
            raise IllTypedError(expr.right, Int(), right_type, within=expr, slot=1)
        elif left_type != Int():
            raise IllTypedError(expr.left, Int(), left_type, within=expr, slot=0)
        return Int()

    elif isinstance(expr, nameless.App):
        fn_type = typecheck(context, expr.fn)
        arg_type = typecheck(context, expr.arg)

        if not isinstance(fn_type, Function):
            raise NotAFunctionError(expr.arg, fn_type, within=expr, slot=1)
        elif fn_type.domain != arg_type:
            raise IllTypedError(expr.arg, fn_type.domain, arg_type, within=expr, slot=1)
        return fn_type.codomain

    raise GenericException("'{}' is not a nameless expression", repr(expr), internal=True)
