"""Simply-typed lambda calculus interpreter.

For reference:
- "Surface syntax": expression trees with named variables, built by the caller (see core/syntax.py)
- "Nameless tree": the same program with every variable replaced by a binding-depth index (see core/nameless.py)

Basic program flow, each stage a pure function of its input:
    1. Resolver: replaces names with binding-depth indices, failing on an unbound variable
        - For the surface grammar, see core/syntax.py
    2. Type checker: computes the type of the nameless tree, failing on an ill-typed sub-expression
    3. Evaluator: computes the value of the nameless tree, which is safe because it passed type checking

The first failure stops the pipeline and is raised unchanged.
"""

from stlc.core.evaluator import evaluate
from stlc.core.resolver import resolve
from stlc.core.typechecker import typecheck


def run(program):
    """Resolves, type checks and evaluates surface expression program. Returns (type, value)."""
    expr = resolve((), program)
    program_type = typecheck((), expr)
    value = evaluate((), expr)
    return program_type, value
