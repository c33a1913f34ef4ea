"""Runtime values: integers and closures."""

from dataclasses import dataclass

from stlc.core.nameless import CoreExpr


class Value:
    """Superclass of every runtime value."""


@dataclass(frozen=True)
class Closure(Value):
    """A function body paired with the environment in effect when its abstraction was evaluated. env is a tuple of
    Values, innermost binder first; it is never modified after capture.
    """
    env: tuple
    body: CoreExpr

    def __str__(self):
        return "<closure>"


@dataclass(frozen=True)
class IntValue(Value):
    value: int

    def __str__(self):
        return str(self.value)
