"""Types of the simply-typed lambda calculus: a single base type and function types.

```
<type> ::= "Int"                ; integers
         | <type> "->" <type>   ; functions, associating right: Int -> Int -> Int = Int -> (Int -> Int)
```

Types are immutable and compared structurally, so two function types are equal iff their domains and codomains
are equal.
"""

from dataclasses import dataclass


class Type:
    """Superclass of every type."""


@dataclass(frozen=True)
class Int(Type):
    """Base numeric type."""

    def __str__(self):
        return "Int"


@dataclass(frozen=True)
class Function(Type):
    """Type of a function from domain to codomain."""
    domain: Type
    codomain: Type

    def __str__(self):
        domain = f"({self.domain})" if isinstance(self.domain, Function) else str(self.domain)
        return f"{domain} -> {self.codomain}"
