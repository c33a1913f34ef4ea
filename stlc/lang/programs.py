"""Example programs used to smoke-test the interpreter, keyed by name. Each comment gives the program in the usual
notation and what running it produces.
"""

from stlc.core.syntax import Add, App, Lam, Num, Var
from stlc.core.types import Function, Int

ID = Lam(Int(), "a", Var("a"))                       # λa:Int. a
CONST = Lam(Int(), "a", Lam(Int(), "b", Var("a")))   # λa:Int. λb:Int. a

PROGRAMS = {
    "id": ID,
    "const": CONST,

    # λa:Int. λb:Int. c --> 'c' is unbound
    "unbound": Lam(Int(), "a", Lam(Int(), "b", Var("c"))),
    # 3 3 --> not a function
    "not_a_function": App(Num(3), Num(3)),
    # (λa:Int. a) + (λa:Int. a) --> not a number
    "not_a_number": Add(ID, ID),

    # (λa:Int. (λb:Int. a) 2 + a) 3 --> 6
    "test1": App(Lam(Int(), "a", Add(App(Lam(Int(), "b", Var("a")), Num(2)), Var("a"))), Num(3)),
    # (λf:Int -> Int. f 1) id --> 1
    "test2": App(Lam(Function(Int(), Int()), "f", App(Var("f"), Num(1))), ID),
    # (λf:Int -> Int. f 1) (const 10) --> 10
    "test3": App(Lam(Function(Int(), Int()), "f", App(Var("f"), Num(1))), App(CONST, Num(10))),
}
