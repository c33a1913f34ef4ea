"""Error handling for the stlc pipeline. Only GenericExceptions should be encountered while running a program: if
another type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

User-facing errors, raised by the resolver and type checker:
    - UnboundError: a variable is not bound by any enclosing abstraction
    - NotAFunctionError: an application whose function position does not have a function type
    - IllTypedError: a sub-expression does not have the type its context expects

Errors raised with internal=True signal a broken stack discipline inside the pipeline (for example, evaluating a tree
that never passed type checking), never a mistake in the program being run.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a stlc error/warning."""

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        """Parses args for GenericException or warning. exprs are the snippets that fill msg's {} slots; exprs[0]
        should be the offending snippet that caused the error, of which [start:end] is highlighted on diagnosis.
        """
        if exprs is None:
            exprs = ""
        if not isinstance(exprs, (list, tuple)):
            exprs = [exprs]
        exprs = [str(expr) for expr in exprs]

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(msg.format(*exprs))


class UnboundError(GenericException):
    """Raised by the resolver for a variable that no enclosing abstraction introduces."""

    def __init__(self, name):
        super().__init__("'{}' is not bound by any enclosing λ", name, diagnosis=False)
        self.name = name


class TypeCheckError(GenericException):
    """Superclass for errors raised by the type checker. node is the nameless sub-expression the error is attached to.
    If within (the expression node appears in) is given, the diagnosis shows within with child slot (0 = leftmost), which
    holds node, highlighted.
    """

    def __init__(self, msg, node, types, within=None, slot=None):
        snippet = str(node)
        start, end = 0, -1
        if within is not None:
            snippet = str(within)
            start, end = within.span(slot)

        super().__init__(msg, [snippet, node, *types], start=start, end=end)
        self.node = node


class NotAFunctionError(TypeCheckError):
    """Raised when the function position of an application is not a function type."""

    def __init__(self, node, actual, within=None, slot=None):
        super().__init__("'{1}' is applied to a value of type '{2}', which is not a function", node, [actual], within,
                         slot)
        self.actual = actual


class IllTypedError(TypeCheckError):
    """Raised when a sub-expression's type differs from the one its context requires."""

    def __init__(self, node, expected, actual, within=None, slot=None):
        msg = "'{1}' expected to have type '{2}', but has type '{3}'"
        super().__init__(msg, node, [expected, actual], within, slot)
        self.expected = expected
        self.actual = actual


class ErrorHandler:
    """Context manager that will silently suppress Python errors and raise custom stlc errors/warnings."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}

    def register_program(self, name, program):
        """Registers the program being run under name. Should be called prior to running it."""
        self.traceback[name] = program

    def remove_program(self, name):
        """Removes name from traceback. Should be called after the program ran successfully."""
        self.traceback.pop(name, None)

    @staticmethod
    def diagnose(error, warning=False):
        """Returns offending part of error.expr highlighted and bolded."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        diagnosis = "  " + error.expr[:error.start]

        end = max(error.end, 1)
        diagnosis += colored(error.expr[error.start:end], color, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += colored("^" + "~" * (end - error.start - 1), color, attrs=["bold"])

        return diagnosis

    def warn(self, *args, **kwargs):
        """Generates and prints warning message based on args."""
        error = GenericException(*args, **kwargs)

        error_msg = ""
        if self.traceback:
            name = next(iter(self.traceback))
            error_msg += colored(f"{name}: ", attrs=["bold"])
        error_msg += colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg

        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error, warning=True))

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a GenericException, and self.traceback must be a
        dict of name: program representing the programs being run when the error occurred.
        """
        error_msg = ""
        for name, program in self.traceback.items():
            error_msg += f"  Program '{name}':\n"
            error_msg += f"    {program}\n"

        if len(self.traceback) > 1:
            error_msg = "Traceback:\n" + error_msg

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error))

        if self.fatal:
            sys.exit(1)
        self.traceback = {}  # if error occurred, reset traceback (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("program is nested deeper than the maximum recursion depth"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
