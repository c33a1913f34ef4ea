"""Session control for stlc. Keeps the programs known by name, runs the ones queued for execution and collects their
results, either for the command-line shell or for a one-shot run from main.
"""

from stlc.core.resolver import resolve
from stlc.core.typechecker import typecheck
from stlc.interpreter import run
from stlc.lang.error import GenericException
from stlc.lang.programs import PROGRAMS


class Session:
    """Governs a stlc session, with control over the namespace of named programs."""

    def __init__(self, error_handler, cmd_line=False, verbose=False):
        self.error_handler = error_handler

        self.cmd_line = cmd_line  # whether or not in command-line mode
        self.verbose = verbose    # whether or not to print every stage of the pipeline

        self.namespace = dict(PROGRAMS)  # dict of name: SurfaceExpr that exist in the current session
        self.to_exec = {}                # dict of name: SurfaceExpr to execute, in insertion order
        self.results = []                # list of (name, Type, Value) of programs that ran

        if self.cmd_line:
            self.error_handler.fatal = False

    def get(self, name):
        """Returns the program called name. Raises a GenericException if there is none."""
        try:
            return self.namespace[name]
        except KeyError:
            raise GenericException("'{}' is not a known program", name, diagnosis=False)

    def add(self, name, program=None):
        """Queues a program for execution. If program is given, it is also bound to name in the namespace, otherwise
        the program already called name is queued. Nothing is evaluated until run is called.
        """
        if program is None:
            program = self.get(name)
        elif name in self.namespace and self.namespace[name] != program:
            self.error_handler.warn("'{}' redefined", name, diagnosis=False)

        self.namespace[name] = program
        self.to_exec[name] = program

    def run(self):
        """Runs every queued program in order, storing results in self.results. Will raise any errors that are
        encountered; a program that raised is not run again.
        """
        for name, program in list(self.to_exec.items()):
            self.error_handler.register_program(name, program)

            try:
                if self.verbose:
                    print(self.stages(name, program))
                program_type, value = run(program)
            finally:
                del self.to_exec[name]

            self.results.append((name, program_type, value))
            self.error_handler.remove_program(name)

    def pop(self):
        """Removes the oldest result and returns it formatted as '<value> : <type>'."""
        __, program_type, value = self.results.pop(0)
        return f"{value} : {program_type}"

    def stages(self, name, program=None):
        """Returns program (by default the one called name) as written, as resolved to its nameless tree and its type."""
        if program is None:
            program = self.get(name)
        expr = resolve((), program)
        indent = " " * len(name)
        return f"{name} := {program}\n{indent}  ~> {expr}\n{indent}   : {typecheck((), expr)}"

    def listing(self):
        """Returns one line per program in the namespace."""
        width = max(len(name) for name in self.namespace)
        return "\n".join(f"{name:<{width}}  {program}" for name, program in self.namespace.items())
