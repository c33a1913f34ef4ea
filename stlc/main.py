"""Runs the stlc example programs, or starts the interpreter shell. Called from the stlc executable script. Also uses
error handling context manager.
"""

import argparse

from stlc.lang.error import ErrorHandler
from stlc.lang.session import Session
from stlc.lang.shell import Shell


def main(argv=None):
    """Runs stlc interpreter. Called from stlc executable script."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="stlc", description="simply-typed lambda calculus interpreter")
        parser.add_argument("programs", help="programs to run (if empty, goes to command-line mode)", nargs="*")
        parser.add_argument("-l", "--list", help="list the known programs and exit", action="store_true")
        parser.add_argument("-v", "--verbose", help="print each program's nameless tree", action="store_true")
        args = parser.parse_args(argv)

        if args.list:
            print(Session(error_handler).listing())

        elif args.programs:
            sess = Session(error_handler, cmd_line=False, verbose=args.verbose)
            for name in args.programs:
                sess.add(name)
                sess.run()
                print(sess.pop())

        else:
            Shell(Session(error_handler, cmd_line=True, verbose=args.verbose)).cmdloop()
