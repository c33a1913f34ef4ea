"""Handles interactive/command-line mode for stlc interpreter. Uses cmd as backend."""

import cmd

from stlc.lang.error import GenericException


class Shell(cmd.Cmd):
    """Simply-typed lambda calculus interpreter shell."""
    intro = "Simply-typed lambda calculus interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sess = sess

    def default(self, line):
        """Runs the programs named in line."""
        self.do_run(line)

    def do_run(self, arg):
        """run NAME [NAME ...]: runs the named programs and prints '<value> : <type>' for each."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            try:
                for name in arg.split():
                    self.sess.add(name)
                self.sess.run()
            finally:
                self.sess.to_exec.clear()  # an error drops the rest of the line
                while self.sess.results:
                    print(self.sess.pop())

    def do_show(self, arg):
        """show NAME: prints the named program and its nameless tree."""
        with self.sess.error_handler:
            if not arg.strip():
                raise GenericException("show expects a program name", diagnosis=False)
            print(self.sess.stages(arg.strip()))

    def do_list(self, arg):
        """list: prints every known program."""
        print(self.sess.listing())

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the stlc interpreter!\n\n"
              "The simply-typed lambda calculus has integers, addition and functions whose \n"
              "parameter types are written out. Every program is type checked before it is \n"
              "evaluated, so a program that runs cannot go wrong.\n\n"
              "Try it out by typing 'list' to see the example programs, then 'show test1' to \n"
              "see how a program's names become binding depths. 'run test1' (or just \n"
              "'test1') prints its value and type.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit("")

    def do_exit(self, arg):
        """Exits interpreter."""
        if arg:
            with self.sess.error_handler:
                raise GenericException("unrecognized token: '{}'", arg, diagnosis=False)
            return False
        return True
