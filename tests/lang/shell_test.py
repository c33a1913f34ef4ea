import io
import unittest
from contextlib import redirect_stdout

from stlc.lang.error import ErrorHandler
from stlc.lang.session import Session
from stlc.lang.shell import Shell


class ShellTestCase(unittest.TestCase):

    def setUp(self):
        self.shell = Shell(Session(ErrorHandler(), cmd_line=True))

    def onecmd(self, line):
        out = io.StringIO()
        with redirect_stdout(out):
            stop = self.shell.onecmd(line)
        return stop, out.getvalue()

    def test_run(self):
        cases = {"run test1": "6 : Int\n", "test2": "1 : Int\n", "run test3 test1": "10 : Int\n6 : Int\n"}
        for line, result in cases.items():
            self.assertEqual((None, result), self.onecmd(line), line)

    def test_error(self):
        cases = {
            "unbound": "is not bound by any enclosing",
            "not_a_function": "which is not a function",
            "run missing": "is not a known program",
            "show": "show expects a program name",
        }
        for line, message in cases.items():
            stop, output = self.onecmd(line)
            self.assertFalse(stop, line)
            self.assertIn("error: ", output, line)
            self.assertIn(message, output, line)

        # errors drop the rest of the line
        __, output = self.onecmd("run test1 not_a_number test2")
        self.assertIn("6 : Int", output)
        self.assertNotIn("1 : Int", output)
        self.assertEqual({}, self.shell.sess.to_exec)

    def test_show(self):
        __, output = self.onecmd("show test1")
        self.assertIn("(λa:Int. (λb:Int. a) 2 + a) 3", output)
        self.assertIn("(λ:Int. (λ:Int. #1) 2 + #0) 3", output)

    def test_list(self):
        __, output = self.onecmd("list")
        for name in ("id", "const", "test1", "test2", "test3"):
            self.assertIn(name, output)

    def test_exit(self):
        self.assertEqual((True, ""), self.onecmd("exit"))
        self.assertEqual((True, "\n"), self.onecmd("EOF"))

        stop, output = self.onecmd("exit now")
        self.assertFalse(stop)
        self.assertIn("unrecognized token", output)

    def test_emptyline(self):
        self.assertEqual(("", ""), self.onecmd(""))


if __name__ == '__main__':
    unittest.main()
