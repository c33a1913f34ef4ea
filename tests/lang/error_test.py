import io
import unittest
from contextlib import redirect_stdout

from stlc.lang.error import ErrorHandler, GenericException, UnboundError


class GenericExceptionTestCase(unittest.TestCase):

    def test_init(self):
        error = GenericException("'{}' has type '{}'", ["x", 3], start=1, end=2)
        self.assertEqual("'x' has type '3'", str(error))
        self.assertEqual("x", error.expr)
        self.assertEqual((1, 2), (error.start, error.end))
        self.assertFalse(error.internal)

        error = GenericException("keyboard interrupt")
        self.assertEqual("", error.expr)
        self.assertEqual(0, error.end)

    def test_unbound(self):
        error = UnboundError("c")
        self.assertEqual("c", error.name)
        self.assertEqual("'c' is not bound by any enclosing λ", str(error))
        self.assertFalse(error.diagnosis)


class ErrorHandlerTestCase(unittest.TestCase):

    def test_non_fatal(self):
        error_handler = ErrorHandler(fatal=False)
        error_handler.register_program("unbound", "λa:Int. λb:Int. c")

        out = io.StringIO()
        with redirect_stdout(out):
            with error_handler:
                raise UnboundError("c")

        self.assertIn("Program 'unbound'", out.getvalue())
        self.assertIn("error: ", out.getvalue())
        self.assertEqual({}, error_handler.traceback)

    def test_fatal(self):
        with redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit) as context:
                with ErrorHandler():
                    raise GenericException("fatal")
        self.assertEqual(1, context.exception.code)

    def test_unknown_error(self):
        out = io.StringIO()
        with redirect_stdout(out):
            with self.assertRaises(ZeroDivisionError):
                with ErrorHandler(fatal=False):
                    raise ZeroDivisionError("division by zero")
        self.assertIn("[internal] ", out.getvalue())
        self.assertIn("unknown error", out.getvalue())

    def test_recursion_error(self):
        out = io.StringIO()
        with redirect_stdout(out):
            with ErrorHandler(fatal=False):
                raise RecursionError()
        self.assertIn("maximum recursion depth", out.getvalue())

    def test_diagnose(self):
        error = GenericException("{}", "1 + x", start=4, end=5)
        lines = ErrorHandler.diagnose(error).split("\n")
        self.assertTrue(lines[0].startswith("  1 + "), lines[0])
        self.assertTrue(lines[1].startswith("      "), lines[1])
        self.assertIn("^", lines[1])

    def test_warn(self):
        error_handler = ErrorHandler(fatal=False)
        error_handler.register_program("test1", "3")

        out = io.StringIO()
        with redirect_stdout(out):
            error_handler.warn("'{}' redefined", "test1", diagnosis=False)
        self.assertIn("warning: ", out.getvalue())
        self.assertIn("redefined", out.getvalue())

        error_handler.remove_program("test1")
        self.assertEqual({}, error_handler.traceback)


if __name__ == '__main__':
    unittest.main()
