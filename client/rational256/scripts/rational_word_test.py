import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from rational256.errors import DivisionByZero, Underflow
from rational256.types.rational import Rational
from .rational_word import decode, encode, main, parse_fraction


class TestParseFraction(unittest.TestCase):
    def test_parse(self):
        self.assertEqual(parse_fraction("6/8"), Rational(3, 4))
        self.assertEqual(parse_fraction("5"), Rational(5, 1))

    def test_errors(self):
        with self.assertRaises(ValueError):
            parse_fraction("a/b")
        with self.assertRaises(DivisionByZero):
            parse_fraction("1/0")
        with self.assertRaises(Underflow):
            parse_fraction("-1/2")

    def test_error_hides_int_traceback(self):
        with self.assertRaises(ValueError) as ctx:
            parse_fraction("1/x")
        self.assertTrue(ctx.exception.__suppress_context__)
        self.assertIsNone(ctx.exception.__cause__)


class TestRationalWord(unittest.TestCase):
    HALF = "02" + "00" * 15 + "01" + "00" * 15

    def test_encode(self):
        self.assertEqual(
            encode("2/4"),
            "\n".join(["1/2", str((1 << 128) | 2), self.HALF]),
        )

    def test_decode(self):
        self.assertEqual(decode(self.HALF), "1/2\n0")
        self.assertEqual(decode("00" * 32), "0/0\n0")

    def test_decode_wrong_length(self):
        with self.assertRaises(ValueError):
            decode("00" * 31)

    def test_main(self):
        out = io.StringIO()
        with redirect_stdout(out):
            self.assertEqual(main(["decode", self.HALF]), 0)
        self.assertEqual(out.getvalue(), "1/2\n0\n")

    def test_main_error(self):
        err = io.StringIO()
        with redirect_stderr(err):
            self.assertEqual(main(["encode", "1/0"]), 1)
        self.assertTrue(err.getvalue().startswith("error: "))

    def test_main_rejects_zero_denominator_word(self):
        err = io.StringIO()
        with redirect_stderr(err):
            self.assertEqual(main(["decode", "00" * 16 + "03" + "00" * 15]), 1)
        self.assertTrue(err.getvalue().startswith("error: "))
