#!/usr/bin/env/ python
# encoding: utf-8

"""
Test each demonstration and the command line.
"""

import unittest
import io
import contextlib
import functools
import unittest.mock

import euclid.demo
import euclid.math

__author__ = 'aldur'


class DemonstrationTestCase(unittest.TestCase):

    def demonstration(self, demonstration_f):
        """
        Test the demonstration, asserting it doesn't fail.

        :param demonstration_f: The demonstration to be tested.
        """
        self.assertTrue(demonstration_f())


"""
Automatically add test methods from each demonstration.
"""
for f in euclid.demo.demonstrations:
    setattr(
        DemonstrationTestCase,
        "test_{}".format(f.__name__),
        functools.partialmethod(DemonstrationTestCase.demonstration, demonstration_f=f)
    )


class MainTestCase(unittest.TestCase):

    def main(self, *argv) -> tuple:
        """
        Run the command line entry point.

        :param argv: The command line arguments.
        :return: The exit status and the printed output.
        """
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            status = euclid.demo.main(list(argv))
        return status, out.getvalue()

    def test_describe(self):
        f = euclid.demo.describe

        self.assertEqual(
            f(3, 11),
            "The modulo inverse of 3 mod 11 is 4"
        )
        self.assertEqual(
            f(4, 8),
            "4 does not have a multiplicative inverse in modulo 8"
        )

    def test_default(self):
        status, out = self.main()

        self.assertEqual(status, 0)
        self.assertEqual(out, "The modulo inverse of 3 mod 11 is 4\n")

    def test_arguments(self):
        status, out = self.main("10", "17")

        self.assertEqual(status, 0)
        self.assertIn("is 12", out)

    def test_single_inverse(self):
        with unittest.mock.patch.object(
                euclid.math, "mod_inverse", wraps=euclid.math.mod_inverse
        ) as mod_inverse:
            status, out = self.main("10", "17")

        self.assertEqual(mod_inverse.call_count, 1)
        self.assertEqual(status, 0)
        self.assertEqual(out, "The modulo inverse of 10 mod 17 is 12\n")

        self.assertEqual(
            euclid.demo.describe(10, 17, 12),
            "The modulo inverse of 10 mod 17 is 12"
        )

    def test_no_inverse(self):
        status, out = self.main("4", "8")

        self.assertEqual(status, 1)
        self.assertIn("does not have a multiplicative inverse", out)

    def test_bad_arguments(self):
        for argv in (("3", "1"), ("3", str(2 ** 31)), ("three", "11")):
            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit) as cm:
                    self.main(*argv)
            self.assertEqual(cm.exception.code, 2)

    def test_all(self):
        status, _ = self.main("--all")
        self.assertEqual(status, 0)


if __name__ == '__main__':
    unittest.main()
