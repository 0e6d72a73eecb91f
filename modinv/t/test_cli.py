#!/usr/bin/env/ python
# encoding: utf-8

__author__ = 'aldur'

import contextlib
import io
import unittest

import modinv.cli


class CliTestCase(unittest.TestCase):

    def run_main(self, argv: list) -> tuple:
        """
        Run the CLI, capturing its output.

        :param argv: The command line arguments.
        :return: The exit status, the standard output and the standard error.
        """
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            status = modinv.cli.main(argv)
        return status, out.getvalue(), err.getvalue()

    def test_defaults(self):
        status, out, err = self.run_main([])

        self.assertEqual(status, 0)
        self.assertEqual(out, "The modular multiplicative inverse of 3 Mod 5 is 2\n")
        self.assertEqual(err, "")

    def test_operands(self):
        status, out, _ = self.run_main(["7", "26"])

        self.assertEqual(status, 0)
        self.assertEqual(out, "The modular multiplicative inverse of 7 Mod 26 is 15\n")

    def test_modulo_one(self):
        status, out, _ = self.run_main(["42", "1"])

        self.assertEqual(status, 0)
        self.assertEqual(out, "The modular multiplicative inverse of 42 Mod 1 is 0\n")

    def test_not_coprime(self):
        status, out, err = self.run_main(["4", "8"])

        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertIn("4 and 8 aren't relatively prime", err)

    def test_steps(self):
        status, out, _ = self.run_main(["--steps", "3", "5"])
        lines = out.splitlines()

        self.assertEqual(status, 0)
        self.assertEqual(len(lines), 6)
        self.assertEqual(lines[0], "| Q | A | B | R |  x |  y |  T |")
        self.assertEqual(lines[-1], "The modular multiplicative inverse of 3 Mod 5 is 2")

    def test_bad_operands(self):
        for argv in (["x", "5"], ["-3", "5"], ["3", "0"], ["3", str(2 ** 64)]):
            with self.assertRaises(SystemExit) as cm:
                self.run_main(argv)
            self.assertEqual(cm.exception.code, 2)

if __name__ == '__main__':
    unittest.main()
