"""
Table module behavioral tests (validation and querying).

Scope
- Validate occurrence checks in registration order (first violation wins).
- Validate get_vals/get_val/get_flag/get_count and the free list.
- Validate caller defects (unregistered names) as KeyError.

Conventions
- Test method names follow CamelCase per project convention.
- Tables are built directly from Arg states where the matcher is not the subject.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from optable import OptParser, OptTable, Arg, Val, Given, Short, Long
from optable import MissingArgumentError, DuplicatedArgumentError


def _states(parser, *counts):
    opts = []
    for index, count in enumerate(counts):
        opt = Arg(index)
        for _ in range(count):
            opt.capture()
        opts.append(opt)
    return opts


class TestValidation(TestCase):
    """Occurrence policy checks."""

    def setUp(self):
        self.parser = OptParser()
        self.parser.add_necessary_flag("i", "index", "include mode") \
                   .add_optional_flag("v", "verbose", "talk more") \
                   .add_multi_arg("I", "include", "include directory", "DIR")

    def testAllPoliciesSatisfied(self):
        table = OptTable(self.parser, _states(self.parser, 1, 1, 5), []).validate()
        self.assertIsInstance(table, OptTable)

    def testExactlyOneMissing(self):
        with self.assertRaises(MissingArgumentError) as context:
            OptTable(self.parser, _states(self.parser, 0, 0, 0), []).validate()
        self.assertEqual(context.exception.name, " --index  -i ")

    def testExactlyOneDuplicated(self):
        with self.assertRaises(DuplicatedArgumentError) as context:
            OptTable(self.parser, _states(self.parser, 2, 0, 0), []).validate()
        self.assertIn("index", context.exception.name)

    def testAtMostOneDuplicated(self):
        with self.assertRaises(DuplicatedArgumentError) as context:
            OptTable(self.parser, _states(self.parser, 1, 2, 0), []).validate()
        self.assertIn("verbose", context.exception.name)

    def testFirstViolationInRegistrationOrderWins(self):
        # both index (missing) and verbose (duplicated) are wrong; index comes first
        with self.assertRaises(MissingArgumentError):
            OptTable(self.parser, _states(self.parser, 0, 3, 0), []).validate()

    def testStatesMustBeIndexAligned(self):
        with self.assertRaises(ValueError):
            OptTable(self.parser, _states(self.parser, 1), [])

    def testRenderingOptionsReachFaults(self):
        with self.assertRaises(MissingArgumentError) as context:
            OptTable(self.parser, _states(self.parser, 0, 0, 0), [], prog="tool").validate()
        self.assertEqual(context.exception.options["prog"], "tool")


class TestQueries(TestCase):
    """Result table accessors."""

    def setUp(self):
        self.parser = OptParser()
        self.parser.add_optional_arg("t", "test", "test times", "TIMES") \
                   .add_maybe_arg("o", "out", "output file", "FILE") \
                   .add_optional_flag("v", "verbose", "talk more") \
                   .add_multi_arg("I", "include", "include directory", "DIR")
        test, out, verbose, include = (Arg(index) for index in range(4))
        test.capture(Val("20"))
        out.capture(Given)
        verbose.capture()
        include.capture(Val("a"))
        include.capture(Val("b"))
        self.table = OptTable(self.parser, [test, out, verbose, include], ["x", "y"])

    def testGetValByEitherName(self):
        self.assertEqual(self.table.get_val("test"), "20")
        self.assertEqual(self.table.get_val("t"), "20")
        self.assertEqual(self.table.get_val(Long("test")), "20")
        self.assertEqual(self.table.get_val(Short("t")), "20")

    def testGetValOfGivenIsNone(self):
        self.assertIsNone(self.table.get_val("out"))

    def testGetValOfFlagIsNone(self):
        self.assertIsNone(self.table.get_val("verbose"))

    def testGetValsKeepsOrder(self):
        self.assertEqual(self.table.get_vals("include"), (Val("a"), Val("b")))
        self.assertEqual(self.table.get_vals("out"), (Given,))
        self.assertEqual(self.table.get_vals("verbose"), ())

    def testGetFlagAndCount(self):
        self.assertTrue(self.table.get_flag("v"))
        self.assertTrue(self.table.get_flag("out"))
        self.assertEqual(self.table.get_count("I"), 2)

    def testContains(self):
        self.assertIn("verbose", self.table)
        self.assertNotIn("missing", self.table)

    def testFreeIsReadOnlyTuple(self):
        self.assertEqual(self.table.free, ("x", "y"))
        with self.assertRaises(AttributeError):
            self.table.free = ()

    def testUnregisteredNameIsCallerDefect(self):
        with self.assertRaises(KeyError):
            self.table.get_val("missing")
        with self.assertRaises(KeyError):
            self.table.get_vals("m")
        with self.assertRaises(KeyError):
            self.table.get_flag("missing")

    def testRepr(self):
        self.assertIn("free=('x', 'y')", repr(self.table))


if __name__ == "__main__":
    unittest.main()
