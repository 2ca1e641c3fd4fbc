"""
Names module behavioral tests.

Scope
- Validate the closed Short/Long union: construction, equality, hashing.
- Validate Name.parse() dispatch and command-line spellings.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import copy
import pickle
import unittest
from unittest import TestCase

from optable import Name, Short, Long


class TestName(TestCase):
    """Behavioral tests for Short/Long names."""

    def testShortRequiresSingleCharacter(self):
        with self.assertRaises(ValueError):
            Short("ab")
        with self.assertRaises(ValueError):
            Short("")

    def testNameRequiresString(self):
        with self.assertRaises(TypeError):
            Long(1)

    def testBaseCannotBeInstantiated(self):
        with self.assertRaises(TypeError):
            Name("test")

    def testUnionIsClosed(self):
        with self.assertRaises(TypeError):
            class Medium(Name):
                pass

    def testStructuralEquality(self):
        self.assertEqual(Short("t"), Short("t"))
        self.assertEqual(Long("test"), Long("test"))
        self.assertNotEqual(Short("t"), Short("i"))
        self.assertNotEqual(Long("test"), Long("index"))

    def testShortNeverEqualsLong(self):
        self.assertNotEqual(Short("t"), Long("t"))

    def testHashFollowsEquality(self):
        self.assertEqual(len({Short("t"), Short("t"), Long("test")}), 2)

    def testParseDispatchesOnLength(self):
        self.assertEqual(Name.parse("t"), Short("t"))
        self.assertEqual(Name.parse("test"), Long("test"))
        self.assertEqual(Name.parse(""), Long(""))

    def testSpellingAndString(self):
        self.assertEqual(Short("t").spelling, "-t")
        self.assertEqual(Long("test").spelling, "--test")
        self.assertEqual(str(Long("test")), "test")
        self.assertEqual(repr(Short("t")), "Short('t')")

    def testImmutable(self):
        with self.assertRaises(AttributeError):
            Long("test")._text = "other"

    def testCopyAndPickleKeepEquality(self):
        name = Long("test")
        self.assertEqual(copy.deepcopy(name), name)
        self.assertEqual(pickle.loads(pickle.dumps(name)), name)


if __name__ == "__main__":
    unittest.main()
