"""
Tests for the internal helpers (Unset sentinel, rename, view).

Conventions
- Test method names follow CamelCase per project convention.
"""
import copy
import unittest
from types import MappingProxyType
from unittest import TestCase

from optable.utils import *


class UtilsTest(TestCase):

    def testUnsetIsFalseySingleton(self):
        self.assertIs(UnsetType(), Unset)
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")
        self.assertIs(copy.copy(Unset), Unset)

    def testUnsetIsSealed(self):
        with self.assertRaises(TypeError):
            class Other(UnsetType):
                pass

    def testRenameForms(self):
        def work():
            pass

        self.assertIs(rename(work, "job"), work)
        self.assertEqual(work.__name__, "job")

        @rename("task")
        def other():
            pass

        self.assertEqual(other.__qualname__, "task")
        with self.assertRaises(TypeError):
            rename()

    def testViewReturnsImmutableContainers(self):
        class Holder:
            items = view("items")
            table = view("table")

            def __init__(self):
                self._items = [1, 2]
                self._table = {"a": 1}

        holder = Holder()
        self.assertEqual(holder.items, (1, 2))
        self.assertIsInstance(holder.table, MappingProxyType)
        with self.assertRaises(AttributeError):
            holder.items = ()


if __name__ == "__main__":
    unittest.main()
