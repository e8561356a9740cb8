"""
Tests for the prefix mapping.

Scope
- Exact lookups through the Mapping protocol.
- Unique-prefix lookups, ambiguity and exact-match precedence.
- Insertion rules (unique string keys).

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from cmdparse.mapping import PrefixMap


class PrefixMapTest(TestCase):
    """Behavioral tests for PrefixMap."""

    def setUp(self) -> None:
        self.table = PrefixMap()
        self.table.insert("import", 1)
        self.table.insert("implode", 2)

    def testExactLookup(self) -> None:
        self.assertEqual(self.table["import"], 1)
        self.assertEqual(self.table.lookup("implode"), 2)

    def testUniquePrefix(self) -> None:
        self.assertEqual(self.table.lookup("impo"), 1)
        self.assertEqual(self.table.lookup("impl"), 2)

    def testAmbiguousPrefix(self) -> None:
        # "im" starts both keys
        self.assertIsNone(self.table.lookup("im"))
        self.assertIsNone(self.table.lookup("i"))
        self.assertEqual(self.table.lookup("im", 0), 0)

    def testNoMatch(self) -> None:
        self.assertIsNone(self.table.lookup("export"))
        self.assertIsNone(self.table.lookup("imports"))

    def testExactBeatsPrefix(self) -> None:
        self.table.insert("important", 3)
        self.assertEqual(self.table.lookup("import"), 1)
        self.assertIsNone(self.table.lookup("impor"))
        self.assertEqual(self.table.lookup("importa"), 3)

    def testExactAccessIgnoresPrefixes(self) -> None:
        self.assertIsNone(self.table.get("imp"))
        with self.assertRaises(KeyError):
            self.table["impo"]

    def testDuplicateKeyRaises(self) -> None:
        with self.assertRaises(ValueError):
            self.table.insert("import", 4)
        self.assertEqual(self.table["import"], 1)

    def testNonStringKeyRaises(self) -> None:
        with self.assertRaises(TypeError):
            self.table.insert(1, "one")

    def testMappingProtocol(self) -> None:
        self.assertEqual(len(self.table), 2)
        self.assertEqual(list(self.table), ["import", "implode"])
        self.assertIn("implode", self.table)
        self.assertNotIn("impl", self.table)
        self.assertEqual(dict(self.table), {"import": 1, "implode": 2})

    def testConstructorItems(self) -> None:
        table = PrefixMap({"add": "a", "del": "d"})
        self.assertEqual(table.lookup("a"), "a")
        self.assertEqual(table.lookup("d"), "d")
        self.assertEqual(repr(table), "PrefixMap({'add': 'a', 'del': 'd'})")


if __name__ == "__main__":
    unittest.main()
