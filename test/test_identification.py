"""
Identification module behavioral tests.

Scope
- Validate exact matching of short (-x) and long (--name) identifier tokens.
- Validate name sanitation (TypeError for types, ValueError for malformed names).
- Validate immutability, equality and representation.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from trivial_argument_parser import ArgumentIdentification, Short, Long, Both


class TestShort(TestCase):
    """Behavioral tests for Short identifications."""

    def testShortMatchesExactToken(self):
        self.assertTrue(Short("x").matches("-x"))

    def testShortRejectsOtherShapes(self):
        identification = Short("x")
        for token in ("x", "--x", "-xy", "-y", "-x=1", "- x"):
            with self.subTest(token=token):
                self.assertFalse(identification.matches(token))

    def testShortIsNotCombined(self):
        self.assertFalse(Short("a").matches("-abc"))

    def testShortNames(self):
        self.assertEqual(Short("x").names, ("-x",))
        self.assertEqual(str(Short("x")), "-x")

    def testShortAccessors(self):
        identification = Short("x")
        self.assertEqual(identification.short, "x")
        self.assertIsNone(identification.long)
        self.assertTrue(identification.is_by_short("x"))
        self.assertFalse(identification.is_by_short("c"))
        self.assertFalse(identification.is_by_long("x"))

    def testShortMustBeSingleCharacter(self):
        with self.assertRaises(ValueError):
            Short("xy")
        with self.assertRaises(ValueError):
            Short("")

    def testShortRejectsDashAndSpaces(self):
        for name in ("-", " ", "="):
            with self.subTest(name=name):
                with self.assertRaises(ValueError):
                    Short(name)

    def testShortMustBeString(self):
        with self.assertRaises(TypeError):
            Short(1)

    def testShortAllowsDigitsAndUnicode(self):
        self.assertTrue(Short("1").matches("-1"))
        self.assertTrue(Short("ż").matches("-ż"))


class TestLong(TestCase):
    """Behavioral tests for Long identifications."""

    def testLongMatchesExactToken(self):
        self.assertTrue(Long("path").matches("--path"))

    def testLongRejectsOtherShapes(self):
        identification = Long("path")
        for token in ("path", "-path", "--pat", "--paths", "--path=abc", "---path"):
            with self.subTest(token=token):
                self.assertFalse(identification.matches(token))

    def testLongAccessors(self):
        identification = Long("an-list")
        self.assertIsNone(identification.short)
        self.assertEqual(identification.long, "an-list")
        self.assertTrue(identification.is_by_long("an-list"))
        self.assertFalse(identification.is_by_long("directory"))
        self.assertEqual(str(identification), "--an-list")

    def testLongAllowsUnderscores(self):
        self.assertTrue(Long("my_arg").matches("--my_arg"))

    def testLongMalformedRejected(self):
        for name in ("", "-path", "two words", "a=b", "tab\tbed"):
            with self.subTest(name=name):
                with self.assertRaises(ValueError):
                    Long(name)

    def testLongMustBeString(self):
        with self.assertRaises(TypeError):
            Long(["path"])


class TestBoth(TestCase):
    """Behavioral tests for Both identifications."""

    def testBothMatchesEitherForm(self):
        identification = Both("p", "path")
        self.assertTrue(identification.matches("-p"))
        self.assertTrue(identification.matches("--path"))
        self.assertFalse(identification.matches("--p"))
        self.assertFalse(identification.matches("-path"))

    def testBothNamesShortFirst(self):
        self.assertEqual(Both("p", "path").names, ("-p", "--path"))

    def testBothDisplaysLongForm(self):
        self.assertEqual(str(Both("p", "path")), "--path")

    def testBothValidatesBothNames(self):
        with self.assertRaises(ValueError):
            Both("pp", "path")
        with self.assertRaises(ValueError):
            Both("p", "")


class TestIdentificationSemantics(TestCase):
    """Equality, hashing, immutability and representation."""

    def testBaseIsNotInstantiable(self):
        with self.assertRaises(TypeError):
            ArgumentIdentification()

    def testEqualityByNames(self):
        self.assertEqual(Short("x"), Short("x"))
        self.assertEqual(hash(Long("path")), hash(Long("path")))
        self.assertNotEqual(Short("x"), Long("x"))
        self.assertNotEqual(Short("p"), Both("p", "path"))

    def testImmutable(self):
        identification = Short("x")
        with self.assertRaises(AttributeError):
            identification._short = "y"
        self.assertTrue(identification.matches("-x"))

    def testRepr(self):
        self.assertEqual(repr(Short("x")), "Short('x')")
        self.assertEqual(repr(Long("path")), "Long('path')")
        self.assertEqual(repr(Both("p", "path")), "Both('p', 'path')")

    def testRichRepr(self):
        self.assertEqual(list(Both("p", "path").__rich_repr__()), [("short", "p"), ("long", "path")])


if __name__ == "__main__":
    unittest.main()
