"""
Names module behavioral tests (identifier sets, FlagInfo, NameTable).

Scope
- Validate default spelling derivation (underscore → hyphen) and its idempotence.
- Validate accepted identifier sets and their rejection rules.
- Validate FlagInfo construction rules and spelling order.
- Validate table construction: defaults, overrides, aliases and configuration errors.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import enum
import unittest
import warnings
from unittest import TestCase

from plainarg import FlagInfo, NameTable, RedundantSpellingWarning, identifiers, infer_name


class Arg(enum.Enum):
    foo_bar = enum.auto()
    baz = enum.auto()


class Empty(enum.Enum):
    pass


class TestInferName(TestCase):
    """Behavioral tests for infer_name()."""

    def testUnderscoresBecomeHyphens(self):
        self.assertEqual(infer_name("foo_bar_baz"), "foo-bar-baz")

    def testCaseIsPreserved(self):
        self.assertEqual(infer_name("DARK_BLUE"), "DARK-BLUE")

    def testIdempotent(self):
        for symbol in ("foo_bar", "foo-bar", "__x__", "plain"):
            with self.subTest(symbol=symbol):
                self.assertEqual(infer_name(infer_name(symbol)), infer_name(symbol))

    def testMatchesFlagSpelling(self):
        table = NameTable.for_flags(Arg)
        self.assertEqual(table["--" + infer_name("foo_bar")], Arg.foo_bar)
        self.assertNotIn("--foo_bar", table)

    def testRejectsNonString(self):
        with self.assertRaises(TypeError):
            infer_name(Arg.baz)


class TestIdentifiers(TestCase):
    """Behavioral tests for identifiers()."""

    def testEnum(self):
        self.assertEqual(identifiers(Arg), {Arg.foo_bar: "foo_bar", Arg.baz: "baz"})

    def testEnumMembers(self):
        self.assertEqual(identifiers([Arg.baz]), {Arg.baz: "baz"})

    def testMapping(self):
        self.assertEqual(identifiers({1: "one", 2: "two_too"}), {1: "one", 2: "two_too"})

    def testStrings(self):
        self.assertEqual(identifiers(("a", "b_c")), {"a": "a", "b_c": "b_c"})

    def testOrderIsPreserved(self):
        self.assertEqual(list(identifiers(["z", "a", "m"])), ["z", "a", "m"])

    def testEmptyRejected(self):
        for source in ([], {}, Empty):
            with self.subTest(source=source):
                with self.assertRaises(ValueError):
                    identifiers(source)

    def testDuplicatesRejected(self):
        with self.assertRaises(ValueError):
            identifiers(["a", "a"])

    def testNamelessIdentifierRejected(self):
        with self.assertRaises(TypeError):
            identifiers([1, 2])

    def testEmptySymbolRejected(self):
        with self.assertRaises(ValueError):
            identifiers({1: ""})

    def testBareStringRejected(self):
        with self.assertRaises(TypeError):
            identifiers("abc")


class TestFlagInfo(TestCase):
    """Behavioral tests for FlagInfo."""

    def testSpellingOrder(self):
        info = FlagInfo(Arg.baz, name="bazz", short="b", aliases=["--bz", "-B"])
        self.assertEqual(info.spellings(), ("--bazz", "-b", "--bz", "-B"))

    def testInferredName(self):
        info = FlagInfo(Arg.foo_bar, short="f")
        self.assertEqual(info.spellings("foo_bar"), ("--foo-bar", "-f"))

    def testExplicitNameNeedsNoSymbol(self):
        self.assertEqual(FlagInfo(Arg.foo_bar, name="fb").spellings(), ("--fb",))

    def testExplicitNameWinsOverSymbol(self):
        self.assertEqual(FlagInfo(Arg.foo_bar, name="fb").spellings("foo_bar"), ("--fb",))

    def testSymbolRequiredWithoutName(self):
        with self.assertRaises(TypeError):
            FlagInfo(Arg.baz).spellings()

    def testAttributes(self):
        info = FlagInfo(Arg.baz, short="b", aliases=["--bz"])
        self.assertIs(info.identifier, Arg.baz)
        self.assertEqual(info.short, "b")
        self.assertEqual(info.aliases, ("--bz",))

    def testNameValidation(self):
        with self.assertRaises(ValueError):
            FlagInfo(Arg.baz, name="")
        with self.assertRaises(ValueError):
            FlagInfo(Arg.baz, name="--baz")
        with self.assertRaises(TypeError):
            FlagInfo(Arg.baz, name=3)

    def testShortValidation(self):
        for short in ("", "ab", "-"):
            with self.subTest(short=short):
                with self.assertRaises(ValueError):
                    FlagInfo(Arg.baz, short=short)
        with self.assertRaises(TypeError):
            FlagInfo(Arg.baz, short=98)

    def testAliasesValidation(self):
        with self.assertRaises(TypeError):
            FlagInfo(Arg.baz, aliases="--bz")
        with self.assertRaises(TypeError):
            FlagInfo(Arg.baz, aliases=[1])
        with self.assertRaises(ValueError):
            FlagInfo(Arg.baz, aliases=[""])

    def testRepr(self):
        self.assertEqual(repr(FlagInfo("x", short="x")), "FlagInfo('x', short='x')")


class TestNameTable(TestCase):
    """Behavioral tests for NameTable construction and lookups."""

    def testDefaultFlagSpellings(self):
        table = NameTable.for_flags(Arg)
        self.assertEqual(dict(table), {"--foo-bar": Arg.foo_bar, "--baz": Arg.baz})
        self.assertEqual(table.expected, "flag")

    def testExplicitFlagSpellings(self):
        table = NameTable.for_flags(Arg, [FlagInfo(Arg.baz, short="b", aliases=["--qux"])])
        self.assertEqual(table.spellings(Arg.baz), ("--baz", "-b", "--qux"))
        self.assertEqual(table["-b"], Arg.baz)
        self.assertEqual(table.identifiers, (Arg.foo_bar, Arg.baz))

    def testDuplicateMetadataRejected(self):
        with self.assertRaises(ValueError):
            NameTable.for_flags(Arg, [FlagInfo(Arg.baz), FlagInfo(Arg.baz, short="z")])

    def testForeignMetadataRejected(self):
        with self.assertRaises(ValueError):
            NameTable.for_flags(Arg, [FlagInfo("stranger")])

    def testNonFlagInfoRejected(self):
        with self.assertRaises(TypeError):
            NameTable.for_flags(Arg, [Arg.baz])

    def testAmbiguousSpellingRejected(self):
        with self.assertRaises(ValueError):
            NameTable.for_flags(Arg, [FlagInfo(Arg.foo_bar, aliases=["--baz"])])

    def testRedundantSpellingWarns(self):
        with self.assertWarns(RedundantSpellingWarning):
            table = NameTable.for_flags(Arg, [FlagInfo(Arg.baz, aliases=["--baz"])])
        self.assertEqual(table["--baz"], Arg.baz)

    def testDistinctSpellingsDoNotWarn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            NameTable.for_flags(Arg, [FlagInfo(Arg.baz, short="b")])

    def testDefaultValueSpellings(self):
        table = NameTable.for_values(Arg)
        self.assertEqual(dict(table), {"foo-bar": Arg.foo_bar, "baz": Arg.baz})
        self.assertEqual(table.expected, "Arg")

    def testValueAliasesReplaceDefault(self):
        table = NameTable.for_values(Arg, {Arg.baz: ["b", "bazz"], Arg.foo_bar: None})
        self.assertEqual(dict(table), {"foo-bar": Arg.foo_bar, "b": Arg.baz, "bazz": Arg.baz})

    def testEmptyAliasesMakeValueUnmatchable(self):
        table = NameTable.for_values(Arg, {Arg.baz: []})
        self.assertNotIn("baz", table)
        self.assertEqual(table.spellings(Arg.baz), ())

    def testForeignAliasesRejected(self):
        with self.assertRaises(ValueError):
            NameTable.for_values(Arg, {"stranger": ["s"]})

    def testNonMappingAliasesRejected(self):
        with self.assertRaises(TypeError):
            NameTable.for_values(Arg, [("baz", ["b"])])

    def testValueLabelForIterables(self):
        self.assertEqual(NameTable.for_values(["fast", "safe"]).expected, "value")

    def testPrebuiltTablePassesThrough(self):
        table = NameTable.for_flags(Arg)
        self.assertIs(NameTable.for_flags(table), table)
        self.assertIs(NameTable.for_values(table), table)

    def testPrebuiltTableRejectsOverrides(self):
        table = NameTable.for_flags(Arg)
        with self.assertRaises(TypeError):
            NameTable.for_flags(table, [FlagInfo(Arg.baz, short="b")])
        with self.assertRaises(TypeError):
            NameTable.for_values(table, {Arg.baz: ["b"]})

    def testReadOnly(self):
        table = NameTable.for_flags(Arg)
        with self.assertRaises(TypeError):
            table["--new"] = Arg.baz

    def testDirectConstruction(self):
        table = NameTable({"fast": ["f", "quick"]}, expected="a mode")
        self.assertEqual(table["quick"], "fast")
        self.assertEqual(len(table), 2)
        self.assertEqual(table.expected, "a mode")

    def testDirectConstructionValidation(self):
        with self.assertRaises(TypeError):
            NameTable({"fast": "f"})
        with self.assertRaises(TypeError):
            NameTable([("fast", ["f"])])
        with self.assertRaises(ValueError):
            NameTable({"fast": [""]})


if __name__ == "__main__":
    unittest.main()
