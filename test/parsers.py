"""
Value-parser selection.

Scope
- ParserKind.parse(): the five strategy names.
- ParserSpec.resolve(): default conversions, explicit paths and rejected forms.
"""
import unittest
from unittest import TestCase

from argwright import (
    IDENTITY,
    OCCURRENCE_CAST,
    STRING_PARSE,
    InvalidParserFunctionFormError,
    Literal,
    MissingParserFunctionError,
    Opaque,
    ParserKind,
    ParserSpec,
    Path,
    UnknownParserKindError,
)


class TestParserKind(TestCase):
    def testNames(self):
        self.assertEqual(
            [kind.value for kind in ParserKind],
            ["from_str", "try_from_str", "from_os_str", "try_from_os_str", "from_occurrences"],
        )

    def testUnknownName(self):
        with self.assertRaisesRegex(UnknownParserKindError, "unsupported parser from_bytes"):
            ParserKind.parse("from_bytes")


class TestResolve(TestCase):
    def testDefaultSpec(self):
        self.assertEqual(ParserSpec.default(), ParserSpec(ParserKind.TryFromString, STRING_PARSE))

    def testDefaultConversions(self):
        for name, conversion in (
            ("from_str", IDENTITY),
            ("from_os_str", IDENTITY),
            ("try_from_str", STRING_PARSE),
            ("from_occurrences", OCCURRENCE_CAST),
        ):
            with self.subTest(name=name):
                spec = ParserSpec.resolve(name)
                self.assertIs(spec.kind, ParserKind(name))
                self.assertEqual(spec.conversion, conversion)

    def testOsStringTryParseNeedsFunction(self):
        with self.assertRaisesRegex(MissingParserFunctionError, "try_from_os_str"):
            ParserSpec.resolve("try_from_os_str")

    def testExplicitPath(self):
        spec = ParserSpec.resolve("try_from_os_str", Path("paths.existing"))
        self.assertEqual(spec, ParserSpec(ParserKind.TryFromOsString, Path("paths.existing")))

    def testExplicitFunctionMustBePath(self):
        for function in (Literal("paths.existing"), Opaque("|s| s.len()")):
            with self.subTest(function=function):
                with self.assertRaisesRegex(InvalidParserFunctionFormError, "parse argument must be a function path"):
                    ParserSpec.resolve("from_str", function)

    def testUnknownKindWinsOverFunctionForm(self):
        with self.assertRaises(UnknownParserKindError):
            ParserSpec.resolve("from_bytes", Opaque("|s| s"))


if __name__ == "__main__":
    unittest.main()
