"""
Opaque expressions and directive tokens.

Scope
- Literal / Path / Opaque / Arguments: validation and emitter text.
- expression(): coercion of plain Python values.
- Directive tokens: argument checks and structural equality.
"""
import os.path
import unittest
from unittest import TestCase

from argwright import (
    Arguments,
    Directive,
    Expression,
    Literal,
    MalformedPathError,
    MethodCall,
    NameExpr,
    NameLiteral,
    Opaque,
    Parse,
    Path,
    Short,
    expression,
)


def parse_port(text):
    return int(text)


class TestExpressions(TestCase):
    def testLiteralText(self):
        self.assertEqual(str(Literal("say \"hi\"")), '"say \\"hi\\""')
        self.assertEqual(str(Literal(True)), "true")
        self.assertEqual(str(Literal(3)), "3")
        self.assertEqual(str(Literal(0.5)), "0.5")

    def testBaseExpressionIsAbstract(self):
        with self.assertRaises(TypeError):
            Expression()

    def testLiteralRejectsOtherValues(self):
        with self.assertRaises(TypeError):
            Literal(None)

    def testPathSeparators(self):
        self.assertEqual(Path("std::str::FromStr").segments, ("std", "str", "FromStr"))
        self.assertEqual(Path("::crate::parse").segments, ("crate", "parse"))
        self.assertEqual(Path("module.parse").segments, ("module", "parse"))
        self.assertEqual(str(Path(" module.parse ")), "module.parse")

    def testMalformedPaths(self):
        for text in ("", "parse()", "|s| s.len()", "a::", "1abc", "a..b"):
            with self.subTest(text=text):
                with self.assertRaises(MalformedPathError):
                    Path(text)

    def testPathOfCallable(self):
        self.assertEqual(Path.of(parse_port), Path(f"{__name__}.parse_port"))
        self.assertEqual(Path.of(os.path.join).segments[-1], "join")

    def testPathOfLambdaIsOpaque(self):
        self.assertIsInstance(Path.of(lambda text: text), Opaque)

    def testOpaqueMustNotBeEmpty(self):
        self.assertEqual(str(Opaque(" 1 + 2 ")), "1 + 2")
        with self.assertRaises(ValueError):
            Opaque("   ")

    def testArgumentsJoin(self):
        arguments = Arguments("a", 1, Opaque("Some(2)"))
        self.assertEqual(len(arguments), 3)
        self.assertEqual(str(arguments), '"a", 1, Some(2)')
        self.assertEqual(str(Arguments()), "")

    def testCoercion(self):
        path = Path("a.b")
        self.assertIs(expression(path), path)
        self.assertEqual(expression("x"), Literal("x"))
        with self.assertRaises(TypeError):
            expression([1, 2])

    def testStructuralEquality(self):
        self.assertEqual(Literal("x"), Literal("x"))
        self.assertNotEqual(Literal("x"), Opaque("x"))
        self.assertEqual(len({Path("a.b"), Path("a.b")}), 1)


class TestTokens(TestCase):
    def testTokensCompareStructurally(self):
        self.assertEqual(Short(), Short())
        self.assertEqual(NameLiteral("help", "x"), NameLiteral("help", "x"))
        self.assertNotEqual(NameLiteral("help", "x"), NameLiteral("about", "x"))

    def testMethodMustBeIdentifier(self):
        with self.assertRaises(ValueError):
            NameLiteral("not a method", "x")
        with self.assertRaises(TypeError):
            NameLiteral("help", 1)

    def testExpressionArguments(self):
        self.assertEqual(NameExpr("default_value", 3).expr, Literal(3))
        self.assertEqual(MethodCall("aliases", "a", "b").args, Arguments("a", "b"))

    def testParseFunctionForms(self):
        self.assertEqual(Parse("try_from_str", parse_port).function, Path.of(parse_port))
        self.assertEqual(Parse("try_from_str", "text").function, Literal("text"))
        self.assertEqual(Parse("from_str", Path("a.b")).function, Path("a.b"))

    def testDirectiveRepr(self):
        self.assertEqual(
            repr(Directive("long", "verbose")),
            "directive(name='long', argument=literal(value='verbose'))",
        )


if __name__ == "__main__":
    unittest.main()
