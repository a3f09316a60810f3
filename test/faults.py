"""
Configuration faults: codes, options, rendering and triggering.

This module verifies:
- Every fault class carries a stable code from FaultCode.
- Options (target, hint) are read-only and replaceable through copy.replace.
- Rich rendering of the header, target, message and hint.
- trigger(): raising outside shell mode, printing and exiting in shell mode.
"""
import copy
import io
import unittest
from unittest import TestCase, mock

from rich.console import Console

from argwright import (
    ConfigError,
    FaultCode,
    IllegalDirectiveForShapeError,
    MalformedPathError,
    UnknownCasingStyleError,
    trigger,
)
from argwright import faults


def render(renderable):
    console = Console(file=io.StringIO(), color_system=None, width=200)
    console.print(renderable)
    return console.file.getvalue()


class TestConfigError(TestCase):
    def testEveryFaultHasACode(self):
        codes = [fault.__code__ for fault in ConfigError.__subclasses__()]
        self.assertEqual(sorted(codes), sorted(FaultCode))

    def testMessageAndOptions(self):
        error = IllegalDirectiveForShapeError("default_value is meaningless for Bool", hint="remove it")
        self.assertEqual(str(error), "default_value is meaningless for Bool")
        self.assertEqual(error.code, FaultCode.ILLEGAL_DIRECTIVE_FOR_SHAPE)
        self.assertEqual(error.hint, "remove it")
        self.assertIsNone(error.target)
        with self.assertRaises(TypeError):
            error.options["target"] = "verbose"

    def testReplaceMergesOptions(self):
        error = copy.replace(UnknownCasingStyleError("unsupported casing: lisp", hint="h"), target="app")
        self.assertIsInstance(error, UnknownCasingStyleError)
        self.assertEqual((error.target, error.hint), ("app", "h"))

    def testRendering(self):
        error = MalformedPathError("'a::' is not a plain path", target="parser", hint="use a.b")
        output = render(error)
        self.assertIn("25102", output)
        self.assertIn("Malformed Path", output)
        self.assertIn("parser: 'a::' is not a plain path", output)
        self.assertIn("use a.b", output)

    def testFancyRendering(self):
        output = render(copy.replace(MalformedPathError("bad"), fancy=True, colorful=False))
        self.assertIn("bad", output)
        self.assertIn("Malformed Path", output)


class TestTrigger(TestCase):
    def testRaisesOutsideShell(self):
        with self.assertRaises(UnknownCasingStyleError) as context:
            trigger(UnknownCasingStyleError("unsupported casing: lisp"), target="app")
        self.assertEqual(context.exception.target, "app")

    def testShellPrintsAndExits(self):
        console = Console(file=io.StringIO(), color_system=None, width=200)
        with mock.patch.object(faults, "console", console):
            with self.assertRaises(SystemExit) as context:
                trigger(UnknownCasingStyleError("unsupported casing: lisp"), shell=True)
        self.assertEqual(context.exception.code, 1)
        self.assertIn("unsupported casing: lisp", console.file.getvalue())

    def testRejectsNonTriggerables(self):
        with self.assertRaises(TypeError):
            trigger(ValueError("x"))


if __name__ == "__main__":
    unittest.main()
