"""
Documentation reflow tests.

Scope
- reflow(): no lines, a single paragraph, and the summary/details split.
- lines(): docstring cleanup before reflow.
"""
import unittest
from unittest import TestCase

from argwright import Directive, lines, reflow


class TestReflow(TestCase):
    def testSplitSummaryAndDetails(self):
        self.assertEqual(
            reflow(["Does X.", "", "More detail."], "help"),
            (
                Directive("long_help", "Does X.\n\nMore detail."),
                Directive("help", "Does X"),
            ),
        )

    def testSingleLineIsKeptAsIs(self):
        self.assertEqual(reflow(["Does X."], "help"), (Directive("help", "Does X."),))

    def testNoLinesNoDirective(self):
        self.assertEqual(reflow([], "help"), ())

    def testContinuationLinesAreJoined(self):
        self.assertEqual(
            reflow(["  Does X", "  and Y.  "], "about"),
            (Directive("about", "Does X and Y."),),
        )

    def testSecondLineNotBlankMeansNoSplit(self):
        self.assertEqual(
            reflow(["Does X,", "then Y.", "", "More."], "help"),
            (Directive("help", "Does X, then Y.\n\nMore."),),
        )

    def testStructUsesAboutNames(self):
        names = [directive.name for directive in reflow(["App.", "", "Details."], "about")]
        self.assertEqual(names, ["long_about", "about"])

    def testStringIsNotAnIterableOfLines(self):
        with self.assertRaises(TypeError):
            reflow("Does X.", "help")


class TestLines(TestCase):
    def testDocstringIsCleaned(self):
        docstring = """
            Does X.

            More detail.
        """
        self.assertEqual(lines(docstring), ["Does X.", "", "More detail."])

    def testNoneHasNoLines(self):
        self.assertEqual(lines(None), [])


if __name__ == "__main__":
    unittest.main()
