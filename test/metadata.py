"""
Build metadata sources and injection.
"""
import unittest
from unittest import TestCase, mock

from argwright import AttributeModel, BuildMetadata, Directive
from argwright.utils import Unset


class TestBuildMetadata(TestCase):
    def testFromEnviron(self):
        metadata = BuildMetadata.from_environ({"PKG_VERSION": "1.0", "PKG_AUTHORS": "A:B"})
        self.assertEqual(metadata, BuildMetadata(version="1.0", author="A:B"))
        self.assertEqual(list(metadata.directives()), [("version", "1.0"), ("author", "A, B")])

    def testFromEnvironCustomVariables(self):
        metadata = BuildMetadata.from_environ({"APP_VERSION": "2.1"}, version="APP_VERSION")
        self.assertEqual(metadata.version, "2.1")
        self.assertIs(metadata.author, Unset)

    def testMissingValuesAreNotInjected(self):
        self.assertEqual(list(BuildMetadata().directives()), [])
        self.assertEqual(list(BuildMetadata(version="", author="").directives()), [])

    def testUnknownDistributionIsEmpty(self):
        self.assertEqual(
            BuildMetadata.from_distribution("argwright-no-such-distribution"),
            BuildMetadata(),
        )

    def testValuesMustBeStrings(self):
        with self.assertRaises(TypeError):
            BuildMetadata(version=1)

    def testStructReadsEnvironmentByDefault(self):
        with mock.patch.dict("os.environ", {"PKG_VERSION": "3.0"}, clear=True):
            model = AttributeModel.from_struct("app")
        self.assertEqual(model.directives, [Directive("version", "3.0")])


if __name__ == "__main__":
    unittest.main()
