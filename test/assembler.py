"""
End-to-end resolution tests.

Scope
- resolve_struct(): cased name, injected metadata order, author normalization.
- resolve_field(): emission order and resolved kind/parser.
- render(): builder-call text handed to the emitter.
"""
import unittest
from unittest import TestCase

from argwright import (
    ArgumentKind,
    AttributeModel,
    BuildMetadata,
    CasingStyle,
    Directive,
    Long,
    MethodCall,
    NameLiteral,
    ParserSpec,
    RenameAll,
    Resolution,
    Short,
    TypeShape,
    assemble,
    render,
    resolve_field,
    resolve_struct,
)


class TestResolveStruct(TestCase):
    def testEndToEnd(self):
        resolution = resolve_struct(
            "myApp",
            CasingStyle.Kebab,
            metadata=BuildMetadata(version="1.0", author="A Author <a:b>"),
        )
        self.assertEqual(resolution.cased_name, "my-app")
        self.assertEqual(resolution.directives, (
            Directive("version", "1.0"),
            Directive("author", "A Author <a, b>"),
        ))
        self.assertEqual(resolution.kind, ArgumentKind.arg())
        self.assertEqual(resolution.parser, ParserSpec.default())

    def testCancelledMetadata(self):
        resolution = resolve_struct(
            "myApp",
            directives=[NameLiteral("version", ""), NameLiteral("author", "")],
            metadata=BuildMetadata(version="1.0", author="A"),
        )
        self.assertEqual(resolution.directives, ())

    def testStructCasingIsPassedToFields(self):
        app = resolve_struct("myApp", directives=[RenameAll("snake")], metadata=BuildMetadata())
        self.assertEqual((app.casing, app.cased_name), (CasingStyle.Snake, "my_app"))
        self.assertEqual(app.directives, ())

        flag = resolve_field("dryRun", "bool", app.casing, directives=[Long()])
        self.assertEqual(flag.directives, (Directive("long", "dry_run"),))


class TestResolveField(TestCase):
    def testEmissionOrder(self):
        resolution = resolve_field(
            "verbose",
            "bool",
            docs=["Say more."],
            directives=[Short(), Long(), MethodCall("action", "count")],
        )
        self.assertIsInstance(resolution, Resolution)
        self.assertEqual([directive.name for directive in resolution.directives], ["help", "short", "long", "action"])
        self.assertEqual(resolution.kind, ArgumentKind.arg(TypeShape.Bool))

    def testAssembleRequiresModel(self):
        with self.assertRaises(TypeError):
            assemble("verbose")

    def testAssembleSnapshotsTheLog(self):
        model = AttributeModel("verbose")
        resolution = assemble(model)
        model.push_directives([Long()])
        self.assertEqual(resolution.directives, ())


class TestRender(TestCase):
    def testBuilderCalls(self):
        resolution = resolve_field(
            "verbose",
            "bool",
            docs=["Say more"],
            directives=[Short(), Long()],
        )
        self.assertEqual(render(resolution), '.help("Say more").short(\'v\').long("verbose")')

    def testEmptyResolution(self):
        self.assertEqual(render(resolve_struct("app", metadata=BuildMetadata())), "")


if __name__ == "__main__":
    unittest.main()
