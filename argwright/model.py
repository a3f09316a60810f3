"""
Attribute model: the mutable record accumulated while resolving one struct or field.

Fields (read-only from the outside)
- name: the declared identifier, or the one set by `name = "..."`.
- cased_name: always casing.translate(name); re-derived on every rename/recase.
- casing: the CasingStyle in effect (inherited by value from the struct).
- kind: ArgumentKind, Arg(Other) until promoted (once) or resolved by validation.
- parser: the active ParserSpec.
- custom_parser: True once a `parse` directive was applied; never reset.
- directives: the ordered directive log.
- documentation: the entries of the log that came from documentation lines.

Lifecycle
- AttributeModel.from_struct / from_field build a fresh model, inject defaults,
  apply documentation and directives, validate, and return it. The model is then
  only read (see assembler.assemble); it is never shared between fields.

Directive log
- The log is append-only with a filter-on-append step: `about`, `version` and
  `author` given an empty string remove every earlier entry of the same name
  (this is how a struct cancels injected build metadata), and `name` renames
  the model instead of being logged.
"""
import copy

from .casing import CasingStyle, DEFAULT_CASING
from .directives import Directive
from .docs import reflow
from .expressions import Literal
from .faults import ConfigError, IllegalKindTransitionError
from .internals import RecordType
from .interpreter import interpret
from .kinds import ArgumentKind
from .metadata import BuildMetadata
from .parsers import ParserSpec
from .shapes import classify
from .utils import Unset
from .validation import validate_struct, validate_field

# Zero-argument builder methods that an empty literal cancels.
CANCELLABLE = frozenset({"about", "version", "author"})


class AttributeModel(metaclass=RecordType):
    __introspectable__ = (
        "name",
        "cased_name",
        "casing",
        "kind",
        "parser",
        "custom_parser",
        "directives",
        "documentation",
    )

    def __init__(self, name, casing=DEFAULT_CASING, /):
        if not isinstance(name, str):
            raise TypeError("attribute model name must be a string")
        if not isinstance(casing, CasingStyle):
            raise TypeError("attribute model casing must be a CasingStyle")
        self._name = name
        self._casing = casing
        self._cased_name = casing.translate(name)
        self._kind = ArgumentKind.arg()
        self._parser = ParserSpec.default()
        self._custom_parser = False
        self._directives = []
        self._documentation = []

    def rename(self, name, /):
        self._name = name
        self._cased_name = self._casing.translate(name)

    def recase(self, casing, /):
        self._casing = casing
        self._cased_name = casing.translate(self._name)

    def push_method(self, name, literal, /):
        """
        Apply a string-valued builder method (name = "literal").

        - ("name", new) renames the model.
        - ("about" | "version" | "author", "") drops every earlier entry of that name.
        - Anything else is appended as a directive with a Literal argument.
        """
        if not isinstance(literal, str):
            raise TypeError("push_method() literal must be a string")

        if name == "name":
            self.rename(literal)
        elif name in CANCELLABLE and not literal:
            self._directives = [directive for directive in self._directives if directive.name != name]
            self._documentation = [directive for directive in self._documentation if directive.name != name]
        else:
            self._directives.append(Directive(name, Literal(literal)))

    def push_expression(self, name, argument, /):
        """
        Append a builder method with an opaque argument, verbatim.
        """
        self._directives.append(Directive(name, argument))

    def push_doc_comment(self, lines, name, /):
        directives = reflow(lines, name)
        self._documentation.extend(directives)
        self._directives.extend(directives)

    def push_directives(self, tokens, /):
        interpret(self, tokens)

    def set_kind(self, kind, /):
        if not self._kind.is_arg:
            raise IllegalKindTransitionError(
                "subcommands cannot be flattened",
                hint="use either `subcommand` or `flatten`, once",
            )
        self._kind = kind

    def set_parser(self, parser, /):
        self._custom_parser = True
        self._parser = parser

    def has_method(self, name, /):
        return any(directive.name == name for directive in self._directives)

    @classmethod
    def from_struct(cls, name, /, casing=DEFAULT_CASING, docs=(), directives=(), metadata=Unset):
        """
        Build and validate the model of a struct.

        Order of the directive log
        - build metadata (version, then author), read from the environment unless
          metadata is given;
        - documentation, as about/long_about;
        - the struct's own directives.

        Raises
        - ConfigError (any subclass), with the struct name as target.
        """
        if metadata is Unset:
            metadata = BuildMetadata.from_environ()
        self = cls(name, casing)
        try:
            for method, value in metadata.directives():
                self.push_method(method, value)
            self.push_doc_comment(docs, "about")
            self.push_directives(directives)
            validate_struct(self)
        except ConfigError as error:
            raise _targeted(error, name) from None
        return self

    @classmethod
    def from_field(cls, name, type, /, casing=DEFAULT_CASING, docs=(), directives=()):
        """
        Build and validate the model of a field.

        Parameters
        - name: str
          The field identifier.
        - type: TypeDescriptor | str | annotation
          The declared type (see shapes.classify).
        - casing: CasingStyle
          Usually the casing of the enclosing struct model.
        - docs: Iterable[str]
          Documentation lines, reflowed into help/long_help.
        - directives: Iterable[DirectiveToken]

        Raises
        - ConfigError (any subclass), with the field name as target.
        """
        self = cls(name, casing)
        try:
            self.push_doc_comment(docs, "help")
            self.push_directives(directives)
            self._kind = validate_field(self, classify(type))
        except ConfigError as error:
            raise _targeted(error, name) from None
        return self


def _targeted(error, name, /):
    if error.target is not None:
        return error
    return copy.replace(error, target=name)


__all__ = (
    "AttributeModel",
    "CANCELLABLE",
)
