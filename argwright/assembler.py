"""
Output assembler: the artifact handed to the parser-builder emitter.

- Resolution: (name, cased_name, casing, kind, parser, directives) of one
  struct or field. The directives are in emission order: injected build
  metadata first, then documentation help, then the user's directives, with
  cancellations already applied.
- assemble(model): reads a validated model into a Resolution. No further
  validation happens here.
- render(resolution): builder-call text, one `.method(argument)` per directive.
- resolve_struct / resolve_field: build, validate and assemble in one call.

Quick example
    >>> app = resolve_struct("myApp", metadata=BuildMetadata(version="1.0"))
    >>> app.cased_name, render(app)
    ('my-app', '.version("1.0")')
"""
from typing import NamedTuple

from .casing import CasingStyle, DEFAULT_CASING
from .directives import Directive
from .expressions import Literal
from .kinds import ArgumentKind
from .model import AttributeModel
from .parsers import ParserSpec
from .utils import Unset


class Resolution(NamedTuple):
    name: str
    cased_name: str
    casing: CasingStyle
    kind: ArgumentKind
    parser: ParserSpec
    directives: tuple[Directive, ...]


def assemble(model, /):
    """
    Read a validated AttributeModel into an immutable Resolution.
    """
    if not isinstance(model, AttributeModel):
        raise TypeError("assemble() argument must be an attribute model")
    return Resolution(
        name=model.name,
        cased_name=model.cased_name,
        casing=model.casing,
        kind=model.kind,
        parser=model.parser,
        directives=tuple(model.directives),
    )


def _argument(directive, /):
    argument = directive.argument
    # short flags take a single character
    if directive.name == "short" and isinstance(argument, Literal) and isinstance(argument.value, str):
        return repr(argument.value[:1])
    return str(argument)


def render(resolution, /):
    """
    Render the directives of a resolution as chained builder calls.

    Example
    - (short="verbose", long="verbose", help="Say more")
        -> .short('v').long("verbose").help("Say more")
    """
    return "".join(f".{directive.name}({_argument(directive)})" for directive in resolution.directives)


def resolve_struct(name, /, casing=DEFAULT_CASING, docs=(), directives=(), metadata=Unset):
    """
    Resolve a struct (see AttributeModel.from_struct) into a Resolution.
    """
    return assemble(AttributeModel.from_struct(name, casing, docs, directives, metadata))


def resolve_field(name, type, /, casing=DEFAULT_CASING, docs=(), directives=()):
    """
    Resolve a field (see AttributeModel.from_field) into a Resolution.

    Pass the struct resolution's casing to inherit it.
    """
    return assemble(AttributeModel.from_field(name, type, casing, docs, directives))


__all__ = (
    "Resolution",
    "assemble",
    "render",
    "resolve_struct",
    "resolve_field",
)
