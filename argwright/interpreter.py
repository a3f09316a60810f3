"""
Directive interpreter: applies directive tokens to an attribute model, in order.

Each token is one mutation:
- Short / Long            → append short/long with the model's current cased name
- Subcommand / Flatten    → promote the kind (once per model)
- NameLiteral             → rename, cancel about/version/author, or append
- NameExpr / MethodCall   → append verbatim
- RenameAll               → switch casing and re-derive the cased name
- Parse                   → select the value-parser strategy (last one wins)

Because Short/Long read the cased name when they are applied, their position
relative to `name = "..."` and `rename_all = "..."` matters.
"""
from .casing import CasingStyle
from .directives import (
    DirectiveToken,
    Short,
    Long,
    Subcommand,
    Flatten,
    NameLiteral,
    NameExpr,
    MethodCall,
    RenameAll,
    Parse,
)
from .kinds import ArgumentKind
from .parsers import ParserSpec


def interpret(model, tokens, /):
    """
    Apply tokens to model from left to right.

    Raises
    - TypeError: an item is not a directive token.
    - UnknownCasingStyleError, UnknownParserKindError, MissingParserFunctionError,
      InvalidParserFunctionFormError, IllegalKindTransitionError: see the faults module.
    """
    for token in tokens:
        if not isinstance(token, DirectiveToken):
            raise TypeError(f"expected a directive token, got {type(token).__name__!r}")

        match token:
            case Short():
                model.push_method("short", model.cased_name)
            case Long():
                model.push_method("long", model.cased_name)
            case Subcommand():
                model.set_kind(ArgumentKind.subcommand())
            case Flatten():
                model.set_kind(ArgumentKind.flatten())
            case NameLiteral(method=method, literal=literal):
                model.push_method(method, literal)
            case NameExpr(method=method, expr=expr):
                model.push_expression(method, expr)
            case MethodCall(method=method, args=args):
                model.push_expression(method, args)
            case RenameAll(style=style):
                model.recase(CasingStyle.parse(style))
            case Parse(kind=kind, function=function):
                model.set_parser(ParserSpec.resolve(kind, function))


__all__ = (
    "interpret",
)
