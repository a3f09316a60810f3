"""
Directives: the configuration instructions attached to a struct or a field.

Two families live here.

Tokens (input)
- The pre-tokenized form of the annotation grammar, one class per item:

    Short()                        short
    Long()                         long
    Subcommand()                   subcommand
    Flatten()                      flatten
    NameLiteral(method, literal)   method = "literal"
    NameExpr(method, expr)         method = <expr>
    MethodCall(method, *args)      method(<args>)
    RenameAll(style)               rename_all = "style"
    Parse(kind)                    parse(kind)
    Parse(kind, function)          parse(kind, function)

- Tokens only check their own argument types. Whether a style or a parser kind
  exists, and whether a directive is legal for the field, is decided by the
  interpreter and the validator.

Directive (output)
- An immutable (name, argument) pair appended to a model's directive log and
  replayed in order by the emitter. The argument is an Expression.

Quick example
    >>> tokens = [Long(), NameLiteral("default_value", "8080"), Parse("try_from_str", int)]
"""
from .expressions import Expression, Path, Arguments, expression
from .internals import RecordType
from .utils import Unset


def _method(name, /):
    if not isinstance(name, str):
        raise TypeError("directive method name must be a string")
    if not name.isidentifier():
        raise ValueError(f"directive method name must be an identifier, got {name!r}")
    return name


class Directive(metaclass=RecordType, frozen=True):
    """
    One builder directive: the method to call and its (opaque) argument.
    """
    __introspectable__ = ("name", "argument")

    def __init__(self, name, argument, /):
        self._name = _method(name)
        self._argument = expression(argument)


class DirectiveToken(metaclass=RecordType, frozen=True):
    """
    Base class of the pre-tokenized directive grammar.
    """
    __introspectable__ = ()


class Short(DirectiveToken):
    pass


class Long(DirectiveToken):
    pass


class Subcommand(DirectiveToken):
    pass


class Flatten(DirectiveToken):
    pass


class NameLiteral(DirectiveToken):
    __introspectable__ = ("method", "literal")

    def __init__(self, method, literal, /):
        if not isinstance(literal, str):
            raise TypeError("name-literal directive value must be a string")
        self._method = _method(method)
        self._literal = literal


class NameExpr(DirectiveToken):
    __introspectable__ = ("method", "expr")

    def __init__(self, method, expr, /):
        self._method = _method(method)
        self._expr = expression(expr)


class MethodCall(DirectiveToken):
    __introspectable__ = ("method", "args")

    def __init__(self, method, /, *args):
        self._method = _method(method)
        self._args = Arguments(*args)


class RenameAll(DirectiveToken):
    __introspectable__ = ("style",)

    def __init__(self, style, /):
        if not isinstance(style, str):
            raise TypeError("rename_all directive value must be a string")
        self._style = style


class Parse(DirectiveToken):
    """
    parse(kind) / parse(kind, function).

    The function may be an Expression or a Python callable; callables are turned
    into their importable Path (see Path.of). Only Path functions pass the
    interpreter.
    """
    __introspectable__ = ("kind", "function")

    def __init__(self, kind, function=Unset, /):
        if not isinstance(kind, str):
            raise TypeError("parse directive kind must be a string")
        if function is not Unset and not isinstance(function, Expression):
            function = Path.of(function) if callable(function) else expression(function)
        self._kind = kind
        self._function = function


__all__ = (
    "Directive",
    "DirectiveToken",
    "Short",
    "Long",
    "Subcommand",
    "Flatten",
    "NameLiteral",
    "NameExpr",
    "MethodCall",
    "RenameAll",
    "Parse",
)
