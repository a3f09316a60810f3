"""
Opaque directive arguments.

The engine never evaluates the argument of a directive. It only threads it
through to the output assembler, which hands it to the emitter. Arguments are
modelled as a small closed family of immutable expressions:

- Literal: a string, boolean, integer or float literal.
- Path: a plain function/item path ("module.func", "a::b::c"). This is the only
  form accepted as an explicit parser function.
- Opaque: any other expression, kept as verbatim source text.
- Arguments: the argument list of a raw method call.

str(expression) renders source text for the emitter: strings are JSON-quoted,
booleans are lowercase, numbers are written as-is, paths and opaque text are
verbatim and argument lists are comma-joined.
"""
import abc
import json
import re

from .faults import MalformedPathError
from .internals import RecordType

# Segments are identifiers; "::" and "." both separate them; a leading "::" anchors the path.
_PATH = re.compile(r"(?:::)?(?!\d)\w+(?:(?:::|\.)(?!\d)\w+)*")


class Expression(metaclass=RecordType, frozen=True):
    """
    Base class of every directive argument.
    """
    __introspectable__ = ()

    @abc.abstractmethod
    def __str__(self):
        """
        Source text handed to the emitter.
        """


class Literal(Expression):
    __introspectable__ = ("value",)

    def __init__(self, value, /):
        if not isinstance(value, str | bool | int | float):
            raise TypeError("literal value must be a string, a boolean or a number")
        self._value = value

    def __str__(self):
        match self._value:
            case bool():
                return "true" if self._value else "false"
            case str():
                return json.dumps(self._value, ensure_ascii=False)
            case _:
                return repr(self._value)


class Path(Expression):
    """
    A plain path to a function or item.

    Both "::" and "." are accepted as separators so hosts can hand over paths in
    whichever notation their annotations use. Anything else (calls, closures,
    operators) is not a path and raises MalformedPathError.
    """
    __introspectable__ = ("text",)

    def __init__(self, text, /):
        if not isinstance(text, str):
            raise TypeError("path text must be a string")
        if not _PATH.fullmatch(text := text.strip()):
            raise MalformedPathError(f"{text!r} is not a plain path")
        self._text = text

    @property
    def segments(self):
        return tuple(re.split(r"::|\.", self._text.removeprefix("::")))

    @classmethod
    def of(cls, callable, /):
        """
        Build the path of a Python callable from its module and qualified name.

        Callables that have no importable path (lambdas, nested functions) are
        returned as Opaque expressions instead.
        """
        module = getattr(callable, "__module__", None)
        qualname = getattr(callable, "__qualname__", None)
        if not isinstance(module, str) or not isinstance(qualname, str) or "<" in qualname:
            return Opaque(repr(callable))
        return cls(f"{module}.{qualname}")

    def __str__(self):
        return self._text


class Opaque(Expression):
    __introspectable__ = ("text",)

    def __init__(self, text, /):
        if not isinstance(text, str):
            raise TypeError("opaque expression text must be a string")
        if not (text := text.strip()):
            raise ValueError("opaque expression text cannot be empty")
        self._text = text

    def __str__(self):
        return self._text


class Arguments(Expression):
    __introspectable__ = ("items",)

    def __init__(self, *items):
        self._items = tuple(map(expression, items))

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __str__(self):
        return ", ".join(map(str, self._items))


def expression(value, /):
    """
    Coerce a value into an expression.

    - Expression instances are returned unchanged.
    - Python strings, booleans, integers and floats become Literal.
    - Anything else is rejected with TypeError.
    """
    if isinstance(value, Expression):
        return value
    if isinstance(value, str | bool | int | float):
        return Literal(value)
    raise TypeError(f"cannot use {type(value).__name__!r} object as a directive argument")


__all__ = (
    "Expression",
    "Literal",
    "Path",
    "Opaque",
    "Arguments",
    "expression",
)
