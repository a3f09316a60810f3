"""
Argument kinds: how a field is consumed by the generated command line.

- Arg(shape): a value argument (flag, option or positional, decided by its
  directives and shape). This is the default kind of every model.
- Subcommand(shape): the field holds the selected subcommand.
- FlattenStruct: the fields of the field's type are embedded in place.

Kinds are immutable and compare structurally. A model may be promoted from Arg
to one of the other two kinds once; the model enforces that rule.
"""
from enum import Enum

from .internals import RecordType
from .shapes import TypeShape


class KindVariant(Enum):
    Arg = "arg"
    Subcommand = "subcommand"
    FlattenStruct = "flatten"


class ArgumentKind(metaclass=RecordType, frozen=True):
    __introspectable__ = ("variant", "shape")

    def __init__(self, variant, shape=None, /):
        if not isinstance(variant, KindVariant):
            raise TypeError("argument kind variant must be a KindVariant")
        if variant is KindVariant.FlattenStruct:
            if shape is not None:
                raise TypeError("flattened kinds do not carry a shape")
        elif not isinstance(shape, TypeShape):
            raise TypeError(f"{variant.value} kinds require a type shape")
        self._variant = variant
        self._shape = shape

    @classmethod
    def arg(cls, shape=TypeShape.Other, /):
        return cls(KindVariant.Arg, shape)

    @classmethod
    def subcommand(cls, shape=TypeShape.Other, /):
        return cls(KindVariant.Subcommand, shape)

    @classmethod
    def flatten(cls):
        return cls(KindVariant.FlattenStruct)

    @property
    def is_arg(self):
        return self._variant is KindVariant.Arg

    @property
    def is_subcommand(self):
        return self._variant is KindVariant.Subcommand

    @property
    def is_flatten(self):
        return self._variant is KindVariant.FlattenStruct

    def refine(self, shape, /):
        """
        Return the same variant carrying shape (flattened kinds are returned as-is).
        """
        if self.is_flatten:
            return self
        return type(self)(self._variant, shape)


__all__ = (
    "KindVariant",
    "ArgumentKind",
)
