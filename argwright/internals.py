"""
Internal record plumbing shared by every value type of the engine.

RecordType is the metaclass behind expressions, directive tokens, directives,
argument kinds, parser specs, type descriptors, build metadata and attribute
models. It is an implementation detail; nothing here is part of the public API.
"""
import abc
import functools
import operator
import re

from .utils import mirror, rename


class RecordType(abc.ABCMeta):
    """
    Metaclass that turns plain classes into introspectable records.

    Responsibilities
    - Expose every name listed in __introspectable__ as a read-only property that
      mirrors the private backing field "_{name}" (see utils.mirror).
    - Provide stable, readable __repr__/__rich_repr__ implementations for
      diagnostics and rich.pretty output.
    - With frozen=True, give the class (and its subclasses) structural equality and
      hashing over the introspectable fields.
    - Being an ABCMeta, refuse to instantiate classes that leave an
      @abc.abstractmethod unimplemented.

    __typename__ is derived from the class name (camel-case split with hyphens)
    and prefixes every representation: attribute-model(name='verbose', ...).
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, /, frozen=False, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
            **options,
        )

        if "__repr__" not in namespace:
            @rename("__repr__")
            def __repr__(self):
                """
                Return a concise, stable representation with the introspectable fields.

                Example
                - directive(name='long', argument=literal(value='verbose'))
                """
                return f"{type(self).__typename__}({
                    ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
                })"
            self.__repr__ = __repr__

        if "__rich_repr__" not in namespace:
            @rename("__rich_repr__")
            def __rich_repr__(self):
                for name in type(self).__introspectable__:
                    yield name, getattr(self, name)
            self.__rich_repr__ = __rich_repr__

        if frozen:
            @rename("__eq__")
            def __eq__(self, other, /):
                if type(self) is not type(other):
                    return NotImplemented
                return all(
                    getattr(self, "_" + name) == getattr(other, "_" + name)
                    for name in type(self).__introspectable__
                )
            self.__eq__ = __eq__

            @rename("__hash__")
            def __hash__(self):
                return hash((type(self), *(getattr(self, "_" + name) for name in type(self).__introspectable__)))
            self.__hash__ = __hash__

        return self


__all__ = ()
