"""
Value-parser strategies.

A ParserSpec pairs a ParserKind (how the raw command-line value is turned into
the field value) with a conversion expression (which function does it). Every
model starts with the default spec (TryFromString, STRING_PARSE); a `parse`
directive replaces it, the last one winning.

Default conversions (when `parse(kind)` names no function)
- from_str, from_os_str  → IDENTITY
- try_from_str           → STRING_PARSE
- from_occurrences       → OCCURRENCE_CAST
- try_from_os_str        → no default; a function must be given explicitly.

An explicit function must be a plain Path expression.
"""
from enum import Enum

from .expressions import Path
from .faults import UnknownParserKindError, MissingParserFunctionError, InvalidParserFunctionFormError
from .internals import RecordType
from .utils import Unset

IDENTITY = Path("convert.from_value")
STRING_PARSE = Path("convert.from_str")
OCCURRENCE_CAST = Path("convert.from_count")


class ParserKind(Enum):
    FromString = "from_str"
    TryFromString = "try_from_str"
    FromOsString = "from_os_str"
    TryFromOsString = "try_from_os_str"
    FromOccurrenceCount = "from_occurrences"

    @classmethod
    def parse(cls, name, /):
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise TypeError("parser kind name must be a string")
        try:
            return cls(name)
        except ValueError:
            raise UnknownParserKindError(
                f"unsupported parser {name}",
                hint="use one of " + ", ".join(repr(kind.value) for kind in cls),
            ) from None


class ParserSpec(metaclass=RecordType, frozen=True):
    __introspectable__ = ("kind", "conversion")

    def __init__(self, kind, conversion, /):
        if not isinstance(kind, ParserKind):
            raise TypeError("parser spec kind must be a ParserKind")
        self._kind = kind
        self._conversion = conversion

    @classmethod
    def default(cls):
        return cls(ParserKind.TryFromString, STRING_PARSE)

    @classmethod
    def resolve(cls, kind, function=Unset, /):
        """
        Build the spec selected by a `parse(kind)` or `parse(kind, function)` directive.

        Raises
        - UnknownParserKindError: kind names no strategy.
        - MissingParserFunctionError: try_from_os_str without a function.
        - InvalidParserFunctionFormError: function is not a plain path.
        """
        kind = ParserKind.parse(kind)

        if function is not Unset:
            if not isinstance(function, Path):
                raise InvalidParserFunctionFormError(
                    "parse argument must be a function path",
                    hint=f"got {function!s}",
                )
            return cls(kind, function)

        match kind:
            case ParserKind.FromString | ParserKind.FromOsString:
                return cls(kind, IDENTITY)
            case ParserKind.TryFromString:
                return cls(kind, STRING_PARSE)
            case ParserKind.FromOccurrenceCount:
                return cls(kind, OCCURRENCE_CAST)
            case ParserKind.TryFromOsString:
                raise MissingParserFunctionError(
                    "cannot omit parser function name with `try_from_os_str`",
                    hint="write parse(try_from_os_str, path.to.function)",
                )


__all__ = (
    "ParserKind",
    "ParserSpec",
    "IDENTITY",
    "STRING_PARSE",
    "OCCURRENCE_CAST",
)
