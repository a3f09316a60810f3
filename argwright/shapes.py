"""
Argwright type shapes: structural classification of declared field types.

Overview
- TypeShape: the six argument shapes the validator and the emitter care about
  (Bool, Sequence, Optional, OptionalOptional, OptionalSequence, Other).
- TypeDescriptor: a structural type tree (form + path + type arguments). It can be
  built from text (TypeDescriptor.parse) or from a Python annotation
  (TypeDescriptor.from_annotation).
- classify(type): descriptor/text/annotation → TypeShape.

Classification
- Only the outermost named constructor is inspected, by its last path segment:
  • "bool"                    → Bool
  • "Vec", "list", "List"     → Sequence
  • "Option", "Optional"      → Optional, refined by classifying the single type
                                argument one extra level only:
                                Optional → OptionalOptional,
                                Sequence → OptionalSequence.
  • anything else             → Other
- Descriptors that are not plain paths (references, tuples, arrays, function
  types, trait objects, qualified paths) are Other.
- Recursion is bounded: a type is never inspected more than two levels deep, so
  Option<Option<Option<T>>> is OptionalOptional.

Accepted textual syntax
- Paths separated by "::" or ".", optionally anchored with a leading "::".
- Generic arguments in angle brackets or square brackets: Vec<i32>, list[int].
- References and pointers (&T, &mut T, &'a T, *const T), tuples ((A, B)),
  arrays and slices ([T], [T; 4]), function types (fn(A) -> B).
- Trait objects and opaque types (dyn Error + Send, impl Fn(u8) -> bool),
  associated type bindings (Iterator<Item = u8>) and qualified paths
  (<T as Trait>::Output).
- Top-level unions (int | None). A union of exactly one type with None is the
  optional wrapper; any other union is an opaque "Union" path.
"""
import collections.abc
import re
import types
import typing
from enum import Enum

from .faults import MalformedTypeError
from .internals import RecordType


class TypeShape(Enum):
    Bool = "bool"
    Sequence = "sequence"
    Optional = "optional"
    OptionalOptional = "optional-optional"
    OptionalSequence = "optional-sequence"
    Other = "other"


class TypeForm(Enum):
    PATH = "path"
    REFERENCE = "reference"
    TUPLE = "tuple"
    ARRAY = "array"
    FUNCTION = "function"
    TRAIT_OBJECT = "trait-object"
    QUALIFIED = "qualified"


BOOLEAN_NAMES = frozenset({"bool"})
SEQUENCE_NAMES = frozenset({"Vec", "list", "List"})
OPTIONAL_NAMES = frozenset({"Option", "Optional"})

# Extra levels inspected below the outermost constructor.
_DEPTH = 1

_TOKEN = re.compile(r"\s*(?:(::|->)|('(?!\d)\w+)|((?!\d)\w+)|(\d+)|([<>\[\](),&;*|.+?=]))")


class TypeDescriptor(metaclass=RecordType, frozen=True):
    """
    Structural description of a declared type.

    Fields
    - form: TypeForm
      PATH for named types; REFERENCE, TUPLE, ARRAY, FUNCTION, TRAIT_OBJECT or
      QUALIFIED otherwise.
    - path: tuple[str, ...]
      Path segments of a PATH descriptor (empty for other forms).
    - arguments: tuple[TypeDescriptor, ...]
      Generic arguments of the last path segment for PATH descriptors; the
      referenced, element, parameter (and return, last) types, the bounds of a
      trait object, or the self type, trait and associated path of a qualified
      path otherwise.
    """
    __introspectable__ = ("form", "path", "arguments")

    def __init__(self, form, /, path=(), arguments=()):
        if not isinstance(form, TypeForm):
            raise TypeError("type descriptor form must be a TypeForm")
        path, arguments = tuple(path), tuple(arguments)
        if not all(isinstance(segment, str) and segment for segment in path):
            raise TypeError("type descriptor path must contain non-empty strings")
        if (form is TypeForm.PATH) != bool(path):
            raise ValueError("only path descriptors have (and require) a path")
        if not all(isinstance(argument, TypeDescriptor) for argument in arguments):
            raise TypeError("type descriptor arguments must be type descriptors")
        self._form = form
        self._path = path
        self._arguments = arguments

    @classmethod
    def named(cls, *path, arguments=()):
        """
        Shorthand for a PATH descriptor: TypeDescriptor.named("Option", arguments=(...)).
        """
        return cls(TypeForm.PATH, path=path, arguments=arguments)

    @property
    def name(self):
        """
        Last path segment, or None for descriptors that are not paths.
        """
        return self._path[-1] if self._path else None

    @classmethod
    def parse(cls, text, /):
        """
        Parse a textual type into a descriptor.

        Raises
        - TypeError: text is not a string.
        - MalformedTypeError: text is not a well-formed type.
        """
        if not isinstance(text, str):
            raise TypeError("type text must be a string")
        return _TypeParser(text).parse()

    @classmethod
    def from_annotation(cls, annotation, /):
        """
        Convert a Python annotation into a descriptor.

        Mapping
        - None / NoneType                → path "None"
        - Optional[T], T | None          → path "Optional" with argument T
        - other unions                   → path "Union" with every member
        - list[T], typing.List[T]        → path "list" with argument T
        - tuple[A, B]                    → TUPLE of A, B
        - Callable[[A], B]               → FUNCTION of A, B
        - Annotated[T, ...]              → T
        - Literal[...]                   → path "Literal" (values are dropped)
        - other generics G[A, ...]       → path G.__name__ with the converted arguments
        - classes and other named objects → path __name__
        - strings (forward references)   → TypeDescriptor.parse(text)
        """
        if isinstance(annotation, TypeDescriptor):
            return annotation
        if isinstance(annotation, str):
            return cls.parse(annotation)
        if annotation is None or annotation is types.NoneType:
            return cls.named("None")

        origin, arguments = typing.get_origin(annotation), typing.get_args(annotation)

        if origin is typing.Annotated:
            return cls.from_annotation(arguments[0])
        if origin is typing.Literal:
            return cls.named("Literal")
        if origin is typing.Union or origin is types.UnionType:
            members = [argument for argument in arguments if argument is not types.NoneType]
            if len(members) == 1 and len(members) < len(arguments):
                return cls.named("Optional", arguments=(cls.from_annotation(members[0]),))
            return cls.named("Union", arguments=tuple(map(cls.from_annotation, arguments)))
        if origin is tuple:
            return cls(TypeForm.TUPLE, arguments=tuple(
                cls.from_annotation(argument) for argument in arguments if argument is not Ellipsis
            ))
        if origin is collections.abc.Callable:
            parameters, result = arguments if arguments else ((), None)
            if parameters is Ellipsis:
                parameters = ()
            return cls(TypeForm.FUNCTION, arguments=(*map(cls.from_annotation, parameters), cls.from_annotation(result)))
        if origin is not None:
            return cls.named(origin.__name__, arguments=tuple(map(cls.from_annotation, arguments)))
        if isinstance(name := getattr(annotation, "__name__", None), str):
            return cls.named(name)

        raise TypeError(f"cannot describe {annotation!r} as a type")


class _TypeParser:
    """
    Recursive-descent parser for textual types (see the module docstring for the syntax).
    """

    def __init__(self, text, /):
        self.text = text
        self.tokens = []
        position = 0
        while position < len(text):
            if not (match := _TOKEN.match(text, position)):
                if text[position:].isspace():
                    break
                raise MalformedTypeError(f"unexpected character {text[position]!r} in type {text!r}")
            self.tokens.append(match.group(match.lastindex))
            position = match.end()
        self.index = 0

    def peek(self):
        return self.tokens[self.index] if self.index < len(self.tokens) else None

    def take(self, *expected):
        token = self.peek()
        if token is None or (expected and token not in expected):
            wanted = " or ".join(map(repr, expected)) if expected else "a token"
            raise MalformedTypeError(f"expected {wanted} in type {self.text!r}, found {token!r}")
        self.index += 1
        return token

    def accept(self, token):
        if self.peek() == token:
            self.index += 1
            return True
        return False

    def parse(self):
        if not self.tokens:
            raise MalformedTypeError("type cannot be empty")
        descriptor = self.union()
        if self.peek() is not None:
            raise MalformedTypeError(f"unexpected {self.peek()!r} in type {self.text!r}")
        return descriptor

    def union(self):
        members = [self.type()]
        while self.accept("|"):
            members.append(self.type())
        if len(members) == 1:
            return members[0]
        others = [member for member in members if member.path != ("None",)]
        if len(others) == 1:
            return TypeDescriptor.named("Optional", arguments=tuple(others))
        return TypeDescriptor.named("Union", arguments=tuple(members))

    def sequence(self, closing):
        items = []
        while not self.accept(closing):
            # lifetimes carry no shape information
            if (self.peek() or "").startswith("'"):
                self.take()
            elif self.tokens[self.index + 1:self.index + 2] == ["="]:
                # associated type binding: Item = T
                self.index += 2
                items.append(self.type())
            else:
                items.append(self.type())
            if not self.accept(","):
                self.take(closing)
                break
        return items

    def type(self):
        match self.peek():
            case "&":
                self.take()
                if (self.peek() or "").startswith("'"):
                    self.take()
                self.accept("mut")
                return TypeDescriptor(TypeForm.REFERENCE, arguments=(self.type(),))
            case "*":
                self.take()
                self.take("const", "mut")
                return TypeDescriptor(TypeForm.REFERENCE, arguments=(self.type(),))
            case "(":
                self.take()
                items = self.sequence(")")
                if len(items) == 1 and self.tokens[self.index - 2] != ",":
                    return items[0]
                return TypeDescriptor(TypeForm.TUPLE, arguments=items)
            case "[":
                self.take()
                element = self.type()
                if self.accept(";"):
                    self.take()
                self.take("]")
                return TypeDescriptor(TypeForm.ARRAY, arguments=(element,))
            case "fn":
                self.take()
                self.take("(")
                items = self.sequence(")")
                if self.accept("->"):
                    items.append(self.type())
                return TypeDescriptor(TypeForm.FUNCTION, arguments=items)
            case "dyn" | "impl":
                self.take()
                return TypeDescriptor(TypeForm.TRAIT_OBJECT, arguments=self.bounds())
            case "<":
                self.take()
                items = [self.type()]
                if self.accept("as"):
                    items.append(self.path())
                self.take(">")
                self.take("::")
                items.append(self.path())
                return TypeDescriptor(TypeForm.QUALIFIED, arguments=items)
            case _:
                return self.path()

    def bounds(self):
        bounds = []
        while True:
            self.accept("?")
            if (self.peek() or "").startswith("'"):
                self.take()
            else:
                bounds.append(self.path())
            if not self.accept("+"):
                return bounds

    def path(self):
        segments = []
        arguments = ()
        self.accept("::")
        while True:
            segment = self.take()
            if not re.fullmatch(r"(?!\d)\w+", segment):
                raise MalformedTypeError(f"expected a type name in {self.text!r}, found {segment!r}")
            segments.append(segment)
            if self.accept("<"):
                arguments = tuple(self.sequence(">"))
            elif self.accept("["):
                arguments = tuple(self.sequence("]"))
            elif self.accept("("):
                # Fn(A, B) -> C
                arguments = tuple(self.sequence(")"))
                if self.accept("->"):
                    arguments += (self.type(),)
            else:
                arguments = ()
            if not (self.accept("::") or self.accept(".")):
                break
        return TypeDescriptor(TypeForm.PATH, path=segments, arguments=arguments)


def _describe(type, /):
    if isinstance(type, TypeDescriptor):
        return type
    if isinstance(type, str):
        return TypeDescriptor.parse(type)
    return TypeDescriptor.from_annotation(type)


def _classify(descriptor, depth, /):
    if descriptor.form is not TypeForm.PATH:
        return TypeShape.Other

    name = descriptor.name
    if name in BOOLEAN_NAMES:
        return TypeShape.Bool
    if name in SEQUENCE_NAMES:
        return TypeShape.Sequence
    if name not in OPTIONAL_NAMES:
        return TypeShape.Other

    if depth >= _DEPTH or not descriptor.arguments:
        return TypeShape.Optional
    match _classify(descriptor.arguments[0], depth + 1):
        case TypeShape.Optional:
            return TypeShape.OptionalOptional
        case TypeShape.Sequence:
            return TypeShape.OptionalSequence
        case _:
            return TypeShape.Optional


def classify(type, /):
    """
    Classify a declared type into a TypeShape.

    Parameters
    - type: TypeDescriptor | str | annotation
      A descriptor, a textual type ("Option<Vec<i32>>") or a Python annotation
      (list[int], int | None).

    Returns
    - TypeShape of the outermost constructor (see the module docstring).

    Examples
    - classify("bool")                 -> TypeShape.Bool
    - classify("Option<Vec<i32>>")     -> TypeShape.OptionalSequence
    - classify(list[int] | None)       -> TypeShape.OptionalSequence
    - classify("&str")                 -> TypeShape.Other
    """
    return _classify(_describe(type), 0)


__all__ = (
    "TypeShape",
    "TypeForm",
    "TypeDescriptor",
    "classify",
)
