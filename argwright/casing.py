"""
Argwright casing styles.

Scope
- CasingStyle: the closed set of naming conventions used to derive the display
  name of an argument from its declared identifier.
- translate(style, input): module-level spelling of CasingStyle.translate.
- DEFAULT_CASING: the style struct models start with when none is given.

Word boundaries
- Identifiers are split by utils.words(): separators (_, -, spaces, punctuation)
  and case transitions (fooBar, HTTPServer) both end a word.
- Capitalizing styles lowercase the rest of each word (HTTPServer → HttpServer).

Parsing
- CasingStyle.parse(name) is case-insensitive and separator-insensitive, and
  accepts an optional "case" suffix: "kebab", "Kebab", "kebab-case",
  "KebabCase" and "kebab_case" all name the Kebab style.
- Unknown names raise UnknownCasingStyleError.

Quick example
    >>> CasingStyle.Kebab.translate("fooBar")
    'foo-bar'
    >>> CasingStyle.parse("SCREAMING_SNAKE_CASE").translate("foo-bar")
    'FOO_BAR'
"""
from enum import Enum

from .faults import UnknownCasingStyleError
from .utils import words, capitalize


class CasingStyle(Enum):
    """
    Naming conventions for the cased name of an argument.

    - Camel: word boundaries capitalized, first word lowercase (fooBar).
    - Kebab: lowercase, words joined by hyphens (foo-bar).
    - Pascal: word boundaries capitalized, first word included (FooBar).
    - ScreamingSnake: uppercase, words joined by underscores (FOO_BAR).
    - Snake: lowercase, words joined by underscores (foo_bar).
    - Verbatim: the declared identifier, untouched.
    """
    Camel = "camel"
    Kebab = "kebab"
    Pascal = "pascal"
    ScreamingSnake = "screamingsnake"
    Snake = "snake"
    Verbatim = "verbatim"

    def translate(self, input, /):
        """
        Return the display form of input under this style. Never fails.
        """
        if not isinstance(input, str):
            raise TypeError("translate() argument must be a string")

        match self:
            case CasingStyle.Verbatim:
                return input
            case CasingStyle.Kebab:
                return "-".join(word.lower() for word in words(input))
            case CasingStyle.Snake:
                return "_".join(word.lower() for word in words(input))
            case CasingStyle.ScreamingSnake:
                return "_".join(word.upper() for word in words(input))
            case CasingStyle.Pascal:
                return "".join(map(capitalize, words(input)))
            case CasingStyle.Camel:
                head, *tail = list(words(input)) or [""]
                return head.lower() + "".join(map(capitalize, tail))

    @classmethod
    def parse(cls, name, /):
        """
        Look up a style by name.

        Parameters
        - name: str
          Style name in any casing, with or without separators, optionally
          followed by "case" (e.g., "kebab-case", "ScreamingSnake").

        Raises
        - TypeError: name is not a string.
        - UnknownCasingStyleError: name matches no style.
        """
        if not isinstance(name, str):
            raise TypeError("casing style name must be a string")

        normalized = "".join(words(name)).lower()
        for style in cls:
            if normalized in (style.value, style.value + "case"):
                return style

        raise UnknownCasingStyleError(
            f"unsupported casing: {name}",
            hint="use one of " + ", ".join(repr(style.value) for style in cls),
        )


DEFAULT_CASING = CasingStyle.Kebab


def translate(style, input, /):
    """
    Translate input under style (see CasingStyle.translate).
    """
    if not isinstance(style, CasingStyle):
        raise TypeError("translate() first argument must be a casing style")
    return style.translate(input)


__all__ = (
    "CasingStyle",
    "DEFAULT_CASING",
    "translate",
)
