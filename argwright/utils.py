"""
Small helpers shared by the argwright modules.

- Unset: the "argument not given" sentinel. Empty strings and None are real
  values for several engine inputs (an empty literal cancels a directive), so
  omission needs its own marker.
- rename("name"): decorator giving generated functions a readable name in
  tracebacks and reprs.
- mirror("field"): read-only property over the "_field" backing attribute.
- words(text) / capitalize(word): identifier splitting, the base of every
  casing style.

    >>> list(words("HTTPServer_port"))
    ['HTTP', 'Server', 'port']
"""
import functools
import re
from typing import final


@final
class UnsetType:
    """
    Type of the Unset sentinel.

    There is exactly one instance. It is falsy, prints as "Unset" and can be
    combined with types in isinstance checks (isinstance(x, str | Unset)).
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __init_subclass__(cls, **options):
        raise TypeError("UnsetType cannot be subclassed")

    def __or__(self, other, /):
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"


Unset = UnsetType()


def rename(name, /):
    """
    Decorator setting __name__ and __qualname__ of the decorated function to name.
    """
    if not isinstance(name, str):
        raise TypeError("rename() argument must be a string")

    def decorator(function):
        function.__name__ = function.__qualname__ = name
        return function

    return decorator


def _snapshot(value):
    # lists and dicts are handed out as shallow copies
    if isinstance(value, list):
        return list(value)
    if isinstance(value, dict):
        return dict(value)
    return value


def mirror(name, /):
    """
    Property reading self._<name>.

    Mutable containers are copied on every read, so a model's directive log
    cannot be edited through its public attribute.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _snapshot(getattr(self, "_" + name))

    return property(getter)


# Runs of anything that is neither a letter nor a digit separate words.
_SEPARATORS = re.compile(r"[\W_]+")


def words(text, /):
    """
    Split an identifier into its words.

    Rules
    - Any run of non-alphanumeric characters (underscores, hyphens, spaces,
      punctuation) is a separator and never part of a word.
    - Inside a run, a word starts at an uppercase letter preceded by a lowercase
      letter or a digit (fooBar → foo, Bar).
    - In an uppercase run followed by a lowercase letter, the last capital starts
      the next word (HTTPServer → HTTP, Server).
    - Digits stay attached to the word they follow (utf8Name → utf8, Name).

    Returns
    - Iterator[str]: the words in order, original casing preserved.

    Examples
    - words("fooBar")       -> foo, Bar
    - words("foo-bar_baz")  -> foo, bar, baz
    - words("HTTPServer")   -> HTTP, Server
    """
    if not isinstance(text, str):
        raise TypeError("words() argument must be a string")

    for chunk in _SEPARATORS.split(text):
        start = 0
        for index in range(1, len(chunk)):
            previous, current = chunk[index - 1], chunk[index]
            following = chunk[index + 1:index + 2]
            if not current.isupper():
                continue
            if previous.islower() or previous.isdigit() or (previous.isupper() and following.islower()):
                yield chunk[start:index]
                start = index
        if chunk[start:]:
            yield chunk[start:]


def capitalize(word, /):
    """
    Uppercase the first character of a word and lowercase the rest.
    """
    return word[:1].upper() + word[1:].lower()


__all__ = (
    "UnsetType",
    "Unset",
    "rename",
    "mirror",
    "words",
    "capitalize",
)
