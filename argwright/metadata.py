"""
Build metadata: the version and author strings injected into struct models.

The engine treats both strings as opaque. They come from one of two read-only
sources, looked up once when a struct model is built:

- the environment (PKG_VERSION / PKG_AUTHORS by default), the way build tools
  export package metadata to the code they compile;
- the metadata of an installed distribution (importlib.metadata).

A missing value is not an error; it simply means nothing is injected.
Multiple authors may be separated by ":"; they are injected separated by ", ".
"""
import os
from importlib import metadata as distributions

from .internals import RecordType
from .utils import Unset

VERSION_VARIABLE = "PKG_VERSION"
AUTHORS_VARIABLE = "PKG_AUTHORS"


class BuildMetadata(metaclass=RecordType, frozen=True):
    __introspectable__ = ("version", "author")

    def __init__(self, version=Unset, author=Unset):
        for name, value in (("version", version), ("author", author)):
            if not isinstance(value, str | Unset):
                raise TypeError(f"build metadata {name!r} must be a string")
        self._version = version
        self._author = author

    @classmethod
    def from_environ(cls, environ=os.environ, /, *, version=VERSION_VARIABLE, author=AUTHORS_VARIABLE):
        """
        Read metadata from an environment mapping (os.environ by default).

        The keyword arguments name the variables to read.
        """
        return cls(
            version=environ.get(version, Unset),
            author=environ.get(author, Unset),
        )

    @classmethod
    def from_distribution(cls, name, /):
        """
        Read metadata from the installed distribution called name.

        The author comes from the "Author" field, falling back to "Author-email".
        An unknown distribution yields empty metadata.
        """
        try:
            message = distributions.metadata(name)
        except distributions.PackageNotFoundError:
            return cls()
        return cls(
            version=message.get("Version") or Unset,
            author=message.get("Author") or message.get("Author-email") or Unset,
        )

    def directives(self):
        """
        Yield the (method, value) pairs to inject, version first.

        Absent and empty values are skipped; ":" in the author becomes ", ".
        """
        if self._version:
            yield "version", self._version
        if self._author:
            yield "author", self._author.replace(":", ", ")


__all__ = (
    "BuildMetadata",
    "VERSION_VARIABLE",
    "AUTHORS_VARIABLE",
)
