"""
Documentation reflow: raw comment lines → short/long help directives.

The input is the ordered list of documentation lines of a struct or a field,
already stripped of comment markers. The output is zero, one or two
directives:

- no lines                                  → nothing
- more than two lines and a blank second    → long_<name> with the whole text,
  line (summary, blank, details...)           then <name> with the summary
                                              (trailing whitespace and periods
                                              removed)
- anything else                             → <name> with the whole text

The whole text is built by joining the stripped lines with single spaces, blank
lines becoming paragraph breaks; every resulting line is trimmed.
"""
import inspect

from .directives import Directive

# A blank documentation line; joined with spaces it becomes a paragraph break.
PARAGRAPH_BREAK = "\n\n"


def reflow(lines, name, /):
    """
    Turn documentation lines into help directives named after name.

    Parameters
    - lines: Iterable[str]
      Raw documentation lines (comment markers already removed).
    - name: str
      Directive name of the short help ("help" for fields, "about" for structs);
      the long help is named "long_" + name.

    Returns
    - tuple[Directive, ...] in emission order.

    Examples
    - reflow(["Does X.", "", "More detail."], "help")
        -> (long_help="Does X.\\n\\nMore detail.", help="Does X")
    - reflow(["Does X."], "help")
        -> (help="Does X.",)
    """
    if isinstance(lines, str):
        raise TypeError("reflow() lines must be an iterable of strings, not a string")

    comments = []
    for line in lines:
        if not isinstance(line, str):
            raise TypeError("documentation lines must be strings")
        comments.append(line.strip() or PARAGRAPH_BREAK)

    if not comments:
        return ()

    merged = "\n".join(piece.strip() for piece in " ".join(comments).split("\n"))

    if len(comments) > 2 and comments[1] == PARAGRAPH_BREAK:
        summary = comments[0].strip().rstrip(".")
        return Directive("long_" + name, merged), Directive(name, summary)

    return Directive(name, merged),


def lines(docstring, /):
    """
    Split a Python docstring into documentation lines for reflow().

    The docstring is cleaned with inspect.cleandoc (common indentation and
    leading/trailing blank lines removed). None yields no lines.
    """
    if docstring is None:
        return []
    if not isinstance(docstring, str):
        raise TypeError("docstring must be a string")
    return inspect.cleandoc(docstring).splitlines()


__all__ = (
    "PARAGRAPH_BREAK",
    "reflow",
    "lines",
)
