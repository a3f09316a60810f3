"""
Configuration faults raised while a struct or field is resolved.

Every fault is static: it comes from the annotations themselves, never from
command-line input, and it aborts the resolution of the enclosing type. The
engine raises faults as ordinary exceptions. Hosts that prefer a short report
over a traceback hand the fault to trigger(fault, shell=True): it is printed
on the stderr console and the process exits with status 1.

Rendering is tuned from the host's __main__ module:
- __prog__: program name in the report header (default "argwright");
- __codes__: FaultCode → label mapping replacing the numeric codes;
- __styles__: rich styles keyed like the table in ConfigError.__rich__.
"""
import copy
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    Stable numeric identifiers, one per fault class.

    21xxx naming, 22xxx value parsers, 23xxx argument kinds, 24xxx type shapes,
    25xxx type and path grammar.
    """
    # --- naming (21xxx) ---
    UNKNOWN_CASING_STYLE         = 21101

    # --- value parsers (22xxx) ---
    UNKNOWN_PARSER_KIND          = 22101
    MISSING_PARSER_FUNCTION      = 22102
    INVALID_PARSER_FUNCTION_FORM = 22103

    # --- argument kinds (23xxx) ---
    ILLEGAL_KIND_TRANSITION      = 23101
    ILLEGAL_DIRECTIVE_FOR_KIND   = 23102

    # --- type shapes (24xxx) ---
    ILLEGAL_DIRECTIVE_FOR_SHAPE  = 24101

    # --- grammar (25xxx) ---
    MALFORMED_TYPE               = 25101
    MALFORMED_PATH               = 25102

    def normalize(self):
        """
        Label of this code: __main__.__codes__[self] when the host defines it,
        the number otherwise.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ConfigError(Exception):
    """
    Base class of every configuration fault.

    Subclasses set __code__ and __title__. An instance holds its message and a
    read-only mapping of options:
    - target: name of the struct or field being resolved (filled in by the model);
    - hint: a suggested fix;
    - shell, fancy, colorful: see trigger() and __rich__().

    copy.replace(error, **options) returns the same fault with merged options.
    """
    __code__ = Unset
    __title__ = "configuration error"

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.__code__

    @property
    def target(self):
        return self.options.get("target")

    @property
    def hint(self):
        return self.options.get("hint")

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            "fault-prog": "bold #E6E6F0",
            "fault-code": "bold #00E5FF",
            "fault-title": "bold #FF4DA6",
            "fault-target": "bold #FFB400",
            "fault-message": "#C8C8D0",
            "fault-hint": "italic #9CE19C",
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", True)

        def styled(fragment, key):
            if not fragment:
                return Text("")
            return Text(str(fragment), styles[key] if colorful else "")

        code = self.__code__.normalize() if self.__code__ is not Unset else "-"
        header = Text.assemble(
            "[ ",
            styled(getattr(main, "__prog__", "argwright"), "fault-prog"),
            " — ",
            styled(code, "fault-code"),
            " | ",
            styled(self.__title__.title(), "fault-title"),
            " ]",
        )

        # "<target>: <message>"
        body = [Text.assemble(
            *((styled(self.target, "fault-target"), ": ") if self.target else ()),
            styled(self.message, "fault-message"),
        )]
        if self.hint:
            body.append(styled(f" → {self.hint}", "fault-hint"))

        if self.options.get("fancy", False):
            return Panel(Group(*body), title=header, title_align="left")
        return Group(header, *body)

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, /, **changes):
        return type(self)(self.message, **(dict(self.options) | changes))


class UnknownCasingStyleError(ConfigError):
    __code__ = FaultCode.UNKNOWN_CASING_STYLE
    __title__ = "unknown casing style"


class UnknownParserKindError(ConfigError):
    __code__ = FaultCode.UNKNOWN_PARSER_KIND
    __title__ = "unknown parser kind"


class MissingParserFunctionError(ConfigError):
    __code__ = FaultCode.MISSING_PARSER_FUNCTION
    __title__ = "missing parser function"


class InvalidParserFunctionFormError(ConfigError):
    __code__ = FaultCode.INVALID_PARSER_FUNCTION_FORM
    __title__ = "invalid parser function"


class IllegalKindTransitionError(ConfigError):
    __code__ = FaultCode.ILLEGAL_KIND_TRANSITION
    __title__ = "illegal kind transition"


class IllegalDirectiveForKindError(ConfigError):
    __code__ = FaultCode.ILLEGAL_DIRECTIVE_FOR_KIND
    __title__ = "illegal directive for kind"


class IllegalDirectiveForShapeError(ConfigError):
    __code__ = FaultCode.ILLEGAL_DIRECTIVE_FOR_SHAPE
    __title__ = "illegal directive for shape"


class MalformedTypeError(ConfigError):
    __code__ = FaultCode.MALFORMED_TYPE
    __title__ = "malformed type"


class MalformedPathError(ConfigError):
    __code__ = FaultCode.MALFORMED_PATH
    __title__ = "malformed path"


def trigger(fault, /, **options):
    """
    Raise or report a fault after merging options into it.

    - shell=False (default): the fault is raised.
    - shell=True: the fault is printed on the stderr console (fancy/colorful
      apply) and the process exits with status 1.
    """
    if not isinstance(fault, ConfigError):
        raise TypeError("trigger() argument must be a configuration fault")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "FaultCode",
    "ConfigError",
    "UnknownCasingStyleError",
    "UnknownParserKindError",
    "MissingParserFunctionError",
    "InvalidParserFunctionFormError",
    "IllegalKindTransitionError",
    "IllegalDirectiveForKindError",
    "IllegalDirectiveForShapeError",
    "MalformedTypeError",
    "MalformedPathError",
    "trigger",
)
