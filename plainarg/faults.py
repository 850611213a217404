"""
plainarg faults (parse errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every caller-input fault.
- ParseError and its subclasses: one exception type per failure kind, each
  carrying exactly the structured context needed to render its message.
- describe(): the pure fault → one-line message rendering.
- RedundantSpellingWarning: non-fatal notice emitted while building name tables.

Rendering contract (exact wording)
- UnknownFlagError          → Unknown option `<token>`
- InsufficientArgsError     → Expected <expected> positional args but only got <actual>
- InvalidIntegerError       → Invalid integer `<token>` (<reason>)
- InvalidFloatError         → Invalid float `<token>` (<reason>)
- UnexpectedValueError      → Invalid value `<token>`, expected <expected>

Integration
- The cursor raises these faults from the operation that detected them and
  keeps the most recent one in Cursor.error.
- Faults are rich renderables: console.print(fault) shows a single styled line.
  Hosts can tune the output from __main__ via __prog__, __styles__ and __codes__.
"""
import os.path
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.text import Text


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - flags (1111x): UNKNOWN_FLAG
    - arity (1112x): INSUFFICIENT_ARGS, UNEXPECTED_VALUE
    - conversions (1113x): INVALID_INTEGER, INVALID_FLOAT
    """
    # --- flag errors (1111x) ---
    UNKNOWN_FLAG        = 11112

    # --- value errors (1112x) ---
    INSUFFICIENT_ARGS   = 11122
    UNEXPECTED_VALUE    = 11124

    # --- conversion errors (1113x) ---
    INVALID_INTEGER     = 11131
    INVALID_FLOAT       = 11132

    def normalize(self):
        """
        return a host-normalized label for this code.

        the host application can provide a __codes__ mapping in __main__ to
        override numeric ids; without it the numeric value is used.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _restore(cls, options, /):
    return cls(**options)


class ParseError(Exception):
    """
    base type for recoverable caller-input faults.

    subclasses declare
    - code: the FaultCode of the variant.
    - template: %-style message template over the context fields.
    - __fields__: names of the context fields the variant requires.

    context fields are readable as attributes (fault.token, fault.expected, ...)
    and as the read-only mapping fault.options.
    """
    code = None
    template = None
    __fields__ = ()

    def __init__(self, /, **options):
        if self.template is None:
            raise TypeError("cannot instantiate abstract fault %r" % type(self).__name__)
        missing = [field for field in self.__fields__ if field not in options]
        if missing:
            raise TypeError("%s() missing context: %s" % (type(self).__name__, ", ".join(missing)))
        self.options = MappingProxyType(options)
        super().__init__(describe(self))

    def __getattr__(self, name):
        options = self.__dict__.get("options", {})
        if name in options:
            return options[name]
        raise AttributeError("%r object has no attribute %r" % (type(self).__name__, name))

    @property
    def message(self):
        return self.args[0]

    def __str__(self):
        return self.message

    def __reduce__(self):
        return _restore, (type(self), dict(self.options))

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-message": "#C8C8D0",  # soft light gray message
        } | getattr(main, "__styles__", {}))

        prog = getattr(main, "__prog__", os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "plainarg")

        return Text.assemble(
            (prog, styles["prog-name"]),
            ": ",
            ("error[%s]" % self.code.normalize(), styles["code"]),
            ": ",
            (self.message, styles["error-message"]),
        )

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(**{**self.options, **overrides})


class UnknownFlagError(ParseError):
    """A flag-shaped token matched none of the registered spellings."""
    code = FaultCode.UNKNOWN_FLAG
    template = "Unknown option `%(token)s`"
    __fields__ = ("token",)


class InsufficientArgsError(ParseError):
    """A value was required but no tokens were left."""
    code = FaultCode.INSUFFICIENT_ARGS
    template = "Expected %(expected)d positional args but only got %(actual)d"
    __fields__ = ("expected", "actual")


class InvalidIntegerError(ParseError):
    code = FaultCode.INVALID_INTEGER
    template = "Invalid integer `%(token)s` (%(reason)s)"
    __fields__ = ("token", "reason")


class InvalidFloatError(ParseError):
    code = FaultCode.INVALID_FLOAT
    template = "Invalid float `%(token)s` (%(reason)s)"
    __fields__ = ("token", "reason")


class UnexpectedValueError(ParseError):
    """A token did not match any accepted spelling for the expected kind of value."""
    code = FaultCode.UNEXPECTED_VALUE
    template = "Invalid value `%(token)s`, expected %(expected)s"
    __fields__ = ("token", "expected")


class RedundantSpellingWarning(UserWarning):
    """The same spelling was registered twice for one identifier."""


def describe(fault, /):
    """
    render a fault as its single-line, human-readable message.

    this is a pure function of the fault's context; it never looks at the
    cursor or at any host configuration.
    """
    if not isinstance(fault, ParseError):
        raise TypeError("describe() argument must be a parse error")
    return fault.template % dict(fault.options)


__all__ = (
    "FaultCode",
    "ParseError",
    "UnknownFlagError",
    "InsufficientArgsError",
    "InvalidIntegerError",
    "InvalidFloatError",
    "UnexpectedValueError",
    "RedundantSpellingWarning",
    "describe",
)
