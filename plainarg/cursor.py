"""
plainarg cursor: imperative, caller-driven argument parsing.

What this module provides
- Cursor: a position over an already-tokenized argument list. The calling
  code pulls tokens out one at a time, deciding at each step whether it wants
  a flag, a positional value or a typed value.

Grammar
- "--" ends flag parsing unconditionally and is consumed, never returned.
- tokens of length 0 or 1 (including a bare "-") are positional.
- "-x" (a dash plus one character) is a short flag.
- longer tokens starting with "-" are long flags.
- anything else is positional, and so is everything after it.

The flag/positional boundary is discovered lazily by has_more_flags() and
cached; once the cursor has seen a positional token or the terminator it
never goes back to reading flags.

Faults
- Operations raise ParseError subclasses for bad input and remember the most
  recent one in Cursor.error (overwritten, never accumulated).
- Contract violations (consuming past the end, blaming a previous token when
  none was consumed) raise IndexError and leave Cursor.error untouched.

Quick start
    from plainarg import Cursor, FlagInfo

    cursor = Cursor(sys.argv[1:])
    verbose, level = False, 0
    while (flag := cursor.match_flag(Flag, [FlagInfo(Flag.VERBOSE, short="v")])) is not None:
        match flag:
            case Flag.VERBOSE:
                verbose = True
            case Flag.LEVEL:
                level = cursor.expect(int)
    command = cursor.expect_enum(Command)
    subcursor = cursor.fork()
"""
import functools

from .faults import *
from .names import NameTable
from .utils import *
from .values import converter


def _recorded(method):
    """
    wrap a cursor operation so any ParseError it raises is kept in cursor.error.
    """

    @functools.wraps(method)
    def wrapper(self, /, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except ParseError as fault:
            self._error = fault
            raise

    return wrapper


class Cursor:
    """
    a cursor over a list of argument tokens.

    attributes (read-only)
    - tokens: the full token tuple, snapshotted at construction.
    - index: position of the current token; only ever moves forward.
    - boundary: first index of the positional region, or None while unknown.
    - error: the most recent ParseError raised by this cursor, or None.
    """
    __slots__ = ("_tokens", "_index", "_boundary", "_terminator", "_error")

    tokens = view("tokens")
    index = view("index")
    boundary = view("boundary")
    error = view("error")

    def __init__(self, tokens=(), /):
        if isinstance(tokens, str):
            raise TypeError("Cursor() argument must be an iterable of tokens, not a string")
        tokens = tuple(tokens)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("Cursor() tokens must be strings, not %r" % type(token).__name__)
        self._tokens = tokens
        self._index = 0
        self._boundary = None
        self._terminator = None
        self._error = None

    def __repr__(self):
        return "%s(%r, index=%d)" % (type(self).__name__, self._tokens, self._index)

    def __rich_repr__(self):
        yield self._tokens
        yield "index", self._index
        yield "boundary", self._boundary, None
        yield "error", self._error, None

    # --- navigation ---

    def has_more(self):
        """True while there is a current token (flag or positional)."""
        return self._index < len(self._tokens)

    def peek(self):
        """the current token without consuming it, or None at the end."""
        return self._tokens[self._index] if self.has_more() else None

    def remaining(self):
        """every unconsumed token, the current one included."""
        return self._tokens[self._index:]

    def consume(self):
        """
        return the current token and advance past it.

        raises IndexError when nothing is left; check has_more() first or use
        take() instead.
        """
        if not self.has_more():
            raise IndexError("consume() called with no remaining tokens")
        token = self._tokens[self._index]
        self._index += 1
        return token

    def take(self):
        """consume() that returns None instead of raising at the end."""
        return self.consume() if self.has_more() else None

    def fork(self):
        """a fresh cursor over remaining(), e.g. for a subcommand's arguments."""
        return type(self)(self.remaining())

    # --- classification ---

    def has_more_flags(self):
        """
        tell whether the current token is a flag.

        False at the end of input and, permanently, once the positional
        boundary is known. Meeting "--" consumes it and marks everything after
        it as positional.
        """
        if not self.has_more() or self._boundary is not None:
            return False
        return not self._classify()

    def _classify(self):
        """
        inspect the current token and record the boundary if it starts the
        positional region; returns True when a boundary was recorded.
        """
        token = self._tokens[self._index]
        match len(token):
            case 0 | 1:
                # a bare "-" conventionally means stdin/stdout: positional
                self._boundary = self._index
            case 2:
                if token == "--":
                    self._terminator = self._index
                    self._index += 1
                    self._boundary = self._index
                elif not token.startswith("-"):
                    self._boundary = self._index
            case _:
                if not token.startswith("-"):
                    self._boundary = self._index
        return self._boundary is not None

    # --- flags ---

    @_recorded
    def match_flag(self, source, explicit=(), /):
        """
        match the current token against an identifier set's flag spellings.

        parameters
        - source: identifier set (Enum, mapping, iterable) or a prebuilt NameTable.
        - explicit: FlagInfo overrides for some identifiers.

        returns
        - the matched identifier (the token is consumed), or None when there
          are no more flags.

        raises
        - UnknownFlagError when the token is flag-shaped but unknown; the token
          stays current so the caller may fall back to positional handling.
        """
        table = NameTable.for_flags(source, explicit)
        if not self.has_more_flags():
            return None
        token = self._tokens[self._index]
        try:
            identifier = table[token]
        except KeyError:
            raise UnknownFlagError(token=token) from None
        self._index += 1
        return identifier

    # --- values ---

    @_recorded
    def expect_string(self):
        """
        consume and return the next token, whatever it looks like.

        raises InsufficientArgsError when nothing is left.
        """
        if not self.has_more():
            raise InsufficientArgsError(expected=len(self._tokens) + 1, actual=len(self._tokens))
        return self.consume()

    @_recorded
    def expect(self, type=str, /):
        """
        consume the next token and convert it to type.

        type is one of str, bool, int, float or a plainarg.values.Integer
        width; anything else raises TypeError before a token is consumed.
        """
        convert = converter(type)
        return convert(self.expect_string())

    @_recorded
    def expect_enum(self, source, /, aliases=Unset, expected=Unset):
        """
        consume the next token and resolve it to an identifier of source.

        parameters
        - source: identifier set or a prebuilt NameTable (values are spelled
          infer_name(symbol), without dashes).
        - aliases: optional {identifier: spellings} replacing the defaults.
        - expected: label used in the fault message; defaults to the source's
          name (an Enum's class name) or "value".

        raises
        - InsufficientArgsError when nothing is left.
        - UnexpectedValueError naming the consumed token when it matches nothing.
        """
        table = NameTable.for_values(source, aliases)
        token = self.expect_string()
        try:
            return table[token]
        except KeyError:
            raise self.unexpected_previous(coalesce(expected, table.expected)) from None

    def unexpected_previous(self, expected, /):
        """
        build and record an UnexpectedValueError for the token just consumed.

        the fault is returned, not raised; callers typically write
        `raise cursor.unexpected_previous("a color")`. A "--" consumed by
        has_more_flags() is never blamed; the token before it is.
        """
        if not isinstance(expected, str):
            raise TypeError("unexpected_previous() argument must be a string")
        previous = self._index - 1
        if previous == self._terminator:
            previous -= 1
        if previous < 0:
            raise IndexError("unexpected_previous() called before any token was consumed")
        self._error = UnexpectedValueError(token=self._tokens[previous], expected=expected)
        return self._error


__all__ = (
    "Cursor",
)
