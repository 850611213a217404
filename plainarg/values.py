"""
plainarg typed values: conversions from one token to a Python value.

Supported targets
- str: the token itself.
- bool: exactly "true" or "false" (case-sensitive, nothing else).
- int: unbounded integer with optional sign, optional 0x/0o/0b radix prefix
  (either case) and single underscores between digits. Leading zeros are
  plain decimal ("010" == 10).
- Integer(bits, signed=True): the same syntax, bounded to a fixed width.
  Ready-made widths: int8 ... int64, uint8 ... uint64.
- float: decimal or scientific notation, inf/infinity/nan, and hexadecimal
  floats ("0x1.8p3"). Surrounding whitespace is rejected.

Faults
- integers report InvalidIntegerError with reason "invalid character" or
  "overflow"; floats report InvalidFloatError; booleans report
  UnexpectedValueError naming "a boolean".
- converter() rejects unsupported targets with TypeError without looking at
  any token, so wiring mistakes surface before parsing.
"""
import re

from .faults import InvalidIntegerError, InvalidFloatError, UnexpectedValueError
from .utils import *

_INTEGER = re.compile(r"(?P<sign>[+-]?)(?:0(?P<radix>[xXoObB]))?(?P<digits>.*)", re.DOTALL)
_DIGITS = {
    2: re.compile(r"[01]+(?:_[01]+)*"),
    8: re.compile(r"[0-7]+(?:_[0-7]+)*"),
    10: re.compile(r"[0-9]+(?:_[0-9]+)*"),
    16: re.compile(r"[0-9a-fA-F]+(?:_[0-9a-fA-F]+)*"),
}
_DECIMAL = re.compile(
    r"[+-]?(?:[0-9]+(?:_[0-9]+)*(?:\.(?:[0-9]+(?:_[0-9]+)*)?)?|\.[0-9]+(?:_[0-9]+)*)"
    r"(?:[eE][+-]?[0-9]+)?"
)
_HEXADECIMAL = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?")
_SPECIAL = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)
_RADIXES = {"x": 16, "o": 8, "b": 2}
_CHUNK = 1000


class Integer:
    """
    a fixed-width integer target.

    parameters
    - bits: width in bits (>= 1).
    - signed: two's complement range when True, [0, 2**bits) otherwise.

    calling an Integer converts a token: int32("0x7f") == 127.
    """
    __slots__ = ("_bits", "_signed")

    bits = view("bits")
    signed = view("signed")

    def __init__(self, bits, /, signed=True):
        if not isinstance(bits, int) or isinstance(bits, bool):
            raise TypeError("Integer() bits must be an integer")
        if bits < 1:
            raise ValueError("Integer() bits must be at least 1")
        self._bits = bits
        self._signed = bool(signed)

    @property
    def minimum(self):
        return -(1 << (self._bits - 1)) if self._signed else 0

    @property
    def maximum(self):
        return (1 << (self._bits - 1)) - 1 if self._signed else (1 << self._bits) - 1

    def __call__(self, text, /):
        return parse_int(text, self)

    def __eq__(self, other):
        if not isinstance(other, Integer):
            return NotImplemented
        return (self._bits, self._signed) == (other._bits, other._signed)

    def __hash__(self):
        return hash((Integer, self._bits, self._signed))

    def __repr__(self):
        return ("int%d" if self._signed else "uint%d") % self._bits


def parse_bool(text, /):
    if text == "true":
        return True
    if text == "false":
        return False
    raise UnexpectedValueError(token=text, expected="a boolean")


def _decimal(digits, /):
    # int() refuses decimal strings past sys.get_int_max_str_digits()
    value = 0
    for start in range(0, len(digits), _CHUNK):
        chunk = digits[start:start + _CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def parse_int(text, /, width=Unset):
    """
    convert text to an int, optionally bounded by an Integer width.

    raises
    - InvalidIntegerError(reason="invalid character") for malformed text.
    - InvalidIntegerError(reason="overflow") when outside width's range.
    """
    match = _INTEGER.fullmatch(text)
    base = _RADIXES.get((match["radix"] or "").lower(), 10)
    if not _DIGITS[base].fullmatch(match["digits"]):
        raise InvalidIntegerError(token=text, reason="invalid character")

    digits = match["digits"].replace("_", "")
    value = _decimal(digits) if base == 10 else int(digits, base)
    if match["sign"] == "-":
        value = -value
    if width is not Unset and not width.minimum <= value <= width.maximum:
        raise InvalidIntegerError(token=text, reason="overflow")
    return value


def parse_float(text, /):
    """
    convert text to a float.

    raises
    - InvalidFloatError(reason="invalid character") for malformed text.
    - InvalidFloatError(reason="overflow") for hexadecimal floats out of range.
    """
    if _DECIMAL.fullmatch(text) or _SPECIAL.fullmatch(text):
        return float(text)
    if _HEXADECIMAL.fullmatch(text):
        try:
            return float.fromhex(text)
        except OverflowError:
            raise InvalidFloatError(token=text, reason="overflow") from None
    raise InvalidFloatError(token=text, reason="invalid character")


def _identity(text, /):
    return text


_CONVERTERS = {
    str: _identity,
    bool: parse_bool,
    int: parse_int,
    float: parse_float,
}


def converter(type, /):
    """
    return the conversion function for a target type.

    raises TypeError for anything but str, bool, int, float or an Integer.
    """
    if isinstance(type, Integer):
        return type
    try:
        return _CONVERTERS[type]
    except (KeyError, TypeError):
        raise TypeError("unsupported value type %r" % (type,)) from None


def convert(type, text, /):
    """convert one token to the given target type."""
    return converter(type)(text)


int8 = Integer(8)
int16 = Integer(16)
int32 = Integer(32)
int64 = Integer(64)
uint8 = Integer(8, signed=False)
uint16 = Integer(16, signed=False)
uint32 = Integer(32, signed=False)
uint64 = Integer(64, signed=False)


__all__ = (
    "Integer",
    "parse_bool",
    "parse_int",
    "parse_float",
    "converter",
    "convert",
    "int8",
    "int16",
    "int32",
    "int64",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
)
