"""
plainarg utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the cursor, the name resolver and the faults.

Overview
- UnsetType / Unset
  • Singleton sentinel meaning “argument not provided”, distinct from None.
  • Falsey, printable as "Unset", non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default; None and other falsey values are kept.

- freeze(value)
  • Shallow read-only snapshot of a container (tuple / MappingProxyType / frozenset).

- view("attr")
  • Read-only property exposing a private backing slot (self._attr) as a frozen value.

Stability and contract
- Names not in __all__ are internal and may change without notice.
"""
import functools
from collections.abc import Sequence, Mapping, Set
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a parameter that was not provided.

    Used where None is a meaningful value (e.g., a cursor whose boundary is
    still unknown is None, but an omitted `expected=` label is Unset).

    Characteristics
    - Boolean-false: bool(Unset) is False.
    - Printable: repr(Unset) -> "Unset".
    - Non-subclassable and a process-wide singleton.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Falsey values like None, 0 or "" are returned untouched; only Unset is
    replaced.

    Examples
    - coalesce("TestEnum", "value") -> "TestEnum"
    - coalesce(Unset, "value")      -> "value"
    - coalesce(None, "value")       -> None
    """
    return object if object is not Unset else default


def freeze(object, /):
    """
    Return a shallow read-only snapshot of a container.

    - Sequence (non-string) → tuple
    - Mapping               → MappingProxyType over a private copy
    - Set                   → frozenset
    - anything else         → returned as-is
    """
    if isinstance(object, Sequence) and not isinstance(object, str):
        return tuple(object)
    if isinstance(object, Mapping):
        return MappingProxyType(dict(object))
    if isinstance(object, Set):
        return frozenset(object)
    return object


def view(name, /):
    """
    Define a read-only property mirroring the backing slot "_{name}".

    Container values are frozen on the way out so callers cannot mutate the
    owner's state through the public attribute.
    """
    if not isinstance(name, str):
        raise TypeError("view() argument must be a string")

    def getter(self):
        return freeze(getattr(self, "_" + name))

    getter.__name__ = getter.__qualname__ = name
    return property(getter)


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Typical pattern: expected = coalesce(expected, fallback).
"""


__all__ = (
    # Functions
    "coalesce",
    "freeze",
    "view",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
