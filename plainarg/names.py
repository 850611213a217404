r"""
plainarg name resolution: identifier sets, flag metadata and spelling tables.

Overview
- Identifier sets (“sources”)
  • A closed, caller-defined set of logical identifiers, given as:
      – an Enum subclass            → symbolic name is member.name
      – a Mapping[identifier, str]  → explicit symbolic names
      – an Iterable of str / enum members
  • identifiers(source) normalizes any of these into {identifier: symbol}.

- Default spellings
  • infer_name("foo_bar") → "foo-bar" (underscores become hyphens, nothing else).
  • flags are spelled "--" + name; values are spelled name.

- FlagInfo
  • Explicit per-identifier flag metadata: primary name override, a
    one-character short form ("-x") and literal aliases.

- NameTable
  • Read-only Mapping[str, identifier] from every accepted spelling to its
    identifier, built once per call site by NameTable.for_flags() or
    NameTable.for_values() and immutable afterwards.

Configuration errors (raised while building, before any token is inspected)
- duplicate FlagInfo for one identifier                → ValueError
- metadata or aliases for an identifier outside the set → ValueError
- one spelling registered for two identifiers          → ValueError
- a spelling repeated for the same identifier          → RedundantSpellingWarning

Quick example:
    >>> class Color(enum.Enum):
    ...     RED = 1
    ...     DARK_BLUE = 2
    >>> table = NameTable.for_flags(Color, [FlagInfo(Color.RED, short="r")])
    >>> table["--RED"], table["-r"], table["--DARK-BLUE"]
    (<Color.RED: 1>, <Color.RED: 1>, <Color.DARK_BLUE: 2>)
"""
import enum
import warnings
from collections.abc import Iterable, Mapping

from .faults import RedundantSpellingWarning
from .utils import *


def infer_name(symbol, /):
    """
    derive the default spelling of an identifier from its symbolic name.

    every underscore becomes a hyphen; the result is stable under repeated
    application (infer_name(infer_name(x)) == infer_name(x)).
    """
    if not isinstance(symbol, str):
        raise TypeError("infer_name() argument must be a string")
    return symbol.replace("_", "-")


def identifiers(source, /):
    """
    normalize an identifier set into an ordered {identifier: symbol} dict.

    accepted sources
    - Enum subclass: members in definition order (aliases skipped).
    - Mapping: identifier → symbolic name (a non-empty string).
    - Iterable: strings (their own symbol) or objects with a string .name.

    raises
    - TypeError for other sources or identifiers without a symbolic name.
    - ValueError for empty sets and duplicated identifiers.
    """
    if isinstance(source, type) and issubclass(source, enum.Enum):
        members = {member: member.name for member in source}
    elif isinstance(source, Mapping):
        members = dict(source)
    elif isinstance(source, Iterable) and not isinstance(source, str):
        members = {}
        for item in source:
            if item in members:
                raise ValueError("duplicate identifier %r in identifier set" % (item,))
            members[item] = item if isinstance(item, str) else getattr(item, "name", Unset)
    else:
        raise TypeError("identifier set must be an enum, a mapping or an iterable of identifiers")

    for identifier, symbol in members.items():
        if not isinstance(symbol, str):
            raise TypeError("identifier %r has no symbolic name; pass a mapping of identifiers to names" % (identifier,))
        if not symbol:
            raise ValueError("identifier %r has an empty symbolic name" % (identifier,))

    if not members:
        raise ValueError("identifier set must not be empty")
    return members


class FlagInfo:
    """
    explicit flag metadata for one identifier.

    parameters
    - identifier: the logical identifier described (positional-only).
    - name: primary long name without leading dashes; inferred from the
      identifier's symbolic name when omitted.
    - short: optional single character, spelled "-" + short.
    - aliases: extra literal spellings, matched verbatim (dashes included).
    """
    __slots__ = ("_identifier", "_name", "_short", "_aliases")

    identifier = view("identifier")
    name = view("name")
    short = view("short")
    aliases = view("aliases")

    def __init__(self, identifier, /, name=Unset, short=Unset, aliases=()):
        if name is not Unset:
            if not isinstance(name, str):
                raise TypeError("FlagInfo() name must be a string")
            if not name or name.startswith("-"):
                raise ValueError("FlagInfo() name must be non-empty and given without leading dashes")
        if short is not Unset:
            if not isinstance(short, str):
                raise TypeError("FlagInfo() short must be a string")
            if len(short) != 1 or short == "-":
                raise ValueError("FlagInfo() short must be a single character other than '-'")
        if isinstance(aliases, str) or not isinstance(aliases, Iterable):
            raise TypeError("FlagInfo() aliases must be an iterable of strings")
        aliases = tuple(aliases)
        for alias in aliases:
            if not isinstance(alias, str):
                raise TypeError("FlagInfo() aliases must be an iterable of strings")
            if not alias:
                raise ValueError("FlagInfo() aliases must be non-empty")

        self._identifier = identifier
        self._name = name
        self._short = short
        self._aliases = aliases

    def spellings(self, symbol=Unset, /):
        """
        list every accepted spelling: the long form first, then the short form
        (if any), then the aliases in declaration order.

        symbol is only needed when no explicit name was given.
        """
        if self._name is Unset and symbol is Unset:
            raise TypeError("spellings() needs a symbol when no explicit name is set")
        name = self._name if self._name is not Unset else infer_name(symbol)
        spellings = ["--" + name]
        if self._short is not Unset:
            spellings.append("-" + self._short)
        spellings.extend(self._aliases)
        return tuple(spellings)

    def __repr__(self):
        fields = [repr(self._identifier)]
        if self._name is not Unset:
            fields.append("name=%r" % self._name)
        if self._short is not Unset:
            fields.append("short=%r" % self._short)
        if self._aliases:
            fields.append("aliases=%r" % (self._aliases,))
        return "%s(%s)" % (type(self).__name__, ", ".join(fields))


class NameTable(Mapping):
    """
    read-only mapping from accepted spellings to identifiers.

    the constructor takes {identifier: spellings}; prefer the for_flags() and
    for_values() factories, which also derive default spellings.

    attributes
    - identifiers: the identifiers in registration order.
    - expected: label describing what the table matches (used in messages).
    """
    __slots__ = ("_entries", "_spellings", "_expected")

    expected = view("expected")

    def __init__(self, spellings, /, expected="value"):
        if not isinstance(spellings, Mapping):
            raise TypeError("NameTable() argument must be a mapping of identifiers to spellings")
        if not isinstance(expected, str):
            raise TypeError("NameTable() expected must be a string")

        entries = {}
        registered = {}
        for identifier, names in spellings.items():
            if isinstance(names, str) or not isinstance(names, Iterable):
                raise TypeError("spellings of %r must be an iterable of strings" % (identifier,))
            registered[identifier] = names = tuple(names)
            for text in names:
                if not isinstance(text, str):
                    raise TypeError("spellings of %r must be an iterable of strings" % (identifier,))
                if not text:
                    raise ValueError("spellings of %r must be non-empty" % (identifier,))
                if text not in entries:
                    entries[text] = identifier
                elif entries[text] == identifier:
                    warnings.warn(
                        "spelling %r is registered twice for %r" % (text, identifier),
                        RedundantSpellingWarning,
                        stacklevel=3
                    )
                else:
                    raise ValueError("spelling %r is ambiguous between %r and %r" % (text, entries[text], identifier))

        self._entries = entries
        self._spellings = registered
        self._expected = expected

    @classmethod
    def for_flags(cls, source, explicit=(), /):
        """
        build the flag table for an identifier set.

        identifiers with a FlagInfo in explicit use its spellings; all others
        accept only "--" + infer_name(symbol). A prebuilt NameTable is returned
        unchanged (explicit metadata cannot be layered on top of it).
        """
        explicit = tuple(explicit)
        if isinstance(source, cls):
            if explicit:
                raise TypeError("explicit metadata cannot be applied to a prebuilt table")
            return source

        members = identifiers(source)

        infos = {}
        for info in explicit:
            if not isinstance(info, FlagInfo):
                raise TypeError("explicit metadata must be FlagInfo instances")
            if info.identifier not in members:
                raise ValueError("metadata given for %r, which is not in the identifier set" % (info.identifier,))
            if info.identifier in infos:
                raise ValueError("duplicate metadata for %r" % (info.identifier,))
            infos[info.identifier] = info

        return cls({
            identifier: infos.get(identifier, FlagInfo(identifier)).spellings(symbol)
            for identifier, symbol in members.items()
        }, expected="flag")

    @classmethod
    def for_values(cls, source, aliases=Unset, /):
        """
        build the value table for an identifier set.

        each identifier accepts infer_name(symbol), unless aliases maps it to
        an iterable of spellings, which then replaces the default entirely
        (None keeps the default). A prebuilt NameTable is returned unchanged.
        """
        if isinstance(source, cls):
            if aliases is not Unset:
                raise TypeError("aliases cannot be applied to a prebuilt table")
            return source

        members = identifiers(source)

        aliases = coalesce(aliases, {})
        if not isinstance(aliases, Mapping):
            raise TypeError("aliases must be a mapping of identifiers to spellings")
        for identifier in aliases:
            if identifier not in members:
                raise ValueError("aliases given for %r, which is not in the identifier set" % (identifier,))

        spellings = {}
        for identifier, symbol in members.items():
            names = aliases.get(identifier)
            spellings[identifier] = (infer_name(symbol),) if names is None else names
        return cls(spellings, expected=getattr(source, "__name__", "value"))

    @property
    def identifiers(self):
        return tuple(self._spellings)

    def spellings(self, identifier, /):
        """every spelling registered for identifier, in registration order."""
        return self._spellings[identifier]

    def __getitem__(self, text, /):
        return self._entries[text]

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return "%s(%r, expected=%r)" % (type(self).__name__, self._spellings, self._expected)


__all__ = (
    "infer_name",
    "identifiers",
    "FlagInfo",
    "NameTable",
)
