"""
Alphabet Registry
=================
The ordered, duplicate-free set of symbols that defines the cipher's
numeric domain. A symbol's index in the alphabet is its numeric value.

Symbols are strings rather than single characters, so one symbol may span
several code points (e.g. "Ch", or a letter plus a combining accent).

Default alphabet: A–Z, code points 65 to 90.
"""

from typing import Iterable, Iterator, Optional

from .exceptions import AmbiguousSymbolError, DuplicateSymbolError, IndexOutOfRangeError


def default_alphabet() -> list:
    """Return the 26 uppercase Latin letters in order."""
    return [chr(code) for code in range(65, 91)]


class Alphabet:
    """
    Immutable symbol registry.

    Construction fails on the first repeated symbol (scanning left to
    right) and on any symbol that is a proper prefix of another, e.g.
    "C" next to "CH": decoded text such as "C" + "H..." could not be
    told apart from "CH". The symbol → index table is built once here
    so lookups are constant time.
    """

    def __init__(self, symbols: Optional[Iterable[str]] = None):
        symbols = list(symbols) if symbols is not None else []
        if not symbols:
            symbols = default_alphabet()

        lookup = {}
        for position, symbol in enumerate(symbols):
            if not isinstance(symbol, str):
                raise TypeError(
                    f"Alphabet symbols must be strings, got {type(symbol).__name__}."
                )
            if not symbol:
                raise ValueError("Alphabet symbols must be non-empty strings.")
            if symbol in lookup:
                raise DuplicateSymbolError(symbol, position)
            lookup[symbol] = position

        # Prefix-free symbols make every joined string split back one way only.
        # In sorted order a prefix sits directly before some symbol it starts.
        ordered = sorted(lookup)
        for shorter, longer in zip(ordered, ordered[1:]):
            if longer.startswith(shorter):
                raise AmbiguousSymbolError(shorter, longer)

        self._symbols = tuple(symbols)
        self._lookup  = lookup
        self._length  = len(self._symbols)
        self._longest = max(len(s) for s in self._symbols)

    @property
    def symbols(self) -> tuple:
        return self._symbols

    @property
    def longest_symbol(self) -> int:
        """Length in characters of the longest symbol."""
        return self._longest

    def index_of(self, symbol: str) -> Optional[int]:
        """Numeric value of *symbol*, or None if it is not a member."""
        return self._lookup.get(symbol)

    def symbol_at(self, index: int) -> str:
        if not 0 <= index < self._length:
            raise IndexOutOfRangeError(index, self._length)
        return self._symbols[index]

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __contains__(self, symbol) -> bool:
        return symbol in self._lookup

    def __eq__(self, other) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self):
        preview = "".join(self._symbols[:8])
        more    = "..." if self._length > 8 else ""
        return f"Alphabet({preview}{more}, length={self._length})"
