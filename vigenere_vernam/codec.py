"""
Codec
=====
Bidirectional mapping between symbol strings and index sequences.

    "HELLO"  ──encode──▶  [7, 4, 11, 11, 14]  ──decode──▶  "HELLO"

Text is first split into symbol units. The alphabet is prefix-free, so at
any position at most one symbol matches and joined symbols always split
back into the same units. A position no symbol matches becomes a
one-character unit that encode() then rejects. With an alphabet of single
characters this is plain per-character iteration.
"""

from typing import Iterable, List

from .alphabet import Alphabet
from .exceptions import InvalidSymbolError


class Codec:
    """Text ↔ index conversion relative to one Alphabet."""

    def __init__(self, alphabet: Alphabet):
        self._alphabet = alphabet

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    def split(self, text: str) -> List[str]:
        """Break text into symbol units."""
        alphabet = self._alphabet
        if alphabet.longest_symbol == 1:
            return list(text)

        units = []
        pos   = 0
        end   = len(text)
        while pos < end:
            for size in range(min(alphabet.longest_symbol, end - pos), 0, -1):
                candidate = text[pos:pos + size]
                if candidate in alphabet:
                    break
            else:
                candidate = text[pos]
            units.append(candidate)
            pos += len(candidate)
        return units

    def encode_units(self, units: Iterable[str]) -> List[int]:
        indices = []
        for position, unit in enumerate(units):
            index = self._alphabet.index_of(unit)
            if index is None:
                raise InvalidSymbolError(unit, position)
            indices.append(index)
        return indices

    def encode(self, text: str) -> List[int]:
        """
        Map every symbol unit of text to its index.
        Raises InvalidSymbolError on the first unit outside the alphabet.
        """
        return self.encode_units(self.split(text))

    def decode(self, indices: Iterable[int]) -> str:
        """
        Join the symbols at the given indices.
        Raises IndexOutOfRangeError for any index outside [0, len(alphabet)).
        """
        return "".join(self._alphabet.symbol_at(i) for i in indices)
