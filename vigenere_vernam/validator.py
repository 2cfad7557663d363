"""
Validator
=========
Checks that every symbol of a string belongs to the alphabet.

The cipher never calls this on its own. Run it on untrusted input before
encrypting, decrypting or generating a key; encoding will otherwise stop
at the first foreign symbol with InvalidSymbolError.
"""

from typing import Optional, Tuple

from .codec import Codec
from .exceptions import InvalidSymbolError


class Validator:
    """Alphabet conformance checks for symbol strings."""

    def __init__(self, codec: Codec):
        self._codec = codec

    def find_invalid(self, text: str) -> Optional[Tuple[int, str]]:
        """Return (position, symbol) of the first foreign unit, or None."""
        members = set(self._codec.alphabet)
        for position, unit in enumerate(self._codec.split(text)):
            if unit not in members:
                return position, unit
        return None

    def validate_string(self, text: str) -> bool:
        """True when text conforms to the alphabet. Empty text conforms."""
        return self.find_invalid(text) is None

    def ensure_valid(self, text: str) -> None:
        """Raise InvalidSymbolError on the first non-conforming symbol."""
        found = self.find_invalid(text)
        if found is not None:
            position, symbol = found
            raise InvalidSymbolError(symbol, position)
