"""
vigenere_vernam
===============
Vigenère-Vernam cipher: a polyalphabetic substitution cipher used as a
One-Time Pad over any alphabet, with a cryptographically secure key
generator.

Components:
    Alphabet              — ordered, duplicate-free symbol registry
    Codec                 — text ↔ index sequences
    Validator             — alphabet conformance checks
    RandomIndexGenerator  — unbiased indices from a secure byte source
    VigenereCipher        — context: encrypt, decrypt, generate_secret_key

License: Apache 2.0
"""

__version__ = "1.0.0"

from .alphabet   import Alphabet, default_alphabet
from .codec      import Codec
from .validator  import Validator
from .entropy    import RandomIndexGenerator
from .cipher     import VigenereCipher, shift_forward, shift_backward
from .exceptions import (
    VigenereError,
    DuplicateSymbolError,
    AmbiguousSymbolError,
    InvalidSymbolError,
    LengthMismatchError,
    EntropyError,
    IndexOutOfRangeError,
)

__all__ = [
    "Alphabet",
    "default_alphabet",
    "Codec",
    "Validator",
    "RandomIndexGenerator",
    "VigenereCipher",
    "shift_forward",
    "shift_backward",
    "VigenereError",
    "DuplicateSymbolError",
    "AmbiguousSymbolError",
    "InvalidSymbolError",
    "LengthMismatchError",
    "EntropyError",
    "IndexOutOfRangeError",
]
