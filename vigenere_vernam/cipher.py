"""
Vigenère-Vernam Cipher
======================
Polyalphabetic substitution used as a One-Time Pad.

Every symbol of the alphabet has a numeric value, its index. Encryption
adds the value of each plaintext symbol to the value of the matching
secret symbol, modulo the alphabet length:

    cipher[i] = (plain[i] + secret[i]) mod n
    plain[i]  = cipher[i] - secret[i]        (+ n once if negative)

With a secret that is truly random, as long as the message and never
reused, this is Vernam's one-time pad: information-theoretically secure.
generate_secret_key() produces such a secret from the platform CSPRNG.

Typical flow:
    cipher = VigenereCipher()
    cipher.validate_string(plaintext)          # untrusted input
    secret = cipher.generate_secret_key(plaintext)
    ct     = cipher.encrypt(plaintext, secret)
    pt     = cipher.decrypt(ct, secret)

A secret longer than the text is accepted and only its prefix is used.
Reusing a secret this way weakens the one-time-pad guarantee; that is the
caller's responsibility.

Lengths are always counted in alphabet symbols, never bytes.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from .alphabet import Alphabet, default_alphabet
from .codec import Codec
from .entropy import RandomIndexGenerator, RandomSource
from .exceptions import LengthMismatchError
from .validator import Validator

logger = logging.getLogger(__name__)


def shift_forward(plain: Sequence[int], secret: Sequence[int], length: int) -> List[int]:
    """Element-wise (plain + secret) mod length. Extra secret values are ignored."""
    return [(p + k) % length for p, k in zip(plain, secret)]


def shift_backward(cipher: Sequence[int], secret: Sequence[int], length: int) -> List[int]:
    """Element-wise cipher - secret, wrapped once into [0, length)."""
    result = []
    for c, k in zip(cipher, secret):
        value = c - k
        if value < 0:
            value += length
        result.append(value)
    return result


class VigenereCipher:
    """
    Cipher context: alphabet, its cached length and the random source.

    The random source is any callable read(size) -> bytes and defaults to
    os.urandom. It may be replaced at any time through the
    `random_source` attribute, e.g. with a deterministic or failing
    source in tests, without building a new context.
    """

    DEFAULT_ALPHABET = tuple(default_alphabet())

    def __init__(self, alphabets: Optional[Iterable[str]] = None,
                 random_source: Optional[RandomSource] = None):
        """
        Pass the ordered symbols to use, or omit / pass an empty sequence
        for A–Z. Raises DuplicateSymbolError if a symbol repeats and
        AmbiguousSymbolError if one symbol is a prefix of another.
        """
        self._alphabet  = Alphabet(alphabets)
        self._codec     = Codec(self._alphabet)
        self._validator = Validator(self._codec)
        self._rng       = RandomIndexGenerator(len(self._alphabet), random_source)
        logger.info(f"VigenereCipher ready | alphabet={len(self._alphabet)} symbols")

    # ── context ──────────────────────────────────────────────────────────────

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def alphabets(self) -> tuple:
        return self._alphabet.symbols

    @property
    def length(self) -> int:
        return len(self._alphabet)

    @property
    def random_source(self) -> RandomSource:
        return self._rng.random_source

    @random_source.setter
    def random_source(self, source: RandomSource):
        self._rng.random_source = source

    # ── codec ────────────────────────────────────────────────────────────────

    def convert_to_numeric(self, text: str) -> List[int]:
        """Text → index sequence. Raises InvalidSymbolError on foreign symbols."""
        return self._codec.encode(text)

    def convert_to_string(self, numbers: Iterable[int]) -> str:
        """Index sequence → text. Raises IndexOutOfRangeError on bad indices."""
        return self._codec.decode(numbers)

    # ── validation ───────────────────────────────────────────────────────────

    def validate_string(self, text: str) -> bool:
        return self._validator.validate_string(text)

    def ensure_valid(self, text: str) -> None:
        self._validator.ensure_valid(text)

    # ── transform ────────────────────────────────────────────────────────────

    def _operands(self, operation: str, text: str, secret: str):
        text_units   = self._codec.split(text)
        secret_units = self._codec.split(secret)
        if len(secret_units) < len(text_units):
            raise LengthMismatchError(operation, len(text_units), len(secret_units))
        secret_units = secret_units[:len(text_units)]
        return (self._codec.encode_units(text_units),
                self._codec.encode_units(secret_units))

    def encrypt(self, plaintext: str, secret: str) -> str:
        """
        Encrypt plaintext with a secret at least as long.
        Raises LengthMismatchError or InvalidSymbolError.
        """
        plain, key = self._operands("Encrypt", plaintext, secret)
        logger.debug(f"Encrypt: {len(plain)} symbols")
        return self._codec.decode(shift_forward(plain, key, self.length))

    def decrypt(self, ciphertext: str, secret: str) -> str:
        """
        Decrypt ciphertext with the secret used to encrypt it.
        Raises LengthMismatchError or InvalidSymbolError.
        """
        cipher, key = self._operands("Decrypt", ciphertext, secret)
        logger.debug(f"Decrypt: {len(cipher)} symbols")
        return self._codec.decode(shift_backward(cipher, key, self.length))

    # ── key generation ───────────────────────────────────────────────────────

    def generate_random_number(self) -> int:
        """One uniform index in [0, length). Raises EntropyError."""
        return self._rng.next_index()

    def generate_secret_key(self, text: str) -> str:
        """
        Random secret with as many symbols as text. Only the length of text
        matters, not its content. All-or-nothing: the first EntropyError
        propagates and no partial key is returned.
        """
        count = len(self._codec.split(text))
        key   = self._rng.indices(count)
        logger.debug(f"Secret key: {count} symbols")
        return self._codec.decode(key)

    def __repr__(self):
        return f"VigenereCipher({self._alphabet!r})"
