"""
Exceptions
==========
Every error the cipher can raise derives from VigenereError and from the
built-in family it belongs to, so callers may catch either.

    DuplicateSymbolError   — alphabet repeats a symbol (construction)
    AmbiguousSymbolError   — a symbol is a prefix of another (construction)
    InvalidSymbolError     — text holds a symbol outside the alphabet
    LengthMismatchError    — secret is shorter than the text
    EntropyError           — the random source failed or ran dry
    IndexOutOfRangeError   — an index has no symbol (internal bug)

A raised error always means no usable output was produced.
"""


class VigenereError(Exception):
    """Base class for all cipher errors."""


class DuplicateSymbolError(VigenereError, ValueError):
    def __init__(self, symbol: str, position: int):
        super().__init__(
            f"Alphabet contains duplicate symbol {symbol!r} at position {position}."
        )
        self.symbol   = symbol
        self.position = position


class InvalidSymbolError(VigenereError, ValueError):
    def __init__(self, symbol: str, position: int):
        super().__init__(
            f"Symbol {symbol!r} at position {position} does not conform to the alphabet."
        )
        self.symbol   = symbol
        self.position = position


class LengthMismatchError(VigenereError, ValueError):
    def __init__(self, operation: str, text_length: int, secret_length: int):
        super().__init__(
            f"{operation}: secret is shorter than the text "
            f"({secret_length} < {text_length} symbols)."
        )
        self.text_length   = text_length
        self.secret_length = secret_length


class EntropyError(VigenereError, RuntimeError):
    """Secure random source failed. Never retried."""


class IndexOutOfRangeError(VigenereError, IndexError):
    def __init__(self, index: int, length: int):
        super().__init__(f"Index {index} is outside alphabet of length {length}.")
        self.index  = index
        self.length = length


class AmbiguousSymbolError(VigenereError, ValueError):
    """One symbol is a proper prefix of another, so joined text cannot be split back."""

    def __init__(self, prefix: str, symbol: str):
        super().__init__(
            f"Alphabet symbol {prefix!r} is a prefix of {symbol!r}; "
            f"text built from these symbols cannot be split unambiguously."
        )
        self.prefix = prefix
        self.symbol = symbol
