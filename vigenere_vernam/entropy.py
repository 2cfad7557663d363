"""
Random Index Generator
======================
Uniform integers in [0, n) drawn from a cryptographically secure source.

The source is any callable read(size) -> bytes; the default is os.urandom,
the same platform CSPRNG used for every key in this package.

Method: masked rejection sampling.
    bits  = bit length of n - 1
    read  ceil(bits / 8) bytes, keep the low `bits` bits
    value >= n  →  discard and draw again

No modulo reduction is applied, so there is no bias towards small indices
when n is not a power of two. Expected draws per index is below 2.

A source that raises, returns something other than bytes, or returns
fewer bytes than asked for is reported as EntropyError and never retried:
degraded randomness must not be masked.
"""

import os
from typing import Callable, List, Optional

from .exceptions import EntropyError

RandomSource = Callable[[int], bytes]


def default_random_source() -> RandomSource:
    return os.urandom


class RandomIndexGenerator:
    """Draw unbiased indices for an alphabet of `length` symbols."""

    def __init__(self, length: int, random_source: Optional[RandomSource] = None):
        if length < 1:
            raise ValueError("Index range must hold at least one value.")
        self.length        = length
        self.random_source = (random_source if random_source is not None
                              else default_random_source())

        bits = (length - 1).bit_length()
        self._nbytes = (bits + 7) // 8
        self._mask   = (1 << bits) - 1

    @property
    def random_source(self) -> RandomSource:
        return self._random_source

    @random_source.setter
    def random_source(self, source: RandomSource):
        if not callable(source):
            raise TypeError("random_source must be callable: read(size) -> bytes.")
        self._random_source = source

    def _read(self, size: int) -> bytes:
        try:
            data = self.random_source(size)
        except Exception as exc:
            raise EntropyError(f"Random source failed: {exc}") from exc
        if not isinstance(data, (bytes, bytearray)):
            raise EntropyError(
                f"Random source returned {type(data).__name__}, expected bytes."
            )
        if len(data) != size:
            raise EntropyError(
                f"Random source exhausted: wanted {size} bytes, got {len(data)}."
            )
        return bytes(data)

    def next_index(self) -> int:
        """One uniformly distributed index in [0, length)."""
        if self.length == 1:
            return 0
        while True:
            value = int.from_bytes(self._read(self._nbytes), "big") & self._mask
            if value < self.length:
                return value

    def indices(self, count: int) -> List[int]:
        """Draw `count` indices. Fails on the first entropy error."""
        return [self.next_index() for _ in range(count)]
