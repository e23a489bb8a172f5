"""
Substring search module
=======================

Rabin-Karp search: slide a fixed-size window over the text, keep a rolling
polynomial hash of the window, and only compare characters when the window
hash equals the pattern hash.
"""

from collections import deque
from typing import Iterable, Optional, Sequence, Union

import numpy as np

from pyskiena.Benchmark import BenchmarkCase

BASE = 256
MODULUS = 1 << 32

Text = Union[str, bytes]


def _codes(text: Text) -> Sequence[int]:
    # bytes already iterate as ints
    return text if isinstance(text, (bytes, bytearray)) else [ord(c) for c in text]


class RollingHash:
    """
    Polynomial hash of a fixed-size window, updated in constant time as the
    window slides one symbol to the right.

    The window ``c[0] .. c[k-1]`` hashes to
    ``sum(c[i] * BASE**(k-1-i)) mod MODULUS``.
    """

    def __init__(self, first_window: Iterable[int]):
        """
        Parameters
        ----------
        first_window : Iterable[int]
            Symbol codes of the initial window.
        """
        self.window = deque(first_window)
        self.state = 0
        for code in self.window:
            self.state = (self.state * BASE + code) % MODULUS
        # weight of the symbol about to leave the window
        self._lead = pow(BASE, max(len(self.window) - 1, 0), MODULUS)

    def slide(self, code: int) -> int:
        """Drop the oldest symbol, append ``code`` and return the new hash."""
        old = self.window.popleft()
        self.window.append(code)
        self.state = ((self.state - old * self._lead) * BASE + code) % MODULUS
        return self.state

    @property
    def hash(self) -> int:
        return self.state


def find_substring(text: Text, pattern: Text) -> Optional[int]:
    """
    Return the offset of the first occurrence of ``pattern`` in ``text``.

    Parameters
    ----------
    text : str or bytes
        The haystack.
    pattern : str or bytes
        The needle, of the same type as ``text``.

    Returns
    -------
    int or None
        Offset of the first match, or None if there is no match or
        ``pattern`` is empty.

    Raises
    ------
    TypeError
        If ``text`` and ``pattern`` are not the same kind of string.
    """
    if isinstance(text, str) != isinstance(pattern, str):
        raise TypeError("text and pattern must both be str or both be bytes")
    k = len(pattern)
    if k == 0 or len(text) < k:
        return None

    codes = _codes(text)
    target = RollingHash(_codes(pattern)).hash
    window = RollingHash(codes[:k])

    if window.hash == target and text[:k] == pattern:
        return 0

    for start in range(1, len(codes) - k + 1):
        if window.slide(codes[start + k - 1]) == target and text[start:start + k] == pattern:
            return start

    return None


def _random_text(size: int, rng: np.random.Generator):
    text = "".join(rng.choice(list("acgt"), size))
    return text, text[-16:]


BENCHMARKS = [
    BenchmarkCase("rabin-karp tail match", _random_text, find_substring, (10_000, 100_000)),
]
