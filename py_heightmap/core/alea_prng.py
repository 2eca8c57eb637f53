"""
Python implementation of the Alea PRNG.

Based on Johannes Baagøe's Alea algorithm. Each heightmap generator owns
its own instance so that two generators never share random state, and the
same seed always yields the same sequence.
"""

from typing import Optional, Protocol


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class RandomSource(Protocol):
    """Seedable source of uniform values in [0, 1)."""

    def seed(self, value) -> None:
        ...

    def random(self) -> float:
        ...


class AleaPRNG:
    """
    Alea PRNG with an explicit, repeatable seed.

    Calling ``seed()`` again with the same value rewinds the generator to the
    start of the same sequence.
    """

    def __init__(self, seed: Optional[object] = None):
        """Initialize with seed string or number."""
        self.call_count = 0
        self.s0 = self.s1 = self.s2 = 0.0
        self.c = 1
        self.seed(0 if seed is None else seed)

    @staticmethod
    def _masher():
        mash_n = 0xEFC8249D  # 4022871197

        def mash(data):
            nonlocal mash_n
            for char in str(data):
                mash_n = mash_n + ord(char)
                h = 0.02519603282416938 * mash_n
                mash_n = _uint32(h)
                h -= mash_n
                h *= mash_n
                mash_n = _uint32(h)
                h -= mash_n
                mash_n += h * 0x100000000  # 2^32
            return _uint32(mash_n) * 2.3283064365386963e-10  # 2^-32

        return mash

    def seed(self, value) -> None:
        """Reset the generator state from a seed value or iterable of values."""
        if hasattr(value, "__iter__") and not isinstance(value, str):
            args = list(value)
        else:
            args = [value]

        mash = self._masher()
        s0 = mash(" ")
        s1 = mash(" ")
        s2 = mash(" ")

        for arg in args:
            s0 -= mash(arg)
            if s0 < 0:
                s0 += 1
            s1 -= mash(arg)
            if s1 < 0:
                s1 += 1
            s2 -= mash(arg)
            if s2 < 0:
                s2 += 1

        self.s0, self.s1, self.s2 = s0, s1, s2
        self.c = 1
        self.call_count = 0

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10  # 2^-32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2
