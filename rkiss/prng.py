# RKISS 64-bit PRNG used to derive hash keys (Zobrist tables and the like).
# KISS family generator by Heinz van Saanen after public domain code by Bob Jenkins.
# Not suitable for anything that must resist prediction.
import logging
from typing import List, Tuple

from .bits import mix, narrow, width_of

logger = logging.getLogger(__name__)

DEFAULT_SEED = 73
INITIAL_A = 0xF1EA5EED
INITIAL_BCD = 0xD4E12C77


class RKISS:
    """Deterministic generator over four 64-bit words.

    An instance is a single-owner value: threads that need random keys
    should each construct their own generator rather than share one.
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"seed must be an int, got {type(seed).__name__}")
        self._seed = seed
        self._s = (INITIAL_A, INITIAL_BCD, INITIAL_BCD, INITIAL_BCD)
        # Scramble a few rounds
        for _ in range(seed):
            self._s = mix(*self._s)
        logger.debug("RKISS seeded with %d", seed)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> Tuple[int, int, int, int]:
        return self._s

    def next_u64(self) -> int:
        self._s = mix(*self._s)
        return self._s[3]

    rand64 = next_u64

    def next(self, kind: str = "u64") -> int:
        """Draw one word and narrow it to ``kind`` (``u32``, ``i8``, ...)."""
        width_of(kind)  # reject before consuming a draw
        return narrow(self.next_u64(), kind)

    def next_u8(self) -> int:
        return self.next("u8")

    def next_u16(self) -> int:
        return self.next("u16")

    def next_u32(self) -> int:
        return self.next("u32")

    def next_i8(self) -> int:
        return self.next("i8")

    def next_i16(self) -> int:
        return self.next("i16")

    def next_i32(self) -> int:
        return self.next("i32")

    def next_i64(self) -> int:
        return self.next("i64")

    def random(self) -> float:
        # top 53 bits fill a double's mantissa
        return (self.next_u64() >> 11) / 2**53

    def randint(self, a: int, b: int) -> int:
        # inclusive a..b
        if a > b:
            raise ValueError(f"empty range: {a}..{b}")
        span = b - a + 1
        if span > 2**53:
            raise ValueError("range wider than 53 bits")
        return a + int(self.random() * span)

    def take(self, n: int) -> List[int]:
        if n < 0:
            raise ValueError("n must be non-negative")
        return [self.next_u64() for _ in range(n)]

    def __repr__(self) -> str:
        return f"RKISS(seed={self._seed})"
