"""
DeterministicRng - Random Source for Generators

TigerStyle: All randomness is seeded and reproducible.
Based on Python's random.Random (Mersenne Twister) for simplicity.

This is the only entropy every generator consumes. It is passed explicitly
into each generation call, never looked up from global state.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Sequence

from ..constants import (
    CHAR_SCALAR_COUNT,
    CHAR_SURROGATE_COUNT,
    CHAR_SURROGATE_MIN,
    EXP_RATE,
    SEED_VALUE_MAX,
    SEED_VALUE_MIN,
)


@dataclass
class DeterministicRng:
    """Deterministic random number generator.

    TigerStyle:
    - All operations are deterministic given the same seed
    - Can fork into independent streams
    - Never use global random state

    Not safe to share between threads; fork one stream per thread instead.
    """

    _seed: int
    _rng: random.Random = field(init=False, repr=False)
    _fork_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Initialize the RNG with the seed.

        TigerStyle: Assert preconditions.
        """
        assert SEED_VALUE_MIN <= self._seed <= SEED_VALUE_MAX, \
            f"seed ({self._seed}) must be in [{SEED_VALUE_MIN}, {SEED_VALUE_MAX}]"
        self._rng = random.Random(self._seed)

    @property
    def seed(self) -> int:
        """Get the original seed."""
        return self._seed

    def next_int(self, min_val: int, max_val: int) -> int:
        """Generate a random integer in [min_val, max_val].

        TigerStyle: Explicit bounds, inclusive range.
        """
        assert min_val <= max_val, f"min_val ({min_val}) must be <= max_val ({max_val})"
        return self._rng.randint(min_val, max_val)

    def next_float(self) -> float:
        """Generate a random float in [0.0, 1.0)."""
        return self._rng.random()

    def next_bool(self, probability: float = 0.5) -> bool:
        """Generate a random boolean with given probability of True.

        Args:
            probability: Probability of returning True, in [0.0, 1.0].
        """
        assert 0.0 <= probability <= 1.0, f"probability ({probability}) must be in [0, 1]"
        return self._rng.random() < probability

    def next_exp(self) -> float:
        """Sample the exponential distribution with rate 1.

        Mass concentrates near 0 with a long tail; the result is never negative.
        """
        return self._rng.expovariate(EXP_RATE)

    def next_bytes(self, length: int) -> bytes:
        """Generate random bytes.

        Args:
            length: Number of bytes to generate.
        """
        assert length >= 0, f"length ({length}) must be non-negative"
        return self._rng.randbytes(length)

    def next_char(self) -> str:
        """Generate one Unicode scalar value, uniform over all of them.

        Surrogates (U+D800..U+DFFF) are skipped by shifting draws past them.
        """
        code_point = self._rng.randrange(CHAR_SCALAR_COUNT)
        if code_point >= CHAR_SURROGATE_MIN:
            code_point += CHAR_SURROGATE_COUNT
        return chr(code_point)

    def next_str(self, length: int) -> str:
        """Generate a string of exactly `length` code points.

        Args:
            length: Number of code points. Must be non-negative.
        """
        assert length >= 0, f"length ({length}) must be non-negative"
        return "".join(self.next_char() for _ in range(length))

    def choice(self, seq: Sequence[Any]) -> Any:
        """Choose a random element from a non-empty sequence.

        TigerStyle: Assert non-empty.
        """
        assert len(seq) > 0, "sequence must be non-empty"
        return self._rng.choice(seq)

    def fork(self) -> DeterministicRng:
        """Create an independent RNG stream.

        TigerStyle: Fork creates a new stream that won't affect this one.
        Useful for giving each thread or component its own randomness.
        """
        self._fork_count += 1
        # Derive new seed from current state
        new_seed = self._rng.randint(SEED_VALUE_MIN, SEED_VALUE_MAX)
        return DeterministicRng(_seed=new_seed)

    def fork_count(self) -> int:
        """Get the number of times this RNG has been forked."""
        return self._fork_count
