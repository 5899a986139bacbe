"""
GenSession - Seeded Generation Environment

TigerStyle: Single seed controls all randomness.

A session owns one random stream so callers don't have to thread an rng
around by hand:

    session = create_session(seed=12345)
    xs = session.draw(list[int])
    m = session.draw(dict[str, bool], size=5)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from .config import GenConfig
from .protocol import arbitrary
from .rng import DeterministicRng

logger = logging.getLogger(__name__)


@dataclass
class GenSession:
    """Generation environment bound to one seed.

    TigerStyle:
    - The config seed seeds the only random stream
    - Forks get independent streams derived from it
    - Draws are counted for debugging
    """

    config: GenConfig
    _rng: DeterministicRng = field(init=False, repr=False)
    _draws_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self._rng = DeterministicRng(_seed=self.config.seed)

    @property
    def rng(self) -> DeterministicRng:
        """The session's random source."""
        return self._rng

    def draw(self, tp: Any, size: Optional[int] = None) -> Any:
        """Generate an arbitrary value of tp.

        Args:
            tp: Type expression to generate.
            size: Scale factor; defaults to the config size.
        """
        if size is None:
            size = self.config.size
        self._draws_count += 1
        return arbitrary(tp, size, self._rng)

    def fork(self) -> GenSession:
        """Create a session with an independent stream.

        TigerStyle: Fork creates a new stream that won't affect this one.
        """
        child_seed = self._rng.fork().seed
        logger.debug(f"Forked session seed={self.config.seed} -> {child_seed}")
        return GenSession(GenConfig(seed=child_seed, size=self.config.size))

    def stats(self) -> dict[str, int]:
        """Get session statistics."""
        return {
            "seed": self.config.seed,
            "size": self.config.size,
            "draws_count": self._draws_count,
            "forks_count": self._rng.fork_count(),
        }


def create_session(seed: Optional[int] = None, size: Optional[int] = None) -> GenSession:
    """Create a new session with optional explicit seed and size.

    TigerStyle: Factory function for common case.

    Usage:
        session = create_session()  # Seed from ARBITER_SEED or random
        session = create_session(12345)  # Explicit seed
    """
    if seed is not None:
        config = GenConfig.with_seed(seed, size)
    else:
        config = GenConfig.from_env_or_random()
        if size is not None:
            config = GenConfig(seed=config.seed, size=size)
    return GenSession(config)
