"""
GenConfig - Generation Configuration

TigerStyle: Explicit configuration, seed from environment for reproducibility.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from ..constants import SEED_VALUE_MAX, SEED_VALUE_MIN, SIZE_DEFAULT
from ..core.config import get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenConfig:
    """Configuration for a generation session.

    TigerStyle: All configuration is explicit. Seeds are always logged.
    """

    # Seed for deterministic randomness
    seed: int

    # Size used when a draw does not name one
    size: int = SIZE_DEFAULT

    @classmethod
    def from_env_or_random(cls) -> GenConfig:
        """Create config from ARBITER_SEED / ARBITER_SIZE or a random seed.

        TigerStyle: Always log the seed for reproducibility.
        Replay any run by setting ARBITER_SEED=<seed>.
        """
        settings = get_settings()

        if settings.seed is not None:
            seed = settings.seed
            logger.info(f"Using seed from environment: {seed}")
        else:
            seed = random.randint(SEED_VALUE_MIN, SEED_VALUE_MAX)
            logger.info(f"Generated random seed (replay with ARBITER_SEED={seed})")

        return cls(seed=seed, size=settings.size)

    @classmethod
    def with_seed(cls, seed: int, size: Optional[int] = None) -> GenConfig:
        """Create config with explicit seed.

        Args:
            seed: The deterministic seed to use.
            size: Default size; falls back to SIZE_DEFAULT.
        """
        assert seed >= SEED_VALUE_MIN, "seed must be non-negative"
        return cls(seed=seed, size=SIZE_DEFAULT if size is None else size)

    def __post_init__(self) -> None:
        """Validate configuration.

        TigerStyle: Assert preconditions.
        """
        assert SEED_VALUE_MIN <= self.seed <= SEED_VALUE_MAX, \
            f"seed ({self.seed}) must be in [{SEED_VALUE_MIN}, {SEED_VALUE_MAX}]"
        assert self.size >= 0, "size must be non-negative"
