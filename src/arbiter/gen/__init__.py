"""
Arbiter Gen - Size-Scaled Arbitrary Values

Compositional random value generation for property-based testing.

Usage:
    from arbiter.gen import arbitrary, DeterministicRng, NonEmptyList

    rng = DeterministicRng(_seed=12345)
    arbitrary(list[tuple[int, bool]], 10, rng)
    arbitrary(NonEmptyList[str], 3, rng)

Run with seed:
    ARBITER_SEED=12345 pytest tests/
"""

from .errors import ArbitraryError, NotGeneratableError
from .rng import DeterministicRng
from .size import small_n
from .types import (
    I8,
    U8,
    UInt,
    Char,
    Random,
    Unicode,
    SmallN,
    NonEmptyList,
    Box,
    Result,
    Ok,
    Err,
)
from .registry import GeneratorRegistry, default_registry
from .protocol import Arbitrary, Rand, arbitrary, derive

# Built-in generators register themselves on import
from .primitives import rand
from . import composite  # noqa: F401
from .sequences import arbitrary_iter
from .text import SAMPLE_WORDS, sample_text

from .config import GenConfig
from .session import GenSession, create_session

__all__ = [
    # Errors
    "ArbitraryError",
    "NotGeneratableError",
    # Random source
    "DeterministicRng",
    # Size policy
    "small_n",
    # Types
    "I8",
    "U8",
    "UInt",
    "Char",
    "Random",
    "Unicode",
    "SmallN",
    "NonEmptyList",
    "Box",
    "Result",
    "Ok",
    "Err",
    # Protocol
    "GeneratorRegistry",
    "default_registry",
    "Arbitrary",
    "Rand",
    "arbitrary",
    "derive",
    # Generators
    "rand",
    "arbitrary_iter",
    "SAMPLE_WORDS",
    "sample_text",
    # Session
    "GenConfig",
    "GenSession",
    "create_session",
]
