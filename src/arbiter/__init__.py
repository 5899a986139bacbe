"""
Arbiter - Arbitrary Values for Property-Based Testing

Give it a type and a size, get back a plausible random value of that type:
- Primitives draw uniformly from the random source
- Containers, tuples and wrappers compose the generators of their parts
- Collection lengths come from one Size Policy, bounded by 16 * size
- User types opt in by composing existing generators (@derive, or an
  `arbitrary(cls, size, rng)` classmethod)

Usage:
    from arbiter import arbitrary, DeterministicRng

    rng = DeterministicRng(_seed=7)
    arbitrary(dict[int, list[str]], 5, rng)
"""

from arbiter.gen import *  # noqa: F401,F403
from arbiter.gen import __all__ as _gen_all

__version__ = "0.1.0"
__all__ = ["__version__", *_gen_all]
