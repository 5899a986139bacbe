"""
Size Policy - Bounded Counts

Every variable-length generator (lists, mappings, strings, ...) asks this
module how many elements to produce. Counts follow an exponential draw scaled
by size, so most collections are small and a few are large, and are clamped
to SIZE_COUNT_FACTOR * size so one call never does more than linear work.
"""

from __future__ import annotations

from .rng import DeterministicRng
from ..constants import SIZE_COUNT_FACTOR


def small_n(rng: DeterministicRng, size: int) -> int:
    """Draw a bounded count in [0, SIZE_COUNT_FACTOR * size].

    Args:
        rng: Random source.
        size: Non-negative scale factor. size=0 always yields 0.

    Returns:
        The count. Draws are independent across calls.
    """
    assert size >= 0, f"size ({size}) must be non-negative"

    n = int(rng.next_exp() * float(size))
    n = min(n, SIZE_COUNT_FACTOR * size)

    # Postcondition
    assert 0 <= n <= SIZE_COUNT_FACTOR * size, "count out of bounds"

    return n
