"""
Text Generators

Two sources of text, both sized by the Size Policy:
- `str`: uniform Unicode scalar values, exactly n code points.
- `Unicode`: whole words from a fixed multi-script sample, at least n code
  points. Mixing scripts and multi-byte symbols stresses encoding boundaries in
  whatever consumes the text.
"""

from __future__ import annotations

from typing import Any

from .registry import default_registry
from .rng import DeterministicRng
from .size import small_n
from .types import Unicode
from ..constants import TEXT_SEPARATORS

SAMPLE_TEXT: str = (
    'a b c 0 $ ⇌ [ˈʏpsilɔn] \\ " ‚dsch‘ „füh“ ‡ € ⁿ ２ � 🈘\n'
    "ἀπὸ состоится ทรงนับถือขันทีเป็นที่พึ่ง Hello world Καλημέρα κόσμε コンニチハ\n"
    "مرحبا שלום 你好 cafe\u0301"
)

# Words plus separators; separators are never inserted between draws
SAMPLE_WORDS: tuple[str, ...] = tuple(SAMPLE_TEXT.split()) + TEXT_SEPARATORS


def sample_text(rng: DeterministicRng, length: int) -> str:
    """Build text from sample words until it is at least `length` code points.

    Whole words are appended, so the result may overshoot `length`.
    length=0 returns the empty string.
    """
    assert length >= 0, f"length ({length}) must be non-negative"

    parts: list[str] = []
    total = 0
    while total < length:
        word = rng.choice(SAMPLE_WORDS)
        parts.append(word)
        total += len(word)

    result = "".join(parts)

    # Postcondition
    assert len(result) >= length, "sample text shorter than requested"

    return result


@default_registry.register(str)
def _arbitrary_str(args: tuple[Any, ...], size: int, rng: DeterministicRng) -> str:
    return rng.next_str(small_n(rng, size))


@default_registry.register(Unicode)
def _arbitrary_unicode(args: tuple[Any, ...], size: int, rng: DeterministicRng) -> Unicode:
    return Unicode(sample_text(rng, small_n(rng, size)))
