"""
Primitive Generators

Fixed-size scalars ignore size and take one uniform draw from the random
source. The same draws back the Random[T] reuse wrapper through `rand`.
"""

from __future__ import annotations

from typing import Any, Callable

from .errors import NotGeneratableError
from .protocol import Rand
from .registry import default_registry
from .rng import DeterministicRng
from .types import I8, U8, Char, UInt
from ..constants import (
    INT8_VALUE_MAX,
    INT8_VALUE_MIN,
    INT_VALUE_MAX,
    INT_VALUE_MIN,
    UINT8_VALUE_MAX,
    UINT_VALUE_MAX,
)

_UNIFORM_DRAWS: dict[Any, Callable[[DeterministicRng], Any]] = {
    bool: lambda rng: rng.next_bool(),
    I8: lambda rng: rng.next_int(INT8_VALUE_MIN, INT8_VALUE_MAX),
    U8: lambda rng: rng.next_int(0, UINT8_VALUE_MAX),
    int: lambda rng: rng.next_int(INT_VALUE_MIN, INT_VALUE_MAX),
    UInt: lambda rng: rng.next_int(0, UINT_VALUE_MAX),
    float: lambda rng: rng.next_float(),
    Char: lambda rng: rng.next_char(),
    None: lambda rng: None,
    type(None): lambda rng: None,
}


def rand(tp: Any, rng: DeterministicRng) -> Any:
    """Draw a uniform value of tp straight from the random source.

    Covers the primitive scalars and any class with a `rand(cls, rng)`
    classmethod (the Rand protocol).

    Raises:
        NotGeneratableError: tp has no uniform draw.
    """
    draw = _UNIFORM_DRAWS.get(tp)
    if draw is not None:
        return draw(rng)
    if isinstance(tp, type) and issubclass(tp, Rand):
        return tp.rand(rng)
    raise NotGeneratableError(tp, "no uniform draw for this type")


def _primitive(tp: Any) -> None:
    def generator(args: tuple[Any, ...], size: int, rng: DeterministicRng) -> Any:
        return rand(tp, rng)

    default_registry.register(tp, generator)


for _tp in _UNIFORM_DRAWS:
    _primitive(_tp)
