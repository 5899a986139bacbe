"""
Marker and Wrapper Types

Python has a single `int`, `str` and no ownership, so the scalar widths and
wrappers that generators dispatch on are spelled out here.

Scalar markers are typing.NewType: values are plain ints/strs, the marker only
selects a generator (list[I8] yields ints in [-128, 127]).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, NewType, TypeVar

T = TypeVar("T")
E = TypeVar("E")

# =============================================================================
# Scalar Markers
# =============================================================================

I8 = NewType("I8", int)
U8 = NewType("U8", int)
UInt = NewType("UInt", int)  # Native-width unsigned; plain `int` is native signed
Char = NewType("Char", str)  # One Unicode scalar value


# =============================================================================
# Reuse Wrappers
# =============================================================================


@dataclass(frozen=True)
class Random(Generic[T]):
    """A value drawn straight from the random source, ignoring size.

    Random[T] reuses the general random-value capability for T (see
    primitives.rand) instead of a size-aware generator.
    """

    value: T


@dataclass(frozen=True)
class Unicode:
    """Text assembled from words of a fixed multi-script sample corpus."""

    value: str

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)


@dataclass(frozen=True)
class SmallN:
    """A small count >= 0 drawn by the Size Policy."""

    value: int

    def __post_init__(self) -> None:
        assert self.value >= 0, f"SmallN ({self.value}) must be non-negative"

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


# =============================================================================
# Containers
# =============================================================================


@dataclass(frozen=True)
class NonEmptyList(Generic[T]):
    """Like list[T] but never empty.

    TigerStyle: The invariant is asserted on construction.
    """

    items: list[T]

    def __post_init__(self) -> None:
        assert len(self.items) >= 1, "NonEmptyList must hold at least one item"

    @property
    def head(self) -> T:
        return self.items[0]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]


@dataclass(frozen=True)
class Box(Generic[T]):
    """Owned wrapper around a single value."""

    value: T


# =============================================================================
# Result
# =============================================================================


class Result(Generic[T, E]):
    """Either a success payload (Ok) or a failure payload (Err).

    Use Result[T, E] as the type expression; instances are always Ok or Err.
    """

    __slots__ = ()

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        return isinstance(self, Err)


@dataclass(frozen=True)
class Ok(Result[T, E]):
    value: T


@dataclass(frozen=True)
class Err(Result[T, E]):
    error: E
