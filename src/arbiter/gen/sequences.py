"""
Sequence and Mapping Generators

Variable-length containers draw their element count from the Size Policy and
generate every element with the caller's size (not size / count).
"""

from __future__ import annotations

import types as _types
from typing import Any, Iterator, Union, get_args, get_origin

from .errors import NotGeneratableError
from .protocol import arbitrary
from .registry import default_registry
from .rng import DeterministicRng
from .size import small_n
from .types import NonEmptyList, SmallN


def arbitrary_iter(tp: Any, count: int, size: int, rng: DeterministicRng) -> Iterator[Any]:
    """Yield `count` independently generated values of tp.

    Args:
        tp: Element type expression.
        count: Number of values to yield. Must be non-negative.
        size: Size passed to every element.
        rng: Random source.
    """
    assert count >= 0, f"count ({count}) must be non-negative"
    for _ in range(count):
        yield arbitrary(tp, size, rng)


def _element_type(tp: Any, args: tuple[Any, ...]) -> Any:
    if len(args) != 1:
        raise NotGeneratableError(tp, "expected one element type argument")
    return args[0]


def _require_hashable(tp: Any, element: Any, what: str) -> None:
    """Reject element types whose values can never be dict keys or set members.

    Checked before the count is drawn, so the outcome never depends on the seed.
    """
    origin = get_origin(element)
    if origin is Union or origin is _types.UnionType:
        for arg in get_args(element):
            _require_hashable(tp, arg, what)
        return

    tag = origin if origin is not None else element
    if isinstance(tag, type) and tag.__hash__ is None:
        raise NotGeneratableError(tp, f"{what} must be hashable, {element!r} is not")


@default_registry.register(list)
def _arbitrary_list(args: tuple[Any, ...], size: int, rng: DeterministicRng) -> list:
    element = _element_type(list, args)
    return list(arbitrary_iter(element, small_n(rng, size), size, rng))


@default_registry.register(NonEmptyList)
def _arbitrary_non_empty_list(
    args: tuple[Any, ...], size: int, rng: DeterministicRng
) -> NonEmptyList:
    element = _element_type(NonEmptyList, args)
    count = 1 + small_n(rng, size)
    return NonEmptyList(list(arbitrary_iter(element, count, size, rng)))


@default_registry.register(dict)
def _arbitrary_dict(args: tuple[Any, ...], size: int, rng: DeterministicRng) -> dict:
    if len(args) != 2:
        raise NotGeneratableError(dict, "expected key and value type arguments")
    key_type, value_type = args
    _require_hashable(dict, key_type, "keys")

    result: dict[Any, Any] = {}
    for _ in range(small_n(rng, size)):
        # Later duplicate keys overwrite earlier values
        key = arbitrary(key_type, size, rng)
        result[key] = arbitrary(value_type, size, rng)
    return result


@default_registry.register(set)
def _arbitrary_set(args: tuple[Any, ...], size: int, rng: DeterministicRng) -> set:
    element = _element_type(set, args)
    _require_hashable(set, element, "elements")
    return set(arbitrary_iter(element, small_n(rng, size), size, rng))


@default_registry.register(frozenset)
def _arbitrary_frozenset(args: tuple[Any, ...], size: int, rng: DeterministicRng) -> frozenset:
    element = _element_type(frozenset, args)
    _require_hashable(frozenset, element, "elements")
    return frozenset(arbitrary_iter(element, small_n(rng, size), size, rng))


@default_registry.register(bytes)
def _arbitrary_bytes(args: tuple[Any, ...], size: int, rng: DeterministicRng) -> bytes:
    return rng.next_bytes(small_n(rng, size))


@default_registry.register(SmallN)
def _arbitrary_small_n(args: tuple[Any, ...], size: int, rng: DeterministicRng) -> SmallN:
    return SmallN(small_n(rng, size))
