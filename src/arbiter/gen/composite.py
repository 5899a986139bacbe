"""
Composite Generators

Tuples, optionals, results and wrappers. Each part is generated independently
with the caller's size and the parts are assembled in order.
"""

from __future__ import annotations

import types as _types
from typing import Any, Union

from .errors import NotGeneratableError
from .primitives import rand
from .protocol import arbitrary
from .registry import default_registry
from .rng import DeterministicRng
from .types import Box, Err, Ok, Random, Result
from ..constants import TUPLE_ARITY_MAX, TUPLE_ARITY_MIN

_NONE_TYPE = type(None)


def _require_args(tp: Any, args: tuple[Any, ...], count: int) -> None:
    if len(args) != count:
        raise NotGeneratableError(tp, f"expected {count} type argument(s), got {len(args)}")


@default_registry.register(tuple)
def _arbitrary_tuple(args: tuple[Any, ...], size: int, rng: DeterministicRng) -> tuple:
    if Ellipsis in args:
        raise NotGeneratableError(tuple, "variadic tuples have no fixed arity")
    if not TUPLE_ARITY_MIN <= len(args) <= TUPLE_ARITY_MAX:
        raise NotGeneratableError(
            tuple,
            f"arity {len(args)} outside [{TUPLE_ARITY_MIN}, {TUPLE_ARITY_MAX}]",
        )
    return tuple(arbitrary(component, size, rng) for component in args)


def _arbitrary_optional(args: tuple[Any, ...], size: int, rng: DeterministicRng) -> Any:
    # Only T | None is supported; other unions have no agreed distribution
    inner = [arg for arg in args if arg is not _NONE_TYPE]
    if len(args) != 2 or len(inner) != 1:
        raise NotGeneratableError(Union[args], "only Optional[T] unions are generatable")

    if rng.next_bool():
        return arbitrary(inner[0], size, rng)
    return None


default_registry.register(Union, _arbitrary_optional)
default_registry.register(_types.UnionType, _arbitrary_optional)


@default_registry.register(Result)
def _arbitrary_result(args: tuple[Any, ...], size: int, rng: DeterministicRng) -> Result:
    _require_args(Result, args, 2)
    ok_type, err_type = args
    if rng.next_bool():
        return Ok(arbitrary(ok_type, size, rng))
    return Err(arbitrary(err_type, size, rng))


@default_registry.register(Box)
def _arbitrary_box(args: tuple[Any, ...], size: int, rng: DeterministicRng) -> Box:
    _require_args(Box, args, 1)
    return Box(arbitrary(args[0], size, rng))


@default_registry.register(Random)
def _arbitrary_random(args: tuple[Any, ...], size: int, rng: DeterministicRng) -> Random:
    _require_args(Random, args, 1)
    return Random(rand(args[0], rng))
