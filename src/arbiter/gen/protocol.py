"""
Generation Protocol

One capability: produce an arbitrary instance of a type, scaled by size.

    from arbiter import arbitrary, DeterministicRng

    rng = DeterministicRng(_seed=42)
    arbitrary(dict[int, list[bool]], 10, rng)

A type takes part in one of three ways:
- it is registered in the default registry (all built-in types are),
- its class defines `arbitrary(cls, size, rng)` (the Arbitrary protocol),
- it is a dataclass or NamedTuple decorated with @derive.

Size is passed unchanged to every sub-value. Composite generators bound how
many sub-values they make, they never shrink the size they pass down.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Protocol, TypeVar, get_type_hints, runtime_checkable

from .errors import NotGeneratableError
from .registry import default_registry
from .rng import DeterministicRng

C = TypeVar("C", bound=type)


@runtime_checkable
class Arbitrary(Protocol):
    """Protocol for user types that generate themselves.

    Compose existing generators for the fields:

        class Point:
            @classmethod
            def arbitrary(cls, size, rng):
                return cls(arbitrary(int, size, rng), arbitrary(int, size, rng))
    """

    @classmethod
    def arbitrary(cls, size: int, rng: DeterministicRng) -> Any:
        ...


@runtime_checkable
class Rand(Protocol):
    """Protocol for user types with a size-free uniform draw.

    Such types can be generated through the Random[T] reuse wrapper.
    """

    @classmethod
    def rand(cls, rng: DeterministicRng) -> Any:
        ...


def arbitrary(tp: Any, size: int, rng: DeterministicRng) -> Any:
    """Create an arbitrary value of type expression tp.

    Args:
        tp: A class, NewType marker, None, or generic alias (list[int], ...).
        size: Non-negative scale factor; 0 biases toward minimal/empty values.
        rng: Random source. All entropy comes from here.

    Raises:
        NotGeneratableError: No generator exists for tp.
    """
    return default_registry.generate(tp, size, rng)


def derive(cls: C) -> C:
    """Register a dataclass or NamedTuple generated field by field.

    Each field is generated from its annotation with the same size. Annotations
    are resolved on first use, so self-referencing types work:

        @derive
        @dataclass
        class Node:
            label: str
            next: Optional["Node"]
    """
    if dataclasses.is_dataclass(cls):
        names = [f.name for f in dataclasses.fields(cls) if f.init]
    elif isinstance(cls, type) and issubclass(cls, tuple) and hasattr(cls, "_fields"):
        names = list(cls._fields)
    else:
        raise NotGeneratableError(cls, "derive needs a dataclass or NamedTuple")

    hints: dict[str, Any] = {}

    def generator(args: tuple[Any, ...], size: int, rng: DeterministicRng) -> Any:
        if not hints:
            # The class itself is in scope even when defined inside a function
            try:
                hints.update(get_type_hints(cls, localns={cls.__name__: cls}))
            except NameError as exc:
                raise NotGeneratableError(cls, f"unresolvable annotation: {exc}") from exc
        return cls(**{name: arbitrary(hints[name], size, rng) for name in names})

    default_registry.register(cls, generator)
    return cls
