"""
GeneratorRegistry - Type-Tag Registry

TigerStyle: Explicit registration, no auto-discovery.

A generator is a function (args, size, rng) -> value. It is registered under a
type tag: a class, a NewType marker, None, or the origin of a generic alias
(list for list[int]). At generation time the alias arguments are handed to the
generator as `args`, so one registration serves every parameterisation.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, get_args, get_origin

from .errors import NotGeneratableError
from .rng import DeterministicRng

logger = logging.getLogger(__name__)

GeneratorFn = Callable[[tuple[Any, ...], int, DeterministicRng], Any]


class GeneratorRegistry:
    """Maps type tags to generator functions."""

    def __init__(self) -> None:
        self._generators: dict[Any, GeneratorFn] = {}

    def register(self, tp: Any, fn: Optional[GeneratorFn] = None):
        """Register a generator for a type tag.

        Usable directly or as a decorator:

            @default_registry.register(Point)
            def _arbitrary_point(args, size, rng):
                return Point(arbitrary(int, size, rng), arbitrary(int, size, rng))

        Re-registering a tag replaces the previous generator.
        """

        def decorator(generator: GeneratorFn) -> GeneratorFn:
            assert callable(generator), "generator must be callable"
            if tp in self._generators:
                logger.debug(f"Replacing generator for {tp!r}")
            self._generators[tp] = generator
            return generator

        if fn is not None:
            return decorator(fn)
        return decorator

    def unregister(self, tp: Any) -> bool:
        """Remove the generator for a type tag. Returns True if one existed."""
        removed = self._generators.pop(tp, None) is not None
        if removed:
            logger.debug(f"Unregistered generator for {tp!r}")
        return removed

    def is_registered(self, tp: Any) -> bool:
        """Check if a type tag has a generator of its own."""
        return tp in self._generators

    def resolve(self, tp: Any) -> tuple[GeneratorFn, tuple[Any, ...]]:
        """Find the generator and its arguments for a type expression.

        Resolution order:
        1. The registered generator for the alias origin (or tp itself).
        2. A classmethod `arbitrary(size, rng)` on the class (the Arbitrary
           protocol).

        Raises:
            NotGeneratableError: Nothing knows how to generate tp.
        """
        origin = get_origin(tp)
        tag = origin if origin is not None else tp
        args = get_args(tp)

        try:
            generator = self._generators.get(tag)
        except TypeError:
            # Unhashable type expression
            raise NotGeneratableError(tp, "not a type expression", exact=True) from None

        if generator is not None:
            return generator, args

        if isinstance(tag, type) and callable(getattr(tag, "arbitrary", None)):
            return _protocol_generator(tag), args

        raise NotGeneratableError(tp, exact=True)

    def generate(self, tp: Any, size: int, rng: DeterministicRng) -> Any:
        """Generate an arbitrary value of type expression tp."""
        assert size >= 0, f"size ({size}) must be non-negative"
        generator, args = self.resolve(tp)
        try:
            return generator(args, size, rng)
        except NotGeneratableError as exc:
            if exc.exact:
                raise
            # Name the whole expression, not just the tag the generator saw
            raise NotGeneratableError(tp, exc.reason, exact=True) from exc

    def tags(self) -> list[Any]:
        """Get all registered type tags."""
        return list(self._generators)


def _protocol_generator(cls: type) -> GeneratorFn:
    def generator(args: tuple[Any, ...], size: int, rng: DeterministicRng) -> Any:
        return cls.arbitrary(size, rng)

    return generator


# Shared registry; the built-in generator modules register into it on import
default_registry = GeneratorRegistry()
