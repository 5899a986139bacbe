"""
Generation Errors

TigerStyle: Explicit error types.

Generation itself always succeeds given a working random source, so the only
error raised here is for asking about a type nobody knows how to generate.
Failures of the random source propagate untouched.
"""


class ArbitraryError(Exception):
    """Base error for the generation layer."""

    pass


class NotGeneratableError(ArbitraryError, TypeError):
    """No generator exists for the requested type expression.

    Generators only see their type tag (tuple, not tuple[int, ...]), so they
    raise with exact=False and the registry re-raises the error with the full
    expression being generated.
    """

    def __init__(
        self,
        tp: object,
        reason: str = "no generator registered",
        *,
        exact: bool = False,
    ):
        self.tp = tp
        self.reason = reason
        self.exact = exact
        super().__init__(f"cannot generate {tp!r}: {reason}")
