"""
Shared test fixtures for the Arbiter test suite.

Provides fixtures for:
- Seeded random sources
- Settings cache isolation
- Temporary generator registrations
"""

import pytest

from arbiter import DeterministicRng, default_registry
from arbiter.core.config import get_settings


# =============================================================================
# Random Sources
# =============================================================================


@pytest.fixture
def rng() -> DeterministicRng:
    """Deterministic random source with a fixed seed."""
    return DeterministicRng(_seed=12345)


@pytest.fixture
def make_rng():
    """Factory for random sources with explicit seeds."""

    def factory(seed: int) -> DeterministicRng:
        return DeterministicRng(_seed=seed)

    return factory


# =============================================================================
# Settings
# =============================================================================


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Re-read environment settings for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Registry
# =============================================================================


@pytest.fixture
def registered():
    """Register generators for the duration of one test.

    Usage:
        def test_x(registered):
            registered(MyType, lambda args, size, rng: MyType())
    """
    tags = []

    def register(tp, fn):
        default_registry.register(tp, fn)
        tags.append(tp)

    yield register

    for tp in tags:
        default_registry.unregister(tp)
