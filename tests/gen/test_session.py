"""
Session Tests
"""

from arbiter import GenConfig, GenSession, create_session


class TestGenSession:
    """Tests for GenSession."""

    def test_same_seed_same_draws(self):
        """Test two sessions with one seed draw the same values."""
        s1 = create_session(seed=2024)
        s2 = create_session(seed=2024)

        for _ in range(20):
            assert s1.draw(list[int]) == s2.draw(list[int])

    def test_default_size_from_config(self):
        """Test draws use the configured size by default."""
        session = GenSession(GenConfig(seed=1, size=0))

        assert session.draw(list[int]) == []
        assert session.draw(str) == ""

    def test_explicit_size_overrides_config(self):
        """Test a per-draw size wins over the config."""
        session = GenSession(GenConfig(seed=1, size=50))
        assert session.draw(dict[int, int], size=0) == {}

    def test_fork_is_independent(self):
        """Test a fork keeps the size but draws its own stream."""
        session = create_session(seed=7)
        child = session.fork()

        assert child.config.seed != session.config.seed
        assert child.config.size == session.config.size
        assert [child.draw(int) for _ in range(5)] != [session.draw(int) for _ in range(5)]

    def test_stats(self):
        """Test stats count draws and forks."""
        session = create_session(seed=3, size=2)
        session.draw(int)
        session.draw(bool)
        session.fork()

        stats = session.stats()

        assert stats["seed"] == 3
        assert stats["size"] == 2
        assert stats["draws_count"] == 2
        assert stats["forks_count"] == 1

    def test_create_session_from_env(self, monkeypatch):
        """Test create_session reads ARBITER_SEED."""
        monkeypatch.setenv("ARBITER_SEED", "11")

        session = create_session(size=4)

        assert session.config.seed == 11
        assert session.config.size == 4
        assert session.rng.seed == 11
