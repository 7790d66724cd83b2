"""Tests for animation selectors."""

import pytest

from web_stories.design import RandomAnimationSelector, RoundRobinAnimationSelector, create_selector

ANIMATIONS = ["fade-in", "fly-in-bottom", "zoom-in"]


class TestRandomAnimationSelector:
    """Tests for RandomAnimationSelector."""

    def test_picks_from_list(self):
        """Every pick is from the list."""
        select = RandomAnimationSelector()
        assert all(select(ANIMATIONS) in ANIMATIONS for _ in range(50))

    def test_seed_is_reproducible(self):
        """Same seed, same sequence."""
        first = RandomAnimationSelector(seed=7)
        second = RandomAnimationSelector(seed=7)
        assert [first(ANIMATIONS) for _ in range(20)] == [second(ANIMATIONS) for _ in range(20)]

    def test_single_entry(self):
        """A one-item list always gives that item."""
        assert RandomAnimationSelector()(["pulse"]) == "pulse"

    def test_empty_list(self):
        """An empty list is an error."""
        with pytest.raises(ValueError):
            RandomAnimationSelector()([])


class TestRoundRobinAnimationSelector:
    """Tests for RoundRobinAnimationSelector."""

    def test_cycles_in_order(self):
        """Picks cycle through the list."""
        select = RoundRobinAnimationSelector()
        assert [select(ANIMATIONS) for _ in range(4)] == ["fade-in", "fly-in-bottom", "zoom-in", "fade-in"]

    def test_start_offset(self):
        """The start offset shifts the cycle."""
        assert RoundRobinAnimationSelector(start=2)(ANIMATIONS) == "zoom-in"

    def test_empty_list(self):
        """An empty list is an error."""
        with pytest.raises(ValueError):
            RoundRobinAnimationSelector()([])


class TestCreateSelector:
    """Tests for create_selector."""

    def test_random(self):
        """'random' creates a random selector."""
        assert isinstance(create_selector("random", 1), RandomAnimationSelector)

    def test_round_robin(self):
        """'round_robin' creates a round-robin selector offset by the seed."""
        select = create_selector("round_robin", 1)

        assert isinstance(select, RoundRobinAnimationSelector)
        assert select(ANIMATIONS) == "fly-in-bottom"

    def test_unknown(self):
        """Unknown strategies are rejected."""
        with pytest.raises(ValueError, match="Unknown animation strategy"):
            create_selector("shuffle")
