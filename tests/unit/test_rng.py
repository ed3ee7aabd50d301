"""Tests for the substitutable random sources.

Tests cover:
- Queue consumption order and fallback once exhausted
- Seeded determinism of the system source
- Bound validation
- Property-based range checks
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arena.utils.rng import QueuedRandomSource, SystemRandomSource


class TestQueuedRandomSource:
    """Tests for the deterministic, queue-backed source."""

    def test_values_consumed_in_order(self):
        rng = QueuedRandomSource([5, 5, 3, 7])
        assert [rng.next_int(10) for _ in range(4)] == [5, 5, 3, 7]
        assert rng.remaining == 0

    def test_queued_values_are_not_clamped(self):
        """Queued values are returned verbatim even above the bound."""
        rng = QueuedRandomSource([9])
        assert rng.next_int(2) == 9

    def test_falls_back_when_exhausted(self):
        fallback = QueuedRandomSource([4])
        rng = QueuedRandomSource([1], fallback=fallback)
        assert rng.next_int(6) == 1
        assert rng.next_int(6) == 4
        assert fallback.remaining == 0

    def test_default_fallback_stays_in_range(self):
        rng = QueuedRandomSource()
        for _ in range(50):
            assert 0 <= rng.next_int(3) <= 3

    def test_set_next_values_replaces_queue(self):
        rng = QueuedRandomSource([1, 2, 3])
        rng.next_int(5)
        rng.set_next_values([8, 9])
        assert rng.remaining == 2
        assert rng.next_int(10) == 8
        assert rng.next_int(10) == 9

    def test_negative_bound_raises_error(self):
        rng = QueuedRandomSource([1])
        with pytest.raises(ValueError, match="max_inclusive must be non-negative"):
            rng.next_int(-1)
        # The rejected call must not consume a value.
        assert rng.remaining == 1


class TestSystemRandomSource:
    """Tests for the random.Random-backed source."""

    def test_same_string_seed_same_sequence(self):
        first = SystemRandomSource(seed="arena:1")
        second = SystemRandomSource(seed="arena:1")
        assert [first.next_int(100) for _ in range(20)] == [
            second.next_int(100) for _ in range(20)
        ]

    def test_different_seeds_diverge(self):
        first = SystemRandomSource(seed="arena:1")
        second = SystemRandomSource(seed="arena:2")
        assert [first.next_int(1000) for _ in range(20)] != [
            second.next_int(1000) for _ in range(20)
        ]

    def test_zero_bound_always_zero(self):
        rng = SystemRandomSource(seed=3)
        assert {rng.next_int(0) for _ in range(20)} == {0}

    def test_upper_bound_is_reachable(self):
        rng = SystemRandomSource(seed=11)
        assert {rng.next_int(2) for _ in range(200)} == {0, 1, 2}

    def test_negative_bound_raises_error(self):
        with pytest.raises(ValueError, match="max_inclusive must be non-negative"):
            SystemRandomSource().next_int(-5)

    @given(
        seed=st.integers(min_value=0, max_value=2**32),
        bound=st.integers(min_value=0, max_value=1000),
    )
    def test_next_int_properties(self, seed, bound):
        value = SystemRandomSource(seed=seed).next_int(bound)
        assert isinstance(value, int)
        assert 0 <= value <= bound
