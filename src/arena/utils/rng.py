"""Substitutable random number sources for battle resolution.

Every roll the battle engine makes goes through a :class:`RandomSource`.
Production code uses :class:`SystemRandomSource`; tests inject a
:class:`QueuedRandomSource` preloaded with the exact rolls a scenario needs.

Examples:
    >>> rng = QueuedRandomSource([5, 5, 3, 7])
    >>> [rng.next_int(10) for _ in range(4)]
    [5, 5, 3, 7]

    >>> seeded = SystemRandomSource(seed="arena:42")
    >>> 0 <= seeded.next_int(6) <= 6
    True
"""

from __future__ import annotations

import hashlib
import random
from collections import deque
from collections.abc import Iterable
from typing import Protocol


class RandomSource(Protocol):
    """Supplier of uniformly distributed non-negative integers."""

    def next_int(self, max_inclusive: int) -> int:
        """Return an integer in ``[0, max_inclusive]``."""
        ...


def _seed_to_int(seed: str) -> int:
    """Convert a seed string to a stable 64-bit integer for random.Random().

    Args:
        seed: Seed string

    Returns:
        64-bit integer derived from SHA-256(seed)
    """
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big", signed=False)


def _check_bound(max_inclusive: int) -> None:
    if max_inclusive < 0:
        raise ValueError(f"max_inclusive must be non-negative, got {max_inclusive}")


class SystemRandomSource:
    """Random source backed by :class:`random.Random`.

    Args:
        seed: Optional seed. Strings are hashed so the same text always
            produces the same sequence; ``None`` seeds from the OS.
    """

    def __init__(self, seed: int | str | None = None) -> None:
        if isinstance(seed, str):
            seed = _seed_to_int(seed)
        self._rng = random.Random(seed)

    def next_int(self, max_inclusive: int) -> int:
        """Return a uniformly distributed integer in ``[0, max_inclusive]``.

        Raises:
            ValueError: If ``max_inclusive`` is negative
        """
        _check_bound(max_inclusive)
        return self._rng.randint(0, max_inclusive)


class QueuedRandomSource:
    """Random source that replays pre-programmed values before going random.

    Each call consumes exactly one queued value, returned as-is without
    clamping to ``max_inclusive``. Once the queue is empty, calls are
    delegated to ``fallback`` (a fresh :class:`SystemRandomSource` by default).

    Not safe to share between battles running at the same time.
    """

    def __init__(
        self, values: Iterable[int] = (), *, fallback: RandomSource | None = None
    ) -> None:
        self._values: deque[int] = deque(values)
        self._fallback = fallback or SystemRandomSource()

    @property
    def remaining(self) -> int:
        """Number of queued values not yet consumed."""

        return len(self._values)

    def set_next_values(self, values: Iterable[int]) -> None:
        """Replace the queued values."""

        self._values = deque(values)

    def next_int(self, max_inclusive: int) -> int:
        _check_bound(max_inclusive)
        if self._values:
            return self._values.popleft()
        return self._fallback.next_int(max_inclusive)
