"""Utility helpers for the Arena service."""

from arena.utils.rng import QueuedRandomSource, RandomSource, SystemRandomSource

__all__ = [
    "QueuedRandomSource",
    "RandomSource",
    "SystemRandomSource",
]
