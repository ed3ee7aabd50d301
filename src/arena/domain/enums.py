"""Enumerations for the Arena domain."""

from __future__ import annotations

from enum import StrEnum


class Job(StrEnum):
    """Character classes available at creation time."""

    WARRIOR = "Warrior"
    THIEF = "Thief"
    MAGE = "Mage"


class CharacterStatus(StrEnum):
    """Whether a character can still enter battles."""

    ALIVE = "Alive"
    DEAD = "Dead"
