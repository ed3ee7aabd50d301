"""Job base stats and the formulas deriving battle modifiers.

Modifiers are weighted sums of the base attributes, rounded half-up
(``floor(x + 0.5)``) rather than with Python's banker's rounding, so that a
Mage's speed of ``0.4 * 6 + 0.1 * 5 = 2.9`` becomes 3 and a value sitting
exactly on ``.5`` always rounds upward.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .enums import Job

# (attribute, weight) pairs; summed in the listed order.
Weights = tuple[tuple[str, float], ...]


@dataclass(frozen=True, slots=True)
class JobStats:
    """Base attributes granted to a freshly created character."""

    health_points: int
    strength: int
    dexterity: int
    intelligence: int


@dataclass(frozen=True, slots=True)
class JobDefinition:
    """A job's base stats together with its modifier weights."""

    job: Job
    stats: JobStats
    attack_weights: Weights
    speed_weights: Weights

    @property
    def attack_formula(self) -> str:
        return describe_weights(self.attack_weights)

    @property
    def speed_formula(self) -> str:
        return describe_weights(self.speed_weights)


JOB_DEFINITIONS: dict[Job, JobDefinition] = {
    Job.WARRIOR: JobDefinition(
        job=Job.WARRIOR,
        stats=JobStats(health_points=20, strength=10, dexterity=5, intelligence=5),
        attack_weights=(("strength", 0.8), ("dexterity", 0.2)),
        speed_weights=(("dexterity", 0.6), ("intelligence", 0.2)),
    ),
    Job.THIEF: JobDefinition(
        job=Job.THIEF,
        stats=JobStats(health_points=15, strength=4, dexterity=10, intelligence=4),
        attack_weights=(("strength", 0.25), ("dexterity", 1.0), ("intelligence", 0.25)),
        speed_weights=(("dexterity", 0.8),),
    ),
    Job.MAGE: JobDefinition(
        job=Job.MAGE,
        stats=JobStats(health_points=12, strength=5, dexterity=6, intelligence=10),
        attack_weights=(("strength", 0.2), ("dexterity", 0.2), ("intelligence", 1.2)),
        speed_weights=(("dexterity", 0.4), ("strength", 0.1)),
    ),
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves always rounding up."""

    return math.floor(value + 0.5)


def describe_weights(weights: Weights) -> str:
    """Render weights as e.g. ``"80% of Strength + 20% of Dexterity"``."""

    return " + ".join(f"{round(weight * 100)}% of {attr.title()}" for attr, weight in weights)


def _weighted(weights: Weights, strength: int, dexterity: int, intelligence: int) -> int:
    attributes = {"strength": strength, "dexterity": dexterity, "intelligence": intelligence}
    total = 0.0
    for attr, weight in weights:
        total += attributes[attr] * weight
    return round_half_up(total)


def calculate_attack_modifier(job: Job, strength: int, dexterity: int, intelligence: int) -> int:
    """Upper bound for the job's damage rolls."""

    return _weighted(JOB_DEFINITIONS[job].attack_weights, strength, dexterity, intelligence)


def calculate_speed_modifier(job: Job, strength: int, dexterity: int, intelligence: int) -> int:
    """Upper bound for the job's initiative rolls."""

    return _weighted(JOB_DEFINITIONS[job].speed_weights, strength, dexterity, intelligence)


def get_job(job: Job) -> JobDefinition:
    return JOB_DEFINITIONS[job]


def list_jobs() -> list[JobDefinition]:
    """Return every job in declaration order."""

    return list(JOB_DEFINITIONS.values())
