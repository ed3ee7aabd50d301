"""Domain model for Arena.

This package hosts the pure rules layer:

* Dataclasses describing characters (see :mod:`models`).
* Job base stats and modifier formulas (see :mod:`jobs`).
* The duel resolution engine (see :mod:`battle`).
* Listing pagination (see :mod:`pagination`).

Nothing here touches storage; repositories and services wrap it.
"""

from . import battle, enums, jobs, models, pagination

__all__ = [
    "battle",
    "enums",
    "jobs",
    "models",
    "pagination",
]
