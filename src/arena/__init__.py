"""Arena: turn-based character duels behind a small CRUD API."""

__version__ = "0.1.0"
