"""Domain entity representing an actor (a user account)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Actor:
    """User account referenced by an opaque actor id."""

    id: int
    name: str


__all__ = ["Actor"]
