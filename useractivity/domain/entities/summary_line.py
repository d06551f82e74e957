"""Domain entity for a line of the grouped activity feed."""

from __future__ import annotations

from dataclasses import dataclass

from .activity_item import ActivityType


@dataclass(frozen=True)
class SummaryLine:
    """Narrative describing one group of activity (or one system message)."""

    type: ActivityType
    timestamp: int
    text: str


__all__ = ["SummaryLine"]
