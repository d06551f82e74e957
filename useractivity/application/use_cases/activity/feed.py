"""Merging of per-source item lists into one chronological feed."""

from __future__ import annotations

from collections.abc import Iterable
from operator import attrgetter
from typing import TypeVar

from useractivity.domain.entities import ActivityItem

T = TypeVar("T")


def sort_by_timestamp(entries: Iterable[T]) -> list[T]:
    """Return ``entries`` newest first; equal timestamps keep their order."""

    return sorted(entries, key=attrgetter("timestamp"), reverse=True)


def assemble_feed(item_lists: Iterable[Iterable[ActivityItem]]) -> list[ActivityItem]:
    """Concatenate the item lists of several sources and sort the result."""

    merged: list[ActivityItem] = []
    for items in item_lists:
        merged.extend(items)
    return sort_by_timestamp(merged)


__all__ = ["assemble_feed", "sort_by_timestamp"]
