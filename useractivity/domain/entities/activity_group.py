"""Domain entities used to group activity items by their target."""

from __future__ import annotations

from dataclasses import dataclass, field

from .activity_item import ActivityItem, ActivityType


@dataclass(frozen=True)
class GroupKey:
    """Identifies the page or recipient a set of items is about."""

    type: ActivityType
    target: str


@dataclass
class TargetGroup:
    """Items sharing a :class:`GroupKey`, bucketed by actor name.

    ``actions_by_actor`` keeps insertion order for both actors and their
    items, which follows the order items were fetched in.
    """

    last_timestamp: int = 0
    actions_by_actor: dict[str, list[ActivityItem]] = field(default_factory=dict)

    def add(self, item: ActivityItem) -> None:
        self.actions_by_actor.setdefault(item.actor_name, []).append(item)
        self.last_timestamp = max(self.last_timestamp, item.timestamp)

    @property
    def actor_count(self) -> int:
        return len(self.actions_by_actor)

    @property
    def sole_actor(self) -> str | None:
        """Return the only actor of the group, or ``None`` when there are several."""

        if len(self.actions_by_actor) != 1:
            return None
        return next(iter(self.actions_by_actor))


class ActivityGroups:
    """Grouped map of ``GroupKey`` to :class:`TargetGroup`."""

    def __init__(self) -> None:
        self._groups: dict[GroupKey, TargetGroup] = {}

    def add(self, item: ActivityItem) -> None:
        key = GroupKey(item.type, item.target)
        group = self._groups.get(key)
        if group is None:
            group = self._groups[key] = TargetGroup()
        group.add(item)

    def merge(self, other: ActivityGroups) -> None:
        """Fold ``other`` into this map, keeping first-seen key order."""

        for key, group in other._groups.items():
            current = self._groups.get(key)
            if current is None:
                current = self._groups[key] = TargetGroup()
            for items in group.actions_by_actor.values():
                for item in items:
                    current.add(item)

    def for_type(self, activity_type: ActivityType) -> list[tuple[GroupKey, TargetGroup]]:
        return [
            (key, group)
            for key, group in self._groups.items()
            if key.type is activity_type
        ]

    def __len__(self) -> int:
        return len(self._groups)


__all__ = ["ActivityGroups", "GroupKey", "TargetGroup"]
