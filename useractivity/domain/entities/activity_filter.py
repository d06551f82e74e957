"""Viewer selected filter settings for an activity feed."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

RELATIONSHIP_FRIEND = 1
RELATIONSHIP_FOE = 2

logger = logging.getLogger(__name__)


class FilterMode(str, Enum):
    """Whose activity the feed should include."""

    SELF = "self"
    CIRCLE = "circle"
    ALL = "all"


_FILTER_ALIASES: dict[str, tuple[FilterMode, int | None]] = {
    "user": (FilterMode.SELF, None),
    "self": (FilterMode.SELF, None),
    "friend": (FilterMode.CIRCLE, RELATIONSHIP_FRIEND),
    "friends": (FilterMode.CIRCLE, RELATIONSHIP_FRIEND),
    "foe": (FilterMode.CIRCLE, RELATIONSHIP_FOE),
    "foes": (FilterMode.CIRCLE, RELATIONSHIP_FOE),
    "all": (FilterMode.ALL, None),
}


@dataclass
class ActivityFilter:
    """Filter mode, per source item cap and category toggles.

    ``item_max`` bounds every source separately, the merged feed may hold up
    to five times as many items.
    """

    mode: FilterMode = FilterMode.ALL
    item_max: int = 25
    relationship_kind: int | None = None
    show_edits: bool = True
    show_comments: bool = True
    show_relationships: bool = True
    show_system_messages: bool = True
    show_messages_sent: bool = True

    @classmethod
    def from_name(cls, name: str | None, item_max: int, **toggles: bool) -> ActivityFilter:
        """Build a filter from a name such as ``user``, ``friends`` or ``all``.

        Unrecognized names fall back to the unrestricted ``all`` mode.
        """

        key = (name or "").strip().lower()
        mode, kind = _FILTER_ALIASES.get(key, (FilterMode.ALL, None))
        if key not in _FILTER_ALIASES:
            logger.debug("Unknown activity filter %r, showing everyone", name)
        return cls(mode=mode, item_max=item_max, relationship_kind=kind, **toggles)


@dataclass(frozen=True)
class ActorScope:
    """Resolved restriction on which actors a source may return.

    ``actor_ids`` is ``None`` when any actor is allowed. An empty set allows
    nobody.
    """

    actor_ids: frozenset[int] | None = None

    @classmethod
    def unrestricted(cls) -> ActorScope:
        return cls(None)

    @classmethod
    def only(cls, actor_ids) -> ActorScope:
        return cls(frozenset(actor_ids))

    @property
    def is_restricted(self) -> bool:
        return self.actor_ids is not None

    @property
    def is_empty(self) -> bool:
        return self.actor_ids is not None and not self.actor_ids

    def allows(self, actor_id: int) -> bool:
        return self.actor_ids is None or actor_id in self.actor_ids


__all__ = [
    "ActivityFilter",
    "ActorScope",
    "FilterMode",
    "RELATIONSHIP_FOE",
    "RELATIONSHIP_FRIEND",
]
