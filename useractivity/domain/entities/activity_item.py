"""Domain entity describing a single normalized activity item."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ActivityType(str, Enum):
    """Kinds of activity that can appear in a feed."""

    EDIT = "edit"
    COMMENT = "comment"
    FRIEND = "friend"
    FOE = "foe"
    USER_MESSAGE = "user_message"
    SYSTEM_MESSAGE = "system_message"

    @property
    def is_page_scoped(self) -> bool:
        """Return ``True`` when items of this type refer to a page."""

        return self in (ActivityType.EDIT, ActivityType.COMMENT)


@dataclass(frozen=True)
class ActivityItem:
    """One event taken from any activity source.

    ``target_title`` and ``namespace`` are only meaningful for page scoped
    types, ``recipient_name`` only for relationships and board messages.
    Unused fields keep their zero value.
    """

    id: int
    type: ActivityType
    timestamp: int
    actor_name: str
    target_title: str = ""
    namespace: int = 0
    recipient_name: str = ""
    summary_text: str = ""
    is_minor_edit: bool = False
    is_new_page: bool = False

    @property
    def target(self) -> str:
        """Return the identifier items are grouped by."""

        if self.type.is_page_scoped:
            return self.target_title
        return self.recipient_name


__all__ = ["ActivityItem", "ActivityType"]
