"""Domain entities exposed by the application."""

from .activity_filter import (
    RELATIONSHIP_FOE,
    RELATIONSHIP_FRIEND,
    ActivityFilter,
    ActorScope,
    FilterMode,
)
from .activity_group import ActivityGroups, GroupKey, TargetGroup
from .activity_item import ActivityItem, ActivityType
from .actor import Actor
from .source_rows import (
    BOARD_MESSAGE_PRIVATE,
    BOARD_MESSAGE_PUBLIC,
    CHANGE_SOURCE_EDIT,
    CHANGE_SOURCE_LOG,
    CHANGE_SOURCE_NEW,
    NS_MAIN,
    NS_MEDIA,
    NS_SPECIAL,
    NS_USER,
    SYSTEM_MESSAGE_LEVELUP,
    BoardMessageRow,
    CommentRow,
    EditRow,
    RelationshipRow,
    SystemMessageRow,
)
from .summary_line import SummaryLine
from .title import display_title, prefixed_title

__all__ = [
    "ActivityFilter",
    "ActivityGroups",
    "ActivityItem",
    "ActivityType",
    "Actor",
    "ActorScope",
    "BOARD_MESSAGE_PRIVATE",
    "BOARD_MESSAGE_PUBLIC",
    "BoardMessageRow",
    "CHANGE_SOURCE_EDIT",
    "CHANGE_SOURCE_LOG",
    "CHANGE_SOURCE_NEW",
    "CommentRow",
    "EditRow",
    "FilterMode",
    "GroupKey",
    "NS_MAIN",
    "NS_MEDIA",
    "NS_SPECIAL",
    "NS_USER",
    "RELATIONSHIP_FOE",
    "RELATIONSHIP_FRIEND",
    "RelationshipRow",
    "SYSTEM_MESSAGE_LEVELUP",
    "SummaryLine",
    "SystemMessageRow",
    "TargetGroup",
    "display_title",
    "prefixed_title",
]
