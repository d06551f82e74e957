"""Conversion of raw source rows into :class:`ActivityItem` objects."""

from __future__ import annotations

from useractivity.domain.entities import (
    CHANGE_SOURCE_LOG,
    CHANGE_SOURCE_NEW,
    NS_MEDIA,
    NS_SPECIAL,
    RELATIONSHIP_FRIEND,
    SYSTEM_MESSAGE_LEVELUP,
    ActivityItem,
    ActivityType,
    BoardMessageRow,
    CommentRow,
    EditRow,
    RelationshipRow,
    SystemMessageRow,
    prefixed_title,
)
from useractivity.infrastructure.text import TextShaper

COMMENT_PREVIEW_LENGTH = 75


def fix_item_comment(text: str, shaper: TextShaper) -> str:
    """Truncate ``text`` to the preview length, then escape it."""

    if not text:
        return ""
    return shaper.escape(shaper.truncate_visual(text, COMMENT_PREVIEW_LENGTH))


def is_valid_edit(row: EditRow) -> bool:
    # Special pages can't be edited, and log entries (blocks, moves...) are
    # not edits of the page they mention.
    if row.namespace in (NS_SPECIAL, NS_MEDIA):
        return False
    return row.log_action is None and row.source != CHANGE_SOURCE_LOG


def relationship_type(kind: int) -> ActivityType:
    return ActivityType.FRIEND if kind == RELATIONSHIP_FRIEND else ActivityType.FOE


def is_levelup(row: SystemMessageRow) -> bool:
    return row.message_type == SYSTEM_MESSAGE_LEVELUP


def normalize_edit(row: EditRow, actor_name: str, shaper: TextShaper) -> ActivityItem:
    return ActivityItem(
        id=row.id,
        type=ActivityType.EDIT,
        timestamp=row.timestamp,
        actor_name=actor_name,
        target_title=prefixed_title(row.namespace, row.title),
        namespace=row.namespace,
        summary_text=fix_item_comment(row.comment, shaper),
        is_minor_edit=bool(row.minor),
        is_new_page=row.source == CHANGE_SOURCE_NEW,
    )


def normalize_comment(row: CommentRow, actor_name: str, shaper: TextShaper) -> ActivityItem:
    return ActivityItem(
        id=row.id,
        type=ActivityType.COMMENT,
        timestamp=row.timestamp,
        actor_name=actor_name,
        target_title=prefixed_title(row.namespace, row.title),
        namespace=row.namespace,
        summary_text=fix_item_comment(row.text, shaper),
    )


def normalize_relationship(
    row: RelationshipRow, actor_name: str, related_name: str
) -> ActivityItem:
    return ActivityItem(
        id=row.id,
        type=relationship_type(row.kind),
        timestamp=row.timestamp,
        actor_name=actor_name,
        recipient_name=related_name,
    )


def normalize_board_message(
    row: BoardMessageRow, sender_name: str, recipient_name: str, shaper: TextShaper
) -> ActivityItem:
    return ActivityItem(
        id=row.id,
        type=ActivityType.USER_MESSAGE,
        timestamp=row.timestamp,
        actor_name=sender_name,
        recipient_name=recipient_name,
        summary_text=fix_item_comment(row.message, shaper),
    )


def normalize_system_message(
    row: SystemMessageRow, actor_name: str, shaper: TextShaper
) -> ActivityItem:
    """Level-up notices hold trusted markup: they are truncated, never escaped."""

    if is_levelup(row):
        summary = shaper.truncate_visual(row.message, COMMENT_PREVIEW_LENGTH)
    else:
        summary = fix_item_comment(row.message, shaper)
    return ActivityItem(
        id=row.id,
        type=ActivityType.SYSTEM_MESSAGE,
        timestamp=row.timestamp,
        actor_name=actor_name,
        summary_text=summary,
    )


__all__ = [
    "COMMENT_PREVIEW_LENGTH",
    "fix_item_comment",
    "is_levelup",
    "is_valid_edit",
    "normalize_board_message",
    "normalize_comment",
    "normalize_edit",
    "normalize_relationship",
    "normalize_system_message",
    "relationship_type",
]
