"""Raw rows returned by the individual activity sources.

Each row carries its source id (used for recency ordering), a unix
timestamp, the actor ids involved and the raw text as stored.
"""

from __future__ import annotations

from dataclasses import dataclass

NS_MEDIA = -2
NS_SPECIAL = -1
NS_MAIN = 0
NS_USER = 2

CHANGE_SOURCE_EDIT = "mw.edit"
CHANGE_SOURCE_NEW = "mw.new"
CHANGE_SOURCE_LOG = "mw.log"

BOARD_MESSAGE_PUBLIC = 0
BOARD_MESSAGE_PRIVATE = 1

SYSTEM_MESSAGE_LEVELUP = 2


@dataclass(frozen=True)
class EditRow:
    id: int
    timestamp: int
    actor_id: int
    namespace: int
    title: str
    comment: str = ""
    minor: bool = False
    source: str = CHANGE_SOURCE_EDIT
    log_action: str | None = None


@dataclass(frozen=True)
class CommentRow:
    id: int
    timestamp: int
    actor_id: int
    namespace: int
    title: str
    text: str = ""


@dataclass(frozen=True)
class RelationshipRow:
    id: int
    timestamp: int
    actor_id: int
    related_actor_id: int
    kind: int


@dataclass(frozen=True)
class BoardMessageRow:
    id: int
    timestamp: int
    sender_id: int
    recipient_id: int
    message: str = ""
    message_type: int = BOARD_MESSAGE_PUBLIC


@dataclass(frozen=True)
class SystemMessageRow:
    id: int
    timestamp: int
    actor_id: int
    message_type: int
    message: str = ""


__all__ = [
    "BOARD_MESSAGE_PRIVATE",
    "BOARD_MESSAGE_PUBLIC",
    "BoardMessageRow",
    "CHANGE_SOURCE_EDIT",
    "CHANGE_SOURCE_LOG",
    "CHANGE_SOURCE_NEW",
    "CommentRow",
    "EditRow",
    "NS_MAIN",
    "NS_MEDIA",
    "NS_SPECIAL",
    "NS_USER",
    "RelationshipRow",
    "SYSTEM_MESSAGE_LEVELUP",
    "SystemMessageRow",
]
