"""Interfaces the activity use cases need from the activity sources."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from sqlalchemy.orm import Session

from useractivity.domain.entities import (
    ActorScope,
    BoardMessageRow,
    CommentRow,
    EditRow,
    RelationshipRow,
    SystemMessageRow,
)


class ActorResolver(Protocol):
    def get_name(self, actor_id: int) -> str | None: ...


class EditSource(Protocol):
    def list_recent(self, scope: ActorScope, *, limit: int) -> Sequence[EditRow]: ...


class CommentSource(Protocol):
    def list_recent(self, scope: ActorScope, *, limit: int) -> Sequence[CommentRow]: ...


class RelationshipSource(Protocol):
    def list_recent(self, scope: ActorScope, *, limit: int) -> Sequence[RelationshipRow]: ...

    def related_actor_ids(self, actor_id: int, kind: int) -> set[int]: ...


class MessageSource(Protocol):
    def list_recent(self, scope: ActorScope, *, limit: int) -> Sequence[BoardMessageRow]: ...


class SystemMessageSource(Protocol):
    def list_recent(self, scope: ActorScope, *, limit: int) -> Sequence[SystemMessageRow]: ...


@dataclass
class ActivitySources:
    """Bundle of every source an activity run reads from."""

    actors: ActorResolver
    edits: EditSource
    comments: CommentSource
    relationships: RelationshipSource
    messages: MessageSource
    system_messages: SystemMessageSource

    @classmethod
    def from_session(cls, session: Session) -> ActivitySources:
        """Return database backed sources sharing ``session``."""

        from useractivity.infrastructure.repositories import (
            ActorRepository,
            CommentRepository,
            RecentChangeRepository,
            RelationshipRepository,
            SystemMessageRepository,
            UserBoardRepository,
        )

        return cls(
            actors=ActorRepository(session),
            edits=RecentChangeRepository(session),
            comments=CommentRepository(session),
            relationships=RelationshipRepository(session),
            messages=UserBoardRepository(session),
            system_messages=SystemMessageRepository(session),
        )


__all__ = [
    "ActivitySources",
    "ActorResolver",
    "CommentSource",
    "EditSource",
    "MessageSource",
    "RelationshipSource",
    "SystemMessageSource",
]
