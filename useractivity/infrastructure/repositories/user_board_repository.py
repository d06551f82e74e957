"""Read access to public user board messages."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from useractivity.domain.entities import BOARD_MESSAGE_PUBLIC, ActorScope, BoardMessageRow
from useractivity.infrastructure.database import table_exists
from useractivity.infrastructure.models import UserBoardModel
from useractivity.utils import to_unix_timestamp

from .scope import apply_actor_scope


class UserBoardRepository:
    """Return recently sent public board messages, newest ``ub_id`` first."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_recent(self, scope: ActorScope, *, limit: int) -> Sequence[BoardMessageRow]:
        if scope.is_empty or not table_exists(self.session, UserBoardModel.__tablename__):
            return []
        # Private messages never show up in activity feeds.
        query = self.session.query(UserBoardModel).filter(
            UserBoardModel.message_type == BOARD_MESSAGE_PUBLIC
        )
        query = apply_actor_scope(query, UserBoardModel.sender_id, scope)
        query = query.order_by(UserBoardModel.id.desc()).limit(limit)
        return [
            BoardMessageRow(
                id=model.id,
                timestamp=to_unix_timestamp(model.created_at),
                sender_id=model.sender_id,
                recipient_id=model.recipient_id,
                message=model.message or "",
                message_type=model.message_type,
            )
            for model in query.all()
        ]


__all__ = ["UserBoardRepository"]
