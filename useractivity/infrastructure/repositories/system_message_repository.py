"""Read access to user system messages."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from useractivity.domain.entities import ActorScope, SystemMessageRow
from useractivity.infrastructure.database import table_exists
from useractivity.infrastructure.models import UserSystemMessageModel
from useractivity.utils import to_unix_timestamp

from .scope import apply_actor_scope


class SystemMessageRepository:
    """Return recent system messages, newest ``um_id`` first."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_recent(self, scope: ActorScope, *, limit: int) -> Sequence[SystemMessageRow]:
        if scope.is_empty or not table_exists(self.session, UserSystemMessageModel.__tablename__):
            return []
        query = apply_actor_scope(
            self.session.query(UserSystemMessageModel), UserSystemMessageModel.actor_id, scope
        )
        query = query.order_by(UserSystemMessageModel.id.desc()).limit(limit)
        return [
            SystemMessageRow(
                id=model.id,
                timestamp=to_unix_timestamp(model.created_at),
                actor_id=model.actor_id,
                message_type=model.message_type,
                message=model.message or "",
            )
            for model in query.all()
        ]


__all__ = ["SystemMessageRepository"]
