"""Read access to friend and foe relationships."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from useractivity.domain.entities import ActorScope, RelationshipRow
from useractivity.infrastructure.database import table_exists
from useractivity.infrastructure.models import UserRelationshipModel
from useractivity.utils import to_unix_timestamp

from .scope import apply_actor_scope


class RelationshipRepository:
    """Relationship changes and relationship circle lookups."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_recent(self, scope: ActorScope, *, limit: int) -> Sequence[RelationshipRow]:
        if scope.is_empty or not table_exists(self.session, UserRelationshipModel.__tablename__):
            return []
        query = apply_actor_scope(
            self.session.query(UserRelationshipModel), UserRelationshipModel.actor_id, scope
        )
        query = query.order_by(UserRelationshipModel.id.desc()).limit(limit)
        return [
            RelationshipRow(
                id=model.id,
                timestamp=to_unix_timestamp(model.created_at),
                actor_id=model.actor_id,
                related_actor_id=model.related_actor_id,
                kind=model.kind,
            )
            for model in query.all()
        ]

    def related_actor_ids(self, actor_id: int, kind: int) -> set[int]:
        """Return ids of the actors ``actor_id`` has a ``kind`` relationship with."""

        if not table_exists(self.session, UserRelationshipModel.__tablename__):
            return set()
        query = (
            self.session.query(UserRelationshipModel.related_actor_id)
            .filter(UserRelationshipModel.actor_id == actor_id)
            .filter(UserRelationshipModel.kind == kind)
        )
        return {related_id for (related_id,) in query.all()}


__all__ = ["RelationshipRepository"]
