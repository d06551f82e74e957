"""Read access to the recent changes log."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from useractivity.domain.entities import ActorScope, EditRow
from useractivity.infrastructure.database import table_exists
from useractivity.infrastructure.models import RecentChangeModel
from useractivity.utils import to_unix_timestamp

from .scope import apply_actor_scope


class RecentChangeRepository:
    """Return the most recent changes, newest ``rc_id`` first."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_recent(self, scope: ActorScope, *, limit: int) -> Sequence[EditRow]:
        if scope.is_empty or not table_exists(self.session, RecentChangeModel.__tablename__):
            return []
        query = apply_actor_scope(
            self.session.query(RecentChangeModel), RecentChangeModel.actor_id, scope
        )
        query = query.order_by(RecentChangeModel.id.desc()).limit(limit)
        return [self._to_row(model) for model in query.all()]

    @staticmethod
    def _to_row(model: RecentChangeModel) -> EditRow:
        return EditRow(
            id=model.id,
            timestamp=to_unix_timestamp(model.timestamp),
            actor_id=model.actor_id,
            namespace=model.namespace,
            title=model.title,
            comment=model.comment or "",
            minor=bool(model.minor),
            source=model.source,
            log_action=model.log_action,
        )


__all__ = ["RecentChangeRepository"]
