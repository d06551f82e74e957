"""Read access to page comments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from useractivity.domain.entities import ActorScope, CommentRow
from useractivity.infrastructure.database import table_exists
from useractivity.infrastructure.models import CommentModel, PageModel
from useractivity.utils import to_unix_timestamp

from .scope import apply_actor_scope


class CommentRepository:
    """Return the most recent page comments, newest ``CommentID`` first."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_recent(self, scope: ActorScope, *, limit: int) -> Sequence[CommentRow]:
        if scope.is_empty or not table_exists(self.session, CommentModel.__tablename__):
            return []
        query = (
            self.session.query(
                CommentModel.id,
                CommentModel.created_at,
                CommentModel.actor_id,
                CommentModel.text,
                PageModel.namespace,
                PageModel.title,
            )
            .join(PageModel, CommentModel.page_id == PageModel.id)
        )
        query = apply_actor_scope(query, CommentModel.actor_id, scope)
        rows = query.order_by(CommentModel.id.desc()).limit(limit).all()
        return [
            CommentRow(
                id=row.id,
                timestamp=to_unix_timestamp(row.created_at),
                actor_id=row.actor_id,
                namespace=row.namespace,
                title=row.title,
                text=row.text or "",
            )
            for row in rows
        ]


__all__ = ["CommentRepository"]
