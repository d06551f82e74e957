"""Shared query helpers for the activity source repositories."""

from __future__ import annotations

from sqlalchemy.orm import Query

from useractivity.domain.entities import ActorScope


def apply_actor_scope(query: Query, column, scope: ActorScope) -> Query:
    """Restrict ``query`` to the actors allowed by ``scope``."""

    if scope.actor_ids is None:
        return query
    return query.filter(column.in_(sorted(scope.actor_ids)))


__all__ = ["apply_actor_scope"]
